"""
Controller response - CC#1 and CC#7 mapped onto synthesis parameters.

The modulation wheel means different things to different instruments:
vibrato on strings, vibrato plus brightness on brass, LFO depth on synth
leads, nothing at all on percussion. MODULATION_POLICIES is the fixed
table of those responses. Its coefficients are part of the compliance
contract and must not be tuned.

Volume follows a logarithmic curve so that CC#7 = 64 sits about 6 dB
below full scale.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from chuk_mcp_gm1.constants import MAX_CONTROLLER_VALUE, PERCUSSION_CHANNEL, VOLUME_FLOOR_DB
from chuk_mcp_gm1.controllers.channel_state import ChannelStateProvider, is_valid_channel
from chuk_mcp_gm1.core import InstrumentCategory, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModulationPolicy:
    """
    How far the normalized modulation wheel drives each parameter.

    None means the parameter is left untouched.
    """

    vibrato: float | None = None
    brightness: float | None = None
    lfo: float | None = None

    @property
    def is_inert(self) -> bool:
        """True when the wheel has no effect at all."""
        return self.vibrato is None and self.brightness is None and self.lfo is None


NO_EFFECT = ModulationPolicy()
DEFAULT_MODULATION_POLICY = ModulationPolicy(vibrato=0.5)

MODULATION_POLICIES: dict[InstrumentCategory, ModulationPolicy] = {
    InstrumentCategory.STRINGS: ModulationPolicy(vibrato=1.0),
    InstrumentCategory.ENSEMBLE: ModulationPolicy(vibrato=1.0),
    InstrumentCategory.BRASS: ModulationPolicy(vibrato=1.0, brightness=0.5),
    InstrumentCategory.REED: ModulationPolicy(vibrato=1.0, brightness=0.5),
    InstrumentCategory.SYNTH_LEAD: ModulationPolicy(lfo=1.0),
    InstrumentCategory.SYNTH_PAD: ModulationPolicy(vibrato=0.3, lfo=0.5),
    InstrumentCategory.PERCUSSION: NO_EFFECT,
    InstrumentCategory.PERCUSSIVE: NO_EFFECT,
    InstrumentCategory.PIANO: ModulationPolicy(vibrato=0.2),
    InstrumentCategory.CHROMATIC_PERCUSSION: ModulationPolicy(vibrato=0.2),
    InstrumentCategory.ORGAN: ModulationPolicy(vibrato=0.7),  # Leslie-style
    InstrumentCategory.GUITAR: ModulationPolicy(vibrato=0.4),
    InstrumentCategory.BASS: ModulationPolicy(vibrato=0.4),
    InstrumentCategory.PIPE: ModulationPolicy(vibrato=0.6),  # Breath vibrato
    InstrumentCategory.ETHNIC: ModulationPolicy(vibrato=0.5),
    InstrumentCategory.SYNTH_EFFECTS: ModulationPolicy(lfo=0.8),
    InstrumentCategory.SOUND_EFFECTS: ModulationPolicy(lfo=0.8),
}


def modulation_policy_for(category: InstrumentCategory) -> ModulationPolicy:
    """Get the modulation policy for a category, falling back to subtle vibrato."""
    return MODULATION_POLICIES.get(category, DEFAULT_MODULATION_POLICY)


def channel_category(channel: int, program: int) -> InstrumentCategory:
    """Category sounding on a channel. Channel 10 is always percussion."""
    if channel == PERCUSSION_CHANNEL:
        return InstrumentCategory.PERCUSSION
    return classify(program)


def _clamp_controller(value: int) -> int:
    return max(0, min(MAX_CONTROLLER_VALUE, value))


def midi_value_to_db(value: int) -> float:
    """
    Convert a 7-bit controller value to decibels.

    - 0: -60 dB (near silence, never -inf)
    - 64: about -6 dB
    - 127: 0 dB

    Args:
        value: Controller value (0-127)

    Returns:
        Volume in decibels
    """
    value = _clamp_controller(value)
    if value == 0:
        return VOLUME_FLOOR_DB
    return 20.0 * math.log10(value / MAX_CONTROLLER_VALUE)


class ControllerResponseMapper:
    """
    Applies modulation wheel and volume controller changes to a channel.

    Channels outside 0-15 are ignored without error - malformed input is
    dropped, not reported.
    """

    def __init__(self, provider: ChannelStateProvider):
        """
        Initialize the mapper.

        Args:
            provider: Source of channel programs and sink for parameters
        """
        self.provider = provider

    def handle_modulation_wheel(self, channel: int, value: int) -> None:
        """
        Handle CC#1 (modulation wheel).

        Args:
            channel: MIDI channel (0-15)
            value: Modulation wheel value (0-127)
        """
        if not is_valid_channel(channel):
            logger.debug(f"Ignoring CC#1 on invalid channel {channel}")
            return

        normalized = _clamp_controller(value) / MAX_CONTROLLER_VALUE
        program = self.provider.get_channel_program(channel)
        category = channel_category(channel, program)
        policy = modulation_policy_for(category)

        if policy.vibrato is not None:
            self.provider.set_vibrato_depth(channel, normalized * policy.vibrato)
        if policy.brightness is not None:
            self.provider.set_brightness(channel, normalized * policy.brightness)
        if policy.lfo is not None:
            self.provider.set_lfo_depth(channel, normalized * policy.lfo)

    def handle_volume_controller(self, channel: int, value: int) -> None:
        """
        Handle CC#7 (channel volume).

        Args:
            channel: MIDI channel (0-15)
            value: Volume controller value (0-127)
        """
        if not is_valid_channel(channel):
            logger.debug(f"Ignoring CC#7 on invalid channel {channel}")
            return

        self.provider.set_channel_volume(channel, midi_value_to_db(value))
