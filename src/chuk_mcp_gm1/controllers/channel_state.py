"""
Channel state - the seam between controller handling and the synth.

The controller mapper never owns channel state. It reads the current
program and writes synthesis parameters through a ChannelStateProvider,
so a real backend, a test fake, or the in-memory reference provider
below can sit behind it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from chuk_mcp_gm1.constants import CHANNEL_COUNT, DEFAULT_PROGRAM

logger = logging.getLogger(__name__)


@runtime_checkable
class ChannelStateProvider(Protocol):
    """Per-channel program lookup and synthesis parameter sink."""

    def get_channel_program(self, channel: int) -> int:
        """Current GM1 program (1-128) on a channel, 1 if unknown."""
        ...

    def set_vibrato_depth(self, channel: int, depth: float) -> None: ...

    def set_brightness(self, channel: int, value: float) -> None: ...

    def set_lfo_depth(self, channel: int, value: float) -> None: ...

    def set_channel_volume(self, channel: int, volume_db: float) -> None: ...


def db_to_linear(volume_db: float) -> float:
    """Convert decibels to linear gain (0 dB = 1.0, -60 dB = 0.001)."""
    return float(10.0 ** (volume_db / 20.0))


def is_valid_channel(channel: int) -> bool:
    """True for MIDI channels 0-15."""
    return 0 <= channel < CHANNEL_COUNT


@dataclass
class ChannelState:
    """Synthesis state of a single channel."""

    program: int = DEFAULT_PROGRAM
    volume_db: float = 0.0
    volume: float = 1.0  # Linear gain
    vibrato_depth: float = 0.0
    brightness: float = 0.0
    lfo_depth: float = 0.0

    def to_dict(self) -> dict[str, float | int]:
        return {
            "program": self.program,
            "volume_db": self.volume_db,
            "volume": self.volume,
            "vibrato_depth": self.vibrato_depth,
            "brightness": self.brightness,
            "lfo_depth": self.lfo_depth,
        }


class InMemoryChannelState:
    """
    Reference ChannelStateProvider backed by 16 ChannelState records.

    Writes to channels outside 0-15 are ignored; reads fall back to
    program 1. Assumes one writer per channel, there is no locking.
    """

    def __init__(self) -> None:
        self._channels: list[ChannelState] = [ChannelState() for _ in range(CHANNEL_COUNT)]

    def channel(self, channel: int) -> ChannelState | None:
        """Get the state record for a channel, None if out of range."""
        if not is_valid_channel(channel):
            return None
        return self._channels[channel]

    def set_channel_program(self, channel: int, program: int) -> None:
        """Select the current program on a channel."""
        state = self.channel(channel)
        if state is None:
            logger.debug(f"Ignoring program {program} for invalid channel {channel}")
            return
        state.program = program

    def get_channel_program(self, channel: int) -> int:
        state = self.channel(channel)
        if state is None:
            return DEFAULT_PROGRAM
        return state.program

    def set_vibrato_depth(self, channel: int, depth: float) -> None:
        state = self.channel(channel)
        if state is not None:
            state.vibrato_depth = depth

    def set_brightness(self, channel: int, value: float) -> None:
        state = self.channel(channel)
        if state is not None:
            state.brightness = value

    def set_lfo_depth(self, channel: int, value: float) -> None:
        state = self.channel(channel)
        if state is not None:
            state.lfo_depth = value

    def set_channel_volume(self, channel: int, volume_db: float) -> None:
        state = self.channel(channel)
        if state is not None:
            state.volume_db = volume_db
            state.volume = db_to_linear(volume_db)

    def reset(self) -> None:
        """Return every channel to its power-on state."""
        self._channels = [ChannelState() for _ in range(CHANNEL_COUNT)]
