"""
Controller response - CC#1/CC#7 handling.

This module provides:
- ChannelStateProvider: Protocol for the synth-side channel state
- InMemoryChannelState: Reference provider
- ControllerResponseMapper: Modulation wheel and volume handling
- MODULATION_POLICIES: Category -> modulation response table
- channel_category: Category on a channel (channel 10 is percussion)
- midi_value_to_db: Logarithmic volume curve
"""

from chuk_mcp_gm1.controllers.channel_state import (
    ChannelState,
    ChannelStateProvider,
    InMemoryChannelState,
    db_to_linear,
    is_valid_channel,
)
from chuk_mcp_gm1.controllers.response import (
    DEFAULT_MODULATION_POLICY,
    MODULATION_POLICIES,
    ControllerResponseMapper,
    ModulationPolicy,
    channel_category,
    midi_value_to_db,
    modulation_policy_for,
)

__all__ = [
    "DEFAULT_MODULATION_POLICY",
    "MODULATION_POLICIES",
    "ChannelState",
    "ChannelStateProvider",
    "ControllerResponseMapper",
    "InMemoryChannelState",
    "ModulationPolicy",
    "channel_category",
    "db_to_linear",
    "is_valid_channel",
    "midi_value_to_db",
    "modulation_policy_for",
]
