"""
Controller tools - MCP tools for CC#1/CC#7 response.

Tools drive a ControllerResponseMapper over an in-memory channel state,
so a client can see what a controller change does to a channel.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_gm1.controllers import (
    ChannelState,
    ControllerResponseMapper,
    InMemoryChannelState,
    channel_category,
    is_valid_channel,
    midi_value_to_db,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_controller_tools(
    mcp: ChukMCPServer,
    channel_state: InMemoryChannelState,
) -> dict[str, Any]:
    """
    Register controller response tools with the MCP server.

    Args:
        mcp: The MCP server instance
        channel_state: Channel state the mapper reads and writes

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    mapper = ControllerResponseMapper(channel_state)

    def channel_snapshot(channel: int, state: ChannelState) -> dict[str, Any]:
        return {
            "channel": channel,
            "category": channel_category(channel, state.program).display_name,
            **state.to_dict(),
        }

    def channel_response(channel: int, **extra: Any) -> str:
        state = channel_state.channel(channel)
        if state is None:
            return invalid_channel(channel)
        return json.dumps(
            {"status": "success", **extra, "state": channel_snapshot(channel, state)}
        )

    def invalid_channel(channel: int) -> str:
        return json.dumps(
            {"status": "error", "message": f"Invalid channel: {channel}. Must be 0-15."}
        )

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_set_channel_program(channel: int, program: int) -> str:
        """
        Select the current program on a channel.

        Args:
            channel: MIDI channel (0-15)
            program: GM1 program number (1-128)

        Returns:
            JSON string with the channel state

        Example:
            gm1_set_channel_program(channel=0, program=41)
        """
        try:
            if not is_valid_channel(channel):
                return invalid_channel(channel)
            channel_state.set_channel_program(channel, program)
            return channel_response(channel)
        except Exception as e:
            logger.exception("Failed to set channel program")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_set_channel_program"] = gm1_set_channel_program

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_modulation_wheel(channel: int, value: int) -> str:
        """
        Apply a modulation wheel (CC#1) change to a channel.

        The effect depends on the channel's instrument category:
        vibrato for strings, vibrato and brightness for brass and reeds,
        LFO depth for synth leads, nothing for percussive sounds.

        Args:
            channel: MIDI channel (0-15)
            value: Modulation wheel value (0-127)

        Returns:
            JSON string with the resulting channel state

        Example:
            gm1_modulation_wheel(channel=0, value=100)
        """
        try:
            if not is_valid_channel(channel):
                return invalid_channel(channel)
            mapper.handle_modulation_wheel(channel, value)
            return channel_response(channel)
        except Exception as e:
            logger.exception("Failed to apply modulation wheel")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_modulation_wheel"] = gm1_modulation_wheel

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_volume_controller(channel: int, value: int) -> str:
        """
        Apply a channel volume (CC#7) change.

        Volume follows a logarithmic curve: 127 is 0 dB, 64 is about
        -6 dB, 0 is the -60 dB floor.

        Args:
            channel: MIDI channel (0-15)
            value: Volume controller value (0-127)

        Returns:
            JSON string with the volume in dB and the channel state

        Example:
            gm1_volume_controller(channel=0, value=64)
        """
        try:
            if not is_valid_channel(channel):
                return invalid_channel(channel)
            mapper.handle_volume_controller(channel, value)
            return channel_response(channel, volume_db=midi_value_to_db(value))
        except Exception as e:
            logger.exception("Failed to apply volume controller")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_volume_controller"] = gm1_volume_controller

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_get_channel_state(channel: int) -> str:
        """
        Get the current synthesis state of a channel.

        Args:
            channel: MIDI channel (0-15)

        Returns:
            JSON string with program, volume and modulation parameters

        Example:
            gm1_get_channel_state(channel=0)
        """
        try:
            return channel_response(channel)
        except Exception as e:
            logger.exception("Failed to get channel state")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_get_channel_state"] = gm1_get_channel_state

    return tools
