"""
Validation tools - MCP tools for GM1 quality compliance checks.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_gm1.constants import INVALID_LATENCY_MS, MAX_PROGRAM_SWITCH_MS
from chuk_mcp_gm1.models import AudioQuality, QualityMetrics, VelocityConfig
from chuk_mcp_gm1.validation import (
    VelocityConfigurator,
    calculate_consistency_score,
    configure_program_velocity,
    estimate_program_switch_latency,
    is_consistent,
    is_program_switch_compliant,
    validate_audio_quality,
    validate_program_quality,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_validation_tools(
    mcp: ChukMCPServer,
    configurator: VelocityConfigurator | None = None,
) -> dict[str, Any]:
    """
    Register validation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        configurator: Optional authority that receives accepted velocity configs

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_validate_program_quality(
        program: int,
        recognition_score: float,
        controller_response: bool = True,
        velocity_sensitive: bool = True,
        frequency_accuracy: float = 0.0,
    ) -> str:
        """
        Check a program's listening test results against GM1 standards.

        Requires recognition >= 0.80, working controllers, velocity
        sensitivity and tuning within +/-10 cents.

        Args:
            program: GM1 program number (1-128)
            recognition_score: Listening test recognition (0.0-1.0)
            controller_response: CC#1/CC#7 behave as expected
            velocity_sensitive: Notes respond to velocity
            frequency_accuracy: Tuning deviation in cents

        Returns:
            JSON string with pass/fail

        Example:
            gm1_validate_program_quality(program=1, recognition_score=0.9)
        """
        try:
            metrics = QualityMetrics(
                program=program,
                recognition_score=recognition_score,
                controller_response=controller_response,
                velocity_sensitive=velocity_sensitive,
                frequency_accuracy=frequency_accuracy,
            )
            return json.dumps(
                {
                    "status": "success",
                    "program": program,
                    "passed": validate_program_quality(metrics),
                }
            )
        except Exception as e:
            logger.exception("Failed to validate program quality")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_validate_program_quality"] = gm1_validate_program_quality

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_validate_audio_quality(
        sample_rate_hz: int,
        bit_depth: int,
        dynamic_range_db: float,
        polyphony_voices: int,
        frequency_response_min_hz: float = 20.0,
        frequency_response_max_hz: float = 20000.0,
    ) -> str:
        """
        Check an implementation's audio specification.

        Reports whether the minimum and recommended GM1 tiers are met,
        with a message for every below-minimum finding.

        Args:
            sample_rate_hz: Sample rate (22050 min, 44100 recommended)
            bit_depth: Bit depth (8 min, 16 recommended)
            dynamic_range_db: Dynamic range (48 min, 72 recommended)
            polyphony_voices: Voices (24 min)
            frequency_response_min_hz: Low end (20 Hz recommended)
            frequency_response_max_hz: High end (11000 min, 20000 recommended)

        Returns:
            JSON string with compliance flags and issues

        Example:
            gm1_validate_audio_quality(sample_rate_hz=44100, bit_depth=16,
                                       dynamic_range_db=96, polyphony_voices=64)
        """
        try:
            quality = AudioQuality(
                sample_rate_hz=sample_rate_hz,
                bit_depth=bit_depth,
                dynamic_range_db=dynamic_range_db,
                polyphony_voices=polyphony_voices,
                frequency_response_min_hz=frequency_response_min_hz,
                frequency_response_max_hz=frequency_response_max_hz,
            )
            result = validate_audio_quality(quality)
            return json.dumps({"status": "success", **result.to_dict()})
        except Exception as e:
            logger.exception("Failed to validate audio quality")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_validate_audio_quality"] = gm1_validate_audio_quality

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_configure_program_velocity(
        program: int,
        velocity_layers: int,
        velocity_curve: float = 0.5,
        velocity_affects_timbre: bool = False,
    ) -> str:
        """
        Validate a program's velocity response configuration.

        Requires at least 2 velocity layers and a curve in (0.0, 2.0].

        Args:
            program: GM1 program number (1-128)
            velocity_layers: Number of velocity layers
            velocity_curve: Response curve (0.5 = linear, 1.0 = exponential)
            velocity_affects_timbre: Velocity changes brightness/character

        Returns:
            JSON string with accepted/rejected

        Example:
            gm1_configure_program_velocity(program=1, velocity_layers=4)
        """
        try:
            config = VelocityConfig(
                velocity_layers=velocity_layers,
                velocity_curve=velocity_curve,
                velocity_affects_timbre=velocity_affects_timbre,
            )
            accepted = configure_program_velocity(program, config, configurator)
            return json.dumps({"status": "success", "program": program, "accepted": accepted})
        except Exception as e:
            logger.exception("Failed to configure program velocity")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_configure_program_velocity"] = gm1_configure_program_velocity

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_program_switch_latency(from_program: int, to_program: int) -> str:
        """
        Estimate the latency of a program change.

        GM1 requires program changes to complete in under 100 ms.

        Args:
            from_program: Source program (1-128)
            to_program: Target program (1-128)

        Returns:
            JSON string with estimated latency and compliance

        Example:
            gm1_program_switch_latency(from_program=1, to_program=41)
        """
        try:
            latency = estimate_program_switch_latency(from_program, to_program)
            if latency == INVALID_LATENCY_MS:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Invalid program: {from_program} -> {to_program}. "
                        "Must be 1-128.",
                    }
                )
            return json.dumps(
                {
                    "status": "success",
                    "latency_ms": latency,
                    "limit_ms": MAX_PROGRAM_SWITCH_MS,
                    "compliant": is_program_switch_compliant(latency),
                }
            )
        except Exception as e:
            logger.exception("Failed to estimate program switch latency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_program_switch_latency"] = gm1_program_switch_latency

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_consistency_score(
        device1: dict[str, Any],
        device2: dict[str, Any],
    ) -> str:
        """
        Score how consistently two devices render the same program.

        Each device is a metrics object with program, recognition_score,
        controller_response, velocity_sensitive and frequency_accuracy.

        Args:
            device1: Metrics from the first device
            device2: Metrics from the second device

        Returns:
            JSON string with score (0.0-1.0) and consistency verdict

        Example:
            gm1_consistency_score(
                device1={"program": 1, "recognition_score": 0.9},
                device2={"program": 1, "recognition_score": 0.85},
            )
        """
        try:
            score = calculate_consistency_score(
                QualityMetrics(**device1), QualityMetrics(**device2)
            )
            return json.dumps(
                {"status": "success", "score": score, "consistent": is_consistent(score)}
            )
        except Exception as e:
            logger.exception("Failed to calculate consistency score")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_consistency_score"] = gm1_consistency_score

    return tools
