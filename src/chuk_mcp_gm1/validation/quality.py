"""
Quality validator - program quality, audio quality and velocity setup
checked against the RP-003 thresholds.

Validates:
- Program recognition, controller response, velocity sensitivity, tuning
- Implementation sample rate, bit depth, dynamic range, polyphony and
  frequency response (minimum and recommended tiers)
- Velocity layer count and curve before handing a configuration on

Nothing here raises for bad input. Invalid or missing input is a failed
validation, reported through the return value.
"""

from __future__ import annotations

import logging
from typing import Protocol

from chuk_mcp_gm1.constants import (
    MAX_PROGRAM,
    MAX_TUNING_DEVIATION_CENTS,
    MAX_VELOCITY_CURVE,
    MIN_BIT_DEPTH,
    MIN_DYNAMIC_RANGE_DB,
    MIN_MAX_FREQUENCY_HZ,
    MIN_POLYPHONY,
    MIN_PROGRAM,
    MIN_RECOGNITION_SCORE,
    MIN_SAMPLE_RATE_HZ,
    MIN_VELOCITY_LAYERS,
    RECOMMENDED_BIT_DEPTH,
    RECOMMENDED_DYNAMIC_RANGE_DB,
    RECOMMENDED_MAX_FREQUENCY_HZ,
    RECOMMENDED_MIN_FREQUENCY_HZ,
    RECOMMENDED_SAMPLE_RATE_HZ,
    IssueMessages,
)
from chuk_mcp_gm1.models.quality import AudioQuality, QualityMetrics, VelocityConfig
from chuk_mcp_gm1.validation.compliance import ComplianceResult

logger = logging.getLogger(__name__)


class VelocityConfigurator(Protocol):
    """The synthesis configuration authority that owns velocity setup."""

    def apply_velocity_config(self, program: int, config: VelocityConfig) -> None: ...


def is_valid_program(program: int) -> bool:
    """True for GM1 programs 1-128."""
    return MIN_PROGRAM <= program <= MAX_PROGRAM


def validate_program_quality(metrics: QualityMetrics | None) -> bool:
    """
    Validate a program's quality metrics.

    Checks:
    - Recognition score >= 0.80
    - Controller response working
    - Velocity sensitivity present
    - Tuning within +/-10 cents

    Boundary values pass.

    Args:
        metrics: Listening test metrics, or None

    Returns:
        True if the program meets GM1 quality standards
    """
    if metrics is None:
        logger.debug("Program quality: no metrics")
        return False

    if metrics.recognition_score < MIN_RECOGNITION_SCORE:
        logger.debug(
            f"Program {metrics.program}: recognition {metrics.recognition_score} "
            f"below {MIN_RECOGNITION_SCORE}"
        )
        return False

    if not metrics.controller_response:
        logger.debug(f"Program {metrics.program}: no controller response")
        return False

    if not metrics.velocity_sensitive:
        logger.debug(f"Program {metrics.program}: not velocity sensitive")
        return False

    if abs(metrics.frequency_accuracy) > MAX_TUNING_DEVIATION_CENTS:
        logger.debug(
            f"Program {metrics.program}: tuning {metrics.frequency_accuracy} cents "
            f"outside +/-{MAX_TUNING_DEVIATION_CENTS}"
        )
        return False

    return True


def validate_audio_quality(quality: AudioQuality | None) -> ComplianceResult:
    """
    Validate an implementation's audio specification.

    Each sub-check below its minimum clears meets_minimum and records an
    issue. Each sub-check between minimum and recommended only clears
    meets_recommended. Polyphony has no recommended tier; the low end of
    the frequency response has no minimum tier.

    Args:
        quality: Audio specification, or None

    Returns:
        ComplianceResult with both flags and any issue messages
    """
    result = ComplianceResult()

    if quality is None:
        result.meets_minimum = False
        result.meets_recommended = False
        result.add_issue(IssueMessages.NULL_SPECIFICATION)
        return result

    # Sample rate
    if quality.sample_rate_hz < MIN_SAMPLE_RATE_HZ:
        result.fail_minimum(
            IssueMessages.SAMPLE_RATE_BELOW_MIN.format(
                value=quality.sample_rate_hz, minimum=MIN_SAMPLE_RATE_HZ
            )
        )
    elif quality.sample_rate_hz < RECOMMENDED_SAMPLE_RATE_HZ:
        result.fail_recommended()

    # Bit depth
    if quality.bit_depth < MIN_BIT_DEPTH:
        result.fail_minimum(
            IssueMessages.BIT_DEPTH_BELOW_MIN.format(value=quality.bit_depth, minimum=MIN_BIT_DEPTH)
        )
    elif quality.bit_depth < RECOMMENDED_BIT_DEPTH:
        result.fail_recommended()

    # Dynamic range
    if quality.dynamic_range_db < MIN_DYNAMIC_RANGE_DB:
        result.fail_minimum(
            IssueMessages.DYNAMIC_RANGE_BELOW_MIN.format(
                value=quality.dynamic_range_db, minimum=MIN_DYNAMIC_RANGE_DB
            )
        )
    elif quality.dynamic_range_db < RECOMMENDED_DYNAMIC_RANGE_DB:
        result.fail_recommended()

    # Polyphony
    if quality.polyphony_voices < MIN_POLYPHONY:
        result.fail_minimum(
            IssueMessages.POLYPHONY_BELOW_MIN.format(
                value=quality.polyphony_voices, minimum=MIN_POLYPHONY
            )
        )

    # Frequency response - low end is a recommendation only
    if quality.frequency_response_min_hz > RECOMMENDED_MIN_FREQUENCY_HZ:
        result.fail_recommended()

    if quality.frequency_response_max_hz < MIN_MAX_FREQUENCY_HZ:
        result.fail_minimum(
            IssueMessages.MAX_FREQUENCY_BELOW_MIN.format(
                value=quality.frequency_response_max_hz, minimum=MIN_MAX_FREQUENCY_HZ
            )
        )
    elif quality.frequency_response_max_hz < RECOMMENDED_MAX_FREQUENCY_HZ:
        result.fail_recommended()

    if not result.meets_minimum:
        logger.debug(f"Audio quality below minimum: {result.summary}")

    return result


def configure_program_velocity(
    program: int,
    config: VelocityConfig | None,
    configurator: VelocityConfigurator | None = None,
) -> bool:
    """
    Validate and apply a program's velocity configuration.

    Every GM1 program needs at least 2 velocity layers and a curve in
    (0.0, 2.0]. Only a valid configuration reaches the configurator.

    Args:
        program: GM1 program number (1-128)
        config: Velocity configuration, or None
        configurator: Optional synthesis configuration authority

    Returns:
        True if the configuration was accepted
    """
    if not is_valid_program(program):
        logger.debug(f"Velocity config: invalid program {program}")
        return False

    if config is None:
        logger.debug(f"Velocity config: no configuration for program {program}")
        return False

    if config.velocity_layers < MIN_VELOCITY_LAYERS:
        logger.debug(
            f"Velocity config: program {program} has {config.velocity_layers} layers, "
            f"needs {MIN_VELOCITY_LAYERS}"
        )
        return False

    if config.velocity_curve <= 0.0 or config.velocity_curve > MAX_VELOCITY_CURVE:
        logger.debug(
            f"Velocity config: program {program} curve {config.velocity_curve} "
            f"outside (0.0, {MAX_VELOCITY_CURVE}]"
        )
        return False

    if configurator is not None:
        configurator.apply_velocity_config(program, config)

    return True
