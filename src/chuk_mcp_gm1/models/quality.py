"""
Quality models - the numbers a test harness hands to the validators.

These are plain value types. They are deliberately loose: a validator
has to be able to look at an out-of-range measurement and say "no",
so range checking lives in the validators rather than here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class QualityMetrics(BaseModel):
    """
    Quality metrics for one GM1 program on one device.

    Recognition score comes from human listening tests.
    """

    program: int = Field(..., description="GM1 program number (1-128)")
    recognition_score: float = Field(
        ...,
        description="Listening test recognition score (0.0-1.0)",
    )
    controller_response: bool = Field(
        default=True,
        description="CC#1 and CC#7 work as expected",
    )
    velocity_sensitive: bool = Field(
        default=True,
        description="Notes respond to velocity",
    )
    frequency_accuracy: float = Field(
        default=0.0,
        description="Tuning deviation in cents (signed)",
    )

    model_config = {"frozen": True}


class VelocityConfig(BaseModel):
    """Velocity response configuration for a GM1 program."""

    velocity_layers: int = Field(..., description="Number of velocity layers (2 minimum)")
    velocity_curve: float = Field(
        default=0.5,
        description="Response curve exponent (0.5 = linear, 1.0+ = exponential)",
    )
    velocity_affects_timbre: bool = Field(
        default=False,
        description="Velocity changes brightness/character",
    )

    model_config = {"frozen": True}


class AudioQuality(BaseModel):
    """Audio quality specification of a whole GM1 implementation."""

    sample_rate_hz: int = Field(..., description="Sample rate in Hz")
    bit_depth: int = Field(..., description="Bit depth")
    frequency_response_min_hz: float = Field(
        default=20.0,
        description="Lowest reproduced frequency in Hz",
    )
    frequency_response_max_hz: float = Field(
        default=20000.0,
        description="Highest reproduced frequency in Hz",
    )
    dynamic_range_db: float = Field(..., description="Dynamic range in dB")
    polyphony_voices: int = Field(..., description="Simultaneous voices")

    model_config = {"frozen": True}
