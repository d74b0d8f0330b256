"""
GM1 quality and compliance validation.

This module provides:
- validate_program_quality: Per-program listening test checks
- validate_audio_quality: Implementation audio spec -> ComplianceResult
- configure_program_velocity: Velocity setup validation
- estimate_program_switch_latency: Deterministic switch cost estimate
- calculate_consistency_score: Cross-device similarity of one program
"""

from chuk_mcp_gm1.validation.compliance import ComplianceResult
from chuk_mcp_gm1.validation.consistency import (
    calculate_consistency_score,
    is_consistent,
    is_dynamic_range_consistent,
)
from chuk_mcp_gm1.validation.latency import (
    LARGE_SAMPLE_SET_CATEGORIES,
    estimate_program_switch_latency,
    is_program_switch_compliant,
)
from chuk_mcp_gm1.validation.quality import (
    VelocityConfigurator,
    configure_program_velocity,
    is_valid_program,
    validate_audio_quality,
    validate_program_quality,
)

__all__ = [
    "LARGE_SAMPLE_SET_CATEGORIES",
    "ComplianceResult",
    "VelocityConfigurator",
    "calculate_consistency_score",
    "configure_program_velocity",
    "estimate_program_switch_latency",
    "is_consistent",
    "is_dynamic_range_consistent",
    "is_program_switch_compliant",
    "is_valid_program",
    "validate_audio_quality",
    "validate_program_quality",
]
