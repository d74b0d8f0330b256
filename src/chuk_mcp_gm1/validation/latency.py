"""
Program switch latency.

GM1 requires a program change to complete within 100 ms. The estimate
here is a pure function of the two programs' categories - it models
cost, it does not time anything.
"""

from __future__ import annotations

from chuk_mcp_gm1.constants import (
    INVALID_LATENCY_MS,
    MAX_PROGRAM_SWITCH_MS,
    SWITCH_BASE_LATENCY_MS,
    SWITCH_CATEGORY_CHANGE_MS,
    SWITCH_LARGE_SAMPLE_SET_MS,
)
from chuk_mcp_gm1.core import InstrumentCategory, classify
from chuk_mcp_gm1.validation.quality import is_valid_program

# Categories with larger sample sets take longer to load
LARGE_SAMPLE_SET_CATEGORIES = frozenset({InstrumentCategory.PIANO, InstrumentCategory.STRINGS})


def estimate_program_switch_latency(from_program: int, to_program: int) -> int:
    """
    Estimate the latency of switching between two programs.

    - Base 10 ms
    - +20 ms when the category changes
    - +15 ms when switching into Piano or Strings

    Args:
        from_program: Source program (1-128)
        to_program: Target program (1-128)

    Returns:
        Latency in milliseconds, INVALID_LATENCY_MS for invalid programs
    """
    if not (is_valid_program(from_program) and is_valid_program(to_program)):
        return INVALID_LATENCY_MS

    from_category = classify(from_program)
    to_category = classify(to_program)

    latency = SWITCH_BASE_LATENCY_MS
    if from_category != to_category:
        latency += SWITCH_CATEGORY_CHANGE_MS
    if to_category in LARGE_SAMPLE_SET_CATEGORIES:
        latency += SWITCH_LARGE_SAMPLE_SET_MS

    return latency


def is_program_switch_compliant(latency_ms: int) -> bool:
    """True if a program switch latency is within GM1 limits (< 100 ms)."""
    return latency_ms < MAX_PROGRAM_SWITCH_MS
