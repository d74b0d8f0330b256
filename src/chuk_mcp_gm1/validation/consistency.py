"""
Cross-device consistency - how alike the same program sounds on two
GM1 implementations.
"""

from __future__ import annotations

from chuk_mcp_gm1.constants import (
    CONSISTENCY_TUNING_SPAN_CENTS,
    MAX_DYNAMIC_RANGE_DIFF_DB,
    MIN_CONSISTENCY_SCORE,
)
from chuk_mcp_gm1.models.quality import AudioQuality, QualityMetrics

# Sub-score weights (sum to 1.0)
RECOGNITION_WEIGHT = 0.4
CONTROLLER_WEIGHT = 0.2
VELOCITY_WEIGHT = 0.2
TUNING_WEIGHT = 0.2


def calculate_consistency_score(a: QualityMetrics | None, b: QualityMetrics | None) -> float:
    """
    Score the consistency of one program measured on two devices.

    Weighted sub-scores:
    - Recognition (0.4): 1 - |difference|, not clamped
    - Controller response match (0.2)
    - Velocity sensitivity match (0.2)
    - Tuning (0.2): 1 at 0 cents difference, 0 at 20 cents or more

    Args:
        a: Metrics from the first device
        b: Metrics from the second device

    Returns:
        Score from 0.0 to 1.0. 0.0 if either side is missing or the
        programs differ - comparing different programs is meaningless.
    """
    if a is None or b is None:
        return 0.0
    if a.program != b.program:
        return 0.0

    score = 0.0
    weights_sum = 0.0

    recognition = 1.0 - abs(a.recognition_score - b.recognition_score)
    score += recognition * RECOGNITION_WEIGHT
    weights_sum += RECOGNITION_WEIGHT

    if a.controller_response == b.controller_response:
        score += CONTROLLER_WEIGHT
    weights_sum += CONTROLLER_WEIGHT

    if a.velocity_sensitive == b.velocity_sensitive:
        score += VELOCITY_WEIGHT
    weights_sum += VELOCITY_WEIGHT

    tuning_diff = abs(a.frequency_accuracy - b.frequency_accuracy)
    tuning = max(0.0, 1.0 - tuning_diff / CONSISTENCY_TUNING_SPAN_CENTS)
    score += tuning * TUNING_WEIGHT
    weights_sum += TUNING_WEIGHT

    return score / weights_sum


def is_consistent(score: float) -> bool:
    """True if a consistency score is acceptable (>= 0.80)."""
    return score >= MIN_CONSISTENCY_SCORE


def is_dynamic_range_consistent(a: AudioQuality | None, b: AudioQuality | None) -> bool:
    """True if two implementations' dynamic ranges are within 12 dB."""
    if a is None or b is None:
        return False
    return abs(a.dynamic_range_db - b.dynamic_range_db) <= MAX_DYNAMIC_RANGE_DIFF_DB
