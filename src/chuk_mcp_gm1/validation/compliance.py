"""
Compliance result - the outcome of an audio quality check.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_gm1.constants import MAX_ISSUE_CHARS


class ComplianceResult:
    """
    Result of validating an implementation against GM1 quality tiers.

    meets_minimum and meets_recommended start True and are only ever
    cleared. Issue messages share a fixed character budget; once it is
    spent, further messages are dropped silently.
    """

    def __init__(self, capacity: int = MAX_ISSUE_CHARS) -> None:
        self.meets_minimum = True
        self.meets_recommended = True
        self.issues: list[str] = []
        self.capacity = capacity

    @property
    def summary(self) -> str:
        """All issues as one line."""
        return " ".join(self.issues)

    def add_issue(self, message: str) -> bool:
        """
        Append an issue message if it still fits.

        Returns:
            True if the message was recorded, False if it was dropped
        """
        used = len(self.summary)
        needed = len(message) + (1 if self.issues else 0)
        if used + needed > self.capacity:
            return False
        self.issues.append(message)
        return True

    def fail_minimum(self, message: str) -> None:
        """Record a below-minimum finding."""
        self.meets_minimum = False
        self.add_issue(message)

    def fail_recommended(self) -> None:
        """Record a below-recommended (but acceptable) finding."""
        self.meets_recommended = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "meets_minimum": self.meets_minimum,
            "meets_recommended": self.meets_recommended,
            "issues": list(self.issues),
        }

    def __bool__(self) -> bool:
        """Boolean conversion returns meets_minimum."""
        return self.meets_minimum

    def __str__(self) -> str:
        if self.meets_minimum and self.meets_recommended:
            return "Meets GM1 recommended quality"
        if self.meets_minimum:
            return "Meets GM1 minimum quality (below recommended)"
        return f"Below GM1 minimum quality: {self.summary}"
