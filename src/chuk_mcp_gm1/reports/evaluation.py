"""
Report evaluation - run every validator over a device report, and
compare two devices program by program.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_gm1.core import classify
from chuk_mcp_gm1.models.report import DeviceReport
from chuk_mcp_gm1.validation import (
    ComplianceResult,
    calculate_consistency_score,
    configure_program_velocity,
    is_consistent,
    is_dynamic_range_consistent,
    validate_audio_quality,
    validate_program_quality,
)


@dataclass
class ProgramEvaluation:
    """Validation outcome for one program of a report."""

    program: int
    category: str
    quality_ok: bool
    velocity_ok: bool | None  # None when the report has no velocity config

    @property
    def passed(self) -> bool:
        return self.quality_ok and self.velocity_ok is not False

    def to_dict(self) -> dict[str, Any]:
        return {
            "program": self.program,
            "category": self.category,
            "quality_ok": self.quality_ok,
            "velocity_ok": self.velocity_ok,
            "passed": self.passed,
        }


@dataclass
class ReportEvaluation:
    """Validation outcome for a whole report."""

    report: str
    audio: ComplianceResult
    programs: list[ProgramEvaluation] = field(default_factory=list)

    @property
    def passed_programs(self) -> int:
        return sum(1 for p in self.programs if p.passed)

    @property
    def failed_programs(self) -> list[int]:
        return [p.program for p in self.programs if not p.passed]

    @property
    def is_compliant(self) -> bool:
        """Audio meets the minimum tier and every program passes."""
        return self.audio.meets_minimum and not self.failed_programs

    def to_dict(self) -> dict[str, Any]:
        return {
            "report": self.report,
            "compliant": self.is_compliant,
            "audio": self.audio.to_dict(),
            "programs": [p.to_dict() for p in self.programs],
            "passed_programs": self.passed_programs,
            "failed_programs": self.failed_programs,
        }


@dataclass(frozen=True)
class ProgramConsistency:
    """Consistency of one program across two devices."""

    program: int
    score: float

    @property
    def consistent(self) -> bool:
        return is_consistent(self.score)

    def to_dict(self) -> dict[str, Any]:
        return {
            "program": self.program,
            "score": round(self.score, 4),
            "consistent": self.consistent,
        }


def evaluate_report(report: DeviceReport) -> ReportEvaluation:
    """
    Validate every measurement in a report.

    Args:
        report: The device report

    Returns:
        ReportEvaluation with audio compliance and per-program results
    """
    evaluation = ReportEvaluation(
        report=report.name,
        audio=validate_audio_quality(report.audio_quality),
    )

    for metrics in report.programs:
        config = report.velocity.get(metrics.program)
        evaluation.programs.append(
            ProgramEvaluation(
                program=metrics.program,
                category=classify(metrics.program).display_name,
                quality_ok=validate_program_quality(metrics),
                velocity_ok=(
                    configure_program_velocity(metrics.program, config)
                    if config is not None
                    else None
                ),
            )
        )

    return evaluation


def compare_reports(a: DeviceReport, b: DeviceReport) -> list[ProgramConsistency]:
    """
    Score every program measured on both devices.

    Programs measured on only one device are skipped.
    """
    shared = [p for p in a.program_numbers() if b.metrics_for(p) is not None]
    return [
        ProgramConsistency(
            program=program,
            score=calculate_consistency_score(a.metrics_for(program), b.metrics_for(program)),
        )
        for program in shared
    ]


def dynamic_range_consistent(a: DeviceReport, b: DeviceReport) -> bool:
    """True if both devices specify audio quality with dynamic ranges within 12 dB."""
    return is_dynamic_range_consistent(a.audio_quality, b.audio_quality)
