"""
Device report models - one device's measurements, as delivered by a
listening-test harness.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_gm1.models.quality import AudioQuality, QualityMetrics, VelocityConfig


class DeviceReport(BaseModel):
    """
    Everything measured on one GM1 implementation.

    Reports are read-only input. A device may omit its audio
    specification; validators treat that as a missing specification.
    """

    schema_version: str = Field("gm1-report/v1", alias="schema")
    name: str = Field(..., description="Device/report name")
    description: str = Field("", description="Free-text description")
    audio_quality: AudioQuality | None = Field(
        default=None,
        description="Implementation-wide audio specification",
    )
    programs: list[QualityMetrics] = Field(
        default_factory=list,
        description="Per-program listening test metrics",
    )
    velocity: dict[int, VelocityConfig] = Field(
        default_factory=dict,
        description="Per-program velocity configuration",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def metrics_for(self, program: int) -> QualityMetrics | None:
        """Get the metrics recorded for a program, if any."""
        for metrics in self.programs:
            if metrics.program == program:
                return metrics
        return None

    def program_numbers(self) -> list[int]:
        """Programs with recorded metrics, in report order."""
        return [m.program for m in self.programs]


class ReportMetadata(BaseModel):
    """Lightweight metadata for listing reports."""

    name: str
    description: str
    program_count: int
    has_audio_quality: bool

    model_config = {"frozen": True}

    @classmethod
    def from_report(cls, report: DeviceReport) -> ReportMetadata:
        """Create metadata from a report."""
        return cls(
            name=report.name,
            description=report.description,
            program_count=len(report.programs),
            has_audio_quality=report.audio_quality is not None,
        )
