"""
Pydantic models for GM1 quality validation.

This module provides:
- QualityMetrics: Per-program listening test results
- VelocityConfig: Per-program velocity response setup
- AudioQuality: Implementation-wide audio specification
- DeviceReport: A device's full set of measurements
"""

from chuk_mcp_gm1.models.quality import AudioQuality, QualityMetrics, VelocityConfig
from chuk_mcp_gm1.models.report import DeviceReport, ReportMetadata

__all__ = [
    "AudioQuality",
    "DeviceReport",
    "QualityMetrics",
    "ReportMetadata",
    "VelocityConfig",
]
