"""
Report loader - discovers and loads device reports.

Reports can come from:
1. Built-in library (reference devices shipped with the package)
2. Project reports (the harness's reports directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_gm1.models.quality import AudioQuality, QualityMetrics, VelocityConfig
from chuk_mcp_gm1.models.report import DeviceReport, ReportMetadata

logger = logging.getLogger(__name__)


class ReportLoader:
    """
    Discovers and loads device reports.

    Reports are loaded from YAML files in the library and project directories.
    Project reports override library reports with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the report loader.

        Args:
            library_path: Path to built-in report library
            project_path: Path to project reports directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, DeviceReport] = {}

    def list_reports(self) -> list[ReportMetadata]:
        """
        List all available reports.

        Returns reports from both library and project, with project
        reports taking precedence.
        """
        return [ReportMetadata.from_report(r) for r in self._scan().values()]

    def get_report(self, name: str) -> DeviceReport | None:
        """
        Get a report by name.

        The name is the report's `name` field, as shown by list_reports.
        A file stem is also accepted. Project reports take precedence
        over library reports.

        Args:
            name: Report name or file stem

        Returns:
            DeviceReport if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        report = self._scan().get(name) or self._load_by_stem(name)
        if report:
            self._cache[name] = report
        return report

    def load_file(self, path: Path) -> DeviceReport | None:
        """Load a report from an explicit path, bypassing the search directories."""
        return self._load_report_file(path)

    def _scan(self) -> dict[str, DeviceReport]:
        """Load every report, keyed by name. Later directories override earlier ones."""
        reports: dict[str, DeviceReport] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                report = self._load_report_file(path)
                if report:
                    reports[report.name] = report

        return reports

    def _load_by_stem(self, stem: str) -> DeviceReport | None:
        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{stem}.yaml"
            if path.exists():
                report = self._load_report_file(path)
                if report:
                    return report
        return None

    def _load_report_file(self, path: Path) -> DeviceReport | None:
        """Load a report from a YAML file, None if unreadable."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_report(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError, ValueError) as e:
            logger.warning(f"Skipping report {path}: {e}")
            return None

    def _parse_report(self, data: dict[str, Any], default_name: str) -> DeviceReport:
        """Parse a report from YAML data."""
        if not isinstance(data, dict):
            raise ValueError("report must be a mapping")

        audio_data = data.get("audio_quality")
        audio_quality = AudioQuality(**audio_data) if audio_data else None

        programs = [QualityMetrics(**entry) for entry in data.get("programs", []) or []]

        velocity_data = data.get("velocity", {}) or {}
        velocity = {
            int(program): VelocityConfig(**config) for program, config in velocity_data.items()
        }

        return DeviceReport(
            schema=data.get("schema", "gm1-report/v1"),
            name=data.get("name", default_name),
            description=data.get("description", ""),
            audio_quality=audio_quality,
            programs=programs,
            velocity=velocity,
        )

    def clear_cache(self) -> None:
        """Clear the report cache."""
        self._cache.clear()
