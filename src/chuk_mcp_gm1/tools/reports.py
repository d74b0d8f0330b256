"""
Report tools - MCP tools for evaluating and comparing device reports.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_gm1.reports import (
    ReportLoader,
    compare_reports,
    dynamic_range_consistent,
    evaluate_report,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_report_tools(mcp: ChukMCPServer, loader: ReportLoader) -> dict[str, Any]:
    """
    Register device report tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The report loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def not_found(name: str) -> str:
        return json.dumps({"status": "error", "message": f"Report not found: {name}"})

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_list_reports() -> str:
        """
        List available device reports.

        Returns reports from the built-in library and the project
        reports directory.

        Returns:
            JSON string with list of report summaries

        Example:
            gm1_list_reports()
        """
        try:
            reports = loader.list_reports()
            return json.dumps(
                {
                    "status": "success",
                    "reports": [r.model_dump() for r in reports],
                    "count": len(reports),
                }
            )
        except Exception as e:
            logger.exception("Failed to list reports")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_list_reports"] = gm1_list_reports

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_evaluate_report(name: str) -> str:
        """
        Run every GM1 check over a device report.

        Validates the audio specification, each program's quality
        metrics and each velocity configuration.

        Args:
            name: Report name

        Returns:
            JSON string with the evaluation

        Example:
            gm1_evaluate_report(name="reference-synth")
        """
        try:
            report = loader.get_report(name)
            if report is None:
                return not_found(name)
            evaluation = evaluate_report(report)
            return json.dumps({"status": "success", "evaluation": evaluation.to_dict()})
        except Exception as e:
            logger.exception("Failed to evaluate report")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_evaluate_report"] = gm1_evaluate_report

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_compare_reports(first: str, second: str) -> str:
        """
        Compare two devices program by program.

        Programs measured on only one device are skipped.

        Args:
            first: First report name
            second: Second report name

        Returns:
            JSON string with per-program consistency scores

        Example:
            gm1_compare_reports(first="reference-synth", second="budget-synth")
        """
        try:
            report_a = loader.get_report(first)
            if report_a is None:
                return not_found(first)
            report_b = loader.get_report(second)
            if report_b is None:
                return not_found(second)

            results = compare_reports(report_a, report_b)
            return json.dumps(
                {
                    "status": "success",
                    "programs": [r.to_dict() for r in results],
                    "consistent_programs": sum(1 for r in results if r.consistent),
                    "dynamic_range_consistent": dynamic_range_consistent(report_a, report_b),
                }
            )
        except Exception as e:
            logger.exception("Failed to compare reports")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_compare_reports"] = gm1_compare_reports

    return tools
