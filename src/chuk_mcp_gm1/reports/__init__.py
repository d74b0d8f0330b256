"""
Device reports - harness measurements loaded from YAML.

Reports are read-only input: the loader discovers them, the evaluation
functions run the validators over them.
"""

from chuk_mcp_gm1.reports.evaluation import (
    ProgramConsistency,
    ProgramEvaluation,
    ReportEvaluation,
    compare_reports,
    dynamic_range_consistent,
    evaluate_report,
)
from chuk_mcp_gm1.reports.loader import ReportLoader

__all__ = [
    "ProgramConsistency",
    "ProgramEvaluation",
    "ReportEvaluation",
    "ReportLoader",
    "compare_reports",
    "dynamic_range_consistent",
    "evaluate_report",
]
