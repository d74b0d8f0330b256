"""
MCP tool implementations.

Tools are organized by domain:
- classification - Program categories
- controllers - Modulation wheel and volume response
- validation - Quality, velocity, latency and consistency checks
- reports - Device report evaluation and comparison
"""

from chuk_mcp_gm1.tools.classification import register_classification_tools
from chuk_mcp_gm1.tools.controllers import register_controller_tools
from chuk_mcp_gm1.tools.reports import register_report_tools
from chuk_mcp_gm1.tools.validation import register_validation_tools

__all__ = [
    "register_classification_tools",
    "register_controller_tools",
    "register_report_tools",
    "register_validation_tools",
]
