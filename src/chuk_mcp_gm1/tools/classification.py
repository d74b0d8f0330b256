"""
Classification tools - MCP tools for GM1 program categories.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_gm1.controllers import modulation_policy_for
from chuk_mcp_gm1.core import InstrumentCategory, classify

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _policy_dict(category: InstrumentCategory) -> dict[str, float | None]:
    policy = modulation_policy_for(category)
    return {"vibrato": policy.vibrato, "brightness": policy.brightness, "lfo": policy.lfo}


def register_classification_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register classification tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_classify_program(program: int) -> str:
        """
        Get the GM1 instrument category of a program.

        Programs outside 1-128 classify as Unknown rather than failing.

        Args:
            program: GM1 program number (1-128)

        Returns:
            JSON string with category and modulation response

        Example:
            gm1_classify_program(program=41)
        """
        try:
            category = classify(program)
            return json.dumps(
                {
                    "status": "success",
                    "program": program,
                    "category": category.name.lower(),
                    "name": category.display_name,
                    "program_range": category.program_range(),
                    "modulation": _policy_dict(category),
                }
            )
        except Exception as e:
            logger.exception("Failed to classify program")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_classify_program"] = gm1_classify_program

    @mcp.tool  # type: ignore[arg-type]
    async def gm1_list_categories() -> str:
        """
        List the 16 GM1 melodic categories.

        Returns:
            JSON string with each category's program range and name

        Example:
            gm1_list_categories()
        """
        try:
            categories = InstrumentCategory.melodic()
            return json.dumps(
                {
                    "status": "success",
                    "categories": [
                        {
                            "category": c.name.lower(),
                            "name": c.display_name,
                            "program_range": c.program_range(),
                        }
                        for c in categories
                    ],
                    "count": len(categories),
                }
            )
        except Exception as e:
            logger.exception("Failed to list categories")
            return json.dumps({"status": "error", "message": str(e)})

    tools["gm1_list_categories"] = gm1_list_categories

    return tools
