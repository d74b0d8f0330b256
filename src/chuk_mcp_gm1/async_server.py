#!/usr/bin/env python3
"""
Async GM1 Quality MCP Server using chuk-mcp-server

This server exposes GM1 (General MIDI Level 1) sound quality and timbre
compliance checks as MCP tools. It classifies programs into instrument
categories, shows how controllers drive synthesis parameters, and checks
measurements against the RP-003 thresholds.

The server provides tools for:
- Classifying programs into the 16 GM1 instrument families
- Applying modulation wheel and volume changes to channels
- Validating program quality, audio quality and velocity setup
- Estimating program switch latency
- Scoring cross-device consistency and evaluating device reports
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_gm1.controllers import InMemoryChannelState
from chuk_mcp_gm1.reports import ReportLoader
from chuk_mcp_gm1.tools import (
    register_classification_tools,
    register_controller_tools,
    register_report_tools,
    register_validation_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-gm1")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
REPORTS_DIR = BASE_PATH / "reports"
LIBRARY_PATH = Path(__file__).parent / "reports" / "library"

# Shared state
channel_state = InMemoryChannelState()
report_loader = ReportLoader(library_path=LIBRARY_PATH, project_path=REPORTS_DIR)

# Register all tools
classification_tools = register_classification_tools(mcp)
controller_tools = register_controller_tools(mcp, channel_state)
validation_tools = register_validation_tools(mcp)
report_tools = register_report_tools(mcp, report_loader)

# Export tool functions for direct access
gm1_classify_program = classification_tools["gm1_classify_program"]
gm1_list_categories = classification_tools["gm1_list_categories"]

gm1_set_channel_program = controller_tools["gm1_set_channel_program"]
gm1_modulation_wheel = controller_tools["gm1_modulation_wheel"]
gm1_volume_controller = controller_tools["gm1_volume_controller"]
gm1_get_channel_state = controller_tools["gm1_get_channel_state"]

gm1_validate_program_quality = validation_tools["gm1_validate_program_quality"]
gm1_validate_audio_quality = validation_tools["gm1_validate_audio_quality"]
gm1_configure_program_velocity = validation_tools["gm1_configure_program_velocity"]
gm1_program_switch_latency = validation_tools["gm1_program_switch_latency"]
gm1_consistency_score = validation_tools["gm1_consistency_score"]

gm1_list_reports = report_tools["gm1_list_reports"]
gm1_evaluate_report = report_tools["gm1_evaluate_report"]
gm1_compare_reports = report_tools["gm1_compare_reports"]

logger.info("CHUK GM1 Quality MCP Server initialized")
logger.info(f"  Report library: {LIBRARY_PATH}")
logger.info(f"  Reports dir: {REPORTS_DIR}")
