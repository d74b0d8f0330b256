#!/usr/bin/env python3
"""
Entry point for the CHUK GM1 Quality MCP Server.

Runs the MCP server over stdio or http. With --check, evaluates one
device report instead and exits non-zero if it is not compliant, so a
test harness can gate on it without an MCP client.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_report(name: str, reports_dir: Path) -> int:
    """
    Evaluate a report and print the result.

    Args:
        name: Report name, or path to a report YAML file
        reports_dir: Project reports directory searched by name

    Returns:
        Exit code: 0 compliant, 1 not compliant, 2 not found
    """
    from chuk_mcp_gm1.reports import ReportLoader, evaluate_report

    loader = ReportLoader(project_path=reports_dir)
    path = Path(name)
    if path.suffix in (".yaml", ".yml") and path.is_file():
        report = loader.load_file(path)
    else:
        report = loader.get_report(name)
    if report is None:
        logger.error(f"Report not found: {name}")
        return 2

    evaluation = evaluate_report(report)
    print(json.dumps(evaluation.to_dict(), indent=2))
    return 0 if evaluation.is_compliant else 1


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK GM1 Quality MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--check",
        metavar="REPORT",
        help="Evaluate a device report (name or YAML path) and exit instead of serving",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=Path.cwd() / "reports",
        help="Project reports directory for --check (default: ./reports)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.check:
        sys.exit(check_report(args.check, args.reports_dir))

    # Server module registers tools at import time
    from chuk_mcp_gm1.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK GM1 Quality MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK GM1 Quality MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
