#!/usr/bin/env python3
"""
Jobs Agent MCP Server

Exposes the job-seeker tools and the assistant prompt via Model Context
Protocol using FastMCP.

Usage:
    # Run with HTTP transport (default, for Docker)
    python mcp_server.py

    # Run with custom port
    python mcp_server.py --port 8001

    # Run with STDIO transport (for local testing)
    python mcp_server.py --stdio

Environment Variables:
    MCP_PORT         - Server port (default: 4001)
    GOOGLE_DOC_URL   - Default document for read_public_google_doc
    GOOGLE_DOC_URLS  - Comma-separated default documents (first one is used)
"""

import argparse
import logging
import os
import sys

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from jobs_agent_tools.prompts import register_prompts
from jobs_agent_tools.settings import SettingsStore
from jobs_agent_tools.tools import register_all_tools

logger = logging.getLogger(__name__)


def setup_logger():
    """Configure logger for MCP server."""
    if not logger.handlers:
        # For STDIO mode, log to stderr; for HTTP mode, log to stdout
        stream = sys.stderr if "--stdio" in sys.argv else sys.stdout
        handler = logging.StreamHandler(stream)
        formatter = logging.Formatter("[MCP] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)


setup_logger()

settings = SettingsStore()

if not (settings.is_available("google_doc_url") or settings.is_available("google_doc_urls")):
    # Non-fatal - read_public_google_doc still accepts an explicit url
    logger.warning("No default document configured (GOOGLE_DOC_URL / GOOGLE_DOC_URLS)")

mcp = FastMCP("jobs-agent")

tools = register_all_tools(mcp, settings=settings)
register_prompts(mcp)
# Only print to stdout in HTTP mode (STDIO mode requires clean stdout for JSON-RPC)
if "--stdio" not in sys.argv:
    logger.info(f"Registered {len(tools)} tools: {tools}")


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> PlainTextResponse:
    """Health check endpoint for container orchestration."""
    return PlainTextResponse("OK")


@mcp.custom_route("/", methods=["GET"])
async def index(request: Request) -> PlainTextResponse:
    """Landing page for browser visits."""
    return PlainTextResponse("Welcome to the Jobs Agent MCP Server")


def main() -> None:
    """Entry point for the MCP server."""
    parser = argparse.ArgumentParser(description="Jobs Agent MCP Server")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("MCP_PORT", "4001")),
        help="HTTP server port (default: 4001)",
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="HTTP server host (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Use STDIO transport instead of HTTP",
    )
    args = parser.parse_args()

    if args.stdio:
        # STDIO mode: only JSON-RPC messages go to stdout
        mcp.run(transport="stdio", show_banner=False)
    else:
        logger.info(f"Starting HTTP server on {args.host}:{args.port}")
        mcp.run(transport="http", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
