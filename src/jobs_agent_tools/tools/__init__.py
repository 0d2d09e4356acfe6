"""
Jobs Agent Tools - tool modules for a job-seeker assistant.

Each tool package exposes ``register_tools(mcp, ...)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastmcp import FastMCP

from .google_doc_tool import register_tools as register_google_doc
from .html_extract_tool import register_tools as register_html_extract
from .job_board_tool import register_tools as register_job_board

if TYPE_CHECKING:
    from jobs_agent_tools.settings import SettingsStore


def register_all_tools(
    mcp: FastMCP,
    settings: SettingsStore | None = None,
) -> list[str]:
    """
    Register all tools with a FastMCP server.

    Args:
        mcp: FastMCP server instance
        settings: Optional SettingsStore for configured defaults

    Returns:
        List of registered tool names
    """
    register_html_extract(mcp)
    register_job_board(mcp)
    register_google_doc(mcp, settings=settings)

    return [
        "fetch_and_parse_html",
        "list_jobs",
        "get_job_details",
        "read_public_google_doc",
    ]


__all__ = ["register_all_tools"]
