"""
Job Board Tool - List open roles and fetch job details from an Ashby job board.

Reads the data Ashby embeds in its server-rendered pages; no JavaScript
is executed and no API key is needed.
"""

from __future__ import annotations

import httpx
from fastmcp import FastMCP

from jobs_agent_tools.errors import ToolError

from . import detail, listing


def register_tools(mcp: FastMCP, board_url: str = listing.DEFAULT_BOARD_URL) -> None:
    """Register job board tools with the MCP server."""

    def _run(operation, *args) -> dict:
        """Call an operation, mapping failures to error dicts."""
        try:
            return operation(*args)
        except ToolError as e:
            return e.to_dict()
        except httpx.TimeoutException:
            return {"error": "Job board request timed out"}
        except httpx.RequestError as e:
            return {"error": f"Network error: {e}"}

    @mcp.tool()
    def list_jobs(title_contains: str | None = None) -> dict:
        """
        List open roles from the company's Ashby job board.

        Args:
            title_contains: Optional case-insensitive substring to filter job
                titles by (e.g., "engineer")

        Returns:
            Dict with source_url, count and jobs. Each job has id, title,
            department, team, location, workplace_type, employment_type,
            is_listed, published_date, compensation_summary (null unless the
            board displays compensation) and job_url.
        """
        result = _run(listing.list_jobs, board_url)
        if "error" in result or not title_contains:
            return result

        needle = title_contains.strip().lower()
        jobs = [job for job in result["jobs"] if needle in job["title"].lower()]
        return {**result, "count": len(jobs), "jobs": jobs, "title_contains": title_contains}

    @mcp.tool()
    def get_job_details(url: str) -> dict:
        """
        Fetch details for a specific job posting URL on the Ashby job board.

        Args:
            url: Job posting URL (e.g., a job_url returned by list_jobs)

        Returns:
            Dict with id, url, title, department, team, location,
            employment_type, published_date, compensation_summary,
            description_html and apply_url.
        """
        if not url.startswith(("http://", "https://")):
            return {"error": "url must be an absolute http(s) URL"}

        result = _run(detail.get_job_detail, url)
        if isinstance(result, dict):
            return result
        return result.to_dict()
