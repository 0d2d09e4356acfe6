"""
HTML Extract Tool - Fetch a page and extract metadata without running JavaScript.

Extracts any subset of: title, description, headings (h1/h2), links, body text.
"""

from __future__ import annotations

from typing import Literal

import httpx
from fastmcp import FastMCP

from jobs_agent_tools.errors import ToolError
from jobs_agent_tools.http import HTML_ACCEPT, fetch

from . import extractor

MAX_CONTENT_CHARS = 200_000

Field = Literal["title", "description", "headings", "links", "text"]


def register_tools(mcp: FastMCP) -> None:
    """Register HTML extraction tools with the MCP server."""

    @mcp.tool()
    def fetch_and_parse_html(
        url: str,
        extract: list[Field] | None = None,
        max_content_chars: int | None = None,
    ) -> dict:
        """
        Fetch a URL and parse its HTML to extract metadata, headings, links, and plain text.

        Does not execute JavaScript.

        Args:
            url: Absolute http(s) URL of the page
            extract: Fields to extract; any of "title", "description",
                "headings", "links", "text". Defaults to all five.
            max_content_chars: Maximum length of the extracted text (1-200000,
                default 10000)

        Returns:
            Dict with url, status and content_type plus the requested fields:
            - title: og:title or <title> text
            - description: meta description or og:description
            - headings: {"h1": [...], "h2": [...]}
            - links: up to 500 {"href", "text"} entries
            - text: visible body text, whitespace collapsed
        """
        if not url.startswith(("http://", "https://")):
            return {"error": "url must be an absolute http(s) URL"}
        if max_content_chars is not None and not 1 <= max_content_chars <= MAX_CONTENT_CHARS:
            return {"error": f"max_content_chars must be between 1 and {MAX_CONTENT_CHARS}"}

        try:
            page = fetch(url, accept=HTML_ACCEPT)
        except ToolError as e:
            return e.to_dict()
        except httpx.TimeoutException:
            return {"error": f"Request to {url} timed out"}
        except httpx.RequestError as e:
            return {"error": f"Network error: {e}"}

        result = {
            "url": url,
            "status": page.status,
            "content_type": page.content_type,
        }
        result.update(
            extractor.extract(
                page.text,
                fields=extract,
                max_chars=max_content_chars or extractor.DEFAULT_MAX_CHARS,
            )
        )
        return result
