"""
Google Doc Tool - Read public Google Docs (or any public page) as text or HTML.

Defaults:
- GOOGLE_DOC_URL: single default document link
- GOOGLE_DOC_URLS: comma-separated links, the first one is used

No authentication: the document must be public or published to the web.
"""

from __future__ import annotations

from typing import Literal

import httpx
from fastmcp import FastMCP

from jobs_agent_tools.errors import MissingUrl, ToolError
from jobs_agent_tools.settings import SettingsStore

from .reader import read_document

MAX_CHARS = 500_000


def register_tools(
    mcp: FastMCP,
    settings: SettingsStore | None = None,
) -> None:
    """Register document reading tools with the MCP server."""

    def _get_settings() -> SettingsStore:
        return settings if settings is not None else SettingsStore()

    @mcp.tool()
    def read_public_google_doc(
        url: str | None = None,
        format: Literal["text", "html", "txt"] = "text",
        max_chars: int | None = None,
    ) -> dict:
        """
        Read content from a public Google Docs link.

        If no url is provided, defaults to GOOGLE_DOC_URL or the first entry of
        GOOGLE_DOC_URLS (comma-separated). Direct document links are read from
        the export endpoint; published-to-web links and other public pages are
        fetched and reduced to plain text unless HTML is requested.

        Args:
            url: Public document link (optional)
            format: "text" (default) or "html"; "txt" is accepted as "text"
            max_chars: Maximum characters to return (1-500000; default 100000
                for text, 200000 for html)

        Returns:
            Dict with source_url, resolved_url, mode (direct-export,
            published-web or raw-fetch), format, content and length.
        """
        if url is not None and not url.startswith(("http://", "https://")):
            return {"error": "url must be an absolute http(s) URL"}
        if max_chars is not None and not 1 <= max_chars <= MAX_CHARS:
            return {"error": f"max_chars must be between 1 and {MAX_CHARS}"}

        fmt = "text" if format == "txt" else format
        doc_settings = _get_settings()
        try:
            document = read_document(url=url, fmt=fmt, max_chars=max_chars, settings=doc_settings)
        except MissingUrl as e:
            result = e.to_dict()
            env_vars = " or ".join(doc_settings.env_vars_for_tool("read_public_google_doc"))
            result["help"] = f"Set {env_vars} environment variable"
            return result
        except ToolError as e:
            return e.to_dict()
        except httpx.TimeoutException:
            return {"error": "Document request timed out"}
        except httpx.RequestError as e:
            return {"error": f"Network error: {e}"}

        return document.to_dict()
