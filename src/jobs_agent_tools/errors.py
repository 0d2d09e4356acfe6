"""
Error types raised by the fetch, parse and document-reading operations.

Tool functions registered with the MCP server catch these and return
``{"error": ..., "error_type": ...}`` dicts instead of raising.
"""

from __future__ import annotations


class ToolError(Exception):
    """Base class for failures scoped to a single tool invocation."""

    error_type = "tool_error"

    def to_dict(self) -> dict:
        return {"error": str(self), "error_type": self.error_type}


class FetchFailure(ToolError):
    """Raised when an HTTP response status is outside the 2xx range."""

    error_type = "fetch_failure"

    def __init__(self, url: str, status: int, status_text: str = ""):
        self.url = url
        self.status = status
        self.status_text = status_text
        super().__init__(f"Failed to fetch {url}: {status} {status_text}".rstrip())

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["status"] = self.status
        payload["status_text"] = self.status_text
        return payload


class PayloadNotFound(ToolError):
    """Raised when a page carries no embedded ``window.__appData`` payload."""

    error_type = "payload_not_found"


class MalformedPayload(ToolError):
    """Raised when the embedded payload is present but cannot be decoded."""

    error_type = "malformed_payload"


class MissingUrl(ToolError):
    """Raised when no document URL was given and none is configured."""

    error_type = "missing_url"


class MalformedLink(ToolError):
    """Raised when an href cannot be resolved to an absolute URL.

    Recovered by callers; never surfaced from a tool.
    """

    error_type = "malformed_link"
