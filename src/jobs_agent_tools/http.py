"""
HTTP Fetcher - one GET per call with a fixed identifying header set.

No retries and no caching: a non-2xx response raises FetchFailure and
fails the enclosing tool invocation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from .errors import FetchFailure

logger = logging.getLogger(__name__)

USER_AGENT = "jobs-agent/1.0 (+https://github.com/mattvollmer/jobs-agent)"
HTML_ACCEPT = "text/html,application/xhtml+xml"
TEXT_ACCEPT = "text/plain, text/html;q=0.7"
REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class FetchResult:
    """Body and metadata of a successful response."""

    url: str
    status: int
    content_type: str
    text: str


def build_headers(accept: str = HTML_ACCEPT) -> dict[str, str]:
    """Headers sent with every outbound request."""
    return {"User-Agent": USER_AGENT, "Accept": accept}


def fetch(url: str, accept: str = HTML_ACCEPT) -> FetchResult:
    """
    Fetch a URL and return its body.

    Args:
        url: Absolute http(s) URL
        accept: Value of the Accept header

    Returns:
        FetchResult for a 2xx response

    Raises:
        FetchFailure: If the response status is not in the 2xx range
        httpx.RequestError: On transport failures (DNS, connect, timeout)
    """
    logger.debug("GET %s", url)
    response = httpx.get(
        url,
        headers=build_headers(accept),
        timeout=REQUEST_TIMEOUT,
        follow_redirects=True,
    )
    if not 200 <= response.status_code < 300:
        raise FetchFailure(url, response.status_code, response.reason_phrase or "")

    return FetchResult(
        url=url,
        status=response.status_code,
        content_type=response.headers.get("content-type", ""),
        text=response.text,
    )
