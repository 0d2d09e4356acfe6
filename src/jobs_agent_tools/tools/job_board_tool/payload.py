"""
Recovery of data embedded in server-rendered job board pages.

Ashby renders its state as ``window.__appData = {...};`` inside a script
block and, on job pages, a schema.org JobPosting in an
``application/ld+json`` block. Both are read from the raw HTML without
executing any script. Upstream markup is not under our control, so the
patterns here describe the current page shape only.
"""

from __future__ import annotations

import json
import logging
import re
from urllib.parse import urljoin, urlsplit

from jobs_agent_tools.errors import MalformedLink, MalformedPayload, PayloadNotFound

logger = logging.getLogger(__name__)

_APP_DATA_ASSIGNMENT = re.compile(r"window\.__appData\s*=\s*(?=\{)")
_LD_JSON_BLOCK = re.compile(
    r"<script[^>]*type=[\"']application/ld\+json[\"'][^>]*>(.*?)</script>",
    re.IGNORECASE | re.DOTALL,
)
_APPLY_ANCHOR = re.compile(
    r"<a[^>]+href=[\"']([^\"']+)[\"'][^>]*>([^<]*apply[^<]*)</a>",
    re.IGNORECASE,
)
_decoder = json.JSONDecoder()


def extract_app_data(html: str) -> dict:
    """
    Decode the ``window.__appData`` object assigned in the page.

    Raises:
        PayloadNotFound: If the page has no such assignment
        MalformedPayload: If the assigned object is not valid JSON
    """
    match = _APP_DATA_ASSIGNMENT.search(html)
    if match is None:
        raise PayloadNotFound("Ashby inline appData not found")
    try:
        data, _ = _decoder.raw_decode(html, match.end())
    except json.JSONDecodeError as e:
        raise MalformedPayload(f"Ashby inline appData is not valid JSON: {e.msg}") from e
    return data


def _is_job_posting(node: object) -> bool:
    if not isinstance(node, dict):
        return False
    kind = node.get("@type")
    if isinstance(kind, list):
        return "JobPosting" in kind
    return kind == "JobPosting"


def find_ld_job_posting(html: str) -> dict | None:
    """
    Return the JobPosting from the first ld+json block, or None.

    The block may hold the posting itself, a list of entities, or an
    ``@graph`` container. An undecodable block counts as absent.
    """
    match = _LD_JSON_BLOCK.search(html)
    if match is None:
        return None
    try:
        data = json.loads(match.group(1))
    except json.JSONDecodeError:
        logger.debug("Ignoring undecodable ld+json block")
        return None

    if isinstance(data, dict):
        graph = data.get("@graph")
        entities = [data, *graph] if isinstance(graph, list) else [data]
    elif isinstance(data, list):
        entities = data
    else:
        return None
    return next((e for e in entities if _is_job_posting(e)), None)


def resolve_link(href: str, base_url: str) -> str:
    """
    Resolve an href against the page it appeared on.

    Raises:
        MalformedLink: If the result is not an absolute http(s) URL
    """
    try:
        resolved = urljoin(base_url, href.strip())
        parts = urlsplit(resolved)
    except ValueError as e:
        raise MalformedLink(f"Cannot resolve link {href!r}: {e}") from e
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise MalformedLink(f"Not an http(s) link: {href!r}")
    return resolved


def find_apply_url(html: str, page_url: str) -> str | None:
    """Absolute URL of the first anchor whose text mentions "apply"."""
    match = _APPLY_ANCHOR.search(html)
    if match is None:
        return None
    try:
        return resolve_link(match.group(1), page_url)
    except MalformedLink as e:
        logger.debug("Dropping apply link: %s", e)
        return None


def job_id_from_url(url: str) -> str | None:
    """Last non-empty path segment of a job page URL."""
    try:
        path = urlsplit(url).path
    except ValueError:
        return None
    segments = [segment for segment in path.split("/") if segment]
    return segments[-1] if segments else None
