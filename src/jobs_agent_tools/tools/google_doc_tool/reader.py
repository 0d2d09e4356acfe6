"""
Public document reading for Google Docs links and arbitrary public pages.

Link shapes:
- ``/document/d/e/<id>/...``: published to the web, read from the embed page
- ``/document/d/<id>/...``: direct edit link, read from the export endpoint
- anything else: fetched as-is
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Literal

from jobs_agent_tools.errors import MissingUrl
from jobs_agent_tools.http import HTML_ACCEPT, TEXT_ACCEPT, fetch
from jobs_agent_tools.settings import SettingsStore

from ..html_extract_tool.extractor import body_text, parse_html, truncate

logger = logging.getLogger(__name__)

Format = Literal["text", "html"]
Mode = Literal["direct-export", "published-web", "raw-fetch"]

DOCS_BASE = "https://docs.google.com/document/d"
DEFAULT_LIMITS: dict[str, int] = {"text": 100_000, "html": 200_000}
# Export endpoint names for each output format
EXPORT_FORMATS: dict[str, str] = {"text": "txt", "html": "html"}

_PUBLISHED_ID = re.compile(r"/document/d/e/([a-zA-Z0-9_-]+)")
_DOCUMENT_ID = re.compile(r"/document/d/([a-zA-Z0-9_-]+)")


@dataclass(frozen=True)
class DocumentContent:
    source_url: str
    resolved_url: str
    mode: Mode
    format: Format
    content: str
    length: int

    def to_dict(self) -> dict:
        return asdict(self)


def choose_url(url: str | None, settings: SettingsStore) -> str:
    """
    Pick the document to read: explicit url, GOOGLE_DOC_URL, then the first
    entry of GOOGLE_DOC_URLS.

    Raises:
        MissingUrl: If none of them is set
    """
    if url:
        return url
    single = settings.get("google_doc_url")
    if single:
        return single
    candidates = settings.get_list("google_doc_urls")
    if candidates:
        return candidates[0]
    raise MissingUrl(
        "Missing URL. Provide 'url' or set GOOGLE_DOC_URL (single) "
        "or GOOGLE_DOC_URLS (comma-separated)."
    )


def resolve_endpoint(url: str, fmt: Format) -> tuple[str, Mode]:
    """Map a document link to the URL to fetch and the access mode."""
    published = _PUBLISHED_ID.search(url)
    if published:
        return f"{DOCS_BASE}/e/{published.group(1)}/pub?embedded=true", "published-web"
    document = _DOCUMENT_ID.search(url)
    if document:
        export_url = f"{DOCS_BASE}/{document.group(1)}/export?format={EXPORT_FORMATS[fmt]}"
        return export_url, "direct-export"
    return url, "raw-fetch"


def read_document(
    url: str | None = None,
    fmt: Format = "text",
    max_chars: int | None = None,
    settings: SettingsStore | None = None,
) -> DocumentContent:
    """
    Read a public document as plain text or HTML.

    Args:
        url: Document link; falls back to configured defaults
        fmt: "text" or "html"
        max_chars: Character limit (default 100000 for text, 200000 for html)
        settings: Settings source for the default links

    Raises:
        MissingUrl: If no url is given or configured (before any request)
        FetchFailure: If the document endpoint returns a non-2xx status
    """
    source_url = choose_url(url, settings or SettingsStore())
    resolved_url, mode = resolve_endpoint(source_url, fmt)
    logger.debug("Reading %s via %s (%s)", source_url, resolved_url, mode)

    page = fetch(resolved_url, accept=HTML_ACCEPT if fmt == "html" else TEXT_ACCEPT)
    content = page.text
    if mode != "direct-export" and fmt == "text":
        content = body_text(parse_html(content))

    content = truncate(content, max_chars or DEFAULT_LIMITS[fmt])
    return DocumentContent(
        source_url=source_url,
        resolved_url=resolved_url,
        mode=mode,
        format=fmt,
        content=content,
        length=len(content),
    )
