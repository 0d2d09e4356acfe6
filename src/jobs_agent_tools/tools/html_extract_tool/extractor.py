"""
Metadata extraction from raw HTML.

Each field is computed independently; a selector that matches nothing
yields an empty value rather than an error. No JavaScript is executed.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

ALL_FIELDS = ("title", "description", "headings", "links", "text")
DEFAULT_MAX_CHARS = 10_000
MAX_LINKS = 500

_WHITESPACE = re.compile(r"\s+")
_HIDDEN_ANCESTORS = {"head", "title", "script", "style", "noscript", "template"}


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to one space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def truncate(text: str, limit: int) -> str:
    """Slice to at most ``limit`` characters, ignoring word boundaries."""
    return text[:limit]


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    return tag.get("content") or ""


def extract_title(soup: BeautifulSoup) -> str:
    title = _meta_content(soup, property="og:title")
    if not title and soup.title is not None:
        title = soup.title.get_text()
    return title.strip()


def extract_description(soup: BeautifulSoup) -> str:
    description = _meta_content(soup, name="description") or _meta_content(
        soup, property="og:description"
    )
    return description.strip()


def _heading_texts(soup: BeautifulSoup, name: str) -> list[str]:
    texts = (el.get_text().strip() for el in soup.find_all(name))
    return [text for text in texts if text]


def extract_headings(soup: BeautifulSoup) -> dict[str, list[str]]:
    return {"h1": _heading_texts(soup, "h1"), "h2": _heading_texts(soup, "h2")}


def extract_links(soup: BeautifulSoup, limit: int = MAX_LINKS) -> list[dict[str, str]]:
    """Anchors with a non-empty href, in document order, hrefs left unresolved."""
    links = []
    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href") or ""
        if not href:
            continue
        links.append({"href": href, "text": anchor.get_text().strip()})
        if len(links) >= limit:
            break
    return links


def body_text(soup: BeautifulSoup) -> str:
    """Visible text of the document body with whitespace collapsed."""
    root: Tag = soup.body if soup.body is not None else soup
    parts = []
    for string in root.find_all(string=True):
        if isinstance(string, PreformattedString) or _is_hidden(string):
            continue
        parts.append(str(string))
    return collapse_whitespace("".join(parts))


def _is_hidden(string: NavigableString) -> bool:
    # html.parser builds no <body> for documents that omit the tag,
    # so head content has to be excluded by ancestry.
    return any(parent.name in _HIDDEN_ANCESTORS for parent in string.parents)


def extract(
    html: str,
    fields: Iterable[str] | None = None,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> dict:
    """
    Extract the requested metadata fields from an HTML document.

    Args:
        html: Raw HTML
        fields: Subset of ALL_FIELDS; all of them when None
        max_chars: Character limit applied to the "text" field

    Returns:
        Dict holding only the requested keys
    """
    requested = set(ALL_FIELDS if fields is None else fields)
    soup = parse_html(html)
    out: dict = {}

    if "title" in requested:
        out["title"] = extract_title(soup)
    if "description" in requested:
        out["description"] = extract_description(soup)
    if "headings" in requested:
        out["headings"] = extract_headings(soup)
    if "links" in requested:
        out["links"] = extract_links(soup)
    if "text" in requested:
        out["text"] = truncate(body_text(soup), max_chars)

    return out
