"""Shared fixtures for jobs agent tool tests."""

from __future__ import annotations

import json

import httpx
import pytest
from fastmcp import FastMCP


class DummyResponse:
    """Simple mock response for httpx.get."""

    def __init__(
        self,
        status_code: int = 200,
        text: str = "",
        content_type: str = "text/html; charset=utf-8",
        reason_phrase: str = "OK",
    ):
        self.status_code = status_code
        self.text = text
        self.headers = {"content-type": content_type}
        self.reason_phrase = reason_phrase


class FakeWeb:
    """Serves canned responses by URL and records every request made."""

    def __init__(self):
        self.pages: dict[str, DummyResponse] = {}
        self.requests: list[dict] = []

    def add(self, url: str, text: str = "", status_code: int = 200, **kwargs) -> None:
        self.pages[url] = DummyResponse(status_code=status_code, text=text, **kwargs)

    def get(self, url: str, headers=None, timeout=30.0, follow_redirects=False, **kwargs):
        self.requests.append({"url": url, "headers": headers or {}})
        if url not in self.pages:
            return DummyResponse(404, "", reason_phrase="Not Found")
        return self.pages[url]

    @property
    def urls(self) -> list[str]:
        return [request["url"] for request in self.requests]


@pytest.fixture
def mcp() -> FastMCP:
    """Create a FastMCP instance for testing."""
    return FastMCP("test")


@pytest.fixture
def web(monkeypatch) -> FakeWeb:
    """Replace httpx.get with canned pages."""
    fake = FakeWeb()
    monkeypatch.setattr(httpx, "get", fake.get)
    return fake


@pytest.fixture(autouse=True)
def _no_dotenv(tmp_path, monkeypatch):
    """Isolate tests from the project .env file and default document settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GOOGLE_DOC_URL", raising=False)
    monkeypatch.delenv("GOOGLE_DOC_URLS", raising=False)


def app_data_page(app_data: dict, extra_head: str = "", body: str = "") -> str:
    """Render a server-side page embedding ``window.__appData``."""
    return (
        "<!doctype html><html><head>"
        f"{extra_head}"
        f"<script>window.__appData = {json.dumps(app_data)};</script>"
        f"</head><body>{body}</body></html>"
    )


@pytest.fixture
def render_app_data():
    """Page renderer for embedded-payload fixtures."""
    return app_data_page
