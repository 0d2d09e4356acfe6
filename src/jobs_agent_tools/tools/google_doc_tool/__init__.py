"""
Google Doc Tool - Read public Google Docs as plain text or HTML.

Supports direct document links, published-to-web links and arbitrary
public pages, with configurable default links.
"""

from .google_doc_tool import register_tools

__all__ = ["register_tools"]
