"""
HTML Extract Tool - Fetch a web page and extract title, description,
headings, links and plain text from its HTML.
"""

from .html_extract_tool import register_tools

__all__ = ["register_tools"]
