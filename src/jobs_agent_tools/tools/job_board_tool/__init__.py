"""
Job Board Tool - Open roles and job details from an Ashby-hosted job board.

Supports:
- Listing every open role embedded in the board page
- Resolving one job page into a normalized detail record
"""

from .job_board_tool import register_tools

__all__ = ["register_tools"]
