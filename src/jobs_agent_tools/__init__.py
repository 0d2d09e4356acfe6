"""
Jobs Agent Tools - Tool library for a job-seeker assistant.

Tools fetch public web pages, job board listings, job details and public
documents so a language model can answer questions about open roles.

Usage:
    from fastmcp import FastMCP
    from jobs_agent_tools.tools import register_all_tools
    from jobs_agent_tools.settings import SettingsStore

    mcp = FastMCP("my-server")
    register_all_tools(mcp, settings=SettingsStore())
"""

__version__ = "0.1.0"

# Errors and settings (no fastmcp dependency)
from .errors import (
    FetchFailure,
    MalformedLink,
    MalformedPayload,
    MissingUrl,
    PayloadNotFound,
    ToolError,
)
from .settings import SETTING_SPECS, SettingSpec, SettingsStore


def __getattr__(name: str):
    """Lazy import for tools that require fastmcp."""
    if name == "register_all_tools":
        from .tools import register_all_tools

        return register_all_tools
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Errors
    "ToolError",
    "FetchFailure",
    "PayloadNotFound",
    "MalformedPayload",
    "MissingUrl",
    "MalformedLink",
    # Settings
    "SettingsStore",
    "SettingSpec",
    "SETTING_SPECS",
    # MCP registration (lazy loaded)
    "register_all_tools",
]
