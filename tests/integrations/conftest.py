"""Shared fixtures and discovery utilities for registration tests.

Discovers all tool modules under jobs_agent_tools.tools and provides
parameterization data for conformance testing.
"""

from __future__ import annotations

import importlib
import inspect
from pathlib import Path

from fastmcp import FastMCP

# --- Tool Module Discovery ---

TOOLS_SRC = Path(__file__).resolve().parent.parent.parent / "src" / "jobs_agent_tools" / "tools"


def _discover_tool_modules() -> list[tuple[str, str]]:
    """Discover all tool module import paths and short names.

    Scans jobs_agent_tools/tools/ for packages that re-export ``register_tools``
    in their ``__init__.py``.

    Returns:
        List of (import_path, short_name) tuples.
        E.g. ("jobs_agent_tools.tools.job_board_tool", "job_board_tool")
    """
    modules: list[tuple[str, str]] = []

    for item in sorted(TOOLS_SRC.iterdir()):
        if item.name.startswith("_") or item.name == "__pycache__":
            continue

        if item.is_dir() and (item / "__init__.py").exists():
            init_text = (item / "__init__.py").read_text()
            if "register_tools" in init_text:
                modules.append((f"jobs_agent_tools.tools.{item.name}", item.name))

    return modules


# Computed once at import time
TOOL_MODULES: list[tuple[str, str]] = _discover_tool_modules()
TOOL_MODULE_IDS: list[str] = [name for _, name in TOOL_MODULES]


def register_module(import_path: str, mcp: FastMCP) -> None:
    """Register one tool module with defaults for every optional parameter."""
    mod = importlib.import_module(import_path)
    sig = inspect.signature(mod.register_tools)
    if "settings" in sig.parameters:
        mod.register_tools(mcp, settings=None)
    else:
        mod.register_tools(mcp)


def _get_module_to_tools_mapping() -> dict[str, list[str]]:
    """Map each tool module to the tool names it registers.

    Registers each module's tools individually into a fresh FastMCP instance
    and collects the tool names that appear.
    """
    mapping: dict[str, list[str]] = {}

    for import_path, short_name in TOOL_MODULES:
        mcp = FastMCP("discovery")
        register_module(import_path, mcp)
        mapping[short_name] = list(mcp._tool_manager._tools.keys())

    return mapping


# Computed once at import time
MODULE_TO_TOOLS: dict[str, list[str]] = _get_module_to_tools_mapping()
