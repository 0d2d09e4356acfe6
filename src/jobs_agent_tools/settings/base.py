"""
Base classes for settings management.

Contains the core infrastructure: SettingSpec and SettingsStore.
Setting specs are defined in separate category files (documents.py, ...).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

_LIST_SEPARATOR = re.compile(r"\s*,\s*")


@dataclass
class SettingSpec:
    """Specification for a single configuration value."""

    env_var: str
    """Environment variable name (e.g., 'GOOGLE_DOC_URL')"""

    tools: list[str] = field(default_factory=list)
    """Tool names that read this setting (e.g., ['read_public_google_doc'])"""

    multi_value: bool = False
    """Whether the value is a comma-separated list"""

    description: str = ""
    """Human-readable description of what this setting controls"""


class SettingsStore:
    """
    Reads settings by logical name from the environment or a .env file.

    Usage:
        # Production
        settings = SettingsStore()
        doc_url = settings.get("google_doc_url")

        # Testing
        settings = SettingsStore.for_testing({"google_doc_url": "https://..."})
    """

    def __init__(
        self,
        specs: dict[str, SettingSpec] | None = None,
        _overrides: dict[str, str] | None = None,
        dotenv_path: Path | None = None,
    ):
        """
        Initialize the settings store.

        Args:
            specs: Setting specifications (defaults to SETTING_SPECS)
            _overrides: Internal - used by for_testing() to inject test values
            dotenv_path: Optional path to .env file (defaults to cwd/.env)
        """
        if specs is None:
            # Lazy import to avoid circular dependency
            from . import SETTING_SPECS

            specs = SETTING_SPECS
        self._specs = specs
        self._overrides = _overrides or {}
        self._dotenv_path = dotenv_path

    @classmethod
    def for_testing(
        cls,
        overrides: dict[str, str],
        specs: dict[str, SettingSpec] | None = None,
        dotenv_path: Path | None = None,
    ) -> SettingsStore:
        """
        Create a SettingsStore with test values.

        Args:
            overrides: Dict mapping setting names to test values
            specs: Optional custom specs (defaults to SETTING_SPECS)
            dotenv_path: Optional path to .env file
                (use non-existent path to isolate from real .env)
        """
        return cls(specs=specs, _overrides=overrides, dotenv_path=dotenv_path)

    def _get_raw(self, name: str) -> str | None:
        """Get a setting from overrides, os.environ, or .env file.

        Priority order:
        1. Test overrides (for testing)
        2. os.environ (explicit environment variables take precedence)
        3. .env file (re-read on every call)
        """
        if name in self._overrides:
            return self._overrides[name]

        spec = self._specs[name]
        env_value = os.environ.get(spec.env_var)
        if env_value:
            return env_value

        return self._read_from_dotenv(spec.env_var)

    def _read_from_dotenv(self, env_var: str) -> str | None:
        """Read a single env var from .env file without modifying os.environ."""
        dotenv_path = self._dotenv_path or Path.cwd() / ".env"
        if not dotenv_path.exists():
            return None

        values = dotenv_values(dotenv_path)
        return values.get(env_var)

    def get(self, name: str) -> str | None:
        """
        Get a setting value by logical name.

        Args:
            name: Logical setting name (e.g., "google_doc_url")

        Returns:
            The value, or None if not set or empty

        Raises:
            KeyError: If the setting name is not in specs
        """
        if name not in self._specs:
            raise KeyError(f"Unknown setting '{name}'. Available: {list(self._specs.keys())}")

        value = self._get_raw(name)
        return value or None

    def get_list(self, name: str) -> list[str]:
        """
        Get a comma-separated setting as a list of non-empty entries.

        Raises:
            KeyError: If the setting name is not in specs
            ValueError: If the setting is not declared multi_value
        """
        if not self.get_spec(name).multi_value:
            raise ValueError(f"Setting '{name}' is not a comma-separated list")
        value = self.get(name)
        if not value:
            return []
        return [item for item in _LIST_SEPARATOR.split(value.strip()) if item]

    def get_spec(self, name: str) -> SettingSpec:
        """Get the spec for a setting."""
        if name not in self._specs:
            raise KeyError(f"Unknown setting '{name}'")
        return self._specs[name]

    def is_available(self, name: str) -> bool:
        """Check if a setting is set and non-empty."""
        return self.get(name) is not None

    def env_vars_for_tool(self, tool_name: str) -> list[str]:
        """Environment variables read by a tool, for help messages."""
        return [spec.env_var for spec in self._specs.values() if tool_name in spec.tools]
