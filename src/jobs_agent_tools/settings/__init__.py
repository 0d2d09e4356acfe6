"""
Settings for jobs agent tools.

Each category module defines a dict of SettingSpec entries; they are merged
into SETTING_SPECS here.

Usage:
    from jobs_agent_tools.settings import SettingsStore

    settings = SettingsStore()
    settings.get("google_doc_url")
"""

from .base import SettingSpec, SettingsStore
from .documents import DOCUMENT_SETTINGS

SETTING_SPECS = {
    **DOCUMENT_SETTINGS,
}

__all__ = [
    "SettingSpec",
    "SettingsStore",
    "SETTING_SPECS",
    "DOCUMENT_SETTINGS",
]
