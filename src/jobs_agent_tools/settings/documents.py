"""
Document reader settings.

Default public document links used when read_public_google_doc is called
without a url.
"""

from .base import SettingSpec

DOCUMENT_SETTINGS = {
    "google_doc_url": SettingSpec(
        env_var="GOOGLE_DOC_URL",
        tools=["read_public_google_doc"],
        description="Default public Google Doc link for company information",
    ),
    "google_doc_urls": SettingSpec(
        env_var="GOOGLE_DOC_URLS",
        tools=["read_public_google_doc"],
        multi_value=True,
        description="Comma-separated public Google Doc links; the first entry is used",
    ),
}
