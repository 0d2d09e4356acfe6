"""
Job detail resolution for a single job page.

A job page can carry the same posting in up to three places, any of which
may be missing:

- B: a wrapper object in the embedded payload holding a nested ``posting``
- A: the first payload object that looks like a job record (id + title)
- C: the schema.org JobPosting in the page's ld+json block

Each is normalized to the same partial record and the results are merged
field by field with precedence B > A > C. Only a missing or undecodable
embedded payload fails the lookup.
"""

from __future__ import annotations

import logging
from typing import Any

from jobs_agent_tools.http import HTML_ACCEPT, fetch
from jobs_agent_tools.structured import deep_find, merge_by_precedence

from .models import JobDetail
from .payload import extract_app_data, find_apply_url, find_ld_job_posting, job_id_from_url

logger = logging.getLogger(__name__)

DETAIL_FIELDS = (
    "id",
    "title",
    "department",
    "team",
    "location",
    "employment_type",
    "published_date",
    "compensation_summary",
    "description_html",
)


def looks_like_job(job_id: str | None):
    """Predicate for payload nodes shaped like the job record for ``job_id``."""

    def predicate(node: Any) -> bool:
        if not isinstance(node, dict):
            return False
        if not node.get("id") or not isinstance(node.get("title"), str):
            return False
        return job_id is None or node["id"] == job_id

    return predicate


def has_nested_posting(node: Any) -> bool:
    """Predicate for wrapper nodes holding a titled ``posting`` object."""
    if not isinstance(node, dict):
        return False
    posting = node.get("posting")
    return isinstance(posting, dict) and isinstance(posting.get("title"), str)


def _join(value: Any) -> Any:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return value


def from_payload_posting(posting: dict | None) -> dict | None:
    """Normalize an Ashby posting object to detail fields."""
    if not posting:
        return None
    compensation = posting.get("compensationTierSummary")
    if posting.get("shouldDisplayCompensationOnJobBoard") is False:
        compensation = None
    return {
        "id": posting.get("id"),
        "title": posting.get("title"),
        "department": posting.get("departmentName"),
        "team": posting.get("teamName"),
        "location": posting.get("locationName"),
        "employment_type": posting.get("employmentType"),
        "published_date": posting.get("publishedDate"),
        "compensation_summary": compensation,
        "description_html": posting.get("descriptionHtml"),
    }


def from_ld_posting(posting: dict | None) -> dict | None:
    """Normalize a schema.org JobPosting to detail fields."""
    if not posting:
        return None
    return {
        "title": posting.get("title"),
        "employment_type": _join(posting.get("employmentType")),
        "published_date": posting.get("datePosted"),
        "description_html": posting.get("description"),
    }


def resolve_candidates(app_data: dict, html: str, job_id: str | None) -> list[dict | None]:
    """Candidate records in precedence order: B, A, C."""
    wrapper = deep_find(app_data, has_nested_posting)
    nested = wrapper["posting"] if wrapper else None
    record = deep_find(app_data, looks_like_job(job_id))
    ld_posting = find_ld_job_posting(html)
    logger.debug(
        "Job detail sources: nested=%s record=%s ld_json=%s",
        nested is not None,
        record is not None,
        ld_posting is not None,
    )
    return [from_payload_posting(nested), from_payload_posting(record), from_ld_posting(ld_posting)]


def get_job_detail(job_url: str) -> JobDetail:
    """
    Fetch a job page and reconcile its data sources into one record.

    Raises:
        FetchFailure, PayloadNotFound, MalformedPayload
    """
    page = fetch(job_url, accept=HTML_ACCEPT)
    app_data = extract_app_data(page.text)
    job_id = job_id_from_url(job_url)

    merged = merge_by_precedence(resolve_candidates(app_data, page.text, job_id), DETAIL_FIELDS)
    return JobDetail(
        url=job_url,
        id=job_id or merged["id"],
        title=merged["title"] or "",
        department=merged["department"],
        team=merged["team"],
        location=merged["location"],
        employment_type=merged["employment_type"],
        published_date=merged["published_date"],
        compensation_summary=merged["compensation_summary"],
        description_html=merged["description_html"] or "",
        apply_url=find_apply_url(page.text, job_url),
    )
