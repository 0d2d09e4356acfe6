"""Job board listing: every open role embedded in the board page."""

from __future__ import annotations

import logging

from jobs_agent_tools.http import HTML_ACCEPT, fetch
from jobs_agent_tools.structured import first_collection, get_path

from .models import JobSummary
from .payload import extract_app_data

logger = logging.getLogger(__name__)

DEFAULT_BOARD_URL = "https://jobs.ashbyhq.com/Coder"

# The postings list has lived under both keys across board versions.
POSTING_ACCESSORS = (
    lambda data: get_path(data, "jobBoard", "jobPostings"),
    lambda data: get_path(data, "jobPostingList", "jobPostings"),
)


def parse_postings(app_data: dict, source_url: str) -> list[JobSummary]:
    """Project each embedded posting to a JobSummary, keeping source order."""
    jobs = []
    for posting in first_collection(app_data, POSTING_ACCESSORS):
        if not isinstance(posting, dict) or not posting.get("id"):
            logger.debug("Skipping posting without an id")
            continue
        jobs.append(JobSummary.from_posting(posting, source_url))
    return jobs


def list_jobs(board_url: str = DEFAULT_BOARD_URL) -> dict:
    """
    Fetch a job board page and list its open roles.

    Returns:
        Dict with source_url, count and jobs (list of JobSummary dicts)

    Raises:
        FetchFailure, PayloadNotFound, MalformedPayload
    """
    source_url = board_url.rstrip("/")
    page = fetch(source_url, accept=HTML_ACCEPT)
    jobs = parse_postings(extract_app_data(page.text), source_url)
    return {
        "source_url": source_url,
        "count": len(jobs),
        "jobs": [job.to_dict() for job in jobs],
    }
