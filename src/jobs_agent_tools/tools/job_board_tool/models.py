"""Records produced by the job board parsers."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class JobSummary:
    """One open role as listed on the job board page."""

    id: str
    title: str
    job_url: str
    department: str | None = None
    team: str | None = None
    location: str | None = None
    workplace_type: str | None = None
    employment_type: str | None = None
    is_listed: bool | None = None
    published_date: str | None = None
    compensation_summary: str | None = None
    """Only set when the board marks compensation as displayable."""

    @classmethod
    def from_posting(cls, posting: dict, source_url: str) -> JobSummary:
        display_compensation = bool(posting.get("shouldDisplayCompensationOnJobBoard"))
        return cls(
            id=posting["id"],
            title=posting.get("title") or "",
            job_url=f"{source_url}/{posting['id']}",
            department=posting.get("departmentName"),
            team=posting.get("teamName"),
            location=posting.get("locationName"),
            workplace_type=posting.get("workplaceType"),
            employment_type=posting.get("employmentType"),
            is_listed=posting.get("isListed"),
            published_date=posting.get("publishedDate"),
            compensation_summary=(
                posting.get("compensationTierSummary") if display_compensation else None
            ),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class JobDetail:
    """A single job page reconciled from its embedded data sources."""

    url: str
    title: str = ""
    id: str | None = None
    department: str | None = None
    team: str | None = None
    location: str | None = None
    employment_type: str | None = None
    published_date: str | None = None
    compensation_summary: str | None = None
    description_html: str = ""
    apply_url: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)
