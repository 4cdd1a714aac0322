"""Map the backend full-profile payload to a :class:`PartialProfile`.

The profile service returns every work experience, dates as separate
month/year integers and locations as objects.  Resumes show a single
primary experience and plain display strings, so the shape is adapted
here before normalization.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from resume_forge.models.profile import (
    PartialEducation,
    PartialExperience,
    PartialLinks,
    PartialPerson,
    PartialProfile,
    PartialProject,
)
from resume_forge.services.profile_defaults import parse_work_done

__all__ = [
    "format_location",
    "format_month_year",
    "pick_primary_experience",
    "profile_from_full_response",
]

_MONTH_ABBR = [
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def format_month_year(year: Any, month: Any) -> str:
    """Return ``"Aug 2021"`` for ``(2021, 8)``; just the year if the month is unusable."""
    if not year:
        return ""
    try:
        month_index = int(month)
    except (TypeError, ValueError):
        return str(year)
    if 1 <= month_index <= 12:
        return f"{_MONTH_ABBR[month_index]} {year}"
    return str(year)


def format_location(location: Mapping[str, Any] | str | None) -> str:
    """Collapse a ``{city, state, country}`` object into ``"City, State, Country"``."""
    if not location:
        return ""
    if isinstance(location, str):
        return location.strip()
    parts = (location.get("city"), location.get("state"), location.get("country"))
    return ", ".join(str(p).strip() for p in parts if p and str(p).strip())


def _start_key(entry: Mapping[str, Any]) -> tuple[int, int]:
    try:
        return int(entry.get("start_date_year") or 0), int(entry.get("start_date_month") or 0)
    except (TypeError, ValueError):
        return 0, 0


def pick_primary_experience(
    experiences: list[Mapping[str, Any]] | None,
) -> Mapping[str, Any] | None:
    """Return the experience to show: current roles first, then most recent start."""
    if not experiences:
        return None
    ranked = sorted(
        experiences,
        key=lambda e: (bool(e.get("currently_working")), _start_key(e)),
        reverse=True,
    )
    return ranked[0]


def _end_date(entry: Mapping[str, Any], current_flag: str) -> str:
    if entry.get(current_flag):
        return "Present"
    return format_month_year(entry.get("end_date_year"), entry.get("end_date_month"))


def _person(response: Mapping[str, Any]) -> PartialPerson:
    person: PartialPerson = {}
    for key, source in (
        ("first", "first_name"),
        ("middle", "middle_name"),
        ("last", "last_name"),
        ("github_handle", "github_user_name"),
    ):
        value = response.get(source)
        if value:
            person[key] = str(value)
    return person


def _links(response: Mapping[str, Any]) -> PartialLinks:
    raw = response.get("links") or {}
    links: PartialLinks = {}
    portfolio = raw.get("portfolio_link")
    if portfolio:
        links["portfolio"] = portfolio
    github = raw.get("github_link")
    if github:
        links["github"] = github
    linkedin = raw.get("linkedin_link")
    if linkedin:
        links["linkedin"] = linkedin
    handle = raw.get("github_user_name") or response.get("github_user_name")
    if handle:
        links["handle"] = handle
    return links


def _experience(entry: Mapping[str, Any]) -> PartialExperience:
    return {
        "company": entry.get("company_name") or "",
        "title": entry.get("title") or "",
        "start_date": format_month_year(entry.get("start_date_year"), entry.get("start_date_month")),
        "end_date": _end_date(entry, "currently_working"),
        "location": format_location(entry.get("location")),
        "work_done": list(parse_work_done(entry.get("work_done"))),
        "tools_used": list(entry.get("tools_used") or []),
    }


def _education(entry: Mapping[str, Any]) -> PartialEducation:
    return {
        "school": entry.get("school_name") or "",
        "degree": entry.get("degree") or "",
        "field": entry.get("course_field_name") or "",
        "start_date": format_month_year(entry.get("start_date_year"), entry.get("start_date_month")),
        "end_date": _end_date(entry, "currently_studying"),
        "location": format_location(entry.get("location")),
        "description": entry.get("description_general") or "",
    }


def _project(entry: Mapping[str, Any]) -> PartialProject:
    return {
        "name": entry.get("name") or "",
        "description": entry.get("description") or entry.get("github_about") or "",
        "topics": list(entry.get("topics") or []),
        "tools": list(entry.get("tools") or []),
        "organization_or_owner": entry.get("organization") or entry.get("owner") or "",
        "landing_page_link": entry.get("landing_page_link") or "",
        "created_at": str(entry.get("created_at") or ""),
        "updated_at": str(entry.get("updated_at") or ""),
    }


def profile_from_full_response(response: Mapping[str, Any]) -> PartialProfile:
    """Transform a full user-profile API response into a :class:`PartialProfile`.

    Missing or null sections are left out so that normalization can
    substitute sample content for them.
    """
    profile = response.get("profile") or {}
    partial: PartialProfile = {}

    person = _person(response)
    if person:
        partial["person"] = person

    primary = pick_primary_experience(profile.get("work_experience"))
    if primary is not None:
        partial["experience"] = _experience(primary)

    educations = profile.get("education") or []
    if educations:
        partial["education"] = [_education(e) for e in educations]

    projects = profile.get("projects") or []
    if projects:
        partial["projects"] = [_project(p) for p in projects]

    links = _links(response)
    if links:
        partial["links"] = links

    return partial
