"""Normalize partial profiles into fully populated aggregates.

Defaulting happens here, once, so the generators never special-case a
missing section: a section is always either real data or a complete
sample.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from resume_forge.models.profile import (
    Education,
    Experience,
    Links,
    PartialProfile,
    Person,
    ProfileAggregate,
    Project,
)

__all__ = [
    "SAMPLE_EDUCATION",
    "SAMPLE_EXPERIENCE",
    "SAMPLE_LINKS",
    "SAMPLE_PERSON",
    "SAMPLE_PROJECTS",
    "normalize",
    "parse_work_done",
]

logger = logging.getLogger(__name__)

_BULLET_SPLIT = re.compile(r"\n|•|●|·")

SAMPLE_PERSON = Person(first="John", last="Doe")

SAMPLE_EXPERIENCE = Experience(
    company="Apple",
    title="Software Engineer",
    start_date="June 2005",
    end_date="Aug 2007",
    location="Cupertino, CA",
    work_done=(
        "Reduced time to render user buddy lists by 75% by implementing a prediction algorithm",
        "Integrated iChat with Spotlight Search by creating a tool to extract metadata from "
        "saved chat transcripts and provide metadata to a system-wide search database",
        "Redesigned chat file format and implemented backward compatibility for search",
    ),
    tools_used=("Objective-C", "Cocoa", "SQLite"),
)

SAMPLE_EDUCATION = (
    Education(
        school="University of Pennsylvania",
        degree="BS",
        field="Computer Science",
        start_date="Sept 2000",
        end_date="May 2005",
        location="Philadelphia, PA",
        description="Coursework: Computer Architecture, Comparison of Learning Algorithms, "
        "Computational Theory",
    ),
)

SAMPLE_PROJECTS = (
    Project(
        name="Multi-User Drawing Tool",
        description="Developed an electronic classroom where multiple users can simultaneously "
        'view and draw on a "chalkboard" with each person\'s edits synchronized',
        topics=("collaboration", "real-time"),
        tools=("C++", "MFC"),
        organization_or_owner="Personal",
        landing_page_link="https://github.com/name/repo",
    ),
    Project(
        name="Synchronized Desktop Calendar",
        description="Developed a desktop calendar with globally shared and synchronized "
        "calendars, allowing users to schedule meetings with other users",
        topics=("scheduling",),
        tools=("C#", ".NET", "SQL", "XML"),
        organization_or_owner="Personal",
        landing_page_link="https://github.com/name/repo",
    ),
)

SAMPLE_LINKS = Links(
    portfolio="https://yourwebsite.com",
    github="https://github.com/yourusername",
    linkedin="https://linkedin.com/in/yourusername",
    handle="yourusername",
)


# ---------------------------------------------------------------------------
# Field coercion


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _texts(values: Any) -> tuple[str, ...]:
    """Coerce a list-ish value to a tuple of non-blank strings."""
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, Iterable):
        return ()
    return tuple(t for t in (_text(v) for v in values) if t)


def parse_work_done(work_done: Any) -> tuple[str, ...]:
    """Parse a ``work_done`` field that might be a list or a string.

    Strings are read as a JSON array first, then split on newlines and
    bullet glyphs.
    """
    if not work_done:
        return ()
    if not isinstance(work_done, str):
        return _texts(work_done)

    try:
        parsed = json.loads(work_done)
    except (json.JSONDecodeError, TypeError):
        parsed = None
    if isinstance(parsed, list):
        return _texts(parsed)

    return tuple(item.strip() for item in _BULLET_SPLIT.split(work_done) if item.strip())


# ---------------------------------------------------------------------------
# Section builders


def _section(raw: Any, name: str) -> Mapping[str, Any]:
    """Return *raw* if it is an object, an empty mapping otherwise."""
    if raw is None or isinstance(raw, Mapping):
        return raw or {}
    logger.warning("Ignoring %s section that is not an object: %r", name, raw)
    return {}


def _entries(raw: Any, name: str) -> Iterable[Any]:
    if raw is None or isinstance(raw, (list, tuple)):
        return raw or ()
    logger.warning("Ignoring %s section that is not a list: %r", name, raw)
    return ()


def _person(raw: Mapping[str, Any] | None) -> tuple[Person, bool]:
    raw = _section(raw, "person")
    person = Person(
        first=_text(raw.get("first")),
        middle=_text(raw.get("middle")),
        last=_text(raw.get("last")),
        github_handle=_text(raw.get("github_handle")),
    )
    if person.full_name:
        return person, False
    return Person(
        first=SAMPLE_PERSON.first,
        last=SAMPLE_PERSON.last,
        github_handle=person.github_handle,
    ), True


def _experience(raw: Mapping[str, Any] | None) -> tuple[Experience, bool]:
    raw = _section(raw, "experience")
    if not raw:
        return SAMPLE_EXPERIENCE, True
    experience = Experience(
        company=_text(raw.get("company")),
        title=_text(raw.get("title")),
        start_date=_text(raw.get("start_date")),
        end_date=_text(raw.get("end_date")),
        location=_text(raw.get("location")),
        work_done=parse_work_done(raw.get("work_done")),
        tools_used=_texts(raw.get("tools_used")),
    )
    if not (experience.company or experience.title):
        return SAMPLE_EXPERIENCE, True
    return experience, False


def _education(raw: Any) -> tuple[tuple[Education, ...], bool]:
    entries: list[Education] = []
    for item in _entries(raw, "education"):
        if not isinstance(item, Mapping):
            logger.warning("Dropping education entry that is not an object: %r", item)
            continue
        school = _text(item.get("school"))
        if not school:
            logger.warning("Dropping education entry without a school: %r", item)
            continue
        entries.append(
            Education(
                school=school,
                degree=_text(item.get("degree")),
                field=_text(item.get("field")),
                start_date=_text(item.get("start_date")),
                end_date=_text(item.get("end_date")),
                location=_text(item.get("location")),
                description=_text(item.get("description")),
            )
        )
    if not entries:
        return SAMPLE_EDUCATION, True
    return tuple(entries), False


def _projects(raw: Any) -> tuple[tuple[Project, ...], bool]:
    entries: list[Project] = []
    for item in _entries(raw, "projects"):
        if not isinstance(item, Mapping):
            logger.warning("Dropping project entry that is not an object: %r", item)
            continue
        name = _text(item.get("name"))
        if not name:
            logger.warning("Dropping project entry without a name: %r", item)
            continue
        entries.append(
            Project(
                name=name,
                description=_text(item.get("description")),
                topics=_texts(item.get("topics")),
                tools=_texts(item.get("tools")),
                organization_or_owner=_text(item.get("organization_or_owner")),
                landing_page_link=_text(item.get("landing_page_link")),
                created_at=_text(item.get("created_at")),
                updated_at=_text(item.get("updated_at")),
            )
        )
    if not entries:
        return SAMPLE_PROJECTS, True
    return tuple(entries), False


def _links(raw: Mapping[str, Any] | None, person: Person) -> tuple[Links, bool]:
    raw = _section(raw, "links")
    handle = _text(raw.get("handle")) or person.github_handle
    github = _text(raw.get("github"))
    if not github and handle:
        github = f"https://github.com/{handle}"
    links = Links(
        portfolio=_text(raw.get("portfolio")),
        github=github,
        linkedin=_text(raw.get("linkedin")),
        handle=handle,
    )
    if not (links.portfolio or links.github or links.linkedin or links.handle):
        return SAMPLE_LINKS, True
    return links, False


# ---------------------------------------------------------------------------
# Public API


def normalize(partial: PartialProfile | Mapping[str, Any] | None) -> ProfileAggregate:
    """Build a fully populated :class:`ProfileAggregate` from *partial*.

    Each top-level section is defaulted independently: a missing section,
    or one lacking its required field, is replaced by complete sample
    content and recorded in ``sample_sections``.  Never raises for
    missing data.
    """
    partial = partial or {}
    samples: set[str] = set()

    person, sampled = _person(partial.get("person"))
    if sampled:
        samples.add("person")

    experience, sampled = _experience(partial.get("experience"))
    if sampled:
        samples.add("experience")

    education, sampled = _education(partial.get("education"))
    if sampled:
        samples.add("education")

    projects, sampled = _projects(partial.get("projects"))
    if sampled:
        samples.add("projects")

    links, sampled = _links(partial.get("links"), person)
    if sampled:
        samples.add("links")

    if samples:
        logger.debug("Using sample content for sections: %s", ", ".join(sorted(samples)))

    return ProfileAggregate(
        person=person,
        experience=experience,
        education=education,
        projects=projects,
        links=links,
        sample_sections=frozenset(samples),
    )
