"""Profile contracts consumed by the document generators.

``Partial*`` TypedDicts describe what upstream profile services hand us:
every key is optional.  The frozen dataclasses describe the normalized
:class:`ProfileAggregate` snapshot that every generator and renderer can
rely on being fully populated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict

__all__ = [
    "Education",
    "Experience",
    "Links",
    "PartialEducation",
    "PartialExperience",
    "PartialLinks",
    "PartialPerson",
    "PartialProfile",
    "PartialProject",
    "Person",
    "ProfileAggregate",
    "Project",
]


# ---------------------------------------------------------------------------
# Upstream (partial) shapes


class PartialPerson(TypedDict, total=False):
    first: str
    middle: str
    last: str
    github_handle: str


class PartialExperience(TypedDict, total=False):
    company: str
    title: str
    start_date: str
    end_date: str
    location: str
    work_done: list[str] | str
    tools_used: list[str]


class PartialEducation(TypedDict, total=False):
    school: str
    degree: str
    field: str
    start_date: str
    end_date: str
    location: str
    description: str


class PartialProject(TypedDict, total=False):
    name: str
    description: str
    topics: list[str]
    tools: list[str]
    organization_or_owner: str
    landing_page_link: str
    created_at: str
    updated_at: str


class PartialLinks(TypedDict, total=False):
    portfolio: str
    github: str
    linkedin: str
    handle: str


class PartialProfile(TypedDict, total=False):
    """Top-level bundle supplied by the profile-management services."""

    person: PartialPerson
    experience: PartialExperience
    education: list[PartialEducation]
    projects: list[PartialProject]
    links: PartialLinks


# ---------------------------------------------------------------------------
# Normalized snapshot


@dataclass(frozen=True, slots=True)
class Person:
    first: str = ""
    middle: str = ""
    last: str = ""
    github_handle: str = ""

    @property
    def full_name(self) -> str:
        """Name parts joined by single spaces, skipping blanks."""
        return " ".join(p.strip() for p in (self.first, self.middle, self.last) if p.strip())


@dataclass(frozen=True, slots=True)
class Experience:
    """The single most-recent work experience shown on a resume."""

    company: str = ""
    title: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    work_done: tuple[str, ...] = ()
    tools_used: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Education:
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class Project:
    name: str = ""
    description: str = ""
    topics: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    organization_or_owner: str = ""
    landing_page_link: str = ""
    created_at: str = ""
    updated_at: str = ""


@dataclass(frozen=True, slots=True)
class Links:
    portfolio: str = ""
    github: str = ""
    linkedin: str = ""
    handle: str = ""


@dataclass(frozen=True, slots=True)
class ProfileAggregate:
    """Read-only, fully defaulted profile for one generation/export call.

    Attributes:
        person: Name parts and GitHub handle.
        experience: Most recent work experience.
        education: Education records in display order.
        projects: Project records in display order.
        links: Named profile URLs plus the handle used for the display email.
        sample_sections: Names of the sections that hold sample content
            because the upstream data was missing or incomplete.
    """

    person: Person
    experience: Experience
    education: tuple[Education, ...]
    projects: tuple[Project, ...]
    links: Links
    sample_sections: frozenset[str] = field(default_factory=frozenset)

    def is_sample(self, section: str) -> bool:
        """Return True if *section* was filled with sample content."""
        return section in self.sample_sections
