"""Neutral document tree shared by the LaTeX and HTML backends.

The tree is built once per call from a :class:`ProfileAggregate` and holds
raw (unescaped) text.  Each backend escapes leaves for its own grammar, so
nothing here is LaTeX- or HTML-specific.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "Entry",
    "Header",
    "Layout",
    "Link",
    "ResumeDocument",
    "Section",
    "SectionKind",
    "SkillGroup",
    "Variant",
    "get_layout",
    "parse_variant",
]


class Variant(str, Enum):
    """Supported document layouts."""

    ROW = "row"
    DEEDY = "deedy"


class SectionKind(str, Enum):
    EDUCATION = "education"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    SKILLS = "skills"
    LINKS = "links"


@dataclass(frozen=True, slots=True)
class Link:
    """A hyperlink: *url* is the target, *display* the visible text."""

    label: str
    url: str
    display: str


@dataclass(frozen=True, slots=True)
class Entry:
    """One dated row of a section (a job, a degree, a project)."""

    title: str
    subtitle: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    link: Link | None = None
    bullets: tuple[str, ...] = ()

    @property
    def has_dates(self) -> bool:
        return bool(self.start_date or self.end_date)


@dataclass(frozen=True, slots=True)
class SkillGroup:
    label: str
    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Header:
    name: str
    email: str
    links: tuple[Link, ...] = ()


@dataclass(frozen=True, slots=True)
class Section:
    kind: SectionKind
    entries: tuple[Entry, ...] = ()
    skills: tuple[SkillGroup, ...] = ()
    links: tuple[Link, ...] = ()


@dataclass(frozen=True, slots=True)
class ResumeDocument:
    header: Header
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def section(self, kind: SectionKind) -> Section:
        """Return the section of *kind*.

        Raises:
            KeyError: If the document has no such section.
        """
        for section in self.sections:
            if section.kind is kind:
                return section
        raise KeyError(kind.value)


# ---------------------------------------------------------------------------
# Layouts


@dataclass(frozen=True, slots=True)
class Layout:
    """Fixed section placement for one variant.

    Attributes:
        columns: Section kinds per column, left to right, top to bottom.
        titles: Heading text for each section kind the layout shows.
    """

    columns: tuple[tuple[SectionKind, ...], ...]
    titles: dict[SectionKind, str]

    @property
    def order(self) -> tuple[SectionKind, ...]:
        """All section kinds in reading order."""
        return tuple(kind for column in self.columns for kind in column)


_LAYOUTS: dict[Variant, Layout] = {
    Variant.ROW: Layout(
        columns=(
            (
                SectionKind.EDUCATION,
                SectionKind.EXPERIENCE,
                SectionKind.PROJECTS,
                SectionKind.SKILLS,
            ),
        ),
        titles={
            SectionKind.EDUCATION: "Education",
            SectionKind.EXPERIENCE: "Experience",
            SectionKind.PROJECTS: "Projects",
            SectionKind.SKILLS: "Technologies",
        },
    ),
    Variant.DEEDY: Layout(
        columns=(
            (SectionKind.EXPERIENCE, SectionKind.PROJECTS),
            (SectionKind.EDUCATION, SectionKind.SKILLS, SectionKind.LINKS),
        ),
        titles={
            SectionKind.EXPERIENCE: "Experience",
            SectionKind.PROJECTS: "Projects",
            SectionKind.EDUCATION: "Education",
            SectionKind.SKILLS: "Skills",
            SectionKind.LINKS: "Links",
        },
    ),
}


def parse_variant(variant: Variant | str) -> Variant:
    """Return *variant* as a :class:`Variant`.

    Raises:
        ValueError: If *variant* is not a known variant name.
    """
    try:
        return Variant(variant)
    except ValueError:
        available = ", ".join(v.value for v in Variant)
        msg = f"Unknown variant {variant!r}. Available: {available}"
        raise ValueError(msg) from None


def get_layout(variant: Variant | str) -> Layout:
    """Return the layout for *variant*.

    Raises:
        ValueError: If *variant* is not a known variant name.
    """
    return _LAYOUTS[parse_variant(variant)]
