"""Build the neutral :class:`ResumeDocument` tree from a profile aggregate."""

from __future__ import annotations

import re

from resume_forge.models.document import (
    Entry,
    Header,
    Link,
    ResumeDocument,
    Section,
    SectionKind,
    SkillGroup,
)
from resume_forge.models.profile import Education, Experience, ProfileAggregate, Project

__all__ = [
    "DEFAULT_EMAIL_DOMAIN",
    "SAMPLE_SKILLS",
    "build_document",
    "build_skill_groups",
    "strip_protocol",
]

DEFAULT_EMAIL_DOMAIN = "users.noreply.github.com"
SAMPLE_EMAIL = "youremail@yourdomain.com"

EXPERIENCE_TOOLS_LABEL = "Technologies"
PROJECT_TOOLS_LABEL = "Project Tools"

SAMPLE_SKILLS = SkillGroup(
    label="Languages",
    items=("Python", "TypeScript", "SQL", "Go"),
)

_PROTOCOL = re.compile(r"^https?://(www\.)?", re.IGNORECASE)


def strip_protocol(url: str) -> str:
    """Return *url* without its scheme, leading ``www.`` or trailing slash."""
    return _PROTOCOL.sub("", url).rstrip("/")


def _profile_links(profile: ProfileAggregate) -> tuple[Link, ...]:
    links = profile.links
    result: list[Link] = []
    for label, url in (
        ("Portfolio", links.portfolio),
        ("LinkedIn", links.linkedin),
        ("GitHub", links.github),
    ):
        if url:
            result.append(Link(label=label, url=url, display=strip_protocol(url)))
    return tuple(result)


def _header(profile: ProfileAggregate, email_domain: str) -> Header:
    handle = profile.links.handle
    email = f"{handle}@{email_domain}" if handle else SAMPLE_EMAIL
    return Header(
        name=profile.person.full_name,
        email=email,
        links=_profile_links(profile),
    )


def _education_entry(education: Education) -> Entry:
    subtitle = education.degree
    if education.field:
        subtitle = f"{subtitle} in {education.field}" if subtitle else education.field
    return Entry(
        title=education.school,
        subtitle=subtitle,
        start_date=education.start_date,
        end_date=education.end_date,
        location=education.location,
        bullets=(education.description,) if education.description else (),
    )


def _experience_entry(experience: Experience) -> Entry:
    return Entry(
        title=experience.title or experience.company,
        subtitle=experience.company if experience.title else "",
        start_date=experience.start_date,
        end_date=experience.end_date,
        location=experience.location,
        bullets=experience.work_done,
    )


def _project_entry(project: Project) -> Entry:
    bullets: list[str] = []
    if project.description:
        bullets.append(project.description)
    if project.topics:
        bullets.append(f"Topics: {', '.join(project.topics)}")
    link = None
    if project.landing_page_link:
        link = Link(
            label=project.name,
            url=project.landing_page_link,
            display=strip_protocol(project.landing_page_link),
        )
    return Entry(
        title=project.name,
        subtitle=project.organization_or_owner,
        start_date=project.created_at,
        end_date=project.updated_at,
        link=link,
        bullets=tuple(bullets),
    )


def build_skill_groups(profile: ProfileAggregate) -> tuple[SkillGroup, ...]:
    """Aggregate skills from the experience tools and the first project's tools.

    A source that is empty, or that holds sample content, contributes no
    group.  The generic sample group is used only when both sources are
    empty.
    """
    groups: list[SkillGroup] = []

    if not profile.is_sample("experience") and profile.experience.tools_used:
        groups.append(SkillGroup(EXPERIENCE_TOOLS_LABEL, profile.experience.tools_used))

    if not profile.is_sample("projects") and profile.projects and profile.projects[0].tools:
        groups.append(SkillGroup(PROJECT_TOOLS_LABEL, profile.projects[0].tools))

    return tuple(groups) or (SAMPLE_SKILLS,)


def build_document(
    profile: ProfileAggregate,
    *,
    email_domain: str = DEFAULT_EMAIL_DOMAIN,
) -> ResumeDocument:
    """Return the document tree for *profile*.

    Every section kind is always present; the layouts decide which ones a
    variant shows and where.
    """
    return ResumeDocument(
        header=_header(profile, email_domain),
        sections=(
            Section(
                kind=SectionKind.EDUCATION,
                entries=tuple(_education_entry(e) for e in profile.education),
            ),
            Section(
                kind=SectionKind.EXPERIENCE,
                entries=(_experience_entry(profile.experience),),
            ),
            Section(
                kind=SectionKind.PROJECTS,
                entries=tuple(_project_entry(p) for p in profile.projects),
            ),
            Section(kind=SectionKind.SKILLS, skills=build_skill_groups(profile)),
            Section(kind=SectionKind.LINKS, links=_profile_links(profile)),
        ),
    )
