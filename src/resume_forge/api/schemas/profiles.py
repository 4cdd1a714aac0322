"""Pydantic schemas for profile payloads.

Request bodies use camelCase keys (``githubHandle``, ``workDone``);
snake_case is accepted too.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_forge.models.profile import PartialProfile


class CamelModel(BaseModel):
    """Base model accepting camelCase and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonSchema(CamelModel):
    first: str = ""
    middle: str = ""
    last: str = ""
    github_handle: str = ""


class ExperienceSchema(CamelModel):
    company: str = ""
    title: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    work_done: list[str] | str = Field(
        default_factory=list,
        description="Bullet points, or one string split on newlines and bullet glyphs",
    )
    tools_used: list[str] = Field(default_factory=list)


class EducationSchema(CamelModel):
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""


class ProjectSchema(CamelModel):
    name: str = ""
    description: str = ""
    topics: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    organization_or_owner: str = ""
    landing_page_link: str = ""
    created_at: str = ""
    updated_at: str = ""


class LinksSchema(CamelModel):
    portfolio: str = ""
    github: str = ""
    linkedin: str = ""
    handle: str = ""


class ProfileSchema(CamelModel):
    """A partial profile; every section is optional and defaulted on render."""

    person: PersonSchema | None = None
    experience: ExperienceSchema | None = None
    education: list[EducationSchema] | None = None
    projects: list[ProjectSchema] | None = None
    links: LinksSchema | None = None

    def to_partial(self) -> PartialProfile:
        """Return the snake_case :class:`PartialProfile` for this payload."""
        return self.model_dump(exclude_none=True)
