"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from resume_forge.api.schemas.profiles import CamelModel, ProfileSchema
from resume_forge.models.document import Variant
from resume_forge.models.profile import PartialProfile
from resume_forge.services.profile_transformers import profile_from_full_response


class ResumeRequest(CamelModel):
    """Profile and layout to render.

    ``fullProfile`` takes a backend full-profile response instead of a
    partial profile and wins when both are given.
    """

    profile: ProfileSchema = Field(default_factory=ProfileSchema)
    full_profile: dict[str, Any] | None = Field(
        None, description="Upstream full user-profile response"
    )
    variant: Variant = Field(Variant.ROW, description="Layout: 'row' or 'deedy'")

    def to_partial(self) -> PartialProfile:
        if self.full_profile is not None:
            return profile_from_full_response(self.full_profile)
        return self.profile.to_partial()


class PreviewRequest(ResumeRequest):
    scale: float = Field(1.0, gt=0, le=4, description="On-screen preview scale")


class ExportRequest(ResumeRequest):
    scale: float = Field(1.0, gt=0, le=4, description="On-screen preview scale")


class LatexResponse(CamelModel):
    """Generated LaTeX source."""

    variant: Variant
    filename: str
    source: str


class VariantResponse(CamelModel):
    name: str
    title: str
