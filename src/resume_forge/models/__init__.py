"""Data models and type definitions"""

from resume_forge.models.document import (
    Entry,
    Header,
    Layout,
    Link,
    ResumeDocument,
    Section,
    SectionKind,
    SkillGroup,
    Variant,
    get_layout,
    parse_variant,
)
from resume_forge.models.export import (
    ContentNodeNotFoundError,
    ExportError,
    ExportInProgressError,
    ExportResult,
    PaginationPlan,
    RasterImage,
    RasterizationError,
)
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
    "ContentNodeNotFoundError",
    "Education",
    "Entry",
    "Experience",
    "ExportError",
    "ExportInProgressError",
    "ExportResult",
    "Header",
    "Layout",
    "Link",
    "Links",
    "PaginationPlan",
    "PartialProfile",
    "Person",
    "ProfileAggregate",
    "Project",
    "RasterImage",
    "RasterizationError",
    "ResumeDocument",
    "Section",
    "SectionKind",
    "SkillGroup",
    "Variant",
    "get_layout",
    "parse_variant",
]
