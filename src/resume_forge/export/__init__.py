"""Preview export: isolation, rasterization, pagination and PDF output."""

from resume_forge.export.pagination import plan_pages
from resume_forge.export.pipeline import ExportPipeline, export_resume, get_default_pipeline

__all__ = [
    "ExportPipeline",
    "export_resume",
    "get_default_pipeline",
    "plan_pages",
]
