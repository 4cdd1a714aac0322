"""Shared dependencies for API routes."""

from __future__ import annotations

from resume_forge.export.pipeline import ExportPipeline, get_default_pipeline


def get_export_pipeline() -> ExportPipeline:
    """Return the export pipeline used by the export route.

    Overridden in tests with a pipeline backed by a fake rasterizer.
    """
    return get_default_pipeline()
