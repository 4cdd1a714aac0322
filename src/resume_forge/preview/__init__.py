"""HTML preview rendering and export stylesheets."""

from resume_forge.preview.renderer import (
    CONTENT_NODE_ID,
    render_preview,
    render_preview_surface,
    render_resume_html,
)
from resume_forge.preview.styles import build_override_css, missing_overrides

__all__ = [
    "CONTENT_NODE_ID",
    "build_override_css",
    "missing_overrides",
    "render_preview",
    "render_preview_surface",
    "render_resume_html",
]
