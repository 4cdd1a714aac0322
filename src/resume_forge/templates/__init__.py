"""Template registry for LaTeX generation."""

from __future__ import annotations

from resume_forge.templates.base import ResumeTemplate, escape_latex, escape_url
from resume_forge.templates.deedy import DeedyResumeTemplate
from resume_forge.templates.row import RowResumeTemplate

__all__ = [
    "ResumeTemplate",
    "escape_latex",
    "escape_url",
    "get_template",
    "list_templates",
]

_REGISTRY: dict[str, ResumeTemplate] = {
    "deedy": DeedyResumeTemplate(),
    "row": RowResumeTemplate(),
}


def get_template(name: str) -> ResumeTemplate:
    """Return the template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[str(getattr(name, "value", name))]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)
