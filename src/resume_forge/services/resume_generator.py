"""LaTeX resume generation.

Normalizes profile data, builds the shared document tree and renders it
with one of the registered LaTeX templates.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from resume_forge.config import get_settings
from resume_forge.models.document import ResumeDocument, Variant
from resume_forge.models.profile import PartialProfile, ProfileAggregate
from resume_forge.services.document_builder import build_document
from resume_forge.services.profile_defaults import normalize
from resume_forge.templates import get_template
from resume_forge.utils.export import resume_filename

__all__ = [
    "build_resume_document",
    "generate_latex",
    "generate_resume_tex",
    "generate_variant_a",
    "generate_variant_b",
    "to_profile",
]

logger = logging.getLogger(__name__)

ProfileInput = ProfileAggregate | PartialProfile | Mapping[str, Any] | None


def to_profile(profile: ProfileInput) -> ProfileAggregate:
    """Return *profile* as an aggregate, normalizing partial input."""
    if isinstance(profile, ProfileAggregate):
        return profile
    return normalize(profile)


def build_resume_document(profile: ProfileInput) -> ResumeDocument:
    """Normalize *profile* and build its document tree."""
    return build_document(to_profile(profile), email_domain=get_settings().email_domain)


def generate_latex(profile: ProfileInput, variant: Variant | str = Variant.ROW) -> str:
    """Return the complete LaTeX source of *profile* in *variant*.

    Output is deterministic: the same input always yields the same text.

    Raises:
        ValueError: If *variant* is not a registered template.
    """
    template = get_template(variant)
    source = template.render(build_resume_document(profile))
    logger.debug("Generated %d characters of %s LaTeX", len(source), template.variant.value)
    return source


def generate_variant_a(profile: ProfileInput) -> str:
    """Row-based single-column LaTeX source."""
    return generate_latex(profile, Variant.ROW)


def generate_variant_b(profile: ProfileInput) -> str:
    """Deedy two-column LaTeX source."""
    return generate_latex(profile, Variant.DEEDY)


def generate_resume_tex(
    profile: ProfileInput,
    output_dir: Path,
    variant: Variant | str = Variant.ROW,
) -> Path:
    """Write the LaTeX source of *profile* to *output_dir*.

    Compilation is left to an external LaTeX toolchain.

    Args:
        profile: Partial or normalized profile.
        output_dir: Directory to write the file into.
        variant: Registered template identifier.

    Returns:
        The ``Path`` of the generated ``.tex`` file.
    """
    aggregate = to_profile(profile)
    settings = get_settings()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / resume_filename(aggregate, "tex", settings.fallback_name)
    path.write_text(generate_latex(aggregate, variant), encoding="utf-8")
    logger.info("Wrote LaTeX resume to %s", path)
    return path
