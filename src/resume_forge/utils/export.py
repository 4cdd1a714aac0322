"""File naming and PDF assembly for exported resumes."""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from fpdf import FPDF

if TYPE_CHECKING:
    from resume_forge.models.export import PaginationPlan, RasterImage
    from resume_forge.models.profile import ProfileAggregate

__all__ = ["filename_prefix", "resume_filename", "write_paginated_pdf"]

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_NAME = "untitled"

_WHITESPACE = re.compile(r"\s+")


def _sanitize_filename(name: str, fallback: str = DEFAULT_FALLBACK_NAME) -> str:
    """Remove or replace characters that are invalid in filenames."""
    sanitized = re.sub(r'[<>:"/\\|?*\x00-\x1f]', "_", name)
    sanitized = sanitized.strip(". ")
    return sanitized or fallback


def filename_prefix(profile: ProfileAggregate, fallback: str = DEFAULT_FALLBACK_NAME) -> str:
    """Return ``first_last`` in lower case for *profile*.

    Internal whitespace collapses to a single underscore.  A profile whose
    person section is sample content gets *fallback*.
    """
    if profile.is_sample("person"):
        return fallback
    person = profile.person
    raw = f"{person.first} {person.last}".strip()
    collapsed = _WHITESPACE.sub("_", raw.lower())
    return _sanitize_filename(collapsed, fallback)


def resume_filename(
    profile: ProfileAggregate,
    extension: str = "pdf",
    fallback: str = DEFAULT_FALLBACK_NAME,
) -> str:
    """Return ``<prefix>_resume.<extension>`` for *profile*."""
    return f"{filename_prefix(profile, fallback)}_resume.{extension}"


def write_paginated_pdf(
    image: RasterImage,
    plan: PaginationPlan,
    output_path: Path,
    *,
    page_width: float,
    page_height: float,
) -> Path:
    """Write *image* across the pages described by *plan*.

    The same bitmap is placed on every page, shifted up by the page's
    offset, so each page shows the next contiguous slice.  The image is
    embedded once and referenced from each page.

    Args:
        image: The flattened capture of the preview.
        plan: Output of :func:`resume_forge.export.pagination.plan_pages`.
        output_path: Full path for the output file.
        page_width: Page width in millimetres.
        page_height: Page height in millimetres.

    Returns:
        Path to the created file.
    """
    pdf = FPDF(orientation="P", unit="mm", format=(page_width, page_height))
    pdf.set_auto_page_break(auto=False)
    pdf.set_margins(0, 0, 0)

    for offset in plan.offsets:
        pdf.add_page()
        pdf.image(
            io.BytesIO(image.png),
            x=0,
            y=offset,
            w=plan.image_width,
            h=plan.image_height,
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pdf.output(str(output_path))
    logger.debug("Wrote %d page(s) to %s", plan.page_count, output_path)
    return output_path
