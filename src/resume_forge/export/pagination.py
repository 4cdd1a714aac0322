"""Windowed repagination of one flattened bitmap."""

from __future__ import annotations

from resume_forge.models.export import PaginationPlan

__all__ = ["plan_pages"]

# Relative tolerance for the remaining height; float rounding at an exact
# multiple of the page height must not produce a blank trailing page.
_TOLERANCE = 1e-6


def plan_pages(
    bitmap_width: float,
    bitmap_height: float,
    page_width: float,
    page_height: float,
) -> PaginationPlan:
    """Compute the per-page offsets for a bitmap scaled to *page_width*.

    The image keeps its aspect ratio.  If it fits on one page it is placed
    once at the origin; otherwise every further page places the whole image
    one page height higher than the previous one until no height remains.

    Raises:
        ValueError: If any dimension is not positive.
    """
    if min(bitmap_width, bitmap_height, page_width, page_height) <= 0:
        msg = (
            f"Dimensions must be positive, got bitmap {bitmap_width}x{bitmap_height} "
            f"and page {page_width}x{page_height}"
        )
        raise ValueError(msg)

    image_height = bitmap_height * page_width / bitmap_width
    offsets = [0.0]

    position = 0.0
    height_remaining = image_height - page_height
    while height_remaining > page_height * _TOLERANCE:
        position -= page_height
        offsets.append(position)
        height_remaining -= page_height

    return PaginationPlan(
        image_width=float(page_width),
        image_height=image_height,
        offsets=tuple(offsets),
    )
