"""Preview to paginated PDF export.

Stages, in order: render the preview page, isolate and restyle the
content node, wait for layout to settle, rasterize, remove the isolation
container, paginate the bitmap and write the PDF.
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from pathlib import Path

from resume_forge.config import Settings, get_settings
from resume_forge.export.isolation import CONTAINER_ID
from resume_forge.export.pagination import plan_pages
from resume_forge.export.rasterizer import PlaywrightRasterizer, Rasterizer
from resume_forge.models.document import Variant, parse_variant
from resume_forge.models.export import ExportInProgressError, ExportResult
from resume_forge.preview.renderer import render_preview, render_resume_html
from resume_forge.preview.styles import build_override_css, missing_overrides
from resume_forge.services.resume_generator import (
    ProfileInput,
    build_resume_document,
    to_profile,
)
from resume_forge.utils.export import resume_filename, write_paginated_pdf

__all__ = ["ExportPipeline", "export_resume", "get_default_pipeline"]

logger = logging.getLogger(__name__)


class ExportPipeline:
    """Serialized export of resume previews to PDF.

    One instance runs a single export at a time; a call that overlaps a
    running export fails immediately with :class:`ExportInProgressError`
    instead of racing on the isolation container.
    """

    def __init__(
        self,
        rasterizer: Rasterizer | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings
        self.rasterizer = rasterizer or PlaywrightRasterizer(settings)
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        """Settings pinned at construction, or the environment read now."""
        return self._settings or get_settings()

    @property
    def busy(self) -> bool:
        """Whether an export is currently running."""
        return self._lock.locked()

    def export(
        self,
        profile: ProfileInput,
        variant: Variant | str = Variant.ROW,
        output_dir: Path | None = None,
        *,
        scale: float = 1.0,
    ) -> ExportResult:
        """Export *profile* rendered as *variant* to a paginated PDF.

        Args:
            profile: Partial or normalized profile.
            variant: Layout to render.
            output_dir: Target directory; defaults to ``settings.output_dir``.
            scale: On-screen preview scale. Does not affect the output.

        Returns:
            The written file and its page count.

        Raises:
            ExportInProgressError: If another export is running.
            ContentNodeNotFoundError: If the preview lacks its content node.
            RasterizationError: If capturing the preview fails.
        """
        variant = parse_variant(variant)
        if not self._lock.acquire(blocking=False):
            logger.warning("Rejected export request: another export is in progress")
            msg = "An export is already in progress"
            raise ExportInProgressError(msg)
        try:
            return self._export(profile, variant, output_dir, scale)
        except Exception:
            logger.exception("Export of %s resume failed", variant.value)
            raise
        finally:
            self._lock.release()

    def _export(
        self,
        profile: ProfileInput,
        variant: Variant,
        output_dir: Path | None,
        scale: float,
    ) -> ExportResult:
        settings = self.settings
        aggregate = to_profile(profile)

        content = render_resume_html(build_resume_document(aggregate), variant)
        missing = missing_overrides(content)
        if missing:
            logger.warning(
                "Classes without export overrides will render unstyled: %s",
                ", ".join(missing),
            )

        html = render_preview(aggregate, variant, scale)
        logger.debug("Rasterizing %s preview", variant.value)
        image = self.rasterizer.rasterize(html, build_override_css(f"#{CONTAINER_ID}"))

        plan = plan_pages(image.width, image.height, settings.page_width, settings.page_height)
        target = Path(output_dir or settings.output_dir) / resume_filename(
            aggregate, "pdf", settings.fallback_name
        )
        path = write_paginated_pdf(
            image,
            plan,
            target,
            page_width=settings.page_width,
            page_height=settings.page_height,
        )
        logger.info("Exported %s (%d page(s))", path, plan.page_count)
        return ExportResult(path=path, page_count=plan.page_count)


@lru_cache(maxsize=1)
def get_default_pipeline() -> ExportPipeline:
    """Return the process-wide pipeline backed by Playwright.

    The pipeline is shared but pins no settings, so each export reads the
    environment again.
    """
    return ExportPipeline()


def export_resume(
    profile: ProfileInput,
    variant: Variant | str = Variant.ROW,
    output_dir: Path | None = None,
    *,
    scale: float = 1.0,
) -> ExportResult:
    """Export *profile* with the default pipeline."""
    return get_default_pipeline().export(profile, variant, output_dir, scale=scale)
