"""Capture the isolated preview as a bitmap with headless Chromium."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Protocol

from PIL import Image, UnidentifiedImageError
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from resume_forge.config import Settings, get_settings
from resume_forge.export.isolation import isolated_container, settle
from resume_forge.models.export import RasterImage, RasterizationError

if TYPE_CHECKING:
    from playwright.sync_api import Page

__all__ = ["PlaywrightRasterizer", "Rasterizer", "capture_isolated", "decode_capture"]

logger = logging.getLogger(__name__)

# Viewport height used while loading the page; the capture itself covers
# the container's full height.
_VIEWPORT_HEIGHT_PX = 1123


class Rasterizer(Protocol):
    def rasterize(self, html: str, override_css: str) -> RasterImage: ...


def decode_capture(png: bytes) -> RasterImage:
    """Read the size of *png* and flatten any transparency onto white.

    Raises:
        RasterizationError: If the bytes are not a readable, non-empty image.
    """
    try:
        with Image.open(io.BytesIO(png)) as img:
            img.load()
            width, height = img.size
            if img.mode in ("RGBA", "LA", "P") or "transparency" in img.info:
                rgba = img.convert("RGBA")
                background = Image.new("RGB", rgba.size, (255, 255, 255))
                background.paste(rgba, mask=rgba.getchannel("A"))
                buffer = io.BytesIO()
                background.save(buffer, format="PNG")
                png = buffer.getvalue()
    except (UnidentifiedImageError, OSError) as exc:
        msg = "Captured bitmap could not be decoded"
        raise RasterizationError(msg) from exc

    if width <= 0 or height <= 0:
        msg = f"Captured bitmap is empty ({width}x{height})"
        raise RasterizationError(msg)
    return RasterImage(png=png, width=width, height=height)


def capture_isolated(page: Page, settings: Settings, override_css: str) -> bytes:
    """Isolate, settle and screenshot the preview content on *page*."""
    with isolated_container(
        page,
        width_px=settings.container_width_px,
        override_css=override_css,
    ) as container:
        settle(page, settings)
        return container.screenshot(
            type="png",
            animations="disabled",
            timeout=settings.capture_timeout_ms,
        )


class PlaywrightRasterizer:
    """Rasterize preview pages in a fresh headless Chromium per call."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings

    def rasterize(self, html: str, override_css: str) -> RasterImage:
        """Load *html*, capture its content node and return the bitmap.

        Raises:
            ContentNodeNotFoundError: If the page lacks the content node.
            RasterizationError: If the browser fails at any step.
        """
        settings = self._settings or get_settings()
        try:
            with sync_playwright() as playwright:
                browser = playwright.chromium.launch()
                try:
                    page = browser.new_page(
                        viewport={
                            "width": settings.container_width_px,
                            "height": _VIEWPORT_HEIGHT_PX,
                        },
                        device_scale_factor=settings.device_scale,
                    )
                    page.set_default_timeout(settings.capture_timeout_ms)
                    page.set_content(html, wait_until="load")
                    png = capture_isolated(page, settings, override_css)
                finally:
                    browser.close()
        except PlaywrightError as exc:
            msg = f"Browser capture failed: {exc.message}"
            raise RasterizationError(msg) from exc

        image = decode_capture(png)
        logger.debug("Captured %dx%d bitmap", image.width, image.height)
        return image
