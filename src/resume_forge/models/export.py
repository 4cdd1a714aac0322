"""Data models and errors for the preview export pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ExportError(Exception):
    """Base class for every failure raised while exporting a preview."""


class ContentNodeNotFoundError(ExportError):
    """Raised when the preview page does not contain the resume content node."""


class RasterizationError(ExportError):
    """Raised when the browser or image decoder fails to capture the preview."""


class ExportInProgressError(ExportError):
    """Raised when an export is requested while another one is still running."""


@dataclass(frozen=True, slots=True)
class RasterImage:
    """A captured bitmap of the isolated preview.

    Attributes:
        png: Encoded PNG bytes.
        width: Bitmap width in device pixels.
        height: Bitmap height in device pixels.
    """

    png: bytes
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class PaginationPlan:
    """Where the flattened bitmap is placed on each output page.

    All lengths are in page units (millimetres for A4).

    Attributes:
        image_width: Width the bitmap is drawn at (the page width).
        image_height: Height the bitmap is drawn at, keeping its aspect ratio.
        offsets: Vertical offset of the bitmap on each page, one per page.
    """

    image_width: float
    image_height: float
    offsets: tuple[float, ...]

    @property
    def page_count(self) -> int:
        return len(self.offsets)


@dataclass(frozen=True, slots=True)
class ExportResult:
    path: Path
    page_count: int
