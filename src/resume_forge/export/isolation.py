"""Off-screen isolation of the preview content for capture.

The unscaled content node is cloned into a fixed-width container placed
far to the right of the viewport.  It keeps real layout, unlike a hidden
or transparent node, so the browser can rasterize it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from resume_forge.models.export import ContentNodeNotFoundError
from resume_forge.preview.renderer import CONTENT_NODE_ID

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page

    from resume_forge.config import Settings

__all__ = ["CONTAINER_ID", "isolated_container", "settle"]

logger = logging.getLogger(__name__)

CONTAINER_ID = "resume-export-container"

# Horizontal offset of the container in CSS pixels.
_OFFSCREEN_LEFT_PX = 10_000

_ISOLATE_SCRIPT = """
({sourceId, containerId, left, width, css}) => {
  const source = document.getElementById(sourceId);
  if (!source) {
    return false;
  }
  const container = document.createElement("div");
  container.id = containerId;
  container.style.cssText = [
    "position: absolute",
    "top: 0",
    `left: ${left}px`,
    `width: ${width}px`,
    "background: #ffffff",
    "overflow: visible",
  ].join("; ");
  const style = document.createElement("style");
  style.textContent = css;
  container.appendChild(style);
  const clone = source.cloneNode(true);
  clone.id = `${sourceId}-export`;
  container.appendChild(clone);
  document.body.appendChild(container);
  return true;
}
"""

_REMOVE_SCRIPT = """
(containerId) => {
  const container = document.getElementById(containerId);
  if (container) {
    container.remove();
  }
  return container !== null;
}
"""

_MEASURE_SCRIPT = """
(containerId) => {
  const container = document.getElementById(containerId);
  const height = container.scrollHeight;
  container.style.height = `${height}px`;
  return height;
}
"""

_LAYOUT_STABLE_SCRIPT = """
async ({containerId, frames, timeoutMs}) => {
  const container = document.getElementById(containerId);
  const stable = (async () => {
    await document.fonts.ready;
    let last = -1;
    let unchanged = 0;
    while (unchanged < frames) {
      await new Promise((resolve) => requestAnimationFrame(resolve));
      const height = container.scrollHeight;
      unchanged = height === last ? unchanged + 1 : 0;
      last = height;
    }
    container.style.height = `${last}px`;
    return last;
  })();
  const timeout = new Promise((_, reject) =>
    setTimeout(() => reject(new Error(`Layout did not settle within ${timeoutMs} ms`)), timeoutMs)
  );
  return Promise.race([stable, timeout]);
}
"""


@contextmanager
def isolated_container(
    page: Page,
    *,
    width_px: int,
    override_css: str,
    source_id: str = CONTENT_NODE_ID,
) -> Iterator[Locator]:
    """Clone ``#source_id`` into an off-screen container and yield its locator.

    The container is removed on every exit path, including errors raised
    while it is in use.

    Raises:
        ContentNodeNotFoundError: If the page has no element ``#source_id``.
    """
    args: dict[str, Any] = {
        "sourceId": source_id,
        "containerId": CONTAINER_ID,
        "left": _OFFSCREEN_LEFT_PX,
        "width": width_px,
        "css": override_css,
    }
    try:
        if not page.evaluate(_ISOLATE_SCRIPT, args):
            msg = f"Preview content node #{source_id} was not found on the page"
            raise ContentNodeNotFoundError(msg)
        logger.debug("Isolated #%s into #%s", source_id, CONTAINER_ID)
        yield page.locator(f"#{CONTAINER_ID}")
    finally:
        page.evaluate(_REMOVE_SCRIPT, CONTAINER_ID)
        logger.debug("Removed #%s", CONTAINER_ID)


def settle(page: Page, settings: Settings) -> int:
    """Wait until the isolated container is ready to be captured.

    With the ``"layout"`` strategy this waits for web fonts and then for
    ``settings.stable_frames`` animation frames with an unchanged height,
    bounded by ``settings.capture_timeout_ms``.  The ``"delay"`` strategy
    sleeps ``settings.settle_delay_ms`` and then measures.  Either way the
    container is sized to its full scroll height and that height returned.
    """
    if settings.settle_strategy == "delay":
        page.wait_for_timeout(settings.settle_delay_ms)
        height = page.evaluate(_MEASURE_SCRIPT, CONTAINER_ID)
        logger.debug("Container measured at %s px after %d ms", height, settings.settle_delay_ms)
        return height

    height = page.evaluate(
        _LAYOUT_STABLE_SCRIPT,
        {
            "containerId": CONTAINER_ID,
            "frames": settings.stable_frames,
            "timeoutMs": settings.capture_timeout_ms,
        },
    )
    logger.debug("Layout settled at %s px", height)
    return height
