"""Runtime settings for generation and export.

Every value can be overridden through a ``RESUME_FORGE_*`` environment
variable, or a ``.env`` file in the working directory (loaded once at
import; real environment variables win).  Settings are read on each call
so tests can use ``monkeypatch.setenv`` without reloading modules.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# Load RESUME_FORGE_* overrides from a .env file next to where the tool runs.
load_dotenv(find_dotenv(usecwd=True))

SETTLE_STRATEGIES = ("layout", "delay")


@dataclass(frozen=True, slots=True)
class Settings:
    """Generation and export settings.

    Attributes:
        page_width: Output page width in page units (mm).
        page_height: Output page height in page units (mm).
        container_width_px: Width of the off-screen isolation container,
            roughly the content width of an A4 page at 96 dpi.
        device_scale: Pixel density multiplier used when rasterizing.
        settle_strategy: ``"layout"`` waits for a stable layout signal,
            ``"delay"`` waits a fixed time.
        settle_delay_ms: Wait used by the ``"delay"`` strategy.
        stable_frames: Consecutive unchanged frames that count as stable.
        capture_timeout_ms: Upper bound for each browser step.
        output_dir: Default directory for exported files.
        fallback_name: Filename prefix used when the profile has no name.
        email_domain: Domain used to synthesize the display email.
    """

    page_width: float = 210.0
    page_height: float = 297.0
    container_width_px: int = 794
    device_scale: float = 2.0
    settle_strategy: str = "layout"
    settle_delay_ms: int = 500
    stable_frames: int = 3
    capture_timeout_ms: int = 30_000
    output_dir: Path = Path("exports")
    fallback_name: str = "untitled"
    email_domain: str = "users.noreply.github.com"


def _env_number(name: str, default: float, cast: type = float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %s", name, raw, default)
        return default
    return value


def get_settings() -> Settings:
    """Return settings built from the environment."""
    defaults = Settings()

    strategy = os.getenv("RESUME_FORGE_SETTLE_STRATEGY", defaults.settle_strategy).lower()
    if strategy not in SETTLE_STRATEGIES:
        logger.warning("Unknown settle strategy %r, using %r", strategy, defaults.settle_strategy)
        strategy = defaults.settle_strategy

    return Settings(
        page_width=_env_number("RESUME_FORGE_PAGE_WIDTH_MM", defaults.page_width),
        page_height=_env_number("RESUME_FORGE_PAGE_HEIGHT_MM", defaults.page_height),
        container_width_px=int(
            _env_number("RESUME_FORGE_CONTAINER_WIDTH_PX", defaults.container_width_px, int)
        ),
        device_scale=_env_number("RESUME_FORGE_DEVICE_SCALE", defaults.device_scale),
        settle_strategy=strategy,
        settle_delay_ms=int(
            _env_number("RESUME_FORGE_SETTLE_DELAY_MS", defaults.settle_delay_ms, int)
        ),
        stable_frames=int(_env_number("RESUME_FORGE_STABLE_FRAMES", defaults.stable_frames, int)),
        capture_timeout_ms=int(
            _env_number("RESUME_FORGE_CAPTURE_TIMEOUT_MS", defaults.capture_timeout_ms, int)
        ),
        output_dir=Path(os.getenv("RESUME_FORGE_OUTPUT_DIR") or defaults.output_dir),
        fallback_name=os.getenv("RESUME_FORGE_FALLBACK_NAME") or defaults.fallback_name,
        email_domain=os.getenv("RESUME_FORGE_EMAIL_DOMAIN") or defaults.email_domain,
    )
