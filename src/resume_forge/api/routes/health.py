"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter

from resume_forge import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return the current status and version of the API."""
    return {"status": "healthy", "version": __version__}
