"""Route handlers for the API."""

from resume_forge.api.routes import health, resumes

__all__ = [
    "health",
    "resumes",
]
