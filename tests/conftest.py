from __future__ import annotations

import io

import pytest
from PIL import Image

from resume_forge.models.export import RasterImage
from resume_forge.models.profile import PartialProfile


@pytest.fixture
def partial_profile() -> PartialProfile:
    """A complete partial profile with LaTeX-hostile characters sprinkled in."""
    return {
        "person": {"first": "Ada", "last": "Lovelace", "github_handle": "ada"},
        "experience": {
            "company": "Analytical Engines & Co",
            "title": "Lead Programmer",
            "start_date": "Jan 1842",
            "end_date": "Dec 1843",
            "location": "London, UK",
            "work_done": ["Wrote the first algorithm (100% by hand)", "Cut costs by $5k"],
            "tools_used": ["Python", "C#"],
        },
        "education": [
            {
                "school": "University of London",
                "degree": "BSc",
                "field": "Mathematics",
                "start_date": "Sep 1835",
                "end_date": "Jun 1839",
                "location": "London",
                "description": "Studied under_scores and {braces}",
            }
        ],
        "projects": [
            {
                "name": "Bernoulli Numbers",
                "description": "Computed Bernoulli numbers on the Engine",
                "topics": ["math", "algorithms"],
                "tools": ["Punch cards"],
                "organization_or_owner": "ada",
                "landing_page_link": "https://github.com/ada/bernoulli",
                "created_at": "Jan 1843",
                "updated_at": "Mar 1843",
            }
        ],
        "links": {
            "portfolio": "https://ada.dev",
            "github": "https://github.com/ada",
            "linkedin": "https://linkedin.com/in/ada",
            "handle": "ada",
        },
    }


def make_png(width: int, height: int, mode: str = "RGB") -> bytes:
    """Return PNG bytes for a solid image of the given size."""
    color = (10, 20, 30, 0) if mode == "RGBA" else (10, 20, 30)
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


class FakeRasterizer:
    """Stand-in for the Playwright rasterizer that records its inputs."""

    def __init__(self, width: int = 90, height: int = 300, error: Exception | None = None):
        self.width = width
        self.height = height
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def rasterize(self, html: str, override_css: str) -> RasterImage:
        self.calls.append((html, override_css))
        if self.error is not None:
            raise self.error
        return RasterImage(
            png=make_png(self.width, self.height),
            width=self.width,
            height=self.height,
        )


@pytest.fixture
def fake_rasterizer() -> FakeRasterizer:
    return FakeRasterizer()
