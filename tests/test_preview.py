"""Tests for the HTML preview and its export style overrides."""

from __future__ import annotations

import re

import pytest

from resume_forge.preview.renderer import (
    CONTENT_NODE_ID,
    render_preview,
    render_preview_surface,
    render_resume_html,
)
from resume_forge.preview.styles import (
    EXPORT_CLASS_OVERRIDES,
    build_override_css,
    collect_classes,
    missing_overrides,
)
from resume_forge.services.resume_generator import build_resume_document

_SECTION = re.compile(r'data-section="(\w+)"')


def _content(profile, variant):
    return str(render_resume_html(build_resume_document(profile), variant))


# ======================================================================
# Content node
# ======================================================================


class TestResumeHtml:
    def test_content_node_id_and_variant_class(self, partial_profile) -> None:
        html = _content(partial_profile, "deedy")
        assert f'<div id="{CONTENT_NODE_ID}" class="rf-page rf-variant-deedy">' in html

    def test_row_section_order(self, partial_profile) -> None:
        html = _content(partial_profile, "row")
        assert _SECTION.findall(html) == ["education", "experience", "projects", "skills"]
        assert "rf-columns" not in html

    def test_deedy_section_order_and_columns(self, partial_profile) -> None:
        html = _content(partial_profile, "deedy")
        assert _SECTION.findall(html) == [
            "experience",
            "projects",
            "education",
            "skills",
            "links",
        ]
        assert html.count('class="rf-column"') == 2

    def test_text_is_html_escaped(self, partial_profile) -> None:
        html = _content(partial_profile, "row")
        assert "Analytical Engines &amp; Co" in html
        assert "Analytical Engines & Co" not in html

    def test_dates_and_skills(self, partial_profile) -> None:
        row = _content(partial_profile, "row")
        assert "Jan 1842 – Dec 1843" in row
        assert '<span class="rf-skill-items">Python, C#</span>' in row
        deedy = _content(partial_profile, "deedy")
        assert '<span class="rf-skill-items">Python • C#</span>' in deedy

    def test_start_only_dates_read_as_present(self) -> None:
        html = _content({"experience": {"company": "Acme", "start_date": "May 2024"}}, "row")
        assert "May 2024 – Present" in html

    def test_unsafe_links_are_neutralized(self) -> None:
        html = _content({"links": {"portfolio": "javascript:alert(1)"}}, "row")
        assert 'href="javascript' not in html
        assert 'href="#"' in html

    def test_no_empty_bullet_lists(self) -> None:
        profile = {
            "experience": {"company": "Acme", "work_done": []},
            "education": [{"school": "MIT"}],
            "projects": [{"name": "Quiet"}],
        }
        assert "rf-bullets" not in _content(profile, "row")

    def test_unknown_variant(self, partial_profile) -> None:
        with pytest.raises(ValueError, match="Unknown variant"):
            _content(partial_profile, "modern")


# ======================================================================
# Preview pages
# ======================================================================


class TestRenderPreview:
    def test_content_is_independent_of_scale(self, partial_profile) -> None:
        content = _content(partial_profile, "row")
        small = render_preview(partial_profile, "row", 0.5)
        large = render_preview(partial_profile, "row", 1.75)
        assert content in small
        assert content in large
        assert "scale(0.5)" in small
        assert "scale(1.75)" in large

    @pytest.mark.parametrize("scale", [0, -1.0])
    def test_non_positive_scale(self, partial_profile, scale) -> None:
        with pytest.raises(ValueError, match="positive"):
            render_preview(partial_profile, "row", scale)
        with pytest.raises(ValueError, match="positive"):
            render_preview_surface(partial_profile, "row", scale)

    def test_page_title(self, partial_profile) -> None:
        assert "<title>Ada Lovelace - Resume</title>" in render_preview(partial_profile)


class TestPreviewSurface:
    def test_toggle_and_copy_controls(self, partial_profile) -> None:
        html = render_preview_surface(partial_profile, "deedy")
        for control in ('id="show-preview"', 'id="show-source"', 'id="copy-source"'):
            assert control in html
        assert "navigator.clipboard.writeText" in html
        assert '<pre id="source-view" class="rf-source" hidden>' in html

    def test_source_is_escaped_latex(self, partial_profile) -> None:
        html = render_preview_surface(partial_profile, "row")
        assert r"\textbf{Lead Programmer}, Analytical Engines \&amp; Co" in html

    def test_preview_content_is_embedded(self, partial_profile) -> None:
        html = render_preview_surface(partial_profile, "deedy")
        assert _content(partial_profile, "deedy") in html


# ======================================================================
# Export overrides
# ======================================================================


class TestExportOverrides:
    @pytest.mark.parametrize("variant", ["row", "deedy"])
    @pytest.mark.parametrize("use_sample", [True, False])
    def test_every_rendered_class_has_an_override(
        self, partial_profile, variant, use_sample
    ) -> None:
        profile = {} if use_sample else partial_profile
        assert missing_overrides(_content(profile, variant)) == []

    def test_collect_classes(self) -> None:
        html = '<div class="a  b"><span class="c">x</span><p>no class</p></div>'
        assert collect_classes(html) == {"a", "b", "c"}

    def test_missing_overrides_reports_unknown_classes(self) -> None:
        assert missing_overrides('<div class="rf-page rf-shiny"></div>') == ["rf-shiny"]

    def test_override_css_is_scoped(self) -> None:
        css = build_override_css("#resume-export-container")
        lines = css.splitlines()
        assert len(lines) == len(EXPORT_CLASS_OVERRIDES)
        assert all(line.startswith("#resume-export-container .rf-") for line in lines)
        assert "#resume-export-container .rf-page {" in css
