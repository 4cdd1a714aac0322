"""Tests for profile normalization and sample defaults."""

from __future__ import annotations

import logging

import pytest

from resume_forge.services.profile_defaults import (
    SAMPLE_EDUCATION,
    SAMPLE_EXPERIENCE,
    SAMPLE_LINKS,
    SAMPLE_PROJECTS,
    normalize,
    parse_work_done,
)


class TestNormalizeEmpty:
    @pytest.mark.parametrize("partial", [None, {}])
    def test_every_section_is_sampled(self, partial) -> None:
        profile = normalize(partial)
        assert profile.sample_sections == {
            "person",
            "experience",
            "education",
            "projects",
            "links",
        }
        assert profile.person.full_name == "John Doe"
        assert profile.experience == SAMPLE_EXPERIENCE
        assert profile.education == SAMPLE_EDUCATION
        assert profile.projects == SAMPLE_PROJECTS
        assert profile.links == SAMPLE_LINKS

    def test_samples_are_complete(self) -> None:
        profile = normalize({})
        assert profile.experience.work_done
        assert all(e.school and e.degree for e in profile.education)
        assert all(p.name and p.description for p in profile.projects)


class TestNormalizeSections:
    def test_full_profile_has_no_samples(self, partial_profile) -> None:
        profile = normalize(partial_profile)
        assert profile.sample_sections == frozenset()
        assert profile.person.full_name == "Ada Lovelace"
        assert profile.experience.tools_used == ("Python", "C#")
        assert profile.projects[0].topics == ("math", "algorithms")

    def test_sections_are_defaulted_independently(self, partial_profile) -> None:
        del partial_profile["experience"]
        profile = normalize(partial_profile)
        assert profile.sample_sections == {"experience"}
        assert profile.experience == SAMPLE_EXPERIENCE
        assert profile.education[0].school == "University of London"

    def test_person_without_name_keeps_handle(self) -> None:
        profile = normalize({"person": {"github_handle": "octocat"}})
        assert profile.is_sample("person")
        assert profile.person.github_handle == "octocat"
        assert profile.links.handle == "octocat"
        assert profile.links.github == "https://github.com/octocat"
        assert not profile.is_sample("links")

    def test_experience_without_company_or_title_is_sampled(self) -> None:
        profile = normalize({"experience": {"location": "Remote"}})
        assert profile.is_sample("experience")

    def test_experience_with_only_title_is_kept(self) -> None:
        profile = normalize({"experience": {"title": "Consultant", "work_done": []}})
        assert not profile.is_sample("experience")
        assert profile.experience.work_done == ()

    def test_education_entries_without_school_are_dropped(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            profile = normalize({"education": [{"degree": "BSc"}, {"school": "MIT"}]})
        assert [e.school for e in profile.education] == ["MIT"]
        assert "without a school" in caplog.text

    def test_only_invalid_projects_fall_back_to_samples(self) -> None:
        profile = normalize({"projects": [{"description": "nameless"}]})
        assert profile.is_sample("projects")
        assert profile.projects == SAMPLE_PROJECTS

    def test_non_object_entries_are_dropped(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            profile = normalize({"education": [None], "projects": [None, "junk", {"name": "X"}]})
        assert profile.is_sample("education")
        assert [p.name for p in profile.projects] == ["X"]
        assert "not an object" in caplog.text

    @pytest.mark.parametrize("section", ["person", "experience", "links"])
    def test_non_object_sections_are_sampled(self, section) -> None:
        profile = normalize({section: ["unexpected"]})
        assert profile.is_sample(section)

    def test_non_list_entry_sections_are_sampled(self) -> None:
        profile = normalize({"education": "MIT", "projects": 7})
        assert profile.is_sample("education")
        assert profile.is_sample("projects")

    def test_values_are_trimmed_and_blanks_removed(self) -> None:
        profile = normalize(
            {"experience": {"company": "  Acme  ", "tools_used": ["Go", "  ", None, " Rust "]}}
        )
        assert profile.experience.company == "Acme"
        assert profile.experience.tools_used == ("Go", "Rust")


class TestParseWorkDone:
    def test_list_is_kept(self) -> None:
        assert parse_work_done(["a", " b ", ""]) == ("a", "b")

    def test_json_array_string(self) -> None:
        assert parse_work_done('["Shipped v1", "Fixed bugs"]') == ("Shipped v1", "Fixed bugs")

    def test_bullet_glyphs_and_newlines(self) -> None:
        text = "• Shipped v1\n• Fixed bugs ● Wrote docs · Mentored"
        assert parse_work_done(text) == ("Shipped v1", "Fixed bugs", "Wrote docs", "Mentored")

    @pytest.mark.parametrize("value", [None, "", [], "   "])
    def test_empty_values(self, value) -> None:
        assert parse_work_done(value) == ()
