"""Tests for the full-profile response adapter."""

from __future__ import annotations

import pytest

from resume_forge.services.profile_defaults import normalize
from resume_forge.services.profile_transformers import (
    format_location,
    format_month_year,
    pick_primary_experience,
    profile_from_full_response,
)


@pytest.fixture
def full_response() -> dict:
    return {
        "first_name": "Grace",
        "last_name": "Hopper",
        "github_user_name": "ghopper",
        "links": {
            "portfolio_link": "https://grace.dev",
            "github_link": None,
            "linkedin_link": "https://linkedin.com/in/ghopper",
        },
        "profile": {
            "work_experience": [
                {
                    "company_name": "Harvard",
                    "title": "Programmer",
                    "start_date_year": 1944,
                    "start_date_month": 7,
                    "end_date_year": 1949,
                    "end_date_month": 6,
                    "location": {"city": "Cambridge", "state": "MA", "country": ""},
                    "work_done": "• Programmed the Mark I\n• Wrote the manual",
                    "tools_used": ["Mark I"],
                },
                {
                    "company_name": "Remington Rand",
                    "title": "Senior Mathematician",
                    "start_date_year": 1949,
                    "start_date_month": 8,
                    "currently_working": True,
                    "tools_used": ["UNIVAC", "A-0"],
                },
            ],
            "education": [
                {
                    "school_name": "Yale",
                    "degree": "PhD",
                    "course_field_name": "Mathematics",
                    "start_date_year": 1930,
                    "currently_studying": False,
                    "end_date_year": 1934,
                    "end_date_month": 2,
                }
            ],
            "projects": [
                {
                    "name": "COBOL",
                    "github_about": "Business-oriented language",
                    "topics": ["languages"],
                    "tools": ["FLOW-MATIC"],
                    "owner": "codasyl",
                    "created_at": "1959",
                }
            ],
        },
    }


class TestFormatting:
    def test_month_year(self) -> None:
        assert format_month_year(2021, 8) == "Aug 2021"

    def test_year_only_when_month_missing_or_invalid(self) -> None:
        assert format_month_year(2021, None) == "2021"
        assert format_month_year(2021, 13) == "2021"

    def test_no_year(self) -> None:
        assert format_month_year(None, 5) == ""

    def test_location_object(self) -> None:
        location = {"city": "Kelowna", "state": " BC ", "country": "Canada"}
        assert format_location(location) == "Kelowna, BC, Canada"

    def test_location_skips_blanks(self) -> None:
        assert format_location({"city": "", "state": None, "country": "Canada"}) == "Canada"

    def test_location_string_and_none(self) -> None:
        assert format_location(" Remote ") == "Remote"
        assert format_location(None) == ""


class TestPickPrimaryExperience:
    def test_current_role_wins(self, full_response) -> None:
        primary = pick_primary_experience(full_response["profile"]["work_experience"])
        assert primary["company_name"] == "Remington Rand"

    def test_most_recent_start_when_none_current(self) -> None:
        experiences = [
            {"company_name": "Old", "start_date_year": 2010, "start_date_month": 1},
            {"company_name": "New", "start_date_year": 2020, "start_date_month": 3},
            {"company_name": "Mid", "start_date_year": 2020, "start_date_month": 1},
        ]
        assert pick_primary_experience(experiences)["company_name"] == "New"

    def test_empty(self) -> None:
        assert pick_primary_experience([]) is None
        assert pick_primary_experience(None) is None


class TestProfileFromFullResponse:
    def test_maps_every_section(self, full_response) -> None:
        partial = profile_from_full_response(full_response)

        assert partial["person"] == {"first": "Grace", "last": "Hopper", "github_handle": "ghopper"}
        assert partial["experience"]["company"] == "Remington Rand"
        assert partial["experience"]["start_date"] == "Aug 1949"
        assert partial["experience"]["end_date"] == "Present"
        assert partial["experience"]["tools_used"] == ["UNIVAC", "A-0"]
        assert partial["education"][0]["school"] == "Yale"
        assert partial["education"][0]["start_date"] == "1930"
        assert partial["education"][0]["end_date"] == "Feb 1934"
        assert partial["projects"][0]["description"] == "Business-oriented language"
        assert partial["projects"][0]["organization_or_owner"] == "codasyl"
        assert partial["links"] == {
            "portfolio": "https://grace.dev",
            "linkedin": "https://linkedin.com/in/ghopper",
            "handle": "ghopper",
        }

    def test_work_done_string_is_split(self, full_response) -> None:
        full_response["profile"]["work_experience"].pop()
        partial = profile_from_full_response(full_response)
        assert partial["experience"]["work_done"] == ["Programmed the Mark I", "Wrote the manual"]
        assert partial["experience"]["location"] == "Cambridge, MA"

    def test_missing_sections_are_omitted(self) -> None:
        assert profile_from_full_response({}) == {}

    def test_result_normalizes_without_samples(self, full_response) -> None:
        profile = normalize(profile_from_full_response(full_response))
        assert profile.sample_sections == frozenset()
        assert profile.links.github == "https://github.com/ghopper"
