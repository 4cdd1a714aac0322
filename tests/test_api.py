"""Tests for the Resume Forge API application."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from resume_forge import __version__
from resume_forge.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__

    def test_health_response_is_json(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.headers["content-type"] == "application/json"


class TestAppConfiguration:
    """Tests for the FastAPI app configuration."""

    def test_app_title(self) -> None:
        assert app.title == "Resume Forge API"

    def test_app_version(self) -> None:
        assert app.version == __version__

    def test_resume_routes_are_mounted_under_api(self) -> None:
        paths = set(app.openapi()["paths"])
        assert {
            "/api/resumes/variants",
            "/api/resumes/latex",
            "/api/resumes/preview",
            "/api/resumes/export",
        } <= paths

    def test_cors_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/api/resumes/latex",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers
