"""Integration tests for the health check endpoint.

Tests cover:
- Basic health check at /health
- Request logging and request_id headers
"""

import time

from fastapi.testclient import TestClient

from seo_advisor.core.config import Settings
from seo_advisor.main import _cors_origins


class TestHealthEndpoint:
    """Tests for the basic health check endpoint."""

    def test_health_returns_ok(self, client: TestClient) -> None:
        """Test /health returns status ok."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health_includes_request_id_header(self, client: TestClient) -> None:
        """Test /health response includes X-Request-ID header."""
        response = client.get("/health")

        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36  # UUID format: 8-4-4-4-12

    def test_request_ids_are_unique(self, client: TestClient) -> None:
        first = client.get("/health").headers["X-Request-ID"]
        second = client.get("/health").headers["X-Request-ID"]

        assert first != second

    def test_health_is_fast(self, client: TestClient) -> None:
        """Test /health responds quickly (under 100ms)."""
        start = time.monotonic()
        response = client.get("/health")
        duration_ms = (time.monotonic() - start) * 1000

        assert response.status_code == 200
        assert duration_ms < 100

    def test_unknown_route_returns_404(self, client: TestClient) -> None:
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert "X-Request-ID" in response.headers


class TestCorsOrigins:
    """Tests for CORS origin selection."""

    def test_all_origins_without_frontend_url(self) -> None:
        assert _cors_origins(Settings(_env_file=None, frontend_url=None)) == ["*"]

    def test_frontend_url_restricts_origins(self) -> None:
        settings = Settings(_env_file=None, frontend_url="https://editor.example.com")

        assert _cors_origins(settings) == ["https://editor.example.com"]
