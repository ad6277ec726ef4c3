"""Pytest configuration and fixtures.

Provides fixtures for:
- Settings override for testing
- A shared SEO analysis service with a small batch limit
- FastAPI test client
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from seo_advisor.core.config import Settings
from seo_advisor.services.seo_analysis import (
    SeoAnalysisService,
    get_seo_analysis_service,
)
from seo_advisor.services.seo_locale import PT_BR

TEST_MAX_BATCH_SIZE = 3

# ---------------------------------------------------------------------------
# Settings Fixtures
# ---------------------------------------------------------------------------


def get_test_settings() -> Settings:
    """Get test settings."""
    return Settings(
        app_name="Test App",
        app_version="0.0.1",
        debug=True,
        environment="test",
        log_level="DEBUG",
        log_format="text",
        seo_max_batch_size=TEST_MAX_BATCH_SIZE,
    )


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Session-scoped test settings."""
    return get_test_settings()


# ---------------------------------------------------------------------------
# Service Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def seo_service(test_settings: Settings) -> SeoAnalysisService:
    """SEO analysis service bound to the pt-BR tables and test limits."""
    return SeoAnalysisService(
        locale=PT_BR,
        max_batch_size=test_settings.seo_max_batch_size,
        slow_threshold_ms=test_settings.seo_slow_analysis_threshold_ms,
    )


# ---------------------------------------------------------------------------
# Application Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app() -> FastAPI:
    """Create a fresh application instance."""
    from seo_advisor.main import create_app

    return create_app()


@pytest.fixture
def client(
    app: FastAPI,
    seo_service: SeoAnalysisService,
) -> Generator[TestClient, None, None]:
    """Create synchronous test client with the test service injected."""
    app.dependency_overrides[get_seo_analysis_service] = lambda: seo_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
