"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from seo_advisor.core.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("SEO_LOCALE", "SEO_MAX_BATCH_SIZE", "LOG_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.seo_locale == "pt-BR"
        assert settings.seo_max_batch_size == 50
        assert settings.seo_slow_analysis_threshold_ms == 50.0
        assert settings.log_format == "json"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEO_MAX_BATCH_SIZE", "5")
        monkeypatch.setenv("seo_locale", "pt-br")

        settings = Settings(_env_file=None)

        assert settings.seo_max_batch_size == 5
        assert settings.seo_locale == "pt-br"

    def test_batch_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, seo_max_batch_size=0)
