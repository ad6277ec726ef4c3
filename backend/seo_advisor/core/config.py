"""Application configuration loaded from environment variables.

All configuration is via environment variables (or a local .env file).
No hardcoded URLs, ports, or credentials.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Post SEO Advisor")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server
    port: int = Field(default=8000, description="Port to bind to")
    host: str = Field(default="0.0.0.0", description="Host to bind to")

    # CORS
    frontend_url: str | None = Field(
        default=None,
        description="Frontend origin allowed by CORS (all origins when unset)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Log format: json or text")

    # SEO analysis
    seo_locale: str = Field(
        default="pt-BR",
        description="Locale code of the phrase tables used by the analyzers",
    )
    seo_max_batch_size: int = Field(
        default=50, ge=1, description="Maximum drafts per batch analysis"
    )
    seo_slow_analysis_threshold_ms: float = Field(
        default=50.0, description="Threshold for slow analysis warnings (ms)"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
