"""Core utilities and configuration."""

from seo_advisor.core.config import Settings, get_settings
from seo_advisor.core.logging import get_logger, setup_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "get_logger",
    "setup_logging",
]
