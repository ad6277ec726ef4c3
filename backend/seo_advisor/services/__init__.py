"""Services layer - business logic for the application.

Services are pure computations or orchestrate them; they never touch the
HTTP layer directly.
"""

from seo_advisor.services.seo_analysis import (
    AnalysisInput,
    AnalysisResult,
    ContentTier,
    Grade,
    SearchIntent,
    SeoAnalysisService,
    SeoAnalysisServiceError,
    SeoAnalysisValidationError,
    Status,
    analyze,
    get_seo_analysis_service,
    run_seo_analysis,
)
from seo_advisor.services.seo_locale import (
    LOCALES,
    PT_BR,
    SeoLocale,
    UnknownLocaleError,
    get_locale,
)

__all__ = [
    # Analysis
    "AnalysisInput",
    "AnalysisResult",
    "ContentTier",
    "Grade",
    "SearchIntent",
    "SeoAnalysisService",
    "SeoAnalysisServiceError",
    "SeoAnalysisValidationError",
    "Status",
    "analyze",
    "get_seo_analysis_service",
    "run_seo_analysis",
    # Locale
    "LOCALES",
    "PT_BR",
    "SeoLocale",
    "UnknownLocaleError",
    "get_locale",
]
