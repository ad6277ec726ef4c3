"""Schemas layer - Pydantic models for API validation.

Schemas define the shape of data for API requests and responses.
They handle validation, serialization, and documentation.
"""

from seo_advisor.schemas.seo_analysis import (
    ContentLengthAnalysisItem,
    KeywordAnalysisItem,
    LeadAnalysisItem,
    LegibilityAnalysisItem,
    SearchIntentItem,
    SeoAnalysisBatchRequest,
    SeoAnalysisBatchResponse,
    SeoAnalysisRequest,
    SeoAnalysisResponse,
    StructureAnalysisItem,
    TitleAnalysisItem,
    TrustAnalysisItem,
)

__all__ = [
    "ContentLengthAnalysisItem",
    "KeywordAnalysisItem",
    "LeadAnalysisItem",
    "LegibilityAnalysisItem",
    "SearchIntentItem",
    "SeoAnalysisBatchRequest",
    "SeoAnalysisBatchResponse",
    "SeoAnalysisRequest",
    "SeoAnalysisResponse",
    "StructureAnalysisItem",
    "TitleAnalysisItem",
    "TrustAnalysisItem",
]
