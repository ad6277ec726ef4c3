"""Pydantic schemas for SEO Analysis API endpoints.

Schemas for draft article analysis:
- SeoAnalysisRequest: Analyze a single draft
- SeoAnalysisResponse: Score, grade, improvements and per-dimension results
- SeoAnalysisBatchRequest/Response: Analyze several drafts at once

Text fields default to empty strings. An empty or malformed draft is a
valid request; it simply scores low.
"""

from typing import Literal

from pydantic import BaseModel, Field

StatusValue = Literal["ok", "warn", "bad"]


# =============================================================================
# DIMENSION MODELS
# =============================================================================


class TitleAnalysisItem(BaseModel):
    """Headline length and genericness."""

    status: StatusValue = Field(..., description="Dimension status")
    status_label: str = Field(..., description="Localized status label")
    char_count: int = Field(..., ge=0, description="Trimmed title length")
    has_keyword: bool = Field(..., description="Title has at least two words")
    has_generic: bool = Field(..., description="Title uses a generic filler phrase")
    suggestion: str | None = Field(None, description="Improvement suggestion")


class LeadAnalysisItem(BaseModel):
    """Summary length and overlap with the title."""

    status: StatusValue = Field(..., description="Dimension status")
    status_label: str = Field(..., description="Localized status label")
    char_count: int = Field(..., ge=0, description="Trimmed lead length")
    repeats_title: bool = Field(False, description="Lead repeats the title opening")
    suggestion: str | None = Field(None, description="Improvement suggestion")


class ContentLengthAnalysisItem(BaseModel):
    """Body depth tier."""

    status: Literal["excellent", "ok", "warn", "bad"] = Field(
        ..., description="Dimension status"
    )
    status_label: str = Field(..., description="Localized status label")
    word_count: int = Field(..., ge=0, description="Plain-text word count")
    tier: Literal["too short", "medium", "good", "very good"] = Field(
        ..., description="Depth tier"
    )
    tier_label: str = Field(..., description="Localized tier label")
    feedback: str = Field(..., description="Tier feedback")


class StructureAnalysisItem(BaseModel):
    """Heading usage relative to content length."""

    status: StatusValue = Field(..., description="Dimension status")
    status_label: str = Field(..., description="Localized status label")
    h1: int = Field(..., ge=0, description="Number of H1 headings in the body")
    h2: int = Field(..., ge=0, description="Number of H2 headings in the body")
    h3: int = Field(..., ge=0, description="Number of H3 headings in the body")
    suggestions: list[str] = Field(
        default_factory=list, description="Structure suggestions in trigger order"
    )


class KeywordAnalysisItem(BaseModel):
    """Placement and density of the main keyword."""

    status: StatusValue = Field(..., description="Dimension status")
    status_label: str = Field(..., description="Localized status label")
    main_keyword: str | None = Field(
        None,
        description="Keyword derived from the title",
        examples=["cataratas iguaçu passeio"],
    )
    in_first_paragraphs: bool = Field(..., description="Keyword appears in the opening")
    has_variations: bool = Field(..., description="Keyword terms appear in the body")
    possible_stuffing: bool = Field(..., description="Density above the stuffing limit")
    observation: str = Field(..., description="Keyword feedback")
    density: float = Field(0.0, ge=0, description="Keyword density in percent")


class LegibilityAnalysisItem(BaseModel):
    """Sentence length and scannability."""

    status: StatusValue = Field(..., description="Dimension status")
    status_label: str = Field(..., description="Localized status label")
    avg_sentence_length: int = Field(..., ge=0, description="Average words per sentence")
    has_lists: bool = Field(..., description="Body uses ordered or unordered lists")
    has_emphasis: bool = Field(..., description="Body uses bold or strong emphasis")
    feedback: str = Field(..., description="Legibility feedback")


class TrustAnalysisItem(BaseModel):
    """Exaggerated-claim check."""

    status: Literal["ok", "warn"] = Field(..., description="Dimension status")
    status_label: str = Field(..., description="Localized status label")
    has_exaggerated: bool = Field(..., description="Hyperbolic phrasing found")
    feedback: str = Field(..., description="Trust feedback")


class SearchIntentItem(BaseModel):
    """Classified search intent."""

    type: Literal["informational", "commercial", "navigational", "transactional"] = Field(
        ..., description="Intent class"
    )
    label: str = Field(..., description="Localized intent label")
    match: bool = Field(..., description="Whether any intent pattern matched")
    scores: dict[str, int] = Field(
        default_factory=dict, description="Pattern match count per intent"
    )


# =============================================================================
# SEO ANALYSIS REQUEST
# =============================================================================


class SeoAnalysisRequest(BaseModel):
    """Request schema for a single draft analysis."""

    title: str = Field(
        "",
        description="Article headline",
        examples=["Guia completo das Cataratas do Iguaçu para famílias"],
    )
    lead: str = Field(
        "",
        description="Short summary shown in search results",
    )
    body_html: str = Field(
        "",
        description="Rich-text body as HTML",
    )
    content_id: str | None = Field(
        None,
        description="Optional content ID for tracking",
    )


# =============================================================================
# SEO ANALYSIS RESPONSE
# =============================================================================


class SeoAnalysisResponse(BaseModel):
    """Response schema for a single draft analysis."""

    content_id: str | None = Field(None, description="Content ID that was analyzed")

    # Summary
    score: int = Field(..., ge=0, le=100, description="Weighted score from 0-100")
    grade: Literal["ruim", "regular", "bom", "excelente"] = Field(
        ..., description="Grade band of the score"
    )
    grade_label: str = Field(..., description="Localized grade label")
    improvements: list[str] = Field(
        default_factory=list,
        max_length=5,
        description="Prioritized improvement suggestions (max 5)",
    )
    reading_time_minutes: int = Field(..., ge=1, description="Estimated reading time")

    # Dimensions
    title: TitleAnalysisItem
    lead: LeadAnalysisItem
    content_length: ContentLengthAnalysisItem
    structure: StructureAnalysisItem
    keywords: KeywordAnalysisItem
    legibility: LegibilityAnalysisItem
    trust: TrustAnalysisItem
    search_intent: SearchIntentItem

    # Performance
    duration_ms: float | None = Field(
        None, description="Processing time in milliseconds (single requests only)"
    )


# =============================================================================
# BATCH SEO ANALYSIS
# =============================================================================


class SeoAnalysisBatchRequest(BaseModel):
    """Request schema for batch analysis.

    The upper bound is enforced by the service (SEO_MAX_BATCH_SIZE).
    """

    items: list[SeoAnalysisRequest] = Field(
        ...,
        min_length=1,
        description="Drafts to analyze",
    )


class SeoAnalysisBatchResponse(BaseModel):
    """Response schema for batch analysis."""

    results: list[SeoAnalysisResponse] = Field(
        default_factory=list,
        description="Results in request order",
    )
    total_items: int = Field(0, description="Total items in request")
    average_score: float = Field(0.0, description="Average score of the batch")
    duration_ms: float = Field(..., description="Total processing time")
