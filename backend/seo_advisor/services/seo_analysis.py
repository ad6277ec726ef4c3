"""SEO analysis service for article drafts.

Scores a draft (title, lead, rich-text body) against on-page SEO heuristics
and returns per-dimension diagnostics, a 0-100 score, a grade and a short
prioritized list of improvements:
- Title length and generic call-to-action phrasing
- Lead (meta description) length and title repetition
- Content depth by word count
- Heading structure
- Main keyword placement and density
- Legibility (sentence length, lists, emphasis)
- Trust signals (exaggerated claims)
- Search intent classification

Features:
- Deterministic pattern matching (no LLM calls, no I/O)
- Never raises on any string input; bad input lowers the score instead
- Locale-specific phrase data injected through SeoLocale
- Batch analysis support
"""

import math
import re
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from seo_advisor.core.config import get_settings
from seo_advisor.core.logging import get_logger
from seo_advisor.services.seo_locale import PT_BR, SeoLocale, get_locale
from seo_advisor.utils.html_text import (
    HeadingCounts,
    count_headings,
    get_word_count,
    has_emphasis_markup,
    has_list_markup,
    strip_html,
)

logger = get_logger(__name__)

# =============================================================================
# THRESHOLDS
# =============================================================================

# Title length (characters)
TITLE_IDEAL_MIN = 40
TITLE_IDEAL_MAX = 65
TITLE_HARD_MIN = 30
TITLE_HARD_MAX = 70

# Lead length (characters)
LEAD_IDEAL_MIN = 120
LEAD_IDEAL_MAX = 160
LEAD_TITLE_PREFIX_CHARS = 20

# Content depth (words)
CONTENT_MEDIUM_WORDS = 300
CONTENT_GOOD_WORDS = 700
CONTENT_VERY_GOOD_WORDS = 1500

# Structure (words)
STRUCTURE_H2_MIN_WORDS = 100
STRUCTURE_H3_MIN_WORDS = 300
STRUCTURE_ANY_HEADING_MIN_WORDS = 50

# Keywords
KEYWORD_MIN_BODY_WORDS = 20
KEYWORD_OPENING_CHARS = 150
KEYWORD_MAX_TERMS = 3
KEYWORD_MIN_TERM_LENGTH = 3
KEYWORD_FALLBACK_CHARS = 30
# Tunable heuristic, not a documented search-engine limit
KEYWORD_STUFFING_DENSITY = 3.5

# Legibility (words per sentence). Tunable heuristics.
LEGIBILITY_LONG_SENTENCE = 25
LEGIBILITY_VERY_LONG_SENTENCE = 35
LEGIBILITY_MIN_SENTENCES = 3
LEGIBILITY_LIST_MIN_WORDS = 150
LEGIBILITY_EMPHASIS_MIN_WORDS = 100

# Aggregation
INTENT_COVERAGE_MIN_WORDS = 50
READING_WORDS_PER_MINUTE = 200
MAX_IMPROVEMENTS = 5

_PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")
_SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")


# =============================================================================
# ENUMS
# =============================================================================


class Status(str, Enum):
    """Outcome of a single analysis dimension."""

    EXCELLENT = "excellent"
    OK = "ok"
    WARN = "warn"
    BAD = "bad"


class ContentTier(str, Enum):
    """Depth bucket derived from body word count."""

    TOO_SHORT = "too short"
    MEDIUM = "medium"
    GOOD = "good"
    VERY_GOOD = "very good"


class SearchIntent(str, Enum):
    """Presumed purpose of the content."""

    INFORMATIONAL = "informational"
    COMMERCIAL = "commercial"
    NAVIGATIONAL = "navigational"
    TRANSACTIONAL = "transactional"


class Grade(str, Enum):
    """Overall grade band of the score."""

    RUIM = "ruim"
    REGULAR = "regular"
    BOM = "bom"
    EXCELENTE = "excelente"


# First intent wins ties
INTENT_PRIORITY = (
    SearchIntent.INFORMATIONAL,
    SearchIntent.COMMERCIAL,
    SearchIntent.NAVIGATIONAL,
    SearchIntent.TRANSACTIONAL,
)

# Lower bound (inclusive) of each grade band, highest first
GRADE_THRESHOLDS = (
    (80, Grade.EXCELENTE),
    (60, Grade.BOM),
    (40, Grade.REGULAR),
)

_SEVERITY = {
    Status.EXCELLENT: 0,
    Status.OK: 0,
    Status.WARN: 1,
    Status.BAD: 2,
}


# =============================================================================
# SCORING CONFIGURATION
# =============================================================================

# Summation order matters for rounding; keep it stable
SCORING_WEIGHTS = {
    "title": 0.075,
    "lead": 0.075,
    "content_length": 0.15,
    "structure": 0.2,
    "keywords": 0.175,
    "legibility": 0.1,
    "trust": 0.05,
    "intent": 0.175,
}

STATUS_SCORES = {
    Status.OK: 100,
    Status.WARN: 60,
    Status.BAD: 20,
}

CONTENT_LENGTH_SCORES = {
    Status.EXCELLENT: 100,
    Status.OK: 85,
    Status.WARN: 50,
    Status.BAD: 20,
}

LEAD_BAD_SCORE = 30
TRUST_OK_SCORE = 100
TRUST_WARN_SCORE = 70
INTENT_COVERAGE_SCORE = 100
INTENT_UNCOVERED_SCORE = 50


def worst_status(*statuses: Status) -> Status:
    """Return the most severe of the given statuses (OK when none given)."""
    worst = Status.OK
    for status in statuses:
        if _SEVERITY[status] > _SEVERITY[worst]:
            worst = status
    return worst


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True)
class AnalysisInput:
    """Draft article submitted for analysis."""

    title: str = ""
    lead: str = ""
    body_markup: str = ""
    content_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging (sanitized)."""
        return {
            "title_length": len(self.title or ""),
            "lead_length": len(self.lead or ""),
            "body_markup_length": len(self.body_markup or ""),
            "content_id": self.content_id,
        }


@dataclass(frozen=True)
class TitleAnalysis:
    """Headline length and genericness."""

    status: Status
    status_label: str
    char_count: int
    has_keyword: bool
    has_generic: bool
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "status_label": self.status_label,
            "char_count": self.char_count,
            "has_keyword": self.has_keyword,
            "has_generic": self.has_generic,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class LeadAnalysis:
    """Summary length and overlap with the title."""

    status: Status
    status_label: str
    char_count: int
    repeats_title: bool = False
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "status_label": self.status_label,
            "char_count": self.char_count,
            "repeats_title": self.repeats_title,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class ContentLengthAnalysis:
    """Body depth tier."""

    status: Status
    status_label: str
    word_count: int
    tier: ContentTier
    tier_label: str
    feedback: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "status_label": self.status_label,
            "word_count": self.word_count,
            "tier": self.tier.value,
            "tier_label": self.tier_label,
            "feedback": self.feedback,
        }


@dataclass(frozen=True)
class StructureAnalysis:
    """Heading usage relative to content length."""

    status: Status
    status_label: str
    h1: int
    h2: int
    h3: int
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "status_label": self.status_label,
            "h1": self.h1,
            "h2": self.h2,
            "h3": self.h3,
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class KeywordAnalysis:
    """Placement and density of the title's main keyword."""

    status: Status
    status_label: str
    main_keyword: str | None
    in_first_paragraphs: bool
    has_variations: bool
    possible_stuffing: bool
    observation: str
    density: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "status_label": self.status_label,
            "main_keyword": self.main_keyword,
            "in_first_paragraphs": self.in_first_paragraphs,
            "has_variations": self.has_variations,
            "possible_stuffing": self.possible_stuffing,
            "observation": self.observation,
            "density": round(self.density, 2),
        }


@dataclass(frozen=True)
class LegibilityAnalysis:
    """Sentence length and scannability."""

    status: Status
    status_label: str
    avg_sentence_length: int
    has_lists: bool
    has_emphasis: bool
    feedback: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "status_label": self.status_label,
            "avg_sentence_length": self.avg_sentence_length,
            "has_lists": self.has_lists,
            "has_emphasis": self.has_emphasis,
            "feedback": self.feedback,
        }


@dataclass(frozen=True)
class TrustAnalysis:
    """Exaggerated-claim check (EEAT proxy). Never BAD."""

    status: Status
    status_label: str
    has_exaggerated: bool
    feedback: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "status_label": self.status_label,
            "has_exaggerated": self.has_exaggerated,
            "feedback": self.feedback,
        }


@dataclass(frozen=True)
class SearchIntentAnalysis:
    """Intent class picked by pattern counts."""

    type: SearchIntent
    label: str
    match: bool
    scores: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "label": self.label,
            "match": self.match,
            "scores": dict(self.scores),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Complete diagnostic for one draft."""

    title: TitleAnalysis
    lead: LeadAnalysis
    content_length: ContentLengthAnalysis
    structure: StructureAnalysis
    keywords: KeywordAnalysis
    legibility: LegibilityAnalysis
    trust: TrustAnalysis
    search_intent: SearchIntentAnalysis
    score: int
    grade: Grade
    grade_label: str
    improvements: list[str] = field(default_factory=list)
    reading_time_minutes: int = 1

    @property
    def word_count(self) -> int:
        return self.content_length.word_count

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title.to_dict(),
            "lead": self.lead.to_dict(),
            "content_length": self.content_length.to_dict(),
            "structure": self.structure.to_dict(),
            "keywords": self.keywords.to_dict(),
            "legibility": self.legibility.to_dict(),
            "trust": self.trust.to_dict(),
            "search_intent": self.search_intent.to_dict(),
            "score": self.score,
            "grade": self.grade.value,
            "grade_label": self.grade_label,
            "improvements": list(self.improvements),
            "reading_time_minutes": self.reading_time_minutes,
        }


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SeoAnalysisServiceError(Exception):
    """Base exception for SEO analysis service errors."""

    def __init__(self, message: str, content_id: str | None = None) -> None:
        super().__init__(message)
        self.content_id = content_id


class SeoAnalysisValidationError(SeoAnalysisServiceError):
    """Raised when a request to the service is rejected."""

    def __init__(
        self,
        field_name: str,
        value: Any,
        message: str,
        content_id: str | None = None,
    ) -> None:
        super().__init__(f"Validation error for {field_name}: {message}", content_id)
        self.field_name = field_name
        self.value = value


# =============================================================================
# ANALYZERS
# =============================================================================


def analyze_title(title: str, locale: SeoLocale = PT_BR) -> TitleAnalysis:
    """Grade the headline's length and genericness.

    Length outside 40-65 characters is a warning, outside 30-70 is bad.
    Generic call-to-action phrasing and single-word titles are warnings.

    Args:
        title: Draft headline
        locale: Phrase tables and messages

    Returns:
        TitleAnalysis with status and an optional suggestion
    """
    text = (title or "").strip()
    length = len(text)

    if not text:
        return TitleAnalysis(
            status=Status.BAD,
            status_label=locale.status_labels[Status.BAD.value],
            char_count=0,
            has_keyword=False,
            has_generic=False,
            suggestion=locale.message("title_empty"),
        )

    lower = text.lower()
    has_generic = any(term in lower for term in locale.generic_title_terms)
    has_keyword = len(text.split()) >= 2

    triggered: list[Status] = []
    messages: list[str] = []

    if length < TITLE_IDEAL_MIN:
        triggered.append(Status.WARN)
        messages.append(locale.message(
            "title_short",
            min=TITLE_IDEAL_MIN,
            max=TITLE_IDEAL_MAX,
            missing=TITLE_IDEAL_MIN - length,
        ))
    elif length > TITLE_IDEAL_MAX:
        triggered.append(Status.WARN)
        messages.append(locale.message(
            "title_long",
            min=TITLE_IDEAL_MIN,
            max=TITLE_IDEAL_MAX,
            excess=length - TITLE_IDEAL_MAX,
        ))

    if has_generic:
        triggered.append(Status.WARN)
        messages.append(locale.message("title_generic"))

    # Only asked for when the title is otherwise fine
    if not triggered and not has_keyword:
        triggered.append(Status.WARN)
        messages.append(locale.message("title_keyword"))

    if length < TITLE_HARD_MIN or length > TITLE_HARD_MAX:
        triggered.append(Status.BAD)

    status = worst_status(*triggered)
    return TitleAnalysis(
        status=status,
        status_label=locale.status_labels[status.value],
        char_count=length,
        has_keyword=has_keyword,
        has_generic=has_generic,
        suggestion=" ".join(messages) or None,
    )


def analyze_lead(lead: str, title: str, locale: SeoLocale = PT_BR) -> LeadAnalysis:
    """Grade the summary's length and whether it just repeats the title.

    A missing lead is a warning, not a failure.
    """
    text = (lead or "").strip()
    length = len(text)

    if not text:
        return LeadAnalysis(
            status=Status.WARN,
            status_label=locale.status_labels[Status.WARN.value],
            char_count=0,
            suggestion=locale.message("lead_empty", min=LEAD_IDEAL_MIN, max=LEAD_IDEAL_MAX),
        )

    title_text = (title or "").strip().lower()
    repeats_title = bool(title_text) and title_text[:LEAD_TITLE_PREFIX_CHARS] in text.lower()

    triggered: list[Status] = []
    messages: list[str] = []

    if length < LEAD_IDEAL_MIN:
        triggered.append(Status.WARN)
        messages.append(locale.message(
            "lead_short",
            length=length,
            missing=LEAD_IDEAL_MIN - length,
            min=LEAD_IDEAL_MIN,
            max=LEAD_IDEAL_MAX,
        ))
    elif length > LEAD_IDEAL_MAX:
        triggered.append(Status.WARN)
        messages.append(locale.message(
            "lead_long",
            length=length,
            excess=length - LEAD_IDEAL_MAX,
            min=LEAD_IDEAL_MIN,
            max=LEAD_IDEAL_MAX,
        ))

    if repeats_title:
        triggered.append(Status.WARN)
        messages.append(locale.message("lead_repeats_title"))

    status = worst_status(*triggered)
    return LeadAnalysis(
        status=status,
        status_label=locale.status_labels[status.value],
        char_count=length,
        repeats_title=repeats_title,
        suggestion=" ".join(messages) or None,
    )


def analyze_content_length(
    word_count: int, locale: SeoLocale = PT_BR
) -> ContentLengthAnalysis:
    """Classify plain-text word count into a depth tier."""
    if word_count >= CONTENT_VERY_GOOD_WORDS:
        status, tier, label_key, feedback = (
            Status.EXCELLENT, ContentTier.VERY_GOOD, "excellent",
            locale.message("content_very_good"),
        )
    elif word_count >= CONTENT_GOOD_WORDS:
        status, tier, label_key, feedback = (
            Status.OK, ContentTier.GOOD, "ok", locale.message("content_good"),
        )
    elif word_count >= CONTENT_MEDIUM_WORDS:
        status, tier, label_key, feedback = (
            Status.WARN, ContentTier.MEDIUM, "warn", locale.message("content_medium"),
        )
    elif word_count > 0:
        status, tier, label_key, feedback = (
            Status.BAD, ContentTier.TOO_SHORT, "bad",
            locale.message("content_too_short", min_words=CONTENT_MEDIUM_WORDS),
        )
    else:
        status, tier, label_key, feedback = (
            Status.BAD, ContentTier.TOO_SHORT, "empty", locale.message("content_empty"),
        )

    return ContentLengthAnalysis(
        status=status,
        status_label=locale.content_status_labels[label_key],
        word_count=word_count,
        tier=tier,
        tier_label=locale.tier_labels[tier.value],
        feedback=feedback,
    )


def analyze_structure(
    headings: HeadingCounts,
    word_count: int,
    has_page_title: bool,
    locale: SeoLocale = PT_BR,
) -> StructureAnalysis:
    """Judge heading usage relative to content length.

    The page title is rendered as the document's H1 by the surrounding page,
    so an H1 inside the body only earns an informational note.

    Args:
        headings: Heading counts of the raw body markup
        word_count: Plain-text word count of the body
        has_page_title: Whether the draft has a non-empty title
        locale: Phrase tables and messages

    Returns:
        StructureAnalysis with suggestions in the order they were triggered
    """
    triggered: list[Status] = []
    suggestions: list[str] = []

    if has_page_title and headings.h1 > 0:
        suggestions.append(locale.message("structure_page_title_is_h1"))

    if headings.h2 == 0 and headings.h3 == 0 and word_count > STRUCTURE_H2_MIN_WORDS:
        triggered.append(Status.WARN)
        suggestions.append(locale.message("structure_add_h2"))

    if headings.h2 > 0 and headings.h3 == 0 and word_count > STRUCTURE_H3_MIN_WORDS:
        suggestions.append(locale.message("structure_add_h3"))

    if headings.h1 > 1:
        triggered.append(Status.WARN)
        suggestions.append(locale.message("structure_single_h1"))

    if headings.total == 0 and word_count > STRUCTURE_ANY_HEADING_MIN_WORDS:
        triggered.append(Status.WARN)
        if not suggestions:
            suggestions.append(locale.message("structure_add_headings"))

    status = worst_status(*triggered)
    return StructureAnalysis(
        status=status,
        status_label=locale.status_labels[status.value],
        h1=headings.h1,
        h2=headings.h2,
        h3=headings.h3,
        suggestions=suggestions,
    )


def derive_main_keyword(title: str, locale: SeoLocale = PT_BR) -> str:
    """Pick up to three meaningful title words as the main keyword.

    Falls back to the first 30 characters of the raw title when every word
    is a stop-word or too short.
    """
    cleaned = _PUNCTUATION_PATTERN.sub("", (title or "").strip().lower())
    terms = [
        word for word in cleaned.split()
        if len(word) >= KEYWORD_MIN_TERM_LENGTH and word not in locale.stop_words
    ]
    return " ".join(terms[:KEYWORD_MAX_TERMS]) or (title or "")[:KEYWORD_FALLBACK_CHARS]


def analyze_keywords(
    title: str, plain_text: str, locale: SeoLocale = PT_BR
) -> KeywordAnalysis:
    """Check placement and density of the title's main keyword in the body.

    Density counts non-overlapping substring occurrences of every keyword
    term, relative to the body word count.
    """
    text = (plain_text or "").lower()
    words = text.split()
    main_keyword = derive_main_keyword(title, locale)
    terms = main_keyword.split()

    if not text or len(words) < KEYWORD_MIN_BODY_WORDS:
        return KeywordAnalysis(
            status=Status.WARN,
            status_label=locale.status_labels[Status.WARN.value],
            main_keyword=main_keyword or None,
            in_first_paragraphs=False,
            has_variations=False,
            possible_stuffing=False,
            observation=locale.message("keyword_insufficient"),
        )

    opening = text[:KEYWORD_OPENING_CHARS]
    in_first_paragraphs = any(term in opening for term in terms)
    occurrences = sum(text.count(term) for term in terms)
    density = occurrences / len(words) * 100
    possible_stuffing = density > KEYWORD_STUFFING_DENSITY
    has_variations = any(term in text for term in terms) if len(terms) >= 2 else True

    if possible_stuffing:
        status = Status.BAD
        observation = locale.message("keyword_stuffing")
    elif not in_first_paragraphs:
        status = Status.WARN
        observation = locale.message("keyword_not_in_opening")
    else:
        status = Status.OK
        observation = locale.message("keyword_natural")

    return KeywordAnalysis(
        status=status,
        status_label=locale.status_labels[status.value],
        main_keyword=main_keyword or None,
        in_first_paragraphs=in_first_paragraphs,
        has_variations=has_variations,
        possible_stuffing=possible_stuffing,
        observation=observation,
        density=density,
    )


def analyze_legibility(
    plain_text: str, markup: str, locale: SeoLocale = PT_BR
) -> LegibilityAnalysis:
    """Estimate sentence length and check for lists and emphasis.

    Long sentences only count against the draft once it has more than three
    sentences. Missing emphasis adds advice but never changes the status.
    """
    text = plain_text or ""
    sentences = [s for s in _SENTENCE_SPLIT_PATTERN.split(text) if s.strip()]
    word_count = get_word_count(text)
    avg_sentence_length = word_count / len(sentences) if sentences else 0.0
    has_lists = has_list_markup(markup)
    has_emphasis = has_emphasis_markup(markup)

    triggered: list[Status] = []
    feedback: list[str] = []

    if len(sentences) > LEGIBILITY_MIN_SENTENCES:
        if avg_sentence_length > LEGIBILITY_VERY_LONG_SENTENCE:
            triggered.append(Status.BAD)
            feedback.append(locale.message("legibility_very_long"))
        elif avg_sentence_length > LEGIBILITY_LONG_SENTENCE:
            triggered.append(Status.WARN)
            feedback.append(locale.message("legibility_long"))

    if not has_lists and word_count > LEGIBILITY_LIST_MIN_WORDS:
        triggered.append(Status.WARN)
        feedback.append(locale.message("legibility_lists"))

    if not has_emphasis and word_count > LEGIBILITY_EMPHASIS_MIN_WORDS:
        feedback.append(locale.message("legibility_emphasis"))

    status = worst_status(*triggered)
    if status == Status.OK and not feedback:
        feedback.append(locale.message("legibility_ok"))

    return LegibilityAnalysis(
        status=status,
        status_label=locale.legibility_status_labels[status.value],
        avg_sentence_length=_round_half_up(avg_sentence_length),
        has_lists=has_lists,
        has_emphasis=has_emphasis,
        feedback=" ".join(feedback),
    )


def analyze_trust(plain_text: str, locale: SeoLocale = PT_BR) -> TrustAnalysis:
    """Flag hyperbolic phrasing that undermines credibility."""
    text = (plain_text or "").lower()
    has_exaggerated = any(phrase in text for phrase in locale.exaggerated_phrases)
    status = Status.WARN if has_exaggerated else Status.OK

    return TrustAnalysis(
        status=status,
        status_label=locale.status_labels[status.value],
        has_exaggerated=has_exaggerated,
        feedback=locale.message("trust_exaggerated" if has_exaggerated else "trust_ok"),
    )


def classify_search_intent(
    title: str, plain_text: str, locale: SeoLocale = PT_BR
) -> SearchIntentAnalysis:
    """Bucket title and body into the intent with the most pattern matches.

    Ties go to the earliest intent in INTENT_PRIORITY; no match at all
    defaults to informational with ``match`` False.
    """
    text = f"{title or ''} {plain_text or ''}".lower()
    scores = {
        intent.value: len(locale.intent_patterns[intent.value].findall(text))
        for intent in INTENT_PRIORITY
    }
    best = max(scores.values())
    intent = next(i for i in INTENT_PRIORITY if scores[i.value] == best)

    return SearchIntentAnalysis(
        type=intent,
        label=locale.intent_labels[intent.value],
        match=best > 0,
        scores=scores,
    )


# =============================================================================
# AGGREGATION
# =============================================================================


def calculate_score(
    title: TitleAnalysis,
    lead: LeadAnalysis,
    content_length: ContentLengthAnalysis,
    structure: StructureAnalysis,
    keywords: KeywordAnalysis,
    legibility: LegibilityAnalysis,
    trust: TrustAnalysis,
    lead_text: str,
) -> int:
    """Combine dimension statuses into a weighted 0-100 score.

    Structure, legibility and trust are vacuous over an empty body and
    contribute nothing when the body has no words.
    """
    word_count = content_length.word_count

    if lead.status == Status.BAD:
        lead_score = LEAD_BAD_SCORE if (lead_text or "").strip() else 0
    else:
        lead_score = STATUS_SCORES[lead.status]

    sub_scores = {
        "title": STATUS_SCORES[title.status],
        "lead": lead_score,
        "content_length": CONTENT_LENGTH_SCORES[content_length.status],
        "structure": STATUS_SCORES[structure.status],
        "keywords": STATUS_SCORES[keywords.status],
        "legibility": STATUS_SCORES[legibility.status],
        "trust": TRUST_OK_SCORE if trust.status == Status.OK else TRUST_WARN_SCORE,
        "intent": (
            INTENT_COVERAGE_SCORE
            if word_count > INTENT_COVERAGE_MIN_WORDS
            else INTENT_UNCOVERED_SCORE
        ),
    }

    if word_count == 0:
        sub_scores["structure"] = 0
        sub_scores["legibility"] = 0
        sub_scores["trust"] = 0

    total = sum(sub_scores[name] * weight for name, weight in SCORING_WEIGHTS.items())
    return min(100, max(0, _round_half_up(total)))


def grade_for_score(score: int) -> Grade:
    """Map a score to its grade band."""
    for lower_bound, grade in GRADE_THRESHOLDS:
        if score >= lower_bound:
            return grade
    return Grade.RUIM


def compile_improvements(
    title: TitleAnalysis,
    lead: LeadAnalysis,
    content_length: ContentLengthAnalysis,
    structure: StructureAnalysis,
    keywords: KeywordAnalysis,
    legibility: LegibilityAnalysis,
    trust: TrustAnalysis,
    locale: SeoLocale = PT_BR,
) -> list[str]:
    """Collect suggestions in priority order, capped at MAX_IMPROVEMENTS."""
    improvements: list[str] = []

    if title.suggestion:
        improvements.append(title.suggestion)
    if lead.suggestion and lead.status != Status.OK:
        improvements.append(lead.suggestion)
    improvements.extend(structure.suggestions)
    if keywords.observation and keywords.status != Status.OK:
        improvements.append(keywords.observation)
    if legibility.feedback and legibility.status != Status.OK:
        improvements.append(legibility.feedback)
    if trust.feedback and trust.status != Status.OK:
        improvements.append(trust.feedback)
    if 0 < content_length.word_count < CONTENT_MEDIUM_WORDS:
        improvements.append(
            locale.message("content_grow", min_words=CONTENT_MEDIUM_WORDS)
        )

    return improvements[:MAX_IMPROVEMENTS]


def run_seo_analysis(
    input_data: AnalysisInput, locale: SeoLocale = PT_BR
) -> AnalysisResult:
    """Run every analyzer over a draft and aggregate the results.

    Pure function: no I/O, no logging, no shared state.

    Args:
        input_data: Draft title, lead and body markup (any may be empty)
        locale: Phrase tables and messages

    Returns:
        AnalysisResult with per-dimension diagnostics, score and grade
    """
    title = input_data.title or ""
    lead = input_data.lead or ""
    markup = input_data.body_markup or ""

    plain_text = strip_html(markup)
    word_count = get_word_count(plain_text)
    headings = count_headings(markup)

    title_analysis = analyze_title(title, locale)
    lead_analysis = analyze_lead(lead, title, locale)
    content_length = analyze_content_length(word_count, locale)
    structure = analyze_structure(headings, word_count, bool(title.strip()), locale)
    keywords = analyze_keywords(title, plain_text, locale)
    legibility = analyze_legibility(plain_text, markup, locale)
    trust = analyze_trust(plain_text, locale)
    search_intent = classify_search_intent(title, plain_text, locale)

    score = calculate_score(
        title_analysis,
        lead_analysis,
        content_length,
        structure,
        keywords,
        legibility,
        trust,
        lead,
    )
    grade = grade_for_score(score)

    return AnalysisResult(
        title=title_analysis,
        lead=lead_analysis,
        content_length=content_length,
        structure=structure,
        keywords=keywords,
        legibility=legibility,
        trust=trust,
        search_intent=search_intent,
        score=score,
        grade=grade,
        grade_label=locale.grade_labels[grade.value],
        improvements=compile_improvements(
            title_analysis,
            lead_analysis,
            content_length,
            structure,
            keywords,
            legibility,
            trust,
            locale,
        ),
        reading_time_minutes=max(1, math.ceil(word_count / READING_WORDS_PER_MINUTE)),
    )


# =============================================================================
# SERVICE
# =============================================================================


class SeoAnalysisService:
    """Service wrapper around the pure analysis pipeline.

    Adds timing, structured logging and batch handling. Each call is an
    independent computation, so one instance can be shared freely.

    Usage:
        service = SeoAnalysisService()
        result = service.analyze(
            AnalysisInput(
                title="Guia completo das Cataratas do Iguaçu para famílias",
                lead="...",
                body_markup="<h2>Como chegar</h2><p>...</p>",
            ),
        )
    """

    def __init__(
        self,
        locale: SeoLocale | None = None,
        max_batch_size: int | None = None,
        slow_threshold_ms: float | None = None,
    ) -> None:
        """Initialize SEO analysis service.

        Args:
            locale: Phrase tables; defaults to the SEO_LOCALE setting
            max_batch_size: Batch limit; defaults to SEO_MAX_BATCH_SIZE
            slow_threshold_ms: Slow warning threshold; defaults to the setting

        Raises:
            UnknownLocaleError: If SEO_LOCALE names an unregistered locale
        """
        settings = get_settings()
        self.locale = locale or get_locale(settings.seo_locale)
        self.max_batch_size = (
            max_batch_size
            if max_batch_size is not None
            else settings.seo_max_batch_size
        )
        self.slow_threshold_ms = (
            slow_threshold_ms
            if slow_threshold_ms is not None
            else settings.seo_slow_analysis_threshold_ms
        )

        logger.debug(
            "SeoAnalysisService initialized",
            extra={
                "locale": self.locale.code,
                "max_batch_size": self.max_batch_size,
            },
        )

    def analyze(self, input_data: AnalysisInput) -> AnalysisResult:
        """Analyze a single draft.

        Args:
            input_data: Draft to analyze

        Returns:
            AnalysisResult for the draft
        """
        start_time = time.monotonic()

        result = run_seo_analysis(input_data, self.locale)

        duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug(
            "SEO analysis completed",
            extra={
                **input_data.to_dict(),
                "word_count": result.word_count,
                "score": result.score,
                "grade": result.grade.value,
                "improvement_count": len(result.improvements),
                "duration_ms": round(duration_ms, 2),
            },
        )

        if duration_ms > self.slow_threshold_ms:
            logger.warning(
                "Slow SEO analysis operation",
                extra={
                    **input_data.to_dict(),
                    "duration_ms": round(duration_ms, 2),
                    "threshold_ms": self.slow_threshold_ms,
                },
            )

        return result

    def analyze_batch(self, inputs: list[AnalysisInput]) -> list[AnalysisResult]:
        """Analyze several drafts, preserving input order.

        Args:
            inputs: Drafts to analyze

        Returns:
            One AnalysisResult per input

        Raises:
            SeoAnalysisValidationError: If the batch exceeds max_batch_size
        """
        if len(inputs) > self.max_batch_size:
            logger.warning(
                "SEO analysis validation failed - batch too large",
                extra={
                    "field": "inputs",
                    "value": len(inputs),
                    "max_batch_size": self.max_batch_size,
                },
            )
            raise SeoAnalysisValidationError(
                "inputs",
                len(inputs),
                f"Batch size {len(inputs)} exceeds maximum of {self.max_batch_size}",
            )

        start_time = time.monotonic()
        logger.info("Batch SEO analysis started", extra={"input_count": len(inputs)})

        results = [self.analyze(input_data) for input_data in inputs]

        duration_ms = (time.monotonic() - start_time) * 1000
        grade_counts: dict[str, int] = {}
        for result in results:
            grade_counts[result.grade.value] = grade_counts.get(result.grade.value, 0) + 1

        logger.info(
            "Batch SEO analysis complete",
            extra={
                "input_count": len(inputs),
                "grade_counts": grade_counts,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return results


# =============================================================================
# SINGLETON
# =============================================================================


_seo_analysis_service: SeoAnalysisService | None = None


def get_seo_analysis_service() -> SeoAnalysisService:
    """Get the global SEO analysis service instance.

    Usage:
        from seo_advisor.services.seo_analysis import get_seo_analysis_service
        service = get_seo_analysis_service()
        result = service.analyze(input_data)
    """
    global _seo_analysis_service
    if _seo_analysis_service is None:
        _seo_analysis_service = SeoAnalysisService()
        logger.info("SeoAnalysisService singleton created")
    return _seo_analysis_service


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def analyze(title: str = "", lead: str = "", body_markup: str = "") -> AnalysisResult:
    """Analyze a draft with the global service.

    Args:
        title: Article headline
        lead: Short summary shown in search results
        body_markup: Rich-text body as HTML

    Returns:
        AnalysisResult for the draft
    """
    service = get_seo_analysis_service()
    return service.analyze(
        AnalysisInput(title=title, lead=lead, body_markup=body_markup)
    )
