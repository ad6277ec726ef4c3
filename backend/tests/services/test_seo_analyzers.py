"""Unit tests for the individual SEO analyzers.

Tests cover:
- analyze_title: length bands, generic phrasing, single-word titles
- analyze_lead: length bands, title repetition
- analyze_content_length: depth tiers and labels
- analyze_structure: heading suggestions and their order
- derive_main_keyword / analyze_keywords: placement, density, stuffing
- analyze_legibility: sentence length, lists, emphasis
- analyze_trust: exaggerated claims
- classify_search_intent: pattern counts and tie-breaking
"""

import pytest

from seo_advisor.services.seo_analysis import (
    ContentTier,
    SearchIntent,
    Status,
    analyze_content_length,
    analyze_keywords,
    analyze_legibility,
    analyze_structure,
    analyze_title,
    analyze_lead,
    analyze_trust,
    classify_search_intent,
    derive_main_keyword,
    worst_status,
)
from seo_advisor.services.seo_locale import PT_BR
from seo_advisor.utils.html_text import HeadingCounts

IDEAL_TITLE = "Roteiro completo de três dias em Foz do Iguaçu, PR"


def _words(count: int, word: str = "caminho") -> str:
    return " ".join([word] * count)


def _sentences(count: int, words_per_sentence: int) -> str:
    sentence = _words(words_per_sentence, "palavra") + "."
    return " ".join([sentence] * count)


# ---------------------------------------------------------------------------
# Status helpers
# ---------------------------------------------------------------------------


class TestWorstStatus:
    """Tests for status severity ordering."""

    def test_no_statuses_is_ok(self) -> None:
        assert worst_status() == Status.OK

    def test_bad_beats_warn(self) -> None:
        assert worst_status(Status.WARN, Status.BAD, Status.OK) == Status.BAD

    def test_warn_beats_ok(self) -> None:
        assert worst_status(Status.OK, Status.WARN) == Status.WARN


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------


class TestAnalyzeTitle:
    """Tests for headline analysis."""

    def test_ideal_title_is_ok(self) -> None:
        """A 50-character multi-word title without fillers needs nothing."""
        assert len(IDEAL_TITLE) == 50

        result = analyze_title(IDEAL_TITLE)

        assert result.status == Status.OK
        assert result.status_label == "✅ Bom"
        assert result.char_count == 50
        assert result.has_keyword is True
        assert result.has_generic is False
        assert result.suggestion is None

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_empty_title_is_bad(self, title: str | None) -> None:
        result = analyze_title(title)

        assert result.status == Status.BAD
        assert result.char_count == 0
        assert result.suggestion == "Adicione um título claro e descritivo."

    def test_slightly_short_title_warns(self) -> None:
        """34 characters is below the ideal band but above the hard minimum."""
        result = analyze_title("Passeios em Foz do Iguaçu no verão")

        assert result.char_count == 34
        assert result.status == Status.WARN
        assert "Adicione 6 caracteres" in result.suggestion

    def test_very_short_title_is_bad(self) -> None:
        result = analyze_title("Iguaçu")

        assert result.status == Status.BAD
        assert result.suggestion == PT_BR.message(
            "title_short", min=40, max=65, missing=34
        )

    def test_slightly_long_title_warns(self) -> None:
        title = "Guia de viagem " + "x" * 53
        assert len(title) == 68

        result = analyze_title(title)

        assert result.status == Status.WARN
        assert "Corte 3 caracteres" in result.suggestion

    def test_very_long_title_is_bad(self) -> None:
        title = "Guia de viagem " + "x" * 60

        result = analyze_title(title)

        assert result.char_count == 75
        assert result.status == Status.BAD
        assert "Corte 10 caracteres" in result.suggestion

    def test_generic_phrase_warns(self) -> None:
        result = analyze_title("Clique aqui e veja os passeios de Foz do Iguaçu")

        assert result.status == Status.WARN
        assert result.has_generic is True
        assert result.suggestion == PT_BR.message("title_generic")

    def test_generic_and_short_messages_are_joined(self) -> None:
        """Suggestions accumulate in trigger order separated by a space."""
        result = analyze_title("Confira Foz do Iguaçu hoje")

        assert result.char_count == 26
        assert result.status == Status.BAD
        assert result.suggestion == " ".join([
            PT_BR.message("title_short", min=40, max=65, missing=14),
            PT_BR.message("title_generic"),
        ])

    def test_single_word_title_asks_for_keyword(self) -> None:
        result = analyze_title("x" * 45)

        assert result.status == Status.WARN
        assert result.has_keyword is False
        assert result.suggestion == PT_BR.message("title_keyword")

    def test_length_counts_code_points(self) -> None:
        """Emoji count as one character each."""
        result = analyze_title("Passeio " + "\U0001F30A" * 32)

        assert result.char_count == 40
        assert result.status == Status.OK

    def test_title_is_trimmed_before_measuring(self) -> None:
        assert analyze_title(f"   {IDEAL_TITLE}   ").char_count == 50


# ---------------------------------------------------------------------------
# Lead
# ---------------------------------------------------------------------------


class TestAnalyzeLead:
    """Tests for summary analysis."""

    def test_empty_lead_warns(self) -> None:
        result = analyze_lead("", IDEAL_TITLE)

        assert result.status == Status.WARN
        assert result.char_count == 0
        assert "120-160" in result.suggestion

    def test_ideal_lead_is_ok(self) -> None:
        result = analyze_lead("b" * 140, IDEAL_TITLE)

        assert result.status == Status.OK
        assert result.repeats_title is False
        assert result.suggestion is None

    def test_short_lead_warns(self) -> None:
        result = analyze_lead("a" * 100, IDEAL_TITLE)

        assert result.status == Status.WARN
        assert "100 caracteres" in result.suggestion
        assert "Adicione 20 caracteres" in result.suggestion

    def test_long_lead_warns(self) -> None:
        result = analyze_lead("a" * 170, IDEAL_TITLE)

        assert result.status == Status.WARN
        assert "Corte 10 caracteres" in result.suggestion

    def test_lead_repeating_title_warns(self) -> None:
        """The first 20 title characters inside the lead count as repetition."""
        lead = "Roteiro completo de três dias " + "c" * 100
        assert len(lead) == 130

        result = analyze_lead(lead, IDEAL_TITLE)

        assert result.status == Status.WARN
        assert result.repeats_title is True
        assert result.suggestion == PT_BR.message("lead_repeats_title")

    def test_empty_title_never_counts_as_repetition(self) -> None:
        result = analyze_lead("x" * 130, "")

        assert result.status == Status.OK
        assert result.repeats_title is False


# ---------------------------------------------------------------------------
# Content length
# ---------------------------------------------------------------------------


class TestAnalyzeContentLength:
    """Tests for depth tiers."""

    @pytest.mark.parametrize(
        "word_count,status,tier",
        [
            (0, Status.BAD, ContentTier.TOO_SHORT),
            (1, Status.BAD, ContentTier.TOO_SHORT),
            (299, Status.BAD, ContentTier.TOO_SHORT),
            (300, Status.WARN, ContentTier.MEDIUM),
            (699, Status.WARN, ContentTier.MEDIUM),
            (700, Status.OK, ContentTier.GOOD),
            (1499, Status.OK, ContentTier.GOOD),
            (1500, Status.EXCELLENT, ContentTier.VERY_GOOD),
            (5000, Status.EXCELLENT, ContentTier.VERY_GOOD),
        ],
    )
    def test_tier_boundaries(
        self, word_count: int, status: Status, tier: ContentTier
    ) -> None:
        result = analyze_content_length(word_count)

        assert result.status == status
        assert result.tier == tier
        assert result.word_count == word_count

    def test_empty_body_asks_for_content(self) -> None:
        result = analyze_content_length(0)

        assert result.status_label == "❌ Ruim"
        assert result.feedback == "Adicione o conteúdo do artigo."

    def test_short_body_label(self) -> None:
        result = analyze_content_length(120)

        assert result.status_label == "❌ Muito curto"
        assert result.tier_label == "Muito curto"
        assert "300+" in result.feedback

    def test_very_good_tier_label(self) -> None:
        result = analyze_content_length(1600)

        assert result.status_label == "⭐ Excelente"
        assert result.tier_label == "Muito bom"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestAnalyzeStructure:
    """Tests for heading structure analysis."""

    def test_long_body_without_headings_asks_for_h2(self) -> None:
        """Only the H2 suggestion is shown; the generic one is suppressed."""
        result = analyze_structure(HeadingCounts(), 400, has_page_title=True)

        assert result.status == Status.WARN
        assert result.suggestions == [PT_BR.message("structure_add_h2")]

    def test_medium_body_without_headings_gets_generic_advice(self) -> None:
        result = analyze_structure(HeadingCounts(), 80, has_page_title=True)

        assert result.status == Status.WARN
        assert result.suggestions == [PT_BR.message("structure_add_headings")]

    def test_short_body_without_headings_is_ok(self) -> None:
        result = analyze_structure(HeadingCounts(), 40, has_page_title=True)

        assert result.status == Status.OK
        assert result.suggestions == []

    def test_missing_h3_is_advice_only(self) -> None:
        result = analyze_structure(HeadingCounts(h2=2), 350, has_page_title=True)

        assert result.status == Status.OK
        assert result.suggestions == [PT_BR.message("structure_add_h3")]

    def test_multiple_h1_warns_after_page_title_note(self) -> None:
        result = analyze_structure(
            HeadingCounts(h1=2, h2=1, h3=1), 200, has_page_title=True
        )

        assert result.status == Status.WARN
        assert result.suggestions == [
            PT_BR.message("structure_page_title_is_h1"),
            PT_BR.message("structure_single_h1"),
        ]

    def test_single_h1_without_page_title_is_ok(self) -> None:
        result = analyze_structure(
            HeadingCounts(h1=1, h2=1, h3=1), 200, has_page_title=False
        )

        assert result.status == Status.OK
        assert result.suggestions == []
        assert (result.h1, result.h2, result.h3) == (1, 1, 1)


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------


class TestDeriveMainKeyword:
    """Tests for main keyword derivation from the title."""

    def test_skips_stop_words_and_short_words(self) -> None:
        keyword = derive_main_keyword("Como visitar as Cataratas do Iguaçu com crianças")

        assert keyword == "visitar cataratas iguaçu"

    def test_strips_punctuation(self) -> None:
        assert derive_main_keyword("Foz: o que é?") == "foz"

    def test_falls_back_to_raw_title(self) -> None:
        assert derive_main_keyword("A é") == "A é"

    def test_empty_title(self) -> None:
        assert derive_main_keyword("") == ""


class TestAnalyzeKeywords:
    """Tests for keyword placement and density."""

    def test_insufficient_body(self) -> None:
        result = analyze_keywords("Trilha Bananeiras Iguaçu", _words(10))

        assert result.status == Status.WARN
        assert result.main_keyword == "trilha bananeiras iguaçu"
        assert result.in_first_paragraphs is False
        assert result.possible_stuffing is False
        assert result.observation == PT_BR.message("keyword_insufficient")

    def test_natural_usage_is_ok(self) -> None:
        text = "A trilha começa cedo. " + _words(100)

        result = analyze_keywords("Trilha Bananeiras Iguaçu", text)

        assert result.status == Status.OK
        assert result.in_first_paragraphs is True
        assert result.has_variations is True
        assert result.possible_stuffing is False
        assert result.observation == PT_BR.message("keyword_natural")

    def test_keyword_missing_from_opening_warns(self) -> None:
        text = _words(200) + " trilha"

        result = analyze_keywords("Trilha Bananeiras Iguaçu", text)

        assert result.status == Status.WARN
        assert result.in_first_paragraphs is False
        assert result.has_variations is True
        assert result.observation == PT_BR.message("keyword_not_in_opening")

    def test_stuffing_is_bad(self) -> None:
        """20 keyword occurrences in 60 words is far above the density limit."""
        text = " ".join(["trilha bananeiras"] * 10) + " " + _words(40)

        result = analyze_keywords("Trilha Bananeiras", text)

        assert result.status == Status.BAD
        assert result.possible_stuffing is True
        assert result.density > 3.5
        assert result.observation == PT_BR.message("keyword_stuffing")

    def test_absent_terms_have_no_variations(self) -> None:
        result = analyze_keywords("Trilha Bananeiras", _words(30))

        assert result.has_variations is False
        assert result.status == Status.WARN

    def test_single_term_keyword_always_has_variations(self) -> None:
        result = analyze_keywords("Foz", _words(30))

        assert result.main_keyword == "foz"
        assert result.has_variations is True


# ---------------------------------------------------------------------------
# Legibility
# ---------------------------------------------------------------------------


class TestAnalyzeLegibility:
    """Tests for sentence length and scannability."""

    def test_very_long_sentences_are_bad(self) -> None:
        text = _sentences(4, 40)

        result = analyze_legibility(text, f"<p>{text}</p>")

        assert result.status == Status.BAD
        assert result.status_label == "❌ Difícil"
        assert result.avg_sentence_length == 40
        assert result.feedback == " ".join([
            PT_BR.message("legibility_very_long"),
            PT_BR.message("legibility_lists"),
            PT_BR.message("legibility_emphasis"),
        ])

    def test_long_sentences_warn(self) -> None:
        text = _sentences(4, 30)

        result = analyze_legibility(text, f"<p>{text}</p>")

        assert result.status == Status.WARN
        assert result.feedback == " ".join([
            PT_BR.message("legibility_long"),
            PT_BR.message("legibility_emphasis"),
        ])

    def test_few_sentences_are_not_judged_by_length(self) -> None:
        """Three long sentences are not enough to flag sentence length."""
        text = _sentences(3, 40)

        result = analyze_legibility(text, f"<p>{text}</p>")

        assert result.status == Status.OK
        assert result.feedback == PT_BR.message("legibility_emphasis")

    def test_scannable_text_is_ok(self) -> None:
        text = _sentences(20, 10)
        markup = f"<ul><li>Item</li></ul><p><strong>Nota</strong> {text}</p>"

        result = analyze_legibility(text, markup)

        assert result.status == Status.OK
        assert result.has_lists is True
        assert result.has_emphasis is True
        assert result.feedback == PT_BR.message("legibility_ok")

    def test_average_rounds_half_up(self) -> None:
        result = analyze_legibility("Um dois três. Quatro cinco.", "")

        assert result.avg_sentence_length == 3

    def test_empty_text(self) -> None:
        result = analyze_legibility("", "")

        assert result.status == Status.OK
        assert result.avg_sentence_length == 0


# ---------------------------------------------------------------------------
# Trust
# ---------------------------------------------------------------------------


class TestAnalyzeTrust:
    """Tests for the exaggerated-claim check."""

    @pytest.mark.parametrize(
        "text",
        ["Este é o melhor passeio", "Somos #1 em Foz", "Uma vista INCRÍVEL"],
    )
    def test_exaggerated_claims_warn(self, text: str) -> None:
        result = analyze_trust(text)

        assert result.status == Status.WARN
        assert result.has_exaggerated is True
        assert result.feedback == PT_BR.message("trust_exaggerated")

    def test_objective_language_is_ok(self) -> None:
        result = analyze_trust("Passeio tranquilo e seguro")

        assert result.status == Status.OK
        assert result.feedback == PT_BR.message("trust_ok")


# ---------------------------------------------------------------------------
# Search intent
# ---------------------------------------------------------------------------


class TestClassifySearchIntent:
    """Tests for intent classification."""

    def test_no_match_defaults_to_informational(self) -> None:
        result = classify_search_intent("", "nada aqui")

        assert result.type == SearchIntent.INFORMATIONAL
        assert result.match is False
        assert set(result.scores.values()) == {0}

    def test_transactional(self) -> None:
        result = classify_search_intent(
            "Comprar ingresso com desconto", "preço promocional"
        )

        assert result.type == SearchIntent.TRANSACTIONAL
        assert result.match is True
        assert result.scores["transactional"] == 3
        assert result.label == "Transacional (comprar, agendar)"

    def test_commercial(self) -> None:
        result = classify_search_intent("Melhor hotel vs pousada: comparativo", "")

        assert result.type == SearchIntent.COMMERCIAL

    def test_navigational(self) -> None:
        result = classify_search_intent("", "Página de contato e login do site")

        assert result.type == SearchIntent.NAVIGATIONAL
        assert result.scores["navigational"] == 4

    def test_tie_goes_to_earlier_intent(self) -> None:
        result = classify_search_intent("Guia e review", "")

        assert result.scores["informational"] == result.scores["commercial"] == 1
        assert result.type == SearchIntent.INFORMATIONAL
