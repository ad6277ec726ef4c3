"""Locale phrase tables for the SEO analysis engine.

The analyzers in ``seo_analysis`` hold no phrase literals. Everything that is
tied to a language lives in a ``SeoLocale``:
- Generic call-to-action fillers that weaken a title
- Hyperbolic claims that hurt perceived trust
- Stop-words skipped when deriving the main keyword
- Search-intent patterns (one compiled regex per intent)
- Status, tier, grade and intent labels shown by the editor
- Feedback and suggestion message templates

Only Brazilian Portuguese is shipped. Additional locales are registered in
``LOCALES`` and selected through the ``SEO_LOCALE`` setting.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from seo_advisor.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LOCALE = "pt-BR"


class UnknownLocaleError(LookupError):
    """Raised when a locale code has no registered phrase table."""

    def __init__(self, code: str) -> None:
        super().__init__(
            f"Unknown SEO locale: {code}. Available locales: {', '.join(sorted(LOCALES))}"
        )
        self.code = code


@dataclass(frozen=True)
class SeoLocale:
    """Language-specific phrase data consumed by the analyzers.

    Mapping keys are the string values of the engine's enums ("ok", "warn",
    "informational", "bom", ...); analyzers look them up by ``member.value``.
    """

    code: str
    generic_title_terms: tuple[str, ...]
    exaggerated_phrases: tuple[str, ...]
    stop_words: frozenset[str]
    # Insertion order is irrelevant here; tie-breaks use the engine's priority
    intent_patterns: Mapping[str, re.Pattern[str]]
    intent_labels: Mapping[str, str]
    status_labels: Mapping[str, str]
    legibility_status_labels: Mapping[str, str]
    content_status_labels: Mapping[str, str]
    tier_labels: Mapping[str, str]
    grade_labels: Mapping[str, str]
    messages: Mapping[str, str] = field(default_factory=dict)

    def message(self, key: str, **params: object) -> str:
        """Render a message template with the given parameters."""
        template = self.messages[key]
        return template.format(**params) if params else template


PT_BR = SeoLocale(
    code="pt-BR",
    generic_title_terms=(
        "saiba mais",
        "descubra",
        "clique aqui",
        "leia mais",
        "confira",
        "acesse",
        "veja mais",
        "saiba tudo",
        "fique por dentro",
        "não perca",
    ),
    exaggerated_phrases=(
        "melhor do mundo",
        "o melhor",
        "único no mercado",
        "100% garantido",
        "revolucionário",
        "imperdível",
        "incrível",
        "fantástico",
        "inacreditável",
        "número 1",
        "#1",
    ),
    stop_words=frozenset(
        ["com", "para", "como", "que", "uma", "sobre", "todos", "mais"]
    ),
    intent_patterns=MappingProxyType({
        "informational": re.compile(
            r"\b(como|o que é|guia|dicas|como fazer|o que são|quais|por que|porquê)\b",
            re.IGNORECASE,
        ),
        "commercial": re.compile(
            r"\b(melhor|comparativo|vs|versus|review|avaliação|top \d+)\b",
            re.IGNORECASE,
        ),
        "navigational": re.compile(
            r"\b(site|página|login|acessar|contato)\b",
            re.IGNORECASE,
        ),
        "transactional": re.compile(
            r"\b(comprar|preço|promoção|desconto|oferta|agende|reserve)\b",
            re.IGNORECASE,
        ),
    }),
    intent_labels=MappingProxyType({
        "informational": "Informacional (guia, dicas, explicação)",
        "commercial": "Comercial (comparativo, avaliação)",
        "navigational": "Navegacional (encontrar algo específico)",
        "transactional": "Transacional (comprar, agendar)",
    }),
    status_labels=MappingProxyType({
        "ok": "✅ Bom",
        "warn": "⚠️ Ajustar",
        "bad": "❌ Ruim",
    }),
    legibility_status_labels=MappingProxyType({
        "ok": "✅ Boa",
        "warn": "⚠️ Média",
        "bad": "❌ Difícil",
    }),
    content_status_labels=MappingProxyType({
        "excellent": "⭐ Excelente",
        "ok": "✅ Bom",
        "warn": "⚠️ Médio",
        "bad": "❌ Muito curto",
        "empty": "❌ Ruim",
    }),
    tier_labels=MappingProxyType({
        "very good": "Muito bom",
        "good": "Bom",
        "medium": "Médio",
        "too short": "Muito curto",
    }),
    grade_labels=MappingProxyType({
        "excelente": "⭐ Excelente",
        "bom": "✅ Bom",
        "regular": "⚠️ Regular",
        "ruim": "❌ Ruim",
    }),
    messages=MappingProxyType({
        # Title
        "title_empty": "Adicione um título claro e descritivo.",
        "title_short": (
            "Título curto. Ideal: {min}-{max} caracteres. Adicione {missing} caracteres."
        ),
        "title_long": "Título longo. Corte {excess} caracteres (ideal: {min}-{max}).",
        "title_generic": 'Evite termos genéricos como "saiba mais" ou "descubra".',
        "title_keyword": "Inclua a palavra-chave principal no título.",
        # Lead
        "lead_empty": (
            "Adicione um resumo de {min}-{max} caracteres. "
            "Ele aparece nos resultados de busca e incentiva o clique."
        ),
        "lead_short": (
            "Resumo curto ({length} caracteres). Adicione {missing} caracteres. "
            "Ideal: {min}-{max} para aparecer completo na busca."
        ),
        "lead_long": (
            "Resumo longo ({length} caracteres). Corte {excess} caracteres, "
            "acima de {max} ele será cortado na busca. Ideal: {min}-{max}."
        ),
        "lead_repeats_title": (
            "Evite repetir o título. Destaque o benefício ou curiosidade."
        ),
        # Content length
        "content_very_good": (
            "Conteúdo extenso e completo. Boa profundidade para ranquear."
        ),
        "content_good": "Extensão adequada. O conteúdo parece completo.",
        "content_medium": (
            "Texto médio. Considere aprofundar com mais detalhes para ranquear melhor."
        ),
        "content_too_short": (
            "Conteúdo muito curto. Textos com {min_words}+ palavras tendem a ranquear melhor."
        ),
        "content_empty": "Adicione o conteúdo do artigo.",
        "content_grow": "Aumente o conteúdo para pelo menos {min_words} palavras.",
        # Structure
        "structure_page_title_is_h1": (
            "O título da página já é o H1. Use H2 e H3 no texto para seções."
        ),
        "structure_add_h2": (
            'Divida o texto em seções com H2. Ex: "Benefícios", "Como funciona".'
        ),
        "structure_add_h3": "Use H3 para aprofundar tópicos dentro das seções.",
        "structure_single_h1": (
            "Use apenas 1 H1 por página. O restante deve ser H2 ou H3."
        ),
        "structure_add_headings": (
            "Adicione H2 e H3 para organizar o texto. Facilita leitura e SEO."
        ),
        # Keywords
        "keyword_insufficient": "Conteúdo insuficiente para analisar palavras-chave.",
        "keyword_not_in_opening": (
            "Palavra-chave do título não aparece nos primeiros parágrafos. "
            "Coloque no início."
        ),
        "keyword_stuffing": (
            "Possível excesso de repetição. Use a palavra-chave de forma natural."
        ),
        "keyword_natural": "Uso natural da palavra-chave no texto.",
        # Legibility
        "legibility_very_long": "Frases muito longas. Quebre em frases menores.",
        "legibility_long": (
            "Algumas frases podem estar longas. Ideal: 15-20 palavras por frase."
        ),
        "legibility_lists": "Use listas para destacar itens. Facilita a leitura.",
        "legibility_emphasis": "Destaque termos importantes em negrito.",
        "legibility_ok": "Texto escaneável. Frases e parágrafos em bom tamanho.",
        # Trust
        "trust_exaggerated": (
            "Evite promessas exageradas. Linguagem objetiva transmite mais confiança."
        ),
        "trust_ok": "Linguagem adequada. Transmite credibilidade.",
    }),
)

LOCALES: dict[str, SeoLocale] = {
    PT_BR.code: PT_BR,
}


def get_locale(code: str | None = None) -> SeoLocale:
    """Look up a registered locale by code (case-insensitive).

    Args:
        code: Locale code such as "pt-BR"; None selects the default locale

    Returns:
        The registered SeoLocale

    Raises:
        UnknownLocaleError: If no locale is registered under the code
    """
    if code is None:
        return LOCALES[DEFAULT_LOCALE]

    for registered_code, locale in LOCALES.items():
        if registered_code.lower() == code.strip().lower():
            return locale

    logger.warning("Unknown SEO locale requested", extra={"locale": code})
    raise UnknownLocaleError(code)
