"""Markup helpers for rich-text editor output.

The editor stores article bodies as HTML fragments. These helpers turn a
fragment into plain text and count its section headings without parsing
the document, so malformed or unterminated markup never raises.
"""

import re
from dataclasses import dataclass
from typing import Any

_TAG_PATTERN = re.compile(r"<[^>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")

_H1_PATTERN = re.compile(r"<h1[\s>]", re.IGNORECASE)
_H2_PATTERN = re.compile(r"<h2[\s>]", re.IGNORECASE)
_H3_PATTERN = re.compile(r"<h3[\s>]", re.IGNORECASE)

_LIST_PATTERN = re.compile(r"<(ul|ol)\b", re.IGNORECASE)
_EMPHASIS_PATTERN = re.compile(r"<(strong|b)\b", re.IGNORECASE)


@dataclass(frozen=True)
class HeadingCounts:
    """Number of level 1-3 heading start tags in a fragment."""

    h1: int = 0
    h2: int = 0
    h3: int = 0

    @property
    def total(self) -> int:
        return self.h1 + self.h2 + self.h3

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"h1": self.h1, "h2": self.h2, "h3": self.h3}


def strip_html(markup: str | None) -> str:
    """Remove tags from an HTML fragment and collapse whitespace.

    Each tag becomes a single space so adjacent block elements do not glue
    words together. A stray ``<`` without a closing ``>`` is left as text.

    Args:
        markup: HTML fragment, plain text, or None

    Returns:
        Trimmed plain text with single spaces between words
    """
    text = _TAG_PATTERN.sub(" ", markup or "")
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def get_words(text: str | None) -> list[str]:
    """Split plain text into whitespace-separated tokens."""
    return (text or "").split()


def get_word_count(text: str | None) -> int:
    """Count whitespace-separated tokens in plain text."""
    return len(get_words(text))


def count_headings(markup: str | None) -> HeadingCounts:
    """Count h1/h2/h3 start tags in raw markup (case-insensitive)."""
    source = markup or ""
    return HeadingCounts(
        h1=len(_H1_PATTERN.findall(source)),
        h2=len(_H2_PATTERN.findall(source)),
        h3=len(_H3_PATTERN.findall(source)),
    )


def has_list_markup(markup: str | None) -> bool:
    """Whether the fragment opens an ordered or unordered list."""
    return _LIST_PATTERN.search(markup or "") is not None


def has_emphasis_markup(markup: str | None) -> bool:
    """Whether the fragment uses bold or strong emphasis."""
    return _EMPHASIS_PATTERN.search(markup or "") is not None
