"""Utility modules for the application.

This package contains shared utility functions and classes.
"""

from seo_advisor.utils.html_text import (
    HeadingCounts,
    count_headings,
    get_word_count,
    get_words,
    has_emphasis_markup,
    has_list_markup,
    strip_html,
)

__all__ = [
    "HeadingCounts",
    "count_headings",
    "get_word_count",
    "get_words",
    "has_emphasis_markup",
    "has_list_markup",
    "strip_html",
]
