"""Text classification: is this string UI copy or a technical token?

Python 3.13+. Zero external dependencies.
"""

from .text import (
    TextValidator,
    contains_english_words,
    has_balanced_parentheses,
    has_english_phonetic_pattern,
    is_translatable_text,
    normalize_text,
    should_ignore_attribute,
    should_translate_text,
)

__all__ = [
    "TextValidator",
    "contains_english_words",
    "has_balanced_parentheses",
    "has_english_phonetic_pattern",
    "is_translatable_text",
    "normalize_text",
    "should_ignore_attribute",
    "should_translate_text",
]
