"""Translatability classifier.

Decides whether a candidate string is human-facing UI copy or a technical
token (identifier, CSS class list, URL, color, id). Rules are ordered
rejections; a string is translatable only if no rule rejects it.

The thresholds are empirical and shared with existing locale trees; they are
kept exactly so that extraction over the same sources stays stable.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from i18nlexengine.config import IgnorePatterns
from i18nlexengine.constants import (
    BIGRAM_REQUIRED_MIN_LENGTH,
    MAX_LETTER_RUN,
    MIN_CV_TRANSITION_RATIO,
    MIN_ENGLISH_WORD_RATIO,
)

from .tables import (
    ASSET_EXTENSIONS,
    CODE_KEYWORDS,
    COMMON_BIGRAMS,
    COMMON_SHORT_WORDS,
    CONSONANTS,
    TECHNICAL_WORDS,
    VALID_CONSONANT_CLUSTERS,
    VOWELS,
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

# ============================================================================
# PATTERNS
# ============================================================================

_LETTER = re.compile(r"[A-Za-z]")
_WHITESPACE = re.compile(r"\s")
_WHITESPACE_RUN = re.compile(r"\s+")

_CONSONANT_RUN = re.compile(rf"[{''.join(sorted(CONSONANTS))}]{{{MAX_LETTER_RUN},}}")
_VOWEL_RUN = re.compile(rf"[{''.join(sorted(VOWELS))}]{{{MAX_LETTER_RUN},}}")

_WORD_SPLIT = re.compile(r"[\s,;.!?()\[\]{}]+")
_EDGE_QUOTES = re.compile(r"^['\"]+|['\"]+$")

_GUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
_SELECTOR_CHARS = re.compile(r"[:\[\]]")
_SELECTOR_TOKEN = re.compile(r"^[A-Za-z0-9:._\-\[\]]+$")
_CODE_PUNCTUATION = re.compile(r"[{};]")
_CODE_KEYWORD = re.compile(rf"\b(?:{'|'.join(CODE_KEYWORDS)})\b")
_CSS_CLASS_LIST = re.compile(r"^[a-z0-9-]+(?:\s+[a-z0-9-]+)*$", re.IGNORECASE)
_CAMEL_CASE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
# PascalCase needs an inner capital; a lone capitalized word is ordinary copy.
_PASCAL_CASE = re.compile(r"^[A-Z][a-z0-9]+[A-Z][a-zA-Z0-9]*$")
_ALL_CAPS_CODE = re.compile(r"^[A-Z]{2,5}$")
_URL = re.compile(r"^(?:https?://|www\.|/)")
# Needs a leading ?/# or an assignment to count as a query string.
_QUERY_STRING = re.compile(
    r"^(?:[?#][A-Za-z0-9_.-]*(?:=[^&\s]*)?|[A-Za-z0-9_.-]+=[^&\s]*)"
    r"(?:&[A-Za-z0-9_.-]+(?:=[^&\s]*)?)*$"
)
_ASSET_PATH = re.compile(rf"\.(?:{'|'.join(ASSET_EXTENSIONS)})$", re.IGNORECASE)
_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{3,8}$")
_DIGITS = re.compile(r"^\d+$")
_MOSTLY_NUMERIC = re.compile(r"^\d[\d\s.,-]*\d$")
_DIGIT = re.compile(r"\d")
_DOMAIN = re.compile(r"^[A-Za-z0-9.-]+\.[A-Za-z]{2,}(?::\d+)?(?:\s*\([A-Za-z0-9\s]+\))?$")
_PLACEHOLDER_WORD = re.compile(r"^\{[^}]+\}$")
_UTILITY_MARK = re.compile(r"[-:]")

_ID_MIN_LENGTH = 6
_ID_MAX_LENGTH = 64


# ============================================================================
# PHONETIC HEURISTICS
# ============================================================================


def has_english_phonetic_pattern(word: str) -> bool:
    """Check whether a single word is shaped like an English word.

    Requires at least one vowel, no long consonant or vowel runs (outside
    common clusters such as "str"), a minimum share of vowel/consonant
    alternation, and, for longer words, a common English bigram. Words of one
    or two letters must be common short words instead.

    Args:
        word: A single word without surrounding punctuation

    Returns:
        True if the word looks like English

    Example:
        >>> has_english_phonetic_pattern("settings")
        True
        >>> has_english_phonetic_pattern("xkcdq")
        False
    """
    if not word:
        return False

    lower = word.lower()
    if len(lower) <= 2:
        return lower in COMMON_SHORT_WORDS

    if not any(ch in VOWELS for ch in lower):
        return False

    runs = _CONSONANT_RUN.findall(lower)
    if runs and not any(
        cluster in run for run in runs for cluster in VALID_CONSONANT_CLUSTERS
    ):
        return False

    if _VOWEL_RUN.search(lower):
        return False

    transitions = 0
    alternations = 0
    for current, following in zip(lower, lower[1:], strict=False):
        current_vowel = current in VOWELS
        following_vowel = following in VOWELS
        if (current_vowel or current in CONSONANTS) and (
            following_vowel or following in CONSONANTS
        ):
            transitions += 1
            if current_vowel != following_vowel:
                alternations += 1
    if transitions and alternations / transitions < MIN_CV_TRANSITION_RATIO:
        return False

    if len(lower) > BIGRAM_REQUIRED_MIN_LENGTH:
        return any(lower[i : i + 2] in COMMON_BIGRAMS for i in range(len(lower) - 1))

    return True


def contains_english_words(text: str) -> bool:
    """Check whether at least half of the words in text look like English.

    Example:
        >>> contains_english_words("Save your changes")
        True
        >>> contains_english_words("px qz rtv")
        False
    """
    words = [w for w in _WORD_SPLIT.split(text.strip()) if w]
    if not words:
        return False
    valid = sum(1 for w in words if has_english_phonetic_pattern(_EDGE_QUOTES.sub("", w)))
    return valid / len(words) >= MIN_ENGLISH_WORD_RATIO


# ============================================================================
# CLASSIFIER
# ============================================================================


def _is_technical_token(trimmed: str) -> bool:
    """Rules that reject a string on its shape alone."""
    if _GUID.match(trimmed):
        return True

    has_space = bool(_WHITESPACE.search(trimmed))

    if not has_space and _SELECTOR_CHARS.search(trimmed) and _SELECTOR_TOKEN.match(trimmed):
        return True

    if _CODE_PUNCTUATION.search(trimmed) and _CODE_KEYWORD.search(trimmed):
        return True

    if not _LETTER.search(trimmed) or len(trimmed) < 2:
        return True

    # kebab-case, BEM and utility class lists
    if _CSS_CLASS_LIST.match(trimmed) and (
        "-" in trimmed or len(_WHITESPACE_RUN.split(trimmed)) > 3
    ):
        return True

    if _CAMEL_CASE.match(trimmed) or _PASCAL_CASE.match(trimmed):
        return True

    if _ALL_CAPS_CODE.match(trimmed) or _URL.match(trimmed):
        return True

    if not has_space and _QUERY_STRING.match(trimmed):
        return True

    if _ASSET_PATH.search(trimmed) or _HEX_COLOR.match(trimmed):
        return True

    if _DIGITS.match(trimmed) or _MOSTLY_NUMERIC.match(trimmed):
        return True

    if not has_space:
        if _DIGIT.search(trimmed) and _ID_MIN_LENGTH <= len(trimmed) <= _ID_MAX_LENGTH:
            return True
        if "_" in trimmed or "." in trimmed:
            return True

    return " " not in trimmed and trimmed.lower() in TECHNICAL_WORDS


def _is_utility_class_phrase(words: list[str]) -> bool:
    """Reject phrases made of CSS utility tokens plus ``{name}`` placeholders."""
    content = [w for w in words if not _PLACEHOLDER_WORD.match(w)]
    if not content:
        return False
    utility = [w for w in content if _UTILITY_MARK.search(w) and _SELECTOR_TOKEN.match(w)]
    if len(utility) >= 2 and len(utility) >= len(content) - 1:
        return True
    return len(content) == 1 and len(utility) == 1 and "-" in content[0]


def is_translatable_text(text: str) -> bool:
    """Decide whether a candidate string is translatable UI copy.

    Args:
        text: Candidate string (surrounding whitespace is ignored)

    Returns:
        True if no rejection rule matched

    Example:
        >>> is_translatable_text("Save Changes")
        True
        >>> is_translatable_text("btn-primary")
        False
        >>> is_translatable_text("Submit")
        True
        >>> is_translatable_text("true")
        False
    """
    if not isinstance(text, str):
        return False
    trimmed = text.strip()
    if not trimmed or _is_technical_token(trimmed):
        return False

    normalized = _WHITESPACE_RUN.sub(" ", trimmed)
    if _DOMAIN.match(normalized):
        return False

    words = normalized.split(" ")
    if _is_utility_class_phrase(words):
        return False

    if not contains_english_words(normalized):
        return False

    if len(words) == 1:
        # Lowercase single tokens are identifiers far more often than copy.
        return trimmed[0] == trimmed[0].upper()

    return not all("-" in w for w in words)


# ============================================================================
# PROJECT-LEVEL GATE
# ============================================================================


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim.

    Example:
        >>> normalize_text("  Save    changes ")
        'Save changes'
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()


def has_balanced_parentheses(text: str) -> bool:
    """Return True if text has as many ``(`` as ``)``."""
    return text.count("(") == text.count(")")


def should_translate_text(text: str, ignore_patterns: IgnorePatterns | None = None) -> bool:
    """Classifier plus project ignore patterns.

    Used by extraction to decide whether a string enters the locale tree.

    Args:
        text: Candidate string
        ignore_patterns: Project exclusions (None for no exclusions)

    Returns:
        True if the text should be extracted and translated
    """
    trimmed = text.strip() if isinstance(text, str) else ""
    if not trimmed or not _LETTER.search(trimmed):
        return False
    normalized = _WHITESPACE_RUN.sub(" ", trimmed)
    if ignore_patterns is not None and ignore_patterns.matches(normalized):
        return False
    if not is_translatable_text(normalized):
        return False
    return has_balanced_parentheses(trimmed)


def should_ignore_attribute(name: str, ignore_patterns: IgnorePatterns | None = None) -> bool:
    """Return True if the project excludes values of attribute ``name``."""
    return ignore_patterns is not None and ignore_patterns.ignores_attribute(name)


@dataclass(frozen=True, slots=True)
class TextValidator:
    """Classifier bound to a project's ignore patterns.

    Parsers and replacers receive one validator and call it for every
    candidate, so exclusions apply uniformly.

    Example:
        >>> validator = TextValidator(IgnorePatterns(exact=("Lorem Ipsum",)))
        >>> validator.accepts("Lorem Ipsum")
        False
        >>> validator.accepts("Create account")
        True
    """

    ignore_patterns: IgnorePatterns = field(default_factory=IgnorePatterns)

    def accepts(self, text: str) -> bool:
        """Return True if text should be extracted and translated."""
        return should_translate_text(text, self.ignore_patterns)

    def accepts_attribute(self, name: str) -> bool:
        """Return True unless the project ignores attribute ``name``."""
        return not should_ignore_attribute(name, self.ignore_patterns)
