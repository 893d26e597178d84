"""Shared constants for I18nLexEngine.

This module provides centralized configuration constants used across the
validation, syntax, key, replacement and localization packages. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Namespaces: reserved namespace names
- Key naming: slug and key shape limits
- Common short text: thresholds for the Commons alias bucket
- Phonetic heuristics: classifier thresholds
- Input limits: DoS prevention via size constraints
- Runtime calls: translator call names emitted by replacers
- Locale files: grouping thresholds for JSON output

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Namespaces
    "COMMONS_NAMESPACE",
    "DEFAULT_NAMESPACE",
    "DEFAULT_SOURCE_ROOTS",
    "NAMESPACE_STRIP_PREFIXES",
    # Key naming
    "SLUG_MAX_WORDS",
    "SLUG_MAX_LENGTH",
    "SLUG_FALLBACK",
    "MAX_KEY_LENGTH",
    "MAX_RECOMMENDED_KEY_PARTS",
    "MIN_KEY_PATH_DEPTH",
    # Common short text
    "COMMON_TEXT_MAX_WORDS",
    "COMMON_TEXT_MAX_LENGTH",
    # Phonetic heuristics
    "MIN_CV_TRANSITION_RATIO",
    "MIN_ENGLISH_WORD_RATIO",
    "BIGRAM_REQUIRED_MIN_LENGTH",
    "MAX_LETTER_RUN",
    # Input limits
    "MAX_SOURCE_SIZE",
    "MAX_DEPTH",
    "MAX_LITERAL_LENGTH",
    # Runtime calls
    "VUE_TRANSLATE_FUNCTION",
    "JS_TRANSLATE_FUNCTION",
    "BLADE_TRANSLATE_FUNCTION",
    "DEFAULT_TRANSLATE_IMPORT_PATH",
    # Locale files
    "GROUP_LEAF_THRESHOLD",
    "DEFAULT_MAX_WORKERS",
]

# ============================================================================
# NAMESPACES
# ============================================================================

# Alias bucket for short reusable copy ("Save", "Cancel") shared by all files.
COMMONS_NAMESPACE: str = "Commons"

# Namespace used when a file path yields no usable segments.
DEFAULT_NAMESPACE: str = "Common"

# Path markers stripped from the front of a file path before deriving the
# namespace. First marker found wins, in this order.
DEFAULT_SOURCE_ROOTS: tuple[str, ...] = ("resources/js", "src", "resources/views")

# Leading directory names that carry no meaning in a namespace.
NAMESPACE_STRIP_PREFIXES: frozenset[str] = frozenset({"pages", "components"})

# ============================================================================
# KEY NAMING
# ============================================================================

SLUG_MAX_WORDS: int = 4
SLUG_MAX_LENGTH: int = 48
SLUG_FALLBACK: str = "text"

MAX_KEY_LENGTH: int = 200
MAX_RECOMMENDED_KEY_PARTS: int = 5

# Leaves shallower than namespace.kind.slug cannot be decomposed.
MIN_KEY_PATH_DEPTH: int = 3

# ============================================================================
# COMMON SHORT TEXT
# ============================================================================
#
# Empirical thresholds kept for behavioral parity with existing locale trees.
# Changing them moves strings in or out of the Commons bucket and breaks
# lookups against trees written with the previous values.

COMMON_TEXT_MAX_WORDS: int = 2
COMMON_TEXT_MAX_LENGTH: int = 24

# ============================================================================
# PHONETIC HEURISTICS
# ============================================================================

# Share of adjacent letter pairs that must alternate vowel/consonant.
MIN_CV_TRANSITION_RATIO: float = 0.3

# Share of words in a candidate that must look like English.
MIN_ENGLISH_WORD_RATIO: float = 0.5

# Words longer than this need at least one common English bigram.
BIGRAM_REQUIRED_MIN_LENGTH: int = 4

# Runs of this many consonants (or vowels) are rejected unless allow-listed.
MAX_LETTER_RUN: int = 4

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size in characters (10 MiB of ASCII).
# Generated bundles and minified files above this are not UI source.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Maximum nesting depth for locale tree walks.
MAX_DEPTH: int = 100

# Upper bound for a string literal considered by replacement rules.
MAX_LITERAL_LENGTH: int = 200

# ============================================================================
# RUNTIME CALLS
# ============================================================================

VUE_TRANSLATE_FUNCTION: str = "$t"
JS_TRANSLATE_FUNCTION: str = "t"
BLADE_TRANSLATE_FUNCTION: str = "__"
DEFAULT_TRANSLATE_IMPORT_PATH: str = "@/i18n"

# ============================================================================
# LOCALE FILES
# ============================================================================

# Trees with more leaves than this are written as one file per namespace.
GROUP_LEAF_THRESHOLD: int = 400

DEFAULT_MAX_WORKERS: int = 8
