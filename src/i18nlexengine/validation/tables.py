"""Word lists and character classes used by the text classifier.

Kept apart from the rules in ``validation.text`` so the tunable data can be
reviewed and adjusted without touching control flow.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "VOWELS",
    "CONSONANTS",
    "COMMON_SHORT_WORDS",
    "VALID_CONSONANT_CLUSTERS",
    "COMMON_BIGRAMS",
    "TECHNICAL_WORDS",
    "CODE_KEYWORDS",
    "ASSET_EXTENSIONS",
]

VOWELS: frozenset[str] = frozenset("aeiouy")
CONSONANTS: frozenset[str] = frozenset("bcdfghjklmnpqrstvwxz")

# Words of one or two letters are checked against this closed set instead of
# the phonetic test, which has too little signal at that length.
COMMON_SHORT_WORDS: frozenset[str] = frozenset({
    "a", "i", "an", "at", "be", "by", "do", "go", "he", "if", "in", "is",
    "it", "me", "my", "no", "of", "on", "or", "so", "to", "up", "us", "we",
})

# A run of 4+ consonants is accepted only if it contains one of these.
VALID_CONSONANT_CLUSTERS: tuple[str, ...] = (
    "tch", "sch", "str", "spr", "spl", "scr", "thr", "shr", "phr",
)

# Words longer than four letters need at least one of these.
COMMON_BIGRAMS: frozenset[str] = frozenset({
    "th", "he", "in", "er", "an", "re", "on", "at", "en", "nd",
    "ti", "es", "or", "te", "of", "ed", "is", "it", "al", "ar",
    "st", "to", "nt", "ng", "se", "ha", "as", "ou", "io", "le",
})

# Single tokens that are markup, literals or design tokens, never copy.
TECHNICAL_WORDS: frozenset[str] = frozenset({
    "div", "span", "input", "form", "select", "option", "textarea",
    "true", "false", "null", "undefined",
    "primary", "secondary", "danger", "info", "light", "dark",
    "sm", "md", "lg", "xl", "xs", "2xl", "3xl",
})

CODE_KEYWORDS: tuple[str, ...] = (
    "const", "let", "var", "function", "return", "if", "else",
    "for", "while", "class", "async", "await",
)

ASSET_EXTENSIONS: tuple[str, ...] = (
    "js", "ts", "tsx", "jsx", "vue", "css", "scss", "json",
    "png", "jpg", "svg", "html", "xml",
)
