"""Literal patterns for JavaScript / TypeScript / JSX sources.

The script parser and the script replacer recognize the same constructs,
so extraction and replacement agree on which literals carry copy and on the
kind each one gets. Patterns use named groups:

    prefix  text kept verbatim before the literal
    quote   opening quote (the closing quote must match)
    text    literal content
    name    property, variable, attribute or tag name when relevant

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

__all__ = [
    "ATTRIBUTE_EXPRESSION",
    "ATTRIBUTE_NAMES",
    "DOCUMENT_TITLE",
    "EXPRESSION_LITERAL",
    "JSX_ATTRIBUTE",
    "JSX_EXPRESSION_STRING",
    "JSX_TAGS",
    "JSX_TEXT",
    "KEY_SHAPE",
    "OBJECT_PROPERTY",
    "PROP_NAMES",
    "RETURN_STRING",
    "RUNTIME_KEY_CALLS",
    "TOAST_CALL",
    "VARIABLE_DECLARATION",
    "looks_like_key",
]

# Dotted translation key: already converted, never re-wrapped.
KEY_SHAPE = re.compile(r"^[A-Z][a-zA-Z0-9]*(?:\.[a-zA-Z_][a-zA-Z0-9_]*)+$")

PROP_NAMES = "title|description|message|label|placeholder|cta|text|error|heading|alt|reason"
ATTRIBUTE_NAMES = "placeholder|title|alt|aria-label|label"
JSX_TAGS = (
    "h[1-6]|p|span|div|label|button|a|li|td|th|strong|em|b|i|small"
    "|Link|Button|Text|Title|Heading"
)

# title: "Text"
OBJECT_PROPERTY = re.compile(
    rf"(?P<prefix>\b(?P<name>{PROP_NAMES})\s*:\s*)"
    r"(?P<quote>['\"`])(?P<text>[^'\"`\n]{2,200})(?P=quote)"
)

# const errorMessage = "Text"
VARIABLE_DECLARATION = re.compile(
    r"(?P<prefix>\b(?:const|let|var)\s+"
    r"(?P<name>\w*(?:title|label|message|placeholder|text|heading|description|error|reason)\w*)"
    r"\s*=\s*)(?P<quote>['\"`])(?P<text>[^'\"`\n]{2,200})(?P=quote)",
    re.IGNORECASE,
)

# document.title = "Text"
DOCUMENT_TITLE = re.compile(
    r"(?P<prefix>\bdocument\.title\s*=\s*)(?P<quote>['\"`])(?P<text>[^'\"`\n]{2,200})(?P=quote)"
)

# toast.success("Text")
TOAST_CALL = re.compile(
    r"(?P<prefix>\btoast\.(?:success|error|warning|info|show|message)\s*\(\s*)"
    r"(?P<quote>['\"`])(?P<text>[^'\"`\n]{2,200})(?P=quote)"
)

# <h1 className="x">Text</h1>
JSX_TEXT = re.compile(
    rf"(?P<open><(?P<name>{JSX_TAGS})(?:\s[^>]*)?>)"
    r"(?P<text>[^<>{}`]+)"
    rf"(?P<close></(?:{JSX_TAGS})>)",
    re.IGNORECASE,
)

# {"Text"}
JSX_EXPRESSION_STRING = re.compile(r"\{(?P<quote>['\"])(?P<text>[^'\"}{]{2,200})(?P=quote)\}")

# placeholder="Text"
JSX_ATTRIBUTE = re.compile(
    rf"(?P<prefix>(?<![\w-])(?P<name>{ATTRIBUTE_NAMES})\s*=\s*)"
    r"(?P<quote>['\"])(?P<text>[^'\"]{2,200})(?P=quote)"
)

# title={ok ? "Saved" : "Failed"}; nested braces are not followed.
ATTRIBUTE_EXPRESSION = re.compile(
    rf"(?P<prefix>(?<![\w-])(?P<name>{ATTRIBUTE_NAMES})\s*=\s*)\{{(?P<expr>[^{{}}]{{2,400}})\}}"
)

# Any quoted literal inside an expression, escapes honored.
EXPRESSION_LITERAL = re.compile(
    r"(?P<quote>['\"`])(?P<text>(?:\\.|(?!(?P=quote))[^\\\r\n])+?)(?P=quote)"
)

# return "Text";
RETURN_STRING = re.compile(
    r"(?P<prefix>\breturn\s+)(?P<quote>['\"])(?P<text>[^'\"]{3,200})(?P=quote)(?P<suffix>\s*[;\n])"
)

# Runtime lookups already present in a script: t('A.b'), $t('A.b'),
# i18n.t('A.b'), useI18n().t('A.b').
RUNTIME_KEY_CALLS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?<![\w.$])\$?t\s*\(\s*['\"](?P<key>[^'\"]+)['\"]\s*[,)]"),
    re.compile(r"\bi18n\.t\s*\(\s*['\"](?P<key>[^'\"]+)['\"]\s*[,)]"),
    re.compile(r"\buseI18n\(\)\.t\s*\(\s*['\"](?P<key>[^'\"]+)['\"]\s*[,)]"),
)


def looks_like_key(text: str) -> bool:
    """True if text already has the ``Namespace.kind.slug`` shape."""
    return KEY_SHAPE.match(text) is not None
