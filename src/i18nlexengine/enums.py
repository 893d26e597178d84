"""Enumerations for I18nLexEngine type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the plain
strings stored in locale trees and key paths.

Python 3.13+.
"""

from enum import StrEnum


class ItemType(StrEnum):
    """Origin of an extracted candidate.

    StrEnum provides automatic string conversion: str(ItemType.TEXT) == "text"
    """

    TEXT = "text"
    """Text node content: <p>Hello</p>"""

    ATTRIBUTE = "attribute"
    """Attribute value or script literal: <img alt="Logo">"""


class Kind(StrEnum):
    """Semantic role of a translatable string.

    Kinds form an open set: any lowercase identifier is accepted as a key
    segment. The members below are the roles inferred from markup context.
    """

    TEXT = "text"
    HEADING = "heading"
    BUTTON = "button"
    LABEL = "label"
    PLACEHOLDER = "placeholder"
    LINK = "link"
    TITLE = "title"
    ALT = "alt"
    ARIA_LABEL = "aria_label"
    TOAST = "toast"
    MESSAGE = "message"
    TOOLTIP = "tooltip"


class SyntaxKind(StrEnum):
    """Source syntax handled by a parser/replacer pair."""

    VUE = "vue"
    """Vue single-file component (template + script)"""

    JSX = "jsx"
    """JavaScript / TypeScript with optional JSX"""

    BLADE = "blade"
    """Laravel Blade templates"""

    MARKUP = "markup"
    """Plain HTML-like markup (HTML, Svelte)"""


class ScanState(StrEnum):
    """States of the markup scanner."""

    TEXT = "text"
    TAG_OPEN = "tag_open"
    TAG_NAME = "tag_name"
    TAG_SPACE = "tag_space"
    ATTR_NAME = "attr_name"
    ATTR_EQUALS = "attr_equals"
    ATTR_VALUE_START = "attr_value_start"
    ATTR_VALUE = "attr_value"
    TAG_CLOSE = "tag_close"
    COMMENT = "comment"
    SCRIPT = "script"
    STYLE = "style"


class LoadStatus(StrEnum):
    """Outcome of loading one locale JSON file."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


__all__ = [
    "ItemType",
    "Kind",
    "LoadStatus",
    "ScanState",
    "SyntaxKind",
]
