"""Source scanning: markup state machine, script literal patterns, parsers.

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor, LineOffsetCache
from .languages import detect_syntax
from .markup import MarkupAttribute, MarkupText, scan_markup
from .parser import (
    BaseParser,
    BladeParser,
    ExtractedItem,
    JsxParser,
    MarkupParser,
    ParseResult,
    ParseStats,
    VueParser,
    get_parser,
    parse_source,
    parser_for_path,
)
from .placeholders import Placeholder
from .selection import StringCandidate, find_string_candidates
from .template_literal import StaticPart, TemplateInfo, TemplateLiteralProcessor

__all__ = [
    "BaseParser",
    "BladeParser",
    "Cursor",
    "ExtractedItem",
    "JsxParser",
    "LineOffsetCache",
    "MarkupAttribute",
    "MarkupParser",
    "MarkupText",
    "ParseResult",
    "ParseStats",
    "Placeholder",
    "StaticPart",
    "StringCandidate",
    "TemplateInfo",
    "TemplateLiteralProcessor",
    "VueParser",
    "detect_syntax",
    "find_string_candidates",
    "get_parser",
    "parse_source",
    "parser_for_path",
    "scan_markup",
]
