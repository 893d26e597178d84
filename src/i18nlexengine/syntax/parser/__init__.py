"""Per-syntax parsers and the parser registry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import PurePath

from i18nlexengine.config import EngineConfig
from i18nlexengine.enums import SyntaxKind
from i18nlexengine.syntax.languages import detect_syntax

from .base import BaseParser, ExtractedItem, ItemCollector, ParseResult, ParseStats
from .blade import BladeParser
from .jsx import JsxParser
from .markup import MarkupParser
from .vue import VueParser

__all__ = [
    "BaseParser",
    "BladeParser",
    "ExtractedItem",
    "ItemCollector",
    "JsxParser",
    "MarkupParser",
    "ParseResult",
    "ParseStats",
    "VueParser",
    "get_parser",
    "parse_source",
    "parser_for_path",
]

_PARSERS: dict[SyntaxKind, type[BaseParser]] = {
    SyntaxKind.VUE: VueParser,
    SyntaxKind.JSX: JsxParser,
    SyntaxKind.BLADE: BladeParser,
    SyntaxKind.MARKUP: MarkupParser,
}


def get_parser(syntax: SyntaxKind | str, *, config: EngineConfig | None = None) -> BaseParser:
    """Create the parser for a syntax.

    Raises:
        ValueError: If the syntax is unknown
    """
    return _PARSERS[SyntaxKind(syntax)](config=config)


def parser_for_path(
    path: str | PurePath, *, config: EngineConfig | None = None
) -> BaseParser | None:
    """Parser for a file, by extension; None for unsupported files."""
    syntax = detect_syntax(path)
    return get_parser(syntax, config=config) if syntax is not None else None


def parse_source(
    content: str, syntax: SyntaxKind | str, *, config: EngineConfig | None = None
) -> ParseResult:
    """Parse one source with the parser for ``syntax``.

    Example:
        >>> result = parse_source('<button title="Submit now">Go</button>', "vue")
        >>> [i.text for i in result.items]
        ['Submit now', 'Go']
    """
    return get_parser(syntax, config=config).parse(content)
