"""Per-syntax replacers and the replacer registry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import PurePath

from i18nlexengine.config import EngineConfig
from i18nlexengine.enums import SyntaxKind
from i18nlexengine.keys.keymap import KeyMap
from i18nlexengine.syntax.languages import detect_syntax

from .base import BaseReplacer, ReplaceContext, ReplaceResult, SubstitutionRule, apply_rules
from .codegen import SelectionConversion, convert_selection, generate_call
from .jsx import JsxReplacer, ensure_t_import
from .markup import BladeReplacer, MarkupReplacer
from .vue import VueReplacer

__all__ = [
    "BaseReplacer",
    "BladeReplacer",
    "JsxReplacer",
    "MarkupReplacer",
    "ReplaceContext",
    "ReplaceResult",
    "SelectionConversion",
    "SubstitutionRule",
    "VueReplacer",
    "apply_rules",
    "convert_selection",
    "ensure_t_import",
    "generate_call",
    "get_replacer",
    "replace_source",
    "replacer_for_path",
]

_REPLACERS: dict[SyntaxKind, type[BaseReplacer]] = {
    SyntaxKind.VUE: VueReplacer,
    SyntaxKind.JSX: JsxReplacer,
    SyntaxKind.BLADE: BladeReplacer,
    SyntaxKind.MARKUP: MarkupReplacer,
}


def get_replacer(syntax: SyntaxKind | str, *, config: EngineConfig | None = None) -> BaseReplacer:
    """Create the replacer for a syntax.

    Raises:
        ValueError: If the syntax is unknown
    """
    return _REPLACERS[SyntaxKind(syntax)](config=config)


def replacer_for_path(
    path: str | PurePath, *, config: EngineConfig | None = None
) -> BaseReplacer | None:
    """Replacer for a file, by extension; None for unsupported files."""
    syntax = detect_syntax(path)
    return get_replacer(syntax, config=config) if syntax is not None else None


def replace_source(
    content: str,
    syntax: SyntaxKind | str,
    key_map: KeyMap,
    namespace: str,
    *,
    config: EngineConfig | None = None,
) -> ReplaceResult:
    """Replace literal copy in one source with the replacer for ``syntax``.

    Example:
        >>> from i18nlexengine.keys.keymap import build_key_map
        >>> km = build_key_map({"App": {"heading": {"welcome_home": "Welcome Home"}}})
        >>> replace_source("<h1>Welcome Home</h1>", "vue", km, "App").content
        "<h1>{{ $t('App.heading.welcome_home') }}</h1>"
    """
    return get_replacer(syntax, config=config).replace(content, key_map, namespace)
