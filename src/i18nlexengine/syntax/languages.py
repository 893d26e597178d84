"""Source syntax detection from file names.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import PurePath

from i18nlexengine.enums import SyntaxKind

__all__ = ["SCRIPT_EXTENSIONS", "detect_syntax"]

SCRIPT_EXTENSIONS: frozenset[str] = frozenset({
    ".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs", ".mts",
})

_MARKUP_EXTENSIONS = frozenset({".html", ".htm", ".svelte"})


def detect_syntax(path: str | PurePath) -> SyntaxKind | None:
    """Infer the syntax of a source file from its name.

    Type declaration files (``.d.ts``) hold no copy and are not handled.

    Example:
        >>> detect_syntax("resources/views/home.blade.php")
        <SyntaxKind.BLADE: 'blade'>
        >>> detect_syntax("src/types/api.d.ts") is None
        True
    """
    name = PurePath(path).name.lower()
    if name.endswith(".d.ts"):
        return None
    if name.endswith(".blade.php"):
        return SyntaxKind.BLADE
    suffix = PurePath(name).suffix
    if suffix == ".vue":
        return SyntaxKind.VUE
    if suffix in SCRIPT_EXTENSIONS:
        return SyntaxKind.JSX
    if suffix in _MARKUP_EXTENSIONS:
        return SyntaxKind.MARKUP
    return None
