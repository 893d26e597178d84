"""Locale tree operations.

A locale tree is the parsed form of a locale JSON file: nested objects whose
leaves are strings. Keys address leaves by dotted path
(``Billing.heading.invoice_overview``). Walks are iterative over dict items
but recurse per nesting level under a DepthGuard.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from i18nlexengine.core.depth_guard import DepthGuard
from i18nlexengine.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    ErrorTemplate,
    KeyPathConflictError,
    LocaleTreeError,
)

__all__ = [
    "LocaleTree",
    "count_leaves",
    "deep_merge",
    "get_path",
    "has_path",
    "iter_leaves",
    "join_key",
    "set_path",
    "sort_tree",
    "split_key",
    "validate_tree",
]

logger = logging.getLogger(__name__)

type LocaleTree = dict[str, Any]
type KeyPath = str | tuple[str, ...]


def split_key(key: KeyPath) -> tuple[str, ...]:
    """Path segments of a dotted key (tuples pass through).

    Example:
        >>> split_key("Billing.heading.total")
        ('Billing', 'heading', 'total')
    """
    if isinstance(key, tuple):
        return key
    return tuple(part for part in key.split(".") if part)


def join_key(path: tuple[str, ...]) -> str:
    """Dotted key for path segments."""
    return ".".join(path)


def iter_leaves(
    tree: Mapping[str, Any], *, strict: bool = False, guard: DepthGuard | None = None
) -> Iterator[tuple[tuple[str, ...], str]]:
    """Yield ``(path, value)`` for every string leaf, depth first, in key order.

    Args:
        tree: Locale tree
        strict: Raise on non-string leaves instead of skipping them
        guard: Depth guard (a fresh one per walk by default)

    Raises:
        LocaleTreeError: In strict mode, on a leaf that is neither a string
            nor an object
        DepthLimitExceededError: If nesting exceeds the guard limit

    Example:
        >>> list(iter_leaves({"App": {"heading": {"hi": "Hi"}}}))
        [(('App', 'heading', 'hi'), 'Hi')]
    """
    active = guard if guard is not None else DepthGuard()
    yield from _walk(tree, (), strict, active)


def _walk(
    node: Mapping[str, Any], prefix: tuple[str, ...], strict: bool, guard: DepthGuard
) -> Iterator[tuple[tuple[str, ...], str]]:
    with guard:
        for segment, value in node.items():
            path = (*prefix, str(segment))
            if isinstance(value, str):
                yield path, value
            elif isinstance(value, Mapping):
                yield from _walk(value, path, strict, guard)
            elif strict:
                diagnostic = ErrorTemplate.invalid_tree_shape(join_key(path), type(value).__name__)
                raise LocaleTreeError(diagnostic)
            else:
                logger.debug(
                    "Skipping non-string leaf at %s (%s)", join_key(path), type(value).__name__
                )


def get_path(tree: Mapping[str, Any], key: KeyPath) -> str | None:
    """String value at ``key``, or None if absent or not a leaf.

    Example:
        >>> get_path({"App": {"text": {"hi": "Hi"}}}, "App.text.hi")
        'Hi'
        >>> get_path({"App": {"text": {"hi": "Hi"}}}, "App.text") is None
        True
    """
    node: Any = tree
    for segment in split_key(key):
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node if isinstance(node, str) else None


def has_path(tree: Mapping[str, Any], key: KeyPath) -> bool:
    """True if ``key`` resolves to a string leaf."""
    return get_path(tree, key) is not None


def set_path(tree: LocaleTree, key: KeyPath, value: str) -> None:
    """Set a string leaf, creating intermediate objects.

    Raises:
        KeyPathConflictError: If a string leaf sits where an object is
            needed, or an object sits where the leaf goes
        ValueError: If the key has no segments
    """
    path = split_key(key)
    if not path:
        msg = "Cannot set an empty key path"
        raise ValueError(msg)

    node = tree
    for depth, segment in enumerate(path[:-1]):
        child = node.get(segment)
        if child is None:
            child = node[segment] = {}
        elif not isinstance(child, dict):
            blocking = join_key(path[: depth + 1])
            raise KeyPathConflictError(ErrorTemplate.key_path_conflict(join_key(path), blocking))
        node = child

    if isinstance(node.get(path[-1]), dict):
        raise KeyPathConflictError(ErrorTemplate.key_path_conflict(join_key(path), join_key(path)))
    node[path[-1]] = value


def count_leaves(tree: Mapping[str, Any]) -> int:
    """Number of string leaves."""
    return sum(1 for _ in iter_leaves(tree))


def sort_tree(tree: Mapping[str, Any]) -> LocaleTree:
    """Copy of ``tree`` with keys sorted at every level.

    Example:
        >>> sort_tree({"b": "B", "a": {"d": "D", "c": "C"}})
        {'a': {'c': 'C', 'd': 'D'}, 'b': 'B'}
    """
    return _sorted(tree, DepthGuard())


def _sorted(node: Mapping[str, Any], guard: DepthGuard) -> LocaleTree:
    with guard:
        return {
            key: _sorted(value, guard) if isinstance(value, Mapping) else value
            for key, value in sorted(node.items())
        }


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> LocaleTree:
    """Merge two trees into a new one; ``override`` wins on leaf conflicts.

    Objects present in both are merged recursively. Neither input is
    modified.

    Example:
        >>> deep_merge({"A": {"x": "1", "y": "2"}}, {"A": {"y": "3"}})
        {'A': {'x': '1', 'y': '3'}}
    """
    return _merged(base, override, DepthGuard())


def _merged(
    base: Mapping[str, Any], override: Mapping[str, Any], guard: DepthGuard
) -> LocaleTree:
    with guard:
        result: LocaleTree = {
            k: _merged(v, {}, guard) if isinstance(v, Mapping) else v for k, v in base.items()
        }
        for key, value in override.items():
            current = result.get(key)
            if isinstance(value, Mapping):
                result[key] = _merged(current if isinstance(current, Mapping) else {}, value, guard)
            else:
                result[key] = value
        return result


def validate_tree(tree: Any) -> tuple[Diagnostic, ...]:
    """Shape problems of a parsed locale file, as diagnostics.

    Reports the root not being an object, leaves that are neither strings
    nor objects (arrays, numbers, null), and excessive nesting.

    Example:
        >>> [d.code.name for d in validate_tree({"App": {"count": 3}})]
        ['INVALID_TREE_SHAPE']
    """
    if not isinstance(tree, Mapping):
        return (ErrorTemplate.invalid_tree_shape("<root>", type(tree).__name__),)

    problems: list[Diagnostic] = []
    guard = DepthGuard()

    def visit(node: Mapping[str, Any], prefix: tuple[str, ...]) -> None:
        with guard:
            for segment, value in node.items():
                path = (*prefix, str(segment))
                if isinstance(value, Mapping):
                    visit(value, path)
                elif not isinstance(value, str):
                    problems.append(
                        ErrorTemplate.invalid_tree_shape(join_key(path), type(value).__name__)
                    )

    try:
        visit(tree, ())
    except DepthLimitExceededError as exc:
        if exc.diagnostic is not None:
            problems.append(exc.diagnostic)
    return tuple(problems)
