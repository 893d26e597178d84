"""TranslationStore: merges extracted strings into a locale tree.

Each string is stored under ``namespace.kind.slug``. Registering the same
(namespace, kind, text) twice returns the same key; a different text whose
slug collides gets ``slug_2``, ``slug_3``, ... Existing trees are indexed on
construction so re-extraction reuses the keys already assigned.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from i18nlexengine.config import EngineConfig
from i18nlexengine.diagnostics import InvalidKeyError, LocaleTreeError
from i18nlexengine.keys.naming import require_valid_key, slugify_for_key
from i18nlexengine.syntax.parser.base import ExtractedItem
from i18nlexengine.validation import has_balanced_parentheses, normalize_text

from .tree import (
    LocaleTree,
    deep_merge,
    has_path,
    iter_leaves,
    join_key,
    set_path,
    sort_tree,
    split_key,
)

__all__ = ["TranslationStore"]

logger = logging.getLogger(__name__)


class TranslationStore:
    """Mutable locale tree plus a (namespace, kind, text) -> key index.

    Not thread-safe: extraction fans out parsing, then merges items from a
    single thread.

    Example:
        >>> store = TranslationStore()
        >>> store.register("Billing", "heading", "Invoice Overview")
        'Billing.heading.invoice_overview'
        >>> store.register("Billing", "heading", "Invoice overview!")
        'Billing.heading.invoice_overview_2'
        >>> store.register("Billing", "heading", "Invoice Overview")
        'Billing.heading.invoice_overview'
    """

    __slots__ = ("_added", "_config", "_index", "_tree")

    def __init__(
        self, tree: Mapping[str, Any] | None = None, *, config: EngineConfig | None = None
    ) -> None:
        self._config = config if config is not None else EngineConfig()
        self._tree: LocaleTree = deep_merge({}, tree or {})
        self._index: dict[tuple[str, str, str], str] = {}
        self._added: list[str] = []
        for path, value in iter_leaves(self._tree):
            if len(path) >= 3:
                triple = (join_key(path[:-2]), path[-2], normalize_text(value))
                self._index.setdefault(triple, join_key(path))

    @property
    def tree(self) -> LocaleTree:
        """The live tree (mutated by ``register``)."""
        return self._tree

    @property
    def added_keys(self) -> tuple[str, ...]:
        """Keys created by this store, in registration order."""
        return tuple(self._added)

    def to_tree(self, *, sort: bool = True) -> LocaleTree:
        """Copy of the tree, keys sorted at every level by default."""
        return sort_tree(self._tree) if sort else deep_merge({}, self._tree)

    def register(self, namespace: str, kind: str, text: str) -> str | None:
        """Store text and return its key.

        Returns:
            Full key, or None if the text is empty, excluded by the ignore
            patterns or has unbalanced parentheses

        Raises:
            KeyPathConflictError: If the namespace path runs through an
                existing string leaf
            InvalidKeyError: If ``strict_keys`` is configured and the key
                fails validation
        """
        cleaned = normalize_text(str(text or ""))
        if not cleaned or self._config.ignore_patterns.matches(cleaned):
            return None
        if not has_balanced_parentheses(cleaned):
            logger.debug("Not storing text with unbalanced parentheses: %r", cleaned)
            return None

        kind = str(kind)
        triple = (namespace, kind, cleaned)
        existing = self._index.get(triple)
        if existing is not None:
            return existing

        base = slugify_for_key(cleaned, self._config.slug_max_words, self._config.slug_max_length)
        slug = base
        suffix = 2
        while self._occupied((*split_key(namespace), kind, slug), cleaned):
            slug = f"{base}_{suffix}"
            suffix += 1

        full_key = f"{namespace}.{kind}.{slug}"
        if self._config.strict_keys:
            require_valid_key(full_key)
        set_path(self._tree, full_key, cleaned)
        self._index[triple] = full_key
        self._added.append(full_key)
        return full_key

    def add_items(self, items: Iterable[ExtractedItem], namespace: str) -> tuple[str, ...]:
        """Register extracted items of one file; return the keys assigned.

        All or nothing: if any item cannot be stored, the tree, the index and
        ``added_keys`` are restored to their state before the call.

        Raises:
            KeyPathConflictError: If a key path runs through a string leaf
            InvalidKeyError: If ``strict_keys`` is configured and a key fails
                validation
        """
        saved_tree = deep_merge({}, self._tree)
        saved_index = dict(self._index)
        saved_added = len(self._added)
        keys = []
        try:
            for item in items:
                key = self.register(namespace, item.kind, item.text)
                if key is not None:
                    keys.append(key)
        except (LocaleTreeError, InvalidKeyError):
            self._tree.clear()
            self._tree.update(saved_tree)
            self._index = saved_index
            del self._added[saved_added:]
            raise
        return tuple(keys)

    def _occupied(self, path: tuple[str, ...], text: str) -> bool:
        node: Any = self._tree
        for segment in path:
            if not isinstance(node, dict) or segment not in node:
                return False
            node = node[segment]
        return not (isinstance(node, str) and normalize_text(node) == text)

    def __len__(self) -> int:
        return sum(1 for _ in iter_leaves(self._tree))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and has_path(self._tree, key)
