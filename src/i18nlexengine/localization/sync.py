"""Locale synchronization.

Every path of the default locale must resolve in every other locale. Sync
adds the missing paths to a target tree (by default with the default
locale's text, marking them for translation) and can prune paths the
default locale no longer has.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .tree import LocaleTree, deep_merge, get_path, iter_leaves, join_key, set_path, sort_tree

__all__ = ["SyncResult", "sync_tree"]

logger = logging.getLogger(__name__)

type Fill = Callable[[str, str], str]


def _copy_default(_key: str, default_value: str) -> str:
    return default_value


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Outcome of syncing one target tree.

    Attributes:
        tree: Synchronized copy of the target tree (keys sorted)
        added: Keys added to the target
        removed: Keys pruned from the target
    """

    tree: LocaleTree
    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        """True if the target differed from the default's key set."""
        return bool(self.added or self.removed)


def sync_tree(
    default_tree: Mapping[str, Any],
    target_tree: Mapping[str, Any],
    *,
    keys: Iterable[str] | None = None,
    fill: Fill = _copy_default,
    prune: bool = False,
) -> SyncResult:
    """Make ``target_tree`` contain every leaf path of ``default_tree``.

    Args:
        default_tree: Tree of the default locale
        target_tree: Tree of another locale (not modified)
        keys: Restrict sync to these keys (all default keys by default)
        fill: Value for an added key, given (key, default value)
        prune: Also remove target leaves absent from the default tree

    Returns:
        SyncResult with the new tree and the keys added or removed

    Example:
        >>> result = sync_tree({"App": {"text": {"hi": "Hi", "bye": "Bye"}}},
        ...                    {"App": {"text": {"hi": "Salut"}}})
        >>> result.added, result.tree["App"]["text"]["bye"]
        (('App.text.bye',), 'Bye')
    """
    wanted = set(keys) if keys is not None else None
    default_leaves = {join_key(p): v for p, v in iter_leaves(default_tree)}
    synced = deep_merge({}, target_tree)

    added: list[str] = []
    for key, value in default_leaves.items():
        if wanted is not None and key not in wanted:
            continue
        if get_path(synced, key) is None:
            set_path(synced, key, fill(key, value))
            added.append(key)

    removed: list[str] = []
    if prune:
        kept: LocaleTree = {}
        for path, value in iter_leaves(synced):
            key = join_key(path)
            if key in default_leaves:
                set_path(kept, key, value)
            else:
                removed.append(key)
        synced = kept

    if added or removed:
        logger.debug("Sync added %d keys, removed %d keys", len(added), len(removed))
    return SyncResult(sort_tree(synced), tuple(added), tuple(removed))
