"""Locale trees: path operations, key storage, sync and JSON files.

Python 3.13+.
"""

# isort: skip_file
from .tree import (
    LocaleTree,
    count_leaves,
    deep_merge,
    get_path,
    has_path,
    iter_leaves,
    join_key,
    set_path,
    sort_tree,
    split_key,
    validate_tree,
)
from .store import TranslationStore
from .sync import SyncResult, sync_tree
from .loading import (
    LoadedLocale,
    LoadSummary,
    LocaleFileResult,
    dump_locale_json,
    load_locale_tree,
    read_locale_file,
    write_locale_tree,
)

__all__ = [
    "LoadSummary",
    "LoadedLocale",
    "LocaleFileResult",
    "LocaleTree",
    "SyncResult",
    "TranslationStore",
    "count_leaves",
    "deep_merge",
    "dump_locale_json",
    "get_path",
    "has_path",
    "iter_leaves",
    "join_key",
    "load_locale_tree",
    "read_locale_file",
    "set_path",
    "sort_tree",
    "split_key",
    "sync_tree",
    "validate_tree",
    "write_locale_tree",
]
