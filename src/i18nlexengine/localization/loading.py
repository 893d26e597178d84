"""Locale JSON loading and writing.

A locale is stored either as one JSON file (``auto/en.json``) or as a
directory of grouped files (``auto/en/billing.json``,
``auto/en/shop/cart.json``), each holding a slice of the tree under its
full path. Grouped files are deep-merged on load.

Loading never raises for a bad file: each attempt is recorded as a
LocaleFileResult and summarized in a LoadSummary. ``read_locale_file`` is
the strict single-file form.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from i18nlexengine.constants import GROUP_LEAF_THRESHOLD
from i18nlexengine.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    LocaleLoadError,
    LocaleTreeError,
)
from i18nlexengine.enums import LoadStatus

from .tree import LocaleTree, count_leaves, deep_merge, sort_tree, validate_tree

__all__ = [
    "LoadSummary",
    "LoadedLocale",
    "LocaleFileResult",
    "dump_locale_json",
    "load_locale_tree",
    "read_locale_file",
    "write_locale_tree",
]

logger = logging.getLogger(__name__)

# Grouped layout file for string leaves that sit above file level.
_COMMON_FILE = "common.json"


# ============================================================================
# RESULTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class LocaleFileResult:
    """Result of loading one locale JSON file.

    Attributes:
        path: File path as given
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        leaf_count: String leaves read from the file
        problems: Shape diagnostics (non-string leaves are skipped, not fatal)
    """

    path: str
    status: LoadStatus
    error: Exception | None = None
    leaf_count: int = 0
    problems: tuple[Diagnostic, ...] = ()

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file does not exist."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the file could not be read or decoded."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Aggregate of file results for one locale.

    Attributes:
        results: All individual load results
    """

    results: tuple[LocaleFileResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, ok={self.successful}, "
            f"not_found={self.not_found}, errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of files attempted."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of files loaded."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of missing files."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of unreadable or invalid files."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def all_successful(self) -> bool:
        """True if every attempted file loaded."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[LocaleFileResult, ...]:
        """Results of files that failed to load."""
        return tuple(r for r in self.results if r.is_error)


@dataclass(frozen=True, slots=True)
class LoadedLocale:
    """Merged tree of one locale and how it was loaded."""

    tree: LocaleTree = field(default_factory=dict)
    summary: LoadSummary = field(default_factory=lambda: LoadSummary(()))


# ============================================================================
# READING
# ============================================================================


def read_locale_file(path: str | Path) -> LocaleTree:
    """Read and decode one locale JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        LocaleLoadError: If the file is unreadable, not valid JSON, or its
            root is not an object
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as exc:
        diagnostic = ErrorTemplate.locale_file_unreadable(str(file_path), str(exc))
        raise LocaleLoadError(diagnostic, path=str(file_path)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        diagnostic = ErrorTemplate.locale_file_invalid(str(file_path), exc.msg)
        raise LocaleLoadError(diagnostic, path=str(file_path)) from exc

    if not isinstance(data, dict):
        reason = f"root is {type(data).__name__}, expected object"
        diagnostic = ErrorTemplate.locale_file_invalid(str(file_path), reason)
        raise LocaleLoadError(diagnostic, path=str(file_path))
    return data


def _load_one(file_path: Path) -> tuple[LocaleTree, LocaleFileResult]:
    try:
        data = read_locale_file(file_path)
    except FileNotFoundError:
        return {}, LocaleFileResult(str(file_path), LoadStatus.NOT_FOUND)
    except (LocaleLoadError, LocaleTreeError) as exc:
        logger.warning("Failed to load locale file %s: %s", file_path, exc)
        return {}, LocaleFileResult(str(file_path), LoadStatus.ERROR, error=exc)

    problems = validate_tree(data)
    for problem in problems:
        logger.debug("%s: %s", file_path, problem.message)
    result = LocaleFileResult(
        str(file_path), LoadStatus.SUCCESS, leaf_count=count_leaves(data), problems=problems
    )
    return data, result


def load_locale_tree(path: str | Path) -> LoadedLocale:
    """Load a locale from a JSON file or a directory of grouped JSON files.

    Files of a directory are merged in sorted path order, so a later file
    wins on conflicting leaves.

    Args:
        path: ``<locale>.json`` file or ``<locale>/`` directory

    Returns:
        LoadedLocale; a missing path yields an empty tree with a NOT_FOUND
        result
    """
    root = Path(path)
    if root.is_dir():
        files = sorted(p for p in root.rglob("*.json") if p.is_file())
    else:
        files = [root]

    tree: LocaleTree = {}
    results: list[LocaleFileResult] = []
    for file_path in files:
        data, result = _load_one(file_path)
        results.append(result)
        if result.is_success:
            tree = deep_merge(tree, data)
    return LoadedLocale(tree, LoadSummary(tuple(results)))


# ============================================================================
# WRITING
# ============================================================================


def dump_locale_json(tree: Mapping[str, Any]) -> str:
    """Serialize a tree the way locale files are stored: sorted, 2-space, trailing newline."""
    return json.dumps(sort_tree(tree), indent=2, ensure_ascii=False) + "\n"


def _write(path: Path, tree: Mapping[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_locale_json(tree), encoding="utf-8")
    return path


def write_locale_tree(
    tree: Mapping[str, Any],
    target: str | Path,
    *,
    grouped: bool | None = None,
    group_leaf_threshold: int = GROUP_LEAF_THRESHOLD,
) -> tuple[Path, ...]:
    """Write a locale tree as one file or as grouped files.

    With ``grouped=None`` the layout is chosen by size: trees with more than
    ``group_leaf_threshold`` leaves are grouped. A grouped write to a
    ``.json`` target uses the path without the suffix as the directory.

    Grouped layout: one ``<group>.json`` per top-level namespace holding
    ``{Group: subtree}``; a namespace with more than
    ``group_leaf_threshold`` leaves becomes a ``<group>/`` directory with one
    file per second-level key. String leaves above file level go to the
    ``common.json`` of their directory. File names are lowercased; every
    file holds its slice under the full key path, so slices whose names
    fold to the same file are merged into it and loading restores the tree.

    Args:
        tree: Locale tree
        target: Output file (single layout) or directory (grouped layout)
        grouped: Force grouped (True) or single-file (False) layout
        group_leaf_threshold: Leaf count above which a namespace is split

    Returns:
        Paths written, in write order
    """
    destination = Path(target)
    if grouped is None:
        grouped = count_leaves(tree) > group_leaf_threshold
    if not grouped:
        return (_write(destination, tree),)
    if destination.suffix == ".json":
        destination = destination.with_suffix("")

    files: dict[Path, LocaleTree] = {}

    def add(path: Path, fragment: LocaleTree) -> None:
        if path in files:
            logger.debug("Merging %s into shared file %s", next(iter(fragment)), path)
        files[path] = deep_merge(files.get(path, {}), fragment)

    for group, subtree in sort_tree(tree).items():
        if not isinstance(subtree, dict):
            add(destination / _COMMON_FILE, {group: subtree})
        elif count_leaves(subtree) <= group_leaf_threshold:
            add(destination / f"{group.lower()}.json", {group: subtree})
        else:
            for second, second_subtree in subtree.items():
                name = (
                    f"{str(second).lower()}.json"
                    if isinstance(second_subtree, dict)
                    else _COMMON_FILE
                )
                add(destination / group.lower() / name, {group: {second: second_subtree}})

    written = tuple(_write(path, fragment) for path, fragment in files.items())
    logger.info("Wrote %d grouped locale files under %s", len(written), destination)
    return written
