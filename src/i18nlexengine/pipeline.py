"""Batch extraction and replacement over many source files.

Parsing and replacement are pure per-file string work, so both fan out over
a thread pool. Extraction results are merged into one TranslationStore from
the calling thread in sorted path order, which keeps key assignment (and
collision suffixes) independent of scheduling. Replacement builds the KeyMap
once, before any file is rewritten, and shares it read-only.

The pipeline performs no file I/O: callers pass contents in and write the
results out.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from i18nlexengine.config import EngineConfig
from i18nlexengine.diagnostics import InvalidKeyError, LocaleTreeError
from i18nlexengine.enums import SyntaxKind
from i18nlexengine.keys.keymap import KeyMap, build_key_map
from i18nlexengine.keys.naming import derive_namespace
from i18nlexengine.localization.store import TranslationStore
from i18nlexengine.localization.tree import LocaleTree
from i18nlexengine.replacement import get_replacer
from i18nlexengine.syntax.languages import detect_syntax
from i18nlexengine.syntax.parser import ExtractedItem, ParseResult, get_parser

__all__ = [
    "ExtractionSummary",
    "FileExtraction",
    "FileReplacement",
    "ReplacementSummary",
    "SourceFile",
    "extract_sources",
    "replace_sources",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceFile:
    """One source file handed to the pipeline.

    Attributes:
        path: Project-relative path (drives syntax and namespace detection)
        content: File content
        syntax: Overrides detection from the extension
        namespace: Overrides derivation from the path
    """

    path: str
    content: str
    syntax: SyntaxKind | None = None
    namespace: str | None = None


@dataclass(frozen=True, slots=True)
class FileExtraction:
    """Extraction outcome of one file."""

    path: str
    namespace: str
    items: tuple[ExtractedItem, ...] = ()
    keys: tuple[str, ...] = ()
    runtime_keys: tuple[str, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the file was parsed and merged."""
        return self.error is None


@dataclass(frozen=True, slots=True)
class ExtractionSummary:
    """Outcome of one extraction batch.

    Attributes:
        files: Per-file results, sorted by path
        tree: Locale tree after merging (keys sorted)
        added_keys: Keys created by this batch
    """

    files: tuple[FileExtraction, ...] = ()
    tree: LocaleTree = field(default_factory=dict)
    added_keys: tuple[str, ...] = ()

    @property
    def items_extracted(self) -> int:
        """Items extracted across all files."""
        return sum(len(f.items) for f in self.files)

    @property
    def errors(self) -> tuple[FileExtraction, ...]:
        """Files that failed."""
        return tuple(f for f in self.files if not f.ok)


@dataclass(frozen=True, slots=True)
class FileReplacement:
    """Replacement outcome of one file."""

    path: str
    namespace: str
    content: str
    change_count: int = 0
    error: str | None = None

    @property
    def changed(self) -> bool:
        """True if the content was rewritten."""
        return self.change_count > 0


@dataclass(frozen=True, slots=True)
class ReplacementSummary:
    """Outcome of one replacement batch."""

    files: tuple[FileReplacement, ...] = ()

    @property
    def total_changes(self) -> int:
        """Substitutions across all files."""
        return sum(f.change_count for f in self.files)

    @property
    def changed_files(self) -> tuple[FileReplacement, ...]:
        """Files whose content changed."""
        return tuple(f for f in self.files if f.changed)

    @property
    def errors(self) -> tuple[FileReplacement, ...]:
        """Files that failed."""
        return tuple(f for f in self.files if f.error is not None)


def _resolve(
    sources: Iterable[SourceFile], config: EngineConfig
) -> list[tuple[SourceFile, SyntaxKind, str]]:
    resolved = []
    for source in sorted(sources, key=lambda s: s.path):
        syntax = source.syntax or detect_syntax(source.path)
        if syntax is None:
            logger.debug("Skipping unsupported file %s", source.path)
            continue
        namespace = source.namespace or derive_namespace(source.path, config.source_roots)
        resolved.append((source, syntax, namespace))
    return resolved


def extract_sources(
    sources: Iterable[SourceFile],
    tree: Mapping[str, Any] | None = None,
    *,
    config: EngineConfig | None = None,
) -> ExtractionSummary:
    """Extract copy from many files and merge it into a locale tree.

    Args:
        sources: Files to scan; unsupported extensions are skipped
        tree: Existing default locale tree (keys already assigned are reused)
        config: Engine configuration

    Returns:
        ExtractionSummary; oversized files, key path conflicts and (with
        ``strict_keys``) invalid keys are recorded per file, never raised.
        A failed file contributes nothing to the tree or ``added_keys``.
    """
    config = config if config is not None else EngineConfig()
    jobs = _resolve(sources, config)

    def parse(job: tuple[SourceFile, SyntaxKind, str]) -> tuple[ParseResult | None, str | None]:
        source, syntax, _ = job
        try:
            return get_parser(syntax, config=config).parse(source.content), None
        except ValueError as exc:
            logger.warning("Skipping %s: %s", source.path, exc)
            return None, str(exc)

    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        parsed = list(executor.map(parse, jobs))

    store = TranslationStore(tree, config=config)
    files: list[FileExtraction] = []
    for (source, _, namespace), (result, error) in zip(jobs, parsed, strict=True):
        if result is None:
            files.append(FileExtraction(source.path, namespace, error=error))
            continue
        try:
            keys = store.add_items(result.items, namespace)
        except (LocaleTreeError, InvalidKeyError) as exc:
            logger.warning("Cannot merge %s: %s", source.path, exc)
            files.append(FileExtraction(source.path, namespace, result.items, error=str(exc)))
            continue
        files.append(
            FileExtraction(source.path, namespace, result.items, keys, result.runtime_keys)
        )

    summary = ExtractionSummary(tuple(files), store.to_tree(), store.added_keys)
    logger.info(
        "Extracted %d items from %d files (%d new keys, %d errors)",
        summary.items_extracted,
        len(files),
        len(summary.added_keys),
        len(summary.errors),
    )
    return summary


def replace_sources(
    sources: Iterable[SourceFile],
    tree: Mapping[str, Any] | KeyMap,
    *,
    config: EngineConfig | None = None,
) -> ReplacementSummary:
    """Rewrite literal copy in many files.

    Args:
        sources: Files to rewrite; unsupported extensions are skipped
        tree: Default locale tree, or a KeyMap already built from it
        config: Engine configuration

    Returns:
        ReplacementSummary with the new content of every file
    """
    config = config if config is not None else EngineConfig()
    key_map = tree if isinstance(tree, KeyMap) else build_key_map(tree)
    jobs = _resolve(sources, config)

    def replace(job: tuple[SourceFile, SyntaxKind, str]) -> FileReplacement:
        source, syntax, namespace = job
        try:
            result = get_replacer(syntax, config=config).replace(
                source.content, key_map, namespace
            )
        except ValueError as exc:
            logger.warning("Skipping %s: %s", source.path, exc)
            return FileReplacement(source.path, namespace, source.content, error=str(exc))
        return FileReplacement(source.path, namespace, result.content, result.change_count)

    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        files = tuple(executor.map(replace, jobs))

    summary = ReplacementSummary(files)
    logger.info(
        "Replaced %d strings in %d of %d files (%d errors)",
        summary.total_changes,
        len(summary.changed_files),
        len(files),
        len(summary.errors),
    )
    return summary
