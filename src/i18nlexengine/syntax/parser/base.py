"""Parser base class and extraction result types.

Every parser turns one source file into a flat list of ExtractedItem. Parsers
never raise for malformed input: unrecognized constructs are skipped and
scanning continues. The only guarded precondition is source size.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from i18nlexengine.config import EngineConfig
from i18nlexengine.diagnostics import ErrorTemplate
from i18nlexengine.enums import ItemType, SyntaxKind
from i18nlexengine.syntax.scripts import RUNTIME_KEY_CALLS
from i18nlexengine.validation import TextValidator, normalize_text

__all__ = [
    "BaseParser",
    "ExtractedItem",
    "ItemCollector",
    "ParseResult",
    "ParseStats",
    "find_runtime_keys",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractedItem:
    """One translatable string found in a source file.

    Attributes:
        type: Text node or attribute/literal
        text: Whitespace-normalized, trimmed text
        kind: Semantic role (heading, button, ...)
        parent_tag: Enclosing tag name, when known
        attribute_name: Attribute, property or variable holding the text
        offset: Character offset of the text in the source
    """

    type: ItemType
    text: str
    kind: str
    parent_tag: str | None = None
    attribute_name: str | None = None
    offset: int = 0


@dataclass(frozen=True, slots=True)
class ParseStats:
    """Counters for one parse.

    Attributes:
        candidates: Strings inspected
        extracted: Strings accepted as items
        rejected: Strings rejected by the classifier or ignore patterns
    """

    candidates: int = 0
    extracted: int = 0
    rejected: int = 0


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Items extracted from one source plus keys it already references."""

    items: tuple[ExtractedItem, ...] = ()
    stats: ParseStats = field(default_factory=ParseStats)
    runtime_keys: tuple[str, ...] = ()


def find_runtime_keys(
    source: str, patterns: Iterable[re.Pattern[str]] = RUNTIME_KEY_CALLS
) -> tuple[str, ...]:
    """Keys passed to translation calls already present in ``source``, in order."""
    found: list[tuple[int, str]] = []
    for pattern in patterns:
        found.extend((m.start(), m["key"]) for m in pattern.finditer(source))
    return tuple(key for _, key in sorted(found))


class ItemCollector:
    """Accumulates items for one parse, applying the validator."""

    __slots__ = ("_items", "_offsets", "_rejected", "_seen", "_validator")

    def __init__(self, validator: TextValidator) -> None:
        self._validator = validator
        self._items: list[ExtractedItem] = []
        self._offsets: set[int] = set()
        self._seen = 0
        self._rejected = 0

    def add(
        self,
        item_type: ItemType,
        raw: str,
        kind: str,
        offset: int,
        *,
        parent_tag: str | None = None,
        attribute_name: str | None = None,
        check: str | None = None,
    ) -> bool:
        """Normalize and classify ``raw``; record it if accepted.

        Args:
            check: Text to classify instead of ``raw`` (static text of a
                template literal, or text with interpolations removed)

        Returns:
            True if an item was recorded
        """
        text = normalize_text(raw)
        if not text or offset in self._offsets:
            return False
        self._seen += 1
        if not self._validator.accepts(normalize_text(check) if check is not None else text):
            self._rejected += 1
            return False
        self._offsets.add(offset)
        self._items.append(
            ExtractedItem(item_type, text, str(kind), parent_tag, attribute_name, offset)
        )
        return True

    def result(self, runtime_keys: tuple[str, ...] = ()) -> ParseResult:
        """Items ordered by offset, with counters."""
        items = tuple(sorted(self._items, key=lambda item: item.offset))
        stats = ParseStats(self._seen, len(items), self._rejected)
        return ParseResult(items, stats, runtime_keys)


class BaseParser(ABC):
    """Common parser machinery.

    Subclasses implement ``_parse`` and set ``syntax``.

    Attributes:
        config: Engine configuration (size limit, ignore patterns)
        validator: Classifier bound to the configured ignore patterns
    """

    __slots__ = ("_config", "_validator")

    syntax: SyntaxKind

    def __init__(self, *, config: EngineConfig | None = None) -> None:
        self._config = config if config is not None else EngineConfig()
        self._validator = TextValidator(self._config.ignore_patterns)

    @property
    def config(self) -> EngineConfig:
        """Engine configuration."""
        return self._config

    @property
    def validator(self) -> TextValidator:
        """Classifier applied to every candidate."""
        return self._validator

    def parse(self, content: str) -> ParseResult:
        """Extract translatable strings from one source file.

        Args:
            content: Source text

        Returns:
            ParseResult with items in source order

        Raises:
            ValueError: If content exceeds ``config.max_source_size``
        """
        if len(content) > self._config.max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(content), self._config.max_source_size)
            raise ValueError(diagnostic.message)
        if not content:
            return ParseResult()

        collector = ItemCollector(self._validator)
        runtime_keys = self._parse(content, collector)
        result = collector.result(runtime_keys)
        logger.debug(
            "%s parse: %d candidates, %d extracted, %d runtime keys",
            self.syntax,
            result.stats.candidates,
            result.stats.extracted,
            len(result.runtime_keys),
        )
        return result

    @abstractmethod
    def _parse(self, content: str, collector: ItemCollector) -> tuple[str, ...]:
        """Feed candidates to ``collector``; return runtime keys found."""
