"""Engine configuration.

Two frozen dataclasses carry every tunable: IgnorePatterns (user-maintained
lists of strings and attributes that must never be extracted) and
EngineConfig (limits, slug shape, import path, batch sizing).

All fields have defaults; ``EngineConfig()`` is a usable configuration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from i18nlexengine.constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_SOURCE_ROOTS,
    DEFAULT_TRANSLATE_IMPORT_PATH,
    GROUP_LEAF_THRESHOLD,
    MAX_SOURCE_SIZE,
    SLUG_MAX_LENGTH,
    SLUG_MAX_WORDS,
)

__all__ = ["EngineConfig", "IgnorePatterns"]


@dataclass(frozen=True, slots=True)
class IgnorePatterns:
    """Project-level exclusions applied on top of the text classifier.

    Attributes:
        exact: Strings never extracted (case-sensitive, compared trimmed)
        exact_insensitive: Strings never extracted (case-insensitive)
        contains: Substrings that disqualify a string
        ignore_attributes: Attribute names whose values are never extracted

    Example:
        >>> patterns = IgnorePatterns(exact=("OK",), contains=("lorem",))
        >>> patterns.matches("Lorem ipsum")
        False
        >>> patterns.matches("some lorem text")
        True
    """

    exact: tuple[str, ...] = ()
    exact_insensitive: tuple[str, ...] = ()
    contains: tuple[str, ...] = ()
    ignore_attributes: tuple[str, ...] = ()
    _exact: frozenset[str] = field(init=False, repr=False, compare=False)
    _folded: frozenset[str] = field(init=False, repr=False, compare=False)
    _attributes: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize lists into lookup sets.

        Raises:
            ValueError: If a pattern is empty (it would match everything)
        """
        for name in ("exact", "exact_insensitive", "contains", "ignore_attributes"):
            values = getattr(self, name)
            if isinstance(values, str):
                msg = f"IgnorePatterns.{name} must be a sequence of strings, not a string"
                raise ValueError(msg)
            if any(not str(v).strip() for v in values):
                msg = f"IgnorePatterns.{name} must not contain empty patterns"
                raise ValueError(msg)
            object.__setattr__(self, name, tuple(values))
        object.__setattr__(self, "_exact", frozenset(v.strip() for v in self.exact))
        object.__setattr__(
            self, "_folded", frozenset(v.strip().casefold() for v in self.exact_insensitive)
        )
        object.__setattr__(
            self, "_attributes", frozenset(a.strip().lower() for a in self.ignore_attributes)
        )

    def matches(self, text: str) -> bool:
        """Return True if text is excluded by any pattern."""
        trimmed = text.strip()
        if trimmed in self._exact or trimmed.casefold() in self._folded:
            return True
        return any(fragment in trimmed for fragment in self.contains)

    def ignores_attribute(self, name: str) -> bool:
        """Return True if values of attribute ``name`` are never extracted."""
        return name.strip().lower() in self._attributes


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine configuration.

    Attributes:
        max_source_size: Maximum characters per source file (default: 10 MiB)
        slug_max_words: Words kept in a key slug (default: 4)
        slug_max_length: Maximum slug length (default: 48)
        translate_import_path: Module imported for ``t`` in script files
        group_leaf_threshold: Leaf count above which locale trees are written
            as one file per namespace (default: 400)
        max_workers: Thread pool size for batch operations (default: 8)
        source_roots: Path markers stripped before deriving namespaces
        ignore_patterns: Project-level exclusions
        strict_keys: Raise InvalidKeyError instead of storing keys that fail
            key validation (default: False)

    Example:
        >>> config = EngineConfig(max_workers=2, translate_import_path="~/i18n")
        >>> config.max_workers
        2
    """

    max_source_size: int = MAX_SOURCE_SIZE
    slug_max_words: int = SLUG_MAX_WORDS
    slug_max_length: int = SLUG_MAX_LENGTH
    translate_import_path: str = DEFAULT_TRANSLATE_IMPORT_PATH
    group_leaf_threshold: int = GROUP_LEAF_THRESHOLD
    max_workers: int = DEFAULT_MAX_WORKERS
    source_roots: tuple[str, ...] = DEFAULT_SOURCE_ROOTS
    ignore_patterns: IgnorePatterns = field(default_factory=IgnorePatterns)
    strict_keys: bool = False

    def __post_init__(self) -> None:
        """Validate numeric limits.

        Raises:
            ValueError: If any limit is not positive or the import path is empty
        """
        for name in (
            "max_source_size",
            "slug_max_words",
            "slug_max_length",
            "group_leaf_threshold",
            "max_workers",
        ):
            value = getattr(self, name)
            if value < 1:
                msg = f"EngineConfig.{name} must be >= 1, got {value}"
                raise ValueError(msg)
        if not self.translate_import_path.strip():
            msg = "EngineConfig.translate_import_path must not be empty"
            raise ValueError(msg)
        object.__setattr__(self, "source_roots", tuple(self.source_roots))
