"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages produced by the
extraction, lookup, audit and loading layers. Diagnostics are data: the core
never raises for unusual text, it reports.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Extraction (source text that should be translated)
        2000-2999: Keys (lookup and naming problems)
        3000-3999: Locale audit (tree-to-tree comparison)
        4000-4999: Loading (locale file input)
    """

    # Extraction (1000-1999)
    UNTRANSLATED_TEXT = 1001
    SOURCE_TOO_LARGE = 1002

    # Keys (2000-2999)
    UNKNOWN_TRANSLATION_KEY = 2001
    INVALID_KEY = 2002
    KEY_PATH_CONFLICT = 2003

    # Locale audit (3000-3999)
    MISSING_TRANSLATION = 3001
    UNTRANSLATED_VALUE = 3002
    PLACEHOLDER_MISMATCH = 3003
    UNKNOWN_LOCALE = 3004
    INVALID_TREE_SHAPE = 3005
    MAX_DEPTH_EXCEEDED = 3006

    # Loading (4000-4999)
    LOCALE_FILE_INVALID = 4001
    LOCALE_FILE_UNREADABLE = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for diagnostics.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Carries everything an editor integration needs to surface a problem:
    where it is, which key and locale it concerns, and a suggested fix.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        span: Source location (None for locale-tree diagnostics)
        hint: Suggestion for fixing the problem
        severity: "error", "warning" or "info"
        key: Dotted translation key concerned, if any
        locale: Locale code concerned, if any
        file_path: File the diagnostic refers to, if known
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning", "info"] = "error"
    key: str | None = None
    locale: str | None = None
    file_path: str | None = None

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default (Rust-like) style.

        Example output:
            warning[MISSING_TRANSLATION]: Missing translation for 'App.heading.hi' [fr]
              --> locales/fr.json
              = help: Run sync to copy the default value, then translate it
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
