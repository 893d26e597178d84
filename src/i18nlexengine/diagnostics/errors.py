"""Exception hierarchy with structured diagnostics.

Scanning and replacement report unusual text as data, never as exceptions.
These exceptions cover the remaining failure classes: malformed locale
trees, key path conflicts, runaway nesting and unreadable locale files.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DepthLimitExceededError",
    "I18nError",
    "InvalidKeyError",
    "KeyPathConflictError",
    "LocaleLoadError",
    "LocaleTreeError",
]


class I18nError(Exception):
    """Base exception for all I18nLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleTreeError(I18nError):
    """Locale tree has a shape other than nested objects with string leaves."""


class KeyPathConflictError(LocaleTreeError):
    """A dotted path runs through an existing string leaf.

    Example:
        Setting ``App.title.main`` when ``App.title`` is already a string.
    """


class InvalidKeyError(I18nError):
    """Key does not satisfy the dotted key grammar."""


class DepthLimitExceededError(LocaleTreeError):
    """Locale tree nesting exceeds the configured maximum depth."""


class LocaleLoadError(I18nError):
    """Locale JSON file could not be read or decoded.

    Attributes:
        path: File that failed to load
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize LocaleLoadError.

        Args:
            message: Error message string OR Diagnostic object
            path: File that failed to load
        """
        super().__init__(message)
        self.path = path
