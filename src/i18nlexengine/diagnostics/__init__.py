"""Diagnostic system for I18nLexEngine.

Provides structured diagnostics with codes, spans and hints, and the
exception hierarchy used outside the scanning core.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DepthLimitExceededError,
    I18nError,
    InvalidKeyError,
    KeyPathConflictError,
    LocaleLoadError,
    LocaleTreeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nError",
    "InvalidKeyError",
    "KeyPathConflictError",
    "LocaleLoadError",
    "LocaleTreeError",
    "OutputFormat",
    "SourceSpan",
]
