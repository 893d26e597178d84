"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_SEVERITY_COLORS = {
    "error": "\033[1;31m",  # Bold red
    "warning": "\033[1;33m",  # Bold yellow
    "info": "\033[1;36m",  # Bold cyan
}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to keep reports compact
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unknown_locale("xx")))
        UNKNOWN_LOCALE: Unknown locale code 'xx'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        separator = "\n" if self.output_format != OutputFormat.RUST else "\n\n"
        return separator.join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            warning[UNTRANSLATED_TEXT]: Untranslated text 'Save changes'
              --> src/pages/Billing.vue:12:9
              = help: Run extraction to add this text to the locale files
        """
        severity = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}\033[0m"

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity}[{diagnostic.code.name}]: {message}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")

        if diagnostic.key and diagnostic.key not in diagnostic.message:
            parts.append(f"  = key: {diagnostic.key}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MISSING_TRANSLATION: Missing translation for 'App.title.home' [fr]
        """
        message = self._maybe_sanitize(diagnostic.message)
        location = self._location(diagnostic)
        if location:
            return f"{location}: {diagnostic.code.name}: {message}"
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "UNKNOWN_LOCALE", "code_value": 3004, "message": "...", ...}
        """
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        for name in ("key", "locale", "file_path"):
            value = getattr(diagnostic, name)
            if value:
                data[name] = value

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _location(diagnostic: Diagnostic) -> str:
        """Render file and span as ``path:line:column``, or ``""``."""
        span = diagnostic.span
        if diagnostic.file_path and span:
            return f"{diagnostic.file_path}:{span.line}:{span.column}"
        if span:
            return f"line {span.line}, column {span.column}"
        return diagnostic.file_path or ""

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
