"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _preview(text: str, limit: int = 60) -> str:
    """Shorten text for inclusion in a one-line message."""
    return text if len(text) <= limit else text[: limit - 3] + "..."


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here, so exception constructors and
    audit passes never format strings inline.
    """

    @staticmethod
    def untranslated_text(
        text: str, span: SourceSpan | None = None, *, suggested_key: str | None = None
    ) -> Diagnostic:
        """Translatable literal text without a translation key.

        Args:
            text: The literal text found in source
            span: Location of the text
            suggested_key: Key extraction would assign, if known

        Returns:
            Diagnostic for UNTRANSLATED_TEXT
        """
        hint = "Run extraction to add this text to the locale files"
        if suggested_key:
            hint = f"Run extraction; the text would be stored as '{suggested_key}'"
        return Diagnostic(
            code=DiagnosticCode.UNTRANSLATED_TEXT,
            message=f"Untranslated text '{_preview(text)}'",
            span=span,
            hint=hint,
            severity="warning",
            key=suggested_key,
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Source length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=f"Source exceeds maximum size ({size} > {limit} characters)",
            hint="Exclude generated or minified files from processing",
        )

    @staticmethod
    def unknown_translation_key(key: str, span: SourceSpan | None = None) -> Diagnostic:
        """Runtime call references a key missing from the locale tree.

        Args:
            key: Referenced dotted key
            span: Location of the call

        Returns:
            Diagnostic for UNKNOWN_TRANSLATION_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TRANSLATION_KEY,
            message=f"Translation key '{key}' not found in the default locale",
            span=span,
            hint="Add the key to the locale files or fix the reference",
            key=key,
        )

    @staticmethod
    def invalid_key(key: str, reason: str) -> Diagnostic:
        """Key violates the dotted key grammar.

        Args:
            key: Offending key
            reason: Which rule failed

        Returns:
            Diagnostic for INVALID_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=f"Invalid translation key '{_preview(key)}': {reason}",
            hint="Keys use letters, digits, '_', '-' and '.' with at least two segments",
            key=key,
        )

    @staticmethod
    def key_path_conflict(path: str, blocking: str) -> Diagnostic:
        """Dotted path crosses an existing string leaf.

        Args:
            path: Path being written
            blocking: Prefix that already holds a string

        Returns:
            Diagnostic for KEY_PATH_CONFLICT
        """
        return Diagnostic(
            code=DiagnosticCode.KEY_PATH_CONFLICT,
            message=f"Cannot set '{path}': '{blocking}' already holds a string",
            hint="Rename one of the keys so neither is a prefix of the other",
            key=path,
        )

    @staticmethod
    def missing_translation(key: str, locale: str, locale_name: str | None = None) -> Diagnostic:
        """Key present in the default locale but missing in another.

        Args:
            key: Missing dotted key
            locale: Target locale code
            locale_name: Display name of the locale, if known

        Returns:
            Diagnostic for MISSING_TRANSLATION
        """
        label = f"{locale} ({locale_name})" if locale_name else locale
        return Diagnostic(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=f"Missing translation for '{key}' [{label}]",
            hint="Run sync to copy the default value, then translate it",
            severity="warning",
            key=key,
            locale=locale,
        )

    @staticmethod
    def untranslated_value(key: str, locale: str) -> Diagnostic:
        """Target value identical to the default locale value.

        Args:
            key: Dotted key
            locale: Target locale code

        Returns:
            Diagnostic for UNTRANSLATED_VALUE
        """
        return Diagnostic(
            code=DiagnosticCode.UNTRANSLATED_VALUE,
            message=f"Value for '{key}' [{locale}] is identical to the default locale",
            hint="Translate the value or mark it as intentionally shared",
            severity="info",
            key=key,
            locale=locale,
        )

    @staticmethod
    def placeholder_mismatch(
        key: str, locale: str, expected: tuple[str, ...], found: tuple[str, ...]
    ) -> Diagnostic:
        """Placeholder names differ between default and target values.

        Args:
            key: Dotted key
            locale: Target locale code
            expected: Placeholder names in the default value
            found: Placeholder names in the target value

        Returns:
            Diagnostic for PLACEHOLDER_MISMATCH
        """
        exp = ", ".join(expected) or "none"
        got = ", ".join(found) or "none"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_MISMATCH,
            message=f"Placeholder mismatch for '{key}' [{locale}]: expected {exp}, found {got}",
            hint="Keep {name} placeholders identical across locales",
            key=key,
            locale=locale,
        )

    @staticmethod
    def unknown_locale(locale: str) -> Diagnostic:
        """Locale code not recognized by CLDR.

        Args:
            locale: Unrecognized locale code

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"Unknown locale code '{locale}'",
            hint="Use a BCP-47 code such as 'fr', 'pt-BR' or 'zh-Hans'",
            severity="warning",
            locale=locale,
        )

    @staticmethod
    def invalid_tree_shape(path: str, type_name: str) -> Diagnostic:
        """Locale tree node is neither an object nor a string.

        Args:
            path: Dotted path to the node ("" for the root)
            type_name: Python type name found

        Returns:
            Diagnostic for INVALID_TREE_SHAPE
        """
        where = f"'{path}'" if path else "root"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TREE_SHAPE,
            message=f"Locale tree node at {where} has unsupported type {type_name}",
            hint="Locale trees contain only nested objects and string leaves",
            key=path or None,
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Locale tree nesting exceeds the limit.

        Args:
            max_depth: Configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=f"Maximum locale tree depth ({max_depth}) exceeded",
            hint="Flatten the locale tree; keys rarely need more than five segments",
        )

    @staticmethod
    def locale_file_invalid(path: str, reason: str) -> Diagnostic:
        """Locale file is not a JSON object.

        Args:
            path: File path
            reason: Decoder or shape error

        Returns:
            Diagnostic for LOCALE_FILE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FILE_INVALID,
            message=f"Invalid locale file: {reason}",
            hint="Locale files must contain a single JSON object",
            file_path=path,
        )

    @staticmethod
    def locale_file_unreadable(path: str, reason: str) -> Diagnostic:
        """Locale file could not be read.

        Args:
            path: File path
            reason: OS error text

        Returns:
            Diagnostic for LOCALE_FILE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FILE_UNREADABLE,
            message=f"Cannot read locale file: {reason}",
            file_path=path,
        )
