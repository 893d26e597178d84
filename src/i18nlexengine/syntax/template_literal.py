"""Template literal analysis.

Turns a JavaScript template literal into lookup text with named
placeholders and the expressions to bind at the call site:

    `Welcome ${user.name}!`  ->  "Welcome {name}!"  +  name: user.name

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .placeholders import Placeholder, format_arguments, placeholder_name, unique_name

__all__ = ["StaticPart", "TemplateInfo", "TemplateLiteralProcessor", "escape_key"]

_INTERPOLATION = re.compile(r"\$\{([^}]*)\}")
_PUNCTUATION_ONLY = re.compile(r"^[.,;:!?'\"()\[\]{}<>/\\|@#$%^&*+=~`-]+$")


def escape_key(key: str) -> str:
    """Escape a key for a single-quoted JS/PHP string literal."""
    return key.replace("\\", "\\\\").replace("'", "\\'")


@dataclass(frozen=True, slots=True)
class TemplateInfo:
    """Lookup text and placeholders derived from one template literal.

    Attributes:
        base_text: Static text with ``{name}`` in place of each interpolation
        placeholders: One entry per non-empty interpolation, names unique
    """

    base_text: str
    placeholders: tuple[Placeholder, ...]


@dataclass(frozen=True, slots=True)
class StaticPart:
    """Static text segment of a template and its offset in the template."""

    text: str
    offset: int


class TemplateLiteralProcessor:
    """Template literal analysis helpers.

    All methods are static; the class groups them under one name for call
    sites that process several literals.
    """

    @staticmethod
    def analyze(raw_literal: str) -> TemplateInfo | None:
        """Analyze a backtick-delimited template literal.

        Args:
            raw_literal: Literal including the surrounding backticks

        Returns:
            TemplateInfo, or None if the input is not a template literal

        Example:
            >>> info = TemplateLiteralProcessor.analyze("`Welcome ${user.name}!`")
            >>> info.base_text
            'Welcome {name}!'
            >>> info.placeholders
            (Placeholder(name='name', expression='user.name'),)
        """
        if len(raw_literal) < 2 or raw_literal[0] != "`" or raw_literal[-1] != "`":
            return None

        inner = raw_literal[1:-1]
        parts: list[str] = []
        placeholders: list[Placeholder] = []
        used: set[str] = set()
        last = 0

        for match in _INTERPOLATION.finditer(inner):
            parts.append(inner[last : match.start()])
            last = match.end()
            expression = match.group(1).strip()
            if not expression:
                continue
            base = placeholder_name(expression, len(placeholders), trailing_identifier=True)
            name = unique_name(base, used)
            placeholders.append(Placeholder(name, expression))
            parts.append(f"{{{name}}}")

        parts.append(inner[last:])
        return TemplateInfo("".join(parts), tuple(placeholders))

    @staticmethod
    def extract_static_parts(template: str) -> tuple[StaticPart, ...]:
        """Static segments that contain non-whitespace, with their offsets.

        Example:
            >>> TemplateLiteralProcessor.extract_static_parts("Hi ${name}, bye")
            (StaticPart(text='Hi ', offset=0), StaticPart(text=', bye', offset=10))
        """
        parts: list[StaticPart] = []
        last = 0
        for match in _INTERPOLATION.finditer(template):
            segment = template[last : match.start()]
            if segment.strip():
                parts.append(StaticPart(segment, last))
            last = match.end()
        tail = template[last:]
        if tail.strip():
            parts.append(StaticPart(tail, last))
        return tuple(parts)

    @staticmethod
    def get_combined_static_text(template: str) -> str:
        """Static segments joined with single spaces, stripped.

        Example:
            >>> TemplateLiteralProcessor.get_combined_static_text("Welcome ${user} to ${place}!")
            'Welcome   to  !'
        """
        parts = TemplateLiteralProcessor.extract_static_parts(template)
        return " ".join(p.text for p in parts).strip()

    @staticmethod
    def has_translatable_content(template: str) -> bool:
        """True if static text exists and is not punctuation only."""
        combined = TemplateLiteralProcessor.get_combined_static_text(template)
        return bool(combined) and not _PUNCTUATION_ONLY.match(combined)

    @staticmethod
    def create_replacement(key: str, placeholders: tuple[Placeholder, ...] = ()) -> str:
        """Runtime call replacing a literal: ``t('key')`` or ``t('key', { ... })``.

        Example:
            >>> TemplateLiteralProcessor.create_replacement(
            ...     "App.text.hello_name", (Placeholder("name", "user.name"),))
            "t('App.text.hello_name', { name: user.name })"
        """
        arguments = format_arguments(placeholders)
        if arguments:
            return f"t('{escape_key(key)}', {arguments})"
        return f"t('{escape_key(key)}')"
