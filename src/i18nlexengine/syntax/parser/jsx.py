"""JavaScript / TypeScript / JSX parser.

Pattern-driven: recognizes the literal shapes that carry UI copy in
component code (JSX text, attribute values, object properties such as
``title:``, UI-named variables, toast calls, ``return "..."``) using the
same patterns as the script replacer. Template literals with
interpolations are extracted in placeholder form (``Hello {name}``).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from i18nlexengine.enums import ItemType, Kind, SyntaxKind
from i18nlexengine.syntax import scripts
from i18nlexengine.syntax.kinds import (
    infer_kind_from_attribute,
    infer_kind_from_jsx_element,
    infer_kind_from_prop,
    infer_kind_from_variable,
)
from i18nlexengine.syntax.template_literal import TemplateLiteralProcessor

from .base import BaseParser, ItemCollector, find_runtime_keys

__all__ = ["JsxParser", "literal_lookup_text"]


def literal_lookup_text(text: str, quote: str) -> tuple[str, str | None] | None:
    """Lookup text of a literal and the text to classify instead, if different.

    Template literals with interpolations are looked up in placeholder form
    but classified on their static text only.

    Returns:
        (lookup text, classification text or None), or None when the
        literal must be left alone (already a key, or no static copy)

    Example:
        >>> literal_lookup_text("Hi ${user.name}!", "`")
        ('Hi {name}!', 'Hi  !')
        >>> literal_lookup_text("App.heading.hi", "'") is None
        True
    """
    if scripts.looks_like_key(text):
        return None
    if quote == "`" and "${" in text:
        if not TemplateLiteralProcessor.has_translatable_content(text):
            return None
        info = TemplateLiteralProcessor.analyze(f"`{text}`")
        if info is None:
            return None
        return info.base_text, TemplateLiteralProcessor.get_combined_static_text(text)
    return text, None


class JsxParser(BaseParser):
    """Parser for ``.js``, ``.jsx``, ``.ts``, ``.tsx`` and friends.

    When two patterns match the same literal, the first in scan order wins,
    which is the order the replacer rewrites them in.

    Example:
        >>> result = JsxParser().parse('toast.success("Profile updated");')
        >>> [(i.text, i.kind) for i in result.items]
        [('Profile updated', 'toast')]
    """

    __slots__ = ()

    syntax = SyntaxKind.JSX

    def _parse(self, content: str, collector: ItemCollector) -> tuple[str, ...]:
        self.collect(content, collector)
        return find_runtime_keys(content)

    def collect(self, source: str, collector: ItemCollector, base_offset: int = 0) -> None:
        """Feed every recognized literal of ``source`` to ``collector``.

        Args:
            source: Script text
            collector: Item accumulator of the running parse
            base_offset: Offset of ``source`` within the parsed file
        """
        self._named_literals(source, collector, base_offset)
        self._jsx(source, collector, base_offset)
        for match in scripts.RETURN_STRING.finditer(source):
            self._add(collector, match, Kind.TEXT, base_offset)

    def _add(
        self,
        collector: ItemCollector,
        match: re.Match[str],
        kind: str,
        base_offset: int,
        *,
        name: str | None = None,
    ) -> None:
        literal = literal_lookup_text(match["text"], match["quote"])
        if literal is None:
            return
        text, check = literal
        collector.add(
            ItemType.ATTRIBUTE,
            text,
            kind,
            base_offset + match.start("text"),
            attribute_name=name,
            check=check,
        )

    def _named_literals(self, source: str, collector: ItemCollector, base: int) -> None:
        for match in scripts.OBJECT_PROPERTY.finditer(source):
            kind = infer_kind_from_prop(match["name"])
            self._add(collector, match, kind, base, name=match["name"])
        for match in scripts.VARIABLE_DECLARATION.finditer(source):
            kind = infer_kind_from_variable(match["name"])
            self._add(collector, match, kind, base, name=match["name"])
        for match in scripts.DOCUMENT_TITLE.finditer(source):
            self._add(collector, match, Kind.TITLE, base, name="document.title")
        for match in scripts.TOAST_CALL.finditer(source):
            self._add(collector, match, Kind.TOAST, base)

    def _jsx(self, source: str, collector: ItemCollector, base: int) -> None:
        for match in scripts.JSX_TEXT.finditer(source):
            raw = match["text"]
            if not raw.strip():
                continue
            lead = len(raw) - len(raw.lstrip())
            collector.add(
                ItemType.TEXT,
                raw,
                infer_kind_from_jsx_element(match["name"]),
                base + match.start("text") + lead,
                parent_tag=match["name"],
            )

        for match in scripts.JSX_EXPRESSION_STRING.finditer(source):
            self._add(collector, match, Kind.TEXT, base)

        for match in scripts.JSX_ATTRIBUTE.finditer(source):
            if self.validator.accepts_attribute(match["name"]):
                kind = infer_kind_from_attribute(match["name"])
                self._add(collector, match, kind, base, name=match["name"])

        for match in scripts.ATTRIBUTE_EXPRESSION.finditer(source):
            if not self.validator.accepts_attribute(match["name"]):
                continue
            kind = infer_kind_from_attribute(match["name"])
            expr_base = base + match.start("expr")
            for literal in scripts.EXPRESSION_LITERAL.finditer(match["expr"]):
                if "${" not in literal["text"]:
                    self._add(collector, literal, kind, expr_base, name=match["name"])
