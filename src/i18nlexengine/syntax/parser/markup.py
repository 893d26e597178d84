"""Markup parser for HTML-like documents (HTML, Svelte).

Drives the markup state machine over the whole document. Vue and Blade
parsers specialize the text cleaning and kind inference hooks.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from i18nlexengine.enums import ItemType, Kind, SyntaxKind
from i18nlexengine.syntax.kinds import (
    infer_kind_from_attribute,
    infer_kind_from_tag,
    is_translatable_attribute,
)
from i18nlexengine.syntax.markup import MarkupAttribute, MarkupText, scan_markup

from .base import BaseParser, ItemCollector, find_runtime_keys

__all__ = ["MarkupParser"]

# Svelte and similar single-brace expressions: {count}, {#if ok}, {t('A.b')}
_EXPRESSION = re.compile(r"\{[^{}]*\}")


class MarkupParser(BaseParser):
    """Parser for plain markup.

    Text nodes have template expressions removed before classification;
    attribute values are considered only for allow-listed attribute names.

    Example:
        >>> result = MarkupParser().parse('<button title="Submit now">Go</button>')
        >>> [(str(i.type), i.text, i.kind) for i in result.items]
        [('attribute', 'Submit now', 'title'), ('text', 'Go', 'button')]
    """

    __slots__ = ()

    syntax = SyntaxKind.MARKUP

    def _parse(self, content: str, collector: ItemCollector) -> tuple[str, ...]:
        self._scan(content, 0, collector)
        return find_runtime_keys(content)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _clean_text(self, raw: str) -> str | None:
        """Text to classify, or None to skip the node entirely."""
        return _EXPRESSION.sub(" ", raw)

    def _text_kind(self, parent_tag: str | None) -> Kind:
        return infer_kind_from_tag(parent_tag)

    def _accepts_value(self, value: str) -> bool:
        return "{" not in value

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan(self, markup: str, base_offset: int, collector: ItemCollector) -> None:
        """Feed text nodes and allow-listed attribute values to ``collector``."""
        for event in scan_markup(markup):
            match event:
                case MarkupText(raw=raw, start=start, parent_tag=parent):
                    text = self._clean_text(raw)
                    if text is None or not text.strip():
                        continue
                    lead = len(raw) - len(raw.lstrip())
                    collector.add(
                        ItemType.TEXT,
                        text,
                        self._text_kind(parent),
                        base_offset + start + lead,
                        parent_tag=parent,
                    )
                case MarkupAttribute(name=name, value=value, start=start, tag=tag):
                    if not is_translatable_attribute(name):
                        continue
                    if not self.validator.accepts_attribute(name):
                        continue
                    if not self._accepts_value(value):
                        continue
                    collector.add(
                        ItemType.ATTRIBUTE,
                        value,
                        infer_kind_from_attribute(name),
                        base_offset + start,
                        parent_tag=tag,
                        attribute_name=name,
                    )
