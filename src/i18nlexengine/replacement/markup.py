"""Markup replacers: generic HTML-like documents and Laravel Blade views.

Both rewrite text between tags and allow-listed static attribute values,
leaving ``<script>`` and ``<style>`` bodies and ``<!-- -->`` comments
untouched. They differ in the call they emit:

    markup (Svelte style)   <p>{t('K')}</p>          title={t('K')}
    Blade                   <p>{{ __('K') }}</p>      title="{{ __('K') }}"

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from i18nlexengine.enums import SyntaxKind
from i18nlexengine.syntax.kinds import (
    TRANSLATABLE_ATTRIBUTES,
    infer_kind_from_attribute,
    infer_kind_from_tag,
)
from i18nlexengine.syntax.template_literal import escape_key

from .base import (
    BaseReplacer,
    ReplaceContext,
    ReplaceResult,
    SubstitutionRule,
    apply_outside,
    apply_outside_comments,
    apply_rules,
    enclosing_tag,
    split_padding,
)

__all__ = ["BladeReplacer", "MarkupReplacer"]

_ATTRIBUTE_NAMES = "|".join(
    re.escape(name) for name in sorted(TRANSLATABLE_ATTRIBUTES, key=len, reverse=True)
)
_RAW_BLOCKS = re.compile(r"<(script|style)\b[^>]*>[\s\S]*?</\1\s*>", re.IGNORECASE)

_MARKUP_TEXT = re.compile(r"(?P<open>>)(?P<text>[^<>{}]+)(?P<close><)")
# Blade directives (@if, @foreach) are not copy; text containing them is skipped.
_BLADE_TEXT = re.compile(r"(?P<open>>)(?P<text>[^<>@]+)(?P<close><)")
_STATIC_ATTRIBUTE = re.compile(
    rf"(?P<space>\s)(?P<name>{_ATTRIBUTE_NAMES})(?P<equals>\s*=\s*)"
    r"(?P<quote>['\"])(?P<text>[^'\"]{2,200})(?P=quote)",
    re.IGNORECASE,
)

_BLADE_TRANSLATED = ("{{", "{!!", "__(", "@lang", "trans(")


class MarkupReplacer(BaseReplacer):
    """Replacer for ``.html``, ``.htm`` and ``.svelte`` documents.

    Example:
        >>> from i18nlexengine.keys.keymap import build_key_map
        >>> km = build_key_map({"Shop": {"heading": {"order_history": "Order History"}}})
        >>> MarkupReplacer().replace("<h2>Order History</h2>", km, "Shop").content
        "<h2>{t('Shop.heading.order_history')}</h2>"
    """

    __slots__ = ()

    syntax = SyntaxKind.MARKUP

    text_pattern: re.Pattern[str] = _MARKUP_TEXT

    def _replace(self, content: str, context: ReplaceContext) -> ReplaceResult:
        rules = self.rules()

        def rewrite(part: str) -> tuple[str, int]:
            return apply_outside_comments(part, lambda text: apply_rules(text, rules, context))

        rewritten, count = apply_outside(content, _RAW_BLOCKS, rewrite)
        return ReplaceResult(rewritten, count)

    def rules(self) -> tuple[SubstitutionRule, ...]:
        """Text rule, then attribute rule."""
        return (
            SubstitutionRule("text", self.text_pattern, self._rewrite_text),
            SubstitutionRule("attribute", _STATIC_ATTRIBUTE, self._rewrite_attribute),
        )

    # ------------------------------------------------------------------
    # Output forms
    # ------------------------------------------------------------------

    def text_call(self, key: str) -> str:
        """Call written in place of a text node."""
        return f"{{t('{escape_key(key)}')}}"

    def attribute_value(self, key: str) -> str:
        """Attribute value written after ``=``."""
        return f"{{t('{escape_key(key)}')}}"

    def is_translated(self, text: str) -> bool:
        """True if text already goes through the runtime."""
        return "{" in text

    # ------------------------------------------------------------------
    # Rewrites
    # ------------------------------------------------------------------

    def _rewrite_text(self, match: re.Match[str], context: ReplaceContext) -> str | None:
        lead, core, trail = split_padding(match["text"])
        if not core or self.is_translated(core) or not context.can_translate(core):
            return None
        tag = enclosing_tag(match.string, match.start("open"))
        key = context.lookup(infer_kind_from_tag(tag), core)
        if key is None:
            return None
        return f"{match['open']}{lead}{self.text_call(key)}{trail}{match['close']}"

    def _rewrite_attribute(self, match: re.Match[str], context: ReplaceContext) -> str | None:
        name, text = match["name"], match["text"]
        if self.is_translated(text) or not context.validator.accepts_attribute(name):
            return None
        if not context.can_translate(text):
            return None
        key = context.lookup(infer_kind_from_attribute(name), text)
        if key is None:
            return None
        return f"{match['space']}{name}{match['equals']}{self.attribute_value(key)}"


class BladeReplacer(MarkupReplacer):
    """Replacer for ``.blade.php`` views.

    Example:
        >>> from i18nlexengine.keys.keymap import build_key_map
        >>> km = build_key_map({"Shop": {"heading": {"order_history": "Order History"}}})
        >>> BladeReplacer().replace("<h2>Order History</h2>", km, "Shop").content
        "<h2>{{ __('Shop.heading.order_history') }}</h2>"
    """

    __slots__ = ()

    syntax = SyntaxKind.BLADE

    text_pattern = _BLADE_TEXT

    def text_call(self, key: str) -> str:
        return f"{{{{ __('{escape_key(key)}') }}}}"

    def attribute_value(self, key: str) -> str:
        return f'"{{{{ __(\'{escape_key(key)}\') }}}}"'

    def is_translated(self, text: str) -> bool:
        return any(marker in text for marker in _BLADE_TRANSLATED)
