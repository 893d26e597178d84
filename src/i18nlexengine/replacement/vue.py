"""Vue single-file component replacer.

The root ``<template>`` block goes through five ordered passes:

1. text between tags, interpolations kept as named arguments:
   ``<p>Hello {{ user.name }}</p>`` -> ``{{ $t('K', { name: user.name }) }}``
2. static allow-listed attributes, rewritten as bound attributes:
   ``title="Close"`` -> ``:title="$t('K')"``
3. string literals inside ``{{ }}`` expressions
4. bound attributes holding one quoted literal: ``:title="'Close'"``
5. ``v-text`` / ``v-html`` holding one quoted literal

Each ``<script>`` block is handed to the script replacer with the same
KeyMap and namespace. ``<!-- -->`` comments in the template are left as
written. The template change count is the net number of new
``$t(`` calls.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from i18nlexengine.enums import Kind, SyntaxKind
from i18nlexengine.syntax.kinds import (
    TRANSLATABLE_ATTRIBUTES,
    infer_kind_from_attribute,
    infer_kind_from_component,
)
from i18nlexengine.syntax.placeholders import (
    Placeholder,
    format_arguments,
    placeholder_name,
    unique_name,
)
from i18nlexengine.syntax.scripts import looks_like_key
from i18nlexengine.syntax.sfc import find_script_blocks, find_template_block
from i18nlexengine.syntax.template_literal import escape_key
from i18nlexengine.validation import normalize_text

from .base import (
    BaseReplacer,
    ReplaceContext,
    ReplaceResult,
    SubstitutionRule,
    apply_outside_comments,
    apply_rules,
    count_marker_delta,
    enclosing_tag,
    split_padding,
)
from .jsx import JsxReplacer

__all__ = ["VUE_TEMPLATE_RULES", "VueReplacer", "interpolated_text"]

_ATTRIBUTE_NAMES = "|".join(
    re.escape(name) for name in sorted(TRANSLATABLE_ATTRIBUTES, key=len, reverse=True)
)

_TEXT = re.compile(r"(?P<open>>)(?P<text>[^<>]+)(?P<close><)")
_STATIC_ATTRIBUTE = re.compile(
    rf"(?P<space>\s)(?P<name>{_ATTRIBUTE_NAMES})\s*=\s*"
    r"(?P<quote>['\"])(?P<text>[^'\"]{2,200})(?P=quote)",
    re.IGNORECASE,
)
_MUSTACHE = re.compile(r"\{\{(?P<expr>[\s\S]*?)\}\}")
_MUSTACHE_LITERAL = re.compile(r"(?P<quote>['\"])(?P<text>[^'\"]{3,200})(?P=quote)")
_BOUND_ATTRIBUTE = re.compile(
    rf"(?P<prefix>:(?P<name>{_ATTRIBUTE_NAMES})\s*=\s*\")"
    r"(?P<quote>['])(?P<text>[^'\"]{2,200})(?P=quote)\"",
    re.IGNORECASE,
)
_TEXT_DIRECTIVE = re.compile(
    r"(?P<prefix>v-(?:text|html)\s*=\s*\")(?P<quote>['])(?P<text>[^'\"]{2,200})(?P=quote)\""
)
_CALL_BEFORE = re.compile(r"\$?t\(\s*$")
_CALL_IN_MUSTACHE = re.compile(r"\{\{[^}]*?(?<![\w.])\$?t\s*\(")
_RUNTIME_MARKER = re.compile(r"\$t\s*\(")


def interpolated_text(raw: str) -> tuple[str, str, tuple[Placeholder, ...]]:
    """Split text containing ``{{ expr }}`` into lookup and classification forms.

    Returns:
        (lookup text with ``{name}`` placeholders, text with interpolations
        removed, placeholders in order)

    Example:
        >>> interpolated_text("Hello {{ user.name }}")
        ('Hello {name}', 'Hello', (Placeholder(name='name', expression='user.name'),))
    """
    lookup: list[str] = []
    static: list[str] = []
    placeholders: list[Placeholder] = []
    used: set[str] = set()
    last = 0
    for match in _MUSTACHE.finditer(raw):
        lookup.append(raw[last : match.start()])
        static.append(raw[last : match.start()])
        static.append(" ")
        last = match.end()
        expression = match["expr"].strip()
        if not expression:
            continue
        name = unique_name(placeholder_name(expression, len(placeholders)), used)
        placeholders.append(Placeholder(name, expression))
        lookup.append(f"{{{name}}}")
    lookup.append(raw[last:])
    static.append(raw[last:])
    return normalize_text("".join(lookup)), normalize_text("".join(static)), tuple(placeholders)


def _vue_call(key: str, placeholders: tuple[Placeholder, ...] = ()) -> str:
    arguments = format_arguments(placeholders)
    if arguments:
        return f"$t('{escape_key(key)}', {arguments})"
    return f"$t('{escape_key(key)}')"


# ============================================================================
# REWRITES
# ============================================================================


def _text(match: re.Match[str], context: ReplaceContext) -> str | None:
    lead, core, trail = split_padding(match["text"])
    if not core:
        return None
    lookup_text, check, placeholders = interpolated_text(core)
    if not check or not context.can_translate(check):
        return None
    tag = enclosing_tag(match.string, match.start("open"))
    kind = infer_kind_from_component(tag) if tag else Kind.TEXT
    key = context.lookup(kind, lookup_text)
    if key is None:
        return None
    call = _vue_call(key, placeholders)
    return f"{match['open']}{lead}{{{{ {call} }}}}{trail}{match['close']}"


def _has_translate_call(match: re.Match[str]) -> bool:
    return _CALL_IN_MUSTACHE.search(match["text"]) is not None


def _static_attribute(match: re.Match[str], context: ReplaceContext) -> str | None:
    name, text = match["name"], match["text"]
    if "{{" in text or not context.validator.accepts_attribute(name):
        return None
    if not context.can_translate(text):
        return None
    key = context.lookup(infer_kind_from_attribute(name), text)
    if key is None:
        return None
    return f'{match["space"]}:{name}="{_vue_call(key)}"'


def _mustache(match: re.Match[str], context: ReplaceContext) -> str | None:
    expression = match["expr"]
    changed = False

    def literal(inner: re.Match[str]) -> str:
        nonlocal changed
        if _CALL_BEFORE.search(expression, 0, inner.start()):
            return inner.group(0)
        text = inner["text"]
        if looks_like_key(text) or not context.can_translate(text):
            return inner.group(0)
        key = context.lookup(Kind.TEXT, text)
        if key is None:
            return inner.group(0)
        changed = True
        return _vue_call(key)

    rewritten = _MUSTACHE_LITERAL.sub(literal, expression)
    return f"{{{{{rewritten}}}}}" if changed else None


def _bound_literal(kind_of: Callable[[re.Match[str]], str]) -> Callable[..., str | None]:
    def rewrite(match: re.Match[str], context: ReplaceContext) -> str | None:
        text = match["text"]
        if not context.can_translate(text):
            return None
        key = context.lookup(kind_of(match), text)
        if key is None:
            return None
        return f'{match["prefix"]}{_vue_call(key)}"'

    return rewrite


VUE_TEMPLATE_RULES: tuple[SubstitutionRule, ...] = (
    SubstitutionRule("text", _TEXT, _text, guard=_has_translate_call),
    SubstitutionRule("attribute", _STATIC_ATTRIBUTE, _static_attribute),
    SubstitutionRule("mustache-literal", _MUSTACHE, _mustache),
    SubstitutionRule(
        "bound-attribute",
        _BOUND_ATTRIBUTE,
        _bound_literal(lambda m: infer_kind_from_attribute(m["name"])),
    ),
    SubstitutionRule("text-directive", _TEXT_DIRECTIVE, _bound_literal(lambda m: Kind.TEXT)),
)


def _rewrite_template(template: str, context: ReplaceContext) -> tuple[str, int]:
    """Template passes; ``<!-- -->`` comments are kept verbatim."""
    return apply_outside_comments(
        template, lambda text: apply_rules(text, VUE_TEMPLATE_RULES, context)
    )


class VueReplacer(BaseReplacer):
    """Replacer for ``.vue`` files.

    Example:
        >>> from i18nlexengine.keys.keymap import build_key_map
        >>> km = build_key_map({"App": {"heading": {"welcome_home": "Welcome Home"}}})
        >>> src = "<template><h1>Welcome Home</h1></template>"
        >>> result = VueReplacer().replace(src, km, "App")
        >>> result.content
        "<template><h1>{{ $t('App.heading.welcome_home') }}</h1></template>"
        >>> VueReplacer().replace(result.content, km, "App").change_count
        0
    """

    __slots__ = ()

    syntax = SyntaxKind.VUE

    def _replace(self, content: str, context: ReplaceContext) -> ReplaceResult:
        changes = 0
        block = find_template_block(content)
        if block is not None:
            template = block.content(content)
            rewritten, _ = _rewrite_template(template, context)
            if rewritten != template:
                changes += count_marker_delta(template, rewritten, _RUNTIME_MARKER)
                content = content[: block.content_start] + rewritten + content[block.content_end :]
        elif "<script" not in content.lower():
            rewritten, _ = _rewrite_template(content, context)
            changes += count_marker_delta(content, rewritten, _RUNTIME_MARKER)
            content = rewritten

        scripts = JsxReplacer(config=self.config)
        for script in reversed(find_script_blocks(content)):
            body = script.content(content)
            rewritten, count = scripts.replace_script(body, context)
            if count:
                changes += count
                start, end = script.content_start, script.content_end
                content = content[:start] + rewritten + content[end:]
        return ReplaceResult(content, changes)
