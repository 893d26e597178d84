"""Vue single-file component parser.

Scans the root ``<template>`` block with the markup state machine and hands
each ``<script>`` block to the script parser, so a component yields the
same items its replacer will later rewrite. A fragment without a
``<template>`` block is scanned as markup, script and style bodies skipped.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from i18nlexengine.enums import Kind, SyntaxKind
from i18nlexengine.syntax.kinds import infer_kind_from_component
from i18nlexengine.syntax.sfc import find_script_blocks, find_template_block

from .base import ItemCollector, find_runtime_keys
from .jsx import JsxParser
from .markup import MarkupParser

__all__ = ["VueParser"]

_MUSTACHE = re.compile(r"\{\{[\s\S]*?\}\}")


class VueParser(MarkupParser):
    """Parser for ``.vue`` files (Vue 2/3, Nuxt, Quasar).

    Mustache interpolations are dropped from text nodes before
    classification; they are not turned into placeholders at this stage.

    Example:
        >>> result = VueParser().parse('<template><h1>Welcome Home</h1></template>')
        >>> [(i.text, i.kind) for i in result.items]
        [('Welcome Home', 'heading')]
    """

    __slots__ = ()

    syntax = SyntaxKind.VUE

    def _parse(self, content: str, collector: ItemCollector) -> tuple[str, ...]:
        block = find_template_block(content)
        if block is None:
            self._scan(content, 0, collector)
            return find_runtime_keys(content)

        template = block.content(content)
        self._scan(template, block.content_start, collector)
        keys = list(find_runtime_keys(template))

        scripts = JsxParser(config=self.config)
        for script in find_script_blocks(content):
            body = script.content(content)
            scripts.collect(body, collector, script.content_start)
            keys.extend(find_runtime_keys(body))
        return tuple(keys)

    def _clean_text(self, raw: str) -> str | None:
        return _MUSTACHE.sub(" ", raw)

    def _text_kind(self, parent_tag: str | None) -> Kind:
        return infer_kind_from_component(parent_tag)

    def _accepts_value(self, value: str) -> bool:
        return "{{" not in value
