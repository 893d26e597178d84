"""Laravel Blade template parser.

Blade comments, raw PHP and directives are blanked out (same length, so
offsets stay valid) before the markup state machine runs. Text that already
goes through Blade echoes or translation helpers is left alone.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from i18nlexengine.enums import SyntaxKind

from .base import ItemCollector, find_runtime_keys
from .markup import MarkupParser

__all__ = ["BLADE_KEY_CALLS", "BladeParser", "blank_blade_noise"]

BLADE_KEY_CALLS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?<![\w$>])__\(\s*['\"](?P<key>[^'\"]+)['\"]"),
    re.compile(r"@lang\(\s*['\"](?P<key>[^'\"]+)['\"]"),
    re.compile(r"(?<![\w$>])trans\(\s*['\"](?P<key>[^'\"]+)['\"]"),
)

_NOISE: tuple[re.Pattern[str], ...] = (
    re.compile(r"\{\{--[\s\S]*?--\}\}"),
    re.compile(r"<\?(?:php|=)[\s\S]*?(?:\?>|$)"),
    re.compile(r"@php\b[\s\S]*?@endphp\b"),
    # @if($a), @foreach($items as $item), @csrf; @lang is kept as a marker.
    re.compile(r"(?<![\w@])@(?!lang\b)[A-Za-z_]\w*(?:\s*\((?:[^()]|\([^()]*\))*\))?"),
)

_TRANSLATED_MARKERS = ("{{", "{!!", "__(", "@lang", "trans(")
_NON_NEWLINE = re.compile(r"[^\n]")


def _blank(match: re.Match[str]) -> str:
    return _NON_NEWLINE.sub(" ", match.group(0))


def blank_blade_noise(source: str) -> str:
    """Replace Blade comments, PHP blocks and directives with spaces.

    Example:
        >>> blank_blade_noise("@if($ok)<p>Hi</p>@endif")
        '        <p>Hi</p>      '
    """
    for pattern in _NOISE:
        source = pattern.sub(_blank, source)
    return source


class BladeParser(MarkupParser):
    """Parser for ``.blade.php`` views.

    Example:
        >>> result = BladeParser().parse("<h2>Order History</h2><p>{{ __('Shop.text.x') }}</p>")
        >>> [(i.text, i.kind) for i in result.items], result.runtime_keys
        ([('Order History', 'heading')], ('Shop.text.x',))
    """

    __slots__ = ()

    syntax = SyntaxKind.BLADE

    def _parse(self, content: str, collector: ItemCollector) -> tuple[str, ...]:
        self._scan(blank_blade_noise(content), 0, collector)
        return find_runtime_keys(content, BLADE_KEY_CALLS)

    def _clean_text(self, raw: str) -> str | None:
        if any(marker in raw for marker in _TRANSLATED_MARKERS):
            return None
        return raw

    def _accepts_value(self, value: str) -> bool:
        return not any(marker in value for marker in _TRANSLATED_MARKERS)
