"""Single-file component block location.

Finds the ``<template>`` and ``<script>`` blocks of a Vue single-file
component. Template blocks nest (``<template v-if>`` inside the root
template), so the root block is matched by depth counting rather than by the
first closing tag.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Block", "find_script_blocks", "find_template_block"]

_TEMPLATE_TAG = re.compile(r"<(/?)template\b[^>]*?(/?)>", re.IGNORECASE)
_SCRIPT_BLOCK = re.compile(r"(<script\b[^>]*>)([\s\S]*?)(</script\s*>)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Block:
    """Location of one SFC block.

    Attributes:
        start: Offset of ``<`` of the opening tag
        content_start: Offset after the opening tag
        content_end: Offset of ``<`` of the closing tag
        end: Offset after the closing tag
        open_tag: Opening tag text (attributes included)
    """

    start: int
    content_start: int
    content_end: int
    end: int
    open_tag: str

    def content(self, source: str) -> str:
        """Text between the opening and closing tags."""
        return source[self.content_start : self.content_end]


def find_template_block(source: str) -> Block | None:
    """Locate the root ``<template>`` block.

    Returns:
        Block, or None if there is no complete template block

    Example:
        >>> src = '<template><template v-if="a"><p>A</p></template></template>'
        >>> block = find_template_block(src)
        >>> block.content(src)
        '<template v-if="a"><p>A</p></template>'
    """
    depth = 0
    root: re.Match[str] | None = None
    for match in _TEMPLATE_TAG.finditer(source):
        closing, self_closing = match.group(1), match.group(2)
        if closing:
            if root is None:
                continue
            depth -= 1
            if depth == 0:
                return Block(
                    start=root.start(),
                    content_start=root.end(),
                    content_end=match.start(),
                    end=match.end(),
                    open_tag=root.group(0),
                )
        elif not self_closing:
            if root is None:
                root = match
            depth += 1
    return None


def find_script_blocks(source: str) -> tuple[Block, ...]:
    """Locate every ``<script>`` block (``<script>`` and ``<script setup>``).

    Script blocks do not nest; each ends at the first closing tag.
    """
    return tuple(
        Block(
            start=m.start(),
            content_start=m.end(1),
            content_end=m.start(3),
            end=m.end(),
            open_tag=m.group(1),
        )
        for m in _SCRIPT_BLOCK.finditer(source)
    )
