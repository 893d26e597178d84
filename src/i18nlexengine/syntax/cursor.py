"""Immutable cursor infrastructure for source scanning.

Implements the immutable cursor pattern used by the markup state machine.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column resolved by LineOffsetCache, built once per source

Line Ending Support:
    LF and CRLF are supported (``\\n`` is the line delimiter). CR-only files
    produce incorrect line numbers.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from i18nlexengine.diagnostics import SourceSpan

__all__ = ["Cursor", "LineOffsetCache"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("<p>Hi</p>", 0)
        >>> cursor.current
        '<'
        >>> cursor.advance(3).current
        'H'
        >>> cursor.current  # Original unchanged
        '<'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None if beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> Cursor:
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def jump_to(self, pos: int) -> Cursor:
        """Return new cursor at absolute position ``pos`` (clamped to EOF).

        Used to skip whole regions (quoted values, raw script bodies) once
        their end has been located.
        """
        return Cursor(self.source, max(self.pos, min(pos, len(self.source))))

    def startswith(self, prefix: str) -> bool:
        """True if the source continues with ``prefix`` at this position.

        Example:
            >>> Cursor("<!-- x -->", 0).startswith("<!--")
            True
        """
        return self.source.startswith(prefix, self.pos)

    def find(self, needle: str) -> int:
        """Absolute position of the next ``needle`` at or after this position, or -1."""
        return self.source.find(needle, self.pos)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in a single pass, then answers
    line:column queries by binary search. Audits turn every extracted item
    into a span, so one cache is built per source.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2")
        >>> cache.get_line_col(6)
        (2, 1)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        start = source.find("\n")
        while start != -1:
            offsets.append(start + 1)
            start = source.find("\n", start + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Line and column for position (both 1-indexed); pos is clamped."""
        pos = max(0, min(pos, self._source_len))
        index = bisect_right(self._offsets, pos) - 1
        return (index + 1, pos - self._offsets[index] + 1)

    def span(self, start: int, end: int) -> SourceSpan:
        """SourceSpan covering ``[start, end)``."""
        start = max(0, min(start, self._source_len))
        end = max(start, min(end, self._source_len))
        line, column = self.get_line_col(start)
        return SourceSpan(start=start, end=end, line=line, column=column)
