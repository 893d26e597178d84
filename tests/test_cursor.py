"""Tests for cursor infrastructure.

Validates the immutable cursor used by the markup scanner and the line
offset cache used to turn offsets into diagnostic spans.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18nlexengine.diagnostics import SourceSpan
from i18nlexengine.syntax.cursor import Cursor, LineOffsetCache

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor("<p>", 0)

        assert cursor.source == "<p>"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_current_at_eof_raises(self) -> None:
        """Reading past the end raises EOFError."""
        with pytest.raises(EOFError, match="position 2"):
            _ = Cursor("hi", 2).current

    def test_peek(self) -> None:
        """peek returns None beyond EOF."""
        cursor = Cursor("<!--", 0)

        assert cursor.peek(1) == "!"
        assert cursor.peek(10) is None


# ============================================================================
# MOVEMENT
# ============================================================================


class TestCursorMovement:
    """Test advance, jump_to and searching."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance never mutates the receiver."""
        cursor = Cursor("<p>Hi</p>", 0)
        moved = cursor.advance(3)

        assert moved.current == "H"
        assert cursor.current == "<"

    def test_advance_clamped(self) -> None:
        """Advancing past the end stops at EOF."""
        assert Cursor("ab", 1).advance(10).pos == 2

    def test_jump_to_never_moves_backwards(self) -> None:
        """jump_to clamps between the current position and EOF."""
        cursor = Cursor("abcdef", 3)

        assert cursor.jump_to(1).pos == 3
        assert cursor.jump_to(5).pos == 5
        assert cursor.jump_to(99).pos == 6

    def test_find_from_position(self) -> None:
        """find searches at or after the cursor."""
        cursor = Cursor("<a><b>", 1)

        assert cursor.find("<") == 3
        assert cursor.find("<z") == -1

    def test_startswith_at_position(self) -> None:
        """startswith checks the source from the cursor onwards."""
        cursor = Cursor("<p><!-- x -->", 3)

        assert cursor.startswith("<!--")
        assert not Cursor("<p><!-- x -->", 0).startswith("<!--")
        assert not Cursor("<!-", 0).startswith("<!--")


# ============================================================================
# LINE AND COLUMN
# ============================================================================


class TestLineColumn:
    """Test line/column computation."""

    def test_line_col(self) -> None:
        """Lines and columns are 1-indexed."""
        cache = LineOffsetCache("ab\ncd")

        assert cache.get_line_col(0) == (1, 1)
        assert cache.get_line_col(2) == (1, 3)
        assert cache.get_line_col(4) == (2, 2)

    def test_line_starts(self) -> None:
        """Each position after a newline is column 1 of the next line."""
        source = "<template>\n  <h1>Hi</h1>\n</template>\n"
        cache = LineOffsetCache(source)

        assert cache.get_line_col(11) == (2, 1)
        assert cache.get_line_col(25) == (3, 1)
        assert cache.get_line_col(len(source)) == (4, 1)

    def test_cache_clamps_position(self) -> None:
        """Out-of-range positions are clamped."""
        cache = LineOffsetCache("line1\nline2")

        assert cache.get_line_col(-5) == (1, 1)
        assert cache.get_line_col(100) == (2, 6)

    def test_span(self) -> None:
        """span builds a SourceSpan for a range."""
        cache = LineOffsetCache("one\ntwo three")

        assert cache.span(8, 13) == SourceSpan(start=8, end=13, line=2, column=5)

    def test_span_clamps_end(self) -> None:
        """An end before start collapses to an empty span."""
        span = LineOffsetCache("abc").span(2, 1)

        assert span.start == 2
        assert span.end == 2

    @given(source=st.text(alphabet="ab\n", max_size=40), data=st.data())
    def test_cache_property(self, source: str, data: st.DataObject) -> None:
        """Cache agrees with counting newlines before the position."""
        pos = data.draw(st.integers(min_value=0, max_value=len(source)))
        line = source.count("\n", 0, pos) + 1
        column = pos - source.rfind("\n", 0, pos)

        assert LineOffsetCache(source).get_line_col(pos) == (line, column)
