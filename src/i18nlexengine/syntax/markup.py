"""Markup scanner: an explicit character-level state machine.

Walks HTML-like markup (Vue templates, Blade views, plain HTML) and yields
text runs and attribute values together with their enclosing tag. No tree is
built: a tag-name stack tracks nesting so the nearest enclosing tag is known
when text is classified.

The machine is split in two:
    step()        pure transition (state, cursor, frame) -> (state, cursor,
                  frame, effects); frames and cursors are immutable
    scan_markup() driver that applies effects, owns the tag stack and
                  yields public events

Script and style bodies are skipped verbatim until their closing tag
(case-insensitive). Comments and declarations (``<!DOCTYPE>``) are skipped.
Malformed input never raises: unterminated constructs consume to EOF.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace

from i18nlexengine.enums import ScanState

from .cursor import Cursor

__all__ = [
    "AttributeValue",
    "Frame",
    "MarkupAttribute",
    "MarkupText",
    "TagClosed",
    "TagOpened",
    "TextRun",
    "scan_markup",
    "step",
]

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_:.-")
_ATTR_START = frozenset(string.ascii_letters + "@:#_[")
_ATTR_CHARS = frozenset(string.ascii_letters + string.digits + "_:@#.-[]")
_WHITESPACE = frozenset(" \t\n\r\f")
_LEADING_NAME = re.compile(r"[A-Za-z0-9_:.\-]*")

# Elements that never have content or a closing tag.
_VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})

_RAW_TEXT_STATES = {"script": ScanState.SCRIPT, "style": ScanState.STYLE}
_RAW_TEXT_END = {
    ScanState.SCRIPT: re.compile(r"</script\s*>", re.IGNORECASE),
    ScanState.STYLE: re.compile(r"</style\s*>", re.IGNORECASE),
}


# ============================================================================
# FRAME AND EFFECTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Frame:
    """Token under construction.

    Attributes:
        mark: Start offset of the current text run, name or value
        tag: Name of the tag being opened
        attr: Name of the attribute whose value is being read
        quote: Quote character of the value ("" when unquoted)
        terminator: End marker of the current comment or declaration
    """

    mark: int = 0
    tag: str = ""
    attr: str = ""
    quote: str = ""
    terminator: str = "-->"


@dataclass(frozen=True, slots=True)
class TextRun:
    """Raw text between tags, as offsets."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class AttributeValue:
    """Attribute value, as offsets of the unquoted value."""

    name: str
    start: int
    end: int
    tag: str


@dataclass(frozen=True, slots=True)
class TagOpened:
    """Start tag completed."""

    name: str
    self_closing: bool


@dataclass(frozen=True, slots=True)
class TagClosed:
    """End tag completed."""

    name: str


type Effect = TextRun | AttributeValue | TagOpened | TagClosed
type Step = tuple[ScanState, Cursor, Frame, tuple[Effect, ...]]


# ============================================================================
# TRANSITIONS
# ============================================================================


def _text(cursor: Cursor, frame: Frame) -> Step:
    lt = cursor.find("<")
    if lt == -1:
        return ScanState.TEXT, cursor.jump_to(len(cursor.source)), frame, ()

    at_lt = cursor.jump_to(lt)
    following = at_lt.peek(1)
    pending: tuple[Effect, ...] = (TextRun(frame.mark, lt),) if lt > frame.mark else ()

    if at_lt.startswith("<!--"):
        return ScanState.COMMENT, at_lt.advance(4), Frame(terminator="-->"), pending
    if following in ("!", "?"):
        return ScanState.COMMENT, at_lt.advance(2), Frame(terminator=">"), pending
    if following == "/":
        return ScanState.TAG_CLOSE, at_lt.advance(2), Frame(mark=lt + 2), pending
    if following is not None and following in string.ascii_letters:
        return ScanState.TAG_OPEN, at_lt.advance(), Frame(mark=lt + 1), pending

    # A lone '<' is ordinary text; keep the current run open.
    return ScanState.TEXT, at_lt.advance(), frame, ()


def _tag_open(cursor: Cursor, frame: Frame) -> Step:
    return ScanState.TAG_NAME, cursor, replace(frame, mark=cursor.pos), ()


def _finish_start_tag(cursor: Cursor, frame: Frame, effects: tuple[Effect, ...] = ()) -> Step:
    """Handle ``>`` or ``/`` ending a start tag."""
    if cursor.current == "/":
        if cursor.peek(1) == ">":
            after = cursor.advance(2)
            closed = (*effects, TagOpened(frame.tag, self_closing=True))
            return ScanState.TEXT, after, Frame(mark=after.pos), closed
        return ScanState.TAG_SPACE, cursor.advance(), frame, effects

    after = cursor.advance()
    raw_state = _RAW_TEXT_STATES.get(frame.tag.lower())
    if raw_state is not None:
        return raw_state, after, Frame(mark=after.pos, tag=frame.tag), effects
    void = frame.tag.lower() in _VOID_ELEMENTS
    opened = (*effects, TagOpened(frame.tag, self_closing=void))
    return ScanState.TEXT, after, Frame(mark=after.pos), opened


def _tag_name(cursor: Cursor, frame: Frame) -> Step:
    char = cursor.current
    if char in _NAME_CHARS:
        return ScanState.TAG_NAME, cursor.advance(), frame, ()
    named = replace(frame, tag=cursor.source[frame.mark : cursor.pos])
    if char in (">", "/"):
        return _finish_start_tag(cursor, named)
    if char in _WHITESPACE:
        return ScanState.TAG_SPACE, cursor.advance(), named, ()
    return ScanState.TAG_SPACE, cursor, named, ()


def _tag_space(cursor: Cursor, frame: Frame) -> Step:
    char = cursor.current
    if char in (">", "/"):
        return _finish_start_tag(cursor, frame)
    if char in _ATTR_START:
        return ScanState.ATTR_NAME, cursor, replace(frame, mark=cursor.pos, attr=""), ()
    return ScanState.TAG_SPACE, cursor.advance(), frame, ()


def _attr_name(cursor: Cursor, frame: Frame) -> Step:
    char = cursor.current
    if char in _ATTR_CHARS:
        return ScanState.ATTR_NAME, cursor.advance(), frame, ()
    named = replace(frame, attr=cursor.source[frame.mark : cursor.pos])
    if char == "=":
        return ScanState.ATTR_VALUE_START, cursor.advance(), named, ()
    if char in _WHITESPACE:
        return ScanState.ATTR_EQUALS, cursor.advance(), named, ()
    if char in (">", "/"):
        return _finish_start_tag(cursor, named)
    return ScanState.TAG_SPACE, cursor.advance(), named, ()


def _attr_equals(cursor: Cursor, frame: Frame) -> Step:
    char = cursor.current
    if char in _WHITESPACE:
        return ScanState.ATTR_EQUALS, cursor.advance(), frame, ()
    if char == "=":
        return ScanState.ATTR_VALUE_START, cursor.advance(), frame, ()
    # Previous attribute was a boolean attribute.
    return ScanState.TAG_SPACE, cursor, frame, ()


def _attr_value_start(cursor: Cursor, frame: Frame) -> Step:
    char = cursor.current
    if char in _WHITESPACE:
        return ScanState.ATTR_VALUE_START, cursor.advance(), frame, ()
    if char in ('"', "'"):
        opened = replace(frame, mark=cursor.pos + 1, quote=char)
        return ScanState.ATTR_VALUE, cursor.advance(), opened, ()
    if char == ">":
        return _finish_start_tag(cursor, frame)
    return ScanState.ATTR_VALUE, cursor, replace(frame, mark=cursor.pos, quote=""), ()


def _attr_value(cursor: Cursor, frame: Frame) -> Step:
    if frame.quote:
        end = cursor.find(frame.quote)
        if end == -1:
            return ScanState.ATTR_VALUE, cursor.jump_to(len(cursor.source)), frame, ()
        value = AttributeValue(frame.attr, frame.mark, end, frame.tag)
        return ScanState.TAG_SPACE, cursor.jump_to(end + 1), frame, (value,)

    char = cursor.current
    ends_tag = char == ">" or (char == "/" and cursor.peek(1) == ">")
    if char not in _WHITESPACE and not ends_tag:
        return ScanState.ATTR_VALUE, cursor.advance(), frame, ()
    value = AttributeValue(frame.attr, frame.mark, cursor.pos, frame.tag)
    if ends_tag:
        return _finish_start_tag(cursor, frame, (value,))
    return ScanState.TAG_SPACE, cursor.advance(), frame, (value,)


def _tag_close(cursor: Cursor, frame: Frame) -> Step:
    gt = cursor.find(">")
    if gt == -1:
        return ScanState.TAG_CLOSE, cursor.jump_to(len(cursor.source)), frame, ()
    match = _LEADING_NAME.match(cursor.source, frame.mark, gt)
    name = match.group(0) if match else ""
    effects: tuple[Effect, ...] = (TagClosed(name),) if name else ()
    return ScanState.TEXT, cursor.jump_to(gt + 1), Frame(mark=gt + 1), effects


def _comment(cursor: Cursor, frame: Frame) -> Step:
    end = cursor.find(frame.terminator)
    if end == -1:
        return ScanState.COMMENT, cursor.jump_to(len(cursor.source)), frame, ()
    resume = end + len(frame.terminator)
    return ScanState.TEXT, cursor.jump_to(resume), Frame(mark=resume), ()


def _raw_text(state: ScanState) -> Callable[[Cursor, Frame], Step]:
    closing = _RAW_TEXT_END[state]

    def transition(cursor: Cursor, frame: Frame) -> Step:
        match = closing.search(cursor.source, cursor.pos)
        if match is None:
            return state, cursor.jump_to(len(cursor.source)), frame, ()
        return ScanState.TEXT, cursor.jump_to(match.end()), Frame(mark=match.end()), ()

    return transition


_TRANSITIONS: dict[ScanState, Callable[[Cursor, Frame], Step]] = {
    ScanState.TEXT: _text,
    ScanState.TAG_OPEN: _tag_open,
    ScanState.TAG_NAME: _tag_name,
    ScanState.TAG_SPACE: _tag_space,
    ScanState.ATTR_NAME: _attr_name,
    ScanState.ATTR_EQUALS: _attr_equals,
    ScanState.ATTR_VALUE_START: _attr_value_start,
    ScanState.ATTR_VALUE: _attr_value,
    ScanState.TAG_CLOSE: _tag_close,
    ScanState.COMMENT: _comment,
    ScanState.SCRIPT: _raw_text(ScanState.SCRIPT),
    ScanState.STYLE: _raw_text(ScanState.STYLE),
}


def step(state: ScanState, cursor: Cursor, frame: Frame) -> Step:
    """Advance the machine by one transition.

    Args:
        state: Current state
        cursor: Position (must not be at EOF)
        frame: Token under construction

    Returns:
        (next state, next cursor, next frame, effects)

    Example:
        >>> state, cursor, frame, effects = step(ScanState.TEXT, Cursor("Hi<b>", 0), Frame())
        >>> state, cursor.pos, effects
        (<ScanState.TAG_OPEN: 'tag_open'>, 3, (TextRun(start=0, end=2),))
    """
    return _TRANSITIONS[state](cursor, frame)


# ============================================================================
# DRIVER
# ============================================================================


@dataclass(frozen=True, slots=True)
class MarkupText:
    """Raw text node content with its enclosing tag.

    Attributes:
        raw: Text exactly as in source (whitespace and mustaches included)
        start: Offset of the first character
        end: Offset after the last character
        parent_tag: Nearest open tag, or None at top level
    """

    raw: str
    start: int
    end: int
    parent_tag: str | None


@dataclass(frozen=True, slots=True)
class MarkupAttribute:
    """Attribute value with the tag carrying it.

    Attributes:
        name: Attribute name as written (``title``, ``:title``, ``@click``)
        value: Unquoted value exactly as in source
        start: Offset of the first value character
        end: Offset after the last value character
        tag: Tag name carrying the attribute
    """

    name: str
    value: str
    start: int
    end: int
    tag: str


type MarkupEvent = MarkupText | MarkupAttribute


def _close(stack: list[str], name: str) -> None:
    """Pop up to and including the nearest ``name``; ignore stray end tags."""
    lower = name.lower()
    for index in range(len(stack) - 1, -1, -1):
        if stack[index].lower() == lower:
            del stack[index:]
            return


def scan_markup(source: str) -> Iterator[MarkupEvent]:
    """Scan markup and yield text runs and attribute values in source order.

    Args:
        source: Markup text

    Yields:
        MarkupText and MarkupAttribute events

    Example:
        >>> events = list(scan_markup('<button title="Save now">Go</button>'))
        >>> [(type(e).__name__, e.parent_tag if isinstance(e, MarkupText) else e.name)
        ...  for e in events]
        [('MarkupAttribute', 'title'), ('MarkupText', 'button')]
    """
    state = ScanState.TEXT
    cursor = Cursor(source, 0)
    frame = Frame()
    stack: list[str] = []

    while not cursor.is_eof:
        state, cursor, frame, effects = step(state, cursor, frame)
        for effect in effects:
            match effect:
                case TextRun(start=start, end=end):
                    parent = stack[-1] if stack else None
                    yield MarkupText(source[start:end], start, end, parent)
                case AttributeValue(name=name, start=start, end=end, tag=tag):
                    yield MarkupAttribute(name, source[start:end], start, end, tag)
                case TagOpened(name=name, self_closing=False):
                    stack.append(name)
                case TagOpened():
                    pass
                case TagClosed(name=name):
                    _close(stack, name)

    if state is ScanState.TEXT and frame.mark < len(source):
        parent = stack[-1] if stack else None
        yield MarkupText(source[frame.mark :], frame.mark, len(source), parent)
