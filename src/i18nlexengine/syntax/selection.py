"""String literal detection inside a user selection.

Used when a user selects a region of source and asks for it to be converted
into a translation call: the selection may be a bare phrase, a quoted
literal, an object property, a JSX expression container or a Blade array
item. Detection strategies are tried in order; the first that yields a
candidate wins, and the whole selection is the last resort.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from i18nlexengine.enums import SyntaxKind
from i18nlexengine.validation import is_translatable_text

from .template_literal import TemplateLiteralProcessor

__all__ = ["StringCandidate", "find_string_candidates", "looks_like_code"]

_JSX_EXPRESSION = re.compile(
    r"\{\s*(?P<quote>['\"])(?P<text>(?:\\.|(?!(?P=quote))[\s\S])+?)(?P=quote)\s*\}"
)
_PROPERTY = re.compile(
    r"^\s*(?:[\w$]+|['\"][^'\"]+['\"])\s*:\s*"
    r"(?P<quote>['\"`])(?P<text>[\s\S]+?)(?P=quote)\s*,?\s*$",
    re.DOTALL,
)
_GENERIC = re.compile(r"(?P<quote>['\"])(?P<text>(?:\\.|(?!(?P=quote))[\s\S])+?)(?P=quote)")
_TEMPLATE = re.compile(r"`(?P<text>[^`]+)`")
_BLADE_ARRAY = re.compile(
    r"^\s*(['\"])[^'\"]+\1\s*=>\s*(?P<quote>['\"])(?P<text>[\s\S]+?)(?P=quote)\s*,?\s*$",
    re.DOTALL,
)

_CODE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[:;{}<>]|=>|\bfunction\b|\breturn\b"),
    re.compile(r"^\s*(?:import|export|const|let|var)\s"),
)

_SCRIPT_SYNTAXES = frozenset({SyntaxKind.JSX, SyntaxKind.VUE})


@dataclass(frozen=True, slots=True)
class StringCandidate:
    """A translatable string found in a selection.

    Attributes:
        text: Lookup text (static text only for template literals)
        start: Offset in the selection of the first replaced character
        end: Offset after the last replaced character
        is_template: True if the candidate is a template literal
    """

    text: str
    start: int
    end: int
    is_template: bool = False


type Detector = Callable[[str, Callable[[str], bool]], list[StringCandidate]]


def looks_like_code(text: str) -> bool:
    """True if the text reads as a statement rather than a phrase."""
    return any(pattern.search(text) for pattern in _CODE_PATTERNS)


def _static_text(template_body: str) -> str:
    parts = TemplateLiteralProcessor.extract_static_parts(template_body)
    return " ".join(p.text for p in parts).strip()


def _jsx_expressions(selection: str, accepts: Callable[[str], bool]) -> list[StringCandidate]:
    found = []
    for match in _JSX_EXPRESSION.finditer(selection):
        if accepts(match["text"]):
            start, end = match.start("quote"), match.end("text") + 1
            found.append(StringCandidate(match["text"].strip(), start, end))
    return found


def _property(selection: str, accepts: Callable[[str], bool]) -> list[StringCandidate]:
    match = _PROPERTY.match(selection)
    if match is None:
        return []
    start, end = match.start("quote"), match.end("text") + 1
    if match["quote"] == "`":
        combined = _static_text(match["text"])
        if accepts(combined):
            return [StringCandidate(combined, start, end, is_template=True)]
        return []
    if accepts(match["text"]):
        return [StringCandidate(match["text"].strip(), start, end)]
    return []


def _generic(selection: str, accepts: Callable[[str], bool]) -> list[StringCandidate]:
    return [
        StringCandidate(m["text"].strip(), m.start(), m.end())
        for m in _GENERIC.finditer(selection)
        if accepts(m["text"])
    ]


def _templates(selection: str, accepts: Callable[[str], bool]) -> list[StringCandidate]:
    found = []
    for match in _TEMPLATE.finditer(selection):
        combined = _static_text(match["text"])
        if accepts(combined):
            found.append(StringCandidate(combined, match.start(), match.end(), is_template=True))
    return found


def _blade_array(selection: str, accepts: Callable[[str], bool]) -> list[StringCandidate]:
    match = _BLADE_ARRAY.match(selection)
    if match is None or not accepts(match["text"]):
        return []
    return [StringCandidate(match["text"].strip(), match.start("quote"), match.end("text") + 1)]


def _detectors(syntax: SyntaxKind) -> tuple[Detector, ...]:
    if syntax in _SCRIPT_SYNTAXES:
        return (_jsx_expressions, _property, _generic, _templates)
    if syntax is SyntaxKind.BLADE:
        return (_blade_array, _generic)
    return ()


def find_string_candidates(
    selection: str,
    syntax: SyntaxKind,
    accepts: Callable[[str], bool] = is_translatable_text,
) -> tuple[StringCandidate, ...]:
    """Find translatable strings inside a selected region.

    Args:
        selection: Selected source text
        syntax: Syntax of the surrounding file
        accepts: Classifier deciding whether a string is copy

    Returns:
        Candidates with offsets relative to the selection; empty if nothing
        in the selection reads as copy

    Example:
        >>> [c.text for c in find_string_candidates('label: "Save draft",', SyntaxKind.JSX)]
        ['Save draft']
        >>> find_string_candidates("Welcome back", SyntaxKind.MARKUP)[0].end
        12
    """
    for detect in _detectors(syntax):
        found = detect(selection, accepts)
        if found:
            return tuple(found)

    trimmed = selection.strip()
    if not trimmed:
        return ()
    if syntax in _SCRIPT_SYNTAXES and looks_like_code(trimmed):
        return ()
    if not accepts(trimmed):
        return ()
    start = selection.index(trimmed)
    return (StringCandidate(trimmed, start, start + len(trimmed)),)
