"""Placeholder naming for interpolated expressions.

When literal text contains dynamic parts (``${user.name}`` in a template
literal, ``{{ count }}`` in a Vue template), each expression becomes a named
``{placeholder}`` in the lookup text and a named argument of the runtime
call. Names are derived from the expression:

    user            -> user
    user.name       -> name
    items.length    -> itemsCount
    anything else   -> value1, value2, ...

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "Placeholder",
    "format_arguments",
    "placeholder_name",
    "unique_name",
]

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")
_MEMBER_CHAIN = re.compile(r"^[A-Za-z_$][\w$]*(?:\??\.[A-Za-z_$][\w$]*)+$")
_LENGTH_ACCESS = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\s*\.length\s*$")
_TRAILING_IDENTIFIER = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\s*$")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Named dynamic part of a translatable string.

    Attributes:
        name: Placeholder name used as ``{name}`` and as the argument name
        expression: Source expression bound to the argument
    """

    name: str
    expression: str


def placeholder_name(expression: str, index: int, *, trailing_identifier: bool = False) -> str:
    """Derive a placeholder name for an expression.

    Args:
        expression: Expression text (surrounding whitespace ignored)
        index: Zero-based position among the placeholders of one string
        trailing_identifier: Also accept the last identifier of a complex
            expression (``format(date)`` stays synthetic, ``a ? b : c``
            becomes ``c``)

    Returns:
        Identifier-safe name (not yet unique)

    Example:
        >>> placeholder_name("user.name", 0)
        'name'
        >>> placeholder_name("cart.items.length", 0)
        'itemsCount'
        >>> placeholder_name("format(date)", 1)
        'value2'
    """
    expr = expression.strip()
    length = _LENGTH_ACCESS.search(expr)
    if length:
        base = length.group(1)
        return base if base.lower().endswith("count") else f"{base}Count"
    if _IDENTIFIER.match(expr):
        return expr.replace("$", "") or f"value{index + 1}"
    if _MEMBER_CHAIN.match(expr):
        return re.split(r"\??\.", expr)[-1].replace("$", "") or f"value{index + 1}"
    if trailing_identifier:
        trailing = _TRAILING_IDENTIFIER.search(expr)
        if trailing:
            return trailing.group(1)
    return f"value{index + 1}"


def unique_name(name: str, used: set[str]) -> str:
    """Return ``name`` or ``name2``, ``name3``... not yet in ``used``; record it."""
    candidate = name
    counter = 2
    while candidate in used:
        candidate = f"{name}{counter}"
        counter += 1
    used.add(candidate)
    return candidate


def format_arguments(placeholders: Iterable[Placeholder]) -> str:
    """Render placeholders as a JS object literal, or ``""`` if there are none.

    Example:
        >>> format_arguments([Placeholder("name", "user.name")])
        '{ name: user.name }'
    """
    pairs = [f"{p.name}: {p.expression}" for p in placeholders]
    return "{ " + ", ".join(pairs) + " }" if pairs else ""
