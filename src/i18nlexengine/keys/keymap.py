"""KeyMap: reverse index from (namespace, kind, text) to full key.

Built from a locale tree before a replacement pass and read-only during
it. A leaf at ``Billing.Invoice.heading.invoice_overview`` with value
"Invoice Overview" is indexed as:

    primary         (Billing.Invoice, heading, Invoice Overview)
    primary         (Billing.Invoice, text, Invoice Overview)     kind-agnostic alias
    commons_alias   (Commons, heading, Invoice Overview)          if common short text

Aliases never displace an existing entry: the first leaf registered for a
triple wins, in tree order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from i18nlexengine.constants import COMMONS_NAMESPACE, MIN_KEY_PATH_DEPTH
from i18nlexengine.enums import Kind
from i18nlexengine.localization.tree import iter_leaves, join_key
from i18nlexengine.validation import normalize_text

from .naming import is_common_short_text

__all__ = ["KeyMap", "build_key_map", "lookup_key"]

logger = logging.getLogger(__name__)

type Triple = tuple[str, str, str]


def _frozen(mapping: dict[Triple, str]) -> Mapping[Triple, str]:
    return MappingProxyType(mapping)


@dataclass(frozen=True, slots=True)
class KeyMap:
    """Read-only lookup table from (namespace, kind, text) to full key.

    Attributes:
        primary: Entries for each leaf plus kind-agnostic ``text`` aliases
        commons_alias: Commons entries for common short text of any namespace
        keys: Every full key present in the source tree
    """

    primary: Mapping[Triple, str] = field(default_factory=lambda: _frozen({}))
    commons_alias: Mapping[Triple, str] = field(default_factory=lambda: _frozen({}))
    keys: frozenset[str] = frozenset()

    def get(self, namespace: str, kind: str, text: str) -> str | None:
        """Exact entry for a triple: primary first, then the Commons alias."""
        triple = (namespace, str(kind), text)
        found = self.primary.get(triple)
        if found is None and namespace == COMMONS_NAMESPACE:
            found = self.commons_alias.get(triple)
        return found

    def lookup(self, namespace: str, kind: str, text: str) -> str | None:
        """Resolve a key for text found in a file of ``namespace``.

        Order: the Commons namespace when the text is common short text,
        else ``namespace``; the exact kind, then the ``text`` kind; and, if
        Commons was tried first, both again under ``namespace``. No match
        returns None; keys are never invented here.

        Example:
            >>> km = build_key_map({"Billing": {"button": {"save": "Save"}}})
            >>> km.lookup("Commons", "button", "Save")
            'Billing.button.save'
            >>> km.lookup("Billing", "text", "Save")
            'Billing.button.save'
        """
        cleaned = normalize_text(str(text or ""))
        if not cleaned:
            return None
        kind = str(kind)
        effective = COMMONS_NAMESPACE if is_common_short_text(cleaned) else namespace

        found = self._with_text_fallback(effective, kind, cleaned)
        if found is None and effective == COMMONS_NAMESPACE and namespace != COMMONS_NAMESPACE:
            found = self._with_text_fallback(namespace, kind, cleaned)
        return found

    def _with_text_fallback(self, namespace: str, kind: str, text: str) -> str | None:
        found = self.get(namespace, kind, text)
        if found is None and kind != Kind.TEXT:
            found = self.get(namespace, Kind.TEXT, text)
        return found

    def __len__(self) -> int:
        return len(self.primary) + len(self.commons_alias)

    def __contains__(self, key: object) -> bool:
        return key in self.keys


def build_key_map(tree: Mapping[str, Any]) -> KeyMap:
    """Index every leaf at depth three or more.

    Shallower leaves cannot be split into namespace, kind and slug and are
    skipped, as are non-string leaves.

    Example:
        >>> km = build_key_map({"Billing": {"heading": {"invoice_overview": "Invoice Overview"}}})
        >>> km.lookup("Billing", "heading", "Invoice Overview")
        'Billing.heading.invoice_overview'
    """
    primary: dict[Triple, str] = {}
    commons: dict[Triple, str] = {}
    keys: set[str] = set()
    skipped = 0

    for path, value in iter_leaves(tree):
        full_key = join_key(path)
        keys.add(full_key)
        if len(path) < MIN_KEY_PATH_DEPTH:
            skipped += 1
            continue
        namespace = join_key(path[:-2])
        kind = path[-2]
        text = normalize_text(value)
        if not text:
            continue

        primary.setdefault((namespace, kind, text), full_key)
        if kind != Kind.TEXT:
            primary.setdefault((namespace, Kind.TEXT.value, text), full_key)
        if namespace != COMMONS_NAMESPACE and is_common_short_text(text):
            commons.setdefault((COMMONS_NAMESPACE, kind, text), full_key)

    logger.debug(
        "Built key map: %d entries, %d Commons aliases, %d shallow leaves skipped",
        len(primary),
        len(commons),
        skipped,
    )
    return KeyMap(_frozen(primary), _frozen(commons), frozenset(keys))


def lookup_key(key_map: KeyMap, namespace: str, kind: str, text: str) -> str | None:
    """Functional form of :meth:`KeyMap.lookup`."""
    return key_map.lookup(namespace, kind, text)
