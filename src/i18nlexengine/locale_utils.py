"""Locale code utilities.

Normalizes BCP-47 codes for Babel, validates them against CLDR, and infers a
locale from the path of a locale JSON file.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from pathlib import PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "infer_locale_from_path",
    "is_known_locale",
    "locale_display_name",
    "normalize_locale",
]

_LOCALE_SEGMENT = re.compile(r"^[A-Za-z0-9_-]+$")
_JSON_FILE_NAME = re.compile(r"^([A-Za-z0-9_.-]+)\.json$")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (pt-BR), while Babel/POSIX uses underscores (pt_BR).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("pt-BR").territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel locale cache."""
    get_babel_locale.cache_clear()


def is_known_locale(locale_code: str) -> bool:
    """Return True if CLDR knows the locale.

    Example:
        >>> is_known_locale("fr")
        True
        >>> is_known_locale("xx-YY")
        False
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    if not locale_code or not _LOCALE_SEGMENT.match(locale_code):
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def locale_display_name(locale_code: str, display_locale: str = "en") -> str | None:
    """English (or ``display_locale``) name of a locale, or None if unknown.

    Example:
        >>> locale_display_name("de")
        'German'
    """
    if not is_known_locale(locale_code):
        return None
    display = get_babel_locale(display_locale) if is_known_locale(display_locale) else None
    name = get_babel_locale(locale_code).get_display_name(display)
    return name or None


def infer_locale_from_path(path: str | PurePath) -> str | None:
    """Infer the locale a locale JSON file belongs to.

    Recognized layouts, checked in order:
        1. Generated runtime bundles: ``.../auto/<locale>/...`` or
           ``.../auto/<locale>.json``
        2. Directory per locale: ``.../locales/<locale>/<namespace>.json``
        3. File name: ``en.json`` or ``messages.en.json``

    Args:
        path: File path

    Returns:
        Locale code as written in the path, or None

    Example:
        >>> infer_locale_from_path("public/locales/de/billing.json")
        'de'
        >>> infer_locale_from_path("lang/messages.fr.json")
        'fr'
    """
    parts = [p for p in PurePath(path).parts if p not in ("/", "\\")]

    if "auto" in parts:
        index = len(parts) - 1 - parts[::-1].index("auto")
        if index + 1 < len(parts):
            raw = parts[index + 1]
            return raw.removesuffix(".json")

    if "locales" in parts:
        index = len(parts) - 1 - parts[::-1].index("locales")
        if index + 1 < len(parts) and _LOCALE_SEGMENT.match(parts[index + 1]):
            return parts[index + 1]

    if parts:
        match = _JSON_FILE_NAME.match(parts[-1])
        if match:
            candidate = match.group(1).rsplit(".", 1)[-1]
            if _LOCALE_SEGMENT.match(candidate):
                return candidate

    return None
