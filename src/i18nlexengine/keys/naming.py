"""Translation key naming.

Keys have the shape ``Namespace.kind.slug``:

    Billing.Invoice.heading.invoice_overview
    ^^^^^^^^^^^^^^^ ^^^^^^^ ^^^^^^^^^^^^^^^^
    namespace       kind    slug of the source text

The namespace comes from the file location, the kind from markup context,
and the slug from the text. Short, reusable copy ("Save", "Cancel") may be
routed to the shared ``Commons`` namespace instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from pathlib import PurePath

from i18nlexengine.constants import (
    COMMON_TEXT_MAX_LENGTH,
    COMMON_TEXT_MAX_WORDS,
    COMMONS_NAMESPACE,
    DEFAULT_NAMESPACE,
    DEFAULT_SOURCE_ROOTS,
    MAX_KEY_LENGTH,
    MAX_RECOMMENDED_KEY_PARTS,
    NAMESPACE_STRIP_PREFIXES,
    SLUG_FALLBACK,
    SLUG_MAX_LENGTH,
    SLUG_MAX_WORDS,
)
from i18nlexengine.diagnostics import ErrorTemplate, InvalidKeyError
from i18nlexengine.enums import Kind
from i18nlexengine.validation import normalize_text

__all__ = [
    "KeyValidation",
    "derive_namespace",
    "generate_key",
    "is_common_short_text",
    "require_valid_key",
    "slugify_for_key",
    "text_kinds",
    "to_pascal_case",
    "validate_key",
]

_SLUG_WORD = re.compile(r"[a-z0-9]+")
_SENTENCE_PUNCTUATION = re.compile(r"[.!?]")
_KEY_CHARS = re.compile(r"^[a-zA-Z0-9._-]+$")
_WORD_SEPARATORS = re.compile(r"[_\-]+")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_EXTENSION = re.compile(r"\.[^.]+$")
_MULTI_SUFFIXES = (".blade.php", ".d.ts")

# Kinds offered when a user converts a selection by hand.
_TEXT_KINDS: tuple[tuple[Kind, str], ...] = (
    (Kind.TEXT, "Generic UI text (default)"),
    (Kind.HEADING, "Headings and titles"),
    (Kind.BUTTON, "Buttons and primary actions"),
    (Kind.LABEL, "Field labels and chips"),
    (Kind.PLACEHOLDER, "Input placeholders"),
    (Kind.TOAST, "Toast and notification messages"),
)


# ============================================================================
# TEXT PREDICATES
# ============================================================================


def is_common_short_text(text: str) -> bool:
    """Whether text qualifies for the shared Commons namespace.

    Common short text has one or two words, at most 24 characters, no
    sentence punctuation and no slash or underscore.

    Example:
        >>> is_common_short_text("Save changes")
        True
        >>> is_common_short_text("Saved!")
        False
        >>> is_common_short_text("Save all your changes")
        False
    """
    cleaned = normalize_text(str(text or ""))
    if not cleaned or _SENTENCE_PUNCTUATION.search(cleaned):
        return False
    words = cleaned.split(" ")
    if len(words) > COMMON_TEXT_MAX_WORDS or len(cleaned) > COMMON_TEXT_MAX_LENGTH:
        return False
    return "/" not in cleaned and "_" not in cleaned


# ============================================================================
# SLUGS AND KEYS
# ============================================================================


def slugify_for_key(
    text: str, max_words: int = SLUG_MAX_WORDS, max_length: int = SLUG_MAX_LENGTH
) -> str:
    """Derive a key slug from source text.

    Accents are stripped, text is lowercased, and the first ``max_words``
    alphanumeric runs are joined with underscores. Not reversible.

    Example:
        >>> slugify_for_key("Invoice Overview")
        'invoice_overview'
        >>> slugify_for_key("Café déjà vu, encore une fois!")
        'cafe_deja_vu_encore'
        >>> slugify_for_key("???")
        'text'
    """
    decomposed = unicodedata.normalize("NFKD", str(text or ""))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    words = _SLUG_WORD.findall(stripped.lower())[:max_words]
    slug = "_".join(words) or SLUG_FALLBACK
    return slug[:max_length]


def generate_key(
    kind: str,
    namespace: str,
    text: str,
    *,
    prefer_commons: bool = False,
    max_words: int = SLUG_MAX_WORDS,
    max_length: int = SLUG_MAX_LENGTH,
    strict: bool = False,
) -> str:
    """Build the dotted key for a string.

    Args:
        kind: Semantic role (heading, button, ...)
        namespace: Dotted namespace of the source file
        text: Source text
        prefer_commons: Route common short text to the Commons namespace
        strict: Reject keys that fail ``validate_key``

    Returns:
        ``namespace.kind.slug``

    Raises:
        InvalidKeyError: If ``strict`` and the key is invalid

    Example:
        >>> generate_key("heading", "Billing", "Invoice Overview")
        'Billing.heading.invoice_overview'
        >>> generate_key("button", "Billing", "Save", prefer_commons=True)
        'Commons.button.save'
    """
    base = COMMONS_NAMESPACE if prefer_commons and is_common_short_text(text) else namespace
    key = f"{base}.{kind}.{slugify_for_key(text, max_words, max_length)}"
    return require_valid_key(key) if strict else key


def text_kinds() -> tuple[tuple[Kind, str], ...]:
    """Kinds a user may pick when converting a selection, with descriptions."""
    return _TEXT_KINDS


# ============================================================================
# NAMESPACES
# ============================================================================


def to_pascal_case(value: str) -> str:
    """Convert a path segment to PascalCase.

    Example:
        >>> to_pascal_case("invoice-list_item")
        'InvoiceListItem'
        >>> to_pascal_case("userProfile")
        'UserProfile'
    """
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", _WORD_SEPARATORS.sub(" ", str(value or "")))
    return "".join(word[:1].upper() + word[1:] for word in spaced.split())


def _strip_extension(name: str) -> str:
    lower = name.lower()
    for suffix in _MULTI_SUFFIXES:
        if lower.endswith(suffix):
            return name[: -len(suffix)]
    return _EXTENSION.sub("", name)


def derive_namespace(
    file_path: str | PurePath, source_roots: tuple[str, ...] = DEFAULT_SOURCE_ROOTS
) -> str:
    """Derive a key namespace from a source file location.

    Everything up to the first source root marker is dropped, then the file
    extension and a leading ``pages``/``components`` segment; remaining
    segments are PascalCased and joined with dots.

    Args:
        file_path: Path of the source file (relative or absolute)
        source_roots: Markers tried in order (``resources/js``, ``src``, ...)

    Returns:
        Dotted namespace, or ``Common`` if nothing remains

    Example:
        >>> derive_namespace("app/resources/js/pages/billing/invoice-list.vue")
        'Billing.InvoiceList'
        >>> derive_namespace("resources/views/auth/login.blade.php")
        'Auth.Login'
    """
    relative = str(file_path).replace("\\", "/")
    for marker in source_roots:
        needle = f"{marker.strip('/')}/"
        index = relative.find(needle)
        if index != -1 and (index == 0 or relative[index - 1] == "/"):
            relative = relative[index + len(needle) :]
            break

    segments = [s for s in relative.split("/") if s and s != "."]
    if segments:
        segments[-1] = _strip_extension(segments[-1])
    filtered = (
        segments[1:] if segments and segments[0].lower() in NAMESPACE_STRIP_PREFIXES else segments
    )
    parts = [p for p in (to_pascal_case(s) for s in (filtered or segments)) if p]
    return ".".join(parts) if parts else DEFAULT_NAMESPACE


# ============================================================================
# VALIDATION
# ============================================================================


@dataclass(frozen=True, slots=True)
class KeyValidation:
    """Outcome of key validation.

    Attributes:
        valid: True if there are no errors
        errors: Problems that make the key unusable
        warnings: Problems that make the key awkward but usable
    """

    valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_key(key: str) -> KeyValidation:
    """Check a key for length, characters and dot structure.

    Example:
        >>> validate_key("Commons.button.save").valid
        True
        >>> validate_key("save").errors
        ('Key should have at least namespace and kind parts (e.g. "Commons.button.save")',)
    """
    if not isinstance(key, str) or not key:
        return KeyValidation(False, ("Key must be a non-empty string",))

    errors: list[str] = []
    warnings: list[str] = []
    if len(key) > MAX_KEY_LENGTH:
        errors.append(f"Key is too long (max {MAX_KEY_LENGTH} characters)")
    if not _KEY_CHARS.match(key):
        errors.append(
            "Key contains invalid characters "
            "(only letters, numbers, dots, hyphens, underscores allowed)"
        )
    if key.startswith(".") or key.endswith("."):
        errors.append("Key cannot start or end with a dot")
    if ".." in key:
        errors.append("Key cannot contain consecutive dots")

    parts = key.split(".")
    if len(parts) < 2:
        errors.append(
            'Key should have at least namespace and kind parts (e.g. "Commons.button.save")'
        )
    if len(parts) > MAX_RECOMMENDED_KEY_PARTS:
        warnings.append(f"Key has many parts (at most {MAX_RECOMMENDED_KEY_PARTS} recommended)")

    return KeyValidation(not errors, tuple(errors), tuple(warnings))


def require_valid_key(key: str) -> str:
    """Return ``key`` unchanged if it validates; warnings are allowed.

    Raises:
        InvalidKeyError: Carrying every validation error in one diagnostic
    """
    validation = validate_key(key)
    if not validation.valid:
        raise InvalidKeyError(ErrorTemplate.invalid_key(str(key), "; ".join(validation.errors)))
    return key
