"""Translation key naming and lookup.

Python 3.13+. Zero external dependencies.
"""

from .keymap import KeyMap, build_key_map, lookup_key
from .naming import (
    KeyValidation,
    derive_namespace,
    generate_key,
    is_common_short_text,
    require_valid_key,
    slugify_for_key,
    text_kinds,
    to_pascal_case,
    validate_key,
)

__all__ = [
    "KeyMap",
    "KeyValidation",
    "build_key_map",
    "derive_namespace",
    "generate_key",
    "is_common_short_text",
    "lookup_key",
    "require_valid_key",
    "slugify_for_key",
    "text_kinds",
    "to_pascal_case",
    "validate_key",
]
