"""Hypothesis strategies for generating UI copy, keys and locale trees.

Provides custom strategies for property-based testing of the classifier,
key naming, locale tree helpers and the replacers.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

# Words the classifier accepts on their own: vowels present, no long
# consonant runs, a common bigram in every word longer than four letters.
UI_WORDS = [
    "save", "order", "profile", "review", "account", "payment", "details",
    "invoice", "overview", "create", "update", "cancel", "settings",
    "message", "number", "total", "recent", "home",
]

# Tokens the classifier must reject.
TECHNICAL_TOKENS = [
    "btn-primary", "w-full", "a1b2c3d4e5", "true", "false", "null",
    "text-sm font-bold", "#ff0000", "https://example.com", "logo.png",
    "userName", "API", "12345", "user_id", "px-4 py-2 rounded-lg",
]

NAMESPACE_SEGMENTS = ["App", "Billing", "Auth", "Shop", "Settings", "Orders"]
KINDS = ["text", "heading", "button", "label", "placeholder", "title"]


@composite
def ui_phrases(draw: st.DrawFn, min_words: int = 2, max_words: int = 3) -> str:
    """Generate capitalized UI copy the classifier accepts.

    Phrases of four or more plain lowercase words look like utility class
    lists to the classifier, so at most three words are drawn.
    """
    words = draw(st.lists(st.sampled_from(UI_WORDS), min_size=min_words, max_size=max_words))
    first, *rest = words
    return " ".join([first.capitalize(), *rest])


@composite
def padded(draw: st.DrawFn, text: str) -> str:
    """Surround text with a random amount of spaces and newlines."""
    lead = draw(st.text(alphabet=" \n\t", max_size=4))
    trail = draw(st.text(alphabet=" \n\t", max_size=4))
    return f"{lead}{text}{trail}"


@composite
def namespaces(draw: st.DrawFn) -> str:
    """Generate dotted PascalCase namespaces of one or two segments."""
    segments = draw(st.lists(st.sampled_from(NAMESPACE_SEGMENTS), min_size=1, max_size=2))
    return ".".join(segments)


@composite
def key_segments(draw: st.DrawFn) -> str:
    """Generate lowercase slug segments."""
    first = draw(st.sampled_from(string.ascii_lowercase))
    rest = draw(st.text(alphabet=string.ascii_lowercase + string.digits + "_", max_size=12))
    return first + rest


@composite
def locale_trees(draw: st.DrawFn, max_leaves: int = 12) -> dict[str, object]:
    """Generate locale trees of namespace/kind/slug leaves."""
    tree: dict[str, object] = {}
    count = draw(st.integers(min_value=0, max_value=max_leaves))
    for _ in range(count):
        namespace = draw(st.sampled_from(NAMESPACE_SEGMENTS))
        kind = draw(st.sampled_from(KINDS))
        slug = draw(key_segments())
        kinds = tree.setdefault(namespace, {})
        assert isinstance(kinds, dict)
        slugs = kinds.setdefault(kind, {})
        slugs[slug] = draw(ui_phrases())
    return tree
