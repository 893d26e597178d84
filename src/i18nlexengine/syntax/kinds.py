"""Kind inference from structural context.

Maps tag names, attribute names, object property names and variable names
to a semantic Kind. Framework component tables cover the popular Vue
component libraries (Nuxt, Vue Router, Quasar, Vuetify, Element, PrimeVue).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from i18nlexengine.enums import Kind

__all__ = [
    "DENIED_ATTRIBUTE_PREFIXES",
    "TRANSLATABLE_ATTRIBUTES",
    "infer_kind_from_attribute",
    "infer_kind_from_component",
    "infer_kind_from_jsx_element",
    "infer_kind_from_prop",
    "infer_kind_from_tag",
    "infer_kind_from_variable",
    "is_translatable_attribute",
]

# Attributes whose literal values are user-facing copy.
TRANSLATABLE_ATTRIBUTES: frozenset[str] = frozenset({
    "placeholder", "title", "alt", "aria-label", "label",
    "error-message", "helper-text",
})

# Directive and binding prefixes: their values are expressions, not copy.
DENIED_ATTRIBUTE_PREFIXES: tuple[str, ...] = (":", "@", "#", "v-", "x-", "wire:")

_HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
_FIELD_TAGS = frozenset({"input", "textarea", "select"})

# Exact component names, lowercased.
_COMPONENT_KINDS: dict[str, Kind] = {
    "nuxt-link": Kind.LINK,
    "nuxtlink": Kind.LINK,
    "nuxt-page": Kind.TEXT,
    "nuxtpage": Kind.TEXT,
    "router-link": Kind.LINK,
    "routerlink": Kind.LINK,
    "router-view": Kind.TEXT,
    "routerview": Kind.TEXT,
    "el-button": Kind.BUTTON,
    "el-input": Kind.PLACEHOLDER,
    "el-select": Kind.PLACEHOLDER,
    "el-dialog": Kind.HEADING,
    "p-button": Kind.BUTTON,
    "p-inputtext": Kind.PLACEHOLDER,
    "inputtext": Kind.PLACEHOLDER,
    "p-dialog": Kind.HEADING,
    "dialog": Kind.HEADING,
}

# Component name prefixes, lowercased, checked in order.
_COMPONENT_PREFIX_KINDS: tuple[tuple[str, Kind], ...] = (
    ("q-btn", Kind.BUTTON),
    ("q-input", Kind.PLACEHOLDER),
    ("q-select", Kind.PLACEHOLDER),
    ("q-dialog", Kind.HEADING),
    ("q-card-section", Kind.TEXT),
    ("v-btn", Kind.BUTTON),
    ("v-text-field", Kind.PLACEHOLDER),
    ("v-select", Kind.PLACEHOLDER),
    ("v-dialog", Kind.HEADING),
    ("v-card-title", Kind.HEADING),
    ("v-card-text", Kind.TEXT),
)

_ATTRIBUTE_KINDS: dict[str, Kind] = {
    "placeholder": Kind.PLACEHOLDER,
    "title": Kind.TITLE,
    "alt": Kind.ALT,
    "aria-label": Kind.ARIA_LABEL,
    "label": Kind.LABEL,
}

_PROP_KINDS: dict[str, Kind] = {
    "title": Kind.HEADING,
    "heading": Kind.HEADING,
    "description": Kind.TEXT,
    "message": Kind.TEXT,
    "text": Kind.TEXT,
    "label": Kind.LABEL,
    "placeholder": Kind.PLACEHOLDER,
    "cta": Kind.BUTTON,
    "alt": Kind.ALT,
}


def infer_kind_from_tag(tag: str | None) -> Kind:
    """Kind for text enclosed by an HTML tag.

    Example:
        >>> infer_kind_from_tag("h2")
        <Kind.HEADING: 'heading'>
        >>> infer_kind_from_tag("SubmitBtn")
        <Kind.BUTTON: 'button'>
    """
    if not tag:
        return Kind.TEXT
    lower = tag.lower()
    if lower in _HEADING_TAGS:
        return Kind.HEADING
    if lower == "label":
        return Kind.LABEL
    if lower.endswith(("button", "btn")):
        return Kind.BUTTON
    if lower in ("a", "link") or "link" in lower:
        return Kind.LINK
    if lower in _FIELD_TAGS:
        return Kind.PLACEHOLDER
    return Kind.TEXT


def infer_kind_from_component(tag: str | None) -> Kind:
    """Kind for text enclosed by a Vue component, falling back to HTML rules."""
    if not tag:
        return Kind.TEXT
    lower = tag.lower()
    if lower in _COMPONENT_KINDS:
        return _COMPONENT_KINDS[lower]
    for prefix, kind in _COMPONENT_PREFIX_KINDS:
        if lower.startswith(prefix):
            return kind
    return infer_kind_from_tag(tag)


def infer_kind_from_jsx_element(name: str | None) -> Kind:
    """Kind for JSX text; ``SaveButton`` style component names count as buttons."""
    if name and name.endswith("Button"):
        return Kind.BUTTON
    return infer_kind_from_tag(name)


def infer_kind_from_attribute(name: str | None) -> Kind:
    """Kind for an attribute value.

    Example:
        >>> infer_kind_from_attribute("aria-label")
        <Kind.ARIA_LABEL: 'aria_label'>
    """
    return _ATTRIBUTE_KINDS.get((name or "").lower(), Kind.TEXT)


def infer_kind_from_prop(name: str | None) -> Kind:
    """Kind for an object literal property value (``title: "..."``)."""
    return _PROP_KINDS.get((name or "").lower(), Kind.TEXT)


def infer_kind_from_variable(name: str | None) -> Kind:
    """Kind for a string assigned to a variable, by substring of its name."""
    lower = (name or "").lower()
    if "title" in lower:
        return Kind.HEADING
    if "label" in lower:
        return Kind.LABEL
    if "placeholder" in lower:
        return Kind.PLACEHOLDER
    return Kind.TEXT


def is_translatable_attribute(name: str) -> bool:
    """True if ``name`` is a static attribute whose value may hold copy.

    Bound attributes and directives (``:title``, ``@click``, ``v-text``)
    carry expressions and are rejected.
    """
    lower = name.lower()
    if lower.startswith(DENIED_ATTRIBUTE_PREFIXES) or lower.startswith("v-bind"):
        return False
    return lower in TRANSLATABLE_ATTRIBUTES
