"""Locale and source audits.

Audits turn the state of a project into Diagnostics; they never raise for
what they find. A locale audit compares a target locale tree with the
default tree. A source audit lists literal copy that has no key yet and
runtime calls whose key is missing from the default tree.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from babel import UnknownLocaleError

from i18nlexengine.config import EngineConfig
from i18nlexengine.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate
from i18nlexengine.enums import SyntaxKind
from i18nlexengine.keys.keymap import KeyMap
from i18nlexengine.keys.naming import generate_key
from i18nlexengine.locale_utils import get_babel_locale, is_known_locale, locale_display_name
from i18nlexengine.localization.tree import get_path, has_path, iter_leaves, join_key, validate_tree
from i18nlexengine.syntax.cursor import LineOffsetCache
from i18nlexengine.syntax.parser import get_parser
from i18nlexengine.validation import is_translatable_text

__all__ = ["AuditReport", "audit_locale", "audit_source", "placeholder_names"]

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\s*([A-Za-z_$][\w$.]*)\s*\}")


def placeholder_names(value: str) -> tuple[str, ...]:
    """Sorted distinct ``{name}`` placeholders of a value.

    Example:
        >>> placeholder_names("Hi {name}, you have {count} new {count}")
        ('count', 'name')
    """
    return tuple(sorted(set(_PLACEHOLDER.findall(value))))


@dataclass(frozen=True, slots=True)
class AuditReport:
    """Diagnostics of one audit.

    Attributes:
        diagnostics: Findings in discovery order
        checked: Leaves (locale audit) or items and references (source
            audit) examined
    """

    diagnostics: tuple[Diagnostic, ...] = ()
    checked: int = 0

    @property
    def is_clean(self) -> bool:
        """True if nothing was found."""
        return not self.diagnostics

    def by_code(self, code: DiagnosticCode) -> tuple[Diagnostic, ...]:
        """Diagnostics with ``code``."""
        return tuple(d for d in self.diagnostics if d.code == code)


def _language(locale: str) -> str | None:
    try:
        return get_babel_locale(locale).language
    except (UnknownLocaleError, ValueError):
        return None


def audit_locale(
    default_tree: Mapping[str, Any],
    target_tree: Mapping[str, Any],
    locale: str,
    *,
    default_locale: str = "en",
) -> AuditReport:
    """Compare a target locale with the default locale.

    Reports, per default leaf: a missing target value, a target value
    identical to a translatable default value (skipped when both locales
    share a language, e.g. ``en`` and ``en-GB``), and differing ``{name}``
    placeholder sets. Shape problems of the target tree and an unknown
    locale code are reported too.

    Example:
        >>> report = audit_locale(
        ...     {"App": {"heading": {"hi": "Welcome Home", "bye": "Hello {name}"}}},
        ...     {"App": {"heading": {"bye": "Bonjour {nom}"}}},
        ...     "fr",
        ... )
        >>> [d.code.name for d in report.diagnostics]
        ['MISSING_TRANSLATION', 'PLACEHOLDER_MISMATCH']
    """
    diagnostics: list[Diagnostic] = []
    if not is_known_locale(locale):
        logger.warning("Unknown locale code %r", locale)
        diagnostics.append(ErrorTemplate.unknown_locale(locale))
    diagnostics.extend(validate_tree(target_tree))

    locale_name = locale_display_name(locale)
    target_language = _language(locale)
    same_language = target_language is not None and target_language == _language(default_locale)

    checked = 0
    for path, default_value in iter_leaves(default_tree):
        checked += 1
        key = join_key(path)
        value = get_path(target_tree, key)
        if value is None:
            diagnostics.append(ErrorTemplate.missing_translation(key, locale, locale_name))
            continue
        if value == default_value and not same_language and is_translatable_text(value):
            diagnostics.append(ErrorTemplate.untranslated_value(key, locale))
        expected, found = placeholder_names(default_value), placeholder_names(value)
        if expected != found:
            diagnostics.append(ErrorTemplate.placeholder_mismatch(key, locale, expected, found))

    logger.debug("Audited %d keys for %s: %d findings", checked, locale, len(diagnostics))
    return AuditReport(tuple(diagnostics), checked)


def audit_source(
    content: str,
    syntax: SyntaxKind | str,
    key_map: KeyMap,
    namespace: str,
    tree: Mapping[str, Any],
    *,
    config: EngineConfig | None = None,
    file_path: str | None = None,
) -> AuditReport:
    """Find copy without keys and references to missing keys in one source.

    Args:
        content: Source text
        syntax: Syntax of the source
        key_map: KeyMap of the default locale
        namespace: Namespace of the file
        tree: Default locale tree
        config: Engine configuration
        file_path: Recorded on every diagnostic

    Returns:
        AuditReport with spans pointing into ``content``

    Raises:
        ValueError: If content exceeds ``config.max_source_size``
    """
    config = config if config is not None else EngineConfig()
    result = get_parser(syntax, config=config).parse(content)
    lines = LineOffsetCache(content)
    diagnostics: list[Diagnostic] = []

    for item in result.items:
        if key_map.lookup(namespace, item.kind, item.text) is not None:
            continue
        span = lines.span(item.offset, item.offset + len(item.text))
        suggested = generate_key(
            item.kind,
            namespace,
            item.text,
            max_words=config.slug_max_words,
            max_length=config.slug_max_length,
        )
        diagnostic = ErrorTemplate.untranslated_text(item.text, span, suggested_key=suggested)
        diagnostics.append(diagnostic)

    reported: set[str] = set()
    for key in result.runtime_keys:
        if key in reported or has_path(tree, key):
            continue
        reported.add(key)
        offset = content.find(key)
        span = lines.span(offset, offset + len(key)) if offset >= 0 else None
        diagnostics.append(ErrorTemplate.unknown_translation_key(key, span))

    if file_path is not None:
        diagnostics = [dataclasses.replace(d, file_path=file_path) for d in diagnostics]
    checked = len(result.items) + len(result.runtime_keys)
    return AuditReport(tuple(diagnostics), checked)
