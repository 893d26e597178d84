"""Tests for locale and source audits.

Covers:
- audit_locale: missing keys, identical values, placeholder mismatches,
  unknown locales and tree shape problems
- audit_source: untranslated copy and unknown runtime keys
- placeholder_names

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from i18nlexengine.analysis import AuditReport, audit_locale, audit_source, placeholder_names
from i18nlexengine.diagnostics import DiagnosticCode
from i18nlexengine.keys import build_key_map

_DEFAULT: dict[str, Any] = {
    "App": {
        "heading": {"welcome_home": "Welcome Home"},
        "text": {"greeting": "Hello {name}, you have {count} orders"},
    }
}

# ============================================================================
# LOCALE AUDIT
# ============================================================================


class TestAuditLocale:
    """Test default-versus-target comparisons."""

    def test_clean(self) -> None:
        """A fully translated locale has no findings."""
        target = {
            "App": {
                "heading": {"welcome_home": "Bienvenue"},
                "text": {"greeting": "Bonjour {name}, vous avez {count} commandes"},
            }
        }
        report = audit_locale(_DEFAULT, target, "fr")

        assert report.is_clean
        assert report.checked == 2

    def test_missing(self) -> None:
        """Missing keys name the locale and its display name."""
        report = audit_locale(_DEFAULT, {}, "fr")

        missing = report.by_code(DiagnosticCode.MISSING_TRANSLATION)
        assert [d.key for d in missing] == ["App.heading.welcome_home", "App.text.greeting"]
        assert "[fr (French)]" in missing[0].message
        assert missing[0].locale == "fr"

    def test_untranslated_value(self) -> None:
        """Values identical to the default are flagged."""
        report = audit_locale(_DEFAULT, _DEFAULT, "de")

        assert [d.key for d in report.by_code(DiagnosticCode.UNTRANSLATED_VALUE)] == [
            "App.heading.welcome_home",
            "App.text.greeting",
        ]

    def test_same_language_not_flagged(self) -> None:
        """Regional variants of the default language may share values."""
        report = audit_locale(_DEFAULT, _DEFAULT, "en-GB")

        assert report.is_clean

    def test_technical_values_not_flagged(self) -> None:
        """Identical values that are not copy are fine."""
        default = {"App": {"label": {"api": "API"}}}

        assert audit_locale(default, default, "fr").is_clean

    def test_placeholder_mismatch(self) -> None:
        """Placeholder sets must match."""
        target = {
            "App": {
                "heading": {"welcome_home": "Bienvenue"},
                "text": {"greeting": "Bonjour {nom}, vous avez {count} commandes"},
            }
        }
        (problem,) = audit_locale(_DEFAULT, target, "fr").diagnostics

        assert problem.code is DiagnosticCode.PLACEHOLDER_MISMATCH
        assert "expected count, name, found count, nom" in problem.message

    def test_unknown_locale(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown locale codes are reported and logged."""
        with caplog.at_level(logging.WARNING, logger="i18nlexengine.analysis.audit"):
            report = audit_locale(_DEFAULT, _DEFAULT, "xx-YY")

        assert report.diagnostics[0].code is DiagnosticCode.UNKNOWN_LOCALE
        assert "Unknown locale code 'xx-YY'" in caplog.text

    def test_shape_problems(self) -> None:
        """Non-string target leaves are reported and count as missing."""
        target = {"App": {"heading": {"welcome_home": 3}}}
        report = audit_locale({"App": {"heading": {"welcome_home": "Welcome Home"}}}, target, "fr")

        assert [d.code for d in report.diagnostics] == [
            DiagnosticCode.INVALID_TREE_SHAPE,
            DiagnosticCode.MISSING_TRANSLATION,
        ]


class TestPlaceholderNames:
    """Test placeholder extraction."""

    def test_names(self) -> None:
        """Names are distinct and sorted."""
        assert placeholder_names("Hi {name}, you have {count} new {count}") == ("count", "name")

    def test_whitespace_and_members(self) -> None:
        """Inner whitespace is ignored; dotted names are kept."""
        assert placeholder_names("{ user.name } and {total}") == ("total", "user.name")

    def test_none(self) -> None:
        """Plain text and non-identifiers yield nothing."""
        assert placeholder_names("No placeholders {1} {}") == ()


# ============================================================================
# SOURCE AUDIT
# ============================================================================


class TestAuditSource:
    """Test per-file source audits."""

    _SOURCE = (
        "<template>\n"
        "  <h1>Welcome Home</h1>\n"
        "  <p>Order History</p>\n"
        "  <p>{{ $t('App.text.gone') }}</p>\n"
        "</template>\n"
    )

    def _audit(self, **kwargs: Any) -> AuditReport:
        return audit_source(
            self._SOURCE, "vue", build_key_map(_DEFAULT), "App", _DEFAULT, **kwargs
        )

    def test_findings(self) -> None:
        """Copy without a key and unknown runtime keys are reported."""
        report = self._audit()

        assert [d.code for d in report.diagnostics] == [
            DiagnosticCode.UNTRANSLATED_TEXT,
            DiagnosticCode.UNKNOWN_TRANSLATION_KEY,
        ]
        assert report.checked == 3

    def test_untranslated_text_details(self) -> None:
        """The suggestion and span point at the text."""
        untranslated = self._audit().by_code(DiagnosticCode.UNTRANSLATED_TEXT)[0]

        assert untranslated.key == "App.text.order_history"
        assert untranslated.span is not None
        assert (untranslated.span.line, untranslated.span.column) == (3, 6)
        assert self._SOURCE[untranslated.span.start : untranslated.span.end] == "Order History"

    def test_unknown_key_details(self) -> None:
        """Unknown keys carry the key and its location."""
        unknown = self._audit().by_code(DiagnosticCode.UNKNOWN_TRANSLATION_KEY)[0]

        assert unknown.key == "App.text.gone"
        assert unknown.span is not None
        assert unknown.span.line == 4

    def test_file_path_recorded(self) -> None:
        """The file path is set on every diagnostic."""
        report = self._audit(file_path="resources/js/pages/app.vue")

        assert {d.file_path for d in report.diagnostics} == {"resources/js/pages/app.vue"}

    def test_known_runtime_key(self) -> None:
        """References to existing keys are fine."""
        source = "<template><p>{{ $t('App.heading.welcome_home') }}</p></template>"
        report = audit_source(source, "vue", build_key_map(_DEFAULT), "App", _DEFAULT)

        assert report.is_clean
        assert report.checked == 1
