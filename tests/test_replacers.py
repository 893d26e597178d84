"""Tests for the per-syntax replacers and call generation.

Covers:
- VueReplacer: text, interpolated text, static and bound attributes,
  mustache literals, v-text, script blocks
- JsxReplacer: toast calls, JSX text, attributes, attribute expressions,
  template literals, import insertion
- MarkupReplacer and BladeReplacer output forms
- generate_call and convert_selection
- Registry helpers
- Properties: replacement is idempotent

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from i18nlexengine.config import EngineConfig, IgnorePatterns
from i18nlexengine.enums import SyntaxKind
from i18nlexengine.keys import build_key_map
from i18nlexengine.localization import TranslationStore
from i18nlexengine.replacement import (
    BladeReplacer,
    JsxReplacer,
    MarkupReplacer,
    VueReplacer,
    convert_selection,
    ensure_t_import,
    generate_call,
    get_replacer,
    replace_source,
    replacer_for_path,
)
from i18nlexengine.syntax.placeholders import Placeholder
from tests.strategies import UI_WORDS

_APP: dict[str, Any] = {
    "App": {
        "heading": {"welcome_home": "Welcome Home"},
        "placeholder": {"review_details": "Review details"},
        "title": {"cancel_order": "Cancel order"},
        "text": {"order_total": "Order total", "total_total": "Total {total}"},
    }
}

_SHOP: dict[str, Any] = {
    "Shop": {
        "toast": {"profile_updated": "Profile updated"},
        "heading": {"order_history": "Order History"},
        "placeholder": {"review_details": "Review details"},
        "label": {"payment_details": "Payment details"},
        "text": {"welcome_back_name": "Welcome back {name}"},
    }
}

_IMPORT = "import { t } from '@/i18n';"

# ============================================================================
# VUE
# ============================================================================


class TestVueReplacer:
    """Test the Vue single-file component replacer."""

    def _replace(self, template: str) -> tuple[str, int]:
        result = VueReplacer().replace(f"<template>{template}</template>", build_key_map(_APP), "App")
        return result.content.removeprefix("<template>").removesuffix("</template>"), (
            result.change_count
        )

    def test_heading_text(self) -> None:
        """Text between tags becomes an interpolated $t call."""
        assert self._replace("<h1>Welcome Home</h1>") == (
            "<h1>{{ $t('App.heading.welcome_home') }}</h1>",
            1,
        )

    def test_padding_kept(self) -> None:
        """Whitespace around the text is preserved."""
        content, _ = self._replace("<h1>\n  Welcome Home\n</h1>")

        assert content == "<h1>\n  {{ $t('App.heading.welcome_home') }}\n</h1>"

    def test_interpolated_text(self) -> None:
        """Interpolations become named arguments."""
        content, count = self._replace("<p>Total {{ order.total }}</p>")

        assert content == "<p>{{ $t('App.text.total_total', { total: order.total }) }}</p>"
        assert count == 1

    def test_static_attribute_bound(self) -> None:
        """Allow-listed attributes become bound attributes."""
        content, count = self._replace('<input placeholder="Review details">')

        assert content == "<input :placeholder=\"$t('App.placeholder.review_details')\">"
        assert count == 1

    def test_mustache_literal(self) -> None:
        """Known literals inside interpolations are replaced; unknown ones are kept."""
        content, count = self._replace("<p>{{ ok ? 'Order total' : 'Payment failed' }}</p>")

        assert content == "<p>{{ ok ? $t('App.text.order_total') : 'Payment failed' }}</p>"
        assert count == 1

    def test_bound_attribute_literal(self) -> None:
        """A bound attribute holding one literal is replaced."""
        content, _ = self._replace("<button :title=\"'Cancel order'\"></button>")

        assert content == "<button :title=\"$t('App.title.cancel_order')\"></button>"

    def test_text_directive(self) -> None:
        """v-text literals are replaced."""
        content, _ = self._replace("<span v-text=\"'Order total'\"></span>")

        assert content == "<span v-text=\"$t('App.text.order_total')\"></span>"

    def test_unknown_text_unchanged(self) -> None:
        """Text without a key is left alone."""
        assert self._replace("<p>Payment failed</p>") == ("<p>Payment failed</p>", 0)

    def test_technical_text_unchanged(self) -> None:
        """Text the classifier rejects is left alone."""
        assert self._replace("<p>btn-primary</p>") == ("<p>btn-primary</p>", 0)

    def test_script_block(self) -> None:
        """Script blocks get t() calls and the import."""
        source = (
            "<template><h1>Welcome Home</h1></template>\n"
            '<script>\nconst pageTitle = "Order total";\n</script>\n'
        )
        result = VueReplacer().replace(source, build_key_map(_APP), "App")

        assert "const pageTitle = t('App.text.order_total');" in result.content
        assert _IMPORT in result.content
        assert "{{ $t('App.heading.welcome_home') }}" in result.content
        assert result.change_count == 2

    def test_idempotent(self) -> None:
        """Replacing converted output changes nothing."""
        km = build_key_map(_APP)
        source = (
            "<template><h1>Welcome Home</h1><input placeholder=\"Review details\">"
            "<p>Total {{ order.total }}</p></template>"
        )
        first = VueReplacer().replace(source, km, "App")
        second = VueReplacer().replace(first.content, km, "App")

        assert first.change_count == 3
        assert second.content == first.content
        assert second.change_count == 0

    def test_empty_key_map(self) -> None:
        """Nothing is replaced without keys."""
        source = "<template><h1>Welcome Home</h1></template>"
        result = VueReplacer().replace(source, build_key_map({}), "App")

        assert result.content == source
        assert not result.changed

    def test_comments_untouched(self) -> None:
        """Copy inside HTML comments is kept; text beside them is replaced."""
        content, count = self._replace(
            "<!-- <p>Order total</p> --><h1>Welcome Home<!-- note --></h1>"
        )

        assert content == (
            "<!-- <p>Order total</p> -->"
            "<h1>{{ $t('App.heading.welcome_home') }}<!-- note --></h1>"
        )
        assert count == 1

    def test_source_too_large(self) -> None:
        """Oversized sources are rejected."""
        replacer = VueReplacer(config=EngineConfig(max_source_size=10))

        with pytest.raises(ValueError, match="exceeds maximum size"):
            replacer.replace("<p>" + "x" * 20 + "</p>", build_key_map(_APP), "App")


# ============================================================================
# JSX
# ============================================================================


class TestJsxReplacer:
    """Test the script and JSX replacer."""

    def _replace(self, source: str, **config: Any) -> tuple[str, int]:
        replacer = JsxReplacer(config=EngineConfig(**config))
        result = replacer.replace(source, build_key_map(_SHOP), "Shop")
        return result.content, result.change_count

    def test_toast(self) -> None:
        """Toast messages become t() calls and the import is added on top."""
        content, count = self._replace('toast.success("Profile updated");')

        assert content == f"{_IMPORT}\n\ntoast.success(t('Shop.toast.profile_updated'));"
        assert count == 1

    def test_jsx_text(self) -> None:
        """Text in known JSX elements becomes an expression container."""
        content, _ = self._replace("<h2>Order History</h2>")

        assert content.endswith("<h2>{t('Shop.heading.order_history')}</h2>")

    def test_attribute(self) -> None:
        """Allow-listed attributes get an expression container."""
        content, _ = self._replace('<input placeholder="Review details" />')

        assert content.endswith("<input placeholder={t('Shop.placeholder.review_details')} />")

    def test_attribute_expression_counts_once(self) -> None:
        """All literals of one attribute expression count as one change."""
        content, count = self._replace(
            '<input title={ok ? "Payment details" : "Review details"} />'
        )

        assert content.endswith(
            "<input title={ok ? t('Shop.label.payment_details') "
            ": t('Shop.placeholder.review_details')} />"
        )
        assert count == 1

    def test_template_literal(self) -> None:
        """Template literals keep their interpolations as arguments."""
        content, _ = self._replace("const message = `Welcome back ${user.name}`;")

        assert content.endswith(
            "const message = t('Shop.text.welcome_back_name', { name: user.name });"
        )

    def test_import_after_last_import(self) -> None:
        """The import follows existing imports."""
        content, _ = self._replace(
            "import React from 'react';\nimport x from 'x';\n\ntoast.info(\"Profile updated\");"
        )

        assert content.startswith(f"import React from 'react';\nimport x from 'x';\n{_IMPORT}\n")

    def test_existing_import_kept(self) -> None:
        """An existing import of t is not duplicated."""
        source = f'{_IMPORT}\ntoast.success("Profile updated");'
        content, _ = self._replace(source)

        assert content.count("import { t }") == 1

    def test_custom_import_path(self) -> None:
        """The import path comes from the configuration."""
        content, _ = self._replace('toast.error("Profile updated");', translate_import_path="~/lang")

        assert content.startswith("import { t } from '~/lang';")

    def test_no_change_no_import(self) -> None:
        """Unknown text leaves the file untouched."""
        source = 'toast.error("Payment failed");'

        assert self._replace(source) == (source, 0)

    def test_ignored_attribute(self) -> None:
        """Ignored attributes are never rewritten."""
        source = '<input placeholder="Review details" />'
        patterns = IgnorePatterns(ignore_attributes=("placeholder",))

        assert self._replace(source, ignore_patterns=patterns) == (source, 0)

    def test_idempotent(self) -> None:
        """A second pass finds nothing to do."""
        km = build_key_map(_SHOP)
        source = (
            'toast.success("Profile updated");\n'
            "const heading = <h2>Order History</h2>;\n"
            '<input placeholder="Review details" />\n'
        )
        first = JsxReplacer().replace(source, km, "Shop")
        second = JsxReplacer().replace(first.content, km, "Shop")

        assert first.change_count == 3
        assert second == type(second)(first.content, 0)


class TestEnsureTImport:
    """Test import insertion."""

    def test_no_call_no_import(self) -> None:
        """Files without t() calls are unchanged."""
        assert ensure_t_import("const a = 1;", "@/i18n") == "const a = 1;"

    def test_other_path_still_imports(self) -> None:
        """An import of t from another path does not count."""
        content = ensure_t_import("import { t } from 'other';\nt('A.b');", "@/i18n")

        assert content == "import { t } from 'other';\nimport { t } from '@/i18n';\nt('A.b');"

    def test_named_among_others(self) -> None:
        """t imported alongside other names is detected."""
        source = "import { x, t } from '@/i18n';\nt('A.b');"

        assert ensure_t_import(source, "@/i18n") == source

    def test_semicolon_free_imports(self) -> None:
        """Imports without semicolons end at their line."""
        source = (
            "import React from 'react'\n"
            "import './app.css'\n"
            "export default function A() {\n"
            "  const x = 1;\n"
            "  return t('A.b')\n"
            "}"
        )

        assert ensure_t_import(source, "@/i18n") == (
            "import React from 'react'\n"
            "import './app.css'\n"
            "import { t } from '@/i18n';\n"
            "export default function A() {\n"
            "  const x = 1;\n"
            "  return t('A.b')\n"
            "}"
        )

    def test_multiline_import(self) -> None:
        """Braced imports spanning lines are one statement."""
        source = "import {\n  a,\n  b,\n} from 'lib'\nconst c = t('A.b');"

        assert ensure_t_import(source, "@/i18n") == (
            "import {\n  a,\n  b,\n} from 'lib'\nimport { t } from '@/i18n';\nconst c = t('A.b');"
        )

    def test_identifier_starting_with_import_ignored(self) -> None:
        """Only import statements anchor the insertion."""
        source = "importantValue = 1;\nt('A.b');"

        assert ensure_t_import(source, "@/i18n") == (
            "import { t } from '@/i18n';\n\nimportantValue = 1;\nt('A.b');"
        )

    def test_replacer_keeps_import_out_of_function_body(self) -> None:
        """Rewriting a semicolon-free component puts the import with the others."""
        km = build_key_map({"App": {"heading": {"welcome_home": "Welcome Home"}}})
        source = (
            "import React from 'react'\n"
            "export default function A() {\n"
            "  const x = 1;\n"
            "  return <h1>Welcome Home</h1>\n"
            "}"
        )
        result = JsxReplacer().replace(source, km, "App")
        lines = result.content.split("\n")

        assert result.change_count == 1
        assert lines[:3] == ["import React from 'react'", _IMPORT, "export default function A() {"]
        assert lines[3] == "  const x = 1;"


# ============================================================================
# MARKUP AND BLADE
# ============================================================================


class TestMarkupReplacers:
    """Test the markup and Blade replacers."""

    def test_markup_attribute(self) -> None:
        """Markup attributes become {t()} expressions."""
        result = MarkupReplacer().replace(
            '<img alt="Order History">', build_key_map(_SHOP), "Shop"
        )

        assert result.content == "<img alt={t('Shop.heading.order_history')}>"

    def test_blade_text_and_attribute(self) -> None:
        """Blade output uses __() in echo braces."""
        source = '<h2>Order History</h2><input placeholder="Review details">'
        result = BladeReplacer().replace(source, build_key_map(_SHOP), "Shop")

        assert result.content == (
            "<h2>{{ __('Shop.heading.order_history') }}</h2>"
            "<input placeholder=\"{{ __('Shop.placeholder.review_details') }}\">"
        )
        assert result.change_count == 2

    def test_blade_directives_skipped(self) -> None:
        """Text mixed with directives is left alone."""
        source = "<p>@lang('x') Order History</p>"

        assert BladeReplacer().replace(source, build_key_map(_SHOP), "Shop").content == source

    @pytest.mark.parametrize("replacer_type", [MarkupReplacer, BladeReplacer])
    def test_raw_blocks_untouched(self, replacer_type: type[MarkupReplacer]) -> None:
        """Script and style bodies are never rewritten."""
        source = "<script>var x = '<h2>Order History</h2>';</script><h2>Order History</h2>"
        result = replacer_type().replace(source, build_key_map(_SHOP), "Shop")

        assert result.content.startswith("<script>var x = '<h2>Order History</h2>';</script>")
        assert result.change_count == 1

    @pytest.mark.parametrize("replacer_type", [MarkupReplacer, BladeReplacer])
    def test_comments_untouched(self, replacer_type: type[MarkupReplacer]) -> None:
        """Commented-out markup is never rewritten."""
        comment = '<!-- <h2>Order History</h2> <img alt="Order History"> -->'
        source = f"{comment}<h2>Order History</h2>"
        result = replacer_type().replace(source, build_key_map(_SHOP), "Shop")

        assert result.content.startswith(comment)
        assert result.change_count == 1

    @pytest.mark.parametrize("replacer_type", [MarkupReplacer, BladeReplacer])
    def test_idempotent(self, replacer_type: type[MarkupReplacer]) -> None:
        """Converted markup is not converted again."""
        km = build_key_map(_SHOP)
        first = replacer_type().replace('<h2>Order History</h2><img alt="Order History">', km, "Shop")
        second = replacer_type().replace(first.content, km, "Shop")

        assert first.change_count == 2
        assert second.content == first.content
        assert second.change_count == 0


class TestReplacerProperties:
    """Property-based tests across replacers."""

    @given(
        words=st.lists(st.sampled_from(UI_WORDS), min_size=2, max_size=3),
        syntax=st.sampled_from([SyntaxKind.VUE, SyntaxKind.MARKUP, SyntaxKind.BLADE]),
    )
    def test_replace_is_idempotent(self, words: list[str], syntax: SyntaxKind) -> None:
        """A second replace pass never changes converted output."""
        text = " ".join([words[0].capitalize(), *words[1:]])
        km = build_key_map({"App": {"text": {"phrase": text}}})
        source = f"<div><p>{text}</p><span title=\"{text}\"></span></div>"
        if syntax is SyntaxKind.VUE:
            source = f"<template>{source}</template>"

        first = replace_source(source, syntax, km, "App")
        second = replace_source(first.content, syntax, km, "App")
        event(f"changes={first.change_count}")

        assert first.change_count == 2
        assert second.content == first.content
        assert second.change_count == 0


# ============================================================================
# CALL GENERATION
# ============================================================================


class TestGenerateCall:
    """Test runtime call rendering per syntax."""

    @pytest.mark.parametrize(
        ("syntax", "script", "expected"),
        [
            ("vue", False, "{{ $t('App.text.hi') }}"),
            ("vue", True, "t('App.text.hi')"),
            ("jsx", False, "t('App.text.hi')"),
            ("markup", False, "{t('App.text.hi')}"),
            ("blade", False, "{{ __('App.text.hi') }}"),
            ("blade", True, "__('App.text.hi')"),
        ],
    )
    def test_forms(self, syntax: str, script: bool, expected: str) -> None:
        """Each syntax has its own call form."""
        assert generate_call("App.text.hi", syntax, script=script) == expected

    def test_placeholders(self) -> None:
        """Placeholders render as an argument object."""
        call = generate_call("App.text.hi_name", "vue", (Placeholder("name", "user.name"),))

        assert call == "{{ $t('App.text.hi_name', { name: user.name }) }}"

    def test_unknown_syntax(self) -> None:
        """Unknown syntaxes are rejected."""
        with pytest.raises(ValueError):
            generate_call("App.text.hi", "php")


class TestConvertSelection:
    """Test conversion of user selections."""

    def test_jsx_property(self) -> None:
        """Object properties keep their name and lose the quotes."""
        store = TranslationStore()
        result = convert_selection(
            'label: "Create account",', "jsx", kind="label", namespace="Auth", store=store
        )

        assert result is not None
        assert result.content == "label: t('Auth.label.create_account'),"
        assert result.needs_import
        assert "Auth.label.create_account" in store

    def test_jsx_bare_text(self) -> None:
        """Bare JSX text becomes an expression container."""
        result = convert_selection(
            "Order total", "jsx", kind="text", namespace="Shop", store=TranslationStore()
        )

        assert result is not None
        assert result.replacement == "{t('Shop.text.order_total')}"
        assert result.needs_import

    def test_vue_quoted_in_template(self) -> None:
        """Quoted literals in Vue templates use $t."""
        result = convert_selection(
            "'Cancel order'", "vue", kind="button", namespace="Shop", store=TranslationStore()
        )

        assert result is not None
        assert result.content == "$t('Shop.button.cancel_order')"
        assert not result.needs_import

    def test_vue_bare_text(self) -> None:
        """Bare Vue template text uses the interpolation form."""
        result = convert_selection(
            "  Order total ", "vue", kind="text", namespace="Shop", store=TranslationStore()
        )

        assert result is not None
        assert result.content == "  {{ $t('Shop.text.order_total') }} "
        assert (result.start, result.end) == (2, 13)

    def test_blade_array_item(self) -> None:
        """Quoted PHP strings use a bare __() call."""
        result = convert_selection(
            "'title' => 'Order History',",
            "blade",
            kind="heading",
            namespace="Shop",
            store=TranslationStore(),
        )

        assert result is not None
        assert result.content == "'title' => __('Shop.heading.order_history'),"

    def test_template_literal(self) -> None:
        """Template literals are stored in placeholder form."""
        result = convert_selection(
            "`Welcome back ${user.name}`", "jsx", kind="text", namespace="App",
            store=TranslationStore(),
        )

        assert result is not None
        assert result.text == "Welcome back {name}"
        assert result.content == "t('App.text.welcome_back_name', { name: user.name })"

    def test_existing_key_reused(self) -> None:
        """Text already in the store keeps its key."""
        store = TranslationStore({"Shop": {"button": {"cancel": "Cancel order"}}})
        result = convert_selection(
            "'Cancel order'", "jsx", kind="button", namespace="Shop", store=store
        )

        assert result is not None
        assert result.key == "Shop.button.cancel"
        assert store.added_keys == ()

    def test_nothing_to_convert(self) -> None:
        """Code selections and refused text yield None."""
        config = EngineConfig(ignore_patterns=IgnorePatterns(exact=("Order History",)))

        assert convert_selection(
            "const x = foo();", "jsx", kind="text", namespace="App", store=TranslationStore()
        ) is None
        assert convert_selection(
            "Order History", "markup", kind="text", namespace="App",
            store=TranslationStore(config=config),
        ) is None


# ============================================================================
# REGISTRY
# ============================================================================


class TestRegistry:
    """Test replacer lookup helpers."""

    def test_get_replacer(self) -> None:
        """Syntax names map to replacer classes."""
        assert isinstance(get_replacer("vue"), VueReplacer)
        assert isinstance(get_replacer(SyntaxKind.BLADE), BladeReplacer)

    def test_get_replacer_passes_config(self) -> None:
        """The configuration reaches the replacer."""
        config = EngineConfig(translate_import_path="~/lang")

        assert get_replacer("jsx", config=config).config is config

    def test_replacer_for_path(self) -> None:
        """Replacers are chosen by file extension."""
        assert isinstance(replacer_for_path("src/App.tsx"), JsxReplacer)
        assert isinstance(replacer_for_path("views/home.blade.php"), BladeReplacer)
        assert isinstance(replacer_for_path("index.html"), MarkupReplacer)
        assert replacer_for_path("styles.css") is None
