"""Tests for the per-syntax parsers and the parser registry.

Covers:
- MarkupParser: text nodes, allow-listed attributes, expression stripping
- VueParser: template and script blocks, mustaches, bound attributes
- JsxParser: named literals, JSX text, expressions, template literals
- BladeParser: directive blanking, echo and helper markers, runtime keys
- Registry: get_parser, parser_for_path, parse_source
- Size limit and parse statistics

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from i18nlexengine.config import EngineConfig, IgnorePatterns
from i18nlexengine.enums import ItemType, Kind, SyntaxKind
from i18nlexengine.syntax.parser import (
    BladeParser,
    ExtractedItem,
    JsxParser,
    MarkupParser,
    ParseResult,
    VueParser,
    get_parser,
    parse_source,
    parser_for_path,
)
from i18nlexengine.syntax.parser.base import find_runtime_keys
from i18nlexengine.syntax.parser.blade import blank_blade_noise
from i18nlexengine.syntax.parser.jsx import literal_lookup_text
from tests.strategies import ui_phrases


def _pairs(result: ParseResult) -> list[tuple[str, str]]:
    return [(item.text, item.kind) for item in result.items]


# ============================================================================
# MARKUP
# ============================================================================


class TestMarkupParser:
    """Test the generic markup parser."""

    def test_button_with_title(self) -> None:
        """Attribute and text of one element are both extracted."""
        result = MarkupParser().parse('<button title="Submit now">Go</button>')

        assert result.items == (
            ExtractedItem(ItemType.ATTRIBUTE, "Submit now", "title", "button", "title", 15),
            ExtractedItem(ItemType.TEXT, "Go", "button", "button", None, 27),
        )

    def test_kinds_from_tags(self) -> None:
        """Headings, labels and links get their own kinds."""
        source = "<h2>Order History</h2><label>Profile details</label><a href='#'>Home</a>"

        assert _pairs(MarkupParser().parse(source)) == [
            ("Order History", "heading"),
            ("Profile details", "label"),
            ("Home", "link"),
        ]

    def test_non_allow_listed_attributes_ignored(self) -> None:
        """Only copy-bearing attributes are inspected."""
        source = '<div class="Save Changes" data-tip="Save Changes" alt="Company logo"></div>'

        assert _pairs(MarkupParser().parse(source)) == [("Company logo", "alt")]

    def test_single_brace_expressions_removed(self) -> None:
        """Svelte-style expressions are stripped before classification."""
        result = MarkupParser().parse("<p>{count} Order History</p>")

        assert _pairs(result) == [("Order History", "text")]

    def test_technical_text_rejected(self) -> None:
        """Classifier rejections are counted, not extracted."""
        result = MarkupParser().parse("<span>btn-primary</span><span>Cancel</span>")

        assert _pairs(result) == [("Cancel", "text")]
        assert result.stats.candidates == 2
        assert result.stats.extracted == 1
        assert result.stats.rejected == 1

    def test_whitespace_normalized_and_offset_at_text(self) -> None:
        """Text is normalized; the offset points at its first character."""
        source = "<p>\n   Save\n   Changes  </p>"
        (item,) = MarkupParser().parse(source).items

        assert item.text == "Save Changes"
        assert source[item.offset : item.offset + 4] == "Save"

    def test_script_content_excluded(self) -> None:
        """Inline script bodies never yield items."""
        source = '<script>var label = "Hidden text";</script><p>Visible copy</p>'

        assert _pairs(MarkupParser().parse(source)) == [("Visible copy", "text")]

    def test_ignored_attribute(self) -> None:
        """Attributes excluded by configuration are skipped."""
        config = EngineConfig(ignore_patterns=IgnorePatterns(ignore_attributes=("title",)))
        result = MarkupParser(config=config).parse('<button title="Submit now">Go</button>')

        assert _pairs(result) == [("Go", "button")]

    def test_empty_source(self) -> None:
        """Empty input parses to an empty result."""
        assert MarkupParser().parse("") == ParseResult()

    def test_source_too_large(self) -> None:
        """Oversized sources raise ValueError."""
        parser = MarkupParser(config=EngineConfig(max_source_size=10))

        with pytest.raises(ValueError, match="exceeds"):
            parser.parse("<p>" + "x" * 20 + "</p>")


# ============================================================================
# VUE
# ============================================================================


class TestVueParser:
    """Test the Vue single-file component parser."""

    def test_heading(self) -> None:
        """Template headings are extracted with the heading kind."""
        result = VueParser().parse("<template><h1>Welcome Home</h1></template>")

        assert _pairs(result) == [("Welcome Home", "heading")]

    def test_template_and_script(self) -> None:
        """Template text, attributes and script literals are collected in order."""
        source = (
            "<template>\n"
            "  <div>\n"
            '    <button title="Submit now">Go</button>\n'
            "    <p>Hello {{ user.name }}</p>\n"
            "  </div>\n"
            "</template>\n"
            "<script setup>\n"
            'const pageTitle = "Order History";\n'
            "</script>\n"
        )
        result = VueParser().parse(source)

        assert _pairs(result) == [
            ("Submit now", "title"),
            ("Go", "button"),
            ("Hello", "text"),
            ("Order History", "heading"),
        ]
        script_item = result.items[-1]
        assert source[script_item.offset : script_item.offset + 5] == "Order"

    def test_bound_and_interpolated_attributes_skipped(self) -> None:
        """Bound attributes and values with mustaches are expressions."""
        source = (
            '<template><input :placeholder="hint" placeholder="{{ hint }}" '
            'aria-label="Search orders"></template>'
        )

        assert _pairs(VueParser().parse(source)) == [("Search orders", "aria_label")]

    def test_component_kinds(self) -> None:
        """UI library components map to kinds."""
        source = (
            "<template><el-button>Save Changes</el-button>"
            "<router-link to='/'>Order History</router-link></template>"
        )

        assert _pairs(VueParser().parse(source)) == [
            ("Save Changes", "button"),
            ("Order History", "link"),
        ]

    def test_runtime_keys_from_template_and_script(self) -> None:
        """Existing translation calls are reported as runtime keys."""
        source = (
            "<template><p>{{ $t('App.text.hello') }}</p></template>"
            "<script>const x = t('App.heading.title');</script>"
        )
        result = VueParser().parse(source)

        assert result.items == ()
        assert result.runtime_keys == ("App.text.hello", "App.heading.title")

    def test_fragment_without_template(self) -> None:
        """A bare template fragment is scanned as markup."""
        result = VueParser().parse("<h3>Recent orders</h3>")

        assert _pairs(result) == [("Recent orders", "heading")]

    def test_nested_template_tags(self) -> None:
        """Inner template tags do not end the root block."""
        source = (
            '<template><template v-if="ok"><p>Save Changes</p></template>'
            "<p>Cancel</p></template>"
        )

        assert _pairs(VueParser().parse(source)) == [("Save Changes", "text"), ("Cancel", "text")]


# ============================================================================
# JSX
# ============================================================================


class TestJsxParser:
    """Test the JavaScript/TypeScript parser."""

    def test_component(self) -> None:
        """Variables, JSX text, attributes and expression strings are found."""
        source = (
            "export function Page() {\n"
            "  const errorMessage = 'Something went wrong';\n"
            "  return (\n"
            "    <div>\n"
            '      <h1 className="title">Invoice Overview</h1>\n'
            '      <input placeholder="Search orders" />\n'
            '      <Button>{"Save Changes"}</Button>\n'
            "    </div>\n"
            "  );\n"
            "}\n"
        )

        assert _pairs(JsxParser().parse(source)) == [
            ("Something went wrong", "text"),
            ("Invoice Overview", "heading"),
            ("Search orders", "placeholder"),
            ("Save Changes", "text"),
        ]

    def test_toast(self) -> None:
        """Toast calls get the toast kind."""
        result = JsxParser().parse('toast.success("Profile updated");')

        assert _pairs(result) == [("Profile updated", "toast")]

    def test_object_property_and_document_title(self) -> None:
        """Property names and document.title decide the kind."""
        source = "const cfg = { label: 'Create account' };\ndocument.title = 'Order History';"

        assert _pairs(JsxParser().parse(source)) == [
            ("Create account", "label"),
            ("Order History", "title"),
        ]

    def test_template_literal_placeholders(self) -> None:
        """Template literals are stored with named placeholders."""
        result = JsxParser().parse("const title = `Hello ${user.name}!`;")

        assert _pairs(result) == [("Hello {name}!", "heading")]

    def test_template_literal_without_static_text(self) -> None:
        """Literals that are only interpolation are skipped."""
        assert JsxParser().parse("const title = `${a}${b}`;").items == ()

    def test_attribute_expression_literals(self) -> None:
        """Each literal inside a ternary attribute is collected."""
        source = '<img alt={ok ? "Company logo" : "Missing image"} />'

        assert _pairs(JsxParser().parse(source)) == [
            ("Company logo", "alt"),
            ("Missing image", "alt"),
        ]

    def test_key_shaped_literals_skipped(self) -> None:
        """Strings that already look like keys are not extracted."""
        assert JsxParser().parse("const label = 'Auth.label.create_account';").items == ()

    def test_return_string(self) -> None:
        """Returned literals are extracted as text."""
        source = "function hint() {\n  return 'Profile updated';\n}"

        assert _pairs(JsxParser().parse(source)) == [("Profile updated", "text")]

    def test_first_pattern_wins_on_same_offset(self) -> None:
        """A literal matched by two patterns is recorded once."""
        result = JsxParser().parse("const title = 'Order History';\nreturn 'Order History';")

        assert [item.kind for item in result.items] == ["heading", "text"]

    def test_runtime_keys(self) -> None:
        """t(), i18n.t() and useI18n().t() calls are reported."""
        source = "t('A.b.c'); i18n.t('D.e.f'); useI18n().t('G.h.i', { n: 1 });"

        assert JsxParser().parse(source).runtime_keys == ("A.b.c", "D.e.f", "G.h.i")


class TestLiteralLookupText:
    """Test lookup text derivation for script literals."""

    def test_plain_literal(self) -> None:
        """Plain literals classify as themselves."""
        assert literal_lookup_text("Save Changes", "'") == ("Save Changes", None)

    def test_template_literal(self) -> None:
        """Template literals yield placeholder text and static text."""
        assert literal_lookup_text("Hi ${user.name}!", "`") == ("Hi {name}!", "Hi  !")

    def test_key_shape(self) -> None:
        """Keys are never re-extracted."""
        assert literal_lookup_text("App.heading.hi", "'") is None


# ============================================================================
# BLADE
# ============================================================================


class TestBladeParser:
    """Test the Blade view parser."""

    def test_heading_and_runtime_key(self) -> None:
        """Plain text is extracted; helper calls are runtime keys."""
        result = BladeParser().parse("<h2>Order History</h2><p>{{ __('Shop.text.x') }}</p>")

        assert _pairs(result) == [("Order History", "heading")]
        assert result.runtime_keys == ("Shop.text.x",)

    def test_directives_blanked(self) -> None:
        """Directive arguments never become text."""
        source = "@if($user->isAdmin())<p>Admin settings</p>@endif"

        assert _pairs(BladeParser().parse(source)) == [("Admin settings", "text")]

    def test_comments_and_php_blanked(self) -> None:
        """Blade comments and PHP blocks are removed."""
        source = "{{-- <p>Old copy here</p> --}}<?php echo 'Nope'; ?><p>Save Changes</p>"

        assert _pairs(BladeParser().parse(source)) == [("Save Changes", "text")]

    def test_echoed_text_left_alone(self) -> None:
        """Text already using echoes or @lang is skipped."""
        source = "<p>Total {{ $total }}</p><span>@lang('Shop.text.y')</span>"
        result = BladeParser().parse(source)

        assert result.items == ()
        assert result.runtime_keys == ("Shop.text.y",)

    def test_offsets_preserved(self) -> None:
        """Blanking keeps offsets aligned with the original source."""
        source = "@csrf\n<p>Profile details</p>"
        (item,) = BladeParser().parse(source).items

        assert source[item.offset : item.offset + 7] == "Profile"

    def test_blank_blade_noise(self) -> None:
        """Blanking keeps length and newlines."""
        source = "@if($ok)\n<p>Hi</p>\n@endif"
        blanked = blank_blade_noise(source)

        assert len(blanked) == len(source)
        assert blanked.count("\n") == 2
        assert "<p>Hi</p>" in blanked


# ============================================================================
# REGISTRY
# ============================================================================


class TestRegistry:
    """Test parser lookup helpers."""

    @pytest.mark.parametrize(
        ("syntax", "parser_type"),
        [
            (SyntaxKind.VUE, VueParser),
            ("jsx", JsxParser),
            ("blade", BladeParser),
            ("markup", MarkupParser),
        ],
    )
    def test_get_parser(self, syntax: SyntaxKind | str, parser_type: type) -> None:
        """Each syntax maps to its parser class."""
        assert type(get_parser(syntax)) is parser_type

    def test_unknown_syntax(self) -> None:
        """Unknown syntaxes raise ValueError."""
        with pytest.raises(ValueError, match="cobol"):
            get_parser("cobol")

    @pytest.mark.parametrize(
        ("path", "parser_type"),
        [
            ("src/pages/Home.vue", VueParser),
            ("src/components/Card.tsx", JsxParser),
            ("resources/views/home.blade.php", BladeParser),
            ("public/index.html", MarkupParser),
        ],
    )
    def test_parser_for_path(self, path: str, parser_type: type) -> None:
        """File extensions select the parser."""
        assert type(parser_for_path(path)) is parser_type

    def test_unsupported_path(self) -> None:
        """Unsupported files have no parser."""
        assert parser_for_path("src/types/api.d.ts") is None
        assert parser_for_path("README.md") is None

    def test_parse_source(self) -> None:
        """parse_source dispatches by syntax."""
        result = parse_source('<button title="Submit now">Go</button>', "vue")

        assert [item.text for item in result.items] == ["Submit now", "Go"]

    def test_config_passed_through(self) -> None:
        """Configuration reaches the parser."""
        config = EngineConfig(max_workers=2)

        assert get_parser("jsx", config=config).config is config

    def test_find_runtime_keys_ordered_by_offset(self) -> None:
        """Keys from different call styles are ordered by position."""
        assert find_runtime_keys("i18n.t('B.x.y'); t('A.x.y');") == ("B.x.y", "A.x.y")


class TestParserProperties:
    """Property-based tests across parsers."""

    @given(phrase=ui_phrases())
    def test_paragraph_text_extracted(self, phrase: str) -> None:
        """Any accepted phrase in a paragraph is extracted verbatim."""
        for syntax in ("markup", "vue", "blade"):
            assert _pairs(parse_source(f"<p>{phrase}</p>", syntax)) == [(phrase, Kind.TEXT)]
