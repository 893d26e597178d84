"""JavaScript / TypeScript / JSX replacer.

Rewrites the literal shapes the script parser extracts, in the same order:
object properties, UI-named variables, ``document.title``, toast calls, JSX
text, JSX string expressions, attribute values and attribute expressions,
then ``return "..."`` strings. Template literals with interpolations are
looked up in placeholder form and rewritten with named arguments:

    `Welcome ${user.name}!`  ->  t('App.text.welcome_name', { name: user.name })

When anything changed, ``import { t } from '<path>';`` is added after the
last import unless ``t`` is already imported from that path.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from i18nlexengine.enums import Kind, SyntaxKind
from i18nlexengine.syntax import scripts
from i18nlexengine.syntax.kinds import (
    infer_kind_from_attribute,
    infer_kind_from_jsx_element,
    infer_kind_from_prop,
    infer_kind_from_variable,
)
from i18nlexengine.syntax.parser.jsx import literal_lookup_text
from i18nlexengine.syntax.template_literal import TemplateLiteralProcessor, escape_key

from .base import (
    BaseReplacer,
    ReplaceContext,
    ReplaceResult,
    SubstitutionRule,
    apply_rules,
    split_padding,
)

__all__ = ["JSX_RULES", "JsxReplacer", "ensure_t_import", "translate_literal"]

# One import statement ending its line; the semicolon is optional and braces
# may span lines.
_LAST_IMPORT = re.compile(
    r"^import\s+(?:[^'\";{}\n]*?\{[^}]*\}[^'\";{}\n]*?\s+from\s+|[^'\";{}\n]*?\s+from\s+)?"
    r"['\"][^'\"\n]+['\"][ \t]*;?[ \t]*$",
    re.MULTILINE,
)
_T_CALL = re.compile(r"\bt\s*\(")


def translate_literal(
    text: str, quote: str, kind: str, context: ReplaceContext
) -> str | None:
    """Runtime call replacing one string literal, or None to keep it.

    Example:
        >>> from i18nlexengine.keys.keymap import build_key_map
        >>> from i18nlexengine.validation import TextValidator
        >>> km = build_key_map({"App": {"text": {"welcome_back_name": "Welcome back {name}"}}})
        >>> ctx = ReplaceContext(km, "App", TextValidator())
        >>> translate_literal("Welcome back ${user.name}", "`", "text", ctx)
        "t('App.text.welcome_back_name', { name: user.name })"
    """
    literal = literal_lookup_text(text, quote)
    if literal is None:
        return None
    lookup_text, check = literal
    if not context.can_translate(check if check is not None else lookup_text):
        return None
    key = context.lookup(kind, lookup_text)
    if key is None:
        return None
    if check is None:
        return TemplateLiteralProcessor.create_replacement(key)
    info = TemplateLiteralProcessor.analyze(f"`{text}`")
    placeholders = info.placeholders if info is not None else ()
    return TemplateLiteralProcessor.create_replacement(key, placeholders)


# ============================================================================
# REWRITES
# ============================================================================


def _prefixed(kind_of: Callable[[re.Match[str]], str]) -> Callable[..., str | None]:
    def rewrite(match: re.Match[str], context: ReplaceContext) -> str | None:
        call = translate_literal(match["text"], match["quote"], kind_of(match), context)
        return None if call is None else f"{match['prefix']}{call}"

    return rewrite


def _jsx_text(match: re.Match[str], context: ReplaceContext) -> str | None:
    lead, core, trail = split_padding(match["text"])
    if not core or not context.can_translate(core):
        return None
    key = context.lookup(infer_kind_from_jsx_element(match["name"]), core)
    if key is None:
        return None
    return f"{match['open']}{lead}{{t('{escape_key(key)}')}}{trail}{match['close']}"


def _expression_string(match: re.Match[str], context: ReplaceContext) -> str | None:
    call = translate_literal(match["text"], match["quote"], Kind.TEXT, context)
    return None if call is None else f"{{{call}}}"


def _attribute(match: re.Match[str], context: ReplaceContext) -> str | None:
    name = match["name"]
    if not context.validator.accepts_attribute(name):
        return None
    kind = infer_kind_from_attribute(name)
    call = translate_literal(match["text"], match["quote"], kind, context)
    return None if call is None else f"{match['prefix']}{{{call}}}"


def _attribute_expression(match: re.Match[str], context: ReplaceContext) -> str | None:
    name = match["name"]
    if not context.validator.accepts_attribute(name):
        return None
    kind = infer_kind_from_attribute(name)
    changed = False

    def literal(inner: re.Match[str]) -> str:
        nonlocal changed
        if "${" in inner["text"]:
            return inner.group(0)
        call = translate_literal(inner["text"], inner["quote"], kind, context)
        if call is None:
            return inner.group(0)
        changed = True
        return call

    expression = scripts.EXPRESSION_LITERAL.sub(literal, match["expr"])
    return f"{match['prefix']}{{{expression}}}" if changed else None


def _return_string(match: re.Match[str], context: ReplaceContext) -> str | None:
    call = translate_literal(match["text"], match["quote"], Kind.TEXT, context)
    return None if call is None else f"{match['prefix']}{call}{match['suffix']}"


def _has_t_call(match: re.Match[str]) -> bool:
    return "{t(" in match["text"]


JSX_RULES: tuple[SubstitutionRule, ...] = (
    SubstitutionRule(
        "object-property",
        scripts.OBJECT_PROPERTY,
        _prefixed(lambda m: infer_kind_from_prop(m["name"])),
    ),
    SubstitutionRule(
        "variable",
        scripts.VARIABLE_DECLARATION,
        _prefixed(lambda m: infer_kind_from_variable(m["name"])),
    ),
    SubstitutionRule("document-title", scripts.DOCUMENT_TITLE, _prefixed(lambda m: Kind.TITLE)),
    SubstitutionRule("toast", scripts.TOAST_CALL, _prefixed(lambda m: Kind.TOAST)),
    SubstitutionRule("jsx-text", scripts.JSX_TEXT, _jsx_text, guard=_has_t_call),
    SubstitutionRule("jsx-expression", scripts.JSX_EXPRESSION_STRING, _expression_string),
    SubstitutionRule("attribute", scripts.JSX_ATTRIBUTE, _attribute),
    SubstitutionRule("attribute-expression", scripts.ATTRIBUTE_EXPRESSION, _attribute_expression),
    SubstitutionRule("return", scripts.RETURN_STRING, _return_string),
)


# ============================================================================
# IMPORT
# ============================================================================


def ensure_t_import(content: str, import_path: str) -> str:
    """Add ``import { t } from '<import_path>';`` if ``t`` is called but not imported.

    The import goes after the last top-level import statement (with or
    without a semicolon), or at the top followed by a blank line.

    Example:
        >>> ensure_t_import("import a from 'a';\\nt('A.b');", "@/i18n")
        "import a from 'a';\\nimport { t } from '@/i18n';\\nt('A.b');"
    """
    quoted_path = re.escape(import_path)
    imported = re.compile(rf"import\s*\{{[^}}]*\bt\b[^}}]*\}}\s*from\s*['\"]{quoted_path}['\"]")
    if imported.search(content) or not _T_CALL.search(content):
        return content

    statement = f"import {{ t }} from '{import_path}';"
    last = None
    for last in _LAST_IMPORT.finditer(content):
        pass
    if last is None:
        return f"{statement}\n\n{content}"
    return f"{content[: last.end()]}\n{statement}{content[last.end() :]}"


class JsxReplacer(BaseReplacer):
    """Replacer for ``.js``, ``.jsx``, ``.ts``, ``.tsx`` and friends.

    Example:
        >>> from i18nlexengine.keys.keymap import build_key_map
        >>> km = build_key_map({"Shop": {"toast": {"profile_updated": "Profile updated"}}})
        >>> result = JsxReplacer().replace('toast.success("Profile updated");', km, "Shop")
        >>> print(result.content)
        import { t } from '@/i18n';
        <BLANKLINE>
        toast.success(t('Shop.toast.profile_updated'));
    """

    __slots__ = ()

    syntax = SyntaxKind.JSX

    def _replace(self, content: str, context: ReplaceContext) -> ReplaceResult:
        rewritten, count = self.replace_script(content, context)
        return ReplaceResult(rewritten, count)

    def replace_script(self, source: str, context: ReplaceContext) -> tuple[str, int]:
        """Apply the script rules and add the import when something changed."""
        rewritten, count = apply_rules(source, JSX_RULES, context)
        if count:
            rewritten = ensure_t_import(rewritten, self.config.translate_import_path)
        return rewritten, count
