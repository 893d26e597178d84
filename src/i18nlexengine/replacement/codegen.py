"""Call-site generation for manually converted selections.

A user selects a region (a phrase, a quoted literal, a template literal, a
``label: "..."`` property) and names its kind. The selection's string is
stored under a new or existing key and the selected literal is replaced by
the runtime call for the file's syntax:

    vue template   {{ $t('K') }}   $t('K') for a quoted literal
    vue script     t('K')
    jsx            t('K')          {t('K')} for bare JSX text
    blade          {{ __('K') }}   __('K') for a quoted PHP string
    markup         {t('K')}

Template literals keep their interpolations as named arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nlexengine.enums import SyntaxKind
from i18nlexengine.localization.store import TranslationStore
from i18nlexengine.syntax.placeholders import Placeholder, format_arguments
from i18nlexengine.syntax.selection import find_string_candidates
from i18nlexengine.syntax.template_literal import TemplateLiteralProcessor, escape_key

__all__ = ["SelectionConversion", "convert_selection", "generate_call"]

_QUOTES = frozenset("'\"`")


def generate_call(
    key: str,
    syntax: SyntaxKind | str,
    placeholders: tuple[Placeholder, ...] = (),
    *,
    script: bool = False,
) -> str:
    """Runtime call text for ``key`` in a file of ``syntax``.

    Args:
        key: Full translation key
        syntax: Syntax of the target file
        placeholders: Named arguments (template literals)
        script: The call goes into script code (Vue ``<script>``, quoted
            PHP strings) rather than into markup

    Example:
        >>> generate_call("App.text.hi", "vue")
        "{{ $t('App.text.hi') }}"
        >>> generate_call("App.text.hi", "blade")
        "{{ __('App.text.hi') }}"
        >>> generate_call("App.text.hi_name", "jsx", (Placeholder("name", "user.name"),))
        "t('App.text.hi_name', { name: user.name })"
    """
    syntax = SyntaxKind(syntax)
    escaped = escape_key(key)
    arguments = format_arguments(placeholders)
    suffix = f", {arguments})" if arguments else ")"

    match syntax:
        case SyntaxKind.BLADE:
            return f"__('{escaped}')" if script else f"{{{{ __('{escaped}') }}}}"
        case SyntaxKind.VUE if not script:
            return f"{{{{ $t('{escaped}'{suffix} }}}}"
        case SyntaxKind.MARKUP:
            return f"{{t('{escaped}'{suffix}}}"
        case _:
            return f"t('{escaped}'{suffix}"


@dataclass(frozen=True, slots=True)
class SelectionConversion:
    """Result of converting a selection.

    Attributes:
        key: Key the text is stored under
        text: Stored text (placeholder form for template literals)
        replacement: Call written in place of the literal
        start: Offset in the selection of the replaced literal
        end: Offset after the replaced literal
        content: The selection with the literal replaced
    """

    key: str
    text: str
    replacement: str
    start: int
    end: int
    content: str

    @property
    def needs_import(self) -> bool:
        """True if the call is a bare ``t(...)`` that needs an import."""
        return self.replacement.lstrip("{").startswith("t(")


def convert_selection(
    selection: str,
    syntax: SyntaxKind | str,
    *,
    kind: str,
    namespace: str,
    store: TranslationStore,
    script: bool = False,
) -> SelectionConversion | None:
    """Store the selection's string and build its replacement.

    The first string candidate of the selection is converted. Quoted
    literals are replaced including their quotes; bare text is replaced by a
    markup-form call.

    Args:
        selection: Selected source text
        syntax: Syntax of the file
        kind: User-chosen kind (heading, button, ...)
        namespace: Namespace of the file
        store: Store receiving the text
        script: Selection lies in script code of a Vue file

    Returns:
        SelectionConversion, or None when the selection holds no copy or the
        store refuses the text

    Example:
        >>> store = TranslationStore()
        >>> result = convert_selection(
        ...     'label: "Create account",', "jsx", kind="label", namespace="Auth", store=store)
        >>> result.content
        "label: t('Auth.label.create_account'),"
    """
    syntax = SyntaxKind(syntax)
    candidates = find_string_candidates(selection, syntax)
    if not candidates:
        return None
    candidate = candidates[0]
    literal = selection[candidate.start : candidate.end]
    quoted = literal[:1] in _QUOTES

    text = candidate.text
    placeholders: tuple[Placeholder, ...] = ()
    if candidate.is_template:
        info = TemplateLiteralProcessor.analyze(literal)
        if info is not None:
            text, placeholders = info.base_text, info.placeholders

    key = store.register(namespace, kind, text)
    if key is None:
        return None

    in_code = quoted or script
    replacement = generate_call(key, syntax, placeholders, script=in_code)
    if syntax is SyntaxKind.JSX and not quoted:
        replacement = f"{{{replacement}}}"
    elif syntax is SyntaxKind.VUE and quoted and not script:
        replacement = f"${replacement}"
    content = selection[: candidate.start] + replacement + selection[candidate.end :]
    return SelectionConversion(key, text, replacement, candidate.start, candidate.end, content)
