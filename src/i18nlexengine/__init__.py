"""I18nLexEngine - translatable string extraction and source rewriting.

Finds UI copy in Vue, JSX/TSX, Blade and HTML-like sources, assigns each
string a stable dotted key (``Namespace.kind.slug``), keeps nested locale
trees in sync, and rewrites sources to call the translation runtime.
Rewriting is idempotent: running it on converted output changes nothing.

Public API:
    is_translatable_text - Classifier: UI copy versus technical token
    parse_source - Extract ExtractedItem list from one source
    build_key_map / lookup_key - Resolve (namespace, kind, text) to a key
    generate_key - Build the key for a string
    replace_source - Rewrite one source into runtime calls
    TemplateLiteralProcessor - Template literal placeholder analysis
    TranslationStore - Merge extracted strings into a locale tree
    extract_sources / replace_sources - Batch operations

Submodules:
    i18nlexengine.syntax - Markup state machine, script patterns, parsers
    i18nlexengine.keys - Key naming, namespaces, KeyMap
    i18nlexengine.replacement - Substitution rules and replacers
    i18nlexengine.localization - Locale trees, sync, JSON files
    i18nlexengine.analysis - Locale and source audits
    i18nlexengine.diagnostics - Diagnostics and exceptions
"""

# isort: skip_file
from .config import EngineConfig, IgnorePatterns
from .diagnostics import Diagnostic, DiagnosticCode, I18nError
from .enums import ItemType, Kind, SyntaxKind
from .validation import TextValidator, is_translatable_text
from .syntax import ExtractedItem, TemplateLiteralProcessor, parse_source
from .keys import KeyMap, build_key_map, derive_namespace, generate_key, lookup_key
from .localization import TranslationStore
from .replacement import ReplaceResult, replace_source
from .pipeline import SourceFile, extract_sources, replace_sources

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("i18nlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "EngineConfig",
    "ExtractedItem",
    "I18nError",
    "IgnorePatterns",
    "ItemType",
    "KeyMap",
    "Kind",
    "ReplaceResult",
    "SourceFile",
    "SyntaxKind",
    "TemplateLiteralProcessor",
    "TextValidator",
    "TranslationStore",
    "__version__",
    "build_key_map",
    "derive_namespace",
    "extract_sources",
    "generate_key",
    "is_translatable_text",
    "lookup_key",
    "parse_source",
    "replace_source",
    "replace_sources",
]
