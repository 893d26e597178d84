"""Replacer base class and the substitution rule engine.

A replacer rewrites literal UI copy into translation runtime calls. Each
syntax defines an ordered tuple of SubstitutionRule; rules are applied one
after another, each pass reading the previous pass's output and producing a
new string. A rule rewrites a match only when its guard lets it through,
the text passes the classifier and the KeyMap resolves a key. Keys are never
invented during replacement.

Idempotence: every rule refuses text that already calls the runtime or
already has the ``Namespace.kind.slug`` shape, so replacing converted
output changes nothing.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from i18nlexengine.config import EngineConfig
from i18nlexengine.diagnostics import ErrorTemplate
from i18nlexengine.enums import SyntaxKind
from i18nlexengine.keys.keymap import KeyMap
from i18nlexengine.syntax.scripts import looks_like_key
from i18nlexengine.validation import TextValidator, normalize_text

__all__ = [
    "BaseReplacer",
    "ReplaceContext",
    "ReplaceResult",
    "SubstitutionRule",
    "apply_outside",
    "apply_outside_comments",
    "apply_rules",
    "count_marker_delta",
    "enclosing_tag",
    "split_padding",
]

logger = logging.getLogger(__name__)

type Rewrite = Callable[[re.Match[str], ReplaceContext], str | None]
type Guard = Callable[[re.Match[str]], bool]

_OPEN_TAG = re.compile(r"<([A-Za-z][\w:.-]*)(?:\s[^<>]*)?>")

_HTML_COMMENT = re.compile(r"<!--[\s\S]*?-->")
# Stand-in for a masked comment: keeps the '<' and '>' boundaries text rules
# anchor on, and holds nothing a rule can match.
_COMMENT_MASK = re.compile(r"<\x00(\d+)\x00>")


# ============================================================================
# RESULTS AND CONTEXT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ReplaceResult:
    """Rewritten source and the number of substitutions made.

    Attributes:
        content: New source (identical to the input when nothing matched)
        change_count: Substitutions made, for reporting
    """

    content: str
    change_count: int = 0

    @property
    def changed(self) -> bool:
        """True if at least one substitution was made."""
        return self.change_count > 0


@dataclass(frozen=True, slots=True)
class ReplaceContext:
    """Read-only state shared by the rules of one replacement pass.

    Attributes:
        key_map: Lookup table built from the locale tree
        namespace: Namespace of the file being rewritten
        validator: Classifier bound to the project's ignore patterns
    """

    key_map: KeyMap
    namespace: str
    validator: TextValidator

    def can_translate(self, text: str) -> bool:
        """True if ``text`` reads as copy and is not already a key."""
        cleaned = normalize_text(text)
        if not cleaned or looks_like_key(cleaned):
            return False
        return self.validator.accepts(cleaned)

    def lookup(self, kind: str, text: str) -> str | None:
        """Key for ``text`` in this file's namespace, or None."""
        key = self.key_map.lookup(self.namespace, kind, text)
        if key is None:
            logger.debug("No key for %s %r in %s", kind, normalize_text(text), self.namespace)
        return key


# ============================================================================
# RULE ENGINE
# ============================================================================


@dataclass(frozen=True, slots=True)
class SubstitutionRule:
    """One ordered substitution pass.

    Attributes:
        name: Short label used in debug logs
        pattern: Compiled pattern; every match is offered to ``rewrite``
        rewrite: Returns the replacement for a match, or None to keep it
        guard: Returns True for matches that must be left alone
    """

    name: str
    pattern: re.Pattern[str]
    rewrite: Rewrite
    guard: Guard | None = None


def apply_rules(
    content: str, rules: Iterable[SubstitutionRule], context: ReplaceContext
) -> tuple[str, int]:
    """Apply rules in order.

    Returns:
        (new content, number of matches rewritten)
    """
    total = 0
    for rule in rules:
        count = 0

        def substitute(match: re.Match[str], rule: SubstitutionRule = rule) -> str:
            nonlocal count
            if rule.guard is not None and rule.guard(match):
                return match.group(0)
            replacement = rule.rewrite(match, context)
            if replacement is None:
                return match.group(0)
            count += 1
            return replacement

        content = rule.pattern.sub(substitute, content)
        if count:
            logger.debug("Rule %s rewrote %d matches", rule.name, count)
        total += count
    return content, total


def apply_outside(
    content: str, skip: re.Pattern[str], transform: Callable[[str], tuple[str, int]]
) -> tuple[str, int]:
    """Run ``transform`` on the parts of ``content`` not matched by ``skip``.

    Used to keep markup rules out of ``<script>`` and ``<style>`` bodies.
    """
    pieces: list[str] = []
    total = 0
    last = 0
    for match in skip.finditer(content):
        rewritten, count = transform(content[last : match.start()])
        pieces.extend((rewritten, match.group(0)))
        total += count
        last = match.end()
    rewritten, count = transform(content[last:])
    pieces.append(rewritten)
    return "".join(pieces), total + count


def apply_outside_comments(
    content: str, transform: Callable[[str], tuple[str, int]]
) -> tuple[str, int]:
    """Run ``transform`` with every ``<!-- ... -->`` comment left as written.

    Comments are swapped for placeholders before ``transform`` runs and put
    back afterwards, so text right next to a comment is still seen between
    its ``>`` and ``<``.

    Example:
        >>> apply_outside_comments("<p>a</p><!-- a -->", lambda s: (s.replace("a", "b"), 1))
        ('<p>b</p><!-- a -->', 1)
    """
    comments: list[str] = []

    def mask(match: re.Match[str]) -> str:
        comments.append(match.group(0))
        return f"<\x00{len(comments) - 1}\x00>"

    masked = _HTML_COMMENT.sub(mask, content)
    if not comments:
        return transform(content)
    rewritten, count = transform(masked)
    return _COMMENT_MASK.sub(lambda m: comments[int(m.group(1))], rewritten), count


def count_marker_delta(before: str, after: str, marker: re.Pattern[str]) -> int:
    """Net new occurrences of ``marker`` (never negative)."""
    return max(0, len(marker.findall(after)) - len(marker.findall(before)))


def enclosing_tag(source: str, gt_index: int) -> str | None:
    """Name of the start tag ending at ``source[gt_index]``, if it is one.

    Closing tags and self-closing tags yield None.

    Example:
        >>> enclosing_tag('<h1 class="x">Hi</h1>', 13)
        'h1'
        >>> enclosing_tag('<br/>Hi', 4) is None
        True
    """
    lt = source.rfind("<", 0, gt_index)
    if lt < 0:
        return None
    match = _OPEN_TAG.fullmatch(source, lt, gt_index + 1)
    if match is None or match.group(0).endswith("/>"):
        return None
    return match.group(1)


def split_padding(raw: str) -> tuple[str, str, str]:
    """Split into (leading whitespace, core, trailing whitespace)."""
    core = raw.strip()
    if not core:
        return raw, "", ""
    lead = raw[: len(raw) - len(raw.lstrip())]
    trail = raw[len(raw.rstrip()) :]
    return lead, core, trail


# ============================================================================
# BASE CLASS
# ============================================================================


class BaseReplacer(ABC):
    """Common replacer machinery.

    Subclasses implement ``_replace`` and set ``syntax``.
    """

    __slots__ = ("_config", "_validator")

    syntax: SyntaxKind

    def __init__(self, *, config: EngineConfig | None = None) -> None:
        self._config = config if config is not None else EngineConfig()
        self._validator = TextValidator(self._config.ignore_patterns)

    @property
    def config(self) -> EngineConfig:
        """Engine configuration."""
        return self._config

    def replace(self, content: str, key_map: KeyMap, namespace: str) -> ReplaceResult:
        """Rewrite literal copy of one source file into runtime calls.

        Args:
            content: Source text
            key_map: Lookup table built from the default locale tree
            namespace: Namespace of the file

        Returns:
            ReplaceResult; the original content with ``change_count == 0``
            when nothing matched

        Raises:
            ValueError: If content exceeds ``config.max_source_size``
        """
        if len(content) > self._config.max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(content), self._config.max_source_size)
            raise ValueError(diagnostic.message)
        if not content or not len(key_map):
            return ReplaceResult(content)

        context = ReplaceContext(key_map, namespace, self._validator)
        result = self._replace(content, context)
        logger.debug("%s replace in %s: %d changes", self.syntax, namespace, result.change_count)
        return result

    @abstractmethod
    def _replace(self, content: str, context: ReplaceContext) -> ReplaceResult:
        """Rewrite ``content``; called only for non-empty input."""
