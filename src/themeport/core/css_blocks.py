"""
Selector-block extraction for pasted CSS.

Finds the body of the light-scope block (``:root``) and the dark-scope
block (``.dark``) in free-form CSS text. Blocks are delimited by an explicit
brace-depth scan that understands strings and comments, so nested braces
and ``}`` characters inside strings never end a block early.

``@layer`` blocks are scanned in place (shadcn/ui exports wrap their
variables in ``@layer base``); every other at-rule block is skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto

logger = logging.getLogger(__name__)

DEFAULT_LIGHT_SELECTORS: tuple[str, ...] = (":root", ".light", '[data-theme="light"]')
DEFAULT_DARK_SELECTORS: tuple[str, ...] = (
    ".dark",
    ":root.dark",
    "html.dark",
    '[data-theme="dark"]',
)

# At-rules whose block holds ordinary rules that are scanned in place
_TRANSPARENT_AT_RULES = frozenset({"@layer"})

_WHITESPACE = re.compile(r"\s+")
_ATTR_EQUALS = re.compile(r"\s*([~|^$*]?=)\s*")
_UNQUOTED_ATTR_VALUE = re.compile(r'=([^"\]\s]+)\]')


@dataclass(frozen=True)
class CssRule:
    """A top-level rule: its comment-free prelude and raw body text."""

    prelude: str
    body: str


@dataclass(frozen=True)
class ScopedBlocks:
    """Bodies of the first light and dark blocks (empty when absent)."""

    light: str = ""
    dark: str = ""
    light_found: bool = False
    dark_found: bool = False

    @property
    def any_found(self) -> bool:
        return self.light_found or self.dark_found


class _ScanState(Enum):
    OUTSIDE = auto()
    IN_SELECTOR = auto()


# =============================================================================
# Low-level scanning
# =============================================================================


def _skip_string(text: str, index: int) -> int:
    """Return the index just past the string literal opening at ``index``."""
    quote = text[index]
    i = index + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            # CSS bad-string: an unescaped newline ends it
            return i
        i += 1
    return n


def _skip_comment(text: str, index: int) -> int:
    """Return the index just past the ``/* ... */`` comment opening at ``index``."""
    end = text.find("*/", index + 2)
    return len(text) if end == -1 else end + 2


def find_block_end(text: str, open_index: int) -> int:
    """Find the ``}`` matching the ``{`` at ``open_index``.

    Args:
        text: CSS text.
        open_index: Index of an opening brace.

    Returns:
        Index of the matching closing brace, or ``len(text)`` when the
        block is never closed.
    """
    depth = 0
    i = open_index
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if ch == "/" and text.startswith("/*", i):
            i = _skip_comment(text, i)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return n


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` comments, leaving string literals untouched."""
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in "\"'":
            end = _skip_string(text, i)
            out.append(text[i:end])
            i = end
        elif ch == "/" and text.startswith("/*", i):
            i = _skip_comment(text, i)
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def iter_rules(css: str) -> Iterator[CssRule]:
    """Yield top-level rules of ``css`` in document order.

    Statement at-rules (``@import ...;``) and stray closing braces are
    skipped. A rule whose block is never closed runs to the end of the text.
    """
    state = _ScanState.OUTSIDE
    prelude: list[str] = []
    i = 0
    n = len(css)
    while i < n:
        ch = css[i]
        if ch == "/" and css.startswith("/*", i):
            i = _skip_comment(css, i)
            continue

        if state is _ScanState.OUTSIDE:
            if ch.isspace() or ch in ";}":
                i += 1
                continue
            state = _ScanState.IN_SELECTOR
            prelude = []

        if ch in "\"'":
            end = _skip_string(css, i)
            prelude.append(css[i:end])
            i = end
        elif ch == ";" or ch == "}":
            state = _ScanState.OUTSIDE
            i += 1
        elif ch == "{":
            end = find_block_end(css, i)
            yield CssRule(prelude="".join(prelude).strip(), body=css[i + 1 : end])
            state = _ScanState.OUTSIDE
            i = end + 1
        else:
            prelude.append(ch)
            i += 1


def _iter_style_rules(css: str) -> Iterator[CssRule]:
    """Yield style rules, descending into transparent at-rule blocks."""
    for rule in iter_rules(css):
        if not rule.prelude.startswith("@"):
            yield rule
            continue
        name = rule.prelude.split(None, 1)[0].lower()
        if name in _TRANSPARENT_AT_RULES:
            yield from _iter_style_rules(rule.body)
        else:
            logger.debug(f"Skipping {name} block")


# =============================================================================
# Selectors
# =============================================================================


def split_selector_list(prelude: str) -> list[str]:
    """Split a selector list on commas that are not nested in ``()``/``[]``."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    i = 0
    n = len(prelude)
    while i < n:
        ch = prelude[i]
        if ch in "\"'":
            end = _skip_string(prelude, i)
            current.append(prelude[i:end])
            i = end
            continue
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            i += 1
            continue
        current.append(ch)
        i += 1
    parts.append("".join(current).strip())
    return [part for part in parts if part]


def normalize_selector(selector: str) -> str:
    """Canonical form used to compare selectors.

    Collapses whitespace, uses double quotes, and quotes bare attribute
    values, so ``[data-theme='dark']`` and ``[data-theme=dark]`` compare equal
    to ``[data-theme="dark"]``.
    """
    text = _WHITESPACE.sub(" ", selector).strip()
    text = text.replace("'", '"')
    text = _ATTR_EQUALS.sub(r"\1", text)
    return _UNQUOTED_ATTR_VALUE.sub(r'="\1"]', text)


# =============================================================================
# Extraction
# =============================================================================


def extract_blocks(
    css: str,
    light_selectors: Iterable[str] = DEFAULT_LIGHT_SELECTORS,
    dark_selectors: Iterable[str] = DEFAULT_DARK_SELECTORS,
) -> ScopedBlocks:
    """Extract the first light-scope and dark-scope block bodies.

    Args:
        css: Raw CSS text.
        light_selectors: Selectors that mark the light block.
        dark_selectors: Selectors that mark the dark block.

    Returns:
        ScopedBlocks; a missing scope has an empty body and ``*_found``
        set to False. Never raises.
    """
    light_patterns = {normalize_selector(s) for s in light_selectors}
    dark_patterns = {normalize_selector(s) for s in dark_selectors}

    light: str | None = None
    dark: str | None = None
    for rule in _iter_style_rules(css):
        selectors = {normalize_selector(s) for s in split_selector_list(rule.prelude)}
        if light is None and selectors & light_patterns:
            light = rule.body
        if dark is None and selectors & dark_patterns:
            dark = rule.body
        if light is not None and dark is not None:
            break

    return ScopedBlocks(
        light=light or "",
        dark=dark or "",
        light_found=light is not None,
        dark_found=dark is not None,
    )
