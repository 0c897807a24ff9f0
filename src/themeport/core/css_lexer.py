"""
Declaration lexer for selector-block bodies.

Splits a block body into ``(name, value)`` pairs for custom properties.
Semicolons nested in parentheses, brackets or strings do not split, so
``rgba(0, 0, 0, .5)`` and ``url("a;b")`` stay whole.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from .css_blocks import strip_comments

_IMPORTANT = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


class Declaration(NamedTuple):
    """One custom-property declaration."""

    name: str
    value: str


def _split_segments(body: str) -> list[str]:
    """Split on top-level ``;``; a ``}`` that closes a nested block also splits."""
    segments: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None
    escaped = False

    for ch in body:
        if quote is not None:
            current.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue

        if ch in "\"'":
            quote = ch
        elif ch in "([{":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == "}":
            depth = max(0, depth - 1)
            if depth == 0:
                # end of a nested rule; drop it as one segment
                current.append(ch)
                segments.append("".join(current))
                current = []
                continue
        elif ch == ";" and depth == 0:
            segments.append("".join(current))
            current = []
            continue
        current.append(ch)

    segments.append("".join(current))
    return segments


def _split_name_value(segment: str) -> tuple[str, str] | None:
    """Split a segment at its first colon outside parentheses."""
    depth = 0
    for index, ch in enumerate(segment):
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == ":" and depth == 0:
            return segment[:index].strip(), segment[index + 1 :].strip()
    return None


def lex_declarations(body: str) -> list[Declaration]:
    """Lex a block body into custom-property declarations, in source order.

    Standard properties (``color: red``), nested rules, segments without a
    colon and empty values are skipped. A trailing ``!important`` is not
    part of the value.

    Args:
        body: Text between a block's braces.

    Returns:
        List of Declaration in the order they appear.
    """
    declarations: list[Declaration] = []
    for segment in _split_segments(strip_comments(body)):
        segment = segment.strip()
        if not segment.startswith("--"):
            continue
        pair = _split_name_value(segment)
        if pair is None:
            continue
        name, value = pair
        value = _IMPORTANT.sub("", value).strip()
        if len(name) <= 2 or not value:
            continue
        declarations.append(Declaration(name, value))
    return declarations
