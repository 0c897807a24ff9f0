"""
Theme token export to CSS.

Renders light and dark token maps back into ``:root`` / ``.dark`` blocks,
the same shape the importer reads, so an exported theme can be pasted
back in or dropped into a stylesheet.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from .ir.tokens import THEME_TOKEN_KEYS

LIGHT_SELECTOR = ":root"
DARK_SELECTOR = ".dark"

_KEY_ORDER = {key: index for index, key in enumerate(THEME_TOKEN_KEYS)}


def _ordered_items(tokens: Mapping[str, str]) -> list[tuple[str, str]]:
    """Known keys in vocabulary order, then any others alphabetically."""
    known = sorted((k for k in tokens if k in _KEY_ORDER), key=_KEY_ORDER.__getitem__)
    extra = sorted(k for k in tokens if k not in _KEY_ORDER)
    return [(key, tokens[key]) for key in (*known, *extra)]


def render_block(selector: str, tokens: Mapping[str, str], indent: str = "  ") -> str:
    """Render one selector block of ``--key: value;`` declarations."""
    lines = [f"{selector} {{"]
    lines.extend(f"{indent}--{key}: {value};" for key, value in _ordered_items(tokens))
    lines.append("}")
    return "\n".join(lines)


def export_tokens_to_css(light: Mapping[str, str], dark: Mapping[str, str]) -> str:
    """Render light and dark token maps as a CSS theme.

    Args:
        light: Light-variant tokens.
        dark: Dark-variant tokens.

    Returns:
        CSS text with a ``:root`` block followed by a ``.dark`` block,
        ending in a newline.
    """
    return f"{render_block(LIGHT_SELECTOR, light)}\n\n{render_block(DARK_SELECTOR, dark)}\n"


def export_css_file(light: Mapping[str, str], dark: Mapping[str, str], output_path: Path) -> Path:
    """Write exported CSS to ``output_path``.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(export_tokens_to_css(light, dark), encoding="utf-8")
    return output_path
