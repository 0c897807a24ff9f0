"""
CSS theme import.

Turns pasted CSS (shadcn/ui, tweakcn, Tailwind v3 HSL or Tailwind v4 OKLCH
themes) into light and dark theme-token maps.

Pipeline per call: extract the light/dark blocks, lex custom properties,
map names to token keys, validate each value as a color or an opaque CSS
value. Bad declarations are dropped one by one; only a paste with no light
and no dark block fails as a whole.

The stored value is always the authored CSS string. Hex conversion is a
separate read-side view (see ``color_convert``).
"""

from __future__ import annotations

import logging

from .color_parser import parse_color
from .config import ThemeportConfig
from .css_blocks import extract_blocks
from .css_lexer import lex_declarations
from .errors import ColorParseError, NoRecognizedBlockError
from .ir.tokens import ParseResult, ThemeVariant
from .token_aliases import TokenAliasTable

logger = logging.getLogger(__name__)


def parse_block(body: str, aliases: TokenAliasTable, variant: ThemeVariant) -> dict[str, str]:
    """Assemble the token map for one block body.

    Args:
        body: Text between the block's braces.
        aliases: Name-to-key table.
        variant: Variant being assembled (for log messages).

    Returns:
        Partial token map; later declarations of a key replace earlier ones.
    """
    tokens: dict[str, str] = {}
    for declaration in lex_declarations(body):
        key = aliases.normalize(declaration.name)
        if key is None:
            logger.debug(f"[{variant}] Ignoring unmapped property {declaration.name}")
            continue
        try:
            parse_color(declaration.value)
        except ColorParseError as e:
            logger.debug(f"[{variant}] Dropping {declaration.name}: {e}")
            continue
        tokens[key] = declaration.value
    return tokens


def parse_css_tokens(css: str, *, config: ThemeportConfig | None = None) -> ParseResult:
    """Parse CSS text into light and dark token maps.

    Args:
        css: Arbitrary CSS text.
        config: Selector and alias configuration (defaults when None).

    Returns:
        ParseResult with partial ``light`` and ``dark`` maps. A missing
        block yields an empty map for that variant.

    Raises:
        NoRecognizedBlockError: If neither a light nor a dark block exists.
    """
    config = config or ThemeportConfig()
    blocks = extract_blocks(
        css,
        config.import_.light_selectors,
        config.import_.dark_selectors,
    )
    if not blocks.any_found:
        raise NoRecognizedBlockError()

    aliases = config.alias_table()
    light = parse_block(blocks.light, aliases, ThemeVariant.LIGHT)
    dark = parse_block(blocks.dark, aliases, ThemeVariant.DARK)
    logger.debug(f"Imported {len(light)} light and {len(dark)} dark tokens")
    return ParseResult(light=light, dark=dark)


# Short name for library callers
parse = parse_css_tokens
