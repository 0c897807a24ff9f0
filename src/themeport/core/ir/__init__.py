"""
themeport Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .color import Color, HexColor, HslColor, OklchColor, OpaqueValue, RgbColor
from .tokens import (
    DEFAULT_DARK_TOKENS,
    DEFAULT_LIGHT_TOKENS,
    NON_COLOR_TOKENS,
    THEME_TOKEN_KEYS,
    TOKEN_SECTIONS,
    CustomTheme,
    ParseResult,
    ThemeVariant,
    TokenEntry,
    TokenSection,
    default_tokens,
)

__all__ = [
    # Colors
    "Color",
    "HexColor",
    "RgbColor",
    "HslColor",
    "OklchColor",
    "OpaqueValue",
    # Tokens
    "DEFAULT_DARK_TOKENS",
    "DEFAULT_LIGHT_TOKENS",
    "NON_COLOR_TOKENS",
    "THEME_TOKEN_KEYS",
    "TOKEN_SECTIONS",
    "CustomTheme",
    "ParseResult",
    "ThemeVariant",
    "TokenEntry",
    "TokenSection",
    "default_tokens",
]
