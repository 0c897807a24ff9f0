"""Core themeport functionality: IR, CSS block extraction, color parsing and conversion, import."""

from . import ir
from .color_convert import TokenValue, css_to_hex, picker_hex, to_hex
from .color_parser import parse_color
from .config import ThemeportConfig, load_config
from .css_export import export_tokens_to_css
from .css_import import parse, parse_css_tokens
from .errors import (
    ColorParseError,
    ConfigError,
    CssImportError,
    NoRecognizedBlockError,
    ThemeportError,
    ThemeStoreError,
)
from .token_aliases import TokenAliasTable, normalize_token_name

__all__ = [
    "ir",
    # Errors
    "ThemeportError",
    "CssImportError",
    "NoRecognizedBlockError",
    "ColorParseError",
    "ConfigError",
    "ThemeStoreError",
    # Import
    "parse",
    "parse_css_tokens",
    "parse_color",
    "normalize_token_name",
    "TokenAliasTable",
    # Conversion
    "TokenValue",
    "to_hex",
    "css_to_hex",
    "picker_hex",
    # Export / config
    "export_tokens_to_css",
    "ThemeportConfig",
    "load_config",
]
