"""
Theme token IR types.

Defines the closed token vocabulary the application themes with, the
default light and dark palettes, the editor section layout, and the
result/persistence models produced by CSS import.

A variant's token map is always partial: only keys that were imported
are present, the rest keep the caller's defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class ThemeVariant(StrEnum):
    """Which color-scheme root a token map belongs to."""

    LIGHT = "light"
    DARK = "dark"


# =============================================================================
# Token vocabulary
# =============================================================================

THEME_TOKEN_KEYS: tuple[str, ...] = (
    "background",
    "foreground",
    "card",
    "card-foreground",
    "primary",
    "primary-foreground",
    "secondary",
    "secondary-foreground",
    "muted",
    "muted-foreground",
    "accent",
    "accent-foreground",
    "destructive",
    "destructive-foreground",
    "border",
    "input",
    "ring",
    "sidebar",
    "sidebar-foreground",
    "popover",
    "popover-foreground",
    "success",
    "success-foreground",
    "warning",
    "warning-foreground",
    "info",
    "info-foreground",
    "error",
    "error-light",
    "success-light",
    "warning-light",
    "info-light",
    "shadow-focus",
)

# Tokens whose value is not a color (no picker, never converted)
NON_COLOR_TOKENS: frozenset[str] = frozenset({"shadow-focus"})

DEFAULT_LIGHT_TOKENS: dict[str, str] = {
    "background": "#ffffff",
    "foreground": "#0b0b0f",
    "card": "#ffffff",
    "card-foreground": "#0b0b0f",
    "primary": "#18181b",
    "primary-foreground": "#fafafa",
    "secondary": "#f4f4f5",
    "secondary-foreground": "#18181b",
    "muted": "#f4f4f5",
    "muted-foreground": "#71717a",
    "accent": "#f4f4f5",
    "accent-foreground": "#18181b",
    "destructive": "#ef4444",
    "destructive-foreground": "#fafafa",
    "border": "#e4e4e7",
    "input": "#e4e4e7",
    "ring": "#18181b",
    "sidebar": "#fafafa",
    "sidebar-foreground": "#3f3f46",
    "popover": "#ffffff",
    "popover-foreground": "#0b0b0f",
    "success": "#16a34a",
    "success-foreground": "#ffffff",
    "warning": "#d97706",
    "warning-foreground": "#ffffff",
    "info": "#2563eb",
    "info-foreground": "#ffffff",
    "error": "#dc2626",
    "error-light": "#fee2e2",
    "success-light": "#dcfce7",
    "warning-light": "#fef3c7",
    "info-light": "#dbeafe",
    "shadow-focus": "0 0 0 2px rgba(24, 24, 27, 0.25)",
}

DEFAULT_DARK_TOKENS: dict[str, str] = {
    "background": "#0b0b0f",
    "foreground": "#e6e6e6",
    "card": "#111116",
    "card-foreground": "#e6e6e6",
    "primary": "#fafafa",
    "primary-foreground": "#18181b",
    "secondary": "#27272a",
    "secondary-foreground": "#fafafa",
    "muted": "#27272a",
    "muted-foreground": "#a1a1aa",
    "accent": "#27272a",
    "accent-foreground": "#fafafa",
    "destructive": "#7f1d1d",
    "destructive-foreground": "#fafafa",
    "border": "#27272a",
    "input": "#27272a",
    "ring": "#d4d4d8",
    "sidebar": "#09090b",
    "sidebar-foreground": "#d4d4d8",
    "popover": "#111116",
    "popover-foreground": "#e6e6e6",
    "success": "#22c55e",
    "success-foreground": "#052e16",
    "warning": "#f59e0b",
    "warning-foreground": "#451a03",
    "info": "#3b82f6",
    "info-foreground": "#eff6ff",
    "error": "#f87171",
    "error-light": "#450a0a",
    "success-light": "#052e16",
    "warning-light": "#451a03",
    "info-light": "#172554",
    "shadow-focus": "0 0 0 2px rgba(250, 250, 250, 0.3)",
}


def default_tokens(variant: ThemeVariant | str) -> dict[str, str]:
    """Return a fresh copy of the default token map for a variant."""
    if ThemeVariant(variant) is ThemeVariant.DARK:
        return dict(DEFAULT_DARK_TOKENS)
    return dict(DEFAULT_LIGHT_TOKENS)


# =============================================================================
# Editor sections
# =============================================================================


@dataclass(frozen=True)
class TokenEntry:
    """A token key with its human-readable label."""

    key: str
    label: str


@dataclass(frozen=True)
class TokenSection:
    """A titled group of tokens, in editor order."""

    title: str
    tokens: tuple[TokenEntry, ...]


def _entries(*keys: str) -> tuple[TokenEntry, ...]:
    return tuple(TokenEntry(key, key.replace("-", " ").title()) for key in keys)


TOKEN_SECTIONS: tuple[TokenSection, ...] = (
    TokenSection("Base", _entries("background", "foreground")),
    TokenSection(
        "Card & Surface",
        _entries("card", "card-foreground", "popover", "popover-foreground"),
    ),
    TokenSection(
        "Brand",
        _entries("primary", "primary-foreground", "secondary", "secondary-foreground"),
    ),
    TokenSection(
        "Semantic",
        _entries(
            "destructive",
            "destructive-foreground",
            "success",
            "success-foreground",
            "warning",
            "warning-foreground",
            "info",
            "info-foreground",
            "error",
        ),
    ),
    TokenSection(
        "Controls",
        _entries(
            "border",
            "input",
            "ring",
            "muted",
            "muted-foreground",
            "accent",
            "accent-foreground",
        ),
    ),
    TokenSection("Sidebar", _entries("sidebar", "sidebar-foreground")),
    TokenSection(
        "Utility",
        _entries("error-light", "success-light", "warning-light", "info-light", "shadow-focus"),
    ),
)


# =============================================================================
# Import result
# =============================================================================


class ParseResult(BaseModel):
    """Light and dark token maps produced by one CSS import.

    Values are the raw CSS strings exactly as authored (trimmed), never
    the converted hex.
    """

    model_config = ConfigDict(frozen=True)

    light: dict[str, str] = Field(default_factory=dict, description="Tokens from the light block")
    dark: dict[str, str] = Field(default_factory=dict, description="Tokens from the dark block")

    def get(self, variant: ThemeVariant | str) -> dict[str, str]:
        """Return the token map for a variant."""
        if ThemeVariant(variant) is ThemeVariant.DARK:
            return self.dark
        return self.light

    @property
    def is_empty(self) -> bool:
        return not self.light and not self.dark

    def with_defaults(self) -> ParseResult:
        """Fill keys missing from either variant with the default palettes."""
        light = default_tokens(ThemeVariant.LIGHT)
        light.update(self.light)
        dark = default_tokens(ThemeVariant.DARK)
        dark.update(self.dark)
        return ParseResult(light=light, dark=dark)


# =============================================================================
# Saved themes
# =============================================================================


class CustomTheme(BaseModel):
    """A saved custom theme with full light and dark palettes."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable theme identifier (uuid4)")
    name: str = Field(min_length=1, description="Display name")
    light: dict[str, str] = Field(default_factory=dict)
    dark: dict[str, str] = Field(default_factory=dict)
    created_at: str = Field(description="ISO-8601 creation timestamp (UTC)")
    updated_at: str = Field(description="ISO-8601 last update timestamp (UTC)")
