"""
Custom-property name to theme-token key mapping.

Theme generators name the same token differently (``--background``,
``--color-background`` in Tailwind v4, ``--bg`` in hand-written themes).
The mapping lives in a plain alias table so new conventions are added as
data, not code.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .errors import ConfigError
from .ir.tokens import THEME_TOKEN_KEYS

# Aliases beyond the generated ``key`` / ``color-key`` / ``x-fg`` forms
EXTRA_ALIASES: dict[str, str] = {
    "bg": "background",
    "fg": "foreground",
    "sidebar-background": "sidebar",
    "danger": "destructive",
    "danger-foreground": "destructive-foreground",
    "focus-shadow": "shadow-focus",
    "ring-shadow": "shadow-focus",
}


def _build_default_aliases() -> dict[str, str]:
    aliases: dict[str, str] = {}
    for key in THEME_TOKEN_KEYS:
        aliases[key] = key
        aliases[f"color-{key}"] = key
        if key.endswith("-foreground"):
            short = key.removesuffix("-foreground") + "-fg"
            aliases[short] = key
            aliases[f"color-{short}"] = key
    for alias, key in EXTRA_ALIASES.items():
        aliases[alias] = key
        aliases[f"color-{alias}"] = key
    return aliases


def _clean(name: str) -> str:
    return name.strip().removeprefix("--").lower()


class TokenAliasTable(Mapping[str, str]):
    """Read-only mapping of alias (without ``--``) to canonical token key."""

    def __init__(self, aliases: Mapping[str, str] | None = None):
        self._aliases: dict[str, str] = dict(
            _build_default_aliases() if aliases is None else aliases
        )

    def __getitem__(self, alias: str) -> str:
        return self._aliases[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def normalize(self, name: str) -> str | None:
        """Map a custom-property name to its token key.

        Args:
            name: Property name, with or without the leading ``--``.

        Returns:
            Canonical token key, or None when the name is not a theme token.
        """
        return self._aliases.get(_clean(name))

    def extended(self, extra: Mapping[str, str]) -> TokenAliasTable:
        """Return a new table with ``extra`` aliases added.

        Raises:
            ConfigError: If an alias targets a key outside the token vocabulary.
        """
        merged = dict(self._aliases)
        for alias, key in extra.items():
            target = _clean(key)
            if target not in THEME_TOKEN_KEYS:
                raise ConfigError(f"Alias '{alias}' points to unknown token '{key}'")
            merged[_clean(alias)] = target
        return TokenAliasTable(merged)


DEFAULT_ALIAS_TABLE = TokenAliasTable()


def normalize_token_name(name: str) -> str | None:
    """Map a custom-property name to a token key using the default table."""
    return DEFAULT_ALIAS_TABLE.normalize(name)
