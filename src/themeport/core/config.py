"""
themeport.toml configuration.

All settings are optional; a missing file means defaults::

    [import]
    light_selectors = [":root"]
    dark_selectors = [".dark", '[data-theme="dark"]']

    [aliases]
    surface = "card"

    [store]
    path = "themes.yaml"
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .css_blocks import DEFAULT_DARK_SELECTORS, DEFAULT_LIGHT_SELECTORS
from .errors import ConfigError
from .token_aliases import DEFAULT_ALIAS_TABLE, TokenAliasTable

logger = logging.getLogger(__name__)

CONFIG_FILE = "themeport.toml"
DEFAULT_STORE_FILE = "themes.yaml"


@dataclass
class ImportConfig:
    """Which selector blocks count as the light and dark scopes."""

    light_selectors: list[str] = field(default_factory=lambda: list(DEFAULT_LIGHT_SELECTORS))
    dark_selectors: list[str] = field(default_factory=lambda: list(DEFAULT_DARK_SELECTORS))


@dataclass
class StoreConfig:
    """Where saved custom themes live."""

    path: Path = field(default_factory=lambda: Path(DEFAULT_STORE_FILE))


@dataclass
class ThemeportConfig:
    """Top-level configuration."""

    import_: ImportConfig = field(default_factory=ImportConfig)
    aliases: dict[str, str] = field(default_factory=dict)
    store: StoreConfig = field(default_factory=StoreConfig)

    def alias_table(self) -> TokenAliasTable:
        """Default alias table extended with configured aliases."""
        if not self.aliases:
            return DEFAULT_ALIAS_TABLE
        return DEFAULT_ALIAS_TABLE.extended(self.aliases)


def _string_list(data: dict[str, Any], key: str, default: list[str]) -> list[str]:
    value = data.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"[import].{key} must be a list of strings")
    if not value:
        raise ConfigError(f"[import].{key} must not be empty")
    return value


def parse_config(data: dict[str, Any], base_dir: Path | None = None) -> ThemeportConfig:
    """Build a ThemeportConfig from decoded TOML data.

    Args:
        data: Decoded TOML document.
        base_dir: Directory relative store paths resolve against.

    Raises:
        ConfigError: On wrong types or aliases to unknown tokens.
    """
    import_data = data.get("import", {})
    alias_data = data.get("aliases", {})
    store_data = data.get("store", {})
    for section, value in (("import", import_data), ("aliases", alias_data), ("store", store_data)):
        if not isinstance(value, dict):
            raise ConfigError(f"[{section}] must be a table")

    defaults = ImportConfig()
    import_config = ImportConfig(
        light_selectors=_string_list(import_data, "light_selectors", defaults.light_selectors),
        dark_selectors=_string_list(import_data, "dark_selectors", defaults.dark_selectors),
    )

    if not all(isinstance(v, str) for v in alias_data.values()):
        raise ConfigError("[aliases] values must be token names")
    aliases = dict(alias_data)

    store_path = store_data.get("path", DEFAULT_STORE_FILE)
    if not isinstance(store_path, str):
        raise ConfigError("[store].path must be a string")
    path = Path(store_path).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path

    config = ThemeportConfig(import_=import_config, aliases=aliases, store=StoreConfig(path=path))
    # Fail early on bad alias targets
    config.alias_table()
    return config


def find_config(start: Path | None = None) -> Path | None:
    """Search ``start`` and its parents for themeport.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None) -> ThemeportConfig:
    """Load configuration from ``path``, or discover themeport.toml.

    Args:
        path: Explicit config file. When None the current directory and its
            parents are searched; defaults are used if nothing is found.

    Raises:
        ConfigError: If an explicit path is missing or any file is invalid.
    """
    if path is None:
        path = find_config()
        if path is None:
            logger.debug("No themeport.toml found, using defaults")
            return ThemeportConfig()
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file is not valid UTF-8: {path}") from e

    logger.debug(f"Loaded config from {path}")
    return parse_config(data, base_dir=path.parent)
