"""
Saved custom themes.

Custom themes are kept in a YAML file (default ``themes.yaml``) as a list
under a ``themes`` key. Each entry holds complete light and dark palettes:
imported partial maps are merged over the defaults when a theme is created.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ThemeStoreError
from .ir.tokens import CustomTheme, ThemeVariant, default_tokens

logger = logging.getLogger(__name__)


# =============================================================================
# Loading and saving
# =============================================================================


def load_themes(path: Path) -> list[CustomTheme]:
    """Load saved themes.

    Args:
        path: Themes YAML file.

    Returns:
        Saved themes in file order; an empty list if the file does not exist.

    Raises:
        ThemeStoreError: If the file is not valid YAML or has a bad schema.
    """
    if not path.exists():
        logger.debug(f"No themes file at {path}")
        return []

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ThemeStoreError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ThemeStoreError(f"Themes file is not valid UTF-8: {path}") from e

    if not data:
        logger.warning(f"Empty themes file at {path}")
        return []
    if not isinstance(data, dict) or not isinstance(data.get("themes", []), list):
        raise ThemeStoreError(f"Expected a 'themes' list in {path}")

    try:
        return [CustomTheme(**entry) for entry in data.get("themes", [])]
    except (ValidationError, TypeError) as e:
        raise ThemeStoreError(f"Invalid theme entry in {path}: {e}") from e


def save_themes(path: Path, themes: list[CustomTheme]) -> Path:
    """Write ``themes`` to ``path``, replacing its contents.

    Returns:
        Path to the saved file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {"themes": [theme.model_dump(mode="json") for theme in themes]}
    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    logger.info(f"Saved {len(themes)} theme(s) to {path}")
    return path


# =============================================================================
# Operations
# =============================================================================


def create_theme(
    name: str,
    light: Mapping[str, str] | None = None,
    dark: Mapping[str, str] | None = None,
) -> CustomTheme:
    """Build a new theme, filling missing tokens from the defaults.

    Raises:
        ThemeStoreError: If ``name`` is blank.
    """
    name = name.strip()
    if not name:
        raise ThemeStoreError("Theme name must not be empty")

    full_light = default_tokens(ThemeVariant.LIGHT)
    full_light.update(light or {})
    full_dark = default_tokens(ThemeVariant.DARK)
    full_dark.update(dark or {})

    now = datetime.now(UTC).isoformat()
    return CustomTheme(
        id=str(uuid.uuid4()),
        name=name,
        light=full_light,
        dark=full_dark,
        created_at=now,
        updated_at=now,
    )


def add_theme(
    path: Path,
    name: str,
    light: Mapping[str, str] | None = None,
    dark: Mapping[str, str] | None = None,
) -> CustomTheme:
    """Create a theme and append it to the store."""
    theme = create_theme(name, light, dark)
    themes = load_themes(path)
    themes.append(theme)
    save_themes(path, themes)
    return theme


def get_theme(path: Path, id_or_name: str) -> CustomTheme:
    """Find a theme by id, or by name when no id matches.

    Raises:
        ThemeStoreError: If nothing matches.
    """
    themes = load_themes(path)
    for theme in themes:
        if theme.id == id_or_name:
            return theme
    for theme in themes:
        if theme.name == id_or_name:
            return theme
    raise ThemeStoreError(f"Theme not found: {id_or_name}")


def delete_theme(path: Path, id_or_name: str) -> CustomTheme:
    """Remove a theme from the store.

    Returns:
        The removed theme.

    Raises:
        ThemeStoreError: If nothing matches.
    """
    target = get_theme(path, id_or_name)
    remaining = [theme for theme in load_themes(path) if theme.id != target.id]
    save_themes(path, remaining)
    return target
