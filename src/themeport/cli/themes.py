"""
Saved theme CLI commands.

Commands for managing custom themes in the themes file:
- list: Show saved themes
- show: Print one theme as JSON
- export: Render one theme as CSS
- delete: Remove a theme
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from themeport.core.css_export import export_css_file, export_tokens_to_css
from themeport.core.errors import ThemeStoreError
from themeport.core.theme_store import delete_theme, get_theme, load_themes

from .utils import console, fail, load_cli_config

themes_app = typer.Typer(help="Manage saved custom themes", no_args_is_help=True)

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to themeport.toml")
_STORE_OPTION = typer.Option(None, "--store", help="Themes file (overrides config)")


def _store_path(config_path: Path | None, store: Path | None) -> Path:
    if store is not None:
        return store
    return load_cli_config(config_path).store.path


@themes_app.command(name="list")
def list_command(
    config_path: Path | None = _CONFIG_OPTION,
    store: Path | None = _STORE_OPTION,
) -> None:
    """List saved themes."""
    try:
        themes = load_themes(_store_path(config_path, store))
    except ThemeStoreError as e:
        fail(e)

    if not themes:
        console.print("[yellow]No saved themes[/yellow]")
        return

    table = Table(title="Saved Themes")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Updated")
    for theme in themes:
        table.add_row(theme.id, escape(theme.name), theme.updated_at[:16].replace("T", " "))
    console.print(table)


@themes_app.command(name="show")
def show_command(
    theme_id: str = typer.Argument(..., help="Theme id or name"),
    config_path: Path | None = _CONFIG_OPTION,
    store: Path | None = _STORE_OPTION,
) -> None:
    """Print a saved theme as JSON."""
    try:
        theme = get_theme(_store_path(config_path, store), theme_id)
    except ThemeStoreError as e:
        fail(e)
    typer.echo(json.dumps(theme.model_dump(mode="json"), indent=2))


@themes_app.command(name="export")
def export_command(
    theme_id: str = typer.Argument(..., help="Theme id or name"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write CSS to this file"),
    config_path: Path | None = _CONFIG_OPTION,
    store: Path | None = _STORE_OPTION,
) -> None:
    """Render a saved theme as :root / .dark CSS."""
    try:
        theme = get_theme(_store_path(config_path, store), theme_id)
    except ThemeStoreError as e:
        fail(e)

    if output is None:
        typer.echo(export_tokens_to_css(theme.light, theme.dark), nl=False)
        return
    export_css_file(theme.light, theme.dark, output)
    console.print(f"[green]Exported '{escape(theme.name)}' to {output}[/green]")


@themes_app.command(name="delete")
def delete_command(
    theme_id: str = typer.Argument(..., help="Theme id or name"),
    config_path: Path | None = _CONFIG_OPTION,
    store: Path | None = _STORE_OPTION,
) -> None:
    """Delete a saved theme."""
    try:
        removed = delete_theme(_store_path(config_path, store), theme_id)
    except ThemeStoreError as e:
        fail(e)
    console.print(f"[green]Deleted theme '{escape(removed.name)}'[/green]")
