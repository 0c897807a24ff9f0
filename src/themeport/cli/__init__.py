"""
themeport CLI package.

- __init__.py: main app, ``parse`` and ``convert`` commands
- themes.py: saved theme commands
- utils.py: shared utilities
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from themeport.core.color_convert import css_to_hex
from themeport.core.color_parser import parse_color
from themeport.core.css_export import export_tokens_to_css
from themeport.core.css_import import parse_css_tokens
from themeport.core.errors import ColorParseError, ThemeportError
from themeport.core.ir.color import OpaqueValue
from themeport.core.ir.tokens import TOKEN_SECTIONS, ParseResult
from themeport.core.theme_store import add_theme

from .themes import themes_app
from .utils import (
    configure_logging,
    console,
    fail,
    get_version,
    load_cli_config,
    read_css_source,
    version_callback,
)

__version__ = get_version()

app = typer.Typer(
    help="""themeport - import CSS themes into light/dark theme tokens

Supports hex, rgb(), hsl(), Tailwind v3 bare HSL and Tailwind v4 oklch()
values inside :root and .dark blocks.
""",
    no_args_is_help=True,
)
app.add_typer(themes_app, name="themes")

_OUTPUT_FORMATS = ("table", "json", "css")


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log skipped and dropped declarations"
    ),
) -> None:
    """themeport CLI main callback for global options."""
    configure_logging(verbose)


def _print_table(result: ParseResult) -> None:
    table = Table(title="Imported Tokens")
    table.add_column("Token", style="cyan", no_wrap=True)
    table.add_column("Light")
    table.add_column("Light hex", no_wrap=True)
    table.add_column("Dark")
    table.add_column("Dark hex", no_wrap=True)

    for section in TOKEN_SECTIONS:
        for entry in section.tokens:
            light = result.light.get(entry.key)
            dark = result.dark.get(entry.key)
            if light is None and dark is None:
                continue
            table.add_row(
                entry.key,
                escape(light or "-"),
                (css_to_hex(light) if light else None) or "-",
                escape(dark or "-"),
                (css_to_hex(dark) if dark else None) or "-",
            )

    console.print(table)
    console.print(f"Imported {len(result.light)} light and {len(result.dark)} dark tokens")


@app.command(name="parse")
def parse_command(
    source: str = typer.Argument(..., help="CSS file to import, or '-' for stdin"),
    output_format: str = typer.Option(
        "table", "--format", "-f", help="Output format: table, json or css"
    ),
    with_defaults: bool = typer.Option(
        False, "--defaults", help="Fill missing tokens from the default palettes"
    ),
    save: str | None = typer.Option(
        None, "--save", help="Save the import as a custom theme with this name"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to themeport.toml"
    ),
) -> None:
    """Parse a CSS theme into light and dark tokens."""
    if output_format not in _OUTPUT_FORMATS:
        console.print(
            f"[red]Unknown format '{escape(output_format)}'. Use table, json or css.[/red]"
        )
        raise typer.Exit(2)

    config = load_cli_config(config_path)
    css = read_css_source(source)

    try:
        result = parse_css_tokens(css, config=config)
    except ThemeportError as e:
        fail(e)
    if with_defaults:
        result = result.with_defaults()

    if output_format == "json":
        typer.echo(json.dumps(result.model_dump(), indent=2))
    elif output_format == "css":
        typer.echo(export_tokens_to_css(result.light, result.dark), nl=False)
    else:
        _print_table(result)

    if save is not None:
        try:
            theme = add_theme(config.store.path, save, result.light, result.dark)
        except ThemeportError as e:
            fail(e)
        typer.echo(f"Saved theme '{theme.name}' ({theme.id})", err=True)


@app.command(name="convert")
def convert_command(
    value: str = typer.Argument(..., help="CSS color value, e.g. 'oklch(0.7 0.1 250)'"),
) -> None:
    """Show how a single CSS value parses and its sRGB hex."""
    try:
        color = parse_color(value)
    except ColorParseError as e:
        fail(e)

    if isinstance(color, OpaqueValue):
        console.print(f"{escape(value)}: not a color (passed through unchanged)")
        return
    console.print(f"{type(color).__name__}: {escape(repr(color))}")
    typer.echo(css_to_hex(value))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
