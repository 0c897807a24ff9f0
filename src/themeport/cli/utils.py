"""
themeport CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from themeport.core.config import ThemeportConfig, load_config
from themeport.core.errors import ThemeportError

console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    """Get themeport version from package metadata."""
    from themeport import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"themeport {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for a CLI run.

    ``--verbose`` forces DEBUG; otherwise ``THEMEPORT_LOG_LEVEL`` decides
    (default WARNING).
    """
    level_name = "DEBUG" if verbose else os.getenv("THEMEPORT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def read_css_source(source: str) -> str:
    """Read CSS text from a file path, or stdin when ``source`` is ``-``."""
    if source != "-" and not Path(source).is_file():
        console.print(f"[red]Error: File not found: {escape(source)}[/red]")
        raise typer.Exit(1)
    try:
        if source == "-":
            return sys.stdin.read()
        return Path(source).read_text(encoding="utf-8")
    except UnicodeDecodeError:
        console.print(f"[red]Error: {escape(source)} is not valid UTF-8 text[/red]")
        raise typer.Exit(1) from None


def load_cli_config(config_path: Path | None) -> ThemeportConfig:
    """Load configuration, turning config errors into a CLI exit."""
    try:
        return load_config(config_path)
    except ThemeportError as e:
        fail(e)


def fail(error: ThemeportError) -> NoReturn:
    """Print a themeport error and exit with status 1."""
    console.print(f"[red]{escape(error.message)}[/red]")
    raise typer.Exit(1)
