"""
themeport - CSS theme import and color-space conversion.

Parses pasted CSS themes (hex, rgb, hsl, Tailwind v3 HSL, Tailwind v4
OKLCH) into light and dark theme-token maps.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import ir
from .core.css_import import parse, parse_css_tokens
from .core.errors import NoRecognizedBlockError, ThemeportError
from .core.ir import ParseResult


def _get_version() -> str:
    """Installed package version, or the source checkout's pyproject.toml version."""
    try:
        return _metadata_version("themeport")
    except PackageNotFoundError:
        pass

    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if re.search(r'^name\s*=\s*["\']themeport["\']', content, re.MULTILINE) and (
            match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
        ):
            return match.group(1)
    return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "parse",
    "parse_css_tokens",
    "ParseResult",
    "NoRecognizedBlockError",
    "ThemeportError",
]
