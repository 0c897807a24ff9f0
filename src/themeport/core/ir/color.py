"""
Color IR types.

A parsed CSS color value is one of five variants. Each variant keeps the
numeric domain of the syntax it came from; conversion to sRGB hex happens
later in ``themeport.core.color_convert``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HexColor:
    """``#RRGGBB`` style color. Channels 0-255, alpha 0-1."""

    r: int
    g: int
    b: int
    a: float = 1.0


@dataclass(frozen=True)
class RgbColor:
    """``rgb()`` / ``rgba()`` color. Channels 0-255 (may be fractional), alpha 0-1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class HslColor:
    """``hsl()`` color or Tailwind v3 bare triplet.

    Hue in degrees [0, 360); saturation and lightness as 0-1 fractions.
    """

    h: float
    s: float
    l: float  # noqa: E741
    a: float = 1.0


@dataclass(frozen=True)
class OklchColor:
    """``oklch()`` color. Lightness 0-1, chroma >= 0, hue in degrees."""

    l: float  # noqa: E741
    c: float
    h: float
    a: float = 1.0


@dataclass(frozen=True)
class OpaqueValue:
    """A value that is not a recognized color syntax, kept verbatim."""

    raw: str


Color = HexColor | RgbColor | HslColor | OklchColor | OpaqueValue
