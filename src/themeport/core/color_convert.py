"""
Color-space conversion to sRGB hex.

Native color-picker inputs only accept ``#rrggbb``, so every parsed color
can be rendered as hex here. The hex form is a read-side view for the
picker; stored token values always keep the authored CSS string.

OKLCH goes through OKLab and linear sRGB using Björn Ottosson's reference
matrices. Out-of-gamut channels are clamped per channel to [0, 1], not
gamut-mapped.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from .color_parser import parse_color
from .errors import ColorParseError
from .ir.color import Color, HexColor, HslColor, OklchColor, OpaqueValue, RgbColor

logger = logging.getLogger(__name__)

PICKER_FALLBACK = "#000000"

# OKLab -> LMS' (non-linear cone response)
_OKLAB_TO_LMS: tuple[tuple[float, float, float], ...] = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS (after cubing) -> linear sRGB
_LMS_TO_LINEAR_SRGB: tuple[tuple[float, float, float], ...] = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(high, max(low, value))


def _to_byte(channel: float) -> int:
    """Round a 0-255 channel half-up and clamp it."""
    return int(math.floor(_clamp(channel, 0.0, 255.0) + 0.5))


def _format_hex(r: float, g: float, b: float, a: float = 1.0) -> str:
    """Format 0-255 channels as ``#rrggbb``, or ``#rrggbbaa`` when ``a < 1``."""
    text = f"#{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"
    if a < 1.0:
        text += f"{_to_byte(a * 255.0):02x}"
    return text


# =============================================================================
# Conversions
# =============================================================================


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert HSL (degrees, 0-1, 0-1) to RGB fractions (0-1)."""
    h = h % 360.0
    s = _clamp(s)
    l = _clamp(l)  # noqa: E741
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    x = chroma * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = l - chroma / 2.0

    if h < 60:
        r, g, b = chroma, x, 0.0
    elif h < 120:
        r, g, b = x, chroma, 0.0
    elif h < 180:
        r, g, b = 0.0, chroma, x
    elif h < 240:
        r, g, b = 0.0, x, chroma
    elif h < 300:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def _dot(row: tuple[float, float, float], vector: Sequence[float]) -> float:
    return sum(coef * comp for coef, comp in zip(row, vector, strict=True))


def _srgb_encode(linear: float) -> float:
    """sRGB transfer function, on a channel already clamped to [0, 1]."""
    if linear <= 0.0031308:
        return 12.92 * linear
    return 1.055 * linear ** (1.0 / 2.4) - 0.055


def oklch_to_rgb(l: float, c: float, h: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert OKLCH to gamma-encoded sRGB fractions, clamped to [0, 1].

    Args:
        l: Lightness (0-1).
        c: Chroma (>= 0).
        h: Hue in degrees.

    Returns:
        ``(r, g, b)`` each in [0, 1].
    """
    h_rad = math.radians(h)
    lab = (l, c * math.cos(h_rad), c * math.sin(h_rad))

    lms = [_dot(row, lab) ** 3 for row in _OKLAB_TO_LMS]
    linear = [_dot(row, lms) for row in _LMS_TO_LINEAR_SRGB]

    r, g, b = (_clamp(_srgb_encode(_clamp(channel))) for channel in linear)
    return r, g, b


def to_hex(color: Color) -> str | None:
    """Render a parsed color as sRGB hex.

    Returns:
        ``#rrggbb`` or ``#rrggbbaa`` (alpha < 1), or None for OpaqueValue.
    """
    match color:
        case HexColor(r, g, b, a) | RgbColor(r, g, b, a):
            return _format_hex(r, g, b, a)
        case HslColor(h, s, l, a):
            r, g, b = hsl_to_rgb(h, s, l)
            return _format_hex(r * 255.0, g * 255.0, b * 255.0, a)
        case OklchColor(l, c, h, a):
            r, g, b = oklch_to_rgb(l, c, h)
            return _format_hex(r * 255.0, g * 255.0, b * 255.0, a)
        case OpaqueValue():
            return None


def css_to_hex(value: str) -> str | None:
    """Parse a CSS value and render it as hex; None when not a color."""
    try:
        return to_hex(parse_color(value))
    except ColorParseError:
        return None
    except (OverflowError, ValueError) as e:
        logger.warning(f"Cannot convert {value!r} to hex: {e}")
        return None


def picker_hex(value: str, fallback: str = PICKER_FALLBACK) -> str:
    """``#rrggbb`` for a native color-picker input.

    Alpha is dropped (pickers have no alpha channel); values that are not
    colors show ``fallback``.
    """
    hex_value = css_to_hex(value)
    if hex_value is None:
        return fallback
    return hex_value[:7]


# =============================================================================
# Dual view of a token value
# =============================================================================


@dataclass(frozen=True)
class TokenValue:
    """A stored token value with its two derived views.

    ``css`` is what gets applied to the document and saved; ``hex`` and
    ``picker`` exist only for the editor's color input. Both are computed
    from ``raw`` on demand.
    """

    raw: str

    @property
    def css(self) -> str:
        return self.raw

    @property
    def color(self) -> Color | None:
        try:
            return parse_color(self.raw)
        except ColorParseError:
            return None

    @property
    def is_color(self) -> bool:
        color = self.color
        return color is not None and not isinstance(color, OpaqueValue)

    @property
    def hex(self) -> str | None:
        return css_to_hex(self.raw)

    @property
    def picker(self) -> str:
        return picker_hex(self.raw)
