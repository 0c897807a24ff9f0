"""
CSS color value parsing.

Classifies a raw custom-property value and parses it into a Color:

- Hex: ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``
- ``rgb()`` / ``rgba()``, legacy comma or modern space syntax
- ``hsl()`` / ``hsla()``, plus the Tailwind v3 bare triplet ``240 5.9% 10%``
- ``oklch()`` (Tailwind v4)

Anything else comes back as OpaqueValue so shadows, ``var()`` references and
named colors pass through untouched. A value that clearly uses one of the
grammars above but is malformed raises ColorParseError.
"""

from __future__ import annotations

import math
import re

from .errors import ColorParseError
from .ir.color import Color, HexColor, HslColor, OklchColor, OpaqueValue, RgbColor

_HEX = re.compile(r"^#([0-9a-fA-F]+)$")
_FUNCTION = re.compile(r"^([a-zA-Z-]+)\((.*)\)$", re.DOTALL)
_NUMBER = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)([a-zA-Z%]*)$")
_BARE_HSL = re.compile(
    r"^(\S+)\s+(\S+%)\s+(\S+%)(?:\s*/\s*(\S+))?$",
)

# Multipliers from each angle unit to degrees
_ANGLE_UNITS: dict[str, float] = {
    "": 1.0,
    "deg": 1.0,
    "grad": 360.0 / 400.0,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}

# oklch() chroma percentage reference: 100% == 0.4
_OKLCH_CHROMA_PERCENT_REF = 0.4

# oklch() chroma is clamped to this
_OKLCH_MAX_CHROMA = 0.5

_COLOR_FUNCTIONS = ("rgb", "rgba", "hsl", "hsla", "oklch")


# =============================================================================
# Number and component parsing
# =============================================================================


def _parse_number(token: str) -> tuple[float, str]:
    """Parse ``12.5%`` style tokens into ``(12.5, "%")``.

    ``none`` reads as zero, as in CSS Color 4.
    """
    if token.lower() == "none":
        return 0.0, ""
    match = _NUMBER.match(token)
    if not match:
        raise ColorParseError(f"Invalid number: {token!r}")
    value = float(match.group(1))
    if not math.isfinite(value):
        raise ColorParseError(f"Invalid number: {token!r}")
    return value, match.group(2).lower()


def _parse_alpha(token: str) -> float:
    value, unit = _parse_number(token)
    if unit == "%":
        value /= 100.0
    elif unit:
        raise ColorParseError(f"Invalid alpha unit: {token!r}")
    return min(1.0, max(0.0, value))


def _parse_hue(token: str) -> float:
    value, unit = _parse_number(token)
    factor = _ANGLE_UNITS.get(unit)
    if factor is None:
        raise ColorParseError(f"Invalid hue unit: {token!r}")
    degrees = value * factor
    if not math.isfinite(degrees):
        raise ColorParseError(f"Hue out of range: {token!r}")
    return degrees % 360.0


def _parse_rgb_channel(token: str) -> float:
    value, unit = _parse_number(token)
    if unit == "%":
        return value * 255.0 / 100.0
    if unit:
        raise ColorParseError(f"Invalid rgb channel: {token!r}")
    return value


def _parse_fraction(token: str) -> float:
    """Saturation/lightness: ``50%`` or a bare number.

    A bare number up to 1 is a fraction; larger bare numbers are read as a
    percentage number (``hsl(120 100 50)``).
    """
    value, unit = _parse_number(token)
    if unit == "%":
        value /= 100.0
    elif unit:
        raise ColorParseError(f"Invalid percentage: {token!r}")
    elif value > 1.0:
        value /= 100.0
    return min(1.0, max(0.0, value))


# =============================================================================
# Argument splitting
# =============================================================================


def _split_arguments(args: str) -> tuple[list[str], str | None]:
    """Split function arguments into channel tokens and an optional alpha.

    Accepts ``a, b, c[, alpha]`` and ``a b c[ / alpha]``; mixing commas
    with ``/`` is an error.
    """
    text = args.strip()
    if not text:
        raise ColorParseError("Empty color function")

    if "," in text:
        if "/" in text:
            raise ColorParseError(f"Mixed comma and slash syntax: {args!r}")
        parts = [part.strip() for part in text.split(",")]
        if any(not part for part in parts):
            raise ColorParseError(f"Empty argument in: {args!r}")
        if len(parts) == 4:
            return parts[:3], parts[3]
        return parts, None

    alpha: str | None = None
    if "/" in text:
        channels_text, _, alpha = text.partition("/")
        alpha = alpha.strip()
        if not alpha or "/" in alpha or len(alpha.split()) != 1:
            raise ColorParseError(f"Invalid alpha in: {args!r}")
        text = channels_text
    return text.split(), alpha


def _expect_three(channels: list[str], name: str) -> list[str]:
    if len(channels) != 3:
        raise ColorParseError(f"{name}() expects 3 channels, got {len(channels)}")
    return channels


# =============================================================================
# Grammar parsers
# =============================================================================


def _parse_hex(digits: str) -> HexColor:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        raise ColorParseError(f"Invalid hex color: #{digits}")
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
    return HexColor(r, g, b, a)


def _parse_rgb(args: str) -> RgbColor:
    channels, alpha = _split_arguments(args)
    r, g, b = (_parse_rgb_channel(token) for token in _expect_three(channels, "rgb"))
    return RgbColor(r, g, b, _parse_alpha(alpha) if alpha is not None else 1.0)


def _parse_hsl(args: str) -> HslColor:
    channels, alpha = _split_arguments(args)
    h, s, l = _expect_three(channels, "hsl")  # noqa: E741
    return HslColor(
        _parse_hue(h),
        _parse_fraction(s),
        _parse_fraction(l),
        _parse_alpha(alpha) if alpha is not None else 1.0,
    )


def _parse_oklch(args: str) -> OklchColor:
    channels, alpha = _split_arguments(args)
    if "," in args:
        raise ColorParseError("oklch() does not accept commas")
    l_token, c_token, h_token = _expect_three(channels, "oklch")

    lightness, unit = _parse_number(l_token)
    if unit == "%":
        lightness /= 100.0
    elif unit:
        raise ColorParseError(f"Invalid oklch lightness: {l_token!r}")

    chroma, unit = _parse_number(c_token)
    if unit == "%":
        chroma = chroma / 100.0 * _OKLCH_CHROMA_PERCENT_REF
    elif unit:
        raise ColorParseError(f"Invalid oklch chroma: {c_token!r}")

    return OklchColor(
        min(1.0, max(0.0, lightness)),
        min(_OKLCH_MAX_CHROMA, max(0.0, chroma)),
        _parse_hue(h_token),
        _parse_alpha(alpha) if alpha is not None else 1.0,
    )


def _is_balanced(value: str) -> bool:
    """True when parentheses balance and every string literal is closed."""
    depth = 0
    quote: str | None = None
    escaped = False
    for ch in value:
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0 and quote is None


def _is_single_color_call(match: re.Match[str]) -> bool:
    """True for ``rgb(...)`` style values with no nested calls.

    ``hsl(var(--h) 50% 50%)`` or ``rgb(...) 0 0 rgb(...)`` are left opaque.
    """
    if match.group(1).lower() not in _COLOR_FUNCTIONS:
        return False
    args = match.group(2)
    return "(" not in args and ")" not in args


def _is_angle(token: str) -> bool:
    match = _NUMBER.match(token)
    return match is not None and match.group(2).lower() in _ANGLE_UNITS


def parse_color(value: str) -> Color:
    """Parse a raw CSS value into a Color.

    Args:
        value: Custom-property value, e.g. ``oklch(0.95 0.02 250)``.

    Returns:
        HexColor, RgbColor, HslColor, OklchColor, or OpaqueValue for
        anything that is not one of those syntaxes.

    Raises:
        ColorParseError: If the value uses a color syntax but is malformed,
            or is not a syntactically valid CSS value at all.
    """
    text = value.strip()
    if not text:
        raise ColorParseError("Empty value")

    if text.startswith("#"):
        match = _HEX.match(text)
        if not match:
            raise ColorParseError(f"Invalid hex color: {text!r}")
        return _parse_hex(match.group(1))

    function = _FUNCTION.match(text)
    if function is not None and _is_single_color_call(function):
        name = function.group(1).lower()
        args = function.group(2)
        if name in ("rgb", "rgba"):
            return _parse_rgb(args)
        if name in ("hsl", "hsla"):
            return _parse_hsl(args)
        return _parse_oklch(args)

    bare = _BARE_HSL.match(text)
    if bare and _is_angle(bare.group(1)):
        h, s, l, alpha = bare.groups()  # noqa: E741
        return HslColor(
            _parse_hue(h),
            _parse_fraction(s),
            _parse_fraction(l),
            _parse_alpha(alpha) if alpha is not None else 1.0,
        )

    if not _is_balanced(text):
        raise ColorParseError(f"Unbalanced value: {text!r}")
    return OpaqueValue(text)
