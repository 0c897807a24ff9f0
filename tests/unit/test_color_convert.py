"""Tests for color-space conversion to hex."""

from __future__ import annotations

import pytest

from themeport.core.color_convert import (
    PICKER_FALLBACK,
    TokenValue,
    css_to_hex,
    hsl_to_rgb,
    oklch_to_rgb,
    picker_hex,
    to_hex,
)
from themeport.core.ir.color import HslColor, OklchColor, OpaqueValue, RgbColor


class TestHslToRgb:
    @pytest.mark.parametrize(
        "h,expected",
        [
            (0, (1.0, 0.0, 0.0)),
            (120, (0.0, 1.0, 0.0)),
            (240, (0.0, 0.0, 1.0)),
            (60, (1.0, 1.0, 0.0)),
            (360, (1.0, 0.0, 0.0)),
        ],
    )
    def test_primary_hues(self, h, expected):
        assert hsl_to_rgb(h, 1.0, 0.5) == pytest.approx(expected)

    def test_grey_ignores_hue(self):
        assert hsl_to_rgb(200, 0.0, 0.5) == pytest.approx((0.5, 0.5, 0.5))


class TestOklchToRgb:
    def test_white(self):
        assert oklch_to_rgb(1.0, 0.0, 0.0) == pytest.approx((1.0, 1.0, 1.0), abs=1e-6)

    def test_black(self):
        assert oklch_to_rgb(0.0, 0.0, 0.0) == pytest.approx((0.0, 0.0, 0.0))

    def test_chromatic_anchor(self):
        assert css_to_hex("oklch(0.62796 0.25768 29.2339)") == "#ff0000"

    def test_out_of_gamut_is_clamped(self):
        r, g, b = oklch_to_rgb(0.7, 0.4, 150)
        for channel in (r, g, b):
            assert 0.0 <= channel <= 1.0


class TestToHex:
    def test_hsl_anchors(self):
        assert css_to_hex("hsl(0, 100%, 50%)") == "#ff0000"
        assert css_to_hex("hsl(120, 100%, 50%)") == "#00ff00"
        assert css_to_hex("0 0% 100%") == "#ffffff"

    def test_oklch_white_and_black(self):
        assert css_to_hex("oklch(1 0 0)") == "#ffffff"
        assert css_to_hex("oklch(0 0 0)") == "#000000"

    def test_oklch_neutral_grey(self):
        # Achromatic: all three channels equal
        hex_value = css_to_hex("oklch(0.5 0 0)")
        assert hex_value is not None
        assert hex_value[1:3] == hex_value[3:5] == hex_value[5:7]

    def test_hex_normalized_to_lowercase_six_digits(self):
        assert css_to_hex("#ABC") == "#aabbcc"

    def test_alpha_appended_when_translucent(self):
        assert css_to_hex("rgba(0, 0, 0, 0.5)") == "#00000080"
        assert css_to_hex("oklch(1 0 0 / 10%)") == "#ffffff1a"

    def test_opaque_alpha_omitted(self):
        assert css_to_hex("rgb(0 0 0 / 1)") == "#000000"

    def test_half_rounds_up(self):
        assert to_hex(RgbColor(127.5, 0, 0)) == "#800000"

    def test_channels_clamped(self):
        assert to_hex(RgbColor(300, -5, 0)) == "#ff0000"

    def test_dataclass_inputs(self):
        assert to_hex(HslColor(240.0, 1.0, 0.5)) == "#0000ff"
        assert to_hex(OklchColor(1.0, 0.0, 0.0)) == "#ffffff"

    def test_opaque_has_no_hex(self):
        assert to_hex(OpaqueValue("var(--x)")) is None
        assert css_to_hex("0 0 0 2px rgba(0, 0, 0, 0.2)") is None

    def test_malformed_has_no_hex(self):
        assert css_to_hex("hsl(abc, 10%, 10%)") is None

    def test_extreme_values_still_give_hex(self):
        hex_value = css_to_hex("oklch(0.5 1e200 0)")
        assert hex_value is not None
        assert len(hex_value) == 7
        assert css_to_hex("hsl(1e308rad 50% 50%)") is None

    def test_conversion_overflow_gives_no_hex(self, monkeypatch):
        def overflow(*args):
            raise OverflowError("Numerical result out of range")

        monkeypatch.setattr("themeport.core.color_convert.oklch_to_rgb", overflow)
        assert css_to_hex("oklch(0.5 0.1 0)") is None
        assert picker_hex("oklch(0.5 0.1 0)") == PICKER_FALLBACK


class TestPickerHex:
    def test_drops_alpha(self):
        assert picker_hex("#ff000080") == "#ff0000"

    def test_non_color_falls_back(self):
        assert picker_hex("0 0 0 2px red") == PICKER_FALLBACK == "#000000"

    def test_custom_fallback(self):
        assert picker_hex("var(--x)", fallback="#ffffff") == "#ffffff"


class TestTokenValue:
    def test_raw_value_preserved(self):
        value = TokenValue("oklch(0.985 0 0)")
        assert value.css == "oklch(0.985 0 0)"
        assert value.is_color
        assert value.hex is not None
        assert value.hex.startswith("#")
        assert value.picker == value.hex[:7]

    def test_shadow_is_not_a_color(self):
        value = TokenValue("0 0 0 2px rgba(24, 24, 27, 0.25)")
        assert not value.is_color
        assert value.hex is None
        assert value.picker == "#000000"
        assert isinstance(value.color, OpaqueValue)

    def test_malformed_value(self):
        value = TokenValue("#12345")
        assert value.color is None
        assert not value.is_color
