"""Tests for CSS theme import."""

from __future__ import annotations

import logging

import pytest

from themeport.core.color_convert import css_to_hex
from themeport.core.config import ImportConfig, ThemeportConfig
from themeport.core.css_import import parse, parse_css_tokens
from themeport.core.errors import CssImportError, NoRecognizedBlockError
from themeport.core.ir.tokens import THEME_TOKEN_KEYS, ParseResult, ThemeVariant


class TestParseCssTokens:
    def test_tailwind_v3_hsl(self, shadcn_css):
        result = parse_css_tokens(shadcn_css)
        assert result.light["background"] == "0 0% 100%"
        assert result.light["primary-foreground"] == "0 0% 98%"
        assert result.dark["background"] == "240 10% 3.9%"
        assert "radius" not in result.light

    def test_tailwind_v4_oklch(self, tailwind_v4_css):
        result = parse_css_tokens(tailwind_v4_css)
        assert result.light == {
            "background": "oklch(1 0 0)",
            "foreground": "oklch(0.145 0 0)",
            "primary": "oklch(0.205 0 0)",
            "ring": "oklch(0.708 0 0)",
            "sidebar": "oklch(0.985 0 0)",
        }
        assert result.dark["border"] == "oklch(1 0 0 / 10%)"

    def test_theme_at_rule_ignored(self, tailwind_v4_css):
        result = parse_css_tokens(tailwind_v4_css)
        assert "var(" not in "".join(result.light.values())

    def test_hex_with_aliases(self, hex_css):
        result = parse_css_tokens(hex_css)
        assert result.light["background"] == "#ffffff"
        assert result.light["foreground"] == "#111"
        assert result.light["primary"] == "#3b82f6"
        assert result.dark == {"background": "#0a0a0a", "foreground": "#fafafa"}

    def test_raw_values_kept_not_hex(self, tailwind_v4_css):
        result = parse_css_tokens(tailwind_v4_css)
        assert result.light["background"] == "oklch(1 0 0)"
        assert css_to_hex(result.light["background"]) == "#ffffff"

    def test_shadow_passes_through(self, hex_css):
        result = parse_css_tokens(hex_css)
        assert result.light["shadow-focus"] == "0 0 0 3px rgba(59, 130, 246, 0.5)"

    def test_only_vocabulary_keys(self, shadcn_css, tailwind_v4_css, hex_css):
        for css in (shadcn_css, tailwind_v4_css, hex_css):
            result = parse_css_tokens(css)
            for tokens in (result.light, result.dark):
                assert set(tokens) <= set(THEME_TOKEN_KEYS)

    def test_deterministic(self, shadcn_css):
        assert parse_css_tokens(shadcn_css) == parse_css_tokens(shadcn_css)

    def test_last_declaration_wins(self):
        result = parse_css_tokens(":root { --primary: #111; --color-primary: #222; }")
        assert result.light == {"primary": "#222"}

    def test_bad_declaration_dropped_alone(self):
        css = ":root { --background: #fff; --primary: hsl(abc, 10%, 10%); --ring: #000; }"
        result = parse_css_tokens(css)
        assert result.light == {"background": "#fff", "ring": "#000"}

    def test_out_of_range_number_dropped_alone(self):
        css = (
            ":root { --primary: hsl(1e308rad 50% 50%); "
            "--accent: oklch(0.5 1e200 0); --ring: #000; }"
        )
        result = parse_css_tokens(css)
        assert result.light == {"accent": "oklch(0.5 1e200 0)", "ring": "#000"}
        assert css_to_hex(result.light["accent"]) is not None

    def test_bad_declaration_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="themeport.core.css_import"):
            parse_css_tokens(":root { --primary: #12345; }")
        assert "--primary" in caplog.text

    def test_missing_dark_block(self):
        result = parse_css_tokens(":root { --background: #fff; }")
        assert result.light == {"background": "#fff"}
        assert result.dark == {}

    def test_missing_light_block(self):
        result = parse_css_tokens(".dark { --background: #000; }")
        assert result.light == {}
        assert result.get(ThemeVariant.DARK) == {"background": "#000"}

    def test_empty_block_is_not_an_error(self):
        result = parse_css_tokens(":root { }")
        assert result.is_empty

    @pytest.mark.parametrize(
        "css",
        ["", "body { color: red; }", "@media (min-width: 1px) { :root { --a: #fff; } }"],
    )
    def test_no_recognized_block(self, css):
        with pytest.raises(NoRecognizedBlockError) as exc_info:
            parse_css_tokens(css)
        assert exc_info.value.message == "Failed to parse CSS. Check the format and try again."
        assert isinstance(exc_info.value, CssImportError)

    def test_important_and_comments(self):
        css = """
        :root {
          /* brand */
          --primary: #3b82f6 !important;
        }
        """
        assert parse_css_tokens(css).light == {"primary": "#3b82f6"}

    def test_custom_config(self):
        config = ThemeportConfig(
            import_=ImportConfig(light_selectors=[".day"], dark_selectors=[".night"]),
            aliases={"paper": "card"},
        )
        result = parse_css_tokens(".day { --paper: #fff; } .night { --paper: #000; }", config=config)
        assert result.light == {"card": "#fff"}
        assert result.dark == {"card": "#000"}

    def test_short_name(self):
        assert parse is parse_css_tokens


class TestParseResult:
    def test_with_defaults_fills_every_key(self):
        result = ParseResult(light={"primary": "#123456"}).with_defaults()
        assert set(result.light) == set(THEME_TOKEN_KEYS)
        assert set(result.dark) == set(THEME_TOKEN_KEYS)
        assert result.light["primary"] == "#123456"

    def test_frozen(self):
        from pydantic import ValidationError

        result = ParseResult()
        with pytest.raises(ValidationError):
            result.light = {}  # type: ignore[misc]
