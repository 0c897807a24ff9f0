"""Tests for exporting theme tokens to CSS."""

from __future__ import annotations

from pathlib import Path

from themeport.core.css_export import export_css_file, export_tokens_to_css, render_block
from themeport.core.css_import import parse_css_tokens


class TestRenderBlock:
    def test_vocabulary_order(self):
        css = render_block(":root", {"ring": "#000", "background": "#fff"})
        assert css == ":root {\n  --background: #fff;\n  --ring: #000;\n}"

    def test_unknown_keys_last(self):
        css = render_block(".dark", {"zeta": "1", "alpha": "2", "primary": "#111"})
        assert css.splitlines()[1:4] == ["  --primary: #111;", "  --alpha: 2;", "  --zeta: 1;"]

    def test_empty(self):
        assert render_block(":root", {}) == ":root {\n}"


class TestExportTokensToCss:
    def test_layout(self):
        css = export_tokens_to_css({"background": "#fff"}, {"background": "#000"})
        assert css == ":root {\n  --background: #fff;\n}\n\n.dark {\n  --background: #000;\n}\n"

    def test_reimports_to_same_tokens(self, tailwind_v4_css):
        original = parse_css_tokens(tailwind_v4_css)
        exported = export_tokens_to_css(original.light, original.dark)
        assert parse_css_tokens(exported) == original

    def test_export_file(self, tmp_path: Path):
        output = export_css_file({"primary": "#111"}, {}, tmp_path / "out" / "theme.css")
        assert output.exists()
        assert "--primary: #111;" in output.read_text()
