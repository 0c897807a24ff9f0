"""Tests for custom-property name normalization."""

from __future__ import annotations

import pytest

from themeport.core.errors import ConfigError
from themeport.core.ir.tokens import THEME_TOKEN_KEYS
from themeport.core.token_aliases import (
    DEFAULT_ALIAS_TABLE,
    TokenAliasTable,
    normalize_token_name,
)


class TestNormalizeTokenName:
    def test_every_key_maps_to_itself(self):
        for key in THEME_TOKEN_KEYS:
            assert normalize_token_name(f"--{key}") == key

    def test_tailwind_v4_color_prefix(self):
        assert normalize_token_name("--color-background") == "background"
        assert normalize_token_name("--color-sidebar-foreground") == "sidebar-foreground"

    def test_short_aliases(self):
        assert normalize_token_name("--bg") == "background"
        assert normalize_token_name("--fg") == "foreground"
        assert normalize_token_name("--primary-fg") == "primary-foreground"
        assert normalize_token_name("--color-bg") == "background"

    def test_without_dashes_and_case(self):
        assert normalize_token_name("Background") == "background"

    def test_sidebar_background(self):
        assert normalize_token_name("--sidebar-background") == "sidebar"

    def test_unknown(self):
        assert normalize_token_name("--radius") is None
        assert normalize_token_name("--chart-1") is None


class TestTokenAliasTable:
    def test_is_a_mapping(self):
        assert DEFAULT_ALIAS_TABLE["color-ring"] == "ring"
        assert "bg" in DEFAULT_ALIAS_TABLE
        assert len(DEFAULT_ALIAS_TABLE) > len(THEME_TOKEN_KEYS)

    def test_extended_adds_aliases(self):
        table = DEFAULT_ALIAS_TABLE.extended({"--surface": "--card"})
        assert table.normalize("--surface") == "card"
        assert DEFAULT_ALIAS_TABLE.normalize("--surface") is None

    def test_extended_rejects_unknown_target(self):
        with pytest.raises(ConfigError, match="unknown token"):
            DEFAULT_ALIAS_TABLE.extended({"surface": "panel"})

    def test_custom_table(self):
        table = TokenAliasTable({"paper": "background"})
        assert table.normalize("--paper") == "background"
        assert table.normalize("--background") is None
