"""Tests for expense_calc.style."""

import pytest

from expense_calc.exceptions import UnknownThemeError
from expense_calc.style import PALETTES, build_stylesheet, palette_color, palette_for


class TestPalettes:
    """Both themes expose the same tokens with distinct series colours."""

    def test_same_tokens(self) -> None:
        assert PALETTES["light"].keys() == PALETTES["dark"].keys()

    @pytest.mark.parametrize("theme", ["light", "dark"])
    def test_series_are_distinct(self, theme) -> None:
        palette = palette_for(theme)
        colors = {palette["expenses"], palette["income"], palette["savings"]}
        assert len(colors) == 3

    def test_unknown_theme(self) -> None:
        with pytest.raises(UnknownThemeError):
            palette_for("sepia")

    def test_palette_color(self) -> None:
        assert palette_color("dark", "income").name() == PALETTES["dark"]["income"]


class TestStylesheet:
    """Tests for build_stylesheet."""

    def test_uses_theme_tokens(self) -> None:
        sheet = build_stylesheet("light")
        assert PALETTES["light"]["background"] in sheet
        assert PALETTES["light"]["button"] in sheet
        assert PALETTES["dark"]["input_bg"] not in sheet

    def test_themes_differ(self) -> None:
        assert build_stylesheet("light") != build_stylesheet("dark")
