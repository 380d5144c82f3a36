"""Tests for rendering amounts and ingredients."""

import io
import re

import pytest

from ingredient_normalizer import (
    Amount,
    Ingredient,
    colorize_amount,
    colorize_ingredient,
    format_amount,
    format_ingredient,
    parse_ingredient_line,
)
from ingredient_normalizer.formatting import format_number, render_ingredient, use_color

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class TestFormatNumber:
    """Tests for value formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [(12.0, "12"), (1.25, "1.25"), (155.5, "155.5"), (0.0, "0"), (0.125, "0.125")],
    )
    def test_values(self, value, expected):
        """Test whole numbers drop the fractional part."""
        assert format_number(value) == expected

    def test_non_finite(self):
        """Test that infinite values do not crash."""
        assert format_number(float("inf")) == "inf"


class TestPlainFormatting:
    """Tests for the plain text renderers."""

    def test_amount(self):
        """Test an amount renders as value and unit."""
        assert format_amount(Amount.of("cups", 12.0)) == "12 cups"
        assert str(Amount.of("grams", 155.5)) == "155.5 grams"

    def test_range_shows_lower_value(self):
        """Test that ranges render their lower value only."""
        assert format_amount(Amount.ranged("cups", 1.0, 2.0)) == "1 cups"

    def test_ingredient(self):
        """Test a parsed line renders back to display text."""
        assert format_ingredient(parse_ingredient_line("12 cups flour")) == "12 cups flour"
        assert f"res: {parse_ingredient_line('12 cups flour')}" == "res: 12 cups flour"

    def test_ingredient_with_several_amounts(self):
        """Test amounts are joined with slashes."""
        ingredient = parse_ingredient_line("1 cup (125.5 grams) AP flour, sifted")
        assert str(ingredient) == "1 cup / 125.5 grams AP flour, sifted"

    def test_bare_count(self):
        """Test a reclassified count renders as whole."""
        assert str(parse_ingredient_line("one whole egg")) == "1 whole egg"
        assert str(parse_ingredient_line("1 egg")) == "1 whole egg"

    def test_no_amounts(self):
        """Test the placeholder for ingredients without amounts."""
        assert format_ingredient(Ingredient(name="egg")) == "n/a egg"
        assert format_ingredient(Ingredient(name="salt", modifier="to taste")) == "n/a salt, to taste"


class TestColorFormatting:
    """Tests for the ANSI colored renderers."""

    def test_amount_colors(self):
        """Test value and unit get their own colors."""
        assert colorize_amount(Amount.of("cups", 2.0)) == "\x1b[32m2\x1b[0m \x1b[33mcups\x1b[0m"

    def test_same_layout_as_plain(self):
        """Test that stripping the colors gives the plain rendering."""
        for line in ["12 cups all purpose flour, lightly sifted", "egg", "1¼ cups / 155.5 g sugar"]:
            ingredient = parse_ingredient_line(line)
            colored = colorize_ingredient(ingredient)
            assert colored != format_ingredient(ingredient)
            assert ANSI_ESCAPE.sub("", colored) == format_ingredient(ingredient)

    def test_render_switch(self):
        """Test render_ingredient picks the renderer."""
        ingredient = Ingredient(name="egg")
        assert render_ingredient(ingredient) == "n/a egg"
        assert "\x1b[" in render_ingredient(ingredient, color=True)


class TestUseColor:
    """Tests for deciding when to colorize."""

    def test_explicit_modes(self):
        """Test always and never ignore the stream."""
        assert use_color(io.StringIO(), "always") is True
        assert use_color(io.StringIO(), "never") is False

    def test_auto_on_non_terminal(self):
        """Test auto mode stays plain when not writing to a terminal."""
        assert use_color(io.StringIO(), "auto") is False

    def test_mode_from_settings(self, monkeypatch):
        """Test the configured color mode is used by default."""
        from ingredient_normalizer.config import get_settings

        monkeypatch.setenv("INGREDIENT_COLOR", "always")
        get_settings.cache_clear()
        assert use_color(io.StringIO()) is True
