"""Tests for value types and their JSON serialization."""

import json
import math

import pytest
from pydantic import ValidationError

from ingredient_normalizer import (
    Amount,
    Ingredient,
    ParseOptions,
    ingredient_from_json,
    ingredient_to_dict,
    ingredient_to_json,
    ingredients_from_json,
    ingredients_to_json,
    parse_ingredient_line,
)


class TestValueTypes:
    """Tests for Amount and Ingredient as immutable values."""

    def test_structural_equality(self):
        """Test values compare by content."""
        assert Amount.of("cups", 1.0) == Amount(unit="cups", value=1.0, upper_value=None)
        assert Amount.of("cups", 1.0) != Amount.ranged("cups", 1.0, 2.0)

    def test_amount_is_frozen(self):
        """Test that amounts cannot be changed after construction."""
        amount = Amount.of("cups", 1.0)
        with pytest.raises(ValidationError):
            amount.unit = "grams"

    def test_ingredient_is_frozen(self):
        """Test that ingredients cannot be changed after construction."""
        ingredient = Ingredient(name="flour", amounts=[Amount.of("cup", 1.0)])
        with pytest.raises(ValidationError):
            ingredient.name = "sugar"
        with pytest.raises(AttributeError):
            ingredient.amounts.append(Amount.of("g", 5.0))
        assert ingredient.amounts == (Amount.of("cup", 1.0),)
        assert str(ingredient) == "1 cup flour"

    def test_values_are_hashable(self):
        """Test equal ingredients hash equally and work as set members."""
        first = parse_ingredient_line("1 cup (125 g) flour, sifted")
        second = parse_ingredient_line("1 cup (125 g) flour, sifted")
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_defaults(self):
        """Test the optional fields default to absent."""
        ingredient = Ingredient(name="egg")
        assert ingredient.amounts == ()
        assert ingredient.modifier is None


class TestSerialization:
    """Tests for dict and JSON conversion."""

    def test_to_dict(self):
        """Test the dict layout of a parsed ingredient."""
        ingredient = parse_ingredient_line("1-2 cups flour, sifted")
        assert ingredient_to_dict(ingredient) == {
            "name": "flour",
            "amounts": [{"unit": "cups", "value": 1.0, "upper_value": 2.0}],
            "modifier": "sifted",
        }

    def test_approximate_only_when_set(self):
        """Test the estimate flag is serialized only when it is true."""
        ingredient = parse_ingredient_line(
            "about 2 cups stock", options=ParseOptions(keep_estimates=True)
        )
        assert ingredient_to_dict(ingredient)["amounts"] == [
            {"unit": "cups", "value": 2.0, "upper_value": None, "approximate": True}
        ]

    def test_json_round_trip(self):
        """Test an ingredient survives JSON serialization."""
        ingredient = parse_ingredient_line("6 ounces unsalted butter (1½ sticks; 168.75g)")
        document = ingredient_to_json(ingredient)
        assert json.loads(document)["name"] == "unsalted butter"
        assert ingredient_from_json(document) == ingredient

    def test_non_finite_round_trip(self):
        """Test infinite values are written as JSON constants and read back."""
        ingredient = parse_ingredient_line("1e400 cups flour, or -1e400")
        assert ingredient.amounts[0].value == math.inf
        document = ingredient_to_json(ingredient)
        assert "Infinity" in document
        assert ingredient_from_json(document) == ingredient

        counted = parse_ingredient_line("-1/0 eggs")
        assert counted.amounts == (Amount.of("whole", -math.inf),)
        assert ingredient_from_json(ingredient_to_json(counted)) == counted

    def test_list_serialization(self, sample_lines):
        """Test a batch of ingredients serializes as a JSON array."""
        ingredients = [parse_ingredient_line(line) for line in sample_lines]
        document = ingredients_to_json(ingredients)
        assert [item["name"] for item in json.loads(document)] == [
            "flour",
            "unsalted butter",
            "instant or rapid rise yeast",
            "egg",
            "salt",
        ]
        assert ingredients_from_json(document) == ingredients

    def test_invalid_document(self):
        """Test that documents missing required fields are rejected."""
        with pytest.raises(ValidationError):
            ingredient_from_json('{"amounts": []}')
        with pytest.raises(ValidationError):
            ingredient_from_json('{"name": "flour", "amounts": [{"unit": "cups"}]}')
