"""Normalize free-form recipe ingredient lines into structured values."""

from ingredient_normalizer.codec import (
    ingredient_from_json,
    ingredient_to_dict,
    ingredient_to_json,
    ingredients_from_json,
    ingredients_to_json,
)
from ingredient_normalizer.errors import ErrorFrame, IngredientSyntaxError
from ingredient_normalizer.formatting import (
    colorize_amount,
    colorize_ingredient,
    format_amount,
    format_ingredient,
)
from ingredient_normalizer.models import Amount, Ingredient
from ingredient_normalizer.parsing import ParseOptions, parse_amount_phrase, parse_ingredient_line

__all__ = [
    "Amount",
    "ErrorFrame",
    "Ingredient",
    "IngredientSyntaxError",
    "ParseOptions",
    "colorize_amount",
    "colorize_ingredient",
    "format_amount",
    "format_ingredient",
    "ingredient_from_json",
    "ingredient_to_dict",
    "ingredient_to_json",
    "ingredients_from_json",
    "ingredients_to_json",
    "parse_amount_phrase",
    "parse_ingredient_line",
]
