"""Grammar for ingredient lines and amount phrases."""

from ingredient_normalizer.parsing.combinators import ParseFailure, ParseOptions, Source
from ingredient_normalizer.parsing.ingredient import (
    RawIngredient,
    normalize,
    parse_amount_phrase,
    parse_ingredient_line,
)

__all__ = [
    "ParseFailure",
    "ParseOptions",
    "RawIngredient",
    "Source",
    "normalize",
    "parse_amount_phrase",
    "parse_ingredient_line",
]
