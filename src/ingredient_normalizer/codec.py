"""JSON serialization of parsed ingredients."""

from typing import Any

from pydantic import TypeAdapter

from ingredient_normalizer.models import Ingredient

_ingredient_list = TypeAdapter(list[Ingredient])


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, Any]:
    """Convert an ingredient to JSON-compatible primitives."""
    return ingredient.model_dump(mode="json")


def ingredient_to_json(ingredient: Ingredient, indent: int | None = None) -> str:
    """Serialize an ingredient to a JSON document."""
    return ingredient.model_dump_json(indent=indent)


def ingredient_from_json(data: str | bytes) -> Ingredient:
    """
    Load an ingredient from JSON.

    Raises:
        pydantic.ValidationError: If the document does not describe an ingredient.
    """
    return Ingredient.model_validate_json(data)


def ingredients_to_json(ingredients: list[Ingredient], indent: int | None = None) -> str:
    """Serialize a list of ingredients to a JSON array."""
    return _ingredient_list.dump_json(ingredients, indent=indent).decode("utf-8")


def ingredients_from_json(data: str | bytes) -> list[Ingredient]:
    """Load a JSON array of ingredients."""
    return _ingredient_list.validate_json(data)
