"""Parse the ingredient lines of a scraped recipe.

Fetching pages and extracting recipe markup happen upstream; this module
only consumes the extracted record and parses each raw line unmodified.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ingredient_normalizer.errors import IngredientSyntaxError
from ingredient_normalizer.logging_config import LoggingContext, get_logger
from ingredient_normalizer.models import Ingredient
from ingredient_normalizer.parsing import ParseOptions, parse_ingredient_line

logger = get_logger(__name__)


class ScrapedRecipe(BaseModel):
    """Recipe fields produced by the upstream page extractor."""

    name: str = Field(default="Untitled Recipe")
    url: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    image: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v: Any) -> str:
        """Ensure name is never None or empty."""
        if not v:
            return "Untitled Recipe"
        return str(v).strip()

    @field_validator("ingredients", "instructions", mode="before")
    @classmethod
    def coerce_lines(cls, v: Any) -> list[str]:
        """Accept a single string or null in place of a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class LineFailure(BaseModel):
    """An ingredient line that could not be parsed."""

    index: int
    line: str
    message: str
    excerpt: str


class ParsedRecipe(BaseModel):
    """A recipe with its ingredient lines parsed."""

    name: str
    url: str = ""
    ingredients: list[Ingredient] = Field(default_factory=list)
    failures: list[LineFailure] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    image: str | None = None

    @property
    def is_complete(self) -> bool:
        """Check if every ingredient line was parsed."""
        return not self.failures


def parse_lines(
    lines: list[str],
    verbose: bool | None = None,
    options: ParseOptions | None = None,
) -> tuple[list[Ingredient], list[LineFailure]]:
    """
    Parse a batch of ingredient lines, collecting failures instead of raising.

    Args:
        lines: Raw ingredient lines, in recipe order.
        verbose: Keep the full grammar trace in failure messages. Defaults to
            the ``verbose_errors`` setting.
        options: Opt-in parsing behavior.

    Returns:
        Tuple of (parsed ingredients, failures), each in input order.
    """
    ingredients: list[Ingredient] = []
    failures: list[LineFailure] = []

    for index, line in enumerate(lines):
        with LoggingContext(line=index):
            try:
                ingredients.append(parse_ingredient_line(line, verbose=verbose, options=options))
            except IngredientSyntaxError as e:
                logger.warning(f"Skipping unparseable ingredient line: {e}")
                failures.append(
                    LineFailure(index=index, line=line, message=str(e), excerpt=e.excerpt)
                )

    logger.debug(f"Parsed {len(ingredients)} of {len(lines)} ingredient lines")
    return ingredients, failures


def parse_recipe(
    recipe: ScrapedRecipe,
    verbose: bool | None = None,
    options: ParseOptions | None = None,
) -> ParsedRecipe:
    """Parse every ingredient line of ``recipe``."""
    with LoggingContext(source=recipe.url or recipe.name):
        ingredients, failures = parse_lines(recipe.ingredients, verbose=verbose, options=options)
        if failures:
            logger.info(f"{len(failures)} ingredient lines failed for '{recipe.name}'")

    return ParsedRecipe(
        name=recipe.name,
        url=recipe.url,
        ingredients=ingredients,
        failures=failures,
        instructions=recipe.instructions,
        image=recipe.image,
    )
