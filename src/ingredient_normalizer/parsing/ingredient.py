"""Top-level ingredient-line grammar, normalization and public entry points."""

from dataclasses import dataclass

from ingredient_normalizer.config import get_settings
from ingredient_normalizer.errors import ErrorFrame, IngredientSyntaxError
from ingredient_normalizer.logging_config import get_logger
from ingredient_normalizer.models import Amount, Ingredient
from ingredient_normalizer.parsing.amounts import amount_group, amount_parens
from ingredient_normalizer.parsing.combinators import (
    ParseFailure,
    ParseOptions,
    Source,
    alpha1,
    alt,
    context,
    many1,
    opt,
    rest_of_line,
    sequence,
    space0,
    space1,
    tag,
)

logger = get_logger(__name__)

# Unit given to a bare count such as "1 egg"
WHOLE_UNIT = "whole"

MODIFIER_SEPARATOR = ", "

# Reported when parenthesized amounts nest deeper than the interpreter stack
TOO_DEEP = ErrorFrame(0, "amounts nested less deeply")


@dataclass(frozen=True)
class RawIngredient:
    """Direct result of the line grammar, before normalization."""

    name: str
    amounts: tuple[Amount, ...] = ()
    modifier: str = ""


_name_token = alt(alpha1, space1, tag("-"))

_line = sequence(
    opt(amount_group),  # "1 cup / 120 g"
    space0,
    opt(many1(_name_token)),  # name, can be multiple words
    opt(amount_parens),  # "(1½ sticks; 168.75g)" after the name
    opt(tag(MODIFIER_SEPARATOR)),
    rest_of_line,  # modifier, anything goes once past the comma
)


@context("ing")
def ingredient_line(source: Source, pos: int) -> tuple[int, RawIngredient]:
    """Parse a full ingredient line such as ``1 cup / 120 g flour, sifted``."""
    pos, (leading, _, name_chunks, trailing, _, modifier) = _line(source, pos)
    name = "".join(name_chunks).strip(" ") if name_chunks else ""
    amounts = (*(leading or ()), *(trailing or ()))
    return pos, RawIngredient(name=name, amounts=amounts, modifier=modifier)


def normalize(raw: RawIngredient) -> Ingredient:
    """
    Turn a raw parse into an Ingredient.

    A line with no name and exactly one amount, like ``1 egg``, has had its
    noun read as the unit: the unit becomes the name and the amount is
    counted as ``whole``. An empty modifier becomes None.
    """
    name = raw.name
    amounts = list(raw.amounts)
    if not name and len(amounts) == 1:
        name = amounts[0].unit
        amounts[0] = amounts[0].model_copy(update={"unit": WHOLE_UNIT})
    return Ingredient(name=name, amounts=tuple(amounts), modifier=raw.modifier or None)


def default_options() -> ParseOptions:
    """Build parse options from the configured settings."""
    settings = get_settings()
    return ParseOptions(
        strict_fractions=settings.strict_fractions,
        keep_estimates=settings.keep_estimates,
    )


def parse_ingredient_line(
    text: str,
    verbose: bool | None = None,
    options: ParseOptions | None = None,
) -> Ingredient:
    """
    Parse an ingredient line like ``120 grams / 1 cup whole wheat flour, sifted``.

    Supported shapes include ``1 g name``, ``1 g / 1g name, modifier``,
    ``1 g; 1 g name``, ``¼ g name``, ``1/4 g name``, ``1 ¼ g name``,
    ``1 1/4 g name``, ``1 g (1 g) name``, ``1 g name (about 1 g; 1 g)``,
    ``name`` and ``1 name``.

    Args:
        text: A single raw ingredient line.
        verbose: Include the grammar trace in errors. Defaults to the
            ``verbose_errors`` setting.
        options: Opt-in parsing behavior. Defaults to the configured settings.

    Returns:
        The parsed Ingredient.

    Raises:
        IngredientSyntaxError: If the line cannot be parsed.
    """
    if verbose is None:
        verbose = get_settings().verbose_errors
    source = Source(text, options or default_options())
    try:
        end, raw = ingredient_line(source, 0)
    except ParseFailure as exc:
        raise IngredientSyntaxError(text, exc.frames, verbose=verbose) from exc
    except RecursionError as exc:
        raise IngredientSyntaxError(text, [TOO_DEEP], verbose=verbose) from exc

    if end < len(text):
        logger.debug(f"Ignoring text after line ending: {text[end:]!r}")
    return normalize(raw)


def parse_amount_phrase(text: str, options: ParseOptions | None = None) -> list[Amount]:
    """
    Parse one or two amounts, e.g. ``12 grams`` or ``120 grams / 1 cup``.

    Raises:
        IngredientSyntaxError: If the text does not start with an amount.
    """
    source = Source(text, options or default_options())
    try:
        end, amounts = amount_group(source, 0)
    except ParseFailure as exc:
        raise IngredientSyntaxError(text, exc.frames) from exc
    except RecursionError as exc:
        raise IngredientSyntaxError(text, [TOO_DEEP]) from exc

    if end < len(text):
        logger.debug(f"Ignoring text after amounts: {text[end:]!r}")
    return amounts
