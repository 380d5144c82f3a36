"""Numeral and range rules: decimals, vulgar fractions, mixed numbers."""

import math

from ingredient_normalizer.logging_config import get_logger
from ingredient_normalizer.parsing.combinators import (
    ParseFailure,
    Source,
    alt,
    context,
    mapped,
    opt,
    pattern,
    satisfy,
    sequence,
    space0,
    space1,
    tag,
)

logger = get_logger(__name__)


# Glyphs with a known value. Anything else in the vulgar fraction blocks
# still parses, as 0.0 (or as an error with strict fractions).
VULGAR_FRACTIONS: dict[str, float] = {
    "¾": 3 / 4,
    "⅛": 1 / 8,
    "¼": 1 / 4,
    "⅓": 1 / 3,
    "½": 1 / 2,
}

# Optional sign, ASCII digits with an optional fraction (or ".5"), optional exponent
DECIMAL_PATTERN = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"


def is_vulgar_fraction(char: str) -> bool:
    """Check if ``char`` is in one of the two unicode vulgar fraction ranges."""
    return "¼" <= char <= "¾" or "⅐" <= char <= "⅞"


decimal = mapped(pattern(DECIMAL_PATTERN, "number"), float)

_glyph = satisfy(is_vulgar_fraction, "vulgar fraction")


@context("vulgar_fraction")
def vulgar_fraction(source: Source, pos: int) -> tuple[int, float]:
    """Parse a single fraction glyph such as ``¼``."""
    end, glyph = _glyph(source, pos)
    value = VULGAR_FRACTIONS.get(glyph)
    if value is None:
        if source.options.strict_fractions:
            raise ParseFailure.expected(pos, f"known vulgar fraction, got {glyph!r}", fatal=True)
        logger.debug(f"Unknown vulgar fraction {glyph!r} read as 0")
        value = 0.0
    return end, value


_slash = sequence(decimal, tag("/"))


@context("slash_fraction")
def slash_fraction(source: Source, pos: int) -> tuple[int, float]:
    """Parse ``a/b`` into ``a / b``."""
    pos, (numerator, _) = _slash(source, pos)
    end, denominator = decimal(source, pos)
    if denominator == 0:
        # x/0 is signed infinity, 0/0 is nan
        return end, math.copysign(math.inf, numerator) if numerator else math.nan
    return end, numerator / denominator


def _add_whole(parts: tuple) -> float:
    whole, fraction = parts
    return (whole[0] if whole else 0.0) + fraction


# "1 ⅛" / "1⅛" / "⅛", then "1 1/8" / "1/8"; the space before a slash
# fraction is required so "11/8" stays eleven eighths.
fraction_number = context(
    "fraction_number",
    alt(
        mapped(sequence(opt(sequence(decimal, space0)), vulgar_fraction), _add_whole),
        mapped(sequence(opt(sequence(decimal, space1)), slash_fraction), _add_whole),
    ),
)

text_number = context("text_number", mapped(tag("one"), lambda _: 1.0))

# Fractions first, otherwise "1 1/4" would stop after the "1"
numeral = context("numeral", alt(fraction_number, text_number, decimal))

_upper_bound = sequence(space0, tag("-"), space0, numeral)


@context("num_or_range")
def num_or_range(source: Source, pos: int) -> tuple[int, tuple[float, float | None]]:
    """Parse a value, or a ``low - high`` range."""
    pos, value = numeral(source, pos)
    pos, upper = opt(_upper_bound)(source, pos)
    return pos, (value, upper[3] if upper else None)
