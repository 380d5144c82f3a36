"""Amount rules: a single amount, two joined amounts, parenthesized groups."""

from ingredient_normalizer.models import Amount
from ingredient_normalizer.parsing.combinators import (
    Source,
    alpha1,
    alt,
    context,
    delimited,
    opt,
    sequence,
    space0,
    tag,
)
from ingredient_normalizer.parsing.numbers import num_or_range

# Longest first, so a lone space never splits a ", " or " / "
SEPARATORS: tuple[str, ...] = ("; ", " / ", " ", ", ", "/")

ESTIMATE_MARKER = "about "

_single = sequence(opt(tag(ESTIMATE_MARKER)), num_or_range, space0, alpha1)
_separator = alt(*(tag(sep) for sep in SEPARATORS))


@context("amount1")
def amount1(source: Source, pos: int) -> tuple[int, list[Amount]]:
    """Parse one amount, e.g. ``12 grams``, ``about 2 tsp`` or ``1-2 cups``."""
    pos, (marker, (value, upper), _, unit) = _single(source, pos)
    approximate = marker is not None and source.options.keep_estimates
    return pos, [Amount(unit=unit, value=value, upper_value=upper, approximate=approximate)]


@context("amount2")
def amount2(source: Source, pos: int) -> tuple[int, list[Amount]]:
    """Parse two amounts such as ``120 grams / 1 cup`` or ``1 cup (125 g)``."""
    pos, first = amount1(source, pos)
    pos, _ = _separator(source, pos)
    pos, second = _second_amount(source, pos)
    return pos, first + second


# Two amounts must be tried before one
amount_group = context("amount", alt(amount2, amount1))

amount_parens = context("amt_parens", delimited(tag("("), amount_group, tag(")")))

_second_amount = alt(amount_parens, amount1)
