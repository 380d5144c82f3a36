"""Render amounts and ingredients back to display text.

Rendering is not an inverse of parsing: ranges show their lower value only
and estimate flags are dropped. The colorized variants wrap the same layout
in ANSI escape codes for terminal output.
"""

import math
import sys
from typing import TextIO

from ingredient_normalizer.config import get_settings
from ingredient_normalizer.models import Amount, Ingredient

NO_AMOUNT = "n/a"
AMOUNT_JOINER = " / "

# ANSI SGR sequences
RESET = "\x1b[0m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
RED = "\x1b[31m"
MAGENTA = "\x1b[35m"
BOLD = "\x1b[1m"
ITALIC = "\x1b[3m"


def format_number(value: float) -> str:
    """Format a value without a trailing ``.0`` for whole numbers."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_amount(amount: Amount) -> str:
    """Render an amount as ``<value> <unit>``."""
    return f"{format_number(amount.value)} {amount.unit}"


def format_ingredient(ingredient: Ingredient) -> str:
    """Render an ingredient as ``<amounts> <name>[, <modifier>]``."""
    amounts = AMOUNT_JOINER.join(format_amount(a) for a in ingredient.amounts) or NO_AMOUNT
    modifier = f", {ingredient.modifier}" if ingredient.modifier is not None else ""
    return f"{amounts} {ingredient.name}{modifier}"


# =============================================================================
# Terminal colors
# =============================================================================


def _paint(text: str, *codes: str) -> str:
    return "".join(codes) + text + RESET


def colorize_amount(amount: Amount) -> str:
    """Render an amount with a green value and a yellow unit."""
    return f"{_paint(format_number(amount.value), GREEN)} {_paint(amount.unit, YELLOW)}"


def colorize_ingredient(ingredient: Ingredient) -> str:
    """Render an ingredient in color, laid out like :func:`format_ingredient`."""
    amounts = AMOUNT_JOINER.join(colorize_amount(a) for a in ingredient.amounts) or NO_AMOUNT
    name = _paint(ingredient.name, BOLD, MAGENTA)
    if ingredient.modifier is not None:
        return f"{amounts} {name}, {_paint(ingredient.modifier, ITALIC, RED)}"
    return f"{amounts} {name}"


def use_color(stream: TextIO | None = None, mode: str | None = None) -> bool:
    """
    Decide whether output to ``stream`` should be colorized.

    Args:
        stream: Output stream, defaults to stdout.
        mode: ``always``, ``never`` or ``auto``. Defaults to the ``color`` setting.
    """
    mode = mode or get_settings().color
    if mode == "always":
        return True
    if mode == "never":
        return False
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def render_ingredient(ingredient: Ingredient, color: bool = False) -> str:
    """Render with or without colors."""
    if color:
        return colorize_ingredient(ingredient)
    return format_ingredient(ingredient)
