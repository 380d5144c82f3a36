"""Command-line interface for parsing ingredient lines.

Run with: ingredient-normalizer "1 cup / 120 g flour, sifted"
Or:       ingredient-normalizer --file lines.txt --json
Or:       ingredient-normalizer --recipe scraped.json
"""

import argparse
import sys
from pathlib import Path

from ingredient_normalizer.codec import ingredients_to_json
from ingredient_normalizer.config import get_settings
from ingredient_normalizer.formatting import render_ingredient, use_color
from ingredient_normalizer.logging_config import configure_logging, get_logger
from ingredient_normalizer.parsing import ParseOptions
from ingredient_normalizer.recipes import ScrapedRecipe, parse_lines, parse_recipe

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="ingredient-normalizer",
        description="Parse recipe ingredient lines into name, amounts and modifier",
    )
    parser.add_argument("lines", nargs="*", help="Ingredient lines to parse")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file", "-f", type=str, help="Read one ingredient per line from a file ('-' for stdin)"
    )
    source.add_argument("--recipe", type=str, help="Parse a scraped recipe JSON document")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default=settings.color,
        help="Colorize text output",
    )
    parser.add_argument(
        "--verbose-errors",
        action=argparse.BooleanOptionalAction,
        default=settings.verbose_errors,
        help="Show the grammar trace for lines that fail",
    )
    parser.add_argument(
        "--strict-fractions",
        action=argparse.BooleanOptionalAction,
        default=settings.strict_fractions,
        help="Reject unknown vulgar fraction characters",
    )
    parser.add_argument(
        "--keep-estimates",
        action=argparse.BooleanOptionalAction,
        default=settings.keep_estimates,
        help="Mark 'about' amounts as approximate",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    return parser


def read_lines(path: str) -> list[str]:
    """Read non-blank lines from ``path``, or stdin for ``-``."""
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    return [line for line in text.splitlines() if line.strip()]


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(log_level=args.log_level)

    options = ParseOptions(
        strict_fractions=args.strict_fractions,
        keep_estimates=args.keep_estimates,
    )

    if args.recipe:
        recipe = ScrapedRecipe.model_validate_json(Path(args.recipe).read_text(encoding="utf-8"))
        parsed = parse_recipe(recipe, verbose=args.verbose_errors, options=options)
        ingredients, failures = parsed.ingredients, parsed.failures
        if args.json:
            print(parsed.model_dump_json(indent=2))
    else:
        lines = read_lines(args.file) if args.file else args.lines
        if not lines and not sys.stdin.isatty():
            lines = read_lines("-")
        ingredients, failures = parse_lines(lines, verbose=args.verbose_errors, options=options)
        if args.json:
            print(ingredients_to_json(ingredients, indent=2))

    if not args.json:
        color = use_color(sys.stdout, args.color)
        for ingredient in ingredients:
            print(render_ingredient(ingredient, color=color))

    for failure in failures:
        print(failure.message, file=sys.stderr)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
