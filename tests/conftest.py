"""Pytest configuration and shared fixtures."""

import logging

import pytest

from ingredient_normalizer.config import get_settings
from ingredient_normalizer.recipes import ScrapedRecipe

SETTING_NAMES = [
    "INGREDIENT_LOG_LEVEL",
    "INGREDIENT_LOG_FORMAT",
    "INGREDIENT_VERBOSE_ERRORS",
    "INGREDIENT_STRICT_FRACTIONS",
    "INGREDIENT_KEEP_ESTIMATES",
    "INGREDIENT_COLOR",
]


# =============================================================================
# Settings and logging isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run every test against default settings, ignoring any local .env file."""
    for name in SETTING_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger("ingredient_normalizer").level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("ingredient_normalizer").setLevel(package_level)


# =============================================================================
# Sample data
# =============================================================================


@pytest.fixture
def sample_lines():
    """Ingredient lines as they appear on recipe pages."""
    return [
        "1¼  cups / 155.5 grams flour",
        "6 ounces unsalted butter (1½ sticks; 168.75g)",
        "0.25 ounces (1 packet, about 2 teaspoons) instant or rapid rise yeast",
        "1 egg",
        "salt, to taste",
    ]


@pytest.fixture
def scraped_recipe(sample_lines):
    """A recipe record as produced by the upstream page extractor."""
    return ScrapedRecipe(
        name="Sandwich Bread",
        url="https://example.com/recipes/sandwich-bread",
        ingredients=[*sample_lines[:2], "2 cups water\rwarm", *sample_lines[2:]],
        instructions=["Mix everything.", "Knead for 10 minutes.", "Bake at 190C."],
        image="https://example.com/images/bread.jpg",
    )
