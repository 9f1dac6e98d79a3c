"""Reading recipe cards from photos."""

from recipebox.extraction.recipe_reader import (
    ExtractionError,
    ExtractionNotConfiguredError,
    extract_recipe,
    parse_recipe_reply,
)

__all__ = [
    "ExtractionError",
    "ExtractionNotConfiguredError",
    "extract_recipe",
    "parse_recipe_reply",
]
