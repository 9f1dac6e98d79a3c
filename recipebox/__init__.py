"""RecipeBox: digitized recipe cards and shopping lists."""

__version__ = "1.0.0"
