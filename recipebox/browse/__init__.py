"""Browsing recipes: filters and selection."""

from recipebox.browse.filters import ALL_FILTER, available_filters, filter_recipes
from recipebox.browse.selection import RecipeSelection

__all__ = [
    "ALL_FILTER",
    "RecipeSelection",
    "available_filters",
    "filter_recipes",
]
