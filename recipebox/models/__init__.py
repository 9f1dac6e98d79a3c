"""Recipe data models."""

from recipebox.models.recipe import (
    CATEGORY_EMOJI,
    DEFAULT_CATEGORY,
    INGREDIENT_CATEGORIES,
    RECIPE_CATEGORY_ORDER,
    Ingredient,
    Recipe,
    RecipeCreate,
    RecipeDraft,
    category_emoji,
    draft_to_form,
    normalize_category,
)

__all__ = [
    "Ingredient",
    "Recipe",
    "RecipeCreate",
    "RecipeDraft",
    "draft_to_form",
    "category_emoji",
    "normalize_category",
    "CATEGORY_EMOJI",
    "DEFAULT_CATEGORY",
    "INGREDIENT_CATEGORIES",
    "RECIPE_CATEGORY_ORDER",
]
