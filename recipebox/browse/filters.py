"""Recipe filter buttons.

Filters are offered in a fixed order (RECIPE_CATEGORY_ORDER) and only for
categories that at least one recipe uses.
"""

from recipebox.models.recipe import DEFAULT_CATEGORY, RECIPE_CATEGORY_ORDER, Recipe

ALL_FILTER = "all"


def recipe_category(recipe: Recipe) -> str:
    """Category used for filtering (recipes without one count as Other)."""
    return recipe.category or DEFAULT_CATEGORY


def available_filters(recipes: list[Recipe]) -> list[str]:
    """Filters to show: "all", then the used categories in display order."""
    used = {recipe_category(r) for r in recipes}
    return [ALL_FILTER] + [cat for cat in RECIPE_CATEGORY_ORDER if cat in used]


def filter_recipes(recipes: list[Recipe], category: str | None) -> list[Recipe]:
    """Recipes matching a filter ("all" or None keeps everything)."""
    if not category or category == ALL_FILTER:
        return list(recipes)
    return [r for r in recipes if recipe_category(r) == category]
