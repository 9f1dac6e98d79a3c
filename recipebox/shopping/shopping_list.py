"""Shopping list generation from selected recipes.

This module merges the ingredients of the selected recipes into one
shopping list, grouped by ingredient category.

Key features:
- Merges items whose names are equal ignoring case ("Flour" == "flour")
- Keeps the first-seen spelling and category of each item
- Amounts are joined as text ("2 cups + 1 cup"), never converted
- Categories and items keep the order they were first seen in

Example usage:
    >>> from recipebox.shopping import generate_shopping_list
    >>> shopping_list = generate_shopping_list(recipes)
    >>> print(shopping_list)
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from recipebox.models.recipe import DEFAULT_CATEGORY, category_emoji

AMOUNT_SEPARATOR = " + "


def combine_amounts(amounts: list[str]) -> str:
    """Join collected amounts for display.

    A single amount is returned unchanged, several are joined with " + ".
    """
    if len(amounts) == 1:
        return amounts[0]
    return AMOUNT_SEPARATOR.join(amounts)


@dataclass
class ShoppingItem:
    """A single item on the shopping list."""

    item: str  # First-seen spelling
    category: str = DEFAULT_CATEGORY
    amounts: list[str] = field(default_factory=list)
    recipes: list[str] = field(default_factory=list)  # Which recipes need this

    @property
    def combined_amount(self) -> str:
        return combine_amounts(self.amounts)

    @property
    def key(self) -> str:
        """Aggregation key: the item name lowercased."""
        return self.item.lower()

    def __str__(self) -> str:
        amount = self.combined_amount
        line = f"{self.item}: {amount}" if any(self.amounts) else self.item
        if len(self.recipes) > 1:
            line += f" ({' + '.join(self.recipes)})"
        return line

    def to_dict(self) -> dict:
        return {
            "item": self.item,
            "category": self.category,
            "combined_amount": self.combined_amount,
            "contributing_recipes": list(self.recipes),
        }


@dataclass
class ShoppingList:
    """Aggregated shopping list for a recipe selection."""

    categories: dict[str, list[ShoppingItem]] = field(default_factory=dict)
    recipes: list[str] = field(default_factory=list)  # Names of the selected recipes

    @property
    def items(self) -> list[ShoppingItem]:
        """All items, category by category."""
        return [item for items in self.categories.values() for item in items]

    def __len__(self) -> int:
        return sum(len(items) for items in self.categories.values())

    def __str__(self) -> str:
        lines = [f"Recipes: {', '.join(self.recipes)}", ""]

        for category, items in self.categories.items():
            lines.append(f"{category_emoji(category)} {category}")
            for item in items:
                lines.append(f"- [ ] {item}")
            lines.append("")

        lines.append(f"({len(self)} items from {len(self.recipes)} recipes)")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "recipes": list(self.recipes),
            "categories": {
                category: [item.to_dict() for item in items]
                for category, items in self.categories.items()
            },
        }


def _field(record: Any, name: str) -> Any:
    """Read a field from a model object or a plain mapping."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def generate_shopping_list(recipes: Iterable[Any]) -> ShoppingList:
    """Generate a shopping list from selected recipes.

    Ingredients are merged by their lowercased item name. The first
    ingredient seen for a name decides its spelling and category; every
    occurrence contributes its amount and its recipe's name. Ingredients
    without an item name are skipped.

    Args:
        recipes: Selected recipes in display order. Each needs a ``name`` and
            ``ingredients`` with ``item``, ``amount`` and ``category``;
            model objects and plain dicts both work.

    Returns:
        ShoppingList grouped by category
    """
    # Collect all ingredients: {item.lower(): ShoppingItem}, insertion ordered
    aggregated: dict[str, ShoppingItem] = {}
    recipe_names: list[str] = []

    for recipe in recipes:
        recipe_name = _field(recipe, "name") or ""
        if recipe_name not in recipe_names:
            recipe_names.append(recipe_name)

        for ing in _field(recipe, "ingredients") or []:
            item = _field(ing, "item")
            if not item:
                continue

            key = item.lower()
            if key not in aggregated:
                aggregated[key] = ShoppingItem(
                    item=item,
                    category=_field(ing, "category") or DEFAULT_CATEGORY,
                )

            amount = _field(ing, "amount")
            aggregated[key].amounts.append(amount if amount is not None else "")
            aggregated[key].recipes.append(recipe_name)

    # Group by category
    categories: dict[str, list[ShoppingItem]] = {}
    for shopping_item in aggregated.values():
        categories.setdefault(shopping_item.category, []).append(shopping_item)

    return ShoppingList(categories=categories, recipes=recipe_names)


if __name__ == "__main__":
    import sys

    from recipebox.core.database import get_all_recipes, get_recipes_by_ids

    # Recipe IDs as arguments, or every saved recipe
    selected_ids = sys.argv[1:]
    selected = get_recipes_by_ids(selected_ids) if selected_ids else get_all_recipes()

    if not selected:
        print("No recipes found. Save a recipe card first.")
        sys.exit(1)

    print(generate_shopping_list(selected))
