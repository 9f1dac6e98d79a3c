"""Which recipes are checked for the shopping list.

The selection is a plain value owned by the caller and handed to the
shopping list generator; nothing here is module-level state.

Example usage:
    >>> selection = RecipeSelection()
    >>> selection.toggle(recipe.id)
    >>> shopping_list = generate_shopping_list(selection.pick(recipes))
"""

from dataclasses import dataclass, field

from recipebox.models.recipe import Recipe


@dataclass
class RecipeSelection:
    """Set of selected recipe IDs, kept in the order they were checked."""

    recipe_ids: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.recipe_ids)

    def is_selected(self, recipe_id: str) -> bool:
        return recipe_id in self.recipe_ids

    def toggle(self, recipe_id: str) -> bool:
        """Check or uncheck a recipe. Returns True if it is now selected."""
        if recipe_id in self.recipe_ids:
            self.recipe_ids.remove(recipe_id)
            return False
        self.recipe_ids.append(recipe_id)
        return True

    def clear(self) -> None:
        self.recipe_ids.clear()

    def all_selected(self, visible: list[Recipe]) -> bool:
        """True if every visible recipe (and nothing else) is selected."""
        return bool(visible) and self.count == len(visible) and all(
            self.is_selected(r.id) for r in visible
        )

    def select_all(self, visible: list[Recipe]) -> None:
        """Select/deselect all button.

        Clears the selection when everything visible is already selected,
        otherwise adds every visible recipe.
        """
        if self.all_selected(visible):
            self.clear()
            return

        for recipe in visible:
            if recipe.id not in self.recipe_ids:
                self.recipe_ids.append(recipe.id)

    def pick(self, recipes: list[Recipe]) -> list[Recipe]:
        """Selected recipes, in the order of the given recipe list."""
        return [r for r in recipes if self.is_selected(r.id)]
