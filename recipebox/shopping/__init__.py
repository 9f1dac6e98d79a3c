"""Shopping list generation module."""

from recipebox.shopping.shopping_list import (
    ShoppingItem,
    ShoppingList,
    combine_amounts,
    generate_shopping_list,
)

__all__ = [
    "ShoppingItem",
    "ShoppingList",
    "combine_amounts",
    "generate_shopping_list",
]
