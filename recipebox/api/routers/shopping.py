"""Shopping list API endpoints."""

import logging

from fastapi import APIRouter, Depends

from recipebox.api.auth import verify_pin
from recipebox.api.schemas.shopping import (
    ShoppingCategoryResponse,
    ShoppingItemResponse,
    ShoppingListRequest,
    ShoppingListResponse,
    ShoppingListTextResponse,
)
from recipebox.core.database import get_recipes_by_ids
from recipebox.models.recipe import category_emoji
from recipebox.shopping.shopping_list import ShoppingList, generate_shopping_list

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])
_LOGGER = logging.getLogger(__name__)


def _build(request: ShoppingListRequest) -> ShoppingList:
    """Load the selected recipes and aggregate their ingredients."""
    recipes = get_recipes_by_ids(request.recipe_ids)
    if len(recipes) < len(set(request.recipe_ids)):
        _LOGGER.warning(
            "Shopping list request: %s of %s recipe IDs not found",
            len(set(request.recipe_ids)) - len(recipes),
            len(set(request.recipe_ids)),
        )

    _LOGGER.info("Shopping list request: selected_recipes=%s", [r.name for r in recipes])
    shopping_list = generate_shopping_list(recipes)
    _LOGGER.info(
        "Shopping list generated: recipe_count=%s items=%s",
        len(shopping_list.recipes),
        len(shopping_list),
    )
    return shopping_list


@router.post("", response_model=ShoppingListResponse)
def create_shopping_list(
    request: ShoppingListRequest,
    _pin: str = Depends(verify_pin),
) -> ShoppingListResponse:
    """Generate a shopping list from the selected recipes.

    Items with the same name (ignoring case) are merged; their amounts are
    joined with " + ". Categories appear in the order first seen.
    """
    shopping_list = _build(request)

    return ShoppingListResponse(
        recipes=shopping_list.recipes,
        categories=[
            ShoppingCategoryResponse(
                category=category,
                emoji=category_emoji(category),
                items=[
                    ShoppingItemResponse(
                        item=item.item,
                        combined_amount=item.combined_amount,
                        contributing_recipes=item.recipes,
                    )
                    for item in items
                ],
            )
            for category, items in shopping_list.categories.items()
        ],
    )


@router.post("/text", response_model=ShoppingListTextResponse)
def create_shopping_list_text(
    request: ShoppingListRequest,
    _pin: str = Depends(verify_pin),
) -> ShoppingListTextResponse:
    """Printable version of the shopping list."""
    return ShoppingListTextResponse(text=str(_build(request)))
