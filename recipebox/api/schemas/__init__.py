"""API schemas package."""

from recipebox.api.schemas.common import HealthResponse, VerifyPinRequest, VerifyPinResponse
from recipebox.api.schemas.recipes import (
    ExtractRecipeRequest,
    ExtractRecipeResponse,
    RecipeFiltersResponse,
    RecipeListResponse,
)
from recipebox.api.schemas.shopping import (
    ShoppingCategoryResponse,
    ShoppingItemResponse,
    ShoppingListRequest,
    ShoppingListResponse,
    ShoppingListTextResponse,
)

__all__ = [
    "HealthResponse",
    "VerifyPinRequest",
    "VerifyPinResponse",
    "ExtractRecipeRequest",
    "ExtractRecipeResponse",
    "RecipeFiltersResponse",
    "RecipeListResponse",
    "ShoppingCategoryResponse",
    "ShoppingItemResponse",
    "ShoppingListRequest",
    "ShoppingListResponse",
    "ShoppingListTextResponse",
]
