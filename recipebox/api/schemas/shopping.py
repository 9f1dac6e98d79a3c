"""Pydantic schemas for shopping list endpoints."""

from pydantic import BaseModel, Field


class ShoppingListRequest(BaseModel):
    """The current recipe selection."""

    recipe_ids: list[str] = Field(default_factory=list)


class ShoppingItemResponse(BaseModel):
    """A single item on the shopping list."""

    item: str
    combined_amount: str
    contributing_recipes: list[str] = Field(default_factory=list)


class ShoppingCategoryResponse(BaseModel):
    """Items of one ingredient category."""

    category: str
    emoji: str
    items: list[ShoppingItemResponse] = Field(default_factory=list)


class ShoppingListResponse(BaseModel):
    """Aggregated shopping list for the selected recipes."""

    recipes: list[str] = Field(default_factory=list)
    categories: list[ShoppingCategoryResponse] = Field(default_factory=list)


class ShoppingListTextResponse(BaseModel):
    """Printable shopping list."""

    text: str
