"""Pydantic schemas for recipe management endpoints."""

from pydantic import BaseModel, Field

from recipebox.models.recipe import Recipe, RecipeCreate


class RecipeListResponse(BaseModel):
    """Recipes, ordered by name."""

    recipes: list[Recipe] = Field(default_factory=list)


class RecipeFiltersResponse(BaseModel):
    """Filter buttons to offer, in display order."""

    filters: list[str] = Field(default_factory=list)


class ExtractRecipeRequest(BaseModel):
    """A recipe card photo to read."""

    image_base64: str = Field(default="", description="Image bytes, base64 encoded")
    mime_type: str = Field(default="", description="e.g. image/jpeg")
    file_name: str = Field(default="recipe-card.jpg", description="Original file name")


class ExtractRecipeResponse(BaseModel):
    """Pre-filled review form plus the stored photo."""

    recipe: RecipeCreate
    image_url: str
