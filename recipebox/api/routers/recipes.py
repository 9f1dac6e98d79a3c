"""Recipe management API endpoints."""

import base64
import binascii
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status

from recipebox.api.auth import verify_pin
from recipebox.api.config import config
from recipebox.api.schemas.recipes import (
    ExtractRecipeRequest,
    ExtractRecipeResponse,
    RecipeFiltersResponse,
    RecipeListResponse,
)
from recipebox.browse import available_filters, filter_recipes
from recipebox.core.database import (
    create_recipe,
    delete_recipe,
    get_all_recipes,
    get_recipe,
)
from recipebox.extraction import (
    ExtractionError,
    ExtractionNotConfiguredError,
    extract_recipe,
)
from recipebox.images import InvalidImageError, compress_image, image_url, save_image
from recipebox.images.compress import OUTPUT_MIME_TYPE
from recipebox.models.recipe import Recipe, RecipeCreate, draft_to_form

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
_LOGGER = logging.getLogger(__name__)


@router.get("", response_model=RecipeListResponse)
def list_recipes_endpoint(
    category: str | None = None,
    _pin: str = Depends(verify_pin),
) -> RecipeListResponse:
    """List recipes ordered by name.

    Args:
        category: Optional recipe category filter ("all" for everything)
    """
    recipes = filter_recipes(get_all_recipes(), category)
    return RecipeListResponse(recipes=recipes)


@router.get("/filters", response_model=RecipeFiltersResponse)
def get_filters_endpoint(_pin: str = Depends(verify_pin)) -> RecipeFiltersResponse:
    """Filter buttons for the recipe browser, in display order."""
    return RecipeFiltersResponse(filters=available_filters(get_all_recipes()))


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe_endpoint(
    recipe_id: str,
    _pin: str = Depends(verify_pin),
) -> Recipe:
    """Get a single recipe with ingredients and directions."""
    recipe = get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe with ID {recipe_id} not found",
        )
    return recipe


@router.post("", response_model=Recipe, status_code=status.HTTP_201_CREATED)
def create_recipe_endpoint(
    request: RecipeCreate,
    _pin: str = Depends(verify_pin),
) -> Recipe:
    """Save a reviewed recipe.

    Fields are trimmed, blank optional fields are stored as null, and
    ingredients without an item or empty directions are dropped.
    """
    try:
        cleaned = request.cleaned()
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    recipe = create_recipe(cleaned)
    _LOGGER.info(
        "Saved recipe %r (%s ingredients, %s directions)",
        recipe.name,
        len(recipe.ingredients),
        len(recipe.directions),
    )
    return recipe


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe_endpoint(
    recipe_id: str,
    _pin: str = Depends(verify_pin),
) -> None:
    """Delete a recipe."""
    if not delete_recipe(recipe_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe with ID {recipe_id} not found",
        )


@router.post("/extract", response_model=ExtractRecipeResponse)
def extract_recipe_endpoint(
    request: ExtractRecipeRequest,
    _pin: str = Depends(verify_pin),
) -> ExtractRecipeResponse:
    """Read a photographed recipe card.

    The photo is compressed and stored first, then read by the vision
    model. The response pre-fills the review form; nothing is saved as a
    recipe until the reviewed form is posted to POST /api/recipes.
    """
    if not request.image_base64 or not request.mime_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing image_base64 or mime_type",
        )

    try:
        raw = base64.b64decode(request.image_base64, validate=True)
    except binascii.Error:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="image_base64 is not valid base64",
        )

    if len(raw) > config.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Photo is larger than {config.max_upload_bytes} bytes",
        )

    try:
        compressed = compress_image(
            raw,
            max_dimension=config.photo_max_dimension,
            quality=config.photo_quality,
        )
    except InvalidImageError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    stored_name = save_image(compressed, f"{Path(request.file_name).stem}.jpg")
    url = image_url(stored_name)
    _LOGGER.info("Stored card photo %s (%s -> %s bytes)", stored_name, len(raw), len(compressed))

    try:
        draft = extract_recipe(compressed, OUTPUT_MIME_TYPE)
    except ExtractionNotConfiguredError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except ExtractionError as e:
        _LOGGER.error("Reading card %s failed: %s", stored_name, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": str(e), "raw": e.raw},
        )

    return ExtractRecipeResponse(recipe=draft_to_form(draft, image_url=url), image_url=url)
