"""Pydantic models for recipes."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Ingredient categories the reader is asked to use
INGREDIENT_CATEGORIES = [
    "Dairy",
    "Baking",
    "Nuts",
    "Snacks",
    "Produce",
    "Meat",
    "Spices",
    "Other",
]

DEFAULT_CATEGORY = "Other"

# Display order of the recipe filter buttons
RECIPE_CATEGORY_ORDER = [
    "Cookies",
    "Candy",
    "Cakes",
    "Breads",
    "Main Dishes",
    "Sides",
    "Appetizers",
    "Drinks",
    "Other",
]

CATEGORY_EMOJI = {
    "Dairy": "🧈",
    "Baking": "🥣",
    "Nuts": "🥜",
    "Snacks": "🥨",
    "Produce": "🥕",
    "Meat": "🥩",
    "Spices": "🌿",
    "Other": "📦",
}


def category_emoji(category: str) -> str:
    """Emoji shown next to a shopping list category."""
    return CATEGORY_EMOJI.get(category, CATEGORY_EMOJI[DEFAULT_CATEGORY])


def normalize_category(value: str | None) -> str:
    """Map an ingredient category onto the fixed set (unknown -> Other)."""
    if value and value in INGREDIENT_CATEGORIES:
        return value
    return DEFAULT_CATEGORY


def _clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class Ingredient(BaseModel):
    """One line of a recipe card: amount, item and shopping category."""

    item: str
    amount: str = ""
    category: str = DEFAULT_CATEGORY


class RecipeCreate(BaseModel):
    """Data required to create a new recipe (the reviewed form)."""

    name: str
    source: str | None = Field(default=None, description="Who the card is from")
    preview: str | None = Field(default=None, description="One sentence description")
    category: str | None = None
    ingredients: list[Ingredient] = Field(default_factory=list)
    directions: list[str] = Field(default_factory=list)
    tip: str | None = None
    image_url: str | None = None

    def cleaned(self) -> "RecipeCreate":
        """Return a copy trimmed the way the review form saves it.

        Blank optional fields become None, ingredients without an item and
        empty directions are dropped.

        Raises:
            ValueError: If the name is empty after trimming
        """
        name = self.name.strip()
        if not name:
            raise ValueError("Recipe name cannot be empty")

        ingredients = []
        for ing in self.ingredients:
            item = ing.item.strip()
            if not item:
                continue
            ingredients.append(
                Ingredient(item=item, amount=ing.amount.strip(), category=ing.category)
            )

        directions = [d.strip() for d in self.directions if d.strip()]

        return RecipeCreate(
            name=name,
            source=_clean_optional(self.source),
            preview=_clean_optional(self.preview),
            category=_clean_optional(self.category),
            ingredients=ingredients,
            directions=directions,
            tip=_clean_optional(self.tip),
            image_url=_clean_optional(self.image_url),
        )


class Recipe(RecipeCreate):
    """A stored recipe."""

    id: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class DraftIngredient(BaseModel):
    """Ingredient as returned by the card reader; every field may be missing."""

    item: str | None = None
    amount: str | None = None
    category: str | None = None


class RecipeDraft(BaseModel):
    """Unreviewed recipe read from a card photo."""

    name: str | None = None
    source: str | None = None
    preview: str | None = None
    ingredients: list[DraftIngredient] = Field(default_factory=list)
    directions: list[str] = Field(default_factory=list)
    tip: str | None = None

    @field_validator("ingredients", "directions", mode="before")
    @classmethod
    def null_list_is_empty(cls, value):
        # Null lists and null entries in a reply count as missing
        if value is None:
            return []
        if isinstance(value, list):
            return [v for v in value if v is not None]
        return value


def draft_to_form(draft: RecipeDraft, image_url: str | None = None) -> RecipeCreate:
    """Pre-fill the review form from a draft.

    Missing strings become empty, categories are forced onto the fixed set.
    Nothing is dropped here; the reviewer decides what to keep.
    """
    return RecipeCreate(
        name=draft.name or "",
        source=draft.source or "",
        preview=draft.preview or "",
        ingredients=[
            Ingredient(
                item=ing.item or "",
                amount=ing.amount or "",
                category=normalize_category(ing.category),
            )
            for ing in draft.ingredients
        ],
        directions=list(draft.directions),
        tip=draft.tip or "",
        image_url=image_url,
    )
