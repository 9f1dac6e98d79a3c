"""Read recipe cards with an OpenAI vision model.

The model gets the photo and a prompt asking for strict JSON; the reply is
validated into a RecipeDraft that the user reviews before saving.

Example usage:
    >>> from recipebox.extraction import extract_recipe
    >>> draft = extract_recipe(jpeg_bytes, "image/jpeg")
    >>> print(draft.name)
"""

import base64
import json
import logging

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from recipebox.core.config import VisionConfig
from recipebox.models.recipe import INGREDIENT_CATEGORIES, RecipeDraft

_LOGGER = logging.getLogger(__name__)

PROMPT = f"""You are reading a recipe from a photographed recipe card. The card may be handwritten, often in cursive.

Extract:
1. The recipe name
2. Who it is from, if noted (e.g. "From the kitchen of ...")
3. Every ingredient with its amount
4. Every direction step
5. Any tips, notes or special instructions

Return ONLY valid JSON in exactly this format, without markdown or explanations:
{{
  "name": "Recipe Name",
  "source": "Person's name or null",
  "preview": "One sentence describing what this recipe makes",
  "ingredients": [
    {{"item": "flour", "amount": "2 cups", "category": "Baking"}},
    {{"item": "butter", "amount": "1 stick", "category": "Dairy"}}
  ],
  "directions": [
    "Step one",
    "Step two"
  ],
  "tip": "Tips or notes, or null if there are none"
}}

Every category must be one of: {', '.join(INGREDIENT_CATEGORIES)}

If you cannot read a word clearly, make your best guess and put [?] after it.
If the photo shows both sides of a card, extract from both."""


class ExtractionError(Exception):
    """Raised when the card could not be read into a recipe."""

    def __init__(self, message: str, raw: str | None = None):
        super().__init__(message)
        self.raw = raw


class ExtractionNotConfiguredError(ExtractionError):
    """Raised when no OpenAI API key is configured."""


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if the model added one."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("```")[1]
        if text.startswith("json"):
            text = text[4:]
    return text.strip()


def parse_recipe_reply(text: str) -> RecipeDraft:
    """Parse the model reply into a RecipeDraft.

    Raises:
        ExtractionError: If the reply is not a JSON object of the expected shape
    """
    cleaned = _strip_code_fence(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ExtractionError("Failed to parse recipe JSON", raw=text) from e

    if not isinstance(data, dict):
        raise ExtractionError("Recipe JSON is not an object", raw=text)

    try:
        return RecipeDraft.model_validate(data)
    except ValidationError as e:
        raise ExtractionError(f"Unexpected recipe JSON: {e.error_count()} error(s)", raw=text) from e


def extract_recipe(
    image_bytes: bytes,
    mime_type: str,
    client: OpenAI | None = None,
) -> RecipeDraft:
    """Read a recipe card photo.

    Args:
        image_bytes: The photo
        mime_type: MIME type of the photo, e.g. "image/jpeg"
        client: OpenAI client; created from OPENAI_API_KEY if omitted

    Returns:
        The unreviewed recipe

    Raises:
        ValueError: If image or MIME type is missing
        ExtractionNotConfiguredError: If no client is given and no API key is set
        ExtractionError: If the API call fails or the reply cannot be parsed
    """
    if not image_bytes or not mime_type:
        raise ValueError("Missing image data or MIME type")

    if client is None:
        if not VisionConfig.is_configured():
            raise ExtractionNotConfiguredError("OpenAI API key not configured")
        client = OpenAI(api_key=VisionConfig.API_KEY)

    data_url = f"data:{mime_type};base64,{base64.b64encode(image_bytes).decode('ascii')}"

    _LOGGER.info("Reading recipe card with %s (%s bytes)", VisionConfig.MODEL, len(image_bytes))
    try:
        response = client.chat.completions.create(
            model=VisionConfig.MODEL,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "image_url", "image_url": {"url": data_url}},
                        {"type": "text", "text": PROMPT},
                    ],
                }
            ],
            response_format={"type": "json_object"},
            max_tokens=VisionConfig.MAX_TOKENS,
            temperature=0.1,
        )
    except OpenAIError as e:
        _LOGGER.error("OpenAI request failed: %s", e)
        raise ExtractionError(f"Vision request failed: {e}") from e

    result_text = response.choices[0].message.content or ""
    draft = parse_recipe_reply(result_text)
    _LOGGER.info(
        "Read recipe %r: %s ingredients, %s directions",
        draft.name,
        len(draft.ingredients),
        len(draft.directions),
    )
    return draft
