"""Tests for the REST API."""

import base64
import io

from PIL import Image

from recipebox.api.config import config as api_config
from recipebox.api.routers import recipes as recipes_router
from recipebox.core.config import AuthConfig
from recipebox.extraction import ExtractionError, ExtractionNotConfiguredError
from recipebox.models.recipe import RecipeDraft


def _save(client, auth_headers, **recipe):
    response = client.post("/api/recipes", json=recipe, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()


# Auth


def test_verify_pin(client):
    assert client.post("/api/auth/verify-pin", json={"pin": "4321"}).json() == {"valid": True}
    assert client.post("/api/auth/verify-pin", json={"pin": "0000"}).json() == {"valid": False}


def test_verify_pin_requires_pin(client):
    assert client.post("/api/auth/verify-pin", json={"pin": ""}).status_code == 400


def test_verify_pin_not_configured(client, monkeypatch):
    monkeypatch.setattr(AuthConfig, "APP_PIN", "")

    assert client.post("/api/auth/verify-pin", json={"pin": "4321"}).status_code == 503


def test_recipes_need_pin(client):
    assert client.get("/api/recipes").status_code == 401
    assert client.get("/api/recipes", headers={"Authorization": "Bearer 0000"}).status_code == 401


# Health


def test_health(client):
    data = client.get("/api/health").json()

    assert data["database_ok"] is True
    assert data["recipe_count"] == 0
    assert data["status"] == "healthy"


# Recipes


def test_create_recipe_is_cleaned(client, auth_headers):
    saved = _save(
        client,
        auth_headers,
        name=" Sugar Cookies ",
        source="",
        ingredients=[
            {"item": "flour", "amount": "2 cups", "category": "Baking"},
            {"item": " ", "amount": "1 cup", "category": "Dairy"},
        ],
        directions=["Mix.", ""],
    )

    assert saved["name"] == "Sugar Cookies"
    assert saved["source"] is None
    assert len(saved["ingredients"]) == 1
    assert saved["directions"] == ["Mix."]

    fetched = client.get(f"/api/recipes/{saved['id']}", headers=auth_headers).json()
    assert fetched["name"] == "Sugar Cookies"


def test_create_recipe_without_name(client, auth_headers):
    response = client.post("/api/recipes", json={"name": "  "}, headers=auth_headers)

    assert response.status_code == 422


def test_list_and_filter_recipes(client, auth_headers):
    _save(client, auth_headers, name="Lemonade", category="Drinks")
    _save(client, auth_headers, name="Brownies", category="Cakes")

    names = [r["name"] for r in client.get("/api/recipes", headers=auth_headers).json()["recipes"]]
    assert names == ["Brownies", "Lemonade"]

    drinks = client.get("/api/recipes", params={"category": "Drinks"}, headers=auth_headers)
    assert [r["name"] for r in drinks.json()["recipes"]] == ["Lemonade"]

    filters = client.get("/api/recipes/filters", headers=auth_headers).json()["filters"]
    assert filters == ["all", "Cakes", "Drinks"]


def test_get_and_delete_unknown_recipe(client, auth_headers):
    assert client.get("/api/recipes/missing", headers=auth_headers).status_code == 404
    assert client.delete("/api/recipes/missing", headers=auth_headers).status_code == 404


def test_delete_recipe(client, auth_headers):
    saved = _save(client, auth_headers, name="Fudge")

    assert client.delete(f"/api/recipes/{saved['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/recipes/{saved['id']}", headers=auth_headers).status_code == 404


# Card reading


def _extract(client, auth_headers, data, mime_type="image/png"):
    return client.post(
        "/api/recipes/extract",
        json={
            "image_base64": base64.b64encode(data).decode("ascii"),
            "mime_type": mime_type,
            "file_name": "card photo.png",
        },
        headers=auth_headers,
    )


def test_extract_recipe(client, auth_headers, make_image, monkeypatch):
    seen = {}

    def fake_extract(image_bytes, mime_type):
        seen["mime_type"] = mime_type
        return RecipeDraft.model_validate(
            {
                "name": "Pecan Pie",
                "ingredients": [{"item": "pecans", "amount": "1 cup", "category": "Nutty"}],
                "directions": ["Bake."],
            }
        )

    monkeypatch.setattr(recipes_router, "extract_recipe", fake_extract)

    response = _extract(client, auth_headers, make_image())

    assert response.status_code == 200, response.text
    data = response.json()
    assert seen["mime_type"] == "image/jpeg"
    assert data["recipe"]["name"] == "Pecan Pie"
    assert data["recipe"]["ingredients"][0]["category"] == "Other"
    assert data["image_url"].startswith("/api/images/")
    assert data["image_url"].endswith("-card_photo.jpg")
    assert data["recipe"]["image_url"] == data["image_url"]

    image = client.get(data["image_url"])
    assert image.status_code == 200
    assert image.headers["content-type"] == "image/jpeg"


def test_extract_rejects_missing_fields(client, auth_headers):
    response = client.post("/api/recipes/extract", json={"image_base64": ""}, headers=auth_headers)

    assert response.status_code == 400


def test_extract_rejects_bad_base64(client, auth_headers):
    response = client.post(
        "/api/recipes/extract",
        json={"image_base64": "not base64!!", "mime_type": "image/png"},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_extract_rejects_non_image(client, auth_headers):
    assert _extract(client, auth_headers, b"plain text").status_code == 400


def test_extract_not_configured(client, auth_headers, make_image, monkeypatch):
    def fake_extract(image_bytes, mime_type):
        raise ExtractionNotConfiguredError("OpenAI API key not configured")

    monkeypatch.setattr(recipes_router, "extract_recipe", fake_extract)

    assert _extract(client, auth_headers, make_image()).status_code == 503


def test_extract_failure_returns_raw_reply(client, auth_headers, make_image, monkeypatch):
    def fake_extract(image_bytes, mime_type):
        raise ExtractionError("Failed to parse recipe JSON", raw="not json")

    monkeypatch.setattr(recipes_router, "extract_recipe", fake_extract)

    response = _extract(client, auth_headers, make_image())

    assert response.status_code == 502
    assert response.json()["detail"] == {"error": "Failed to parse recipe JSON", "raw": "not json"}


def test_extract_rejects_oversized_photo(client, auth_headers, make_image, monkeypatch):
    monkeypatch.setattr(api_config, "max_upload_bytes", 100)

    assert _extract(client, auth_headers, make_image()).status_code == 413


def test_extract_uses_photo_settings(client, auth_headers, make_image, monkeypatch):
    monkeypatch.setattr(api_config, "photo_max_dimension", 200)
    monkeypatch.setattr(
        recipes_router, "extract_recipe", lambda image_bytes, mime_type: RecipeDraft(name="Toffee")
    )

    response = _extract(client, auth_headers, make_image(size=(800, 600)))
    assert response.status_code == 200, response.text

    stored = client.get(response.json()["image_url"])
    assert Image.open(io.BytesIO(stored.content)).size == (200, 150)


def test_unknown_image(client):
    assert client.get("/api/images/missing.jpg").status_code == 404


# Shopping list


def test_shopping_list(client, auth_headers):
    a = _save(
        client,
        auth_headers,
        name="Recipe A",
        ingredients=[{"item": "Flour", "amount": "2 cups", "category": "Baking"}],
    )
    b = _save(
        client,
        auth_headers,
        name="Recipe B",
        ingredients=[
            {"item": "flour", "amount": "1 cup", "category": "Baking"},
            {"item": "Eggs", "amount": "3", "category": "Dairy"},
        ],
    )

    response = client.post(
        "/api/shopping-list",
        json={"recipe_ids": [a["id"], b["id"]]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {
        "recipes": ["Recipe A", "Recipe B"],
        "categories": [
            {
                "category": "Baking",
                "emoji": "🥣",
                "items": [
                    {
                        "item": "Flour",
                        "combined_amount": "2 cups + 1 cup",
                        "contributing_recipes": ["Recipe A", "Recipe B"],
                    }
                ],
            },
            {
                "category": "Dairy",
                "emoji": "🧈",
                "items": [
                    {
                        "item": "Eggs",
                        "combined_amount": "3",
                        "contributing_recipes": ["Recipe B"],
                    }
                ],
            },
        ],
    }


def test_empty_shopping_list(client, auth_headers):
    response = client.post("/api/shopping-list", json={"recipe_ids": []}, headers=auth_headers)

    assert response.json() == {"recipes": [], "categories": []}


def test_shopping_list_text(client, auth_headers):
    a = _save(
        client,
        auth_headers,
        name="Trail Mix",
        ingredients=[{"item": "Almonds", "amount": "1 cup", "category": "Nuts"}],
    )

    response = client.post(
        "/api/shopping-list/text",
        json={"recipe_ids": [a["id"]]},
        headers=auth_headers,
    )

    text = response.json()["text"]
    assert "🥜 Nuts" in text
    assert "- [ ] Almonds: 1 cup" in text
