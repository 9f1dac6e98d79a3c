"""Pytest configuration.

Environment variables are set before any recipebox import, because the
config module reads them at import time.
"""

import io
import os
import tempfile

os.environ.setdefault("RECIPEBOX_DATA_DIR", tempfile.mkdtemp(prefix="recipebox-test-"))
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

import pytest
from PIL import Image

from recipebox.core import database
from recipebox.core.config import AuthConfig, VisionConfig
from recipebox.images import store

TEST_PIN = "4321"


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Fresh database and image directory for each test."""
    monkeypatch.setattr(AuthConfig, "APP_PIN", TEST_PIN)
    monkeypatch.setattr(VisionConfig, "API_KEY", "test-openai-key")
    monkeypatch.setattr(database, "DB_PATH", tmp_path / "recipebox.db")
    monkeypatch.setattr(store, "IMAGES_DIR", tmp_path / "images")
    database.init_db()
    return tmp_path


@pytest.fixture
def client(temp_db):
    """API client against the temporary database."""
    from fastapi.testclient import TestClient

    from recipebox.api.main import app

    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_PIN}"}


@pytest.fixture
def make_image():
    """Factory encoding a solid-color test image."""

    def _make(size=(400, 300), mode="RGB", fmt="PNG") -> bytes:
        color = (200, 120, 40, 128) if mode == "RGBA" else (200, 120, 40)
        image = Image.new(mode, size, color)
        buffer = io.BytesIO()
        image.save(buffer, format=fmt)
        return buffer.getvalue()

    return _make


@pytest.fixture
def sample_recipes():
    """Two cookie recipes sharing flour and butter."""
    return [
        {
            "name": "Grandma's Sugar Cookies",
            "ingredients": [
                {"item": "Flour", "amount": "2 cups", "category": "Baking"},
                {"item": "Butter", "amount": "1 stick", "category": "Dairy"},
                {"item": "Sugar", "amount": "1 cup", "category": "Baking"},
            ],
        },
        {
            "name": "Pecan Sandies",
            "ingredients": [
                {"item": "flour", "amount": "1 cup", "category": "Baking"},
                {"item": "Pecans", "amount": "1/2 cup", "category": "Nuts"},
                {"item": "BUTTER", "amount": "2 tbsp", "category": "Other"},
            ],
        },
    ]
