"""SQLite database setup and CRUD operations."""

import json
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Generator

from recipebox.core.config import DB_PATH
from recipebox.models.recipe import Ingredient, Recipe, RecipeCreate

SCHEMA = """
-- Recipes read from photographed cards
CREATE TABLE IF NOT EXISTS recipes (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    source TEXT,
    preview TEXT,
    category TEXT,
    ingredients TEXT,
    directions TEXT,
    tip TEXT,
    image_url TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_recipes_name ON recipes(name);
CREATE INDEX IF NOT EXISTS idx_recipes_category ON recipes(category);
"""


def init_db() -> None:
    """Initialize the database with schema."""
    with get_connection() as conn:
        conn.executescript(SCHEMA)


@contextmanager
def get_connection() -> Generator[sqlite3.Connection, None, None]:
    """Get a database connection with row factory."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


# Recipe CRUD operations


def create_recipe(recipe: RecipeCreate) -> Recipe:
    """Create a new recipe."""
    recipe_id = uuid.uuid4().hex
    created_at = datetime.now()
    with get_connection() as conn:
        conn.execute(
            """
            INSERT INTO recipes (id, name, source, preview, category, ingredients,
                                 directions, tip, image_url, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                recipe_id,
                recipe.name,
                recipe.source,
                recipe.preview,
                recipe.category,
                json.dumps([ing.model_dump() for ing in recipe.ingredients]),
                json.dumps(recipe.directions),
                recipe.tip,
                recipe.image_url,
                created_at.isoformat(),
            ),
        )
    return Recipe(id=recipe_id, created_at=created_at, **recipe.model_dump())


def get_recipe(recipe_id: str) -> Recipe | None:
    """Get a recipe by ID."""
    with get_connection() as conn:
        row = conn.execute("SELECT * FROM recipes WHERE id = ?", (recipe_id,)).fetchone()
        if row:
            return _row_to_recipe(row)
        return None


def get_all_recipes() -> list[Recipe]:
    """Get all recipes, ordered by name."""
    with get_connection() as conn:
        rows = conn.execute("SELECT * FROM recipes ORDER BY name").fetchall()
        return [_row_to_recipe(row) for row in rows]


def get_recipes_by_ids(recipe_ids: list[str]) -> list[Recipe]:
    """Get recipes in the order the IDs were given.

    Unknown IDs are skipped, repeated IDs are returned once.
    """
    if not recipe_ids:
        return []

    unique_ids = list(dict.fromkeys(recipe_ids))
    placeholders = ", ".join("?" for _ in unique_ids)
    with get_connection() as conn:
        rows = conn.execute(
            f"SELECT * FROM recipes WHERE id IN ({placeholders})",
            unique_ids,
        ).fetchall()

    by_id = {row["id"]: _row_to_recipe(row) for row in rows}
    return [by_id[rid] for rid in unique_ids if rid in by_id]


def delete_recipe(recipe_id: str) -> bool:
    """Delete a recipe. Returns False if it did not exist."""
    with get_connection() as conn:
        cursor = conn.execute("DELETE FROM recipes WHERE id = ?", (recipe_id,))
        return cursor.rowcount > 0


def count_recipes() -> int:
    """Number of stored recipes."""
    with get_connection() as conn:
        return conn.execute("SELECT COUNT(*) FROM recipes").fetchone()[0]


def _row_to_recipe(row: sqlite3.Row) -> Recipe:
    """Convert a database row to a Recipe model."""
    ingredients = json.loads(row["ingredients"]) if row["ingredients"] else []
    directions = json.loads(row["directions"]) if row["directions"] else []
    return Recipe(
        id=row["id"],
        name=row["name"],
        source=row["source"],
        preview=row["preview"],
        category=row["category"],
        ingredients=[Ingredient(**ing) for ing in ingredients],
        directions=directions,
        tip=row["tip"],
        image_url=row["image_url"],
        created_at=row["created_at"],
    )
