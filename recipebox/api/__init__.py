"""RecipeBox REST API package.

This package provides a FastAPI-based REST API for RecipeBox: reading
recipe cards, browsing saved recipes and building shopping lists.

Usage:
    python -m recipebox.api
"""

from recipebox.api.main import app

__all__ = ["app"]
