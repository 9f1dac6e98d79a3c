"""API routers package."""

from recipebox.api.routers.auth import router as auth_router
from recipebox.api.routers.health import router as health_router
from recipebox.api.routers.images import router as images_router
from recipebox.api.routers.recipes import router as recipes_router
from recipebox.api.routers.shopping import router as shopping_router

__all__ = ["auth_router", "health_router", "images_router", "recipes_router", "shopping_router"]
