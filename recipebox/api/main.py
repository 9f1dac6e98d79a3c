"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipebox.api.config import config
from recipebox.core.config import ensure_directories
from recipebox.core.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    ensure_directories()
    init_db()
    yield


from recipebox.api.routers.auth import router as auth_router
from recipebox.api.routers.health import router as health_router
from recipebox.api.routers.images import router as images_router
from recipebox.api.routers.recipes import router as recipes_router
from recipebox.api.routers.shopping import router as shopping_router

# Create FastAPI app
app = FastAPI(
    title="RecipeBox API",
    description="REST API for RecipeBox - digitized recipe cards and shopping lists",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Configure CORS
if config.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    # Allow all origins in development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(recipes_router)
app.include_router(images_router)
app.include_router(shopping_router)
