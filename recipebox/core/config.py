"""Configuration management for RecipeBox."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load .env file
load_dotenv(PROJECT_ROOT / ".env")

DATA_DIR = Path(os.getenv("RECIPEBOX_DATA_DIR", str(PROJECT_ROOT / "data")))
LOCAL_DIR = DATA_DIR / "local"
IMAGES_DIR = DATA_DIR / "images"
DB_PATH = LOCAL_DIR / "recipebox.db"


class VisionConfig:
    """OpenAI configuration for reading recipe cards."""

    API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    MODEL: str = os.getenv("VISION_MODEL", "gpt-4o-mini")
    MAX_TOKENS: int = int(os.getenv("VISION_MAX_TOKENS", "2000"))

    @classmethod
    def is_configured(cls) -> bool:
        """Check if OpenAI API key is configured."""
        return bool(cls.API_KEY)


class AuthConfig:
    """PIN that unlocks the app. Never sent to clients."""

    APP_PIN: str = os.getenv("APP_PIN", "")

    @classmethod
    def is_configured(cls) -> bool:
        """Check if the app PIN is configured."""
        return bool(cls.APP_PIN)


def ensure_directories() -> None:
    """Create required data directories if they don't exist."""
    LOCAL_DIR.mkdir(parents=True, exist_ok=True)
    IMAGES_DIR.mkdir(parents=True, exist_ok=True)
