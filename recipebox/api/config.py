"""API configuration management.

Loads server and photo upload settings from environment variables.
"""

import os
from dataclasses import dataclass

from recipebox.images.compress import DEFAULT_MAX_DIMENSION, DEFAULT_QUALITY


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8099
    debug: bool = False
    cors_origins: list[str] | None = None
    log_level: str = "info"
    # Card photos
    max_upload_bytes: int = 20 * 1024 * 1024
    photo_max_dimension: int = DEFAULT_MAX_DIMENSION
    photo_quality: int = DEFAULT_QUALITY

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Load configuration from environment variables."""
        cors_origins_str = os.getenv("API_CORS_ORIGINS", "")
        cors_origins = [o.strip() for o in cors_origins_str.split(",") if o.strip()] or None

        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8099")),
            debug=os.getenv("API_DEBUG", "").lower() in ("true", "1", "yes"),
            cors_origins=cors_origins,
            log_level=os.getenv("API_LOG_LEVEL", os.getenv("LOG_LEVEL", "info")).lower(),
            max_upload_bytes=int(os.getenv("PHOTO_MAX_UPLOAD_MB", "20")) * 1024 * 1024,
            photo_max_dimension=int(os.getenv("PHOTO_MAX_DIMENSION", str(DEFAULT_MAX_DIMENSION))),
            photo_quality=int(os.getenv("PHOTO_QUALITY", str(DEFAULT_QUALITY))),
        )


config = APIConfig.from_env()
