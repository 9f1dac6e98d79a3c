"""Local storage for the original recipe card photos."""

import re
import time
from pathlib import Path

from recipebox.core.config import IMAGES_DIR

IMAGE_URL_PREFIX = "/api/images"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")
_STORED_NAME = re.compile(r"^[a-zA-Z0-9._-]+$")


def sanitize_file_name(name: str) -> str:
    """Replace everything but letters, digits, dots and dashes with "_"."""
    return _UNSAFE_CHARS.sub("_", name) or "image"


def save_image(data: bytes, original_name: str) -> str:
    """Store image bytes and return the stored file name.

    Names are prefixed with the current time in milliseconds so uploads of
    the same file never collide.
    """
    file_name = f"{int(time.time() * 1000)}-{sanitize_file_name(original_name)}"
    IMAGES_DIR.mkdir(parents=True, exist_ok=True)
    (IMAGES_DIR / file_name).write_bytes(data)
    return file_name


def image_path(name: str) -> Path | None:
    """Path of a stored image, or None if the name is invalid or missing."""
    if not _STORED_NAME.match(name) or name.startswith("."):
        return None
    path = IMAGES_DIR / name
    if not path.is_file():
        return None
    return path


def image_url(name: str) -> str:
    """Public URL path of a stored image."""
    return f"{IMAGE_URL_PREFIX}/{name}"
