"""Recipe card photos: compression and storage."""

from recipebox.images.compress import InvalidImageError, compress_image
from recipebox.images.store import image_path, image_url, sanitize_file_name, save_image

__all__ = [
    "InvalidImageError",
    "compress_image",
    "image_path",
    "image_url",
    "sanitize_file_name",
    "save_image",
]
