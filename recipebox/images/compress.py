"""Shrink recipe card photos before storing and reading them.

Phone photos are often several megabytes; the card reader only needs
enough resolution to read handwriting.
"""

import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DIMENSION = 1600
DEFAULT_QUALITY = 80
OUTPUT_MIME_TYPE = "image/jpeg"


class InvalidImageError(ValueError):
    """Raised when uploaded bytes are not a readable image."""


def compress_image(
    data: bytes,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
    quality: int = DEFAULT_QUALITY,
) -> bytes:
    """Re-encode an image as a downsized JPEG.

    Applies the EXIF orientation, flattens transparency onto white and
    scales the image so its longest side is at most max_dimension.

    Args:
        data: Raw image bytes (JPEG, PNG, ...)
        max_dimension: Longest side in pixels after compression
        quality: JPEG quality (1-95)

    Returns:
        JPEG bytes

    Raises:
        InvalidImageError: If the data cannot be decoded as an image
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Could not read image: {e}") from e

    image = ImageOps.exif_transpose(image)

    # Convert RGBA/P to RGB on a white background
    if image.mode in ("RGBA", "LA", "P"):
        image = image.convert("RGBA")
        background = Image.new("RGB", image.size, (255, 255, 255))
        background.paste(image, mask=image.split()[-1])
        image = background
    elif image.mode != "RGB":
        image = image.convert("RGB")

    original_size = image.size
    image.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)

    output = io.BytesIO()
    image.save(output, format="JPEG", quality=quality, optimize=True)
    compressed = output.getvalue()

    _LOGGER.debug(
        "Compressed image %sx%s -> %sx%s (%s -> %s bytes)",
        original_size[0],
        original_size[1],
        image.size[0],
        image.size[1],
        len(data),
        len(compressed),
    )
    return compressed
