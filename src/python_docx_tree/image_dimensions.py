"""
Natural (file) dimensions of images, measured with Pillow.
"""

import io
import logging

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


def measure_image(data: bytes) -> tuple[int, int] | None:
    """Get the pixel size of an image file.

    Only the image header is read; the pixels are never decoded.

    Args:
        data: The image file contents

    Returns:
        Tuple of (width, height) in pixels, or None if Pillow can't identify
        the format (EMF and WMF files from Word usually fall here)
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as e:
        logger.debug(f"Could not measure image: {e}")
        return None
