# materials/texture_loader.py
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from raytracer.core.color import Color
from raytracer.materials.textures import ImageTexture
from raytracer.renderer.tone_mapping import gamma_decode_image

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, converting it to linear-light RGB.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image format is unsupported
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            encoded = np.asarray(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.info(f"Loaded texture {image_path} ({encoded.shape[1]}x{encoded.shape[0]})")
    return ImageTexture(gamma_decode_image(encoded))


def checkerboard(size: int = 64, cells: int = 8,
                 color1: Color = None, color2: Color = None) -> ImageTexture:
    """
    Build a procedural checkerboard texture.

    Args:
        size: Width and height of the texture in pixels
        cells: Number of squares along each side
        color1: Linear color of the even squares (white by default)
        color2: Linear color of the odd squares (black by default)
    """
    if color1 is None:
        color1 = Color.white()
    if color2 is None:
        color2 = Color.black()

    cell = max(size // cells, 1)
    ys, xs = np.indices((size, size))
    is_even = ((xs // cell + ys // cell) % 2) == 0

    data = np.empty((size, size, 3), dtype=np.float32)
    data[is_even] = tuple(color1)
    data[~is_even] = tuple(color2)
    return ImageTexture(data)
