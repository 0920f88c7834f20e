# renderer/tone_mapping.py
import numpy as np

from raytracer.config import GAMMA


def gamma_encode_image(linear: np.ndarray, gamma: float = GAMMA) -> np.ndarray:
    """
    Convert a (height, width, 3) linear image to opaque 8-bit RGBA.

    Channels are clamped to [0, 1], gamma encoded and truncated to integers,
    the same conversion ``Color.to_rgba`` applies to a single color.
    """
    clamped = np.clip(linear, 0.0, 1.0)
    encoded = clamped ** (1.0 / gamma)

    height, width = linear.shape[:2]
    output = np.empty((height, width, 4), dtype=np.uint8)
    output[:, :, :3] = (encoded * 255.0).astype(np.uint8)
    output[:, :, 3] = 255
    return output


def gamma_decode_image(encoded: np.ndarray, gamma: float = GAMMA) -> np.ndarray:
    """
    Convert an 8-bit (height, width, 3 or 4) image to linear float RGB.
    """
    return (encoded[:, :, :3].astype(np.float32) / 255.0) ** gamma
