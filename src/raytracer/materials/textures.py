# materials/textures.py
import numpy as np

from raytracer.core.color import Color
from raytracer.core.uv import UV


class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV) -> Color:
        """Sample the texture at given UV coordinates."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def sample(self, uv: UV) -> Color:
        return self.color


class ImageTexture(Texture):
    """
    A texture backed by an image in linear light.

    ``data`` is a (height, width, 3) float array. Coordinates wrap in both
    directions, negative ones included.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data, dtype=np.float32)
        if data.ndim != 3 or data.shape[2] < 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Texture data must have shape (height, width, 3), got {data.shape}")
        self.data = data[:, :, :3]
        self.height = data.shape[0]
        self.width = data.shape[1]

    def sample(self, uv: UV) -> Color:
        x = wrap(uv.u, self.width)
        y = wrap(uv.v, self.height)
        r, g, b = self.data[y, x]
        return Color(r, g, b)


def wrap(value: float, bound: int) -> int:
    """
    Scale a fractional coordinate to a pixel index, truncate, then take the
    Euclidean modulo so the result lies in [0, bound).
    """
    # Python's % already yields a non-negative result for a positive bound
    return int(value * bound) % bound
