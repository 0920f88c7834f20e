# core/color.py
import numbers
from typing import Tuple

from raytracer.config import GAMMA


def gamma_encode(linear: float) -> float:
    return linear ** (1.0 / GAMMA)


def gamma_decode(encoded: float) -> float:
    return encoded ** GAMMA


class Color:
    """
    Linear-light RGB color. Channels are not clamped until output.
    """
    __slots__ = ['red', 'green', 'blue']

    def __init__(self, red: float, green: float, blue: float):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)

    def __hash__(self) -> int:
        return hash((self.red, self.green, self.blue))

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def clamp(self) -> "Color":
        return Color(
            min(max(self.red, 0.0), 1.0),
            min(max(self.green, 0.0), 1.0),
            min(max(self.blue, 0.0), 1.0)
        )

    def to_rgba(self) -> Tuple[int, int, int, int]:
        """
        Gamma-encode the clamped color into an opaque 8-bit RGBA tuple.
        """
        c = self.clamp()
        return (
            int(gamma_encode(c.red) * 255.0),
            int(gamma_encode(c.green) * 255.0),
            int(gamma_encode(c.blue) * 255.0),
            255,
        )

    @staticmethod
    def from_rgba(rgba) -> "Color":
        """
        Decode an 8-bit RGB(A) sample into linear light. Alpha is ignored.
        """
        return Color(
            gamma_decode(rgba[0] / 255.0),
            gamma_decode(rgba[1] / 255.0),
            gamma_decode(rgba[2] / 255.0)
        )

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"
