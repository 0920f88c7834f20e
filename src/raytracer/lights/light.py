# lights/light.py
import math

from raytracer.core.color import Color
from raytracer.core.vector import Point, Vector3


class Light:
    """
    Abstract light source. Subclasses report how much light reaches a point
    and from which direction.
    """
    def __init__(self, color: Color, intensity: float):
        self.color = color
        self._intensity = intensity

    def intensity(self, hit_point: Point) -> float:
        raise NotImplementedError("intensity() must be implemented by subclasses.")

    def distance(self, hit_point: Point) -> float:
        raise NotImplementedError("distance() must be implemented by subclasses.")

    def direction_from(self, hit_point: Point) -> Vector3:
        """
        Unit vector pointing from ``hit_point`` towards the light.
        """
        raise NotImplementedError("direction_from() must be implemented by subclasses.")


class SphericalLight(Light):
    """
    Point light radiating equally in all directions with inverse-square falloff.
    """
    def __init__(self, position: Point, color: Color, intensity: float):
        super().__init__(color, intensity)
        self.position = position

    def intensity(self, hit_point: Point) -> float:
        r2 = (self.position - hit_point).dot(self.position - hit_point)
        return self._intensity / (4.0 * math.pi * r2)

    def distance(self, hit_point: Point) -> float:
        return (self.position - hit_point).length()

    def direction_from(self, hit_point: Point) -> Vector3:
        return (self.position - hit_point).normalize()

    def __repr__(self) -> str:
        return f"SphericalLight({self.position!r}, {self.color!r}, {self._intensity})"


class DirectionalLight(Light):
    """
    Light arriving along a fixed direction from infinitely far away, e.g. the sun.
    """
    def __init__(self, direction: Vector3, color: Color, intensity: float):
        super().__init__(color, intensity)
        self.direction = direction

    def intensity(self, hit_point: Point) -> float:
        return self._intensity

    def distance(self, hit_point: Point) -> float:
        return math.inf

    def direction_from(self, hit_point: Point) -> Vector3:
        return -self.direction.normalize()

    def __repr__(self) -> str:
        return f"DirectionalLight({self.direction!r}, {self.color!r}, {self._intensity})"
