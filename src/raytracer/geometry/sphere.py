# geometry/sphere.py
import math
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.uv import UV
from raytracer.core.vector import Point, Vector3
from raytracer.geometry.hittable import Intersectable


class Sphere(Intersectable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Point, radius: float, material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(material)
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> Optional[float]:
        # Center-to-origin vector projected onto the ray gives the closest approach
        c = self.center - ray.origin
        b_length = c.dot(ray.direction)
        a_square = c.dot(c) - b_length * b_length
        radius_square = self.radius * self.radius

        if a_square > radius_square:
            return None

        thickness = math.sqrt(radius_square - a_square)
        t0 = b_length - thickness
        t1 = b_length + thickness

        if t0 < 0.0 and t1 < 0.0:
            return None
        if t0 < 0.0:
            return t1
        if t1 < 0.0:
            return t0
        return min(t0, t1)

    def surface_normal(self, hit_point: Point) -> Vector3:
        return (hit_point - self.center).normalize()

    def texture_coords(self, hit_point: Point) -> UV:
        hit_vec = hit_point - self.center
        # Clamp guards acos against rounding just past the poles
        cos_lat = max(-1.0, min(1.0, hit_vec.y / self.radius))
        return UV(
            (1.0 + math.atan2(hit_vec.z, hit_vec.x) / math.pi) * 0.5,
            math.acos(cos_lat) / math.pi
        )

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
