# geometry/plane.py
from typing import Optional

from raytracer.config import PLANE_PARALLEL_EPSILON
from raytracer.core.ray import Ray
from raytracer.core.uv import UV
from raytracer.core.vector import Point, Vector3
from raytracer.geometry.hittable import Intersectable


class Plane(Intersectable):
    """
    An infinite plane through ``origin``.

    The configured ``normal`` points away from the lit side: a ray only hits the
    plane when it travels along the normal, and ``surface_normal`` always returns
    the negated normal whichever side the ray came from. Planes are one-sided.
    """
    def __init__(self, origin: Point, normal: Vector3, material):
        if normal.length() == 0:
            raise ValueError("Plane normal must be non-zero")
        super().__init__(material)
        self.origin = origin
        self.normal = normal

    def intersect(self, ray: Ray) -> Optional[float]:
        normal = self.normal.normalize()
        denom = normal.dot(ray.direction.normalize())
        if denom > PLANE_PARALLEL_EPSILON:
            v = self.origin - ray.origin
            distance = v.dot(normal) / denom
            if distance > 0.0:
                return distance
        return None

    def surface_normal(self, hit_point: Point) -> Vector3:
        return -self.normal.normalize()

    def texture_coords(self, hit_point: Point) -> UV:
        x_axis = self.normal.cross(Vector3(0.0, 0.0, 1.0))
        if x_axis.length() == 0.0:
            x_axis = self.normal.cross(Vector3(0.0, 1.0, 0.0))
        x_axis = x_axis.normalize()
        y_axis = self.normal.normalize().cross(x_axis)
        hit_vec = hit_point - self.origin

        return UV(hit_vec.dot(x_axis), hit_vec.dot(y_axis))

    def __repr__(self) -> str:
        return f"Plane({self.origin!r}, {self.normal!r})"
