# geometry/hittable.py
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.uv import UV
from raytracer.core.vector import Point, Vector3


class Intersectable:
    """
    Abstract class for primitives that can be hit by a ray.

    Every primitive owns its material and can report the hit distance along a ray,
    the surface normal at a point and the texture coordinates at a point.
    """
    def __init__(self, material):
        self.material = material

    def intersect(self, ray: Ray) -> Optional[float]:
        """
        Returns the distance along the ray to the nearest hit, or None.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def surface_normal(self, hit_point: Point) -> Vector3:
        raise NotImplementedError("surface_normal() must be implemented by subclasses.")

    def texture_coords(self, hit_point: Point) -> UV:
        raise NotImplementedError("texture_coords() must be implemented by subclasses.")
