# core/ray.py
import math
from typing import Optional

from raytracer.core.vector import Point, Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and (normally unit length) direction.
    """
    __slots__ = ['origin', 'direction']

    def __init__(self, origin: Point, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    @staticmethod
    def create_reflection(normal: Vector3, incident: Vector3, intersection: Point,
                          bias: float) -> "Ray":
        """
        Mirror ``incident`` about ``normal``, starting just off the surface.
        """
        return Ray(
            intersection + normal * bias,
            reflect(incident, normal)
        )

    @staticmethod
    def create_shadow(hit_point: Point, surface_normal: Vector3, light_direction: Vector3,
                      bias: float) -> "Ray":
        return Ray(hit_point + surface_normal * bias, light_direction)

    @staticmethod
    def create_transmission(surface_normal: Vector3, incident: Vector3, intersection: Point,
                            bias: float, index: float) -> Optional["Ray"]:
        """
        Refract ``incident`` through a dielectric interface with index of refraction ``index``.

        The normal is flipped and the indices swapped when the ray leaves the medium.
        Returns None on total internal reflection.
        """
        normal = surface_normal
        eta_t = index
        eta_i = 1.0

        i_dot_n = incident.dot(normal)
        if i_dot_n < 0.0:
            # Outside the surface
            i_dot_n = -i_dot_n
        else:
            # Inside the surface
            normal = -normal
            eta_t = 1.0
            eta_i = index

        eta = eta_i / eta_t
        k = 1.0 - (eta * eta) * (1.0 - i_dot_n * i_dot_n)
        if k < 0.0:
            return None

        return Ray(
            intersection + normal * -bias,
            (incident + normal * i_dot_n) * eta - normal * math.sqrt(k)
        )

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


class Intersection:
    """
    The nearest hit of a ray: its distance along the ray and the primitive hit.
    """
    __slots__ = ['distance', 'element']

    def __init__(self, distance: float, element):
        self.distance = distance
        self.element = element

    def __repr__(self) -> str:
        return f"Intersection({self.distance}, {self.element!r})"
