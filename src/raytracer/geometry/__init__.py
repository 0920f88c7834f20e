from raytracer.geometry.hittable import Intersectable
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import Scene

__all__ = ["Intersectable", "Plane", "Sphere", "Scene"]
