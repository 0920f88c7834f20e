# geometry/world.py
import logging
from typing import List, Optional

from raytracer.camera.camera import Camera
from raytracer.config import SHADOW_BIAS
from raytracer.core.ray import Intersection, Ray
from raytracer.geometry.hittable import Intersectable
from raytracer.lights.light import Light

logger = logging.getLogger(__name__)


class Scene:
    """
    The primitives, lights and camera to render, plus the image size and the
    bias used to lift secondary rays off the surface they start from.

    Nothing here changes once rendering starts.
    """
    def __init__(self, width: int, height: int, elements: List[Intersectable],
                 lights: List[Light], camera: Optional[Camera] = None,
                 shadow_bias: float = SHADOW_BIAS):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.elements: List[Intersectable] = list(elements)
        self.lights: List[Light] = list(lights)
        self.camera = camera if camera is not None else Camera.default_with_aspect_ratio(width / height)
        self.shadow_bias = shadow_bias

        logger.info(f"Scene created: {width}x{height}, "
                    f"{len(self.elements)} primitives, {len(self.lights)} lights")

    def dimension(self):
        return self.width, self.height

    def trace(self, ray: Ray) -> Optional[Intersection]:
        """
        Linear scan for the nearest primitive hit by ``ray``.
        """
        closest = None
        for element in self.elements:
            distance = element.intersect(ray)
            if distance is not None and (closest is None or distance < closest.distance):
                closest = Intersection(distance, element)
        return closest
