# camera/camera.py
import math
from typing import Optional

from raytracer.config import CAMERA_SETTINGS
from raytracer.core.ray import Ray
from raytracer.core.vector import Point, Vector3


class Camera:
    """
    Pinhole camera mapping normalized pixel coordinates to world-space rays.

    ``vup`` follows the pixel-space convention of the renderer: with the default
    (0, -1, 0), v = 0 is the top row of the image and v grows downwards.
    """
    def __init__(self, look_from: Point, look_at: Point, vup: Vector3,
                 vfov: float, aspect_ratio: float):
        if aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if not 0 < vfov < 180:
            raise ValueError(f"Vertical field of view must be in (0, 180) degrees, got {vfov}")
        if look_from == look_at:
            raise ValueError("Camera look_from and look_at must differ")

        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.update_camera()

    @classmethod
    def default_with_aspect_ratio(cls, aspect_ratio: float,
                                  vfov: Optional[float] = None) -> "Camera":
        """Camera at the origin looking down -Z."""
        return cls(
            Point(*CAMERA_SETTINGS['look_from']),
            Point(*CAMERA_SETTINGS['look_at']),
            Vector3(*CAMERA_SETTINGS['vup']),
            CAMERA_SETTINGS['vfov'] if vfov is None else vfov,
            aspect_ratio
        )

    def update_camera(self):
        """Computes the camera's basis vectors and viewport."""
        self.w = (self.look_at - self.look_from).normalize()
        u = self.vup.cross(self.w)
        if u.length() == 0:
            raise ValueError("Camera vup must not be parallel to the view direction")
        self.u = u.normalize()
        self.v = self.w.cross(self.u)

        # Viewport dimensions from the vertical fov
        self.half_height = math.tan(math.radians(self.vfov) / 2.0)
        self.half_width = self.aspect_ratio * self.half_height

        self.horizontal = self.u * (2.0 * self.half_width)
        self.vertical = self.v * (2.0 * self.half_height)
        self.anchor = (self.look_at -
                       self.u * self.half_width -
                       self.v * self.half_height)

    def get_ray(self, u: float, v: float) -> Ray:
        """Generates the primary ray through normalized pixel coordinates (u, v)."""
        direction = (self.anchor +
                     self.horizontal * u +
                     self.vertical * v -
                     self.look_from)
        return Ray(self.look_from, direction.normalize())
