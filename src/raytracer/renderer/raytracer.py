# renderer/raytracer.py
import logging
import time

import numpy as np
from PIL import Image

from raytracer.geometry.world import Scene
from raytracer.renderer.shading import trace_ray
from .tone_mapping import gamma_encode_image

logger = logging.getLogger(__name__)


class Renderer:
    """
    Casts one ray through the center of every pixel of a scene, row by row.

    Row 0 of the output is the top of the image.
    """
    def __init__(self, scene: Scene):
        self.scene = scene
        self.width, self.height = scene.dimension()

    def render_linear(self) -> np.ndarray:
        """
        Render the scene into a (height, width, 3) float buffer of linear colors.
        """
        scene = self.scene
        camera = scene.camera
        buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)

        logger.info(f"Rendering {self.width}x{self.height}")
        start_time = time.time()

        for y in range(self.height):
            v = (y + 0.5) / self.height
            for x in range(self.width):
                u = (x + 0.5) / self.width
                color = trace_ray(scene, camera.get_ray(u, v), 0)
                buffer[y, x] = (color.red, color.green, color.blue)
            logger.debug(f"Rendered row {y + 1}/{self.height}")

        logger.info(f"Rendered {self.width * self.height} pixels in {time.time() - start_time:.3f}s")
        return buffer

    def render(self) -> np.ndarray:
        """
        Render the scene into a (height, width, 4) uint8 RGBA buffer, gamma encoded.
        """
        return gamma_encode_image(self.render_linear())

    @staticmethod
    def save(image: np.ndarray, path: str) -> None:
        """
        Write an RGBA buffer to disk; Pillow picks the format from the extension.
        """
        img = Image.fromarray(image)
        # JPEG has no alpha channel
        if str(path).lower().endswith(('.jpg', '.jpeg')):
            img = img.convert('RGB')
        img.save(path)
        logger.info(f"Saved image to {path}")


def render(scene: Scene) -> np.ndarray:
    return Renderer(scene).render()
