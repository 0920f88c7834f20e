# main.py
import argparse
import logging
import sys
from typing import Optional

from raytracer.config import RENDER_SETTINGS
from raytracer.core.vector import Point, Vector3
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import Scene
from raytracer.lights.light import SphericalLight
from raytracer.logging_config import setup_logging
from raytracer.materials.material import Material
from raytracer.materials.presets import ColorPresets, SurfacePresets
from raytracer.materials.texture_loader import checkerboard, load_texture
from raytracer.materials.textures import Texture
from raytracer.renderer.raytracer import Renderer

logger = logging.getLogger(__name__)


def create_scene(width: int, height: int, texture: Optional[Texture] = None) -> Scene:
    """
    Three opaque spheres and a glass ball over a reflective checkered floor, lit by two point lights.
    """
    if texture is None:
        texture = checkerboard()

    sphere_green = Sphere(
        center=Point(0.0, 0.0, -5.0),
        radius=0.75,
        material=Material(ColorPresets.GREEN, 0.18, SurfacePresets.mirror(0.7))
    )
    sphere_textured = Sphere(
        center=Point(-2.0, 1.0, -6.0),
        radius=1.5,
        material=Material(texture, 0.58, SurfacePresets.matte())
    )
    sphere_red = Sphere(
        center=Point(1.0, 1.5, -4.0),
        radius=1.5,
        material=Material(ColorPresets.RED, 0.18, SurfacePresets.matte())
    )
    sphere_glass = Sphere(
        center=Point(0.9, -1.4, -3.2),
        radius=0.5,
        material=Material(ColorPresets.WHITE, 0.18, SurfacePresets.glass())
    )
    # The normal points down so the floor is seen from above
    ground = Plane(
        origin=Point(0.0, -2.0, -5.0),
        normal=Vector3(0.0, -1.0, 0.0),
        material=Material(texture, 0.18, SurfacePresets.mirror(0.5))
    )

    lights = [
        SphericalLight(Point(-2.0, 5.0, -3.0), ColorPresets.DAYLIGHT, 1000.0),
        SphericalLight(Point(0.25, 0.0, -2.0), ColorPresets.DUSK, 250.0),
    ]

    return Scene(width, height, [sphere_green, sphere_textured, sphere_red, sphere_glass, ground], lights)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Whitted-style Python ray tracer')
    parser.add_argument('output', nargs='?', default=RENDER_SETTINGS['output'],
                        help='Output image file (format taken from the extension)')
    parser.add_argument('--width', type=int, default=RENDER_SETTINGS['width'], help='Image width')
    parser.add_argument('--height', type=int, default=RENDER_SETTINGS['height'], help='Image height')
    parser.add_argument('--texture', type=str, default=None,
                        help='Image used for the textured sphere and floor (procedural checkerboard if omitted)')
    parser.add_argument('--log-level', type=str, default=None, help='Logging level')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    texture = None
    if args.texture is not None:
        try:
            texture = load_texture(args.texture)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Could not load texture: {e}")
            return 1

    try:
        scene = create_scene(args.width, args.height, texture)
    except ValueError as e:
        logger.error(f"Invalid scene: {e}")
        return 1

    renderer = Renderer(scene)
    image = renderer.render()
    renderer.save(image, args.output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
