"""A recursive Whitted-style ray tracer: spheres, planes, point and directional lights."""

__version__ = "0.1.0"

from raytracer.camera.camera import Camera
from raytracer.core.color import Color
from raytracer.core.ray import Intersection, Ray
from raytracer.core.vector import Point, Vector3
from raytracer.geometry import Intersectable, Plane, Scene, Sphere
from raytracer.lights.light import DirectionalLight, Light, SphericalLight
from raytracer.materials.material import Diffuse, Material, Reflective, Refractive
from raytracer.materials.textures import ImageTexture, SolidTexture, Texture
from raytracer.renderer.raytracer import Renderer, render

__all__ = [
    "Camera", "Color", "Intersection", "Ray", "Point", "Vector3",
    "Intersectable", "Plane", "Scene", "Sphere",
    "DirectionalLight", "Light", "SphericalLight",
    "Diffuse", "Material", "Reflective", "Refractive",
    "ImageTexture", "SolidTexture", "Texture",
    "Renderer", "render",
]
