# materials/material.py
from typing import Union

from raytracer.core.color import Color
from raytracer.core.uv import UV
from raytracer.materials.textures import SolidTexture, Texture


class SurfaceType:
    """
    How a surface responds to incoming light. The set of surface types is closed:
    Diffuse, Reflective and Refractive.
    """


class Diffuse(SurfaceType):
    """Matte surface lit only by direct light."""

    def __eq__(self, other) -> bool:
        return isinstance(other, Diffuse)

    def __hash__(self) -> int:
        return hash(Diffuse)

    def __repr__(self) -> str:
        return "Diffuse()"


class Reflective(SurfaceType):
    """Mirror blended with diffuse shading; ``reflectivity`` in [0, 1]."""

    def __init__(self, reflectivity: float):
        if not 0.0 <= reflectivity <= 1.0:
            raise ValueError(f"Reflectivity must be in [0, 1], got {reflectivity}")
        self.reflectivity = reflectivity

    def __eq__(self, other) -> bool:
        return isinstance(other, Reflective) and other.reflectivity == self.reflectivity

    def __hash__(self) -> int:
        return hash((Reflective, self.reflectivity))

    def __repr__(self) -> str:
        return f"Reflective({self.reflectivity})"


class Refractive(SurfaceType):
    """
    Dielectric such as glass or water.

    ``index`` is the index of refraction, ``transparency`` in [0, 1] scales the
    combined reflected and transmitted light.
    """

    def __init__(self, index: float, transparency: float):
        if index <= 0:
            raise ValueError(f"Index of refraction must be positive, got {index}")
        if not 0.0 <= transparency <= 1.0:
            raise ValueError(f"Transparency must be in [0, 1], got {transparency}")
        self.index = index
        self.transparency = transparency

    def __eq__(self, other) -> bool:
        return (isinstance(other, Refractive) and other.index == self.index
                and other.transparency == self.transparency)

    def __hash__(self) -> int:
        return hash((Refractive, self.index, self.transparency))

    def __repr__(self) -> str:
        return f"Refractive({self.index}, {self.transparency})"


class Material:
    """
    Surface appearance of a primitive: a coloration (solid color or texture),
    a diffuse albedo and a surface type.
    """
    def __init__(self, coloration: Union[Color, Texture], albedo: float,
                 surface: SurfaceType = None):
        # Store either a solid color or a texture.
        if isinstance(coloration, Color):
            self.coloration = SolidTexture(coloration)
        else:
            self.coloration = coloration
        self.albedo = albedo
        self.surface = surface if surface is not None else Diffuse()

    def color(self, uv: UV) -> Color:
        """
        Surface color at the given texture coordinates.
        """
        return self.coloration.sample(uv)

    def __repr__(self) -> str:
        return f"Material({self.coloration!r}, {self.albedo}, {self.surface!r})"
