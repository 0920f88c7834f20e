# materials/presets.py
from raytracer.core.color import Color
from raytracer.materials.material import Diffuse, Material, Reflective, Refractive


class SurfacePresets:
    """Predefined surface types with realistic refractive indices."""

    @staticmethod
    def matte() -> Diffuse:
        return Diffuse()

    @staticmethod
    def mirror(reflectivity: float = 1.0) -> Reflective:
        return Reflective(reflectivity)

    @staticmethod
    def glass(transparency: float = 1.0) -> Refractive:
        return Refractive(1.52, transparency)  # Common glass

    @staticmethod
    def water(transparency: float = 1.0) -> Refractive:
        return Refractive(1.33, transparency)

    @staticmethod
    def diamond(transparency: float = 1.0) -> Refractive:
        return Refractive(2.42, transparency)

    @staticmethod
    def ice(transparency: float = 1.0) -> Refractive:
        return Refractive(1.31, transparency)


class ColorPresets:
    """Common linear colors for materials."""

    RED = Color(0.8, 0.1, 0.1)
    GREEN = Color(0.4, 1.0, 0.4)
    BLUE = Color(0.2, 0.2, 0.8)
    WHITE = Color(1.0, 1.0, 1.0)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.0, 0.0, 0.0)

    # Light colors
    DAYLIGHT = Color(0.9, 0.9, 0.9)
    DUSK = Color(0.2, 0.2, 0.5)

    @staticmethod
    def matte(color: Color, albedo: float = 0.18) -> Material:
        """Create a diffuse material with the given color."""
        return Material(color, albedo, Diffuse())
