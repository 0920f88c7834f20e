"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Make the src layout importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from raytracer.core.color import Color  # noqa: E402
from raytracer.core.vector import Point  # noqa: E402
from raytracer.geometry.sphere import Sphere  # noqa: E402
from raytracer.geometry.world import Scene  # noqa: E402
from raytracer.lights.light import SphericalLight  # noqa: E402
from raytracer.materials.material import Diffuse, Material  # noqa: E402


@pytest.fixture
def red_diffuse():
    """Provide a matte red material."""
    return Material(Color(1.0, 0.0, 0.0), 0.18, Diffuse())


@pytest.fixture
def red_sphere(red_diffuse):
    """Unit sphere five units down the -Z axis."""
    return Sphere(Point(0.0, 0.0, -5.0), 1.0, red_diffuse)


@pytest.fixture
def overhead_light():
    """White point light above the red sphere."""
    return SphericalLight(Point(0.0, 5.0, -5.0), Color(1.0, 1.0, 1.0), 500.0)


@pytest.fixture
def sphere_scene(red_sphere, overhead_light):
    """100x100 scene with one red sphere lit from above."""
    return Scene(100, 100, [red_sphere], [overhead_light])
