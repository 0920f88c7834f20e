"""Tests for the recursive shading engine."""

import math

import numpy as np
import pytest

from raytracer.config import MAX_RECURSION_DEPTH
from raytracer.core.color import Color
from raytracer.core.ray import Intersection, Ray
from raytracer.core.vector import Point, Vector3
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import Scene
from raytracer.lights.light import DirectionalLight, SphericalLight
from raytracer.materials.material import Material, Reflective, Refractive
from raytracer.renderer import shading
from raytracer.renderer.shading import fresnel, get_color, shade_diffuse, trace_ray


def is_black(color):
    return color.red == 0.0 and color.green == 0.0 and color.blue == 0.0


class TestSceneTrace:

    def test_nearest_primitive_wins(self, red_diffuse):
        near = Sphere(Point(0, 0, -3), 1.0, red_diffuse)
        far = Sphere(Point(0, 0, -8), 1.0, red_diffuse)
        scene = Scene(10, 10, [far, near], [])
        hit = scene.trace(Ray(Point(0, 0, 0), Vector3(0, 0, -1)))
        assert hit.element is near
        assert hit.distance == pytest.approx(2.0)

    def test_miss_returns_none(self, sphere_scene):
        assert sphere_scene.trace(Ray(Point(0, 0, 0), Vector3(0, 0, 1))) is None

    def test_invalid_dimensions_are_rejected(self):
        with pytest.raises(ValueError):
            Scene(0, 10, [], [])


class TestFresnel:

    @pytest.mark.parametrize("angle", [0, 10, 30, 45, 60, 80, 89])
    @pytest.mark.parametrize("index", [1.0, 1.33, 1.5, 2.42])
    @pytest.mark.parametrize("exiting", [False, True])
    def test_reflectance_is_between_zero_and_one(self, angle, index, exiting):
        theta = math.radians(angle)
        normal = Vector3(0, 1, 0)
        y = math.cos(theta) if exiting else -math.cos(theta)
        incident = Vector3(math.sin(theta), y, 0)
        kr = fresnel(incident, normal, index)
        assert 0.0 <= kr <= 1.0

    def test_normal_incidence_matches_closed_form(self):
        kr = fresnel(Vector3(0, -1, 0), Vector3(0, 1, 0), 1.5)
        assert kr == pytest.approx(((1.5 - 1.0) / (1.5 + 1.0)) ** 2)

    def test_total_internal_reflection_beyond_critical_angle(self):
        theta = math.radians(45)  # critical angle for 1.5 is ~41.8 degrees
        incident = Vector3(math.sin(theta), math.cos(theta), 0)
        assert fresnel(incident, Vector3(0, 1, 0), 1.5) == 1.0

    def test_below_critical_angle_transmits(self):
        theta = math.radians(30)
        incident = Vector3(math.sin(theta), math.cos(theta), 0)
        assert fresnel(incident, Vector3(0, 1, 0), 1.5) < 1.0

    def test_grazing_incidence_reflects_more(self):
        normal = Vector3(0, 1, 0)
        head_on = fresnel(Vector3(0, -1, 0), normal, 1.5)
        theta = math.radians(85)
        grazing = fresnel(Vector3(math.sin(theta), -math.cos(theta), 0), normal, 1.5)
        assert grazing > head_on


class TestShadeDiffuse:

    def test_unoccluded_light_contributes(self, red_sphere, overhead_light):
        scene = Scene(10, 10, [red_sphere], [overhead_light])
        top = Point(0, 1, -5)
        color = shade_diffuse(scene, red_sphere, top, red_sphere.surface_normal(top))
        expected = 500.0 / (4 * math.pi * 16) * 0.18 / math.pi
        assert color.red == pytest.approx(expected)
        assert color.green == 0.0

    def test_occluder_blocks_light_and_removing_it_restores(self, red_sphere, overhead_light,
                                                           red_diffuse):
        occluder = Sphere(Point(0, 3, -5), 0.5, red_diffuse)
        top = Point(0, 1, -5)
        normal = red_sphere.surface_normal(top)

        shadowed = Scene(10, 10, [red_sphere, occluder], [overhead_light])
        assert is_black(shade_diffuse(shadowed, red_sphere, top, normal))

        lit = Scene(10, 10, [red_sphere], [overhead_light])
        assert shade_diffuse(lit, red_sphere, top, normal).red > 0.0

    def test_geometry_beyond_the_light_does_not_shadow(self, red_sphere, red_diffuse):
        light = SphericalLight(Point(0, 3, -5), Color(1, 1, 1), 500.0)
        beyond = Sphere(Point(0, 10, -5), 1.0, red_diffuse)
        scene = Scene(10, 10, [red_sphere, beyond], [light])
        top = Point(0, 1, -5)
        assert shade_diffuse(scene, red_sphere, top, red_sphere.surface_normal(top)).red > 0.0

    def test_surface_facing_away_from_light_is_dark(self, red_sphere, overhead_light):
        scene = Scene(10, 10, [red_sphere], [overhead_light])
        bottom = Point(0, -1, -5)
        assert is_black(shade_diffuse(scene, red_sphere, bottom, red_sphere.surface_normal(bottom)))

    def test_lights_accumulate_and_clamp(self, red_sphere):
        light = DirectionalLight(Vector3(0, -1, 0), Color(1, 1, 1), 1000.0)
        scene = Scene(10, 10, [red_sphere], [light, light])
        top = Point(0, 1, -5)
        color = shade_diffuse(scene, red_sphere, top, red_sphere.surface_normal(top))
        assert color == Color(1.0, 0.0, 0.0)


class TestTraceRay:

    def test_miss_is_black(self, sphere_scene):
        assert is_black(trace_ray(sphere_scene, Ray(Point(0, 0, 0), Vector3(0, 0, 1)), 0))

    def test_depth_limit_is_black(self, sphere_scene):
        # Straight down onto the lit top of the sphere
        ray = Ray(Point(0, 3, -5), Vector3(0, -1, 0))
        assert not is_black(trace_ray(sphere_scene, ray, 0))
        assert is_black(trace_ray(sphere_scene, ray, MAX_RECURSION_DEPTH))

    def test_facing_mirrors_terminate(self, monkeypatch):
        mirror = Material(Color(1, 1, 1), 0.18, Reflective(1.0))
        left = Sphere(Point(-2, 0, -5), 1.0, mirror)
        right = Sphere(Point(2, 0, -5), 1.0, mirror)
        scene = Scene(10, 10, [left, right], [])

        calls = []
        original = shading.trace_ray

        def counting_trace(scene, ray, depth=0):
            calls.append(depth)
            return original(scene, ray, depth)

        monkeypatch.setattr(shading, "trace_ray", counting_trace)
        color = shading.trace_ray(scene, Ray(Point(0, 0, -5), Vector3(1, 0, 0)), 0)

        assert is_black(color)
        assert max(calls) == MAX_RECURSION_DEPTH
        for channel in color:
            assert math.isfinite(channel)


class TestGetColor:

    def test_reflective_blends_diffuse_and_reflection(self, overhead_light):
        floor_material = Material(Color(1, 1, 1), 0.18, Reflective(0.5))
        floor = Plane(Point(0, -1, 0), Vector3(0, -1, 0), floor_material)
        scene = Scene(10, 10, [floor], [overhead_light])
        ray = Ray(Point(0, 0, -5), Vector3(0, -1, 0))
        hit = scene.trace(ray)

        color = get_color(scene, ray, hit, 0)
        hit_point = Point(0, -1, -5)
        diffuse = shade_diffuse(scene, floor, hit_point, floor.surface_normal(hit_point))
        # The reflected ray escapes to the black background
        assert color.red == pytest.approx(diffuse.red * 0.5)

    def test_mirror_shows_reflected_object(self, red_diffuse):
        mirror = Material(Color(1, 1, 1), 0.18, Reflective(1.0))
        floor = Plane(Point(0, -2, -5), Vector3(0, -1, 0), mirror)
        ball = Sphere(Point(0, 0, -5), 1.0, red_diffuse)
        # Between floor and ball, off to the side, so the ball's underside is lit
        light = SphericalLight(Point(3, -1.5, -5), Color(1, 1, 1), 500.0)
        ray = Ray(Point(0, -1.5, -5), Vector3(0, -1, 0))

        scene = Scene(10, 10, [floor, ball], [light])
        hit = scene.trace(ray)
        assert hit.element is floor
        color = get_color(scene, ray, hit, 0)
        assert color.red > 0.0
        assert color.green == 0.0

        empty = Scene(10, 10, [floor], [light])
        assert is_black(get_color(empty, ray, empty.trace(ray), 0))

    def test_partial_mirror_adds_full_reflection(self, red_diffuse):
        half_mirror = Material(Color(1, 1, 1), 0.18, Reflective(0.5))
        floor = Plane(Point(0, -2, -5), Vector3(0, -1, 0), half_mirror)
        ball = Sphere(Point(0, 0, -5), 1.0, red_diffuse)
        light = SphericalLight(Point(3, -1.5, -5), Color(1, 1, 1), 500.0)
        scene = Scene(10, 10, [floor, ball], [light])
        ray = Ray(Point(0, -1.5, -5), Vector3(0, -1, 0))

        hit_point = Point(0, -2, -5)
        normal = floor.surface_normal(hit_point)
        diffuse = shade_diffuse(scene, floor, hit_point, normal)
        reflection = trace_ray(scene, Ray.create_reflection(normal, ray.direction, hit_point,
                                                            scene.shadow_bias), 1)
        assert reflection.red > 0.0

        color = get_color(scene, ray, scene.trace(ray), 0)
        # Diffuse term is scaled down, the reflection is added at full strength
        assert color.red == pytest.approx(diffuse.red * 0.5 + reflection.red)
        assert color.red > diffuse.red * 0.5 + reflection.red * 0.5

    def test_refractive_with_zero_transparency_is_black(self, overhead_light):
        glass = Material(Color(1, 1, 1), 0.18, Refractive(1.5, 0.0))
        ball = Sphere(Point(0, 0, -5), 1.0, glass)
        scene = Scene(10, 10, [ball], [overhead_light])
        ray = Ray(Point(0, 0, 0), Vector3(0, 0, -1))
        assert is_black(get_color(scene, ray, scene.trace(ray), 0))

    def test_glass_sphere_shows_object_behind_it(self, red_diffuse):
        glass = Material(Color(1, 1, 1), 0.18, Refractive(1.5, 1.0))
        lens = Sphere(Point(0, 0, -4), 1.0, glass)
        backdrop = Sphere(Point(0, 0, -12), 4.0, red_diffuse)
        # Above and behind the lens so it does not shadow the backdrop
        light = SphericalLight(Point(0, 5, -7), Color(1, 1, 1), 2000.0)
        scene = Scene(10, 10, [lens, backdrop], [light])

        ray = Ray(Point(0, 0, 0), Vector3(0, 0, -1))
        hit = scene.trace(ray)
        assert hit.element is lens
        color = get_color(scene, ray, hit, 0)
        assert color.red > 0.0
        assert color.green == 0.0
        for channel in color:
            assert math.isfinite(channel)

    def test_unknown_surface_type_raises(self, red_sphere, sphere_scene):
        red_sphere.material.surface = object()
        ray = Ray(Point(0, 0, 0), Vector3(0, 0, -1))
        with pytest.raises(TypeError):
            get_color(sphere_scene, ray, Intersection(4.0, red_sphere), 0)


def test_numpy_scalar_parameters_shade():
    material = Material(Color(1, 0, 0), np.float32(0.18), Reflective(np.float32(0.5)))
    ball = Sphere(Point(0, 0, -5), 1.0, material)
    light = SphericalLight(Point(0, 5, -5), Color(1, 1, 1), np.float32(500.0))
    scene = Scene(10, 10, [ball], [light])

    color = trace_ray(scene, Ray(Point(0, 3, -5), Vector3(0, -1, 0)), 0)
    assert color.red > 0.0
    assert color.green == 0.0
    assert Color(1, 1, 1) * np.float32(0.5) == Color(0.5, 0.5, 0.5)
