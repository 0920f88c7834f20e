# renderer/shading.py
"""
Recursive Whitted-style shading.

``trace_ray`` finds the nearest hit for a ray and hands it to ``get_color``,
which shades it according to the hit primitive's surface type and recurses for
mirror and transmitted rays until ``MAX_RECURSION_DEPTH`` is reached.
"""
import math

from raytracer.config import MAX_RECURSION_DEPTH
from raytracer.core.color import Color
from raytracer.core.ray import Intersection, Ray
from raytracer.core.vector import Point, Vector3
from raytracer.geometry.hittable import Intersectable
from raytracer.materials.material import Diffuse, Reflective, Refractive


def trace_ray(scene, ray: Ray, depth: int = 0) -> Color:
    """
    Color seen along ``ray``. Misses and rays past the depth limit are black.
    """
    if depth >= MAX_RECURSION_DEPTH:
        return Color.black()

    intersection = scene.trace(ray)
    if intersection is None:
        return Color.black()
    return get_color(scene, ray, intersection, depth)


def get_color(scene, ray: Ray, intersection: Intersection, depth: int) -> Color:
    element = intersection.element
    hit_point = ray.origin + ray.direction * intersection.distance
    surface_normal = element.surface_normal(hit_point)
    material = element.material
    surface = material.surface

    if isinstance(surface, Diffuse):
        return shade_diffuse(scene, element, hit_point, surface_normal)

    if isinstance(surface, Reflective):
        color = shade_diffuse(scene, element, hit_point, surface_normal)
        color = color * (1.0 - surface.reflectivity)
        reflection_ray = Ray.create_reflection(surface_normal, ray.direction, hit_point,
                                               scene.shadow_bias)
        return color + trace_ray(scene, reflection_ray, depth + 1)

    if isinstance(surface, Refractive):
        refraction_color = Color.black()
        kr = fresnel(ray.direction, surface_normal, surface.index)
        surface_color = material.color(element.texture_coords(hit_point))

        if kr < 1.0:
            transmission_ray = Ray.create_transmission(surface_normal, ray.direction, hit_point,
                                                       scene.shadow_bias, surface.index)
            if transmission_ray is not None:
                refraction_color = trace_ray(scene, transmission_ray, depth + 1)

        reflection_ray = Ray.create_reflection(surface_normal, ray.direction, hit_point,
                                               scene.shadow_bias)
        reflection_color = trace_ray(scene, reflection_ray, depth + 1)

        color = reflection_color * kr + refraction_color * (1.0 - kr)
        return color * surface.transparency * surface_color

    raise TypeError(f"Unknown surface type: {surface!r}")


def shade_diffuse(scene, element: Intersectable, hit_point: Point,
                  surface_normal: Vector3) -> Color:
    """
    Lambertian shading from every light that is not blocked, clamped to [0, 1].
    """
    color = Color.black()
    material = element.material
    surface_color = material.color(element.texture_coords(hit_point))
    # Energy-normalized diffuse BRDF
    light_reflected = material.albedo / math.pi

    for light in scene.lights:
        direction_to_light = light.direction_from(hit_point)
        shadow_ray = Ray.create_shadow(hit_point, surface_normal, direction_to_light,
                                       scene.shadow_bias)

        # Occluders beyond the light do not cast shadows
        shadow_intersection = scene.trace(shadow_ray)
        in_light = (shadow_intersection is None or
                    shadow_intersection.distance > light.distance(hit_point))
        if not in_light:
            continue

        light_power = max(surface_normal.dot(direction_to_light), 0.0) * light.intensity(hit_point)
        color = color + surface_color * light.color * (light_power * light_reflected)

    return color.clamp()


def fresnel(incident: Vector3, normal: Vector3, index: float) -> float:
    """
    Unpolarized Fresnel reflectance at a dielectric interface.

    Args:
        incident: Unit direction of the incoming ray
        normal: Outward unit surface normal
        index: Index of refraction of the medium behind the surface

    Returns:
        The reflected fraction in [0, 1]; 1.0 on total internal reflection.
    """
    i_dot_n = incident.dot(normal)
    eta_i = 1.0
    eta_t = index
    if i_dot_n > 0.0:
        # Leaving the medium
        eta_i, eta_t = eta_t, eta_i

    sin_t = eta_i / eta_t * math.sqrt(max(1.0 - i_dot_n * i_dot_n, 0.0))
    if sin_t > 1.0:
        # Total internal reflection
        return 1.0

    cos_t = math.sqrt(max(1.0 - sin_t * sin_t, 0.0))
    cos_i = abs(i_dot_n)
    if cos_i == 0.0 and cos_t == 0.0:
        return 1.0

    r_s = ((eta_t * cos_i) - (eta_i * cos_t)) / ((eta_t * cos_i) + (eta_i * cos_t))
    r_p = ((eta_i * cos_i) - (eta_t * cos_t)) / ((eta_i * cos_i) + (eta_t * cos_t))
    return (r_s * r_s + r_p * r_p) / 2.0
