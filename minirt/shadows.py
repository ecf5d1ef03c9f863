"""Shadow tests: whether anything lies between a surface point and a light."""

from __future__ import annotations

from .intersect import (
    Ray,
    cap_hit,
    cylinder_side_t,
    inside_square,
    plane_hit,
    sphere_hit,
    triangle_hit,
)
from .scene import Cylinder, Light, Plane, Scene, Sphere, Square, Triangle
from .vector import Vec3

# Occluders closer than this to the shadow ray's origin are the surface itself.
_SELF_HIT = 0.0001


def _eye(scene: Scene) -> Vec3:
    """Position of the active camera, used by rays that start at the camera."""
    if scene.cameras:
        return scene.camera().pos
    return Vec3()


def between_light_source(light: Vec3, point: Vec3, origin: Vec3) -> bool:
    """Whether ``point`` lies between ``origin`` and the light, away from the origin."""
    to_point = (point - origin).length()
    to_light = (light - origin).length()
    return _SELF_HIT < to_point < to_light


def shadow_sphere(scene: Scene, ray: Ray, sphere: Sphere, light: Light) -> bool:
    """Whether ``sphere`` blocks the shadow ray before it reaches the light."""
    t = sphere_hit(sphere, ray, _eye(scene))
    if t is None:
        return False
    ray.t = t
    point = ray.origin + ray.direction * t
    return between_light_source(light.pos_shadow, point, ray.origin)


def shadow_plane(scene: Scene, ray: Ray, plane: Plane, light: Light) -> bool:
    """Whether ``plane`` blocks the shadow ray before it reaches the light."""
    hit = plane_hit(plane.point, plane.normal, ray, _eye(scene))
    if hit is None:
        return False
    ray.t = hit.t
    return between_light_source(light.pos, hit.point, ray.origin)


def shadow_square(scene: Scene, ray: Ray, square: Square, light: Light) -> bool:
    """Whether ``square`` blocks the shadow ray before it reaches the light."""
    hit = plane_hit(square.center, square.normal, ray, _eye(scene))
    if hit is None:
        return False
    ray.t = hit.t
    if not inside_square(square, hit):
        return False
    return between_light_source(light.pos, hit.point, ray.origin)


def shadow_triangle(scene: Scene, ray: Ray, triangle: Triangle, light: Light) -> bool:
    """Whether ``triangle`` blocks the shadow ray before it reaches the light."""
    hit = triangle_hit(triangle, ray, _eye(scene))
    if hit is None:
        return False
    ray.t = hit.t
    return between_light_source(light.pos, hit.point, ray.origin)


def _shadow_caps(
    scene: Scene, ray: Ray, cylinder: Cylinder, light: Light, m: float
) -> bool:
    if m and m > cylinder.height:
        centre = cylinder.point + cylinder.normal * cylinder.height
    else:
        centre = cylinder.point
    hit = cap_hit(cylinder, centre, ray, _eye(scene))
    if hit is None:
        return False
    ray.t = hit.t
    return between_light_source(light.pos, hit.point, ray.origin)


def shadow_cylinder(scene: Scene, ray: Ray, cylinder: Cylinder, light: Light) -> bool:
    """Whether the side or a cap of ``cylinder`` blocks the shadow ray."""
    m = 0.0
    t = cylinder_side_t(cylinder, ray, _eye(scene))
    if t is not None:
        ray.t = t
        point = ray.origin + ray.direction * t
        if between_light_source(light.pos, point, ray.origin):
            m = cylinder.normal.dot(point - cylinder.point)
            if 0 < m < cylinder.height:
                return True
    return _shadow_caps(scene, ray, cylinder, light, m)


def in_shadow(scene: Scene, ray: Ray, light: Light) -> bool:
    """Whether any object of the scene hides ``light`` from the ray's origin."""
    return (
        any(shadow_sphere(scene, ray, s, light) for s in scene.spheres)
        or any(shadow_plane(scene, ray, p, light) for p in scene.planes)
        or any(shadow_square(scene, ray, q, light) for q in scene.squares)
        or any(shadow_triangle(scene, ray, t, light) for t in scene.triangles)
        or any(shadow_cylinder(scene, ray, c, light) for c in scene.cylinders)
    )