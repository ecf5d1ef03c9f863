"""Ray intersection with the primitive shapes of a scene."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

from .scene import Cylinder, Sphere, Square, Triangle
from .vector import Vec3

# Offset added to plane hits so the point sits just past the surface.
FLT_EPSILON = 1.1920928955078125e-07

_X_AXIS = Vec3(1.0, 0.0, 0.0)
_Y_AXIS = Vec3(0.0, 1.0, 0.0)


@dataclass
class Ray:
    """A ray being traced.

    A ray whose origin is the zero vector starts at the camera; any other
    origin marks a shadow ray cast from a surface point.
    """

    direction: Vec3
    origin: Vec3 = field(default_factory=Vec3)
    t: float = sys.float_info.max
    color: int = 0

    @property
    def is_shadow(self) -> bool:
        return bool(self.origin)

    def start(self, eye: Vec3) -> Vec3:
        """The point the ray leaves from: its origin, or the eye for camera rays."""
        return self.origin if self.origin else eye


@dataclass(frozen=True)
class PlaneHit:
    """Where a ray meets a plane.

    ``normal`` is the plane normal as given; ``facing_normal`` is turned to
    face the incoming ray.
    """

    point: Vec3
    t: float
    den: float
    num: float
    normal: Vec3
    facing_normal: Vec3


def plane_hit(point: Vec3, normal: Vec3, ray: Ray, eye: Vec3) -> PlaneHit | None:
    """Intersect ``ray`` with the plane through ``point`` with ``normal``.

    Camera rays ignore hits further than ``ray.t``; shadow rays do not.
    """
    start = ray.start(eye)
    po = start - point
    den = normal.dot(ray.direction)
    if not den:
        return None
    num = normal.dot(po)
    if num * den >= 0:
        return None
    t = -(num / den)
    if t > ray.t and not ray.is_shadow:
        return None
    t += FLT_EPSILON
    hit_point = start + ray.direction * t
    facing = -normal if den > 0 else normal
    return PlaneHit(hit_point, t, den, num, normal, facing)


def sphere_hit(sphere: Sphere, ray: Ray, eye: Vec3) -> float | None:
    """Distance along the ray to the near side of ``sphere``, or None."""
    oc = sphere.center - ray.start(eye)
    p_oc = oc.dot(ray.direction)
    if p_oc < 0:
        return None
    oc_len = oc.length()
    d = math.sqrt(max(oc_len * oc_len - p_oc * p_oc, 0.0))
    if d > sphere.radius:
        return None
    return p_oc - math.sqrt(max(sphere.radius * sphere.radius - d * d, 0.0))


def cylinder_side_t(cylinder: Cylinder, ray: Ray, eye: Vec3) -> float | None:
    """Distance to the infinite cylinder surface around the axis, or None.

    Only the nearer root is taken, and only when the two roots differ;
    otherwise the distance is zero. Camera rays ignore hits beyond ``ray.t``.
    """
    oc = ray.start(eye) - cylinder.point
    n = cylinder.normal
    d = ray.direction
    d_n = d.dot(n)
    oc_n = oc.dot(n)
    a = 1 - d_n * d_n
    b = 2 * (d.dot(oc) - d_n * oc_n)
    c = oc.dot(oc) - oc_n * oc_n - cylinder.radius * cylinder.radius
    discr = b * b - 4 * a * c
    if discr < 0 or a == 0:
        return None
    root = math.sqrt(discr)
    x1 = (-b + root) / (2 * a)
    x2 = (-b - root) / (2 * a)
    t = x2 if x1 > x2 else 0.0
    if t < 0:
        return None
    if t > ray.t and not ray.is_shadow:
        return None
    return t


def cap_hit(cylinder: Cylinder, point: Vec3, ray: Ray, eye: Vec3) -> PlaneHit | None:
    """Intersect the cap disc of ``cylinder`` centred on ``point``."""
    hit = plane_hit(point, cylinder.normal, ray, eye)
    if hit is None:
        return None
    if (hit.point - point).length() < cylinder.radius:
        return hit
    return None


def nearest_cap(cylinder: Cylinder, eye: Vec3) -> Vec3:
    """Centre of whichever cap of ``cylinder`` lies closer to ``eye``."""
    top = cylinder.point + cylinder.normal * cylinder.height
    if (eye - cylinder.point).length() > (eye - top).length():
        return top
    return cylinder.point


def inside_square(square: Square, hit: PlaneHit) -> bool:
    """Whether a point on the square's plane falls within the square."""
    dx = _X_AXIS
    dy = hit.normal.cross(dx)
    if not dy:
        dx = _Y_AXIS
        dy = hit.normal.cross(dx)
    dx = dx.normalized()
    dy = dy.normalized()
    offset = hit.point - square.center
    return not (
        abs(dx.dot(offset)) > square.side or abs(dy.dot(offset)) > square.side
    )


def triangle_params(triangle: Triangle, p: Vec3) -> tuple[float, float]:
    """Coordinates of ``p`` along the triangle's two edges from vertex ``a``."""
    p0 = p - triangle.a
    e0, e1, det = triangle.e0, triangle.e1, triangle.det
    if triangle.equation == 0:
        u = (e1.y * p0.x - e1.x * p0.y) / det
        v = (e0.x * p0.y - e0.y * p0.x) / det
    elif triangle.equation == 1:
        u = (e1.z * p0.y - e1.y * p0.z) / det
        v = (e0.y * p0.z - e0.z * p0.y) / det
    else:
        u = (e1.z * p0.x - e1.x * p0.z) / det
        v = (e0.x * p0.z - e0.z * p0.x) / det
    return u, v


def inside_triangle(triangle: Triangle, hit: PlaneHit) -> bool:
    """Whether a point on the triangle's plane lies inside the triangle."""
    if not triangle.det:
        return False
    u, v = triangle_params(triangle, hit.point)
    return 0 <= u <= 1 and 0 <= v <= 1 and 0 <= u + v <= 1


def triangle_hit(triangle: Triangle, ray: Ray, eye: Vec3) -> PlaneHit | None:
    """Intersect ``ray`` with ``triangle``."""
    normal = triangle.e1.cross(triangle.e0)
    hit = plane_hit(triangle.a, normal, ray, eye)
    if hit is None or not inside_triangle(triangle, hit):
        return None
    return hit