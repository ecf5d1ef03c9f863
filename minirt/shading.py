"""Surface colouring: lighting, surface effects and colour filters."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from .intersect import FLT_EPSILON, Ray
from .scene import Bonus, Effect, Light, Rgb, Scene, Texture
from .shadows import in_shadow
from .vector import Vec3

_WHITE = Rgb(255.0, 255.0, 255.0)
_X_AXIS = Vec3(1.0, 0.0, 0.0)
_Y_AXIS = Vec3(0.0, 1.0, 0.0)
_Z_AXIS = Vec3(0.0, 0.0, 1.0)
_SOUTH = Vec3(0.0, 0.0, -1.0)
_EQUATOR = Vec3(-5.0, -1.0, 0.0).normalized()
_SHININESS = 50
_BUMP_SCALE = 0xFFFFFF


@dataclass(frozen=True)
class SurfacePoint:
    """A point on a surface being shaded, with what is needed to colour it."""

    p: Vec3
    normal: Vec3
    rgb: Rgb
    center: Vec3 = field(default_factory=Vec3)
    light: Vec3 = field(default_factory=Vec3)
    bonus: Bonus = field(default_factory=Bonus)


def ambient(scene: Scene, obj: SurfacePoint) -> Rgb:
    """Contribution of the scene's ambient light."""
    amb = scene.ambient
    return Rgb(
        amb.intensity * amb.rgb.r * obj.rgb.r / 255,
        amb.intensity * amb.rgb.g * obj.rgb.g / 255,
        amb.intensity * amb.rgb.b * obj.rgb.b / 255,
    )


def spot_light(scene: Scene, obj: SurfacePoint) -> Rgb:
    """Diffuse and specular contribution, weighted by the scene's first light."""
    light = scene.lights[0]
    diffuse = obj.light.dot(obj.normal)
    kd = 0.0 if diffuse < 0 else light.intensity
    specular = 0.0 if scene.options.no_specular else max(diffuse, 0.0) ** _SHININESS
    return Rgb(
        kd * light.rgb.r * (obj.rgb.r * diffuse / 255 + specular),
        kd * light.rgb.g * (obj.rgb.g * diffuse / 255 + specular),
        kd * light.rgb.b * (obj.rgb.b * diffuse / 255 + specular),
    )


def parallel_light(light: Light, obj: SurfacePoint) -> Vec3:
    """Unit direction from the surface point towards ``light``.

    Also sets ``light.pos_shadow``, the position shadow tests use for spheres.
    """
    lp = light.pos - obj.p
    if light.parallel:
        direction = (-light.parallel).normalized()
        light.pos_shadow = direction * direction.dot(lp)
    else:
        direction = lp.normalized()
        light.pos_shadow = light.pos
    return direction


def wave_normal(obj: SurfacePoint) -> Vec3:
    """Normal perturbed by concentric ripples around the object's centre."""
    towards_center = obj.center - obj.p
    if obj.bonus.sphere:
        d = towards_center.length() * towards_center.dot(_Z_AXIS)
        alpha = 100 * math.exp(-d * 0.5) * math.cos(0.25 * math.pi * d)
    else:
        d = towards_center.length()
        alpha = 100 * math.exp(-d * 0.025) * math.cos(0.025 * math.pi * d)
    outward = obj.p - obj.center
    return Vec3(outward.x * alpha, outward.y * alpha, 100.0).normalized()


def _odd(a: float, b: float) -> bool:
    return int(math.floor(a) + math.floor(b)) % 2 != 0


def checkered_pattern(obj: SurfacePoint) -> Rgb:
    """White on alternating unit cells, the object's colour elsewhere."""
    p, n = obj.p, obj.normal
    if n.dot(_Z_AXIS) and _odd(p.x, p.y):
        return _WHITE
    if n.dot(_X_AXIS) and _odd(p.z, p.y):
        return _WHITE
    if n.dot(_Y_AXIS) and _odd(p.x, p.z):
        return _WHITE
    return obj.rgb


def texture_color(texture: Texture, x: int, y: int) -> Rgb:
    """Colour of one texel."""
    return Rgb.from_int(texture.pixel(x, y))


def _wrap(value: float, size: int) -> int:
    """Magnitude of the truncated coordinate's remainder modulo ``size``."""
    return abs(int(value)) % size


def plane_texture(obj: SurfacePoint) -> Rgb:
    """Tile the object's texture across its plane."""
    texture = obj.bonus.texture
    w, h = texture.width, texture.height
    if abs(obj.normal.dot(_X_AXIS)) == 1:
        x = _wrap(obj.p.z, w)
    else:
        x = _wrap(obj.p.x, w)
    if abs(obj.normal.dot(_Y_AXIS)) == 1:
        y = (h - 1) - _wrap(obj.p.z, h)
    else:
        y = (h - 1) - _wrap(obj.p.y, h)
    return texture_color(texture, x, y)


def sphere_coords(obj: SurfacePoint) -> tuple[float, float]:
    """Texture coordinates in [0, 1] of a point on a sphere."""
    cp = (obj.p - obj.center).normalized()
    polar = math.acos(max(-1.0, min(1.0, -_SOUTH.dot(cp))))
    y = polar / math.pi
    sine = math.sin(polar)
    alpha = -cp.dot(_EQUATOR) / sine if sine else 0.0
    alpha += -FLT_EPSILON if alpha > 0 else FLT_EPSILON
    alpha = max(-1.0, min(1.0, alpha))
    azimuth = math.acos(alpha) / (2 * math.pi)
    if _SOUTH.cross(_EQUATOR).dot(cp) > 0:
        x = azimuth
    else:
        x = 1 - azimuth
    return x, y


def _texel_index(coord: float, size: int) -> int:
    return min(max(int(coord * size), 0), size - 1)


def sphere_texture(obj: SurfacePoint) -> Rgb:
    """Wrap the object's texture around a sphere."""
    texture = obj.bonus.texture
    x, y = sphere_coords(obj)
    return texture_color(
        texture, _texel_index(x, texture.width), _texel_index(y, texture.height)
    )


def rainbow_pattern(normal: Vec3, color: Rgb) -> Rgb:
    """Colour taken from the components of the normal."""
    return Rgb(255 * abs(normal.x), 255 * abs(normal.y), 255 * abs(normal.z)).clamped()


def _half_difference(a: int, b: int) -> int:
    return int((a - b) / 2)


def bumpmap_normal(obj: SurfacePoint, x: int, y: int) -> Vec3:
    """Normal tilted by the gradient of the bump map at texel (x, y)."""
    bump = obj.bonus.bumpmap
    w, h = bump.width, bump.height
    coef_x = 0.0
    coef_y = 0.0
    if 0 <= x - 1 and x + 1 < w and 0 <= y < h:
        coef_x = _half_difference(bump.pixel(x + 1, y), bump.pixel(x - 1, y))
    if 0 <= y - 1 and y + 1 < h and 0 <= x < w:
        coef_y = _half_difference(bump.pixel(x, y + 1), bump.pixel(x, y - 1))
    coef_x /= _BUMP_SCALE
    coef_y /= _BUMP_SCALE
    tilt = Vec3(coef_y, 0.0, 0.0) + Vec3(0.0, coef_x, 0.0)
    return (obj.normal + tilt).normalized()


def bumpmap(obj: SurfacePoint) -> Vec3:
    """Normal perturbed by the object's bump map."""
    bump = obj.bonus.bumpmap
    if obj.bonus.sphere:
        x, y = sphere_coords(obj)
        x *= bump.width
        y *= bump.height
    else:
        x = _wrap(obj.p.x, bump.width)
        y = (bump.height - 1) - _wrap(obj.p.y, bump.height)
    return bumpmap_normal(obj, int(x), int(y))


def disrupt(light: Light, obj: SurfacePoint) -> SurfacePoint:
    """Apply the object's surface effects and set the direction to ``light``."""
    bonus = obj.bonus
    if bonus.effects:
        if bonus.has(Effect.NORMAL_DISRUPTION):
            obj = replace(obj, normal=wave_normal(obj))
        elif bonus.has(Effect.BUMPMAP):
            obj = replace(obj, normal=bumpmap(obj))
        if bonus.has(Effect.CHECKERED):
            obj = replace(obj, rgb=checkered_pattern(obj))
        elif bonus.has(Effect.RAINBOW):
            obj = replace(obj, rgb=rainbow_pattern(obj.normal, obj.rgb))
        elif bonus.has(Effect.UV_MAP):
            obj = replace(obj, rgb=sphere_texture(obj))
        elif bonus.has(Effect.SKYBOX):
            obj = replace(obj, rgb=plane_texture(obj))
    return replace(obj, light=parallel_light(light, obj))


def sepia_filter(scene: Scene, color: Rgb) -> Rgb:
    """Sepia-toned colour when the filter is enabled, else ``color`` unchanged."""
    if not scene.options.sepia:
        return color
    r, g, b = color.r, color.g, color.b
    return Rgb(
        r * 0.393 + g * 0.769 + b * 0.189,
        r * 0.349 + g * 0.686 + b * 0.168,
        r * 0.272 + g * 0.534 + b * 0.131,
    ).clamped()


def average_colors(colors: Sequence[int]) -> int:
    """Average packed 0xRRGGBB colours channel by channel."""
    if not colors:
        raise ValueError("no colours to average")
    count = len(colors)
    channels = [Rgb.from_int(c) for c in colors]
    total_r = sum(c.r for c in channels)
    total_g = sum(c.g for c in channels)
    total_b = sum(c.b for c in channels)
    return Rgb(total_r / count, total_g / count, total_b / count).to_int()


def get_color(scene: Scene, obj: SurfacePoint) -> int:
    """Final packed colour of a surface point lit by every light of the scene."""
    color = Rgb()
    for light in scene.lights:
        obj = replace(obj, normal=obj.normal.normalized())
        obj = disrupt(light, obj)
        shadow = Ray(direction=obj.light, origin=obj.p)
        lit = ambient(scene, obj)
        if not in_shadow(scene, shadow, light):
            lit = (lit + spot_light(scene, obj)).clamped()
        color = (color + lit).clamped()
    if not scene.lights:
        color = ambient(scene, obj)
    return sepia_filter(scene, color).to_int()