"""Reading scene descriptions into a Scene."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .bonus_options import (
    TextureLoader,
    cylinder_bonus,
    parallel_direction,
    plane_bonus,
    sphere_bonus,
)
from .errors import ErrorKind, MiniRTError
from .parsing import (
    clamp_resolution,
    parse_coords,
    parse_rgb,
    parse_udouble,
    parse_uint,
)
from .scene import Camera, Cylinder, Light, Plane, Scene, Sphere, Square, Triangle

KINDS = ("R", "A", "c", "l", "sp", "pl", "sq", "cy", "tr")

# Each element may carry this many optional trailing fields.
_MAX_EXTRA = 2


def element_kind(line: str) -> str | None:
    """Identifier of the element a line describes, or None for an empty line."""
    if not line:
        return None
    for kind in KINDS:
        if line.startswith(kind + " "):
            return kind
    raise MiniRTError(ErrorKind.BAD_SCENE)


def count_elements(lines: Iterable[str]) -> dict[str, int]:
    """Count elements per kind; exactly one resolution and one ambient light."""
    counts = dict.fromkeys(KINDS, 0)
    for line in lines:
        kind = element_kind(line)
        if kind is not None:
            counts[kind] += 1
    if counts["R"] != 1 or counts["A"] != 1:
        raise MiniRTError(ErrorKind.BAD_SCENE)
    return counts


def _fields(line: str, least: int, most: int) -> list[str]:
    tokens = [token for token in line.split(" ") if token]
    if not least <= len(tokens) <= most:
        raise MiniRTError(ErrorKind.BAD_SCENE)
    return tokens


def _intensity(text: str) -> float:
    value = parse_udouble(text)
    if value < 0 or value > 1:
        raise MiniRTError(ErrorKind.BAD_INTENSITY)
    return value


def _load_line(
    kind: str,
    line: str,
    scene: Scene,
    texture_loader: TextureLoader | None,
    max_resolution: tuple[int, int] | None,
) -> None:
    if kind == "R":
        f = _fields(line, 3, 3)
        width, height = parse_uint(f[1]), parse_uint(f[2])
        if max_resolution is not None:
            width, height = clamp_resolution(width, height, *max_resolution)
        scene.width, scene.height = width, height
    elif kind == "A":
        f = _fields(line, 3, 3)
        scene.ambient.intensity = _intensity(f[1])
        scene.ambient.rgb = parse_rgb(f[2])
    elif kind == "c":
        f = _fields(line, 4, 4)
        pos, normal = parse_coords(f[1]), parse_coords(f[2])
        fov_deg = parse_uint(f[3])
        scene.cameras.append(Camera(pos, normal, math.tan(fov_deg * math.pi / 360)))
    elif kind == "l":
        f = _fields(line, 4, 4 + _MAX_EXTRA)
        pos = parse_coords(f[1])
        intensity = _intensity(f[2])
        rgb = parse_rgb(f[3])
        parallel = parallel_direction(f[4] if len(f) > 4 else None)
        scene.lights.append(Light(pos, intensity, rgb, parallel))
    elif kind == "sp":
        f = _fields(line, 4, 4 + _MAX_EXTRA)
        center = parse_coords(f[1])
        radius = parse_udouble(f[2]) / 2
        rgb = parse_rgb(f[3])
        scene.spheres.append(
            Sphere(center, radius, rgb, sphere_bonus(f[4:], texture_loader))
        )
    elif kind == "pl":
        f = _fields(line, 4, 4 + _MAX_EXTRA)
        point, normal = parse_coords(f[1]), parse_coords(f[2])
        rgb = parse_rgb(f[3])
        scene.planes.append(
            Plane(point, normal, rgb, plane_bonus(f[4:], texture_loader))
        )
    elif kind == "sq":
        f = _fields(line, 5, 5 + _MAX_EXTRA)
        center, normal = parse_coords(f[1]), parse_coords(f[2])
        side = parse_udouble(f[3])
        rgb = parse_rgb(f[4])
        scene.squares.append(
            Square(center, normal, side, rgb, plane_bonus(f[5:], texture_loader))
        )
    elif kind == "cy":
        f = _fields(line, 6, 6 + _MAX_EXTRA)
        point, normal = parse_coords(f[1]), parse_coords(f[2])
        radius = parse_udouble(f[3]) / 2
        height = parse_udouble(f[4])
        rgb = parse_rgb(f[5])
        scene.cylinders.append(
            Cylinder(point, normal, radius, height, rgb, cylinder_bonus(f[6:]))
        )
    elif kind == "tr":
        f = _fields(line, 5, 5 + _MAX_EXTRA)
        a, b, c = parse_coords(f[1]), parse_coords(f[2]), parse_coords(f[3])
        rgb = parse_rgb(f[4])
        scene.triangles.append(
            Triangle(a, b, c, rgb, plane_bonus(f[5:], texture_loader))
        )


def parse_scene(
    lines: Sequence[str],
    texture_loader: TextureLoader | None = None,
    max_resolution: tuple[int, int] | None = None,
) -> Scene:
    """Build a scene from its description lines.

    Elements of each kind are stored in reverse file order, so the last
    camera written in the file is the first one used.
    """
    lines = list(lines)
    count_elements(lines)
    scene = Scene()
    for line in lines:
        kind = element_kind(line)
        if kind is not None:
            _load_line(kind, line, scene, texture_loader, max_resolution)
    for items in (
        scene.cameras,
        scene.lights,
        scene.spheres,
        scene.planes,
        scene.squares,
        scene.cylinders,
        scene.triangles,
    ):
        items.reverse()
    scene.camera_index = 0
    return scene


def load_scene(
    path: str,
    texture_loader: TextureLoader | None = None,
    max_resolution: tuple[int, int] | None = None,
) -> Scene:
    """Read and parse a scene file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MiniRTError(ErrorKind.BAD_PATH) from exc
    return parse_scene(text.split("\n"), texture_loader, max_resolution)