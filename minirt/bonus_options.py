"""Parsing of the optional per-object effects written after an element."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from PIL import Image

from .errors import ErrorKind, MiniRTError
from .parsing import parse_coords
from .scene import Bonus, Effect, Texture
from .vector import Vec3

TextureLoader = Callable[[str], "Texture | None"]


def pillow_texture_loader(path: str) -> Texture:
    """Read an image file into a texture of packed 0xRRGGBB pixels."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
            width, height = rgb.size
            raw = rgb.tobytes()
    except OSError as exc:
        raise MiniRTError(ErrorKind.BAD_TEXTURE) from exc
    channels = iter(raw)
    values = [(r << 16) | (g << 8) | b for r, g, b in zip(channels, channels, channels)]
    return Texture(width, height, values)


def load_texture(option: str, texture_loader: TextureLoader | None = None) -> Texture:
    """Load the texture named in an option such as ``skybox:path``."""
    parts = [part for part in option.split(":") if part]
    if len(parts) != 2:
        raise MiniRTError(ErrorKind.BAD_BONUS)
    loader = texture_loader or pillow_texture_loader
    try:
        texture = loader(parts[1])
    except OSError as exc:
        raise MiniRTError(ErrorKind.BAD_TEXTURE) from exc
    if texture is None:
        raise MiniRTError(ErrorKind.BAD_TEXTURE)
    return texture


def _common_option(
    option: str, texture_loader: TextureLoader | None, found: dict
) -> int | None:
    """Handle options shared by planar objects and spheres."""
    if option == "normal-disruption":
        return Effect.NORMAL_DISRUPTION
    if option.startswith("bumpmap:"):
        found["bumpmap"] = load_texture(option, texture_loader)
        return Effect.BUMPMAP
    return None


def plane_bonus(
    options: Sequence[str], texture_loader: TextureLoader | None = None
) -> Bonus:
    """Effects for planes, squares and triangles."""
    effects: list[int] = []
    found: dict = {}
    for option in options:
        if option == "checkered":
            effects.append(Effect.CHECKERED)
        elif option.startswith("skybox:"):
            found["texture"] = load_texture(option, texture_loader)
            effects.append(Effect.SKYBOX)
        else:
            effect = _common_option(option, texture_loader, found)
            if effect is None:
                raise MiniRTError(ErrorKind.BAD_BONUS)
            effects.append(effect)
    return Bonus(effects=tuple(int(e) for e in effects), sphere=False, **found)


def sphere_bonus(
    options: Sequence[str], texture_loader: TextureLoader | None = None
) -> Bonus:
    """Effects for spheres."""
    effects: list[int] = []
    found: dict = {}
    for option in options:
        if option == "rainbow":
            effects.append(Effect.RAINBOW)
        elif option.startswith("uv-map:"):
            found["texture"] = load_texture(option, texture_loader)
            effects.append(Effect.UV_MAP)
        else:
            effect = _common_option(option, texture_loader, found)
            if effect is None:
                raise MiniRTError(ErrorKind.BAD_BONUS)
            effects.append(effect)
    return Bonus(effects=tuple(int(e) for e in effects), sphere=True, **found)


def cylinder_bonus(options: Sequence[str]) -> Bonus:
    """Effects for cylinders: only ``rainbow`` is accepted."""
    effects: list[int] = []
    for option in options:
        if option != "rainbow":
            raise MiniRTError(ErrorKind.BAD_BONUS)
        effects.append(int(Effect.RAINBOW))
    return Bonus(effects=tuple(effects))


def parallel_direction(option: str | None) -> Vec3:
    """Direction of a parallel light, or the zero vector for a point light."""
    if option is None:
        return Vec3()
    if not option.startswith("parallel:"):
        raise MiniRTError(ErrorKind.BAD_BONUS)
    parts = [part for part in option.split(":") if part]
    if len(parts) != 2:
        raise MiniRTError(ErrorKind.BAD_BONUS)
    return parse_coords(parts[1]).normalized()