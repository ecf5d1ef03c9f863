"""Data types describing a scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .vector import Matrix3, Vec3


@dataclass(frozen=True)
class Rgb:
    """A colour with channels on a 0..255 scale."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Rgb) -> Rgb:
        return Rgb(self.r + other.r, self.g + other.g, self.b + other.b)

    def clamped(self) -> Rgb:
        """Cap every channel at 255."""
        return Rgb(min(self.r, 255.0), min(self.g, 255.0), min(self.b, 255.0))

    def to_int(self) -> int:
        """Pack as 0xRRGGBB, truncating each channel."""
        return (int(self.r) << 16) + (int(self.g) << 8) + int(self.b)

    @staticmethod
    def from_int(value: int) -> Rgb:
        return Rgb(
            float((value >> 16) & 0xFF),
            float((value >> 8) & 0xFF),
            float(value & 0xFF),
        )


@dataclass
class Texture:
    """A raster image stored row by row as packed 0xRRGGBB integers."""

    width: int
    height: int
    values: list[int]

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.values[y * self.width + x]


class Effect(IntEnum):
    """Surface effects a scene object may request."""

    NORMAL_DISRUPTION = 1
    CHECKERED = 2
    BUMPMAP = 3
    SKYBOX = 4
    RAINBOW = 5
    UV_MAP = 6


@dataclass
class Bonus:
    """Optional surface effects and their textures."""

    effects: tuple[int, ...] = ()
    sphere: bool = False
    texture: Texture | None = None
    bumpmap: Texture | None = None

    def has(self, effect: int) -> bool:
        return effect in self.effects


@dataclass
class Sphere:
    center: Vec3
    radius: float
    rgb: Rgb
    bonus: Bonus = field(default_factory=Bonus)


@dataclass
class Plane:
    point: Vec3
    normal: Vec3
    rgb: Rgb
    bonus: Bonus = field(default_factory=Bonus)


@dataclass
class Square:
    center: Vec3
    normal: Vec3
    side: float
    rgb: Rgb
    bonus: Bonus = field(default_factory=Bonus)


@dataclass
class Triangle:
    """A triangle with its edges and the 2D system used for inside tests."""

    a: Vec3
    b: Vec3
    c: Vec3
    rgb: Rgb
    bonus: Bonus = field(default_factory=Bonus)
    e0: Vec3 = field(init=False)
    e1: Vec3 = field(init=False)
    det: float = field(init=False)
    equation: int = field(init=False)

    def __post_init__(self) -> None:
        self.e0 = self.b - self.a
        self.e1 = self.c - self.a
        e0, e1 = self.e0, self.e1
        self.det = e0.x * e1.y - e0.y * e1.x
        self.equation = 0
        if not self.det:
            self.det = e0.y * e1.z - e1.y * e0.z
            self.equation = 1
        if not self.det:
            self.det = e0.x * e1.z - e0.z * e1.x
            self.equation = 2


@dataclass
class Cylinder:
    point: Vec3
    normal: Vec3
    radius: float
    height: float
    rgb: Rgb
    bonus: Bonus = field(default_factory=Bonus)


@dataclass
class Camera:
    """A camera; ``fov`` holds the tangent of half the field of view."""

    pos: Vec3
    normal: Vec3
    fov: float
    base: Matrix3 = field(default_factory=Matrix3)


@dataclass
class Light:
    pos: Vec3
    intensity: float
    rgb: Rgb
    parallel: Vec3 = field(default_factory=Vec3)
    pos_shadow: Vec3 | None = None

    def __post_init__(self) -> None:
        if self.pos_shadow is None:
            self.pos_shadow = self.pos


@dataclass
class Ambient:
    intensity: float = 0.0
    rgb: Rgb = field(default_factory=Rgb)


@dataclass
class Options:
    """Command-line rendering switches."""

    save: bool = False
    sepia: bool = False
    antialiasing: bool = False
    no_specular: bool = False
    reference_axis: bool = False


@dataclass
class Scene:
    """Everything needed to render an image."""

    width: int = 0
    height: int = 0
    ambient: Ambient = field(default_factory=Ambient)
    cameras: list[Camera] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    squares: list[Square] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)
    options: Options = field(default_factory=Options)
    camera_index: int = 0

    def camera(self) -> Camera:
        """The camera currently in use."""
        return self.cameras[self.camera_index]