import pytest
from PIL import Image

from minirt.bonus_options import (
    cylinder_bonus,
    load_texture,
    parallel_direction,
    pillow_texture_loader,
    plane_bonus,
    sphere_bonus,
)
from minirt.errors import ErrorKind, MiniRTError
from minirt.scene import Effect, Texture
from minirt.vector import Vec3


class RecordingLoader:
    def __init__(self):
        self.paths = []
        self.texture = Texture(1, 1, [0x123456])

    def __call__(self, path):
        self.paths.append(path)
        return self.texture


def _kind(excinfo):
    return excinfo.value.kind


def test_load_texture_passes_path():
    loader = RecordingLoader()
    texture = load_texture("skybox:sky.png", loader)
    assert loader.paths == ["sky.png"]
    assert texture is loader.texture


@pytest.mark.parametrize("option", ["skybox:", "skybox:a:b"])
def test_load_texture_bad_format(option):
    with pytest.raises(MiniRTError) as excinfo:
        load_texture(option, RecordingLoader())
    assert _kind(excinfo) == ErrorKind.BAD_BONUS


def test_load_texture_loader_returns_none():
    with pytest.raises(MiniRTError) as excinfo:
        load_texture("skybox:x.png", lambda path: None)
    assert _kind(excinfo) == ErrorKind.BAD_TEXTURE


def test_pillow_loader_round_trip(tmp_path):
    image = Image.new("RGB", (2, 1))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((1, 0), (0, 0, 255))
    path = tmp_path / "tex.png"
    image.save(path)
    texture = pillow_texture_loader(str(path))
    assert (texture.width, texture.height) == (2, 1)
    assert texture.values == [0xFF0000, 0x0000FF]


def test_pillow_loader_missing_file(tmp_path):
    with pytest.raises(MiniRTError) as excinfo:
        pillow_texture_loader(str(tmp_path / "missing.png"))
    assert _kind(excinfo) == ErrorKind.BAD_TEXTURE


def test_plane_bonus_checkered_and_skybox():
    loader = RecordingLoader()
    bonus = plane_bonus(["checkered", "skybox:sky.png"], loader)
    assert bonus.effects == (Effect.CHECKERED, Effect.SKYBOX)
    assert bonus.texture is loader.texture
    assert bonus.sphere is False


def test_plane_bonus_bumpmap():
    loader = RecordingLoader()
    bonus = plane_bonus(["normal-disruption", "bumpmap:b.png"], loader)
    assert bonus.effects == (Effect.NORMAL_DISRUPTION, Effect.BUMPMAP)
    assert bonus.bumpmap is loader.texture
    assert bonus.texture is None


def test_plane_bonus_empty():
    bonus = plane_bonus([], RecordingLoader())
    assert bonus.effects == ()


@pytest.mark.parametrize("option", ["rainbow", "checkered-x", "uv-map:a.png"])
def test_plane_bonus_rejects(option):
    with pytest.raises(MiniRTError) as excinfo:
        plane_bonus([option], RecordingLoader())
    assert _kind(excinfo) == ErrorKind.BAD_BONUS


def test_sphere_bonus():
    loader = RecordingLoader()
    bonus = sphere_bonus(["rainbow", "uv-map:earth.png"], loader)
    assert bonus.effects == (Effect.RAINBOW, Effect.UV_MAP)
    assert bonus.sphere is True
    assert loader.paths == ["earth.png"]


@pytest.mark.parametrize("option", ["checkered", "rainbows", "skybox:a.png"])
def test_sphere_bonus_rejects(option):
    with pytest.raises(MiniRTError) as excinfo:
        sphere_bonus([option], RecordingLoader())
    assert _kind(excinfo) == ErrorKind.BAD_BONUS


def test_cylinder_bonus():
    assert cylinder_bonus(["rainbow"]).effects == (Effect.RAINBOW,)
    with pytest.raises(MiniRTError) as excinfo:
        cylinder_bonus(["checkered"])
    assert _kind(excinfo) == ErrorKind.BAD_BONUS


def test_parallel_direction():
    assert parallel_direction(None) == Vec3()
    assert parallel_direction("parallel:0,0,2") == Vec3(0.0, 0.0, 1.0)


def test_parallel_direction_errors():
    with pytest.raises(MiniRTError) as excinfo:
        parallel_direction("parallel")
    assert _kind(excinfo) == ErrorKind.BAD_BONUS
    with pytest.raises(MiniRTError) as excinfo:
        parallel_direction("parallel:1,0,0:x")
    assert _kind(excinfo) == ErrorKind.BAD_BONUS
    with pytest.raises(MiniRTError) as excinfo:
        parallel_direction("parallel:1,2")
    assert _kind(excinfo) == ErrorKind.BAD_SCENE