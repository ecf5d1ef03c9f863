import pytest

from minirt.errors import ErrorKind, MiniRTError
from minirt.parsing import (
    check_digits,
    clamp_resolution,
    parse_coords,
    parse_float,
    parse_rgb,
    parse_udouble,
    parse_uint,
)
from minirt.scene import Rgb
from minirt.vector import Vec3


@pytest.mark.parametrize("text,value", [("3", 3.0), ("0.5", 0.5), ("-0.5", -0.5), ("12.25", 12.25)])
def test_parse_float_plain(text, value):
    assert parse_float(text) == pytest.approx(value)


def test_parse_float_fraction_added_to_negative_whole():
    assert parse_float("-1.5") == pytest.approx(-0.5)


def test_parse_float_leading_zero_fraction():
    assert parse_float("1.05") == pytest.approx(1.05)


def test_check_digits_accepts_by_kind():
    check_digits("123", "d")
    check_digits("1.5", "f")
    check_digits("-1.5", "F")
    assert parse_udouble("2.5") == pytest.approx(2.5)


@pytest.mark.parametrize(
    "text,kind",
    [("1.5", "d"), ("-1", "f"), ("1a", "F"), ("1 2", "d"), (None, "d")],
)
def test_check_digits_rejects(text, kind):
    with pytest.raises(MiniRTError) as info:
        check_digits(text, kind)
    assert info.value.kind is ErrorKind.BAD_SCENE


def test_parse_uint():
    assert parse_uint("1920") == 1920
    with pytest.raises(MiniRTError):
        parse_uint("-5")


def test_parse_udouble_rejects_sign():
    with pytest.raises(MiniRTError) as info:
        parse_udouble("-0.2")
    assert info.value.kind is ErrorKind.BAD_SCENE


def test_parse_coords():
    assert parse_coords("1,2,3") == Vec3(1, 2, 3)
    assert parse_coords("-0.5,0,10.25") == Vec3(-0.5, 0, 10.25)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "1,,2,3", "1,2,3,", "a,b,c", "1;2;3"])
def test_parse_coords_rejects(text):
    with pytest.raises(MiniRTError) as info:
        parse_coords(text)
    assert info.value.kind is ErrorKind.BAD_SCENE


def test_parse_rgb():
    assert parse_rgb("255,0,128") == Rgb(255, 0, 128)


def test_parse_rgb_out_of_range():
    with pytest.raises(MiniRTError) as info:
        parse_rgb("256,0,0")
    assert info.value.kind is ErrorKind.BAD_RGB


@pytest.mark.parametrize("text", ["1,2", "1.5,2,3", "-1,2,3", "1,2,3,4"])
def test_parse_rgb_bad_format(text):
    with pytest.raises(MiniRTError) as info:
        parse_rgb(text)
    assert info.value.kind is ErrorKind.BAD_SCENE


def test_clamp_resolution():
    assert clamp_resolution(1920, 1080, 1000, 1000) == (1000, 1000)
    assert clamp_resolution(640, 480, 1000, 1000) == (640, 480)
    assert clamp_resolution(640, 2000, 1000, 1000) == (640, 1000)