"""Parsing of the numeric fields found in scene files."""

from __future__ import annotations

from .errors import ErrorKind, MiniRTError
from .scene import Rgb
from .vector import Vec3

_SPACES = " \t\n\v\f\r"


def _atoi(text: str) -> int:
    """Read an optionally signed integer prefix, ignoring leading blanks."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _split(text: str, sep: str) -> list[str]:
    return [part for part in text.split(sep) if part]


def parse_float(text: str) -> float:
    """Read a decimal number as integer part plus fraction.

    The fraction is added to the integer part as written, so only a
    number whose integer part is zero keeps its sign on the fraction.
    """
    whole = _atoi(text)
    dot = text.find(".")
    if dot < 0:
        return float(whole)
    fraction_text = text[dot + 1:]
    fraction = _atoi(fraction_text)
    if not whole and text.startswith("-"):
        fraction = -fraction
    return whole + fraction / 10 ** len(fraction_text)


def check_digits(text: str | None, kind: str) -> None:
    """Raise BAD_SCENE unless ``text`` holds only allowed characters.

    ``kind`` is ``'d'`` for digits, ``'f'`` for digits and dots, and
    ``'F'`` for digits, dots and minus signs.
    """
    if text is None:
        raise MiniRTError(ErrorKind.BAD_SCENE)
    allowed = {"d": "", "f": ".", "F": ".-"}.get(kind, "")
    for ch in text:
        if not ("0" <= ch <= "9" or ch in allowed):
            raise MiniRTError(ErrorKind.BAD_SCENE)


def parse_uint(text: str | None) -> int:
    check_digits(text, "d")
    return _atoi(text)


def parse_udouble(text: str | None) -> float:
    check_digits(text, "f")
    return parse_float(text)


def parse_coords(text: str) -> Vec3:
    """Parse ``x,y,z``; exactly two commas and three parts are required."""
    parts = _split(text, ",")
    for part in parts:
        check_digits(part, "F")
    if len(parts) != 3 or text.count(",") != 2:
        raise MiniRTError(ErrorKind.BAD_SCENE)
    x, y, z = (parse_float(part) for part in parts)
    return Vec3(x, y, z)


def parse_rgb(text: str) -> Rgb:
    """Parse ``r,g,b`` with integer channels no greater than 255."""
    parts = _split(text, ",")
    for part in parts:
        check_digits(part, "d")
    if len(parts) != 3:
        raise MiniRTError(ErrorKind.BAD_SCENE)
    r, g, b = (float(parse_uint(part)) for part in parts)
    if r > 255 or g > 255 or b > 255:
        raise MiniRTError(ErrorKind.BAD_RGB)
    return Rgb(r, g, b)


def clamp_resolution(
    width: int, height: int, max_width: int, max_height: int
) -> tuple[int, int]:
    """Limit a resolution to the largest one the display allows."""
    return min(width, max_width), min(height, max_height)