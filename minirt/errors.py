"""Errors raised while reading options and scenes."""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """The kinds of failure the program reports."""

    BAD_PATH = 0
    MEM_ALLOC = 1
    BAD_RGB = 2
    BAD_FLAG = 3
    BAD_INTENSITY = 4
    DOUBLE_FLAG = 5
    BAD_SCENE = 6
    BAD_BONUS = 10
    BAD_TEXTURE = 11

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.BAD_PATH: "wrong scene path",
    ErrorKind.MEM_ALLOC: "wrong scene path",
    ErrorKind.BAD_RGB: "wrong RGB values, please check format",
    ErrorKind.BAD_FLAG: "wrong flag",
    ErrorKind.BAD_INTENSITY: "wrong light/ambient value, set it between [0, 1]",
    ErrorKind.DOUBLE_FLAG: "duplicated flag",
    ErrorKind.BAD_SCENE: "wrong scene, please check format",
    ErrorKind.BAD_BONUS: "wrong scene bonus, please check format",
    ErrorKind.BAD_TEXTURE: "wrong image texture path, please check scene",
}


class MiniRTError(Exception):
    """A failure of a known kind."""

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = ErrorKind(kind)
        super().__init__(f"<<ERROR>> {self.kind.message}")