"""Command-line flag handling."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import ErrorKind, MiniRTError
from .scene import Options

_FLAGS = {
    "--save": "save",
    "--sepia-filter": "sepia",
    "--antialiasing": "antialiasing",
    "--no-specular": "no_specular",
    "--reference-axis": "reference_axis",
}


def parse_options(args: Iterable[str]) -> Options:
    """Build options from the flags that follow the scene path.

    Unknown flags raise BAD_FLAG and repeated ones DOUBLE_FLAG.
    """
    options = Options()
    seen: set[str] = set()
    for arg in args:
        name = _FLAGS.get(arg)
        if name is None:
            raise MiniRTError(ErrorKind.BAD_FLAG)
        if name in seen:
            raise MiniRTError(ErrorKind.DOUBLE_FLAG)
        seen.add(name)
        setattr(options, name, True)
    return options