import pytest

from minirt.errors import ErrorKind, MiniRTError
from minirt.options import parse_options


def test_no_flags_gives_defaults():
    opts = parse_options([])
    assert not opts.save
    assert not opts.sepia
    assert not opts.antialiasing
    assert not opts.no_specular
    assert not opts.reference_axis


def test_all_flags():
    opts = parse_options(
        ["--save", "--sepia-filter", "--antialiasing", "--no-specular", "--reference-axis"]
    )
    assert opts.save and opts.sepia and opts.antialiasing
    assert opts.no_specular and opts.reference_axis


def test_single_flag_sets_only_itself():
    opts = parse_options(["--antialiasing"])
    assert opts.antialiasing
    assert not opts.save
    assert not opts.sepia


@pytest.mark.parametrize(
    "flag", ["--save", "--sepia-filter", "--antialiasing", "--no-specular", "--reference-axis"]
)
def test_duplicate_flag(flag):
    with pytest.raises(MiniRTError) as info:
        parse_options([flag, flag])
    assert info.value.kind is ErrorKind.DOUBLE_FLAG


@pytest.mark.parametrize("flag", ["--sav", "--save-it", "save", "", "--help"])
def test_unknown_flag(flag):
    with pytest.raises(MiniRTError) as info:
        parse_options([flag])
    assert info.value.kind is ErrorKind.BAD_FLAG