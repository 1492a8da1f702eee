import io

import pytest

from mlxkit.errors import MlxErrno, MlxError
from mlxkit.pixels import pack_pixel, rgba_to_mono
from mlxkit.xpm42 import Xpm, load_xpm42, parse_xpm42

SAMPLE = "!XPM42\n2 2 2 1 c\n. #FF0000FF\n# #00FF00FF\n.#\n#.\n"

RED = pack_pixel(0xFF0000FF)
GREEN = pack_pixel(0x00FF00FF)


def _expect_invalid(text):
    with pytest.raises(MlxError) as info:
        parse_xpm42(io.StringIO(text))
    assert info.value.code is MlxErrno.INVXPM


def test_parse_colour_image():
    xpm = parse_xpm42(io.StringIO(SAMPLE))
    assert (xpm.width, xpm.height, xpm.color_count, xpm.cpp, xpm.mode) == (2, 2, 2, 1, "c")
    assert xpm.bytes_per_pixel == 4
    assert bytes(xpm.pixels) == RED + GREEN + GREEN + RED


def test_parse_binary_stream():
    xpm = parse_xpm42(io.BytesIO(SAMPLE.encode()))
    assert bytes(xpm.pixels) == RED + GREEN + GREEN + RED


def test_pixel_buffer_size():
    xpm = parse_xpm42(io.StringIO(SAMPLE))
    assert len(xpm.pixels) == xpm.width * xpm.height * xpm.bytes_per_pixel


def test_monochrome_mode():
    xpm = parse_xpm42(io.StringIO("!XPM42\n1 1 1 1 m\n. #FFFFFFFF\n.\n"))
    assert bytes(xpm.pixels) == pack_pixel(rgba_to_mono(0xFFFFFFFF))
    red, green, blue, _ = xpm.pixels
    assert red == green == blue


def test_two_chars_per_pixel():
    text = "!XPM42\n2 1 2 2 c\naa #000000FF\nbb #FFFFFFFF\naabb\n"
    xpm = parse_xpm42(io.StringIO(text))
    assert bytes(xpm.pixels) == pack_pixel(0x000000FF) + pack_pixel(0xFFFFFFFF)


def test_last_row_without_newline():
    xpm = parse_xpm42(io.StringIO(SAMPLE.rstrip("\n")))
    assert bytes(xpm.pixels) == RED + GREEN + GREEN + RED


def test_header_numbers_with_prefixes():
    text = "!XPM42\n0x2 01 1 1 c\n. #FF0000FF\n..\n"
    xpm = parse_xpm42(io.StringIO(text))
    assert (xpm.width, xpm.height) == (2, 1)
    assert bytes(xpm.pixels) == RED + RED


def test_unknown_pixel_character_is_transparent_black():
    text = "!XPM42\n1 1 1 1 c\n. #FF0000FF\n?\n"
    assert bytes(parse_xpm42(io.StringIO(text)).pixels) == pack_pixel(0)


def test_bad_magic():
    _expect_invalid(SAMPLE.replace("!XPM42", "!XPM41"))


def test_bad_mode():
    _expect_invalid(SAMPLE.replace("1 c\n", "1 x\n"))


def test_missing_mode():
    _expect_invalid("!XPM42\n2 2 2 1\n")


def test_width_too_large():
    _expect_invalid("!XPM42\n40000 1 1 1 c\n. #FF0000FF\n.\n")


def test_too_many_chars_per_pixel():
    _expect_invalid("!XPM42\n1 1 1 11 c\n")


def test_row_of_wrong_length():
    _expect_invalid("!XPM42\n2 1 1 1 c\n. #FF0000FF\n...\n")


def test_missing_rows():
    _expect_invalid("!XPM42\n1 2 1 1 c\n. #FF0000FF\n.\n")


def test_entry_without_hash():
    _expect_invalid("!XPM42\n1 1 1 1 c\n. FF0000FF\n.\n")


def test_entry_with_misplaced_space():
    _expect_invalid("!XPM42\n1 1 1 1 c\n.. #FF0000FF\n.\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "image.xpm42"
    path.write_text(SAMPLE)
    xpm = load_xpm42(path)
    assert isinstance(xpm, Xpm)
    assert bytes(xpm.pixels) == RED + GREEN + GREEN + RED


def test_load_wrong_extension(tmp_path):
    path = tmp_path / "image.png"
    path.write_text(SAMPLE)
    with pytest.raises(MlxError) as info:
        load_xpm42(path)
    assert info.value.code is MlxErrno.INVEXT


def test_load_missing_file(tmp_path):
    with pytest.raises(MlxError) as info:
        load_xpm42(tmp_path / "absent.xpm42")
    assert info.value.code is MlxErrno.INVFILE


def test_load_corrupt_file(tmp_path):
    path = tmp_path / "broken.xpm42"
    path.write_text("not an image\n")
    with pytest.raises(MlxError) as info:
        load_xpm42(path)
    assert info.value.code is MlxErrno.INVXPM