import pytest

from mlxkit.pixels import fnv_hash, pack_pixel, rgba_to_mono, unpack_pixel


def test_fnv_empty_is_offset_basis():
    assert fnv_hash(b"") == 0xCBF29CE484222325


def test_fnv_single_character():
    assert fnv_hash(b"a") == 0xAF63DC4C8601EC8C


def test_fnv_accepts_str():
    assert fnv_hash("abc") == fnv_hash(b"abc")


def test_fnv_fits_in_64_bits():
    value = fnv_hash(b"x" * 1000)
    assert 0 <= value < 2**64


def test_fnv_order_matters():
    assert fnv_hash(b"ab") != fnv_hash(b"ba")
    assert fnv_hash(b"ab") == fnv_hash(bytearray(b"ab"))


def test_mono_of_black_keeps_alpha():
    assert rgba_to_mono(0x000000FF) == 0x000000FF


def test_mono_of_white():
    assert rgba_to_mono(0xFFFFFFFF) == 0xFEFEFEFF


@pytest.mark.parametrize("color", [0x12345678, 0xFF000080, 0x00FF0001, 0x0000FFFF])
def test_mono_channels_equal_and_alpha_kept(color):
    red, green, blue, alpha = pack_pixel(rgba_to_mono(color))
    assert red == green == blue
    assert alpha == color & 0xFF


def test_mono_is_idempotent_on_grey_alpha():
    grey = rgba_to_mono(0x80808080)
    assert rgba_to_mono(grey) & 0xFF == 0x80


def test_pack_pixel_byte_order():
    assert pack_pixel(0x11223344) == b"\x11\x22\x33\x44"


@pytest.mark.parametrize("color", [0, 1, 0xDEADBEEF, 0xFFFFFFFF])
def test_pack_unpack_round_trip(color):
    assert unpack_pixel(pack_pixel(color)) == color


def test_pack_rejects_out_of_range():
    with pytest.raises(ValueError):
        pack_pixel(0x100000000)
    with pytest.raises(ValueError):
        pack_pixel(-1)


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        unpack_pixel(b"\x00\x01\x02")