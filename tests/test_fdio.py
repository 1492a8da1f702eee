import io
import os

import pytest

from mlxkit.fdio import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("a", out)
    assert out.getvalue() == "a"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_wrong_length(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("Hello World!", out)
    assert out.getvalue() == "Hello World!"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("Hello World!", out)
    assert out.getvalue() == "Hello World!\n"


def test_put_nbr_extremes():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    put_char("\n", out)
    put_nbr(2147483647, out)
    put_char("\n", out)
    put_nbr(0, out)
    assert out.getvalue().split("\n") == ["-2147483648", "2147483647", "0"]


@pytest.mark.parametrize("number", [-7, 5, 12345, -99999])
def test_put_nbr_round_trips(number):
    out = io.StringIO()
    put_nbr(number, out)
    assert int(out.getvalue()) == number


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("5", io.StringIO())


def test_writes_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_str("Hello", write_fd)
        put_char(" ", write_fd)
        put_endl("World!", write_fd)
        os.close(write_fd)
        write_fd = None
        with os.fdopen(read_fd, "r") as reader:
            read_fd = None
            assert reader.read() == "Hello World!\n"
    finally:
        if write_fd is not None:
            os.close(write_fd)
        if read_fd is not None:
            os.close(read_fd)


def test_default_stream_is_stdout(capsys):
    put_endl("Hello World!")
    assert capsys.readouterr().out == "Hello World!\n"