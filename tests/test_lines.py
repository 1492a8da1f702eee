import io

import pytest

from mlxkit.lines import LineReader


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO("ab\ncd\nef"))
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd\n"
    assert reader.read_line() == "ef"
    assert reader.read_line() is None


def test_none_stays_none_after_end():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert list(LineReader(io.StringIO(""))) == []


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"one\ntwo\n"), 2)
    assert list(reader) == [b"one\n", b"two\n"]


def test_blank_lines():
    assert list(LineReader(io.StringIO("\n\na\n"), 1)) == ["\n", "\n", "a\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 32, 1000])
@pytest.mark.parametrize(
    "text",
    ["", "a", "line\n", "first\nsecond\nthird", "\n" * 5, "long " * 50 + "\nend\n"],
)
def test_lines_rebuild_text(text, size):
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.count("\n") <= 1 for line in lines)
    assert all(line.endswith("\n") for line in lines[:-1])


@pytest.mark.parametrize("size", [0, -4])
def test_non_positive_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_buffer_size_must_be_integer():
    with pytest.raises(TypeError):
        LineReader(io.StringIO("a"), 2.5)