"""Tests for the command-line front end."""

from PIL import Image

from ichingcode.app.cli import format_cells, main
from ichingcode.encoding import encode


def test_cells_output(capsys):
    assert main(["abc", "--cells"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert lines[0].split() == ["0", "3", "0", "1", "2", "5", "6", "7"]
    assert lines[-1].split()[-1] == "63"


def test_format_cells_alignment():
    text = format_cells(encode(""))
    assert text.splitlines()[0] == " 0  0  2  3  4  5  6  7"


def test_size_output(capsys):
    assert main(["Hello"]) == 0
    assert capsys.readouterr().out.strip() == "304x304"


def test_writes_png(tmp_path, capsys):
    path = tmp_path / "code.png"
    assert main(["Hello", "-o", str(path), "--scale", "2"]) == 0
    assert "608x608" in capsys.readouterr().out
    with Image.open(path) as img:
        assert img.size == (608, 608)


def test_unsupported_character(capsys):
    assert main(["hello world"]) == 2
    assert "Unsupported character ' ' at position 5" in capsys.readouterr().err


def test_too_long(capsys):
    assert main(["a" * 63]) == 2
    assert "at most 62" in capsys.readouterr().err


def test_invalid_scale(tmp_path, capsys):
    assert main(["abc", "-o", str(tmp_path / "x.png"), "--scale", "0"]) == 2
    assert "Scale" in capsys.readouterr().err
