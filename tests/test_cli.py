from __future__ import annotations

import io
import runpy
import sys

import pytest

from magic_converter import __version__
from magic_converter.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["1234"])
    assert args.reverse is False
    assert args.input == "1234"


@pytest.mark.parametrize(
    "value,encoded",
    [("1094861636", "ABCD"), ("66051", "00010203"), (str(0x4100FF5A), "A00ffZ")],
)
def test_format_mode(capsys, value, encoded):
    assert main([value]) == 0
    out, err = capsys.readouterr()
    assert out == f'{value} => "{encoded}"\n'
    assert err == ""


@pytest.mark.parametrize("bad", ["abc", "-5", "4294967296"])
def test_format_mode_bad_number_is_fatal(capsys, bad):
    with pytest.raises(SystemExit) as exc:
        main([bad])
    assert exc.value.code == 2
    _, err = capsys.readouterr()
    assert "u32" in err


@pytest.mark.parametrize(
    "image,magic",
    [("ABCD", 0x41424344), ("00010203", 0x00010203), ("41abc", 0x41616263)],
)
def test_reverse_mode(capsys, image, magic):
    assert main(["--reverse", image]) == 0
    out, err = capsys.readouterr()
    assert out == f"`{image}` <= {magic}\n"
    assert err == ""


@pytest.mark.parametrize(
    "image,message",
    [
        ("41", "input too short (2) for solution to exist"),
        ("123456789", "input too long (9) for solution to exist"),
        ("gg000000", "irreversible token `gg`"),
    ],
)
def test_reverse_mode_no_solution_exits_cleanly(capsys, image, message):
    assert main(["--reverse", image]) == 0
    out, err = capsys.readouterr()
    assert out == ""
    assert err == f"No solution: {message}\n"


@pytest.mark.parametrize("image", ["ab1c2", "A00ffZ", "1234567"])
def test_reverse_mode_ambiguous_fails(capsys, image):
    assert main(["--reverse", image]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("magic-converter: reverse-magic not implemented")


def test_input_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ABCD\n"))
    assert main(["--reverse"]) == 0
    out, _ = capsys.readouterr()
    assert out == f"`ABCD` <= {0x41424344}\n"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    out, _ = capsys.readouterr()
    assert out.strip() == f"magic-converter {__version__}"


def test_module_entry_point(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["magic-converter", "66051"])
    with pytest.raises(SystemExit) as exc:
        runpy.run_module("magic_converter", run_name="__main__")
    assert exc.value.code == 0
    out, _ = capsys.readouterr()
    assert out == '66051 => "00010203"\n'
