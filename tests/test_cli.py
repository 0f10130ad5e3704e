"""Tests for the find_readable command line."""

import argparse

import pytest
from PIL import Image

import find_readable
from readable_color.core_types import Color, Region

from .conftest import solid_rgba


def test_parse_region():
    assert find_readable.parse_region("1, 2,3,4") == Region(1, 2, 3, 4)


@pytest.mark.parametrize("text", ["1,2,3", "a,b,c,d"])
def test_parse_region_rejects(text):
    with pytest.raises(argparse.ArgumentTypeError):
        find_readable.parse_region(text)


def test_parse_hex_color_without_hash():
    assert find_readable.parse_hex_color("000000") == Color(0.0, 0.0, 0.0)


def test_whole_image(white_png, capsys):
    assert find_readable.main([str(white_png)]) == 0
    out = capsys.readouterr().out
    assert "[run] Strategy: Linear Strategy" in out
    assert "Background: #ffffff" in out
    assert "Result: #7d7d7d" in out
    assert "Readable: on" in out


def test_preferred_and_verbose(white_png, capsys):
    code = find_readable.main(
        [str(white_png), "--preferred", "#000000", "--verbose", "--region", "0,0,2,2"]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "[debug] Elected Candidate #000000" in out
    assert "Steps: 1" in out


def test_debug_region_stats(tmp_path, capsys):
    path = tmp_path / "half.png"
    arr = solid_rgba((0, 0, 0, 255), 4, 4)
    arr[:, 2:] = (255, 255, 255, 255)
    Image.fromarray(arr).save(path)
    assert find_readable.main([str(path), "--debug", "--region", "0,0,4,4"]) == 0
    out = capsys.readouterr().out
    assert "[debug] Loaded: 4x4" in out
    assert "Darkness min: 0" in out
    assert "max: 255" in out


def test_zero_area_region(white_png, capsys):
    assert find_readable.main([str(white_png), "--region", "0,0,0,0"]) == 1
    err = capsys.readouterr().err
    assert "[error]" in err


def test_missing_file(tmp_path, capsys):
    assert find_readable.main([str(tmp_path / "nope.png")]) == 2
    assert "not found" in capsys.readouterr().err


def test_not_an_image(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    assert find_readable.main([str(path)]) == 2
    assert "not an image" in capsys.readouterr().err


def test_bad_region_argument_exits(white_png):
    with pytest.raises(SystemExit) as exc:
        find_readable.main([str(white_png), "--region", "1,2"])
    assert exc.value.code == 2


def test_best_effort_warns(tmp_path, capsys):
    path = tmp_path / "magenta.png"
    Image.fromarray(solid_rgba((255, 0, 255, 255))).save(path)
    assert find_readable.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Readable: off" in out
    assert "[warn] no candidate met both thresholds after 55 steps" in out
