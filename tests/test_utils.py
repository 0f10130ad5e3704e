"""Tests for report formatting and log helpers."""

import pytest

from readable_color.core_types import Color
from readable_color.utils import (
    debug_log,
    error,
    format_factor_percent,
    format_fields,
    format_value,
    warn,
)


@pytest.mark.parametrize(
    "value, text",
    [
        (Color.from_rgb255(125, 125, 125), "#7d7d7d"),
        (True, "on"),
        (False, "off"),
        (1234, "1,234"),
        (154.815, "154.815"),
        (0.0, "0"),
        (127.5, "127.5"),
        ("4x4", "4x4"),
    ],
)
def test_format_value(value, text):
    assert format_value(value) == text


def test_format_factor_percent():
    assert format_factor_percent(1.0) == "100.00%"
    assert format_factor_percent(54 / 55) == "98.18%"


def test_format_fields():
    line = format_fields([("Result", Color(0.0, 0.0, 0.0)), ("Readable", True)])
    assert line == "Result: #000000  Readable: on"


def test_log_prefixes_and_streams(capsys):
    debug_log("a")
    warn("b")
    error("c")
    captured = capsys.readouterr()
    assert captured.out == "[debug] a\n[warn] b\n"
    assert captured.err == "[error] c\n"
