# readable_color/utils.py
from __future__ import annotations

"""
Report formatting and print-based logging for readable_color.

Exports:
- format_value(value)             -> str  (Color as hex, bool as on/off, compact numbers)
- format_factor_percent(factor)   -> str  ('98.18%')
- format_fields(pairs)            -> str  ('Name: value  Name: value')
- log / debug_log / warn / error
"""

import sys
from typing import Any, Iterable, Tuple

from .core_types import Color


# Report formatting


def format_value(value: Any) -> str:
    if isinstance(value, Color):
        return value.to_hex()
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def format_factor_percent(factor: float) -> str:
    """Step factor in [0, 1] as '98.18%'."""
    return f"{factor * 100.0:.2f}%"


def format_fields(pairs: Iterable[Tuple[str, Any]], sep: str = "  ") -> str:
    """Join (name, value) pairs into one report line."""
    return sep.join(f"{name}: {format_value(value)}" for name, value in pairs)


# Logging


def log(message: str) -> None:
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Default sink for match traces."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Goes to stderr so reports on stdout stay clean."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_value",
    "format_factor_percent",
    "format_fields",
    "log",
    "debug_log",
    "warn",
    "error",
]
