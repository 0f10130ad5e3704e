# readable_color/errors.py
"""
Exception types raised by readable_color.
"""


class InvalidBackgroundContent(ValueError):
    """The requested region cannot produce pixel data to average (e.g. zero area)."""


__all__ = ["InvalidBackgroundContent"]
