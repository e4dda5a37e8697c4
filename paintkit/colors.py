"""Packing and unpacking of integer colour values."""

from __future__ import annotations

from typing import Tuple


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into ``0xRRGGBB``."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack red, green, blue and alpha into ``0xRRGGBBAA``."""
    return ((r & 0xFF) << 24) | ((g & 0xFF) << 16) | ((b & 0xFF) << 8) | (a & 0xFF)


def red(color: int) -> int:
    """Red component of an ``0xRRGGBBAA`` value."""
    return (color >> 24) & 0xFF


def green(color: int) -> int:
    """Green component of an ``0xRRGGBBAA`` value."""
    return (color >> 16) & 0xFF


def blue(color: int) -> int:
    """Blue component of an ``0xRRGGBBAA`` value."""
    return (color >> 8) & 0xFF


def alpha(color: int) -> int:
    """Alpha component of an ``0xRRGGBBAA`` value."""
    return color & 0xFF


def unpack_rgba(color: int) -> Tuple[int, int, int, int]:
    """Split an ``0xRRGGBBAA`` value into its four components."""
    return red(color), green(color), blue(color), alpha(color)