"""Size units, the attributes dialog arithmetic and the flip/rotate effects."""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from .image import PaintImage, Rotation

CM_PER_INCH = 2.54
MAX_SIDE = 2000

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class Unit(Enum):
    """Units an image size can be shown in."""

    INCH = "in"
    CM = "cm"
    PIXEL = "px"


class Effect(IntEnum):
    """Effects offered by the flip and rotate dialog."""

    FLIP_VERTICAL = 0
    FLIP_HORIZONTAL = 1
    ROTATE = 2


def _check_dpi(dpi: float) -> float:
    dpi = float(dpi)
    if dpi <= 0:
        raise ValueError("dpi must be positive")
    return dpi


def to_pixels(value: float, unit: Unit, dpi: float) -> float:
    """Convert a length in ``unit`` to pixels without rounding."""
    unit = Unit(unit)
    if unit is Unit.INCH:
        return value * _check_dpi(dpi)
    if unit is Unit.CM:
        return value * _check_dpi(dpi) / CM_PER_INCH
    return float(value)


def convert_units(value: float, source: Unit, target: Unit, dpi: float) -> float:
    """Convert a length between units.

    The value passes through pixels. A result in pixels has 0.5 added so that
    truncating it rounds to the nearest pixel; the same unit on both sides
    gives the value back unchanged.
    """
    source, target = Unit(source), Unit(target)
    if source is target:
        return value
    pixels = to_pixels(value, source, dpi)
    if target is Unit.INCH:
        return pixels / _check_dpi(dpi)
    if target is Unit.CM:
        return pixels * CM_PER_INCH / _check_dpi(dpi)
    return pixels + 0.5


def parse_number(text: str) -> float:
    """Read the leading decimal number of ``text``; 0.0 when there is none."""
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def accepts_character(char: str) -> bool:
    """Whether a size entry accepts a typed character.

    Printable characters other than digits and the period are refused.
    """
    if not char:
        return True
    first = char[0]
    printable = " " <= first <= "~"
    return not printable or "0" <= first <= "9" or first == "."


def format_size(value: float, unit: Unit) -> str:
    """Text shown for a length: two decimals, or whole pixels."""
    if Unit(unit) is Unit.PIXEL:
        return str(int(value))
    return f"{value:.2f}"


def resize_target(
    width: float,
    height: float,
    unit: Unit,
    xdpi: float,
    ydpi: float,
    current: Tuple[int, int],
) -> Optional[Tuple[int, int]]:
    """Pixel size to resize the canvas to, or None when no resize applies.

    Both sides must lie strictly between 0 and 2000 pixels and differ from
    ``current`` as a pair.
    """
    dw = to_pixels(width, unit, xdpi)
    dh = to_pixels(height, unit, ydpi)
    if not (0 < dw < MAX_SIDE and 0 < dh < MAX_SIDE):
        return None
    ow, oh = current
    if dw == ow and dh == oh:
        return None
    return int(dw), int(dh)


def apply_effect(
    image: PaintImage,
    effect: Effect,
    rotation: Union[Rotation, int] = Rotation.COUNTERCLOCKWISE,
) -> PaintImage:
    """Return a copy of ``image`` with a flip or rotation applied."""
    effect = Effect(effect)
    result = image.copy()
    if effect is Effect.ROTATE:
        result.rotate(rotation)
    else:
        result.flip(effect is Effect.FLIP_HORIZONTAL)
    return result