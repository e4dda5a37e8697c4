"""Per-pixel access and flood fill on RGBA pictures."""

from __future__ import annotations

from PIL import Image

from .colors import pack_rgba, unpack_rgba
from .geometry import Rect


def _require_rgba(picture: Image.Image) -> None:
    if picture.mode != "RGBA":
        raise ValueError(f"picture must be RGBA, not {picture.mode}")


def get_pixel(picture: Image.Image, x: int, y: int) -> int:
    """Return the pixel at ``(x, y)`` packed as ``0xRRGGBBAA``."""
    _require_rgba(picture)
    return pack_rgba(*picture.getpixel((x, y)))


def set_pixel(picture: Image.Image, x: int, y: int, color: int) -> None:
    """Set the pixel at ``(x, y)`` from a packed ``0xRRGGBBAA`` value."""
    _require_rgba(picture)
    picture.putpixel((x, y), unpack_rgba(color))


def flood_fill(picture: Image.Image, x: int, y: int, color: int) -> Rect:
    """Fill the 4-connected area around ``(x, y)`` with ``color`` in place.

    The area is every pixel reachable from the seed whose RGBA value equals
    the seed's. Nothing is filled if the new colour has the same red, green
    and blue as the seed. Returns the bounding box of the filled pixels; when
    nothing was filled it is the single seed pixel.
    """
    _require_rgba(picture)
    width, height = picture.size
    new = unpack_rgba(color)
    box = [x, y, x, y]  # left, top, right, bottom

    if not (0 <= x < width and 0 <= y < height):
        return Rect(x, y, 1, 1)

    pixels = picture.load()
    old = pixels[x, y]
    if old[:3] == new[:3]:
        return Rect(x, y, 1, 1)

    def is_old(px: int, py: int) -> bool:
        return pixels[px, py] == old

    def paint(px: int, py: int) -> None:
        pixels[px, py] = new
        if px <= box[0]:
            box[0] = px
        if px > box[2]:
            box[2] = px
        if py <= box[1]:
            box[1] = py
        if py > box[3]:
            box[3] = py

    stack: list[tuple[int, int, int, int]] = []

    def push(py: int, xl: int, xr: int, dy: int) -> None:
        if 0 <= py + dy < height:
            stack.append((py, xl, xr, dy))

    push(y, x, x, 1)
    push(y + 1, x, x, -1)

    while stack:
        seg_y, x1, x2, dy = stack.pop()
        row = seg_y + dy

        cx = x1
        while cx >= 0 and is_old(cx, row):
            paint(cx, row)
            cx -= 1

        skip = cx >= x1
        left = 0
        if not skip:
            left = cx + 1
            if left < x1:
                push(row, left, x1 - 1, -dy)
            cx = x1 + 1

        while True:
            if not skip:
                while cx < width and is_old(cx, row):
                    paint(cx, row)
                    cx += 1
                push(row, left, cx - 1, dy)
                if cx > x2 + 1:
                    push(row, x2 + 1, cx - 1, -dy)
            skip = False
            cx += 1
            while cx <= x2 and not is_old(cx, row):
                cx += 1
            left = cx
            if cx > x2:
                break

    left_x, top_y, right_x, bottom_y = box
    return Rect(left_x, top_y, abs(right_x - left_x) + 1, abs(bottom_y - top_y) + 1)