"""Points and rectangles used while drawing strokes and shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

Point = Tuple[int, int]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    half = abs(value) // 2
    return half if value >= 0 else -half


class PointArray:
    """A growable sequence of integer points."""

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: list[Point] = [(int(x), int(y)) for x, y in points]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __setitem__(self, index: int, point: Point) -> None:
        if not 0 <= index < len(self._points):
            raise IndexError(f"point index {index} out of range")
        x, y = point
        self._points[index] = (int(x), int(y))

    def __repr__(self) -> str:
        return f"PointArray({self._points!r})"

    def append(self, x: int, y: int) -> None:
        """Add a point at the end."""
        self._points.append((int(x), int(y)))

    def clear(self) -> None:
        """Remove every point."""
        self._points.clear()

    def clipbox(self, pixel_width: int = 0, limit: Optional[Rect] = None) -> Rect:
        """Return the box covering all points widened by half the pen width.

        When ``limit`` is given the box is clamped to it. An empty array
        gives an empty rectangle at the origin.
        """
        if not self._points:
            return Rect(0, 0, 0, 0)

        xs = [x for x, _ in self._points]
        ys = [y for _, y in self._points]
        half = _half(pixel_width)
        x_min = min(xs) - half
        y_min = min(ys) - half
        x_max = max(xs) + half
        y_max = max(ys) + half

        if limit is not None:
            x_min = max(x_min, limit.x)
            y_min = max(y_min, limit.y)
            x_max = min(x_max, limit.x + limit.width - 1)
            y_max = min(y_max, limit.y + limit.height - 1)

        return Rect(x_min, y_min, x_max - x_min + 1, y_max - y_min + 1)

    def offset(self, dx: int, dy: int) -> None:
        """Move every point by ``(dx, dy)`` in place."""
        self._points = [(x + dx, y + dy) for x, y in self._points]

    def copy(self) -> "PointArray":
        """Return an independent copy."""
        return PointArray(self._points)