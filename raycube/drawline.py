"""Integer line rasterisation used for the minimap rays."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator

from raycube.image import Image

_Point = tuple[int, int]


def _straight(start: int, end: int) -> Iterator[int]:
    step = 1 if end > start else -1
    yield from range(start, end, step)


def _octant(
    major: int,
    minor: int,
    major_end: int,
    major_step: int,
    minor_step: int,
    error: int,
    delta: int,
    reset: int,
    fires: Callable[[int], bool],
    x_major: bool,
) -> Iterator[_Point]:
    while True:
        yield (major, minor) if x_major else (minor, major)
        major += major_step
        if major == major_end:
            return
        error += delta
        if fires(error):
            minor += minor_step
            error += reset


def _neg(value: int) -> bool:
    return value < 0


def _pos(value: int) -> bool:
    return value > 0


def _non_neg(value: int) -> bool:
    return value >= 0


def _non_pos(value: int) -> bool:
    return operator.le(value, 0)


def _iter_points(sx: int, sy: int, ex: int, ey: int) -> Iterator[_Point]:
    dx = ex - sx
    dy = ey - sy
    if dx == 0:
        for y in _straight(sy, ey):
            yield sx, y
        return
    if dy == 0:
        for x in _straight(sx, ex):
            yield x, sy
        return
    if dx > 0:
        if dy > 0:
            if dx >= dy:
                yield from _octant(sx, sy, ex, 1, 1, dx, -2 * dy, 2 * dx, _neg, True)
            else:
                yield from _octant(sy, sx, ey, 1, 1, dy, -2 * dx, 2 * dy, _neg, False)
        elif dx >= -dy:
            yield from _octant(sx, sy, ex, 1, -1, dx, 2 * dy, 2 * dx, _neg, True)
        else:
            yield from _octant(sy, sx, ey, -1, 1, dy, 2 * dx, 2 * dy, _pos, False)
    elif dy > 0:
        if -dx >= dy:
            yield from _octant(sx, sy, ex, -1, 1, dx, 2 * dy, 2 * dx, _non_neg, True)
        else:
            yield from _octant(sy, sx, ey, 1, -1, dy, 2 * dx, 2 * dy, _non_pos, False)
    elif dx <= dy:
        yield from _octant(sx, sy, ex, -1, -1, dx, -2 * dy, 2 * dx, _non_neg, True)
    else:
        yield from _octant(sy, sx, ey, -1, -1, dy, -2 * dx, 2 * dy, _non_neg, False)


def line_points(start_x: int, start_y: int, end_x: int, end_y: int) -> list[_Point]:
    """Return the pixels of a line from the start point up to, not including, the end."""
    return list(_iter_points(start_x, start_y, end_x, end_y))


def draw_line(
    image: Image, start_x: int, start_y: int, end_x: int, end_y: int, color: int
) -> None:
    """Rasterise a line onto an image in the given colour."""
    for x, y in _iter_points(start_x, start_y, end_x, end_y):
        image.put_pixel(x, y, color)