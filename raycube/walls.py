"""Textured wall columns of the 3D view."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from raycube.image import Image
from raycube.raycast import RAY_COUNT, Ray

_SCALE = 100000
_INT_MAX = 2**31 - 1


@dataclass
class WallTextures:
    """The textures a wall column can be drawn with."""

    north: Image
    south: Image
    east: Image
    west: Image
    door_frames: list[Image] = field(default_factory=list)
    door_frame: int = 0

    def _pick(self, face: str, cell: str) -> Image:
        if self.door_frames:
            if cell == "D":
                return self.door_frames[0]
            if cell == "d":
                return self.door_frames[self.door_frame]
        return getattr(self, face)


def _c_round(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def _c_div(numerator: int, denominator: int) -> int:
    return int(numerator / denominator)


def _on_grid_line(value: float) -> bool:
    return _c_round(value * _SCALE) % _SCALE == 0


def _cell(grid: Sequence[str], row: int, column: int) -> str:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return ""


def wall_face(ray: Ray, p_x: float, p_y: float) -> str | None:
    """Return which face the ray hit: north, south, east, west, or None at a corner."""
    on_x = _on_grid_line(ray.x)
    on_y = _on_grid_line(ray.y)
    if on_x and not on_y:
        return "east" if ray.x > p_x else "west"
    if on_y and not on_x:
        return "south" if ray.y > p_y else "north"
    return None


def select_texture(
    grid: Sequence[str], ray: Ray, p_x: float, p_y: float, textures: WallTextures
) -> tuple[int, Image] | None:
    """Return (side, texture) for the wall a ray hit, or None at a corner.

    Side is 1 for east and west faces and 0 for north and south faces.
    """
    face = wall_face(ray, p_x, p_y)
    if face is None:
        return None
    floor_x = math.floor(ray.x)
    floor_y = math.floor(ray.y)
    round_x = _c_round(ray.x)
    round_y = _c_round(ray.y)
    if face == "east":
        cell = _cell(grid, floor_y, round_x)
    elif face == "west":
        cell = _cell(grid, floor_y, round_x - 1) if int(ray.x) != 0 else ""
    elif face == "south":
        cell = _cell(grid, round_y, floor_x) if 0 <= round_y + 1 < len(grid) else ""
    else:
        cell = _cell(grid, round_y - 1, floor_x) if ray.y > 1 else ""
    side = 1 if face in ("east", "west") else 0
    return side, textures._pick(face, cell)


def _wall_height(height: int, ray: Ray, rot: float) -> int:
    if ray.hyp == 0:
        return _INT_MAX
    return int(min(height / ray.hyp * math.cos(ray.angle - rot), _INT_MAX))


def _put_wall(
    image: Image, x: int, y: int, ray: Ray, side: int, texture: Image, wall_height: int
) -> int:
    if wall_height <= 0:
        return y
    if side == 1:
        ratio_width = ray.y - math.floor(ray.y)
    else:
        ratio_width = ray.x - math.floor(ray.x)
    ratio_height = texture.height / wall_height
    start = max(0, _c_div(wall_height - image.height, 2))
    line = start * ratio_height
    column = max(0, int(ratio_width * texture.width) - 1)
    while math.floor(line) < texture.height and y < image.height:
        image.put_pixel(x, y, texture.get_pixel(column, math.floor(line)))
        y += 1
        line += ratio_height
    return y


def draw_column(
    image: Image,
    ray: Ray,
    x: int,
    rot: float,
    grid: Sequence[str],
    p_x: float,
    p_y: float,
    textures: WallTextures,
    ceiling: int,
    floor: int,
) -> None:
    """Draw ceiling, wall slice and floor for one screen column."""
    height = image.height
    wall_height = _wall_height(height, ray, rot)
    y = 0
    ceiling_end = _c_div(height - wall_height, 2)
    while y <= ceiling_end and y < height:
        image.put_pixel(x, y, ceiling)
        y += 1
    if ray.door and textures.door_frames:
        side = 1 if wall_face(ray, p_x, p_y) in ("east", "west") else 0
        y = _put_wall(image, x, y, ray, side, textures.door_frames[0], wall_height)
        ray.door = False
    choice = select_texture(grid, ray, p_x, p_y, textures)
    if choice is not None:
        side, texture = choice
        y = _put_wall(image, x, y, ray, side, texture, wall_height)
    while y < height:
        image.put_pixel(x, y, floor)
        y += 1


def draw_walls(
    image: Image,
    rays: Iterable[Ray],
    rot: float,
    grid: Sequence[str],
    p_x: float,
    p_y: float,
    textures: WallTextures,
    ceiling: int,
    floor: int,
) -> int:
    """Draw one column per ray, left to right; return the number of columns drawn.

    The first ray of the sequence only primes the walk and is not drawn.
    """
    ratio = max(1, int(image.width / RAY_COUNT))
    remaining = iter(rays)
    if next(remaining, None) is None:
        return 0
    drawn = 0
    current: Ray | None = None
    for x in range(image.width):
        if x % ratio == 0:
            current = next(remaining, None)
            if current is None:
                break
        draw_column(image, current, x, rot, grid, p_x, p_y, textures, ceiling, floor)
        drawn += 1
    return drawn