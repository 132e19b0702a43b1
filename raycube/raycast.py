"""Grid ray casting across the player's field of view."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

FOV = math.pi * 66 / 180
RAY_COUNT = 1000.00001

_TWO_PI = 2 * math.pi
_FACING = {
    "N": -math.pi / 2,
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}


@dataclass
class Ray:
    """Where one ray, cast at a given angle, met a wall."""

    angle: float
    hyp: float
    x: float
    y: float
    door: bool = False


def initial_rotation(player_char: str) -> float:
    """Return the starting view angle for a player marker N, S, E or W."""
    try:
        return _FACING[player_char]
    except KeyError:
        raise ValueError(f"unknown player marker {player_char!r}") from None


def normalize_rotation(rot: float) -> float:
    """Bring a rotation back by one full turn when it reaches ±2π."""
    if rot >= _TWO_PI:
        rot -= _TWO_PI
    if rot <= -_TWO_PI:
        rot += _TWO_PI
    return rot


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _cell(grid: Sequence[str], row: int, column: int) -> str:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return ""


def _initial_dist_y(p_y: float, angle: float) -> float:
    if 0 <= angle <= math.pi or -_TWO_PI <= angle <= -math.pi:
        dist = abs(math.ceil(p_y)) - p_y
        return 1.0 if dist == 0 else dist
    dist = abs(math.floor(p_y)) - p_y
    return -1.0 if dist == 0 else dist


def _initial_dist_x(p_x: float, angle: float) -> float:
    if (
        math.pi / 2 <= angle <= 3 * math.pi / 2
        or -3 * math.pi / 2 <= angle <= -math.pi / 2
    ):
        dist = abs(math.floor(p_x)) - p_x
        return -1.0 if dist == 0 else dist
    dist = abs(math.ceil(p_x)) - p_x
    return 1.0 if dist == 0 else dist


def cast_ray(
    grid: Sequence[str], p_x: float, p_y: float, angle: float, player_char: str
) -> Ray:
    """Step a ray cell by cell from the player until it leaves open floor."""
    passable = {"0", "o", "A", "X", player_char} - {""}
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dist_y = _initial_dist_y(p_y, angle)
    dist_x = _initial_dist_x(p_x, angle)
    next_x = _divide(abs(dist_x), cos_a)
    next_y = _divide(abs(dist_y), sin_a)
    step_x = 1 if dist_x > 0 else -1
    step_y = 1 if dist_y > 0 else -1
    row = math.floor(p_y)
    column = math.floor(p_x)
    hyp = 0.0
    while _cell(grid, row, column) in passable:
        if abs(next_x) <= abs(next_y):
            column += step_x
            dist_x += step_x
            hyp = next_x
            next_x = _divide(dist_x, cos_a)
        else:
            row += step_y
            dist_y += step_y
            hyp = next_y
            next_y = _divide(dist_y, sin_a)
    distance = abs(hyp)
    return Ray(
        angle=angle,
        hyp=distance,
        x=p_x + cos_a * distance,
        y=p_y + sin_a * distance,
    )


def cast_rays(
    grid: Sequence[str], p_x: float, p_y: float, rot: float, player_char: str
) -> list[Ray]:
    """Cast rays evenly across the field of view centred on ``rot``."""
    rot = normalize_rotation(rot)
    angle = rot - FOV / 2
    end = FOV / 2 + rot
    step = FOV / RAY_COUNT
    rays = []
    while angle <= end:
        rays.append(cast_ray(grid, p_x, p_y, angle, player_char))
        angle += step
    return rays