"""Billboarded sprites (the enemy and the exit) drawn on the NPC layer."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from raycube.image import Image
from raycube.raycast import Ray

SCREEN_HEIGHT = 1080
TOP_MARGIN = 50
COLUMN_REPEAT = 3

_TWO_PI = 2 * math.pi
_ENEMY_SEQUENCE = (0, 1, 2, 1, 0)


def find_char(grid: Sequence[str], char: str) -> tuple[float, float] | None:
    """Return the centre (x, y) of the last cell holding ``char``, or None."""
    found = None
    for row, line in enumerate(grid):
        for column, cell in enumerate(line):
            if cell == char:
                found = (column + 0.5, row + 0.5)
    return found


def clear_column(layer: Image, x: int) -> None:
    """Make one column of a layer fully transparent."""
    for y in range(layer.height):
        layer.put_pixel(x, y, 0)


def _c_div(numerator: int, denominator: int) -> int:
    return int(numerator / denominator)


@dataclass
class Billboard:
    """A flat sprite standing at a map position and always facing the player."""

    x: float
    y: float
    width: int
    height: int
    screen_height: int = SCREEN_HEIGHT
    clears_column: bool = False
    dist: float = field(init=False, default=math.inf)
    ratio: float = field(init=False, default=0.0)
    ratio_height: float = field(init=False, default=0.0)
    ratio_width: float = field(init=False, default=0.0)
    angle: float = field(init=False, default=math.nan)
    theta1: float = field(init=False, default=math.nan)
    theta2: float = field(init=False, default=math.nan)
    max_rays: int = field(init=False, default=0)
    start: int = field(init=False, default=0)
    n_ray: int = field(init=False, default=0)

    def update(self, p_x: float, p_y: float, fov: float, ray_count: float) -> None:
        """Recompute distance, bearing and screen extent seen from (p_x, p_y)."""
        d_x = p_x - self.x
        d_y = p_y - self.y
        self.dist = abs(math.sqrt(d_x * d_x + d_y * d_y))
        if self.dist == 0:
            self.ratio = math.inf
            self.ratio_height = 0.0
            self.angle = self.theta1 = self.theta2 = math.nan
            self.max_rays = 0
            self.ratio_width = math.inf
            self.start = 0
            return
        self.ratio = self.screen_height / self.dist
        self.ratio_height = self.height / self.ratio
        if p_x >= self.x and p_y >= self.y:
            angle = math.pi + math.acos(abs(d_x) / self.dist)
        elif p_x <= self.x and p_y >= self.y:
            angle = 3 * math.pi / 2 + math.acos(abs(d_y) / self.dist)
        elif p_x <= self.x and p_y <= self.y:
            angle = _TWO_PI + math.acos(abs(d_x) / self.dist)
        else:
            angle = math.pi / 2 + math.acos(abs(d_y) / self.dist)
        if angle >= _TWO_PI:
            angle -= _TWO_PI
        if angle <= -_TWO_PI:
            angle += _TWO_PI
        self.angle = angle
        half = math.atan(0.5 / self.dist)
        self.theta1 = angle - half
        self.theta2 = angle + half
        self.max_rays = int(abs(self.theta1 - self.theta2) / (fov / ray_count))
        self.ratio_width = (
            self.width / self.max_rays if self.max_rays else math.inf
        )
        self.start = max(0, _c_div(int(self.ratio) - self.screen_height, 2))

    def covers(self, ray: Ray) -> bool:
        """Whether the ray passes through the sprite before hitting a wall."""
        if not ray.hyp > self.dist:
            return False
        if self.theta1 <= ray.angle <= self.theta2:
            return True
        return self.theta1 - _TWO_PI <= ray.angle <= self.theta2 - _TWO_PI

    def _texture_column(self, frame: Image) -> int:
        position = (self.n_ray // COLUMN_REPEAT) * self.ratio_width
        if not math.isfinite(position):
            return 0
        return max(0, min(frame.width - 1, math.floor(position)))

    def draw_column(self, layer: Image, ray: Ray, x: int, frame: Image) -> bool:
        """Draw the sprite's slice for screen column ``x``; return whether it drew."""
        if self.clears_column:
            clear_column(layer, x)
        if not self.covers(ray):
            return False
        height = layer.height
        y = 0
        top = (height - self.ratio + TOP_MARGIN) / 2
        while y < top and y < height:
            layer.put_pixel(x, y, 0)
            y += 1
        line = self.start * self.ratio_height
        column = self._texture_column(frame)
        while math.floor(line) < self.height and y < height:
            layer.put_pixel(x, y, frame.get_pixel(column, math.floor(line)))
            y += 1
            line += self.ratio_height
        while y < height:
            layer.put_pixel(x, y, 0)
            y += 1
        self.n_ray += 1
        if self.n_ray >= self.max_rays * COLUMN_REPEAT:
            self.n_ray = 0
        return True


@dataclass
class EnemyAnimation:
    """Cycles the enemy through its walking frames: 0, 1, 2, 1, 0."""

    frames: Sequence[Any]
    counter: int = 0
    current: Any = field(init=False)

    def __post_init__(self) -> None:
        if len(self.frames) < 3:
            raise ValueError("the enemy animation needs three frames")
        self.current = self.frames[0]

    def advance(self) -> Any:
        """Select the next frame of the cycle and return it."""
        self.current = self.frames[_ENEMY_SEQUENCE[self.counter]]
        self.counter = (self.counter + 1) % len(_ENEMY_SEQUENCE)
        return self.current