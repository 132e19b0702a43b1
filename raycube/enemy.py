"""Enemy movement and the end-of-game distance checks."""

from __future__ import annotations

import math
from collections.abc import Sequence

CATCH_DISTANCE = 1.0
ESCAPE_DISTANCE = 0.5
STEP_DIVISOR = 10

_BLOCKING = frozenset({"1", "D", "d"})


def is_blocking(cell: str) -> bool:
    """Whether a map cell stops movement: walls and closed or moving doors."""
    return cell in _BLOCKING


def _cell(grid: Sequence[str], row: int, column: int) -> str:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return "1"


def enemy_can_move(
    grid: Sequence[str], e_x: float, e_y: float, next_x: int, next_y: int
) -> bool:
    """Whether the enemy may step into cell (next_x, next_y) without cutting a corner."""
    if is_blocking(_cell(grid, next_y, next_x)):
        return False
    current_x = math.floor(e_x)
    current_y = math.floor(e_y)
    if next_x != current_x and next_y != current_y:
        if is_blocking(_cell(grid, current_y, next_x)):
            return False
        if is_blocking(_cell(grid, next_y, current_x)):
            return False
    return True


def move_enemy(
    grid: Sequence[str], e_x: float, e_y: float, angle: float
) -> tuple[float, float]:
    """Step the enemy opposite to ``angle``; return its new position."""
    step_x = math.cos(angle + math.pi) / STEP_DIVISOR
    step_y = math.sin(angle + math.pi) / STEP_DIVISOR
    next_x = math.floor(e_x + step_x)
    next_y = math.floor(e_y + step_y)
    if enemy_can_move(grid, e_x, e_y, next_x, next_y):
        return e_x + step_x, e_y + step_y
    return e_x, e_y


def is_caught(distance: float) -> bool:
    """Whether the enemy is close enough to kill the player."""
    return distance <= CATCH_DISTANCE


def has_escaped(distance: float) -> bool:
    """Whether the player is close enough to the exit to win."""
    return distance <= ESCAPE_DISTANCE