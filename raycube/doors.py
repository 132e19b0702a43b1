"""Opening and closing doors next to the player, and their animation state."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from enum import Enum

LAST_FRAME = 23


class DoorPhase(Enum):
    """Progress of a door opening or closing."""

    NONE = "none"
    STARTING = "starting"
    END = "end"


def _cell(grid: MutableSequence, row: int, column: int) -> str:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return ""


def _set_cell(grid: MutableSequence, row: int, column: int, char: str) -> None:
    line = grid[row]
    if isinstance(line, str):
        grid[row] = line[:column] + char + line[column + 1:]
    else:
        line[column] = char


def _neighbours(p_x: float, p_y: float) -> list[tuple[int, int]]:
    x = int(p_x)
    y = int(p_y)
    cells = [(y, x + 1), (y + 1, x)]
    if y != 0:
        cells.append((y - 1, x))
    if x != 0:
        cells.append((y, x - 1))
    return cells


def open_door(grid: MutableSequence, p_x: float, p_y: float) -> bool:
    """Start opening the first closed door next to the player; return whether one was found."""
    for row, column in _neighbours(p_x, p_y):
        if _cell(grid, row, column) == "D":
            _set_cell(grid, row, column, "d")
            return True
    return False


def close_door(
    grid: MutableSequence, p_x: float, p_y: float, player_char: str
) -> bool:
    """Start closing the first open door next to the player; return whether one was found."""
    for row, column in _neighbours(p_x, p_y):
        if _cell(grid, row, column) == "o":
            _set_cell(grid, int(p_y), int(p_x), player_char)
            _set_cell(grid, row, column, "d")
            return True
    return False


@dataclass
class DoorAnimation:
    """Frame counter shared by the door opening and closing animations."""

    opening: DoorPhase = DoorPhase.NONE
    closing: DoorPhase = DoorPhase.NONE
    count: int = 0

    def start_opening(self) -> None:
        """Begin playing the door frames forwards."""
        self.count = 0
        self.opening = DoorPhase.STARTING

    def start_closing(self) -> None:
        """Begin playing the door frames backwards."""
        self.count = LAST_FRAME
        self.closing = DoorPhase.STARTING

    def step(self) -> tuple[bool, bool]:
        """Advance one frame; return (opening finished, closing finished)."""
        opened = closed = False
        if self.opening is DoorPhase.STARTING:
            self.count += 1
            if self.count > LAST_FRAME:
                self.opening = DoorPhase.END
        if self.opening is DoorPhase.END:
            opened = True
            self.opening = DoorPhase.NONE
        if self.closing is DoorPhase.STARTING:
            self.count -= 1
            if self.count < 0:
                self.closing = DoorPhase.END
        if self.closing is DoorPhase.END:
            closed = True
            self.closing = DoorPhase.NONE
        return opened, closed