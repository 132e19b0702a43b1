"""Random blinking of the eye textures on the walls."""

from __future__ import annotations

import random
from dataclasses import dataclass

BLINK_CHANCE = 100

_SEQUENCE = (0, 1, 2, 3, 2, 1, 0)


@dataclass
class Blink:
    """Which of the four eye frames a wall face shows, and the blink in progress."""

    frame: int = 0
    counter: int = 0
    active: bool = False

    def step(self, roll: int | None = None) -> int:
        """Advance one tick and return the frame index to show.

        A blink starts when ``roll`` is a multiple of 100; without a roll a
        random one is drawn.
        """
        if roll is None:
            roll = random.getrandbits(31)
        if roll % BLINK_CHANCE == 0 and not self.active:
            self.active = True
        if self.active:
            self.frame = _SEQUENCE[self.counter]
            if self.counter == len(_SEQUENCE) - 1:
                self.counter = 0
                self.active = False
            else:
                self.counter += 1
        return self.frame