"""Falling Nyan Cats the player must avoid."""

from __future__ import annotations

import random

from .console import Color
from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .gameobject import GameObject


class NyanCat(GameObject):
    """An enemy that falls faster and hides more often at higher levels."""

    def __init__(self, x: int, y: int, level: int, rng: random.Random | None = None):
        super().__init__(x, y, 1, 1, "N")
        self.level = level
        self.fall_speed = 1.0 + level * 0.5
        self.visible = True
        self.rng = rng if rng is not None else random.Random()

    def move(self) -> None:
        self.y += int(self.fall_speed)
        if self.y > SCREEN_HEIGHT:
            self.reset_position()

    def draw(self, console) -> None:
        if self.visible:
            console.move_to(self.x, self.y)
            console.write(self.symbol, Color.MAGENTA)

    def reset_position(self) -> None:
        """Return to the top at a random column, possibly hidden."""
        self.y = 0
        self.x = self.rng.randrange(SCREEN_WIDTH)
        self.visible = self.rng.randrange(100) > self.level * 10