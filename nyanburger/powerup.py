"""Collectable power-ups that fall down the screen."""

from __future__ import annotations

import random

from .console import Color
from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .gameobject import GameObject

_GLYPHS = {"Shield": "s", "Speed": "S"}


class Powerup(GameObject):
    """A falling pickup of a named kind."""

    def __init__(self, x: int, y: int, kind: str, rng: random.Random | None = None):
        super().__init__(x, y, 1, 1, "G")
        self.kind = kind
        self.active = True
        self.rng = rng if rng is not None else random.Random()

    def draw(self, console) -> None:
        if not self.active:
            return
        console.move_to(self.x, self.y)
        console.write(_GLYPHS.get(self.kind, "/"), Color.GREEN)

    def move(self) -> None:
        self.y += 1
        if self.y > SCREEN_HEIGHT:
            self.reset_position()

    def collides_with(self, other: GameObject) -> bool:
        """Whether this active pickup sits on the same cell as ``other``."""
        return self.active and self.x == other.x and self.y == other.y

    def activate(self, burger) -> str | None:
        """Apply this pickup to the burger and return its message."""
        return burger.activate_power_up(self.kind)

    def reset_position(self) -> None:
        self.y = 0
        self.x = self.rng.randrange(SCREEN_WIDTH)

    def deactivate(self) -> None:
        self.active = False