"""Friendly characters that grant extra lives."""

from __future__ import annotations

import random

from .console import Color
from .constants import SCREEN_HEIGHT, SCREEN_WIDTH, clamp
from .gameobject import GameObject


class Friend(GameObject):
    """A falling ally whose support level decides how many lives it gives."""

    def __init__(
        self,
        x: int,
        y: int,
        name: str,
        support_level: int,
        rng: random.Random | None = None,
    ):
        super().__init__(x, y, 2, 2, "F")
        self.name = name
        self.support_level = support_level
        self.active = True
        self.target_x = x
        self.rng = rng if rng is not None else random.Random()

    @property
    def _bonus(self) -> int:
        return min(self.support_level, 3) if self.support_level >= 1 else 0

    def draw(self, console) -> None:
        if not self.active:
            return
        console.move_to(self.x, self.y)
        console.write(self.symbol + "F" * self._bonus, Color.DARK_CYAN)

    def move(self) -> None:
        self.y += 1
        if self.y > SCREEN_HEIGHT:
            self.reset_position()

    def reset_position(self) -> None:
        self.y = 0
        self.x = self.rng.randrange(SCREEN_WIDTH)

    def set_target_x(self, target: int) -> None:
        self.target_x = clamp(target, 0, SCREEN_WIDTH - 3)

    def collides_with(self, other: GameObject) -> bool:
        """Whether ``other`` is on the same row within one column."""
        return self.active and abs(self.x - other.x) <= 1 and self.y == other.y

    def offer_help(self, burger) -> list[str]:
        """Give the burger extra lives; return the messages to show."""
        if not self.active:
            return []
        messages = [f"{self.name} offers level {self.support_level} support!"]
        bonus = self._bonus
        if bonus:
            burger.lives += bonus
            messages.append("You gained 1 life!" if bonus == 1 else f"You gained {bonus} lives!")
        return messages

    def increase_support_level(self, increment: int = 1) -> None:
        self.support_level += increment