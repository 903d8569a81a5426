"""The player-controlled cheeseburger."""

from __future__ import annotations

from .console import Color, Key
from .constants import SCREEN_WIDTH, clamp
from .gameobject import GameObject

START_LIVES = 3
START_SPEED = 5


class Cheeseburger(GameObject):
    """The player: moves sideways, collects points and loses lives."""

    def __init__(self, x: int, y: int):
        super().__init__(x, y, 1, 1, "B")
        self.lives = START_LIVES
        self.score = 0
        self.speed = START_SPEED
        self.has_shield = False
        self._steering: int | None = None

    def steer(self, key: int) -> None:
        """Record a key press to be applied on the next move."""
        self._steering = key

    def move(self) -> None:
        key, self._steering = self._steering, None
        if key == Key.LEFT:
            self.x = clamp(self.x - 1, 0, SCREEN_WIDTH - 1)
        elif key == Key.RIGHT:
            self.x = clamp(self.x + 1, 0, SCREEN_WIDTH - 1)

    def draw(self, console) -> None:
        console.move_to(self.x, self.y)
        console.write(self.symbol, Color.YELLOW)

    def increase_score(self, points: int) -> None:
        self.score += points

    def update(self) -> None:
        """Per-frame upkeep: the shield wears off and speed grows."""
        self.has_shield = False
        self.speed += 1

    def handle_collision(self, other: GameObject | None = None) -> list[str]:
        """Take a hit unless shielded; return the messages to show."""
        if self.has_shield:
            return ["Collision avoided with shield!"]
        self.lives -= 1
        messages = [f"Hit! Lives left: {self.lives}"]
        if self.lives <= 0:
            messages.append("Game Over!")
        return messages

    def activate_power_up(self, kind: str) -> str | None:
        """Apply a power-up by name; return its message, or None if unknown."""
        if kind == "Shield":
            self.has_shield = True
            return "Power-Up Activated: Shield"
        if kind == "SpeedBoost":
            self.speed += 2
            return "Speed Boost Activated! Cheeseburger speed increased temporarily"
        if kind == "ScoreMultiplier":
            self.increase_score(15)
            return "Score Multiplier Activated! Points doubled temporarily"
        return None

    def reset(self) -> None:
        """Restore starting lives, score, speed and shield."""
        self.lives = START_LIVES
        self.score = 0
        self.speed = START_SPEED
        self.has_shield = False
        self._steering = None