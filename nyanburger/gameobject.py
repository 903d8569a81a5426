"""Base class for everything that lives on the playfield."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GameObject(ABC):
    """A rectangle on the playfield drawn with a symbol."""

    def __init__(self, x: int, y: int, width: int, height: int, symbol: str):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.symbol = symbol

    @abstractmethod
    def move(self) -> None:
        """Advance the object by one step."""

    @abstractmethod
    def draw(self, console) -> None:
        """Render the object on ``console``."""

    def overlaps(self, other: GameObject) -> bool:
        """Whether the two bounding rectangles intersect."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )