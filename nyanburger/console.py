"""Terminal output with colour attributes and a key-press source."""

from __future__ import annotations

import sys
from collections import deque
from enum import IntEnum
from typing import Iterable, Iterator, TextIO

RESET = "\x1b[0m"
_POLL_SECONDS = 0.05


def _ansi_index(nibble: int) -> int:
    # Console attributes order the bits blue, green, red; ANSI orders them red, green, blue.
    return ((nibble & 1) << 2) | (nibble & 2) | ((nibble & 4) >> 2)


class Color(IntEnum):
    """Console colour attributes: low nibble foreground, high nibble background."""

    DARK_CYAN = 3
    MAGENTA = 5
    DARK_YELLOW = 6
    NORMAL = 7
    GREEN = 10
    CYAN = 11
    RED = 12
    PINK = 13
    YELLOW = 14
    BANNER = 101

    @property
    def ansi(self) -> str:
        """The ANSI escape sequence selecting this colour."""
        fg = self.value & 0xF
        bg = (self.value >> 4) & 0xF
        codes = [(90 if fg & 8 else 30) + _ansi_index(fg)]
        if bg:
            codes.append((100 if bg & 8 else 40) + _ansi_index(bg))
        return "\x1b[" + ";".join(str(code) for code in codes) + "m"


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESCAPE = 27
    LEFT = 75
    RIGHT = 77


class Console:
    """Writes positioned, coloured text and hands out key presses.

    ``keys`` is an iterable of key codes; ``None`` items mean that no key
    was waiting when it was polled.
    """

    def __init__(self, out: TextIO | None = None, keys: Iterable[int | None] = ()):
        self.out = out if out is not None else sys.stdout
        self._keys: Iterator[int | None] = iter(keys)
        self._pending: deque[int] = deque()

    def clear(self) -> None:
        self.out.write("\x1b[2J\x1b[H")

    def move_to(self, x: int, y: int) -> None:
        self.out.write(f"\x1b[{y + 1};{x + 1}H")

    def write(self, text: str, color: Color | None = None) -> None:
        if color is None:
            self.out.write(text)
        else:
            self.out.write(f"{Color(color).ansi}{text}{RESET}")

    def key_pressed(self) -> bool:
        """Whether a key press is waiting, without consuming it."""
        if self._pending:
            return True
        key = next(self._keys, None)
        if key is None:
            return False
        self._pending.append(key)
        return True

    def read_key(self) -> int:
        """Wait for and return the next key press."""
        while not self._pending:
            try:
                key = next(self._keys)
            except StopIteration:
                raise EOFError("no more key presses") from None
            if key is not None:
                self._pending.append(key)
        return self._pending.popleft()

    def flush(self) -> None:
        self.out.flush()


def terminal_keys(term) -> Iterator[int | None]:
    """Yield key codes read from a blessed terminal, ``None`` when idle."""
    special = {
        term.KEY_LEFT: int(Key.LEFT),
        term.KEY_RIGHT: int(Key.RIGHT),
        term.KEY_ESCAPE: int(Key.ESCAPE),
    }
    while True:
        stroke = term.inkey(timeout=_POLL_SECONDS)
        if not stroke:
            yield None
        elif stroke.is_sequence:
            yield special.get(stroke.code)
        else:
            yield ord(str(stroke)[0])