"""Reading and updating the best score kept in a plain text file."""

from __future__ import annotations

import os
import re
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def load_high_score(path: str | os.PathLike) -> int:
    """Return the stored best score, creating an empty file when there is none.

    A file whose content does not start with an integer counts as 0.
    """
    file = Path(path)
    try:
        text = file.read_text()
    except FileNotFoundError:
        file.touch()
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def save_high_score(path: str | os.PathLike, score: int) -> None:
    """Replace the stored best score with ``score``."""
    Path(path).write_text(str(score))


def record_score(path: str | os.PathLike, score: int) -> int:
    """Store ``score`` if it beats the best one; return the best score now kept."""
    best = load_high_score(path)
    if score > best:
        save_high_score(path, score)
        best = score
    return best