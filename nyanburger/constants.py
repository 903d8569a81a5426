"""Playfield dimensions and small numeric helpers."""

SCREEN_WIDTH = 50
SCREEN_HEIGHT = 25


def clamp(value, min_val, max_val):
    """Return ``value`` limited to the closed range ``[min_val, max_val]``."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value