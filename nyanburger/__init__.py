"""Cheeseburger vs. Nyan Cat: a terminal arcade game with a menu and a high score file."""

__version__ = "0.1.0"
__all__ = ["__version__"]