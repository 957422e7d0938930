"""paclog - Filter and browse the pacman log."""

__version__ = "0.1.0"
