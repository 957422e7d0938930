"""Package manager queries.

This module exports the scanner used to look up explicitly installed packages.
"""

from paclog.scanners.pacman import PacmanScanner

__all__ = ["PacmanScanner"]
