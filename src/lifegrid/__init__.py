"""Conway's Game of Life on a fixed-size bounded grid."""

__version__ = "0.1.0"

from .core.grid import LifeGrid, OutOfBoundsError
from .core.game import GameOfLife
from .core.patterns import GLIDER_LAYOUT, Pattern, PatternLibrary

__all__ = ["LifeGrid", "OutOfBoundsError", "GameOfLife", "GLIDER_LAYOUT", "Pattern", "PatternLibrary"]
