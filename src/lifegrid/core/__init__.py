"""Core Game of Life logic."""

from .grid import LifeGrid, OutOfBoundsError
from .game import GameOfLife
from .patterns import GLIDER_LAYOUT, Pattern, PatternLibrary

__all__ = ["LifeGrid", "OutOfBoundsError", "GameOfLife", "GLIDER_LAYOUT", "Pattern", "PatternLibrary"]
