"""Frontend interfaces for the Game of Life."""

from .cli import CLIGameOfLife, render_grid

__all__ = ["CLIGameOfLife", "render_grid"]
