"""Seed patterns for the Game of Life."""

from typing import Dict, List, Optional, Sequence, Tuple
import numpy as np

from .grid import LifeGrid


# Canonical glider, four rows by three columns, heading down and to the right
GLIDER_LAYOUT: Tuple[Tuple[bool, ...], ...] = (
    (False, True, False),
    (False, False, True),
    (True, True, True),
    (False, False, False),
)


class Pattern:
    """A named rectangular boolean layout that can seed a grid."""

    def __init__(self, name: str, layout: Sequence[Sequence[bool]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            layout: Rows of booleans, all the same length
            description: Optional description

        Raises:
            ValueError: If the layout is not rectangular
        """
        cells = np.array(layout, dtype=bool)
        if cells.ndim != 2:
            raise ValueError(f"Pattern '{name}' must be a rectangular 2D layout")

        cells.setflags(write=False)
        self.name = name
        self.description = description
        self._cells = cells

    @classmethod
    def from_cells(
        cls,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        shape: Optional[Tuple[int, int]] = None,
    ) -> "Pattern":
        """Create a pattern from live (row, col) coordinates.

        Args:
            name: Pattern name
            cells: Coordinates of living cells
            description: Optional description
            shape: Explicit (rows, cols); defaults to the tightest fit

        Returns:
            New Pattern instance
        """
        if shape is None:
            if cells:
                shape = (max(r for r, _ in cells) + 1, max(c for _, c in cells) + 1)
            else:
                shape = (0, 0)

        layout = np.zeros(shape, dtype=bool)
        for row, col in cells:
            layout[row, col] = True

        return cls(name, layout, description)

    @property
    def cells(self) -> np.ndarray:
        """Read-only boolean layout."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get pattern dimensions as (rows, cols)."""
        return (int(self._cells.shape[0]), int(self._cells.shape[1]))

    @property
    def population(self) -> int:
        """Number of living cells in the layout."""
        return int(np.count_nonzero(self._cells))

    def apply_to_grid(self, grid: LifeGrid, row: int = 0, col: int = 0) -> None:
        """Write this pattern onto a grid with its top-left cell at (row, col).

        Raises:
            OutOfBoundsError: If the pattern does not fit
        """
        grid.set_grid(self, row, col)

    def __array__(self, dtype=None, copy=None):
        if dtype is not None and np.dtype(dtype) != self._cells.dtype:
            if copy is False:
                raise ValueError(f"Converting pattern '{self.name}' to {np.dtype(dtype)} requires a copy")
            return self._cells.astype(dtype)
        return self._cells.copy() if copy else self._cells

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {self.shape[0]}x{self.shape[1]}, population={self.population})"


class PatternLibrary:
    """In-memory collection of named patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern.from_cells("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern.from_cells(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern.from_cells("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern.from_cells(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern.from_cells(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(Pattern("Glider", GLIDER_LAYOUT, "Smallest spaceship, period-4"))

        self.add_pattern(
            Pattern.from_cells(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern.from_cells(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, ignoring case.

        Returns:
            Pattern instance or None if not found
        """
        if name in self._patterns:
            return self._patterns[name]

        wanted = name.lower()
        for pattern_name, pattern in self._patterns.items():
            if pattern_name.lower() == wanted:
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino"],
            "Custom": [],
        }

        builtin = {name for names in categories.values() for name in names}
        for name in self._patterns:
            if name not in builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: names for cat, names in categories.items() if names}
