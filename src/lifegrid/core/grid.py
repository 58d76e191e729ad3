"""Double-buffered grid for Conway's Game of Life."""

from typing import List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


# Moore neighbourhood: every (dr, dc) in {-1, 0, 1}^2 except (0, 0)
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class OutOfBoundsError(ValueError):
    """Raised when a seed pattern does not fit inside the grid."""


class LifeGrid:
    """A fixed-size bounded grid that evolves under the Game of Life rule.

    Cells live in a ``(rows, cols)`` boolean numpy array indexed as
    ``[row, col]``. A second array of the same shape is used as a scratch
    buffer while the next generation is computed, so the array returned by
    :meth:`get_grid` only ever holds a completed generation.

    The grid does not wrap: positions outside ``[0, rows) x [0, cols)`` are
    permanently dead.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize an all-dead grid.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self._rows = rows
        self._cols = cols
        self._current = np.zeros((rows, cols), dtype=bool)
        self._scratch = np.zeros((rows, cols), dtype=bool)

        # Reused for every neighbour count
        self._torch_input = torch.zeros(1, 1, rows, cols, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._current))

    def get_grid(self) -> np.ndarray:
        """Return the backing array of the current generation.

        The array is live: writes through it change the grid directly and
        bypass the transition rule. It keeps referring to the current
        generation after every :meth:`advance_generation` call.
        """
        return self._current

    def set_grid(self, pattern, row: int = 0, col: int = 0) -> None:
        """Copy a rectangular boolean pattern onto the grid.

        The pattern's top-left cell lands on ``(row, col)``. Cells outside the
        pattern's extent keep their existing state. Nothing is written unless
        the whole pattern fits.

        Args:
            pattern: 2D array-like of booleans (nested lists, ndarray or Pattern)
            row: Row of the pattern's top-left corner
            col: Column of the pattern's top-left corner

        Raises:
            ValueError: If the pattern is not a rectangular 2D layout
            OutOfBoundsError: If the pattern extends past the grid edges
        """
        try:
            layout = np.asarray(pattern, dtype=bool)
        except ValueError as e:
            raise ValueError(f"Invalid pattern: {e}") from e

        if layout.ndim != 2:
            raise ValueError(f"Pattern must be two-dimensional, got {layout.ndim} dimension(s)")

        height, width = layout.shape
        if row < 0 or col < 0 or row + height > self._rows or col + width > self._cols:
            raise OutOfBoundsError(
                f"Pattern {height}x{width} at ({row}, {col}) does not fit in grid {self._rows}x{self._cols}"
            )

        self._current[row : row + height, col : col + width] = layout

    def advance_generation(self) -> None:
        """Replace the current generation with its successor.

        Live cells with 2 or 3 live neighbours survive, dead cells with
        exactly 3 become alive, everything else is dead.
        """
        neighbor_counts = self.count_all_neighbors()
        alive = self._current

        np.logical_or(
            neighbor_counts == 3,
            alive & (neighbor_counts == 2),
            out=self._scratch,
        )

        self._current[:] = self._scratch

    def count_all_neighbors(self) -> np.ndarray:
        """Count live neighbours of every cell.

        Zero padding stands in for the dead cells surrounding the grid.

        Returns:
            (rows, cols) int8 array of neighbour counts (0-8)
        """
        self._torch_input[0, 0] = torch.from_numpy(self._current.astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().round().astype(np.int8)

    def count_neighbors(self, row: int, col: int) -> int:
        """Count live neighbours of a single cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living in-bounds neighbours (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)

        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < self._rows and 0 <= c < self._cols and self._current[r, c]:
                count += 1

        return count

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._current[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        self._current[row, col] = alive

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._current.fill(False)

    def live_cells(self) -> List[Tuple[int, int]]:
        """Get (row, col) coordinates of living cells in row-major order."""
        rows, cols = np.nonzero(self._current)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        rows, cols = np.nonzero(self._current)
        if len(rows) == 0:
            return None

        return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))

    def to_list(self) -> List[List[bool]]:
        """Convert the current generation to nested lists of booleans."""
        return self._current.tolist()

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same generation."""
        if not isinstance(other, LifeGrid):
            return False
        return self.shape == other.shape and np.array_equal(self._current, other._current)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._current)
