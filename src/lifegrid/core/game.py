"""Generation bookkeeping on top of a LifeGrid."""

from typing import Any, Deque, Dict, List, Tuple
from collections import deque

from .grid import LifeGrid


class GameOfLife:
    """Drives a :class:`LifeGrid` and keeps track of what happened.

    Tracks the generation number, a bounded population history and
    repeated grid states, which lets a run stop early once the pattern
    dies out or settles into a cycle.
    """

    def __init__(self, grid: LifeGrid, history_size: int = 100, state_window: int = 1000) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The grid to evolve
            history_size: Number of population samples to keep
            state_window: Number of distinct past states kept for cycle
                detection; cycles longer than this go unnoticed
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=history_size)
        self._state_window = state_window
        self._state_history: Deque[bytes] = deque()
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._population_history.append(self.population)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> List[int]:
        """Most recent population counts, oldest first."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._record_state()
        self.grid.advance_generation()
        self._generation += 1
        self._population_history.append(self.population)
        # A state seen before means the next step repeats history
        if not self._cycle_detected:
            self._check_for_cycle()

    def _record_state(self) -> None:
        state = self.grid.get_grid().tobytes()
        if state in self._seen_states:
            return

        self._seen_states[state] = self._generation
        self._state_history.append(state)

        # Forget the oldest state once the window is full
        if len(self._state_history) > self._state_window:
            del self._seen_states[self._state_history.popleft()]

    def _check_for_cycle(self) -> None:
        state = self.grid.get_grid().tobytes()
        first_seen = self._seen_states.get(state)
        if first_seen is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_seen
            self._cycle_start_generation = first_seen

    def clear_cycle_detection(self) -> None:
        """Forget recorded states while keeping generation and population history.

        Call this after editing the grid by hand between steps, since cycle
        detection would otherwise compare against states recorded before
        the edit.
        """
        self._state_history.clear()
        self._seen_states.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the counters, optionally clearing the grid as well."""
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history.clear()
        self.clear_cycle_detection()

        self._population_history.append(self.population)

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it dies out, cycles or hits the limit.

        Returns:
            Tuple of (final_generation, reason) where reason is one of
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self.population == 0:
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def get_statistics(self) -> Dict[str, Any]:
        """Get a summary of the simulation so far."""
        rows, cols = self.grid.shape
        bbox = self.grid.get_bounding_box()

        stats: Dict[str, Any] = {
            "generation": self._generation,
            "population": self.population,
            "population_density": self.population / (rows * cols),
            "population_history": self.population_history,
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "grid_size": (rows, cols),
            "bounding_box": bbox,
        }

        if bbox:
            stats["bounding_box_size"] = (bbox[2] - bbox[0] + 1, bbox[3] - bbox[1] + 1)
        else:
            stats["bounding_box_size"] = (0, 0)

        return stats
