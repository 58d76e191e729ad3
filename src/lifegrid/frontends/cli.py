"""Command-line interface: prints successive generations as text."""

import argparse
import sys
import time
from typing import Callable, Optional, TextIO, Tuple

from ..core.grid import LifeGrid, OutOfBoundsError
from ..core.game import GameOfLife
from ..core.patterns import Pattern, PatternLibrary


def render_grid(grid: LifeGrid, alive: str = "1", dead: str = "0", separator: str = " ") -> str:
    """Render a grid as text, one line per row.

    Args:
        grid: Grid to render
        alive: Symbol for living cells
        dead: Symbol for dead cells
        separator: String placed between cells of a row

    Returns:
        Rendered rows joined by newlines
    """
    return "\n".join(separator.join(alive if cell else dead for cell in row) for row in grid.get_grid())


class CLIGameOfLife:
    """Command-line driver that animates a Game of Life grid."""

    def __init__(self, output: Optional[TextIO] = None, sleep: Callable[[float], None] = time.sleep) -> None:
        """Initialize CLI interface.

        Args:
            output: Stream frames are written to (defaults to stdout at call time)
            sleep: Function used to pause between frames
        """
        self.pattern_library = PatternLibrary()
        self._output = output
        self._sleep = sleep

    @property
    def output(self) -> TextIO:
        """Stream frames are written to."""
        return self._output if self._output is not None else sys.stdout

    def print_frame(self, grid: LifeGrid, alive: str = "1", dead: str = "0") -> None:
        """Write one generation followed by a blank line."""
        self.output.write(render_grid(grid, alive, dead) + "\n\n")
        self.output.flush()

    def resolve_pattern(self, name: str) -> Pattern:
        """Look up a seed pattern by name.

        Raises:
            KeyError: If no pattern has that name
        """
        pattern = self.pattern_library.get_pattern(name)
        if pattern is None:
            raise KeyError(name)
        return pattern

    def run_animation(
        self,
        rows: int = 10,
        cols: int = 10,
        generations: int = 100,
        delay: float = 0.05,
        pattern: Optional[str] = "Glider",
        pattern_row: int = 0,
        pattern_col: int = 0,
        alive_char: str = "1",
        dead_char: str = "0",
        verbose: bool = False,
    ) -> Tuple[GameOfLife, float]:
        """Seed a grid and print it for a fixed number of generations.

        The seeded grid is printed first, then each of ``generations``
        successors, pausing ``delay`` seconds after every advance.

        Returns:
            Tuple of (game, elapsed_seconds)

        Raises:
            KeyError: If the pattern name is unknown
            OutOfBoundsError: If the pattern does not fit the grid
        """
        grid = LifeGrid(rows, cols)

        if verbose:
            print(f"Initializing {rows}x{cols} grid", file=sys.stderr)

        if pattern:
            seed = self.resolve_pattern(pattern)
            if verbose:
                print(f"Seeding pattern '{seed.name}' at ({pattern_row}, {pattern_col})", file=sys.stderr)
            seed.apply_to_grid(grid, pattern_row, pattern_col)

        # Created after seeding so generation 0 is the seeded grid
        game = GameOfLife(grid)

        self.print_frame(grid, alive_char, dead_char)

        start_time = time.time()
        for _ in range(generations):
            game.step()
            self.print_frame(grid, alive_char, dead_char)
            if delay > 0:
                self._sleep(delay)

        elapsed = time.time() - start_time

        if verbose:
            print(f"Ran {game.generation} generations in {elapsed:.2f}s", file=sys.stderr)

        return game, elapsed

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, names in categories.items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                if pattern:
                    rows, cols = pattern.shape
                    print(f"  {name}: {rows}x{cols}, {pattern.population} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Print successive Game of Life generations to the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Glider on a 10x10 grid, 100 generations, 50 ms apart
  lifegrid

  # Blinker in the middle of a 7x7 grid, drawn with # and .
  lifegrid -R 7 -C 7 --pattern Blinker --pattern-row 3 --pattern-col 2 --alive-char '#' --dead-char .

  # As fast as possible, with a summary at the end
  lifegrid -n 500 -d 0 --stats

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-R", "--rows", type=int, default=10, help="Grid rows (default: 10)")

    parser.add_argument("-C", "--cols", type=int, default=10, help="Grid columns (default: 10)")

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        default="Glider",
        help="Seed pattern name (default: Glider)",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        default=0,
        help="Row of the pattern's top-left cell (default: 0)",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        default=0,
        help="Column of the pattern's top-left cell (default: 0)",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=100,
        help="Number of generations to advance (default: 100)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.05,
        help="Seconds to pause between generations (default: 0.05)",
    )

    # Output configuration
    parser.add_argument("--alive-char", type=str, default="1", help="Symbol for living cells (default: 1)")

    parser.add_argument("--dead-char", type=str, default="0", help="Symbol for dead cells (default: 0)")

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print simulation statistics after the run",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress information to stderr",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.cols <= 0:
        errors.append("Columns must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_row < 0:
        errors.append("Pattern row must be non-negative")

    if args.pattern_col < 0:
        errors.append("Pattern column must be non-negative")

    if not args.alive_char or not args.dead_char:
        errors.append("Cell symbols must not be empty")
    elif args.alive_char == args.dead_char:
        errors.append("Alive and dead symbols must differ")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_statistics(stats: dict, elapsed: float) -> None:
    """Print a short summary of a finished run."""
    print(f"Generations: {stats['generation']}")
    print(f"Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
    print(f"Final population: {stats['population']} ({stats['population_density']:.2%})")
    if stats["cycle_detected"]:
        print(f"Cycle: length {stats['cycle_length']} from generation {stats['cycle_start_generation']}")
    print(f"Duration: {elapsed:.3f} seconds")


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        game, elapsed = cli.run_animation(
            rows=args.rows,
            cols=args.cols,
            generations=args.generations,
            delay=args.delay,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            alive_char=args.alive_char,
            dead_char=args.dead_char,
            verbose=args.verbose,
        )
    except KeyError:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1
    except OutOfBoundsError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    if args.stats:
        print_statistics(game.get_statistics(), elapsed)

    return 0


if __name__ == "__main__":
    sys.exit(main())
