"""Tests for the CLI frontend."""

import argparse
from io import StringIO
from unittest.mock import Mock, patch

import pytest
from lifegrid.core.grid import LifeGrid, OutOfBoundsError
from lifegrid.frontends.cli import (
    CLIGameOfLife,
    create_parser,
    main,
    render_grid,
    validate_args,
)


def _frames(text):
    assert text.endswith("\n\n")
    return text[:-2].split("\n\n")


class TestRenderGrid:
    """Test cases for text rendering."""

    def test_default_symbols(self):
        """Test rendering with 1/0 separated by spaces."""
        grid = LifeGrid(2, 3)
        grid.set_cell(0, 1, True)
        grid.set_cell(1, 2, True)

        assert render_grid(grid) == "0 1 0\n0 0 1"

    def test_custom_symbols(self):
        """Test rendering with custom symbols and no separator."""
        grid = LifeGrid(2, 2)
        grid.set_cell(1, 0, True)

        assert render_grid(grid, alive="#", dead=".", separator="") == "..\n#."


class TestCLIGameOfLife:
    """Test cases for the CLI driver."""

    def test_initialization(self):
        """Test CLI initialization."""
        cli = CLIGameOfLife()
        assert cli.pattern_library is not None
        assert "Glider" in cli.pattern_library.list_patterns()

    def test_run_animation_frames(self):
        """Test that the seed and every generation are printed once."""
        output = StringIO()
        sleep = Mock()
        cli = CLIGameOfLife(output=output, sleep=sleep)

        game, elapsed = cli.run_animation(rows=10, cols=10, generations=4, delay=0.05)

        frames = _frames(output.getvalue())
        assert len(frames) == 5
        assert frames[0].splitlines()[0] == "0 1 0 0 0 0 0 0 0 0"
        assert frames[0].splitlines()[2] == "1 1 1 0 0 0 0 0 0 0"
        # Glider has moved one cell down and right
        assert frames[4].splitlines()[1] == "0 0 1 0 0 0 0 0 0 0"
        assert frames[4].splitlines()[3] == "0 1 1 1 0 0 0 0 0 0"
        assert all(len(frame.splitlines()) == 10 for frame in frames)

        assert game.generation == 4
        assert game.population_history == [5, 5, 5, 5, 5]
        assert not game.cycle_detected
        assert elapsed >= 0
        assert sleep.call_count == 4
        sleep.assert_called_with(0.05)

    def test_run_animation_no_delay(self):
        """Test that a zero delay never sleeps."""
        sleep = Mock()
        cli = CLIGameOfLife(output=StringIO(), sleep=sleep)

        cli.run_animation(generations=3, delay=0)

        sleep.assert_not_called()

    def test_run_animation_without_pattern(self):
        """Test that no pattern leaves an all-dead grid."""
        output = StringIO()
        cli = CLIGameOfLife(output=output, sleep=Mock())

        game, _ = cli.run_animation(rows=3, cols=4, generations=2, pattern=None, alive_char="#", dead_char=".")

        assert game.population == 0
        assert _frames(output.getvalue()) == ["....\n....\n...."] * 3

    def test_run_animation_unknown_pattern(self):
        """Test that an unknown pattern raises KeyError."""
        cli = CLIGameOfLife(output=StringIO(), sleep=Mock())

        with pytest.raises(KeyError):
            cli.run_animation(pattern="NonExistentPattern")

    def test_run_animation_pattern_too_big(self):
        """Test that a pattern larger than the grid raises."""
        cli = CLIGameOfLife(output=StringIO(), sleep=Mock())

        with pytest.raises(OutOfBoundsError):
            cli.run_animation(rows=3, cols=3, pattern="Glider")

    @patch("sys.stderr", new_callable=StringIO)
    def test_run_animation_verbose(self, mock_stderr):
        """Test that progress goes to stderr, not the frame stream."""
        output = StringIO()
        cli = CLIGameOfLife(output=output, sleep=Mock())

        cli.run_animation(generations=1, delay=0, verbose=True)

        assert "Initializing 10x10 grid" in mock_stderr.getvalue()
        assert "Seeding pattern 'Glider'" in mock_stderr.getvalue()
        assert "Initializing" not in output.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_list_patterns(self, mock_stdout):
        """Test pattern listing."""
        CLIGameOfLife().list_patterns()

        output = mock_stdout.getvalue()
        assert "Available patterns:" in output
        assert "Glider: 4x3, 5 cells" in output
        assert "Still Life:" in output
        assert "Oscillators:" in output


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_defaults(self):
        """Test default values match the reference animation."""
        args = create_parser().parse_args([])

        assert args.rows == 10
        assert args.cols == 10
        assert args.generations == 100
        assert args.delay == 0.05
        assert args.pattern == "Glider"
        assert args.pattern_row == 0
        assert args.pattern_col == 0
        assert args.alive_char == "1"
        assert args.dead_char == "0"
        assert args.stats is False
        assert args.verbose is False

    def test_parse_short_args(self):
        """Test parsing short argument forms."""
        args = create_parser().parse_args(["-R", "7", "-C", "9", "-n", "20", "-d", "0", "-v"])

        assert args.rows == 7
        assert args.cols == 9
        assert args.generations == 20
        assert args.delay == 0.0
        assert args.verbose is True

    def test_parse_pattern_args(self):
        """Test parsing pattern-related arguments."""
        args = create_parser().parse_args(["--pattern", "Blinker", "--pattern-row", "3", "--pattern-col", "2"])

        assert args.pattern == "Blinker"
        assert args.pattern_row == 3
        assert args.pattern_col == 2


class TestValidation:
    """Test argument validation."""

    def _args(self, **overrides):
        values = dict(
            rows=10,
            cols=10,
            generations=100,
            delay=0.05,
            pattern_row=0,
            pattern_col=0,
            alive_char="1",
            dead_char="0",
        )
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_valid(self):
        """Test validation with valid arguments."""
        assert validate_args(self._args()) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_invalid_collects_all_errors(self, mock_stdout):
        """Test that every problem is reported."""
        args = self._args(rows=0, cols=-1, generations=-5, delay=-1.0, pattern_row=-1)

        assert validate_args(args) is False

        output = mock_stdout.getvalue()
        assert "Error: Invalid arguments:" in output
        assert "Rows must be positive" in output
        assert "Columns must be positive" in output
        assert "Generations must be non-negative" in output
        assert "Delay must be non-negative" in output
        assert "Pattern row must be non-negative" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_identical_symbols(self, mock_stdout):
        """Test that alive and dead symbols must be distinguishable."""
        assert validate_args(self._args(alive_char="x", dead_char="x")) is False
        assert "must differ" in mock_stdout.getvalue()


class TestMain:
    """Test the console entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_runs(self, mock_stdout):
        """Test a short run prints the expected frames."""
        assert main(["-n", "2", "-d", "0"]) == 0
        assert len(_frames(mock_stdout.getvalue())) == 3

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_stats(self, mock_stdout):
        """Test the statistics summary."""
        assert main(["-n", "1", "-d", "0", "--stats", "--pattern", "Block", "--pattern-row", "4", "--pattern-col", "4"]) == 0

        output = mock_stdout.getvalue()
        assert "Generations: 1" in output
        assert "Final population: 4" in output
        assert "Cycle: length 1 from generation 0" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_list_patterns(self, mock_stdout):
        """Test --list-patterns exits without animating."""
        assert main(["--list-patterns"]) == 0
        assert "Available patterns:" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_unknown_pattern(self, mock_stdout):
        """Test an unknown pattern name."""
        assert main(["--pattern", "Nope", "-d", "0"]) == 1
        assert "Error: Pattern 'Nope' not found" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_pattern_out_of_bounds(self, mock_stdout):
        """Test a seed that doesn't fit the grid."""
        assert main(["-R", "3", "-C", "3", "-d", "0"]) == 1
        assert "does not fit" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_invalid_args(self, mock_stdout):
        """Test invalid arguments exit with an error."""
        assert main(["--rows", "0"]) == 1
        assert "Rows must be positive" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_interrupted(self, mock_stdout):
        """Test Ctrl-C during the animation."""
        with patch.object(CLIGameOfLife, "run_animation", side_effect=KeyboardInterrupt):
            assert main(["-d", "0"]) == 1
        assert "interrupted by user" in mock_stdout.getvalue()
