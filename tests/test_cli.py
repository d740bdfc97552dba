"""Tests for the command-line driver."""

import pytest
from infected_life.cli import build_parser, main


def run(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out, captured.err


class TestCliRun:
    """Test successful runs."""

    def test_single_cell_two_generations(self, capsys):
        """Prints the seed then one line per generation."""
        status, out, _ = run(capsys, "--width", "3", "--height", "3",
                             "--infect-after", "1", "--max-generations", "2",
                             "--seed", "0 0 0 0 1 0 0 0 0")
        assert status == 0
        assert out == "000010000\n000000000\n000000000\n"

    def test_row_of_three(self, capsys):
        """A 3x1 row shrinks to its middle cell, then dies."""
        status, out, _ = run(capsys, "--width", "3", "--height", "1",
                             "--max-generations", "2", "--seed", "1 1 1")
        assert status == 0
        assert out.splitlines() == ["111", "010", "000"]

    def test_defaults(self, capsys):
        """Default 3x3 grid with a single generation."""
        status, out, _ = run(capsys, "--seed", "1 1 1 1 1 1 1 1 1")
        assert status == 0
        assert out.splitlines() == ["111111111", "101000101"]

    def test_logs_stay_off_stdout(self, capsys):
        """Debug logging does not leak into the grid output."""
        status, out, _ = run(capsys, "--seed", "0 0 0 0 1 0 0 0 0", "--log-level", "DEBUG")
        assert status == 0
        assert out.splitlines() == ["000010000", "000000000"]


class TestCliErrors:
    """Test rejected configurations."""

    @pytest.mark.parametrize("argv,message", [
        (["--width", "0", "--seed", "1"], "width and height must be at least 1"),
        (["--height", "-1", "--seed", "1"], "width and height must be at least 1"),
        (["--infect-after", "0", "--seed", "1"], "infect-after must be at least 1"),
        (["--max-generations", "0", "--seed", "1"], "max-generations must be at least 1"),
        ([], "seed must be provided"),
        (["--width", "1", "--height", "1", "--seed", "1 0"], "seed has 2 cells"),
    ])
    def test_invalid_configuration(self, capsys, argv, message):
        """Invalid flags print a message and usage, exit status 1."""
        status, out, err = run(capsys, *argv)
        assert status == 1
        assert out == ""
        assert message in err
        assert "usage:" in err

    def test_parser_flags(self):
        """Parser exposes the documented flags."""
        args = build_parser().parse_args(["--infect-after", "4", "--max-generations", "9"])
        assert args.infect_after == 4
        assert args.max_generations == 9
        assert args.width == 3
        assert args.seed == ""
