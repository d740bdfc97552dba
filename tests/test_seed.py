"""Tests for seed decoding and flat rendering."""

import io

import pytest
from infected_life.core.grid import Grid
from infected_life.seed import SeedError, parse_seed, render_grid


class TestParseSeed:
    """Test decoding space-separated seeds."""

    def test_center_cell(self):
        """Single live center cell."""
        grid = parse_seed(3, 3, "0 0 0 0 1 0 0 0 0")
        assert grid.width == 3
        assert grid.height == 3
        assert grid.count_alive() == 1
        assert grid.alive(1, 1) is True

    def test_row_major_mapping(self):
        """Token i maps to (i % width, i // width)."""
        grid = parse_seed(2, 3, "0 1 0 0 1 0")
        assert grid.alive(1, 0) is True
        assert grid.alive(0, 2) is True
        assert grid.count_alive() == 2

    @pytest.mark.parametrize("token", ["0", "x", "11", "", "true"])
    def test_only_one_is_alive(self, token):
        """Anything other than exactly "1" is a dead cell."""
        grid = parse_seed(2, 1, f"1 {token}")
        assert grid.alive(0, 0) is True
        assert grid.alive(1, 0) is False

    def test_short_seed_leaves_rest_dead(self):
        """Missing tokens leave cells dead."""
        grid = parse_seed(3, 3, "1 1")
        assert grid.render() == "110000000"

    def test_long_seed_rejected(self):
        """More tokens than cells raise SeedError."""
        with pytest.raises(SeedError, match="holds 4"):
            parse_seed(2, 2, "1 0 1 0 1")

    def test_parse_then_render(self):
        """Rendering a parsed seed gives the tokens without separators."""
        assert parse_seed(3, 2, "1 0 1 0 1 0").render() == "101010"


class TestRenderGrid:
    """Test line output."""

    def test_writes_one_line(self):
        """Grid is written as one newline-terminated line."""
        grid = Grid(2, 2)
        grid.set(1, 1, True)
        out = io.StringIO()
        render_grid(grid, out)
        assert out.getvalue() == "0001\n"

    def test_defaults_to_stdout(self, capsys):
        """Without a stream the line goes to stdout."""
        render_grid(Grid(3, 1))
        assert capsys.readouterr().out == "000\n"
