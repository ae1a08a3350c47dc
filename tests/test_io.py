"""Tests for site files and grid rendering."""

import pytest

from percolation_threshold.percolation.errors import InvalidDimension, OutOfRange
from percolation_threshold.percolation.grid import Percolation
from percolation_threshold.percolation.io import (
    parse_sites, read_sites, replay_sites, render_grid
)


class TestParseSites:
    """Tests for site-file parsing."""

    def test_parse(self):
        """Test grid size and coordinate pairs are read in order."""
        n, sites = parse_sites("3\n1 2\n 2 2\n3   2\n")

        assert n == 3
        assert sites == [(1, 2), (2, 2), (3, 2)]

    def test_parse_size_only(self):
        """Test a file holding only the grid size."""
        n, sites = parse_sites("10\n")

        assert n == 10
        assert sites == []

    def test_empty(self):
        """Test that an empty file is rejected."""
        with pytest.raises(ValueError):
            parse_sites("  \n")

    def test_unpaired_coordinate(self):
        """Test that a trailing unpaired integer is rejected."""
        with pytest.raises(ValueError, match="unpaired"):
            parse_sites("3\n1 2\n3\n")

    def test_non_integer(self):
        """Test that non-integer tokens are rejected."""
        with pytest.raises(ValueError, match="non-integer"):
            parse_sites("3\n1 x\n")

    def test_read_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_sites(tmp_path / 'nope.txt')

    def test_read_file(self, tmp_path):
        """Test reading from disk."""
        path = tmp_path / 'input2.txt'
        path.write_text("2\n1 1\n2 1\n")

        assert read_sites(path) == (2, [(1, 1), (2, 1)])


class TestReplaySites:
    """Tests for replaying site sequences."""

    def test_replay_percolates(self):
        """Test replaying a vertical path."""
        perc = replay_sites(3, [(1, 2), (2, 2), (3, 2), (1, 2)])

        assert perc.number_of_open_sites() == 3
        assert perc.percolates()

    def test_replay_bad_size(self):
        """Test that a non-positive grid size propagates InvalidDimension."""
        with pytest.raises(InvalidDimension):
            replay_sites(0, [])

    def test_replay_out_of_range(self):
        """Test that a site outside the grid propagates OutOfRange."""
        with pytest.raises(OutOfRange):
            replay_sites(2, [(3, 1)])


class TestRenderGrid:
    """Tests for text rendering."""

    def test_render(self):
        """Test closed, open and full markers, including the backwash case."""
        perc = Percolation(3)
        for site in [(1, 1), (2, 1), (3, 1), (3, 3)]:
            perc.open(*site)

        assert render_grid(perc) == "~##\n~##\n~#."

    def test_render_closed(self):
        """Test a fresh grid renders fully closed."""
        assert render_grid(Percolation(2)) == "##\n##"
