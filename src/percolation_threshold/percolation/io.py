"""
Site-file reading and text rendering of percolation grids.

A site file holds whitespace-separated integers: the grid size n followed by
1-indexed (row, col) pairs, one pair per site to open, e.g.

    3
    1 2
    2 2
    3 2
"""

from pathlib import Path
from typing import List, Tuple, Union

from .grid import Percolation

CLOSED = '#'
OPEN = '.'
FULL = '~'


def parse_sites(text: str) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Parse site-file contents.

    Returns:
        Tuple of (n, sites) where sites is a list of (row, col) pairs
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("Site file is empty, expected grid size")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as e:
        raise ValueError(f"Site file contains a non-integer token: {e}") from e

    n, coords = values[0], values[1:]
    if len(coords) % 2 != 0:
        raise ValueError(f"Site file has an unpaired coordinate: {coords[-1]}")

    sites = list(zip(coords[0::2], coords[1::2]))
    return n, sites


def read_sites(path: Union[str, Path]) -> Tuple[int, List[Tuple[int, int]]]:
    """Read a site file from disk, see parse_sites()."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Site file not found: {path}")

    with open(path, 'r') as f:
        return parse_sites(f.read())


def replay_sites(n: int, sites) -> Percolation:
    """Open each site in order on a fresh n-by-n grid."""
    perc = Percolation(n)
    for row, col in sites:
        perc.open(row, col)
    return perc


def render_grid(perc: Percolation) -> str:
    """
    Render the grid one line per row.

    '#' marks closed sites, '.' open sites that are not full, '~' full sites.
    """
    open_mask = perc.open_mask()
    full_mask = perc.full_mask()

    lines = []
    for r in range(perc.n):
        chars = []
        for c in range(perc.n):
            if full_mask[r, c]:
                chars.append(FULL)
            elif open_mask[r, c]:
                chars.append(OPEN)
            else:
                chars.append(CLOSED)
        lines.append(''.join(chars))
    return '\n'.join(lines)
