"""
Pytest configuration and shared fixtures.

Grids are described as ASCII layouts ('.' empty, '#' wall, 'S' start,
'E' end) and parsed with gridpath.grid.parse_grid.
"""

from typing import Callable, Tuple

import pytest

from gridpath.algorithms.types import Grid, Node, NodeState
from gridpath.grid import clone_grid, find_node, parse_grid

OPEN_3X3 = """
S..
...
..E
"""

# Wall across row 0 between start and end; the only way round is row 1.
DETOUR_5X5 = """
S###E
.....
.....
.....
.....
"""

# Start sealed into the top-left corner.
START_ENCLOSED = """
S#...
##...
.....
....E
"""

# End sealed into the bottom-right corner; start has room to wander.
END_ENCLOSED = """
S....
.....
...##
...#E
"""

MAZE = """
S.#.....
.##.###.
....#...
.####.#.
......#E
"""

Prepared = Tuple[Grid, Node, Node]


def prepare(layout: str) -> Prepared:
    """Parse a layout and return (clone, start, end) ready for a run."""
    grid = clone_grid(parse_grid(layout))
    start = find_node(grid, NodeState.START)
    end = find_node(grid, NodeState.END)
    assert start is not None and end is not None
    return grid, start, end


@pytest.fixture
def prepared() -> Callable[[str], Prepared]:
    """Return the layout -> (grid, start, end) factory."""
    return prepare


@pytest.fixture
def open_grid() -> Prepared:
    return prepare(OPEN_3X3)


@pytest.fixture
def detour_grid() -> Prepared:
    return prepare(DETOUR_5X5)
