from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import hypot, inf
from typing import Dict, Iterator, List, Optional, Tuple

Coord = Tuple[int, int]  # (row, col)

# Parent pointers live outside the cells so cloned grids never alias each other.
CameFrom = Dict[Coord, Optional[Coord]]


class NodeState(str, Enum):
    EMPTY = "empty"
    START = "start"
    END = "end"
    WALL = "wall"
    VISITED = "visited"
    PATH = "path"


@dataclass(frozen=True)
class AlgorithmSpec:
    """Metadata for an algorithm plugin."""

    id: str
    name: str
    description: str = ""


@dataclass(eq=False)
class Node:
    """A single grid cell.

    `row`/`col` never change. Everything below `state` is scratch space that
    algorithms overwrite during a run; clone the grid before every run.
    """

    row: int
    col: int
    state: NodeState = NodeState.EMPTY
    distance: float = inf
    heuristic: float = 0.0
    total_cost: float = inf
    is_visited: bool = False

    @property
    def coord(self) -> Coord:
        return self.row, self.col

    @property
    def is_wall(self) -> bool:
        return self.state is NodeState.WALL

    def __repr__(self) -> str:
        return f"Node({self.row}, {self.col}, {self.state.value})"


@dataclass
class Grid:
    """A fixed-size rectangular grid, indexed as nodes[row][col].

    Notes
    -----
    - The grid is 4-connected: up, right, down, left.
    - Every step costs 1 (Theta* shortcuts cost their Euclidean length).
    """

    rows: int
    cols: int
    nodes: List[List[Node]] = field(repr=False)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node(self, row: int, col: int) -> Node:
        return self.nodes[row][col]

    def at(self, coord: Coord) -> Node:
        return self.nodes[coord[0]][coord[1]]

    def __iter__(self) -> Iterator[Node]:
        for row in self.nodes:
            yield from row


@dataclass
class PathfindingResult:
    visited_nodes_in_order: List[Node]
    shortest_path: List[Node]

    @property
    def found(self) -> bool:
        return bool(self.shortest_path)


# (d_row, d_col) in up, right, down, left order. Algorithms that do not
# re-sort their frontier inherit their tie-breaking from this order.
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def neighbors(grid: Grid, node: Node) -> List[Node]:
    """Return in-bounds neighbors (up, right, down, left). Walls are included."""
    out: List[Node] = []
    for dr, dc in DIRECTIONS:
        r = node.row + dr
        c = node.col + dc
        if grid.in_bounds(r, c):
            out.append(grid.nodes[r][c])
    return out


def reconstruct_path(grid: Grid, came_from: CameFrom, terminal: Node) -> List[Node]:
    """Walk parent links back from `terminal` and return the path start -> terminal.

    The walk stops at the first cell without a parent, so a broken chain
    yields a path that starts wherever the chain ends.
    """
    out: List[Node] = []
    cur: Optional[Coord] = terminal.coord
    while cur is not None:
        out.append(grid.at(cur))
        cur = came_from.get(cur)
    out.reverse()
    return out


def manhattan(a: Node, b: Node) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def euclidean(a: Node, b: Node) -> float:
    return hypot(a.row - b.row, a.col - b.col)


def path_cost(path: List[Node]) -> float:
    if len(path) < 2:
        return 0.0 if len(path) == 1 else inf
    return sum(euclidean(a, b) for a, b in zip(path, path[1:]))
