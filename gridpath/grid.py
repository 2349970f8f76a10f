"""
Grid lifecycle helpers.

The lifecycle helpers return a fresh grid instead of mutating the one they
were given, so a displayed grid survives algorithms writing into its clones.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

from .algorithms.types import Grid, Node, NodeState
from .config import CHAR_EMPTY, CHAR_END, CHAR_PATH, CHAR_START, CHAR_VISITED, CHAR_WALL, DEFAULT_COLS, DEFAULT_ROWS

_CHAR_TO_STATE = {
    CHAR_EMPTY: NodeState.EMPTY,
    CHAR_WALL: NodeState.WALL,
    CHAR_START: NodeState.START,
    CHAR_END: NodeState.END,
}
_STATE_TO_CHAR = {
    NodeState.EMPTY: CHAR_EMPTY,
    NodeState.WALL: CHAR_WALL,
    NodeState.START: CHAR_START,
    NodeState.END: CHAR_END,
    NodeState.VISITED: CHAR_VISITED,
    NodeState.PATH: CHAR_PATH,
}

# Display-only markings, dropped by reset and clone.
_TRANSIENT = (NodeState.VISITED, NodeState.PATH)


def create_node(row: int, col: int, state: NodeState = NodeState.EMPTY) -> Node:
    return Node(row=row, col=col, state=state)


def create_grid(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> Grid:
    """Create a rows x cols grid of empty cells."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    nodes = [[create_node(r, c) for c in range(cols)] for r in range(rows)]
    return Grid(rows=rows, cols=cols, nodes=nodes)


def _rebuild(grid: Grid) -> Grid:
    nodes: List[List[Node]] = []
    for row in grid.nodes:
        out_row = []
        for node in row:
            state = node.state
            if state in _TRANSIENT:
                state = NodeState.EMPTY
            out_row.append(create_node(node.row, node.col, state))
        nodes.append(out_row)
    return Grid(rows=grid.rows, cols=grid.cols, nodes=nodes)


def clone_grid(grid: Grid) -> Grid:
    """Copy every cell into a new grid with all scratch fields reset.

    Wall/start/end survive, visited/path markings do not. Call this before
    every algorithm run.
    """
    return _rebuild(grid)


def reset_visualization(grid: Grid) -> Grid:
    """Keep walls, start and end; turn visited/path cells back to empty."""
    return _rebuild(grid)


def clear_walls(grid: Grid) -> Grid:
    """Turn every wall into an empty cell and leave everything else as is."""
    nodes: List[List[Node]] = []
    for row in grid.nodes:
        out_row = []
        for node in row:
            out_row.append(replace(node, state=NodeState.EMPTY if node.is_wall else node.state))
        nodes.append(out_row)
    return Grid(rows=grid.rows, cols=grid.cols, nodes=nodes)


def get_node(grid: Grid, row: int, col: int) -> Optional[Node]:
    if grid.in_bounds(row, col):
        return grid.nodes[row][col]
    return None


def update_node_state(grid: Grid, row: int, col: int, state: NodeState) -> Grid:
    """Return a new grid with one cell's state replaced. Other cells are shared."""
    if not grid.in_bounds(row, col):
        raise IndexError(f"({row}, {col}) is outside a {grid.rows}x{grid.cols} grid")
    nodes = [list(r) for r in grid.nodes]
    nodes[row][col] = replace(grid.nodes[row][col], state=state)
    return Grid(rows=grid.rows, cols=grid.cols, nodes=nodes)


def find_node(grid: Grid, state: NodeState) -> Optional[Node]:
    for node in grid:
        if node.state is state:
            return node
    return None


def parse_grid(text: str) -> Grid:
    """
    Build a grid from an ASCII layout.

    Format:
    - One row per line; blank lines and surrounding whitespace are ignored
    - '.' empty, '#' wall, 'S' start, 'E' end

    Example:
        S.#
        ..#
        ..E

    Raises:
        ValueError: on ragged rows or unknown characters
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise ValueError("grid layout is empty")

    cols = len(lines[0])
    grid = create_grid(len(lines), cols)
    for r, line in enumerate(lines):
        if len(line) != cols:
            raise ValueError(f"row {r} has {len(line)} cells, expected {cols}")
        for c, ch in enumerate(line):
            state = _CHAR_TO_STATE.get(ch)
            if state is None:
                raise ValueError(f"unknown cell {ch!r} at ({r}, {c})")
            grid.nodes[r][c].state = state
    return grid


def render_grid(
    grid: Grid,
    path: Optional[Iterable[Node]] = None,
    visited: Optional[Iterable[Node]] = None,
) -> str:
    """Inverse of parse_grid; overlays visited ('o') and path ('*') cells on empty ones."""
    overlay = {}
    for node in visited or ():
        overlay[node.coord] = CHAR_VISITED
    for node in path or ():
        overlay[node.coord] = CHAR_PATH

    lines = []
    for row in grid.nodes:
        chars = []
        for node in row:
            ch = _STATE_TO_CHAR[node.state]
            if node.state in (NodeState.EMPTY,) + _TRANSIENT:
                ch = overlay.get(node.coord, ch)
            chars.append(ch)
        lines.append("".join(chars))
    return "\n".join(lines)
