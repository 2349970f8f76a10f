from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="dfs",
    name="Depth-First Search",
    description="Explores as deep as possible first. Does NOT guarantee shortest path.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    came_from: CameFrom = {start.coord: None}
    visited_out: List[Node] = []

    found = _dive(grid, start, end, came_from, visited_out)
    path = reconstruct_path(grid, came_from, end) if found else []
    logger.debug("dfs visited %d cells, path length %d", len(visited_out), len(path))
    return PathfindingResult(visited_out, path)


def _dive(grid: Grid, start: Node, end: Node, came_from: CameFrom, visited_out: List[Node]) -> bool:
    """Recursive depth-first descent, unrolled onto an explicit stack.

    Each frame holds a cell and the iterator over its remaining neighbors, so
    cells are entered in exactly the order a recursive walk would enter them
    without hitting the interpreter's recursion limit on large grids.
    """
    seen = {start.coord}
    start.is_visited = True
    visited_out.append(start)
    if start is end:
        return True

    stack: List[Tuple[Node, Iterator[Node]]] = [(start, iter(neighbors(grid, start)))]
    while stack:
        cur, pending = stack[-1]
        for nxt in pending:
            if nxt.coord in seen or nxt.is_wall:
                continue
            came_from[nxt.coord] = cur.coord
            seen.add(nxt.coord)
            nxt.is_visited = True
            visited_out.append(nxt)
            if nxt is end:
                return True
            stack.append((nxt, iter(neighbors(grid, nxt))))
            break
        else:
            stack.pop()
    return False
