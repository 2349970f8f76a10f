"""
Theta* (any-angle A*).

What it does
------------
- Runs an A*-style search over the 4-connected grid with a Manhattan heuristic.
- Before relaxing neighbor s2 through the current cell s, it checks
  line-of-sight (LOS) from parent(s) to s2. If the straight segment is clear,
  s2 is connected to parent(s) directly at its Euclidean length, skipping s.
- The returned path is the parent chain, so consecutive cells may be far
  apart; every such hop has a wall-free Bresenham raster.

The result is a shorter, more natural-looking path, but not necessarily the
shortest 4-connected grid path.
"""

from __future__ import annotations

import heapq
import logging
from itertools import count
from typing import List

from ..types import (
    AlgorithmSpec,
    CameFrom,
    Grid,
    Node,
    PathfindingResult,
    euclidean,
    manhattan,
    neighbors,
    reconstruct_path,
)

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="thetastar",
    name="Theta*",
    description="Any-angle pathfinding. Produces shorter, more realistic paths.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    start.distance = 0
    start.heuristic = manhattan(start, end)
    start.total_cost = start.heuristic

    came_from: CameFrom = {start.coord: None}
    closed: set[tuple[int, int]] = set()
    tie = count()

    # priority queue: (f, insertion, node)
    open_heap: list[tuple[float, int, Node]] = [(start.total_cost, next(tie), start)]
    visited_out: List[Node] = []

    while open_heap:
        _f, _seq, s = heapq.heappop(open_heap)
        if s.coord in closed:
            continue
        closed.add(s.coord)
        if s.is_wall:
            continue

        s.is_visited = True
        visited_out.append(s)

        if s is end:
            path = reconstruct_path(grid, came_from, s)
            logger.debug("thetastar reached end after %d cells, %d waypoints", len(visited_out), len(path))
            return PathfindingResult(visited_out, path)

        ps_coord = came_from.get(s.coord)
        ps = grid.at(ps_coord) if ps_coord is not None else None

        for s2 in neighbors(grid, s):
            if s2.coord in closed or s2.is_wall:
                continue

            # Rewire through parent(s) when it can see s2, else take the grid step.
            if ps is not None and line_of_sight(grid, ps, s2):
                parent, tentative = ps, ps.distance + euclidean(ps, s2)
            else:
                parent, tentative = s, s.distance + 1

            if tentative < s2.distance:
                came_from[s2.coord] = parent.coord
                s2.distance = tentative
                s2.heuristic = manhattan(s2, end)
                s2.total_cost = tentative + s2.heuristic
                heapq.heappush(open_heap, (s2.total_cost, next(tie), s2))

    logger.debug("thetastar found no path after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])


def bresenham_cells(a: Node, b: Node) -> List[tuple[int, int]]:
    """
    Enumerate the (row, col) cells rasterized by the segment from a to b,
    using an integer Bresenham traversal. Both endpoints are included.
    """
    x0, y0 = a.col, a.row
    x1, y1 = b.col, b.row

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)

    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1

    err = dx - dy

    cells: List[tuple[int, int]] = []
    x, y = x0, y0
    while True:
        cells.append((y, x))
        if x == x1 and y == y1:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy

    return cells


def line_of_sight(grid: Grid, a: Node, b: Node) -> bool:
    """LOS exists iff every rasterized cell is in bounds and not a wall."""
    for row, col in bresenham_cells(a, b):
        if not grid.in_bounds(row, col) or grid.nodes[row][col].is_wall:
            return False
    return True
