from __future__ import annotations

import heapq
import logging
from itertools import count
from math import inf

from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, manhattan, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="greedy",
    name="Greedy Best-First Search",
    description="Follows the Manhattan heuristic only. Fast, but does NOT guarantee shortest path.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    for node in grid:
        node.heuristic = inf
        node.is_visited = False

    start.heuristic = manhattan(start, end)

    # A cell keeps the parent that first discovered it; it is never re-ranked.
    came_from: CameFrom = {start.coord: None}
    closed: set[tuple[int, int]] = set()
    tie = count()
    pq: list[tuple[float, int, Node]] = [(start.heuristic, next(tie), start)]
    visited_out = []

    while pq:
        _h, _seq, cur = heapq.heappop(pq)
        if cur.coord in closed or cur.is_wall:
            continue

        closed.add(cur.coord)
        cur.is_visited = True
        visited_out.append(cur)

        if cur is end:
            path = reconstruct_path(grid, came_from, cur)
            logger.debug("greedy reached end after %d cells, path length %d", len(visited_out), len(path))
            return PathfindingResult(visited_out, path)

        for nxt in neighbors(grid, cur):
            if nxt.coord in came_from or nxt.is_wall:
                continue
            nxt.heuristic = manhattan(nxt, end)
            came_from[nxt.coord] = cur.coord
            heapq.heappush(pq, (nxt.heuristic, next(tie), nxt))

    logger.debug("greedy found no path after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])
