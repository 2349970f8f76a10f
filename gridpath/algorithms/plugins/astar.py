from __future__ import annotations

import heapq
import logging
from itertools import count
from math import inf

from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, manhattan, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="astar",
    name="A* Search",
    description="Uses Manhattan heuristic. Fastest for finding shortest path.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    for node in grid:
        node.distance = inf  # g
        node.heuristic = inf  # h
        node.total_cost = inf  # f
        node.is_visited = False

    start.distance = 0
    start.heuristic = manhattan(start, end)
    start.total_cost = start.heuristic

    came_from: CameFrom = {start.coord: None}
    closed: set[tuple[int, int]] = set()
    tie = count()

    # (f, h, insertion, node); ties on f go to the cell closer to the goal.
    pq: list[tuple[float, float, int, Node]] = [(start.total_cost, start.heuristic, next(tie), start)]
    visited_out = []

    while pq:
        _f, _h, _seq, cur = heapq.heappop(pq)
        if cur.coord in closed or cur.is_wall:
            continue

        closed.add(cur.coord)
        cur.is_visited = True
        visited_out.append(cur)

        if cur is end:
            path = reconstruct_path(grid, came_from, cur)
            logger.debug("astar reached end after %d cells, path length %d", len(visited_out), len(path))
            return PathfindingResult(visited_out, path)

        for nxt in neighbors(grid, cur):
            if nxt.coord in closed or nxt.is_wall:
                continue
            ng = cur.distance + 1
            if ng < nxt.distance:
                came_from[nxt.coord] = cur.coord
                nxt.distance = ng
                nxt.heuristic = manhattan(nxt, end)
                nxt.total_cost = ng + nxt.heuristic
                heapq.heappush(pq, (nxt.total_cost, nxt.heuristic, next(tie), nxt))

    logger.debug("astar found no path after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])
