"""
Swarm search.

A*-shaped search whose ranking over-weights the heuristic:

    cost = distance ** SWARM_DISTANCE_EXPONENT + heuristic ** SWARM_HEURISTIC_EXPONENT

The convex exponents make the open set bulge toward the goal, which gives the
"swarming" expansion pattern. The ranking is not admissible, so the returned
path is not guaranteed to be shortest.
"""

from __future__ import annotations

import heapq
import logging
from itertools import count
from math import inf

from ...config import SWARM_DISTANCE_EXPONENT, SWARM_HEURISTIC_EXPONENT
from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, manhattan, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="swarm",
    name="Swarm Algorithm",
    description="Weighted A*/Greedy hybrid. Creates interesting swarm-like patterns.",
)


def swarm_cost(distance: float, heuristic: float) -> float:
    return distance ** SWARM_DISTANCE_EXPONENT + heuristic ** SWARM_HEURISTIC_EXPONENT


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    for node in grid:
        node.distance = inf
        node.heuristic = inf
        node.total_cost = inf
        node.is_visited = False

    start.distance = 0
    start.heuristic = manhattan(start, end)
    start.total_cost = swarm_cost(start.distance, start.heuristic)

    came_from: CameFrom = {start.coord: None}
    closed: set[tuple[int, int]] = set()
    tie = count()
    pq: list[tuple[float, int, Node]] = [(start.total_cost, next(tie), start)]
    visited_out = []

    while pq:
        _f, _seq, cur = heapq.heappop(pq)
        if cur.coord in closed or cur.is_wall:
            continue

        closed.add(cur.coord)
        cur.is_visited = True
        visited_out.append(cur)

        if cur is end:
            path = reconstruct_path(grid, came_from, cur)
            logger.debug("swarm reached end after %d cells, path length %d", len(visited_out), len(path))
            return PathfindingResult(visited_out, path)

        for nxt in neighbors(grid, cur):
            if nxt.coord in closed or nxt.is_wall:
                continue
            ng = cur.distance + 1
            if ng < nxt.distance:
                came_from[nxt.coord] = cur.coord
                nxt.distance = ng
                nxt.heuristic = manhattan(nxt, end)
                nxt.total_cost = swarm_cost(ng, nxt.heuristic)
                heapq.heappush(pq, (nxt.total_cost, next(tie), nxt))

    logger.debug("swarm found no path after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])
