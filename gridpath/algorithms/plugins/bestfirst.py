from __future__ import annotations

import heapq
import logging
from itertools import count

from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, euclidean, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="bestfirst",
    name="Best-First Search",
    description="Pure heuristic search. Expands most promising nodes first.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    start.distance = 0
    start.heuristic = euclidean(start, end)
    start.total_cost = start.heuristic

    came_from: CameFrom = {start.coord: None}
    closed: set[tuple[int, int]] = set()
    tie = count()

    # Ranked by straight-line distance to the goal, then by distance travelled.
    pq: list[tuple[float, float, int, Node]] = [(start.heuristic, 0, next(tie), start)]
    visited_out = []

    while pq:
        _h, _g, _seq, cur = heapq.heappop(pq)
        if cur.coord in closed:
            continue
        closed.add(cur.coord)
        if cur.is_wall:
            continue

        cur.is_visited = True
        visited_out.append(cur)

        if cur is end:
            path = reconstruct_path(grid, came_from, cur)
            logger.debug("bestfirst reached end after %d cells, path length %d", len(visited_out), len(path))
            return PathfindingResult(visited_out, path)

        for nxt in neighbors(grid, cur):
            if nxt.coord in closed or nxt.is_wall:
                continue
            ng = cur.distance + 1
            if ng < nxt.distance:
                came_from[nxt.coord] = cur.coord
                nxt.distance = ng
                nxt.heuristic = euclidean(nxt, end)
                nxt.total_cost = nxt.heuristic
                heapq.heappush(pq, (nxt.heuristic, ng, next(tie), nxt))

    logger.debug("bestfirst found no path after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])
