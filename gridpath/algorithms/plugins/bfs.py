from __future__ import annotations

import logging
from collections import deque

from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="bfs",
    name="Breadth-First Search",
    description="Explores level by level. Guarantees shortest path in unweighted graphs.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    came_from: CameFrom = {start.coord: None}
    q = deque([start])
    start.is_visited = True

    visited_out = []

    while q:
        cur = q.popleft()
        if cur.is_wall:
            continue
        visited_out.append(cur)

        if cur is end:
            path = reconstruct_path(grid, came_from, cur)
            logger.debug("bfs reached end after %d cells, path length %d", len(visited_out), len(path))
            return PathfindingResult(visited_out, path)

        for nxt in neighbors(grid, cur):
            if nxt.coord in came_from or nxt.is_wall:
                continue
            nxt.is_visited = True
            came_from[nxt.coord] = cur.coord
            q.append(nxt)

    logger.debug("bfs exhausted frontier after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])
