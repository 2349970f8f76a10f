from __future__ import annotations

import logging
from math import inf

from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="dijkstra",
    name="Dijkstra's Algorithm",
    description="Classic shortest path algorithm. Guarantees shortest path.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    for node in grid:
        node.distance = inf
        node.is_visited = False

    came_from: CameFrom = {start.coord: None}
    start.distance = 0

    # Every cell starts unvisited; the closest one is extracted by a full
    # (stable) sort each round, so equal distances keep row-major order.
    unvisited = list(grid)
    visited_out = []

    while unvisited:
        unvisited.sort(key=lambda n: n.distance)
        cur = unvisited.pop(0)

        if cur.is_wall:
            continue
        # Everything left is unreachable.
        if cur.distance == inf:
            break

        cur.is_visited = True
        visited_out.append(cur)

        if cur is end:
            path = reconstruct_path(grid, came_from, cur)
            logger.debug("dijkstra reached end after %d cells, distance %s", len(visited_out), cur.distance)
            return PathfindingResult(visited_out, path)

        for nxt in neighbors(grid, cur):
            if nxt.is_visited or nxt.is_wall:
                continue
            nd = cur.distance + 1
            if nd < nxt.distance:
                nxt.distance = nd
                came_from[nxt.coord] = cur.coord

    logger.debug("dijkstra found no path after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])
