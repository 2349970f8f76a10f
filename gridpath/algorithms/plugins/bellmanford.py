from __future__ import annotations

import logging
from math import inf

from ...config import BELLMAN_FORD_MAX_PASSES
from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="bellmanford",
    name="Bellman-Ford",
    description="Relaxes every edge repeatedly. Slower than Dijkstra but handles arbitrary edge costs.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    for node in grid:
        node.distance = inf

    came_from: CameFrom = {start.coord: None}
    start.distance = 0

    # Cells are recorded the first time their distance drops, not when finalized.
    visited_out = [start]
    recorded = {start.coord}

    nodes = [n for n in grid if not n.is_wall]
    max_passes = min(len(nodes) - 1, BELLMAN_FORD_MAX_PASSES)

    passes = 0
    for passes in range(1, max_passes + 1):
        relaxed = False
        for node in nodes:
            if node.distance == inf:
                continue
            for nxt in neighbors(grid, node):
                if nxt.is_wall:
                    continue
                nd = node.distance + 1
                if nd < nxt.distance:
                    nxt.distance = nd
                    came_from[nxt.coord] = node.coord
                    relaxed = True
                    if nxt.coord not in recorded:
                        recorded.add(nxt.coord)
                        visited_out.append(nxt)
        if not relaxed:
            break
    else:
        if max_passes == BELLMAN_FORD_MAX_PASSES:
            logger.debug("bellmanford stopped at the %d pass cap", BELLMAN_FORD_MAX_PASSES)

    for node in visited_out:
        node.is_visited = True

    if end.distance == inf:
        logger.debug("bellmanford found no path after %d passes", passes)
        return PathfindingResult(visited_out, [])

    path = reconstruct_path(grid, came_from, end)
    logger.debug("bellmanford settled after %d passes, path length %d", passes, len(path))
    return PathfindingResult(visited_out, path)
