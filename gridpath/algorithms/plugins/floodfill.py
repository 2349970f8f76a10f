from __future__ import annotations

import logging
from math import inf
from typing import List

from ..types import AlgorithmSpec, CameFrom, Grid, Node, PathfindingResult, neighbors, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="floodfill",
    name="Flood Fill",
    description="Wavefront expansion. Floods outward like water filling a container.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    for node in grid:
        node.distance = inf

    came_from: CameFrom = {start.coord: None}
    start.distance = 0

    wave: List[Node] = [start]
    visited_out: List[Node] = []
    waves = 0

    while wave:
        waves += 1
        next_wave: List[Node] = []
        for cur in wave:
            if cur.is_wall:
                continue
            cur.is_visited = True
            visited_out.append(cur)

            if cur is end:
                path = reconstruct_path(grid, came_from, cur)
                logger.debug("floodfill reached end in wave %d, path length %d", waves, len(path))
                return PathfindingResult(visited_out, path)

            for nxt in neighbors(grid, cur):
                if nxt.coord in came_from or nxt.is_wall:
                    continue
                came_from[nxt.coord] = cur.coord
                nxt.distance = cur.distance + 1
                next_wave.append(nxt)
        wave = next_wave

    logger.debug("floodfill drained after %d waves without reaching end", waves)
    return PathfindingResult(visited_out, [])
