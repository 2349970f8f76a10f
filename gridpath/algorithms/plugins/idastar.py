"""
IDA* (Iterative Deepening A*).

Repeated depth-first probes bounded by an f = g + h threshold. Each probe that
fails reports the smallest f that exceeded the bound, which becomes the next
threshold. Cells are recorded for visualization the first time any probe
enters them.
"""

from __future__ import annotations

import logging
from math import inf
from typing import List, Set, Tuple, Union

from ...config import IDA_STAR_MAX_ITERATIONS
from ..types import (
    AlgorithmSpec,
    CameFrom,
    Coord,
    Grid,
    Node,
    PathfindingResult,
    manhattan,
    neighbors,
    reconstruct_path,
)

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="idastar",
    name="IDA* (Iterative Deepening)",
    description="Combines depth-first space efficiency with A* optimality.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    start.distance = 0
    start.heuristic = manhattan(start, end)
    start.total_cost = start.heuristic

    came_from: CameFrom = {start.coord: None}
    visited_out: List[Node] = []
    recorded: Set[Coord] = set()

    threshold: float = start.heuristic
    for iteration in range(1, IDA_STAR_MAX_ITERATIONS + 1):
        found, next_threshold = _probe(grid, start, end, threshold, came_from, visited_out, recorded)
        if found:
            path = reconstruct_path(grid, came_from, end)
            logger.debug("idastar found path at threshold %s (iteration %d)", threshold, iteration)
            return PathfindingResult(visited_out, path)
        if next_threshold == inf:
            logger.debug("idastar exhausted the grid after %d iterations", iteration)
            return PathfindingResult(visited_out, [])
        threshold = next_threshold

    logger.debug("idastar stopped at the %d iteration cap", IDA_STAR_MAX_ITERATIONS)
    return PathfindingResult(visited_out, [])


def _probe(
    grid: Grid,
    start: Node,
    end: Node,
    threshold: float,
    came_from: CameFrom,
    visited_out: List[Node],
    recorded: Set[Coord],
) -> Tuple[bool, float]:
    """One bounded depth-first probe. Returns (found, smallest f over the bound).

    The recursion is unrolled onto an explicit stack; each frame is
    [node, g, remaining neighbors, smallest f seen below this node].
    """
    seen: Set[Coord] = set()
    frames: List[list] = []

    def enter(node: Node, g: float) -> Union[bool, float, None]:
        # True: goal reached. float: leaf result. None: a frame was pushed.
        f = g + manhattan(node, end)
        if f > threshold:
            return f
        if node.coord in seen:
            return inf
        seen.add(node.coord)
        node.is_visited = True
        if node.coord not in recorded:
            recorded.add(node.coord)
            visited_out.append(node)
        if node is end:
            return True
        frames.append([node, g, iter(neighbors(grid, node)), inf])
        return None

    outcome = enter(start, 0)
    if outcome is True:
        return True, threshold
    if outcome is not None:
        return False, outcome

    while frames:
        frame = frames[-1]
        node, g, pending = frame[0], frame[1], frame[2]
        descended = False
        for nxt in pending:
            if nxt.is_wall or nxt.coord in seen:
                continue
            came_from[nxt.coord] = node.coord
            nxt.distance = g + 1
            outcome = enter(nxt, g + 1)
            if outcome is True:
                return True, threshold
            if outcome is None:
                descended = True
                break
            frame[3] = min(frame[3], outcome)
        if descended:
            continue

        frames.pop()
        if not frames:
            return False, frame[3]
        frames[-1][3] = min(frames[-1][3], frame[3])

    return False, inf
