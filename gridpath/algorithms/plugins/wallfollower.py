"""
Wall follower (right-hand rule).

At every step the walker tries, relative to its heading: right, straight,
left, back, and moves into the first passable cell. It starts facing right
and gives up after rows * cols * WALL_FOLLOWER_STEP_FACTOR steps.

Parent links are only lowered (a cell keeps the parent that reached it with
the smallest step count), so if the walker runs out of steps after having
stepped next to the goal, the returned path can come from that parent chain
rather than from a completed walk. Mazes with loops detached from the outer
wall may never reach the goal.
"""

from __future__ import annotations

import logging
from typing import List, Set

from ...config import WALL_FOLLOWER_STEP_FACTOR
from ..types import DIRECTIONS, AlgorithmSpec, CameFrom, Coord, Grid, Node, PathfindingResult, reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="wallfollower",
    name="Wall Follower",
    description="Right-hand rule maze solver. Follows walls to find a path.",
)

# Index into DIRECTIONS (up, right, down, left).
FACING_RIGHT = 1


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    visited_out: List[Node] = []
    seen: Set[Coord] = set()

    # start is the root and is never re-parented (its distance is 0).
    came_from: CameFrom = {start.coord: None}
    start.distance = 0

    cur = start
    facing = FACING_RIGHT
    max_steps = grid.rows * grid.cols * WALL_FOLLOWER_STEP_FACTOR

    for step in range(max_steps):
        if cur.coord not in seen:
            seen.add(cur.coord)
            cur.is_visited = True
            visited_out.append(cur)

        if cur is end:
            path = reconstruct_path(grid, came_from, cur)
            logger.debug("wallfollower reached end after %d steps, path length %d", step, len(path))
            return PathfindingResult(visited_out, path)

        for turn in range(4):
            heading = (facing + 1 - turn) % 4
            dr, dc = DIRECTIONS[heading]
            r, c = cur.row + dr, cur.col + dc
            if not grid.in_bounds(r, c) or grid.nodes[r][c].is_wall:
                continue
            nxt = grid.nodes[r][c]
            if nxt.distance > cur.distance + 1:
                came_from[nxt.coord] = cur.coord
                nxt.distance = cur.distance + 1
            cur = nxt
            facing = heading
            break
        else:
            logger.debug("wallfollower is boxed in at %s", cur.coord)
            break
    else:
        logger.debug("wallfollower stopped at the %d step cap", max_steps)

    if end.coord in came_from:
        return PathfindingResult(visited_out, reconstruct_path(grid, came_from, end))
    return PathfindingResult(visited_out, [])
