from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from ..types import AlgorithmSpec, CameFrom, Coord, Grid, Node, PathfindingResult, neighbors

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="bidirectional",
    name="Bidirectional BFS",
    description="Searches from both ends simultaneously. Faster for long paths.",
)


def run(grid: Grid, start: Node, end: Node) -> PathfindingResult:
    visited_out: List[Node] = []

    start_q: Deque[Node] = deque([start])
    end_q: Deque[Node] = deque([end])

    # Each side's parent map doubles as its visited set.
    from_start: CameFrom = {start.coord: None}
    from_end: CameFrom = {end.coord: None}

    start.is_visited = True
    end.is_visited = True

    while start_q and end_q:
        meeting = _expand_level(grid, start_q, from_start, from_end, visited_out)
        if meeting is None:
            meeting = _expand_level(grid, end_q, from_end, from_start, visited_out)
        if meeting is not None:
            path = _stitch(grid, meeting, from_start, from_end)
            logger.debug(
                "bidirectional met at %s after %d cells, path length %d", meeting.coord, len(visited_out), len(path)
            )
            return PathfindingResult(visited_out, path)

    logger.debug("bidirectional found no path after %d cells", len(visited_out))
    return PathfindingResult(visited_out, [])


def _expand_level(
    grid: Grid,
    queue: Deque[Node],
    this_side: CameFrom,
    other_side: CameFrom,
    visited_out: List[Node],
) -> Optional[Node]:
    """Expand every cell currently queued on one side.

    Returns the first neighbor already reached by the other side, after
    linking it to this side's parent chain.
    """
    for _ in range(len(queue)):
        cur = queue.popleft()
        if cur.is_wall:
            continue
        visited_out.append(cur)

        for nxt in neighbors(grid, cur):
            if nxt.is_wall:
                continue
            if nxt.coord in other_side:
                this_side[nxt.coord] = cur.coord
                return nxt
            if nxt.coord not in this_side:
                this_side[nxt.coord] = cur.coord
                nxt.is_visited = True
                queue.append(nxt)
    return None


def _stitch(grid: Grid, meeting: Node, from_start: CameFrom, from_end: CameFrom) -> List[Node]:
    head: List[Node] = []
    cur: Optional[Coord] = from_start.get(meeting.coord)
    while cur is not None:
        head.append(grid.at(cur))
        cur = from_start.get(cur)
    head.reverse()

    tail: List[Node] = []
    cur = from_end.get(meeting.coord)
    while cur is not None:
        tail.append(grid.at(cur))
        cur = from_end.get(cur)

    return head + [meeting] + tail
