from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, model_validator

from .algorithms.loader import REGISTRY, get_algorithm, list_algorithms
from .algorithms.types import Grid, NodeState, PathfindingResult, path_cost
from .grid import clone_grid, create_grid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # [row, col] on the wire


class AlgorithmInfo(BaseModel):
    id: str
    name: str
    description: str = ""


class GridLayoutModel(BaseModel):
    rows: int = Field(gt=0)
    cols: int = Field(gt=0)
    start: Cell
    end: Cell
    walls: List[Cell] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_cells(self) -> "GridLayoutModel":
        for label, (r, c) in (("start", self.start), ("end", self.end)):
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(f"{label} {(r, c)} is outside a {self.rows}x{self.cols} grid")
        if tuple(self.start) == tuple(self.end):
            raise ValueError("start and end must be different cells")
        for r, c in self.walls:
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(f"wall {(r, c)} is outside a {self.rows}x{self.cols} grid")
            if (r, c) in (tuple(self.start), tuple(self.end)):
                raise ValueError(f"wall {(r, c)} covers start or end")
        return self

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridLayoutModel":
        start = end = None
        walls: List[Cell] = []
        for node in grid:
            if node.state is NodeState.START:
                start = node.coord
            elif node.state is NodeState.END:
                end = node.coord
            elif node.is_wall:
                walls.append(node.coord)
        if start is None or end is None:
            raise ValueError("grid needs both a start and an end cell")
        return cls(rows=grid.rows, cols=grid.cols, start=start, end=end, walls=walls)


class RunRequestModel(BaseModel):
    algorithm_id: str
    layout: GridLayoutModel


class RunResponseModel(BaseModel):
    algorithm_id: str
    visited: List[Cell]
    path: List[Cell]
    visited_count: int
    path_length: int
    path_cost: Optional[float] = None
    runtime_ms: float


def algorithms() -> List[AlgorithmInfo]:
    out: List[AlgorithmInfo] = []
    for spec in list_algorithms(REGISTRY):
        out.append(AlgorithmInfo(id=spec.id, name=spec.name, description=spec.description))
    return out


def build_grid(layout: GridLayoutModel) -> Grid:
    grid = create_grid(layout.rows, layout.cols)
    for r, c in layout.walls:
        grid.nodes[r][c].state = NodeState.WALL
    grid.nodes[layout.start[0]][layout.start[1]].state = NodeState.START
    grid.nodes[layout.end[0]][layout.end[1]].state = NodeState.END
    return grid


def _to_response(algorithm_id: str, result: PathfindingResult, runtime_ms: float) -> RunResponseModel:
    path = result.shortest_path
    return RunResponseModel(
        algorithm_id=algorithm_id,
        visited=[n.coord for n in result.visited_nodes_in_order],
        path=[n.coord for n in path],
        visited_count=len(result.visited_nodes_in_order),
        path_length=len(path),
        path_cost=path_cost(path) if path else None,
        runtime_ms=runtime_ms,
    )


def _run_on(algorithm_id: str, layout: GridLayoutModel, grid: Grid) -> RunResponseModel:
    algo = get_algorithm(algorithm_id)

    # Each run gets its own clone; the algorithm overwrites scratch fields.
    work = clone_grid(grid)
    start = work.at(layout.start)
    end = work.at(layout.end)

    t0 = time.perf_counter()
    result = algo.run(work, start, end)
    t1 = time.perf_counter()

    runtime_ms = (t1 - t0) * 1000.0
    logger.info(
        "%s: visited %d cells, path length %d in %.2f ms",
        algorithm_id,
        len(result.visited_nodes_in_order),
        len(result.shortest_path),
        runtime_ms,
    )
    return _to_response(algorithm_id, result, runtime_ms)


def run(req: RunRequestModel) -> RunResponseModel:
    """Run one algorithm on the requested layout.

    Raises UnknownAlgorithm for an unregistered id.
    """
    grid = build_grid(req.layout)
    return _run_on(req.algorithm_id, req.layout, grid)


def compare(layout: GridLayoutModel, algorithm_ids: Optional[Sequence[str]] = None) -> Dict[str, RunResponseModel]:
    """Run several algorithms on the same layout, one clone each."""
    ids = list(algorithm_ids) if algorithm_ids is not None else list(REGISTRY)
    # Fail before doing any work if an id is bad.
    for algorithm_id in ids:
        get_algorithm(algorithm_id)

    grid = build_grid(layout)
    return {algorithm_id: _run_on(algorithm_id, layout, grid) for algorithm_id in ids}
