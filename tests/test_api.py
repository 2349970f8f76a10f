"""Tests for the pydantic facade used by the UI layer."""

import pytest
from pydantic import ValidationError

from gridpath import api
from gridpath.algorithms.loader import PLUGIN_MODULES, UnknownAlgorithm
from gridpath.algorithms.types import NodeState
from gridpath.grid import parse_grid, render_grid

from conftest import DETOUR_5X5


@pytest.fixture
def detour_layout() -> api.GridLayoutModel:
    return api.GridLayoutModel(rows=5, cols=5, start=[0, 0], end=[0, 4], walls=[[0, 1], [0, 2], [0, 3]])


class TestAlgorithms:
    """Tests for the selector listing."""

    def test_lists_all_in_registry_order(self) -> None:
        infos = api.algorithms()
        assert [info.id for info in infos] == list(PLUGIN_MODULES)
        assert infos[0].name == "Breadth-First Search"

    def test_serializes(self) -> None:
        dumped = api.algorithms()[3].model_dump()
        assert dumped["id"] == "astar"
        assert set(dumped) == {"id", "name", "description"}


class TestLayout:
    """Tests for GridLayoutModel validation and conversion."""

    def test_build_grid(self, detour_layout) -> None:
        grid = api.build_grid(detour_layout)
        assert render_grid(grid) == render_grid(parse_grid(DETOUR_5X5))

    def test_from_grid_round_trip(self, detour_layout) -> None:
        layout = api.GridLayoutModel.from_grid(parse_grid(DETOUR_5X5))
        assert layout == detour_layout

    def test_from_grid_needs_start_and_end(self) -> None:
        with pytest.raises(ValueError):
            api.GridLayoutModel.from_grid(parse_grid("S.."))

    @pytest.mark.parametrize(
        "fields",
        [
            {"rows": 0, "cols": 3, "start": [0, 0], "end": [0, 1]},
            {"rows": 3, "cols": 3, "start": [0, 0], "end": [3, 0]},
            {"rows": 3, "cols": 3, "start": [1, 1], "end": [1, 1]},
            {"rows": 3, "cols": 3, "start": [0, 0], "end": [2, 2], "walls": [[0, 0]]},
            {"rows": 3, "cols": 3, "start": [0, 0], "end": [2, 2], "walls": [[5, 5]]},
        ],
        ids=["zero_rows", "end_out_of_bounds", "start_is_end", "wall_on_start", "wall_out_of_bounds"],
    )
    def test_invalid_layouts_rejected(self, fields) -> None:
        with pytest.raises(ValidationError):
            api.GridLayoutModel(**fields)


class TestRun:
    """Tests for api.run."""

    def test_run_request(self, detour_layout) -> None:
        req = api.RunRequestModel(algorithm_id="bfs", layout=detour_layout)
        resp = api.run(req)
        assert resp.algorithm_id == "bfs"
        assert resp.path_length == 7
        assert resp.path[0] == (0, 0)
        assert resp.path[-1] == (0, 4)
        assert resp.visited_count == len(resp.visited)
        assert resp.path_cost == pytest.approx(6.0)
        assert resp.runtime_ms >= 0

    def test_run_from_plain_dict(self) -> None:
        req = api.RunRequestModel.model_validate(
            {"algorithm_id": "astar", "layout": {"rows": 3, "cols": 3, "start": [0, 0], "end": [2, 2]}}
        )
        resp = api.run(req)
        assert resp.path_length == 5

    def test_no_path_response(self) -> None:
        layout = api.GridLayoutModel(rows=2, cols=3, start=[0, 0], end=[0, 2], walls=[[0, 1], [1, 1]])
        resp = api.run(api.RunRequestModel(algorithm_id="dijkstra", layout=layout))
        assert resp.path == []
        assert resp.path_length == 0
        assert resp.path_cost is None

    def test_unknown_algorithm(self, detour_layout) -> None:
        with pytest.raises(UnknownAlgorithm):
            api.run(api.RunRequestModel(algorithm_id="teleport", layout=detour_layout))


class TestCompare:
    """Tests for running several algorithms side by side."""

    def test_compare_all(self, detour_layout) -> None:
        results = api.compare(detour_layout)
        assert list(results) == list(PLUGIN_MODULES)
        for algorithm_id in ("bfs", "dijkstra", "astar", "bidirectional", "floodfill", "bellmanford"):
            assert results[algorithm_id].path_length == 7

    def test_compare_subset(self, detour_layout) -> None:
        results = api.compare(detour_layout, ["dfs", "thetastar"])
        assert list(results) == ["dfs", "thetastar"]
        assert results["thetastar"].path[-1] == (0, 4)

    def test_compare_rejects_unknown_before_running(self, detour_layout) -> None:
        with pytest.raises(UnknownAlgorithm):
            api.compare(detour_layout, ["bfs", "teleport"])

    def test_layout_is_not_mutated(self, detour_layout) -> None:
        before = detour_layout.model_dump()
        api.compare(detour_layout)
        assert detour_layout.model_dump() == before
        grid = api.build_grid(detour_layout)
        assert grid.node(0, 0).state is NodeState.START
