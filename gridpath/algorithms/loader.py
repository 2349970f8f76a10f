from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from .types import AlgorithmSpec, Grid, Node, PathfindingResult

logger = logging.getLogger(__name__)

# Display order of the algorithm selector.
PLUGIN_MODULES: Sequence[str] = (
    "bfs",
    "dfs",
    "dijkstra",
    "astar",
    "wallfollower",
    "bidirectional",
    "swarm",
    "thetastar",
    "bellmanford",
    "idastar",
    "bestfirst",
    "floodfill",
    "greedy",
)


class UnknownAlgorithm(KeyError):
    """Raised when dispatching an algorithm id that is not registered."""

    def __init__(self, algorithm_id: str):
        super().__init__(algorithm_id)
        self.algorithm_id = algorithm_id

    def __str__(self) -> str:
        return f"Unknown algorithm: {self.algorithm_id!r}"


@dataclass
class LoadedAlgorithm:
    spec: AlgorithmSpec
    run: Callable[[Grid, Node, Node], PathfindingResult]


def load_plugins(names: Sequence[str] = PLUGIN_MODULES) -> Dict[str, LoadedAlgorithm]:
    """Import the named modules from gridpath.algorithms.plugins.

    Each plugin module must define:
      - ALGORITHM: AlgorithmSpec
      - run(grid: Grid, start: Node, end: Node) -> PathfindingResult

    Returns
    -------
    dict mapping algorithm_id -> LoadedAlgorithm, in the order given
    """

    registry: Dict[str, LoadedAlgorithm] = {}

    # loader.py lives in the `gridpath.algorithms` package.
    # Plugins live in `gridpath.algorithms.plugins`.
    package_name = __package__ + '.plugins'

    for name in names:
        module = importlib.import_module(f"{package_name}.{name}")
        spec = getattr(module, 'ALGORITHM', None)
        run_fn = getattr(module, 'run', None)
        if spec is None or run_fn is None:
            raise TypeError(f"Plugin {name} must define ALGORITHM and run()")
        if not isinstance(spec, AlgorithmSpec):
            raise TypeError(f"Plugin {name} ALGORITHM must be AlgorithmSpec")
        if spec.id in registry:
            raise ValueError(f"Duplicate algorithm id: {spec.id}")
        registry[spec.id] = LoadedAlgorithm(spec=spec, run=run_fn)
        logger.debug("Registered algorithm %s from %s", spec.id, module.__name__)

    return registry


REGISTRY: Dict[str, LoadedAlgorithm] = load_plugins()


def list_algorithms(registry: Dict[str, LoadedAlgorithm] = REGISTRY) -> List[AlgorithmSpec]:
    return [algo.spec for algo in registry.values()]


ALGORITHMS: List[AlgorithmSpec] = list_algorithms()


def get_algorithm(algorithm_id: str, registry: Dict[str, LoadedAlgorithm] = REGISTRY) -> LoadedAlgorithm:
    algo = registry.get(algorithm_id)
    if algo is None:
        raise UnknownAlgorithm(algorithm_id)
    return algo


def run_algorithm(algorithm_id: str, grid: Grid, start: Node, end: Node) -> PathfindingResult:
    """Dispatch to the algorithm registered under `algorithm_id`.

    The algorithm mutates scratch fields of `grid`; pass a clone.
    """
    return get_algorithm(algorithm_id).run(grid, start, end)
