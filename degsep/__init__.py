"""Public package exports for :mod:`degsep`."""

from __future__ import annotations

from .bfs import breadth_first_search
from .config import RunConfig
from .dijkstra import dijkstra
from .exceptions import (
    ConfigError,
    DegsepError,
    EmptyAggregationError,
    GraphFormatError,
    InputError,
    OversizedSampleError,
)
from .graph import AdjacencyList, WeightedAdjacencyList, build_adjacency, build_weighted_adjacency
from .io import read_edges, read_graph
from .logger import Logger, NoopLogger, StdLogger
from .runner import ALGORITHMS, AlgorithmRun, run_algorithm
from .sampling import (
    DistancePair,
    choose_sample,
    run_random_test_bfs,
    run_random_test_dijkstra,
    run_sampled_shortest_paths,
)
from .stats import DistanceStats, aggregate, reachable_pairs
from .table import UNREACHABLE, DistanceTable

__version__ = "0.1.0"

__all__ = [
    "AdjacencyList",
    "WeightedAdjacencyList",
    "build_adjacency",
    "build_weighted_adjacency",
    "breadth_first_search",
    "dijkstra",
    "DistanceTable",
    "UNREACHABLE",
    "DistancePair",
    "choose_sample",
    "run_sampled_shortest_paths",
    "run_random_test_bfs",
    "run_random_test_dijkstra",
    "DistanceStats",
    "aggregate",
    "reachable_pairs",
    "ALGORITHMS",
    "AlgorithmRun",
    "run_algorithm",
    "RunConfig",
    "read_edges",
    "read_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "DegsepError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "OversizedSampleError",
    "EmptyAggregationError",
]
