"""Timed sampling runs for each supported algorithm."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .exceptions import ConfigError
from .graph import AdjacencyList, WeightedAdjacencyList, build_weighted_adjacency
from .logger import Logger, NoopLogger
from .sampling import DistancePair, run_random_test_bfs, run_random_test_dijkstra
from .stats import DistanceStats, aggregate, reachable_pairs

ALGORITHMS: Dict[str, str] = {
    "bfs": "Breadth First Search Algorithm",
    "dijkstra": "Dijkstras Algorithm",
}


@dataclass(frozen=True)
class AlgorithmRun:
    """Outcome of one sampled run of a single algorithm."""

    name: str
    title: str
    pairs: List[DistancePair]
    stats: DistanceStats
    elapsed_s: float
    counters: Dict[str, int] = field(default_factory=dict)


def run_algorithm(
    name: str,
    adjacency: AdjacencyList,
    sample_size: int,
    rng: Optional[random.Random] = None,
    logger: Logger | None = None,
    weighted: Optional[WeightedAdjacencyList] = None,
    drop_unreachable: bool = False,
) -> AlgorithmRun:
    """Sample ``sample_size`` vertices, time the pair search, aggregate.

    Only the harness call is timed; building the weighted adjacency for
    ``"dijkstra"`` (when ``weighted`` is not supplied) happens beforehand.

    Args:
        name: ``"bfs"`` or ``"dijkstra"``.
        adjacency: Unweighted graph.
        sample_size: Number of vertices drawn.
        rng: Random source for the sample.
        logger: Optional structured logger.
        weighted: Pre-built weighted adjacency to reuse for Dijkstra.
        drop_unreachable: Aggregate only pairs joined by a path.

    Returns:
        Pairs, statistics, elapsed seconds and summed engine counters.

    Raises:
        ConfigError: If ``name`` is not a known algorithm.
    """
    if name not in ALGORITHMS:
        raise ConfigError(f"unknown algorithm {name!r}")
    log = logger or NoopLogger()
    counters: Dict[str, int] = {}

    if name == "bfs":
        t0 = time.perf_counter()
        pairs = run_random_test_bfs(adjacency, sample_size, rng=rng, logger=log, counters=counters)
    else:
        graph = weighted if weighted is not None else build_weighted_adjacency(adjacency)
        t0 = time.perf_counter()
        pairs = run_random_test_dijkstra(graph, sample_size, rng=rng, logger=log, counters=counters)
    elapsed = time.perf_counter() - t0

    counted = reachable_pairs(pairs) if drop_unreachable else pairs
    if drop_unreachable and len(counted) < len(pairs):
        log.warning("unreachable_pairs", algorithm=name, dropped=len(pairs) - len(counted))
    stats = aggregate(counted)
    log.info(
        "run",
        algorithm=name,
        count=stats.count,
        mean=stats.mean,
        stddev=stats.stddev,
        elapsed_s=elapsed,
        counters=counters,
    )
    return AlgorithmRun(
        name=name,
        title=ALGORITHMS[name],
        pairs=pairs,
        stats=stats,
        elapsed_s=elapsed,
        counters=counters,
    )


__all__ = ["ALGORITHMS", "AlgorithmRun", "run_algorithm"]
