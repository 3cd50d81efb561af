"""Random-sample harness driving a single-source engine over vertex pairs."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union

from .bfs import breadth_first_search
from .dijkstra import dijkstra
from .exceptions import InputError, OversizedSampleError
from .graph import AdjacencyList, Vertex, WeightedAdjacencyList
from .logger import Logger, NoopLogger
from .table import Distance, DistanceTable


AnyAdjacency = Union[AdjacencyList, WeightedAdjacencyList]

SingleSource = Callable[..., DistanceTable]


@dataclass(frozen=True)
class DistancePair:
    """Shortest distance between two distinct sampled vertices.

    ``node_1`` comes before ``node_2`` in the sample order.
    """

    node_1: Vertex
    node_2: Vertex
    distance: Distance


def choose_sample(vertices: Sequence[Vertex], k: int, rng: random.Random) -> List[Vertex]:
    """Return ``k`` distinct vertices drawn uniformly without replacement.

    The whole vertex list is shuffled and the first ``k`` entries are kept,
    in shuffled order.

    Raises:
        InputError: If ``k`` is negative.
        OversizedSampleError: If ``k`` exceeds ``len(vertices)``.
    """
    if k < 0:
        raise InputError(f"sample size must be non-negative, got {k}")
    if k > len(vertices):
        raise OversizedSampleError(
            f"requested sample of {k} vertices is bigger than the graph ({len(vertices)} vertices)"
        )
    pool = list(vertices)
    rng.shuffle(pool)
    return pool[:k]


def run_sampled_shortest_paths(
    graph: AnyAdjacency,
    sample_size: int,
    single_source: SingleSource,
    rng: Optional[random.Random] = None,
    logger: Logger | None = None,
    counters: Optional[Dict[str, int]] = None,
) -> List[DistancePair]:
    """Compute the distance between every pair of a random vertex sample.

    ``single_source`` runs once per sampled vertex, in sample order, and each
    run traverses the whole reachable component. For sample position ``i``
    the distances to positions ``i+1 ..`` are read from that run's table.

    Args:
        graph: Adjacency handed unchanged to ``single_source``.
        sample_size: Number of vertices to draw.
        single_source: Engine called as ``single_source(graph, source)``.
        rng: Random source; a fresh unseeded one is used when ``None``.
        logger: Optional structured logger.
        counters: Optional dict forwarded to the engine as ``counters=``.

    Returns:
        ``sample_size * (sample_size - 1) // 2`` pairs, one per unordered
        pair of sampled vertices.

    Raises:
        OversizedSampleError: If ``sample_size`` exceeds the vertex count.
    """
    rng = rng if rng is not None else random.Random()
    log = logger or NoopLogger()
    if sample_size > graph.num_vertices:
        raise OversizedSampleError(
            f"requested sample of {sample_size} vertices is bigger than the graph "
            f"({graph.num_vertices} vertices)"
        )
    chosen = choose_sample(graph.vertices(), sample_size, rng)
    log.info("sample", size=sample_size, vertices=graph.num_vertices)

    pairs: List[DistancePair] = []
    for i, start in enumerate(chosen):
        if counters is None:
            table = single_source(graph, start)
        else:
            table = single_source(graph, start, counters=counters)
        for end in chosen[i + 1 :]:
            pairs.append(DistancePair(start, end, table[end]))
        log.debug("source_done", index=i, source=start)
    return pairs


def run_random_test_bfs(
    adjacency: AdjacencyList,
    sample_size: int,
    rng: Optional[random.Random] = None,
    logger: Logger | None = None,
    counters: Optional[Dict[str, int]] = None,
) -> List[DistancePair]:
    """Sample ``sample_size`` vertices and measure pair distances with BFS."""
    return run_sampled_shortest_paths(
        adjacency, sample_size, breadth_first_search, rng=rng, logger=logger, counters=counters
    )


def run_random_test_dijkstra(
    weighted: WeightedAdjacencyList,
    sample_size: int,
    rng: Optional[random.Random] = None,
    logger: Logger | None = None,
    counters: Optional[Dict[str, int]] = None,
) -> List[DistancePair]:
    """Sample ``sample_size`` vertices and measure pair distances with Dijkstra."""
    return run_sampled_shortest_paths(
        weighted, sample_size, dijkstra, rng=rng, logger=logger, counters=counters
    )


__all__ = [
    "DistancePair",
    "SingleSource",
    "choose_sample",
    "run_sampled_shortest_paths",
    "run_random_test_bfs",
    "run_random_test_dijkstra",
]
