"""Dijkstra's algorithm over a weighted adjacency."""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Tuple

from .exceptions import InputError
from .graph import Vertex, WeightedAdjacencyList
from .table import UNREACHABLE, Distance, DistanceTable


def dijkstra(
    weighted: WeightedAdjacencyList,
    start: Vertex,
    counters: Optional[Dict[str, int]] = None,
) -> DistanceTable:
    """Compute weighted shortest distances from ``start``.

    The frontier is a plain binary heap without decrease-key: an improved
    vertex is pushed again and the outdated entry is dropped when popped.

    A ``start`` with no adjacency entry, inside the arena or beyond it, is an
    isolated vertex: only ``table[start]`` is 0.

    Args:
        weighted: Graph with non-negative integer weights; it is only read.
        start: Source vertex.
        counters: Optional dict that accumulates ``pops``, ``stale_pops``,
            ``edges_relaxed`` and ``max_frontier_size``.

    Returns:
        Distance table rooted at ``start``.

    Raises:
        InputError: If ``start`` is negative.
    """
    if start < 0:
        raise InputError(f"start vertex must be non-negative, got {start}")
    dist: List[Distance] = [UNREACHABLE] * max(weighted.n, start + 1)
    dist[start] = 0

    pq: List[Tuple[Distance, Vertex]] = [(0, start)]
    pops = 0
    stale = 0
    relaxed = 0
    max_frontier = 1

    while pq:
        cost, u = heapq.heappop(pq)
        pops += 1
        # lazy deletion
        if cost > dist[u]:
            stale += 1
            continue
        for v, w in weighted.neighbors(u):
            relaxed += 1
            nd = cost + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(pq, (nd, v))
        if len(pq) > max_frontier:
            max_frontier = len(pq)

    if counters is not None:
        counters["pops"] = counters.get("pops", 0) + pops
        counters["stale_pops"] = counters.get("stale_pops", 0) + stale
        counters["edges_relaxed"] = counters.get("edges_relaxed", 0) + relaxed
        counters["max_frontier_size"] = max(counters.get("max_frontier_size", 0), max_frontier)
    return DistanceTable(source=start, distances=dist)


__all__ = ["dijkstra"]
