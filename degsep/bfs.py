"""Breadth-first search over an unweighted adjacency."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional

from .exceptions import InputError
from .graph import AdjacencyList, Vertex
from .table import UNREACHABLE, Distance, DistanceTable


def breadth_first_search(
    adjacency: AdjacencyList,
    start: Vertex,
    counters: Optional[Dict[str, int]] = None,
) -> DistanceTable:
    """Compute hop distances from ``start`` to every vertex.

    Neighbors are relaxed with ``dist[u] + 1 < dist[v]`` rather than a
    visited set, so a vertex is enqueued again only if its distance drops.

    A ``start`` with no adjacency entry, inside the arena or beyond it, is an
    isolated vertex: only ``table[start]`` is 0.

    Args:
        adjacency: Unweighted graph; it is only read.
        start: Source vertex.
        counters: Optional dict that accumulates ``pops``,
            ``edges_relaxed`` and ``max_frontier_size``.

    Returns:
        Distance table rooted at ``start``.

    Raises:
        InputError: If ``start`` is negative.
    """
    if start < 0:
        raise InputError(f"start vertex must be non-negative, got {start}")
    dist: List[Distance] = [UNREACHABLE] * max(adjacency.n, start + 1)
    dist[start] = 0

    queue: Deque[Vertex] = deque([start])
    pops = 0
    relaxed = 0
    max_frontier = 1

    while queue:
        u = queue.popleft()
        pops += 1
        nd = dist[u] + 1
        for v in adjacency.neighbors(u):
            relaxed += 1
            if nd < dist[v]:
                dist[v] = nd
                queue.append(v)
        if len(queue) > max_frontier:
            max_frontier = len(queue)

    if counters is not None:
        counters["pops"] = counters.get("pops", 0) + pops
        counters["edges_relaxed"] = counters.get("edges_relaxed", 0) + relaxed
        counters["max_frontier_size"] = max(counters.get("max_frontier_size", 0), max_frontier)
    return DistanceTable(source=start, distances=dist)


__all__ = ["breadth_first_search"]
