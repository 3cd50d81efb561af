"""Undirected adjacency structures built from an edge list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .exceptions import GraphFormatError, InputError

Vertex = int
Weight = int
Edge = Tuple[Vertex, Vertex]

_NO_NEIGHBORS: Tuple = ()


def _check_vertex(v: object) -> Vertex:
    if isinstance(v, bool) or not isinstance(v, int):
        raise InputError(f"vertex id must be an integer, got {v!r}")
    if v < 0:
        raise InputError(f"vertex id must be non-negative, got {v}")
    return v


@dataclass
class AdjacencyList:
    """Unweighted undirected graph stored as a dense arena.

    ``adj[v]`` holds the neighbors of ``v`` in insertion order. Ids in
    ``0 .. n-1`` that never appeared as an edge endpoint are kept in the arena
    with an empty neighbor list and ``present[v] == False``.

    Attributes:
        n: Arena size (largest vertex id plus one).
        adj: Neighbor lists indexed by vertex id.
        present: Whether each id is an endpoint of some edge.
        num_edges: Number of edges inserted, counting duplicates and loops.
    """

    n: int

    def __post_init__(self) -> None:
        """Validate arena size and allocate empty neighbor lists."""
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 0:
            raise InputError("AdjacencyList.n must be a non-negative integer.")
        self.adj: List[List[Vertex]] = [[] for _ in range(self.n)]
        self.present: List[bool] = [False] * self.n
        self.num_edges = 0
        self._num_vertices = 0

    def _mark(self, v: Vertex) -> None:
        if not self.present[v]:
            self.present[v] = True
            self._num_vertices += 1

    def add_edge(self, a: Vertex, b: Vertex) -> None:
        """Insert the undirected edge ``(a, b)``.

        Duplicates and self-loops are kept: a loop ``(a, a)`` puts ``a`` into
        its own neighbor list twice.

        Raises:
            InputError: If either endpoint is not an id inside the arena.

        Examples:
            ```python
            >>> g = AdjacencyList(3)
            >>> g.add_edge(0, 2)
            >>> g.adj
            [[2], [], [0]]
            ```
        """
        a = _check_vertex(a)
        b = _check_vertex(b)
        if a >= self.n or b >= self.n:
            raise InputError(f"edge ({a}, {b}) does not fit an arena of size {self.n}")
        self.adj[a].append(b)
        self.adj[b].append(a)
        self._mark(a)
        self._mark(b)
        self.num_edges += 1

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "AdjacencyList":
        """Create a graph sized to hold every endpoint of ``edges``."""
        edge_list = [(_check_vertex(a), _check_vertex(b)) for a, b in edges]
        n = 1 + max((max(a, b) for a, b in edge_list), default=-1)
        g = cls(n)
        for a, b in edge_list:
            g.add_edge(a, b)
        return g

    def neighbors(self, v: Vertex) -> List[Vertex] | Tuple:
        """Return the neighbors of ``v``; unknown ids have none."""
        if 0 <= v < self.n:
            return self.adj[v]
        return _NO_NEIGHBORS

    def vertices(self) -> List[Vertex]:
        """Return the ids of all vertices in increasing order."""
        return [v for v in range(self.n) if self.present[v]]

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and 0 <= v < self.n and self.present[v]

    @property
    def num_vertices(self) -> int:
        """Number of distinct edge endpoints."""
        return self._num_vertices


@dataclass
class WeightedAdjacencyList:
    """Weighted counterpart of :class:`AdjacencyList`.

    ``adj[v]`` holds ``(neighbor, weight)`` pairs. Weights must be
    non-negative integers; a negative weight raises
    :class:`~degsep.exceptions.GraphFormatError` that cites the offending arc.
    """

    n: int

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 0:
            raise InputError("WeightedAdjacencyList.n must be a non-negative integer.")
        self.adj: List[List[Tuple[Vertex, Weight]]] = [[] for _ in range(self.n)]
        self.present: List[bool] = [False] * self.n
        self.num_edges = 0
        self._num_vertices = 0

    def add_arc(self, u: Vertex, v: Vertex, w: Weight) -> None:
        """Append ``(v, w)`` to ``u``'s list without adding the reverse entry.

        Raises:
            InputError: If ``u`` or ``v`` are out of range.
            GraphFormatError: If ``w`` is not a non-negative integer.
        """
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise InputError("u and v must be vertex ids in [0, n).")
        if isinstance(w, bool) or not isinstance(w, int):
            raise GraphFormatError(f"non-integer weight {w!r} on arc ({u}, {v})")
        if w < 0:
            raise GraphFormatError(f"negative weight {w} on arc ({u}, {v})")
        self.adj[u].append((v, w))
        for x in (u, v):
            if not self.present[x]:
                self.present[x] = True
                self._num_vertices += 1

    def add_edge(self, a: Vertex, b: Vertex, w: Weight) -> None:
        """Insert the undirected edge ``(a, b)`` with weight ``w``."""
        self.add_arc(a, b, w)
        self.add_arc(b, a, w)
        self.num_edges += 1

    def neighbors(self, v: Vertex) -> List[Tuple[Vertex, Weight]] | Tuple:
        """Return ``(neighbor, weight)`` pairs of ``v``; unknown ids have none."""
        if 0 <= v < self.n:
            return self.adj[v]
        return _NO_NEIGHBORS

    def vertices(self) -> List[Vertex]:
        """Return the ids of all vertices in increasing order."""
        return [v for v in range(self.n) if self.present[v]]

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and 0 <= v < self.n and self.present[v]

    @property
    def num_vertices(self) -> int:
        """Number of distinct vertices."""
        return self._num_vertices

    def arcs(self) -> Iterator[Tuple[Vertex, Vertex, Weight]]:
        """Iterate over every stored ``(u, v, w)`` entry."""
        for u in range(self.n):
            for v, w in self.adj[u]:
                yield u, v, w


def build_adjacency(edges: Iterable[Edge]) -> AdjacencyList:
    """Build the unweighted adjacency of an undirected edge list.

    Args:
        edges: Iterable of ``(a, b)`` vertex id pairs.

    Returns:
        Adjacency where each edge appears in both endpoints' neighbor lists.
    """
    return AdjacencyList.from_edges(edges)


def build_weighted_adjacency(adjacency: AdjacencyList, weight: Weight = 1) -> WeightedAdjacencyList:
    """Derive a weighted adjacency with ``weight`` on every neighbor entry.

    Neighbor order and count are preserved for every vertex, so the weighted
    graph has exactly the connectivity of ``adjacency``.

    Args:
        adjacency: Source unweighted adjacency.
        weight: Weight given to each entry, ``1`` by default.

    Returns:
        The weighted adjacency.
    """
    weighted = WeightedAdjacencyList(adjacency.n)
    for u in range(adjacency.n):
        for v in adjacency.adj[u]:
            weighted.add_arc(u, v, weight)
    weighted.num_edges = adjacency.num_edges
    return weighted


__all__ = [
    "Vertex",
    "Weight",
    "Edge",
    "AdjacencyList",
    "WeightedAdjacencyList",
    "build_adjacency",
    "build_weighted_adjacency",
]
