"""Single-source distance tables."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .graph import Vertex

Distance = float

UNREACHABLE: Distance = math.inf


@dataclass(frozen=True)
class DistanceTable:
    """Distances from ``source`` to every id of the graph's arena.

    Ids outside the arena, and ids with no path from ``source``, read as
    :data:`UNREACHABLE`.
    """

    source: Vertex
    distances: List[Distance]

    def __getitem__(self, v: Vertex) -> Distance:
        if 0 <= v < len(self.distances):
            return self.distances[v]
        return UNREACHABLE

    def __len__(self) -> int:
        return len(self.distances)

    def is_reachable(self, v: Vertex) -> bool:
        return self[v] != UNREACHABLE

    def reachable(self) -> Iterator[Tuple[Vertex, Distance]]:
        """Yield ``(vertex, distance)`` for every reached vertex."""
        for v, d in enumerate(self.distances):
            if d != UNREACHABLE:
                yield v, d


__all__ = ["Distance", "UNREACHABLE", "DistanceTable"]
