"""Summary statistics over sampled distance pairs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from .exceptions import EmptyAggregationError
from .sampling import DistancePair
from .table import UNREACHABLE


@dataclass(frozen=True)
class DistanceStats:
    """Count, mean and population standard deviation of distances.

    Unpacks like the tuple ``(count, mean, stddev)``.
    """

    count: int
    mean: float
    stddev: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.count, self.mean, self.stddev))


def aggregate(pairs: Sequence[DistancePair]) -> DistanceStats:
    """Reduce distance pairs to count, mean and population std-dev.

    The standard deviation divides by ``count``, not ``count - 1``. A pair at
    :data:`~degsep.table.UNREACHABLE` makes both the mean and the deviation
    infinite.

    Raises:
        EmptyAggregationError: If ``pairs`` is empty.

    Examples:
        ```python
        >>> aggregate([DistancePair(0, 1, 1), DistancePair(0, 2, 2), DistancePair(1, 2, 3)])
        DistanceStats(count=3, mean=2.0, stddev=0.816496580927726)
        ```
    """
    count = len(pairs)
    if count == 0:
        raise EmptyAggregationError("cannot compute statistics over zero distances")
    values: List[float] = [p.distance for p in pairs]
    mean = math.fsum(values) / count
    if math.isinf(mean):
        return DistanceStats(count=count, mean=mean, stddev=math.inf)
    sum_sq = math.fsum((d - mean) ** 2 for d in values)
    return DistanceStats(count=count, mean=mean, stddev=math.sqrt(sum_sq / count))


def reachable_pairs(pairs: Iterable[DistancePair]) -> List[DistancePair]:
    """Return only the pairs joined by some path."""
    return [p for p in pairs if p.distance != UNREACHABLE]


__all__ = ["DistanceStats", "aggregate", "reachable_pairs"]
