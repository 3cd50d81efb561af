"""Histogram of sampled hop distances."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from .sampling import DistancePair  # noqa: E402
from .stats import reachable_pairs  # noqa: E402


def distance_counts(pairs: Iterable[DistancePair]) -> np.ndarray:
    """Return ``counts[d]``, the number of reachable pairs at distance ``d``."""
    values = np.array([int(p.distance) for p in reachable_pairs(pairs)], dtype=np.int64)
    if values.size == 0:
        return np.zeros(0, dtype=np.int64)
    return np.bincount(values)


def plot_distance_histogram(
    pairs: Iterable[DistancePair],
    path: str | Path,
    title: Optional[str] = None,
) -> np.ndarray:
    """Save a bar chart of distance frequencies to ``path``.

    Unreachable pairs are left out.

    Returns:
        The plotted counts, as from :func:`distance_counts`.
    """
    counts = distance_counts(pairs)
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(np.arange(counts.size), counts, color="tab:blue", edgecolor="black")
    ax.set_xlabel("Shortest distance (hops)")
    ax.set_ylabel("Number of pairs")
    ax.set_title(title or "Sampled distance distribution")
    ax.set_xticks(np.arange(counts.size))
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return counts


__all__ = ["distance_counts", "plot_distance_histogram"]
