"""Text and JSON rendering of sampling results."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .runner import AlgorithmRun
from .sampling import DistancePair
from .stats import DistanceStats
from .table import Distance, UNREACHABLE


def _fmt_distance(d: Distance) -> str:
    if d == UNREACHABLE:
        return "unreachable"
    return str(int(d)) if float(d).is_integer() else str(d)


def format_pair(pair: DistancePair) -> str:
    """Return the one-line description of ``pair``."""
    return (
        f"Shortest distance between {pair.node_1} and {pair.node_2} "
        f"is {_fmt_distance(pair.distance)}"
    )


def format_distances(pairs: Iterable[DistancePair]) -> str:
    """Return one line per pair, newline terminated."""
    return "".join(format_pair(p) + "\n" for p in pairs)


def format_graph_stats(num_edges: int, num_vertices: int) -> str:
    return (
        "Graph Statistics:\n"
        f"  Number of edges: {num_edges}\n"
        f"  Number of vertices: {num_vertices}\n"
    )


def format_summary(stats: DistanceStats, elapsed_s: Optional[float] = None) -> str:
    """Return the console statistics block for one run."""
    lines = [
        f"Total pairs: {stats.count}",
        f"Mean Distance: {stats.mean:.2f}",
        f"Standard Deviation: {stats.stddev:.3f}",
    ]
    if elapsed_s is not None:
        lines.append(f"Elapsed Time: {elapsed_s:.6f}s")
    return "\n".join(lines) + "\n"


def render_report(
    algorithm_name: str,
    num_edges: int,
    num_vertices: int,
    pairs: Iterable[DistancePair],
    stats: DistanceStats,
) -> str:
    """Return the full text report for one algorithm run."""
    parts: List[str] = [
        f"Algorithm: {algorithm_name}\n\n",
        format_graph_stats(num_edges, num_vertices),
        "\n",
        "Run Statistics:\n",
        f"  Number of distances computed: {stats.count}\n",
        f"  Mean distance: {stats.mean:.2f}\n",
        f"  Std. Dev of distances: {stats.stddev:.3f}\n\n",
        "\n------ All Shortest Distances ------\n",
        format_distances(pairs),
    ]
    return "".join(parts)


def write_report(
    path: str | Path,
    algorithm_name: str,
    num_edges: int,
    num_vertices: int,
    pairs: Iterable[DistancePair],
    stats: DistanceStats,
) -> None:
    """Write the text report produced by :func:`render_report` to ``path``."""
    text = render_report(algorithm_name, num_edges, num_vertices, pairs, stats)
    Path(path).write_text(text, encoding="utf-8")


def _json_float(x: float) -> Optional[float]:
    return x if math.isfinite(x) else None


def _json_distance(d: Distance) -> Any:
    if d == UNREACHABLE:
        return None
    return int(d) if float(d).is_integer() else d


def report_dict(run: AlgorithmRun, num_edges: int, num_vertices: int) -> Dict[str, Any]:
    """Return a JSON-serializable view of ``run``; non-finite values are ``None``."""
    return {
        "algorithm": run.name,
        "title": run.title,
        "graph": {"edges": num_edges, "vertices": num_vertices},
        "stats": {
            "count": run.stats.count,
            "mean": _json_float(run.stats.mean),
            "stddev": _json_float(run.stats.stddev),
            "elapsed_s": run.elapsed_s,
        },
        "counters": dict(run.counters),
        "distances": [
            {"node_1": p.node_1, "node_2": p.node_2, "distance": _json_distance(p.distance)}
            for p in run.pairs
        ],
    }


def write_report_json(path: str | Path, run: AlgorithmRun, num_edges: int, num_vertices: int) -> None:
    """Write :func:`report_dict` of ``run`` to ``path`` as JSON."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(report_dict(run, num_edges, num_vertices), fh, allow_nan=False)


__all__ = [
    "format_pair",
    "format_distances",
    "format_graph_stats",
    "format_summary",
    "render_report",
    "write_report",
    "report_dict",
    "write_report_json",
]
