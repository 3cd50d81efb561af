"""Timing trials for the sampled BFS and Dijkstra runs.

Run this module as a script to time both algorithms for several sample sizes
on one edge file.

Example:
```bash
python -m degsep.bench musae_git_edges.csv --sizes 10 100 --trials 5 --out-csv timings.csv
```
"""

from __future__ import annotations

import argparse
import csv
import random
import statistics
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .exceptions import DegsepError, InputError
from .graph import AdjacencyList, build_weighted_adjacency
from .io import read_graph
from .sampling import run_random_test_bfs, run_random_test_dijkstra


@dataclass
class TrialTiming:
    """Timings of repeated sampled runs at one sample size."""

    algorithm: str
    sample_size: int
    times_s: List[float]

    @property
    def mean_s(self) -> float:
        return statistics.fmean(self.times_s)

    @property
    def median_s(self) -> float:
        return statistics.median(self.times_s)


def time_trials(
    adjacency: AdjacencyList,
    sizes: Sequence[int],
    trials: int = 5,
    algorithms: Sequence[str] = ("bfs", "dijkstra"),
    seed: Optional[int] = None,
) -> List[TrialTiming]:
    """Time ``trials`` fresh samples per algorithm and sample size.

    Every trial draws a new sample from the same seeded random source, so a
    given ``seed`` reproduces the whole sequence of samples.

    Args:
        adjacency: Graph to sample from.
        sizes: Sample sizes to time.
        trials: Runs per (algorithm, size); must be positive.
        algorithms: Any of ``"bfs"`` and ``"dijkstra"``.
        seed: Seed for the shared random source.

    Returns:
        One :class:`TrialTiming` per (algorithm, size), algorithms outermost.
    """
    if trials <= 0:
        raise ValueError("trials must be positive")
    rng = random.Random(seed)
    weighted = build_weighted_adjacency(adjacency) if "dijkstra" in algorithms else None
    results: List[TrialTiming] = []
    for algo in algorithms:
        for size in sizes:
            times: List[float] = []
            for _ in range(trials):
                t0 = time.perf_counter()
                if algo == "bfs":
                    run_random_test_bfs(adjacency, size, rng=rng)
                elif algo == "dijkstra" and weighted is not None:
                    run_random_test_dijkstra(weighted, size, rng=rng)
                else:
                    raise ValueError(f"unknown algorithm {algo!r}")
                times.append(time.perf_counter() - t0)
            results.append(TrialTiming(algorithm=algo, sample_size=size, times_s=times))
    return results


def main(argv: List[str] | None = None) -> int:
    """Run timing trials and optionally record them as CSV.

    Args:
        argv: Optional argument list for testing.

    Returns:
        0 on success, 64 for bad input (missing file, oversized sample),
        70 for other package errors.
    """
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("edges", type=str, help="Path to edges file")
    parser.add_argument("--format", choices=["csv", "jsonl"], default=None)
    parser.add_argument("--no-header", action="store_true", help="CSV file has no header row")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 100], help="Sample sizes to time")
    parser.add_argument("--trials", type=int, default=5, help="Number of trials per size")
    parser.add_argument(
        "--algorithm", choices=["bfs", "dijkstra", "both"], default="both", help="Algorithms to time"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for sampling")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    args = parser.parse_args(argv)
    if args.trials <= 0:
        parser.error("--trials must be positive")

    algorithms = ("bfs", "dijkstra") if args.algorithm == "both" else (args.algorithm,)
    try:
        _, adjacency = read_graph(args.edges, fmt=args.format, has_header=not args.no_header)
        results = time_trials(adjacency, args.sizes, trials=args.trials, algorithms=algorithms, seed=args.seed)
    except InputError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 64
    except DegsepError as exc:
        sys.stderr.write(f"internal error: {exc}\n")
        return 70

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(["algorithm", "sample_size", "trial", "seconds"])
            for res in results:
                for trial, sec in enumerate(res.times_s):
                    writer.writerow([res.algorithm, res.sample_size, trial, f"{sec:.6f}"])

    by_algo: Dict[str, List[TrialTiming]] = {}
    for res in results:
        by_algo.setdefault(res.algorithm, []).append(res)
    print(f"{'algorithm':>10} {'size':>6} {'trials':>6} {'mean_s':>12} {'median_s':>12}")
    for algo, rows in by_algo.items():
        for res in rows:
            print(
                f"{algo:>10} {res.sample_size:6d} {len(res.times_s):6d}"
                f" {res.mean_s:12.6f} {res.median_s:12.6f}"
            )
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    sys.exit(main())
