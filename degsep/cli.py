"""Command-line interface for sampled degrees-of-separation runs."""

from __future__ import annotations

import argparse
import random
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .config import RunConfig
from .exceptions import (
    ConfigError,
    DegsepError,
    GraphFormatError,
    InputError,
    OversizedSampleError,
)
from .graph import build_weighted_adjacency
from .io import read_graph
from .logger import StdLogger
from .report import format_distances, format_graph_stats, format_summary, write_report, write_report_json
from .runner import run_algorithm

EXAMPLE_CSV = """source,target
1,2
2,3
1,4
2,4
3,4
"""

REPORT_NAMES = {"bfs": "BFS", "dijkstra": "Dijkstras"}

BANNERS = {
    "bfs": "--> BFS Algorithm Implementation",
    "dijkstra": "--> Dijkstra's Algorithm Implementation",
}


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  degsep --edges musae_git_edges.csv --sample-size 200\n"
        "  degsep --edges graph.csv --algorithm bfs --seed 7 --out-dir reports\n"
        "  degsep --example > diamond.csv\n"
    )
    p = argparse.ArgumentParser(
        prog="degsep",
        description="Sampled shortest-path distances in an undirected social graph",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines as JSON")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=["csv", "jsonl"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )
    p.add_argument("--no-header", action="store_true", help="CSV file has no header row")
    p.add_argument("--sample-size", type=int, default=200, help="Vertices drawn per algorithm")
    p.add_argument("--algorithm", choices=["bfs", "dijkstra", "both"], default="both")
    p.add_argument("--seed", type=int, default=None, help="Seed for vertex sampling")
    p.add_argument("--out-dir", type=str, default=None, help="Write BFS.txt / Dijkstras.txt here")
    p.add_argument("--json", action="store_true", help="Also write JSON reports (needs --out-dir)")
    p.add_argument("--quiet", action="store_true", help="Do not print every distance pair")
    p.add_argument(
        "--drop-unreachable",
        action="store_true",
        help="Leave disconnected pairs out of the statistics",
    )
    p.add_argument("--plot-out", type=str, default=None, help="Save a distance histogram (PNG)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``degsep`` command-line tool."""
    p = _build_parser()
    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return 0

    try:
        cfg = RunConfig(
            sample_size=args.sample_size,
            algorithms=("bfs", "dijkstra") if args.algorithm == "both" else (args.algorithm,),
            seed=args.seed,
            out_dir=args.out_dir,
            write_json=args.json,
            drop_unreachable=args.drop_unreachable,
            list_pairs=not args.quiet,
        )
        logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)

        edges, adjacency = read_graph(args.edges, fmt=args.format, has_header=not args.no_header)
        logger.info("graph_loaded", edges=len(edges), vertices=adjacency.num_vertices)

        print("Welcome to the GitHub Degrees of Separation\n")
        sys.stdout.write(format_graph_stats(len(edges), adjacency.num_vertices))

        if args.verbose:
            sys.stderr.write(
                f"config: sample_size={cfg.sample_size} algorithms={','.join(cfg.algorithms)} "
                f"seed={cfg.seed}\n"
            )

        out_dir = Path(cfg.out_dir) if cfg.out_dir else None
        if out_dir is not None:
            out_dir.mkdir(parents=True, exist_ok=True)

        rng = random.Random(cfg.seed)
        weighted = build_weighted_adjacency(adjacency) if "dijkstra" in cfg.algorithms else None
        last_run = None
        for name in cfg.algorithms:
            print(f"\n\n{BANNERS[name]}\n")
            run = run_algorithm(
                name,
                adjacency,
                cfg.sample_size,
                rng=rng,
                logger=logger,
                weighted=weighted,
                drop_unreachable=cfg.drop_unreachable,
            )
            if cfg.list_pairs:
                sys.stdout.write(format_distances(run.pairs))
            sys.stdout.write(format_summary(run.stats, run.elapsed_s))
            if out_dir is not None:
                stem = REPORT_NAMES[name]
                write_report(
                    out_dir / f"{stem}.txt",
                    run.title,
                    len(edges),
                    adjacency.num_vertices,
                    run.pairs,
                    run.stats,
                )
                if cfg.write_json:
                    write_report_json(out_dir / f"{stem}.json", run, len(edges), adjacency.num_vertices)
            last_run = run

        if args.plot_out and last_run is not None:
            from .plot import plot_distance_histogram

            plot_distance_histogram(last_run.pairs, args.plot_out, title=last_run.title)
        return 0

    except (InputError, ConfigError, GraphFormatError, OversizedSampleError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except DegsepError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
