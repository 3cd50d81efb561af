"""Run configuration for the sampling driver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import ConfigError

KNOWN_ALGORITHMS: Tuple[str, ...] = ("bfs", "dijkstra")


@dataclass(frozen=True)
class RunConfig:
    """Configuration knobs for one CLI run.

    Attributes:
        sample_size: Number of vertices drawn per algorithm.
        algorithms: Engines to run, in order (``"bfs"``, ``"dijkstra"``).
        seed: Seed for the sample's random source; ``None`` draws fresh
            entropy.
        out_dir: Directory receiving the text (and JSON) reports, or
            ``None`` to skip writing files.
        write_json: Also write a JSON report next to each text report.
        drop_unreachable: Exclude disconnected pairs from the statistics.
        list_pairs: Print every pair to the console.
    """

    sample_size: int = 200
    algorithms: Tuple[str, ...] = KNOWN_ALGORITHMS
    seed: Optional[int] = None
    out_dir: Optional[str] = None
    write_json: bool = False
    drop_unreachable: bool = False
    list_pairs: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.sample_size, bool) or not isinstance(self.sample_size, int):
            raise ConfigError("sample_size must be an integer.")
        if self.sample_size < 0:
            raise ConfigError("sample_size must be non-negative.")
        if not self.algorithms:
            raise ConfigError("at least one algorithm must be selected.")
        unknown = [a for a in self.algorithms if a not in KNOWN_ALGORITHMS]
        if unknown:
            raise ConfigError(f"unknown algorithm(s): {', '.join(unknown)}")
        if self.write_json and self.out_dir is None:
            raise ConfigError("write_json requires out_dir.")
