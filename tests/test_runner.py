import io
import json
import random

import pytest

from degsep.exceptions import ConfigError, EmptyAggregationError
from degsep.graph import build_adjacency
from degsep.logger import StdLogger
from degsep.runner import ALGORITHMS, run_algorithm


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_run_algorithm_on_diamond(diamond, name):
    run = run_algorithm(name, diamond, 4, rng=random.Random(0))
    assert run.name == name
    assert run.title == ALGORITHMS[name]
    assert run.stats.count == 6
    assert run.stats.mean == pytest.approx(7 / 6)
    assert run.elapsed_s >= 0
    assert run.counters["pops"] >= 16


def test_unknown_algorithm(diamond):
    with pytest.raises(ConfigError):
        run_algorithm("astar", diamond, 2)


def test_sample_of_one_has_nothing_to_aggregate(diamond):
    with pytest.raises(EmptyAggregationError):
        run_algorithm("bfs", diamond, 1)


def test_drop_unreachable_logs_and_filters():
    g = build_adjacency([(0, 1), (2, 3)])
    stream = io.StringIO()
    logger = StdLogger(level="info", json_fmt=True, stream=stream)
    run = run_algorithm("dijkstra", g, 4, rng=random.Random(0), logger=logger, drop_unreachable=True)
    assert len(run.pairs) == 6
    assert run.stats.count == 2
    assert run.stats.mean == 1.0
    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    names = [e["event"] for e in events]
    assert "unreachable_pairs" in names
    assert events[-1]["event"] == "run"
    assert events[-1]["count"] == 2
