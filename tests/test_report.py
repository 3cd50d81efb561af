import json

from degsep.report import (
    format_distances,
    format_pair,
    format_summary,
    render_report,
    report_dict,
    write_report,
    write_report_json,
)
from degsep.runner import AlgorithmRun
from degsep.sampling import DistancePair
from degsep.stats import DistanceStats, aggregate
from degsep.table import UNREACHABLE


def test_format_pair():
    assert format_pair(DistancePair(3, 8, 2)) == "Shortest distance between 3 and 8 is 2"
    assert format_pair(DistancePair(3, 8, UNREACHABLE)).endswith("is unreachable")


def test_format_summary():
    text = format_summary(DistanceStats(6, 7 / 6, 0.372678), elapsed_s=0.5)
    assert text.splitlines() == [
        "Total pairs: 6",
        "Mean Distance: 1.17",
        "Standard Deviation: 0.373",
        "Elapsed Time: 0.500000s",
    ]
    assert "Elapsed" not in format_summary(DistanceStats(1, 1.0, 0.0))


def test_render_report_layout():
    pairs = [DistancePair(1, 2, 1), DistancePair(1, 3, 2)]
    text = render_report("Breadth First Search Algorithm", 5, 4, pairs, aggregate(pairs))
    lines = text.splitlines()
    assert lines[0] == "Algorithm: Breadth First Search Algorithm"
    assert "  Number of edges: 5" in lines
    assert "  Number of vertices: 4" in lines
    assert "  Number of distances computed: 2" in lines
    assert "  Mean distance: 1.50" in lines
    assert "  Std. Dev of distances: 0.500" in lines
    idx = lines.index("------ All Shortest Distances ------")
    assert lines[idx + 1 :] == [
        "Shortest distance between 1 and 2 is 1",
        "Shortest distance between 1 and 3 is 2",
    ]


def test_write_report(tmp_path):
    pairs = [DistancePair(1, 2, 1)]
    path = tmp_path / "BFS.txt"
    write_report(path, "BFS", 1, 2, pairs, aggregate(pairs))
    assert path.read_text(encoding="utf-8") == render_report("BFS", 1, 2, pairs, aggregate(pairs))
    assert format_distances(pairs) in path.read_text(encoding="utf-8")


def test_json_report(tmp_path):
    pairs = [DistancePair(1, 2, 1), DistancePair(1, 3, UNREACHABLE)]
    run = AlgorithmRun(
        name="bfs",
        title="Breadth First Search Algorithm",
        pairs=pairs,
        stats=aggregate(pairs[:1]),
        elapsed_s=0.01,
        counters={"pops": 3},
    )
    data = report_dict(run, 2, 3)
    assert data["distances"][1] == {"node_1": 1, "node_2": 3, "distance": None}
    path = tmp_path / "BFS.json"
    write_report_json(path, run, 2, 3)
    loaded = json.loads(path.read_text(encoding="utf-8"))
    assert loaded["algorithm"] == "bfs"
    assert loaded["graph"] == {"edges": 2, "vertices": 3}
    assert loaded["stats"]["count"] == 1
    assert loaded["counters"] == {"pops": 3}


def _reject_constant(token):
    raise ValueError(f"non-standard JSON token {token}")


def test_json_report_with_infinite_stats_is_strict_json(tmp_path):
    pairs = [DistancePair(0, 1, 1), DistancePair(0, 2, UNREACHABLE)]
    run = AlgorithmRun(
        name="bfs",
        title="Breadth First Search Algorithm",
        pairs=pairs,
        stats=aggregate(pairs),
        elapsed_s=0.01,
    )
    path = tmp_path / "BFS.json"
    write_report_json(path, run, 2, 3)
    loaded = json.loads(path.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    assert loaded["stats"]["mean"] is None
    assert loaded["stats"]["stddev"] is None
    assert loaded["stats"]["count"] == 2
