import math

import networkx as nx
import pytest

from degsep.bfs import breadth_first_search
from degsep.exceptions import InputError
from degsep.graph import build_adjacency
from degsep.table import UNREACHABLE

from .conftest import random_edges


def test_diamond_distances(diamond):
    table = breadth_first_search(diamond, 1)
    assert table[1] == 0
    assert table[2] == 1
    assert table[3] == 2
    assert table[4] == 1
    assert table.source == 1


def test_unreachable_and_missing_vertices():
    g = build_adjacency([(0, 1), (3, 4)])
    table = breadth_first_search(g, 0)
    assert table[1] == 1
    assert table[3] == UNREACHABLE
    assert math.isinf(table[4])
    # id 2 never appears in an edge, id 50 is outside the arena
    assert table[2] == UNREACHABLE
    assert table[50] == UNREACHABLE
    assert dict(table.reachable()) == {0: 0, 1: 1}


def test_isolated_start_only_reaches_itself():
    g = build_adjacency([(0, 1), (3, 4)])
    table = breadth_first_search(g, 2)
    assert table[2] == 0
    assert dict(table.reachable()) == {2: 0}


def test_start_beyond_arena_is_isolated():
    g = build_adjacency([(0, 1)])
    table = breadth_first_search(g, 7)
    assert table[7] == 0
    assert table[0] == UNREACHABLE
    assert table[1] == UNREACHABLE
    assert dict(table.reachable()) == {7: 0}


def test_negative_start_rejected():
    g = build_adjacency([(0, 1)])
    with pytest.raises(InputError):
        breadth_first_search(g, -1)


def test_self_loops_and_duplicates():
    g = build_adjacency([(0, 0), (0, 1), (0, 1), (1, 2)])
    table = breadth_first_search(g, 0)
    assert table.distances == [0, 1, 2]


def test_counters_accumulate(diamond):
    counters = {}
    breadth_first_search(diamond, 1, counters=counters)
    assert counters["pops"] == 4
    # every neighbor entry is examined once per pop
    assert counters["edges_relaxed"] == 2 * diamond.num_edges
    breadth_first_search(diamond, 3, counters=counters)
    assert counters["pops"] == 8


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_matches_networkx(seed):
    edges = random_edges(40, 60, seed)
    g = build_adjacency(edges)
    ref = nx.Graph()
    ref.add_edges_from(edges)
    for s in g.vertices()[:10]:
        table = breadth_first_search(g, s)
        expected = nx.single_source_shortest_path_length(ref, s)
        for v in g.vertices():
            assert table[v] == expected.get(v, UNREACHABLE)


def test_symmetry_and_triangle_inequality():
    edges = random_edges(30, 45, 5)
    g = build_adjacency(edges)
    tables = {v: breadth_first_search(g, v) for v in g.vertices()}
    for u in g.vertices():
        du = tables[u]
        assert du[u] == 0
        for v in g.vertices():
            assert du[v] >= 0
            assert du[v] == tables[v][u]
            for w in g.neighbors(v):
                assert du[w] <= du[v] + 1
