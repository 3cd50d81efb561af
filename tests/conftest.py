import random
from typing import List, Tuple

import pytest

from degsep.graph import AdjacencyList, build_adjacency

# 1 ----- 2 ----- 3
#  \      |      /
#   \     |     /
#    \    |    /
#     \   |   /
#       \ | /
#         4
DIAMOND_EDGES = [(1, 2), (2, 3), (1, 4), (2, 4), (3, 4)]


@pytest.fixture
def diamond_edges() -> List[Tuple[int, int]]:
    return list(DIAMOND_EDGES)


@pytest.fixture
def diamond() -> AdjacencyList:
    return build_adjacency(DIAMOND_EDGES)


def random_edges(n: int, m: int, seed: int) -> List[Tuple[int, int]]:
    """Random edge list over ids ``0 .. n-1``, loops and duplicates allowed."""
    rnd = random.Random(seed)
    return [(rnd.randrange(n), rnd.randrange(n)) for _ in range(m)]
