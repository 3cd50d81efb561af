import pytest

from degsep.config import RunConfig
from degsep.exceptions import ConfigError


def test_defaults():
    cfg = RunConfig()
    assert cfg.sample_size == 200
    assert cfg.algorithms == ("bfs", "dijkstra")
    assert cfg.seed is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sample_size": -1},
        {"sample_size": 2.5},
        {"algorithms": ()},
        {"algorithms": ("bfs", "floyd")},
        {"write_json": True},
    ],
)
def test_invalid(kwargs):
    with pytest.raises(ConfigError):
        RunConfig(**kwargs)
