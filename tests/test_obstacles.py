import random

import pytest

from flappy_flame.config import GameConfig
from flappy_flame.errors import ConfigError
from flappy_flame.obstacles import PipeSpawner
from flappy_flame.simulation import Session


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_spawned_gap_fits_inside_field():
    spawner = PipeSpawner(rng=random.Random(7))
    for _ in range(500):
        p = spawner.spawn()
        assert p.x == 700
        assert not p.scored
        assert 40 <= p.gap_top
        assert p.gap_top + p.gap <= 900 - 40


def test_range_endpoints():
    assert PipeSpawner(rng=FixedRandom(0.0)).gap_top() == 40
    high = PipeSpawner(rng=FixedRandom(0.999999)).gap_top()
    assert 539 < high < 540


def test_gap_top_is_fixed_after_creation():
    p = PipeSpawner(rng=FixedRandom(0.5)).spawn()
    with pytest.raises(AttributeError):
        p.gap_top = 10


def test_degenerate_range_fails_at_construction():
    with pytest.raises(ConfigError):
        PipeSpawner(GameConfig(pipe_min_height=300))
    with pytest.raises(ConfigError):
        PipeSpawner(GameConfig(height=399))


def test_tightest_valid_range_is_accepted():
    spawner = PipeSpawner(GameConfig(height=400), rng=FixedRandom(0.3))
    assert spawner.spawn().gap_top == 40


def test_session_validates_config():
    with pytest.raises(ConfigError):
        Session(GameConfig(pipe_gap=900))
    with pytest.raises(ConfigError):
        Session(GameConfig(pipe_width=0))
