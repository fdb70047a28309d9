import pytest

from flappy_flame.config import DIFFICULTIES
from flappy_flame.difficulty import (difficulty_multiplier, gravity, next_difficulty,
                                     pipe_speed, spawn_interval)


def test_multiplier_endpoints():
    assert difficulty_multiplier(0) == 1.0
    assert difficulty_multiplier(50) == 1.5
    assert difficulty_multiplier(100) == 2.0
    assert difficulty_multiplier(250) == 2.0


def test_multiplier_is_monotonic():
    values = [difficulty_multiplier(s) for s in range(0, 300)]
    assert all(a <= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize('name', list(DIFFICULTIES))
def test_score_100_doubles_speed_and_halves_interval(name):
    preset = DIFFICULTIES[name]
    assert spawn_interval(preset, 100) == preset.spawn_interval / 2.0
    assert pipe_speed(preset, 100) == preset.pipe_speed * 2.0
    assert gravity(preset, 100) == preset.gravity * 2.0


def test_base_values_at_zero():
    easy = DIFFICULTIES['easy']
    assert spawn_interval(easy, 0) == 250
    assert pipe_speed(easy, 0) == 2.5
    assert gravity(easy, 0) == 0.2


def test_next_difficulty_cycles():
    assert next_difficulty('easy') == 'medium'
    assert next_difficulty('medium') == 'hard'
    assert next_difficulty('hard') == 'easy'
    assert next_difficulty('bogus') == 'easy'
