"""Score-driven difficulty progression.

A preset (easy/medium/hard) supplies the base gravity, pipe speed and spawn
interval. The multiplier grows linearly with the score from 1.0 to 2.0 at
100 points and then stays there; gravity and speed are multiplied by it,
the spawn interval is divided by it.
"""

from .config import DIFFICULTIES

MAX_MULTIPLIER = 2.0
SCORE_FOR_MAX = 100


def difficulty_multiplier(score):
    return min(1 + score / SCORE_FOR_MAX, MAX_MULTIPLIER)


def gravity(preset, score):
    return preset.gravity * difficulty_multiplier(score)


def pipe_speed(preset, score):
    return preset.pipe_speed * difficulty_multiplier(score)


def spawn_interval(preset, score):
    return preset.spawn_interval / difficulty_multiplier(score)


def next_difficulty(name, presets=DIFFICULTIES):
    names = list(presets)
    idx = names.index(name) if name in names else -1
    return names[(idx + 1) % len(names)]
