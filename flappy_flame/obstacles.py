import random

from .config import GameConfig, validate
from .entities import Pipe


class PipeSpawner:
    """Creates pipes at the right edge with a random gap position.

    The gap top is drawn uniformly from ``[min_height, max_height)`` where
    ``max_height = height - gap - min_height``, so both barrier segments are
    at least ``min_height`` tall.
    """

    def __init__(self, config=None, rng=None):
        self.config = validate(config or GameConfig())
        self.rng = rng or random.Random()
        self.min_height = self.config.pipe_min_height
        self.max_height = self.config.pipe_max_height

    def gap_top(self):
        return self.rng.random() * (self.max_height - self.min_height) + self.min_height

    def spawn(self):
        c = self.config
        return Pipe(c.width, self.gap_top(), width=c.pipe_width, gap=c.pipe_gap,
                    field_height=c.height)
