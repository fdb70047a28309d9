"""Game constants, difficulty presets and runtime settings."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .errors import ConfigError

# ---------------- CONFIG ----------------
WIDTH, HEIGHT = 700, 900
FPS = 60

FLAP_STRENGTH = -8
PIPE_WIDTH = 80
PIPE_GAP = 320
PIPE_MIN_HEIGHT = 40

BIRD_X = 100
BIRD_START_Y = 450
BIRD_RADIUS = 13
BIRD_SIZE = 70

SAVE_FILE = 'flappy_save.json'


# ---------------- DIFFICULTY PRESETS ----------------
@dataclass(frozen=True)
class Preset:
    name: str
    spawn_interval: float
    pipe_speed: float
    gravity: float


DIFFICULTIES = {
    'easy': Preset('easy', spawn_interval=250, pipe_speed=2.5, gravity=0.2),
    'medium': Preset('medium', spawn_interval=200, pipe_speed=3.5, gravity=0.25),
    'hard': Preset('hard', spawn_interval=160, pipe_speed=5, gravity=0.35),
}
DEFAULT_DIFFICULTY = 'easy'


@dataclass(frozen=True)
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    flap_strength: float = FLAP_STRENGTH
    pipe_width: int = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_min_height: int = PIPE_MIN_HEIGHT
    bird_x: float = BIRD_X
    bird_start_y: float = BIRD_START_Y
    bird_radius: float = BIRD_RADIUS
    bird_width: float = BIRD_SIZE
    bird_height: float = BIRD_SIZE
    presets: dict = field(default_factory=lambda: dict(DIFFICULTIES))

    @property
    def pipe_max_height(self):
        return self.height - self.pipe_gap - self.pipe_min_height


def validate(config):
    """Reject configurations that would make the pipe generator degenerate."""
    for name in ('width', 'height', 'pipe_width', 'pipe_gap', 'bird_width', 'bird_height'):
        if getattr(config, name) <= 0:
            raise ConfigError(f"{name} must be positive, got {getattr(config, name)}")
    if config.pipe_min_height < 0:
        raise ConfigError(f"pipe_min_height must not be negative, got {config.pipe_min_height}")
    if config.pipe_min_height > config.pipe_max_height:
        raise ConfigError(
            f"pipe gap does not fit: min height {config.pipe_min_height} > "
            f"max height {config.pipe_max_height} (height={config.height}, gap={config.pipe_gap})"
        )
    if not config.presets:
        raise ConfigError("at least one difficulty preset is required")
    return config


# ---------------- RUNTIME SETTINGS ----------------
@dataclass(frozen=True)
class Settings:
    save_file: str
    log_level: str
    log_file: str | None
    music_dir: str


def load_settings():
    """Load runtime settings from .env and environment variables."""
    load_dotenv()
    return Settings(
        save_file=os.environ.get('FLAPPY_SAVE_FILE', SAVE_FILE),
        log_level=os.environ.get('FLAPPY_LOG_LEVEL', 'info'),
        log_file=os.environ.get('FLAPPY_LOG_FILE') or None,
        music_dir=os.environ.get('FLAPPY_MUSIC_DIR', 'audio'),
    )
