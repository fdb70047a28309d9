"""Session state and the per-frame update.

The session is the only owner of game state. Input handlers and ``update``
mutate it; the renderer only reads it. Persistence and audio are passed in
and treated as fire-and-forget side effects.
"""

import random

from . import collision, difficulty
from .config import DEFAULT_DIFFICULTY, GameConfig, validate
from .entities import Bird
from .log import get_logger
from .obstacles import PipeSpawner
from .storage import MemoryStore

log = get_logger('session')

IDLE = 'IDLE'
RUNNING = 'RUNNING'
PAUSED = 'PAUSED'
ENDED = 'ENDED'

CAUSE_FALL = 'fall'
CAUSE_PIPE = 'pipe'

TRACKS = [
    ('none', 'Off'),
    ('track1', 'Super Slow'),
    ('track2', 'Never Alone'),
    ('track3', 'Light It Up'),
    ('track4', 'Xonada'),
]
TRACK_IDS = [t for t, _ in TRACKS]


class MutedAudio:
    def play(self, event):
        pass

    def play_track(self, track):
        pass

    def stop_track(self):
        pass

    def set_volume(self, volume):
        pass


def _as_int(value, default=0):
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


class Session:
    def __init__(self, config=None, store=None, audio=None, rng=None):
        self.config = validate(config or GameConfig())
        if store is None:
            store = MemoryStore()
        self.store = store
        self.audio = audio or MutedAudio()
        self.spawner = PipeSpawner(self.config, rng or random.Random())

        c = self.config
        self.bird = Bird(c.bird_x, c.bird_start_y, c.bird_radius,
                         c.bird_width, c.bird_height, c.flap_strength)
        self.pipes = []
        self.score = 0
        self.spawn_timer = 0
        self.frame = 0
        self.running = False
        self.paused = False
        self.ended = False
        self.end_cause = None

        self.high_score = _as_int(store.get('high_score', 0))
        self.games_played = _as_int(store.get('games_played', 0))
        self.total_score = _as_int(store.get('total_score', 0))

        self.difficulty = store.get('difficulty', DEFAULT_DIFFICULTY)
        if not isinstance(self.difficulty, str) or self.difficulty not in c.presets:
            self.difficulty = DEFAULT_DIFFICULTY if DEFAULT_DIFFICULTY in c.presets else next(iter(c.presets))
        self.volume = max(0, min(100, _as_int(store.get('volume', 50), 50)))
        self.track = store.get('track', 'none')
        if not isinstance(self.track, str) or self.track not in TRACK_IDS:
            self.track = 'none'
        self.audio.set_volume(self.volume)

    # ---------------- STATE ----------------
    @property
    def phase(self):
        if self.running:
            return PAUSED if self.paused else RUNNING
        return ENDED if self.ended else IDLE

    @property
    def preset(self):
        return self.config.presets[self.difficulty]

    @property
    def multiplier(self):
        return difficulty.difficulty_multiplier(self.score)

    # ---------------- INPUT HANDLERS ----------------
    def start(self):
        if self.running:
            return False
        self.running = True
        self.paused = False
        self.ended = False
        self.end_cause = None
        self.score = 0
        self.pipes = []
        self.bird.reset()
        self.spawn_timer = 0
        self.frame = 0
        log.info("session started (difficulty=%s)", self.difficulty)
        self.audio.play('start')
        self.audio.play_track(self.track)
        return True

    def flap(self):
        if not self.running or self.paused:
            return False
        self.bird.flap()
        self.audio.play('flap')
        return True

    def pause(self):
        if not self.running or self.paused:
            return False
        self.paused = True
        return True

    def resume(self):
        if not self.running or not self.paused:
            return False
        self.paused = False
        return True

    def toggle_pause(self):
        return self.resume() if self.paused else self.pause()

    def return_to_menu(self):
        if self.running:
            return False
        self.ended = False
        return True

    def select_difficulty(self, name):
        if name not in self.config.presets:
            raise ValueError(f"unknown difficulty {name!r}")
        if self.running:
            return False
        self.difficulty = name
        self._persist('difficulty', name)
        return True

    def set_volume(self, volume):
        self.volume = max(0, min(100, int(volume)))
        self._persist('volume', self.volume)
        self.audio.set_volume(self.volume)

    def select_track(self, track):
        if track not in TRACK_IDS:
            raise ValueError(f"unknown track {track!r}")
        self.track = track
        self._persist('track', track)
        self.audio.stop_track()
        if self.running and not self.paused:
            self.audio.play_track(track)

    def next_track(self):
        idx = TRACK_IDS.index(self.track)
        self.select_track(TRACK_IDS[(idx + 1) % len(TRACK_IDS)])

    def prev_track(self):
        idx = TRACK_IDS.index(self.track)
        self.select_track(TRACK_IDS[(idx - 1) % len(TRACK_IDS)])

    @property
    def track_name(self):
        return dict(TRACKS)[self.track]

    # ---------------- TICK ----------------
    def step(self):
        """One frame: update, then advance the animation phase if still live."""
        self.update()
        if self.running and not self.paused:
            self.frame += 1

    def update(self):
        if not self.running or self.paused:
            return
        # all three sampled at the score the tick starts with
        preset, score = self.preset, self.score
        g = difficulty.gravity(preset, score)
        interval = difficulty.spawn_interval(preset, score)
        speed = difficulty.pipe_speed(preset, score)
        bird = self.bird

        bird.apply_gravity(g)
        if collision.out_of_bounds(bird, self.config.height):
            self.end(CAUSE_FALL)
            return

        self.spawn_timer += 1
        if self.spawn_timer > interval:
            self.pipes.append(self.spawner.spawn())
            self.spawn_timer = 0

        for i in range(len(self.pipes) - 1, -1, -1):
            p = self.pipes[i]
            p.advance(speed)
            if collision.hits_pipe(bird, p):
                self.end(CAUSE_PIPE)
                return
            if not p.scored and p.right < bird.x:
                p.scored = True
                self.score += 1
                self.audio.play('score')
            if p.is_offscreen():
                del self.pipes[i]

    # ---------------- END OF SESSION ----------------
    def end(self, cause):
        if not self.running:
            return
        self.running = False
        self.paused = False
        self.ended = True
        self.end_cause = cause
        self.audio.stop_track()
        self.audio.play('fall' if cause == CAUSE_FALL else 'gameover')

        self.games_played += 1
        self.total_score += self.score
        self._persist('games_played', self.games_played)
        self._persist('total_score', self.total_score)
        if self.score > self.high_score:
            self.high_score = self.score
            self._persist('high_score', self.high_score)
        log.info("session ended: cause=%s score=%d high=%d", cause, self.score, self.high_score)

    def _persist(self, key, value):
        try:
            self.store.set(key, value)
        except Exception:
            log.warning("store write failed for %s=%r", key, value, exc_info=True)

    # ---------------- STATS ----------------
    def average_score(self):
        if not self.games_played:
            return 0.0
        return self.total_score / self.games_played

    def medal(self):
        if self.high_score > 50:
            return 'gold'
        if self.high_score > 20:
            return 'silver'
        return 'bronze'
