"""Synthesized sound effects and background music.

Effects are generated with numpy at start-up: a sine tone whose gain decays
exponentially to 1% over its length. Background tracks are plain files
played through ``pygame.mixer.music``. Nothing here ever raises into the
game loop; playback problems are logged and skipped.
"""

import os

import numpy as np
import pygame

from .log import get_logger

log = get_logger('audio')

SAMPLE_RATE = 44100
EFFECT_GAIN = 0.3
MUSIC_GAIN = 0.3

# event -> (start freq, end freq, length ms)
TONES = {
    'flap': (400, 400, 100),
    'score': (600, 600, 150),
    'gameover': (200, 200, 300),
    'start': (500, 500, 200),
    'fall': (300, 90, 400),
}


def make_tone(freq=440.0, length_ms=120, volume=0.3, end_freq=None, sr=SAMPLE_RATE):
    """Stereo int16 samples of a decaying tone, optionally sweeping in pitch."""
    n = int(sr * (length_ms / 1000.0))
    t = np.linspace(0, length_ms / 1000.0, n, False)
    if end_freq is None or end_freq == freq:
        phase = 2 * np.pi * freq * t
    else:
        # linear sweep: integrate the instantaneous frequency
        k = (end_freq - freq) / (length_ms / 1000.0)
        phase = 2 * np.pi * (freq * t + 0.5 * k * t * t)
    envelope = np.geomspace(1.0, 0.01, n) if n else np.zeros(0)
    wave = np.sin(phase) * envelope * volume
    stereo = np.column_stack([wave, wave])
    return (stereo * 32767).astype(np.int16)


class SoundBoard:
    def __init__(self, volume=50, music_dir='audio'):
        self.volume = volume
        self.music_dir = music_dir
        self.sounds = {}
        self.enabled = self._init_mixer()
        if self.enabled:
            self._build_sounds()

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
            return True
        except pygame.error as e:
            log.warning("audio disabled: %s", e)
            return False

    def _build_sounds(self):
        for event, (f0, f1, ms) in TONES.items():
            # full-scale samples; playback gain comes from Sound.set_volume
            samples = make_tone(f0, ms, 1.0, end_freq=f1)
            try:
                self.sounds[event] = pygame.sndarray.make_sound(samples)
            except (pygame.error, ValueError) as e:
                log.warning("could not build %s sound: %s", event, e)

    def set_volume(self, volume):
        self.volume = volume
        if self.enabled:
            try:
                pygame.mixer.music.set_volume(self.volume / 100 * MUSIC_GAIN)
            except pygame.error as e:
                log.warning("could not set music volume: %s", e)

    def play(self, event):
        if not self.enabled or self.volume == 0:
            return
        sound = self.sounds.get(event)
        if sound is None:
            log.debug("no sound for event %s", event)
            return
        try:
            sound.set_volume(self.volume / 100 * EFFECT_GAIN)
            sound.play()
        except pygame.error as e:
            log.warning("playback of %s failed: %s", event, e)

    def track_path(self, track):
        return os.path.join(self.music_dir, f'{track}.ogg')

    def play_track(self, track):
        if not self.enabled or track == 'none' or self.volume == 0:
            return
        path = self.track_path(track)
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.set_volume(self.volume / 100 * MUSIC_GAIN)
            pygame.mixer.music.play(loops=-1)
        except (pygame.error, FileNotFoundError) as e:
            log.warning("background track %s failed: %s", path, e)

    def stop_track(self):
        if not self.enabled:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as e:
            log.warning("could not stop music: %s", e)
