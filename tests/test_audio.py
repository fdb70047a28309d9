import numpy as np
import pygame

from flappy_flame import audio
from flappy_flame.audio import SoundBoard, make_tone


def test_tone_shape_and_range():
    samples = make_tone(400, 100, 0.3)
    assert samples.dtype == np.int16
    assert samples.shape == (4410, 2)
    assert (samples[:, 0] == samples[:, 1]).all()
    assert np.abs(samples).max() <= int(0.3 * 32767)


def test_tone_decays():
    samples = make_tone(600, 150, 1.0)[:, 0].astype(float)
    n = len(samples)
    assert np.abs(samples[: n // 4]).max() > 10 * np.abs(samples[-n // 10:]).max()


def test_sweep_has_same_length():
    assert make_tone(300, 400, 1.0, end_freq=90).shape == make_tone(300, 400, 1.0).shape


def test_every_event_has_a_tone():
    assert set(audio.TONES) == {'flap', 'score', 'gameover', 'start', 'fall'}


def muted_board(monkeypatch, enabled):
    monkeypatch.setattr(SoundBoard, '_init_mixer', lambda self: enabled)
    monkeypatch.setattr(SoundBoard, '_build_sounds', lambda self: None)
    return SoundBoard(volume=50, music_dir='nowhere')


class FakeSound:
    def __init__(self):
        self.played = 0
        self.volume = None

    def set_volume(self, v):
        self.volume = v

    def play(self):
        self.played += 1


def test_play_uses_volume(monkeypatch):
    board = muted_board(monkeypatch, True)
    board.sounds['flap'] = FakeSound()
    board.play('flap')
    assert board.sounds['flap'].played == 1
    assert board.sounds['flap'].volume == 0.5 * audio.EFFECT_GAIN

    board.volume = 0
    board.play('flap')
    assert board.sounds['flap'].played == 1
    # unknown events are ignored
    board.volume = 50
    board.play('nope')


def test_disabled_board_is_silent(monkeypatch):
    board = muted_board(monkeypatch, False)
    board.play('flap')
    board.play_track('track1')
    board.stop_track()
    board.set_volume(10)


def test_missing_track_is_logged(monkeypatch, caplog):
    board = muted_board(monkeypatch, True)

    def fail(path):
        raise pygame.error(f'cannot open {path}')

    monkeypatch.setattr(pygame.mixer.music, 'load', fail)
    board.play_track('track1')
    assert 'background track' in caplog.text
    assert board.track_path('track1').endswith('track1.ogg')


def test_track_none_is_not_loaded(monkeypatch):
    board = muted_board(monkeypatch, True)
    calls = []
    monkeypatch.setattr(pygame.mixer.music, 'load', calls.append)
    board.play_track('none')
    assert calls == []
