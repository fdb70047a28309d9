import random

import pytest

from flappy_flame.simulation import Session
from flappy_flame.storage import MemoryStore


class RecordingAudio:
    def __init__(self):
        self.events = []
        self.tracks = []
        self.stops = 0
        self.volume = None

    def play(self, event):
        self.events.append(event)

    def play_track(self, track):
        self.tracks.append(track)

    def stop_track(self):
        self.stops += 1

    def set_volume(self, volume):
        self.volume = volume


class FailingStore(MemoryStore):
    def set(self, key, value):
        raise OSError('disk full')


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def session(store, audio):
    return Session(store=store, audio=audio, rng=random.Random(1234))
