"""Flat key/value persistence for scores and settings."""

import json
import os

from .log import get_logger

log = get_logger('storage')

DEFAULTS = {
    'high_score': 0,
    'games_played': 0,
    'total_score': 0,
    'volume': 50,
    'difficulty': 'easy',
    'track': 'none',
}


class MemoryStore:
    def __init__(self, data=None):
        self.data = dict(data or {})

    def get(self, key, default=None):
        if default is None:
            default = DEFAULTS.get(key)
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value


class JsonStore(MemoryStore):
    """Keeps the record in memory and rewrites the whole JSON file on every set.

    A missing or unreadable file starts an empty record; a failed write is
    logged and the in-memory value is kept.
    """

    def __init__(self, path):
        self.path = path
        super().__init__(self._load())

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("could not read %s, starting fresh: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring %s: expected an object, got %s", self.path, type(data).__name__)
            return {}
        return data

    def set(self, key, value):
        super().set(key, value)
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self.data, f)
        except OSError as e:
            log.warning("could not save %s=%r to %s: %s", key, value, self.path, e)
