import json
import logging

from flappy_flame.storage import JsonStore, MemoryStore


def test_missing_file_yields_defaults(tmp_path):
    store = JsonStore(str(tmp_path / 'save.json'))
    assert store.get('high_score') == 0
    assert store.get('volume') == 50
    assert store.get('difficulty') == 'easy'
    assert store.get('track') == 'none'
    assert store.get('unknown') is None


def test_set_writes_through(tmp_path):
    path = tmp_path / 'save.json'
    store = JsonStore(str(path))
    store.set('high_score', 12)
    store.set('track', 'track3')
    assert json.loads(path.read_text()) == {'high_score': 12, 'track': 'track3'}

    again = JsonStore(str(path))
    assert again.get('high_score') == 12
    assert again.get('track') == 'track3'


def test_corrupt_file_starts_fresh(tmp_path, caplog):
    path = tmp_path / 'save.json'
    path.write_text('{not json')
    with caplog.at_level(logging.WARNING, logger='flappy.storage'):
        store = JsonStore(str(path))
    assert store.get('games_played') == 0
    assert 'starting fresh' in caplog.text


def test_non_object_file_is_ignored(tmp_path):
    path = tmp_path / 'save.json'
    path.write_text('[1, 2, 3]')
    assert JsonStore(str(path)).get('high_score') == 0


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    # a directory cannot be opened for writing
    store = JsonStore(str(tmp_path))
    with caplog.at_level(logging.WARNING, logger='flappy.storage'):
        store.set('high_score', 9)
    assert store.get('high_score') == 9
    assert 'could not save' in caplog.text


def test_memory_store_explicit_default():
    store = MemoryStore({'volume': 20})
    assert store.get('volume') == 20
    assert store.get('missing', 'x') == 'x'
