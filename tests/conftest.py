"""
Pytest fixtures: stores, catalog and ledger over temporary files.
"""

from datetime import datetime, timedelta, timezone

import pytest

from wordgame.models.data import WordRecord
from wordgame.storage import FileStore, ScoreLedger, StorageManager, WordCatalog, score_codec, word_codec


class StepClock:
    """Deterministic clock advancing one second per call"""

    def __init__(self, start=datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def words_path(tmp_path):
    return tmp_path / "words.dat"


@pytest.fixture
def scores_path(tmp_path):
    return tmp_path / "scores.dat"


@pytest.fixture
def word_store(words_path):
    return FileStore(words_path, word_codec)


@pytest.fixture
def score_store(scores_path):
    return FileStore(scores_path, score_codec)


@pytest.fixture
def catalog(word_store):
    return WordCatalog(word_store)


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def ledger(score_store, clock):
    return ScoreLedger(score_store, clock=clock)


@pytest.fixture
def sample_words():
    return [
        WordRecord(category="animals", word="dog", hint="A loyal animal that barks"),
        WordRecord(category="animals", word="cat", hint="A soft animal that meows"),
        WordRecord(category="colors", word="red", hint="Color of blood and fire"),
    ]


@pytest.fixture
def seeded_catalog(catalog, sample_words):
    catalog.store.save_all(sample_words)
    return catalog


@pytest.fixture
def manager(words_path, scores_path):
    return StorageManager(words_path, scores_path)
