import os
import threading

import pytest

from wordgame.errors import CorruptDataError, StorageIOError
from wordgame.models.data import WordRecord
from wordgame.storage import FileStore, score_codec, word_codec
from wordgame.storage.locks import lock_for


def test_missing_file_loads_empty(word_store):
    assert not word_store.exists()
    assert word_store.load_all() == []


def test_save_then_load(word_store, sample_words):
    word_store.save_all(sample_words)
    assert word_store.exists()
    assert word_store.load_all() == sample_words


def test_save_creates_parent_directories(tmp_path, sample_words):
    store = FileStore(tmp_path / "nested" / "dir" / "words.dat", word_codec)
    store.save_all(sample_words)
    assert store.load_all() == sample_words


def test_save_replaces_whole_contents(word_store, sample_words):
    word_store.save_all(sample_words)
    word_store.save_all(sample_words[:1])
    assert word_store.load_all() == sample_words[:1]


def test_no_temporary_files_left_behind(word_store, sample_words, tmp_path):
    word_store.save_all(sample_words)
    word_store.save_all(sample_words[1:])
    assert sorted(p.name for p in tmp_path.iterdir()) == ["words.dat"]


def test_corrupt_file_raises(word_store, words_path):
    words_path.write_bytes(b"\x00\x01 definitely not a record file")
    with pytest.raises(CorruptDataError):
        word_store.load_all()


def test_empty_file_is_corrupt_not_missing(word_store, words_path):
    words_path.write_bytes(b"")
    with pytest.raises(CorruptDataError):
        word_store.load_all()


def test_score_file_read_as_words_is_corrupt(words_path, scores_path):
    FileStore(scores_path, score_codec).save_all([])
    os.replace(scores_path, words_path)
    with pytest.raises(CorruptDataError):
        FileStore(words_path, word_codec).load_all()


def test_failed_write_keeps_previous_contents(word_store, sample_words, monkeypatch, tmp_path):
    word_store.save_all(sample_words)

    def broken_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(os, "replace", broken_replace)
    with pytest.raises(StorageIOError):
        word_store.save_all(sample_words[:1])
    monkeypatch.undo()

    assert word_store.load_all() == sample_words
    assert sorted(p.name for p in tmp_path.iterdir()) == ["words.dat"]


def test_unreadable_path_raises_storage_io_error(tmp_path):
    # A directory where the file should be cannot be read as bytes
    (tmp_path / "words.dat").mkdir()
    store = FileStore(tmp_path / "words.dat", word_codec)
    with pytest.raises(StorageIOError):
        store.load_all()


def test_is_available(word_store, words_path, sample_words):
    assert word_store.is_available() is False
    word_store.save_all(sample_words)
    assert word_store.is_available() is True
    words_path.write_bytes(b"garbage")
    assert word_store.is_available() is False


def test_stores_on_same_path_share_one_lock(words_path):
    first = FileStore(words_path, word_codec)
    second = FileStore(str(words_path), word_codec)
    assert first._lock is second._lock
    assert lock_for(words_path) is first._lock


def test_stores_on_different_paths_have_separate_locks(words_path, scores_path):
    assert lock_for(words_path) is not lock_for(scores_path)


def test_transaction_blocks_readers_until_saved(word_store, sample_words):
    word_store.save_all(sample_words[:1])
    seen = []
    started = threading.Event()

    def reader():
        started.set()
        seen.append(len(word_store.load_all()))

    with word_store.transaction() as txn:
        records = txn.load()
        thread = threading.Thread(target=reader)
        thread.start()
        started.wait(timeout=5)
        thread.join(timeout=0.2)
        assert thread.is_alive()
        txn.save(records + sample_words[1:])

    thread.join(timeout=5)
    assert seen == [len(sample_words)]


def test_exception_inside_transaction_writes_nothing(word_store, sample_words):
    word_store.save_all(sample_words)
    with pytest.raises(RuntimeError):
        with word_store.transaction() as txn:
            records = txn.load()
            records.append(WordRecord(category="food", word="apple", hint="A fruit"))
            raise RuntimeError("abort")
    assert word_store.load_all() == sample_words
