import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Union
from weakref import WeakValueDictionary


class ReadWriteLock:
    """Shared/exclusive lock for threads.

    Any number of readers may hold the lock together; a writer holds it alone.
    Waiting writers block new readers so a steady stream of reads cannot starve
    a write. Not reentrant.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError('release_read() called without a read lock held')
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            if not self._writer:
                raise RuntimeError('release_write() called without the write lock held')
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()


# Entries live as long as some store holds the lock
_locks: "WeakValueDictionary[Path, ReadWriteLock]" = WeakValueDictionary()
_locks_guard = threading.Lock()


def lock_for(path: Union[str, Path]) -> ReadWriteLock:
    """Return the one lock shared by every store opened on ``path``"""
    key = Path(path).resolve()
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = ReadWriteLock()
        return lock
