import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generic, Iterator, List, Sequence, TypeVar, Union

from ..errors import CorruptDataError, StorageIOError
from ..logger import get_logger
from ..models.data import Record
from .codec import RecordCodec
from .locks import lock_for

logger = get_logger(__name__)

R = TypeVar('R', bound=Record)


class FileStore(Generic[R]):
    """All records of one kind, kept in a single file.

    Every load reads the whole file and every save rewrites it. Reads take the
    file's lock shared, writes take it exclusive; ``transaction`` holds it
    exclusive across a load-mutate-save cycle.
    """

    def __init__(self, path: Union[str, Path], codec: RecordCodec[R]):
        self.path = Path(path)
        self.codec = codec
        self._lock = lock_for(self.path)

    def __repr__(self):
        return f'{type(self).__name__}({str(self.path)!r}, kind={self.codec.kind!r})'

    def exists(self) -> bool:
        return self.path.is_file()

    def load_all(self) -> List[R]:
        """Load every record; a missing file holds no records"""
        with self._lock.read_locked():
            return self._read()

    def save_all(self, records: Sequence[R]):
        """Replace the file contents with ``records``"""
        with self._lock.write_locked():
            self._write(records)

    @contextmanager
    def transaction(self) -> Iterator['StoreTransaction[R]']:
        """Hold the write lock for a load-mutate-save cycle"""
        with self._lock.write_locked():
            yield StoreTransaction(self)

    def is_available(self) -> bool:
        """True when the file exists and decodes cleanly; never raises"""
        if not self.exists():
            logger.warning(f'{self.path} does not exist')
            return False
        try:
            self.load_all()
        except Exception as e:
            logger.warning(f'{self.path} is not readable: {e}')
            return False
        return True

    def _read(self) -> List[R]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(f'Failed to read {self.path}: {e}')
            raise StorageIOError(f'Cannot read {self.path}: {e}') from e
        try:
            return self.codec.decode(data)
        except CorruptDataError as e:
            logger.error(f'{self.path} is corrupt: {e}')
            raise

    def _write(self, records: Sequence[R]):
        payload = self.codec.encode(list(records))
        directory = self.path.parent
        temp_path = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=directory, prefix=f'.{self.path.name}.', suffix='.tmp')
            with os.fdopen(fd, 'wb') as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, self.path)
            _sync_directory(directory)
        except OSError as e:
            logger.error(f'Failed to write {self.path}: {e}')
            raise StorageIOError(f'Cannot write {self.path}: {e}') from e
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError:
                    logger.warning(f'Could not remove temporary file {temp_path}')


class StoreTransaction(Generic[R]):
    """Load/save handle valid only inside ``FileStore.transaction``"""

    def __init__(self, store: FileStore[R]):
        self._store = store

    def load(self) -> List[R]:
        return self._store._read()

    def save(self, records: Sequence[R]):
        self._store._write(records)


def _sync_directory(directory: Path):
    # Directory entries cannot be fsynced on Windows
    if os.name == 'nt':
        return
    try:
        fd = os.open(directory, os.O_RDONLY)
        try:
            os.fsync(fd)
        finally:
            os.close(fd)
    except OSError as e:
        logger.warning(f'Could not sync directory {directory}: {e}')
