from pathlib import Path
from typing import Optional, Union

from ..config import StorageConfig, storage
from ..core.seed import seed_catalog
from ..logger import get_logger
from .codec import score_codec, word_codec
from .score_ledger import ScoreLedger
from .store import FileStore
from .word_catalog import WordCatalog

logger = get_logger(__name__)


class StorageManager:
    """Owns the word and score stores and the catalog/ledger built on them"""

    def __init__(self, words_path: Union[str, Path], scores_path: Union[str, Path]):
        self.word_store = FileStore(words_path, word_codec)
        self.score_store = FileStore(scores_path, score_codec)
        self.catalog = WordCatalog(self.word_store)
        self.ledger = ScoreLedger(self.score_store)
        self._initialized = False

    @classmethod
    def from_config(cls, config: Optional[StorageConfig] = None) -> 'StorageManager':
        config = config or storage
        return cls(config.words_path, config.scores_path)

    def initialize(self, seed_words: bool = False):
        """Prepare both files and report their readiness.

        The score file starts out as an empty ledger so that it is ready before
        the first game is recorded. The word file is only created when
        ``seed_words`` is set; without words there is nothing to play.
        """
        if self._initialized:
            return
        if seed_words:
            seed_catalog(self.catalog)
        with self.score_store.transaction() as txn:
            if not self.score_store.exists():
                txn.save([])
                logger.info(f'Created empty score file {self.score_store.path}')
        for store in (self.word_store, self.score_store):
            if not store.exists():
                logger.warning(f'{store.path} does not exist')
            elif not store.is_available():
                logger.error(f'{store.path} exists but cannot be read')
        self._initialized = True
        logger.info('Storage manager initialized successfully')

    def close(self):
        self._initialized = False
        logger.info('Storage manager closed')
