from .base import StorageManager
from .codec import RecordCodec, score_codec, word_codec
from .score_ledger import ScoreLedger
from .store import FileStore
from .word_catalog import WordCatalog

__all__ = [
    'FileStore',
    'RecordCodec',
    'ScoreLedger',
    'StorageManager',
    'WordCatalog',
    'score_codec',
    'word_codec',
]
