import random
from collections import Counter
from typing import Dict, List, Optional, Tuple, Union

from ..errors import DuplicateError, EmptyCategoryError, NotFoundError, ValidationError
from ..logger import get_logger
from ..models.data import LETTERS_ONLY, WordKey, WordRecord, normalize_key
from .store import FileStore

logger = get_logger(__name__)

KeyLike = Union[WordKey, Tuple[str, str]]


def _as_key(key: KeyLike) -> WordKey:
    category, word = key
    return WordKey.of(category, word)


def _index_of(words: List[WordRecord], key: WordKey) -> int:
    for index, entry in enumerate(words):
        if entry.key == key:
            return index
    return -1


class WordCatalog:
    """Words grouped by category, backed by one FileStore"""

    def __init__(self, store: FileStore[WordRecord], rng: Optional[random.Random] = None):
        self.store = store
        self._random = rng or random.Random()

    def all_words(self) -> List[WordRecord]:
        return self.store.load_all()

    def list_categories(self) -> List[str]:
        """Distinct categories in ascending order"""
        return sorted({entry.category for entry in self.store.load_all()})

    def list_by_category(self, category: str) -> List[WordRecord]:
        wanted = normalize_key(category)
        return [entry for entry in self.store.load_all() if entry.category == wanted]

    def random_from_category(self, category: str) -> WordRecord:
        wanted = normalize_key(category)
        if not wanted:
            raise ValidationError('Category cannot be empty.')
        if not LETTERS_ONLY.match(wanted):
            raise ValidationError('Category must contain only letters.')
        words = self.list_by_category(wanted)
        if not words:
            raise EmptyCategoryError(f'No words available in category {wanted!r}.')
        return self._random.choice(words)

    def get(self, category: str, word: str) -> WordRecord:
        key = WordKey.of(category, word)
        for entry in self.store.load_all():
            if entry.key == key:
                return entry
        raise NotFoundError(f"Word '{key.word}' not found in category '{key.category}'.")

    def add(self, record: WordRecord) -> WordRecord:
        record.check()
        with self.store.transaction() as txn:
            words = txn.load()
            if _index_of(words, record.key) >= 0:
                raise DuplicateError(f"The word '{record.word}' already exists in category '{record.category}'.")
            words.append(record)
            txn.save(words)
        logger.info(f"Added word '{record.word}' to category '{record.category}'")
        return record

    def update(self, old_key: KeyLike, record: WordRecord) -> WordRecord:
        """Replace the word at ``old_key`` in place, keeping its position"""
        old_key = _as_key(old_key)
        record.check()
        with self.store.transaction() as txn:
            words = txn.load()
            index = _index_of(words, old_key)
            if index < 0:
                raise NotFoundError(f"Word '{old_key.word}' not found in category '{old_key.category}'.")
            clash = _index_of(words, record.key)
            if clash >= 0 and clash != index:
                raise DuplicateError(f"The word '{record.word}' already exists in category '{record.category}'.")
            words[index] = record
            txn.save(words)
        logger.info(f"Updated word '{old_key.category}/{old_key.word}' -> '{record.category}/{record.word}'")
        return record

    def delete(self, key: KeyLike) -> WordRecord:
        key = _as_key(key)
        with self.store.transaction() as txn:
            words = txn.load()
            index = _index_of(words, key)
            if index < 0:
                raise NotFoundError(f"Word '{key.word}' not found in category '{key.category}'.")
            removed = words.pop(index)
            txn.save(words)
        logger.info(f"Deleted word '{key.category}/{key.word}'")
        return removed

    def statistics(self) -> Dict[str, object]:
        counts = Counter(entry.category for entry in self.store.load_all())
        return {
            'total_words': sum(counts.values()),
            'total_categories': len(counts),
            'per_category': dict(sorted(counts.items())),
        }

    def is_available(self) -> bool:
        return self.store.is_available()
