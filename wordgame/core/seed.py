"""Default word list and seeding of an empty word file.

Run ``python -m wordgame.core.seed`` to create the configured word file.
"""
from collections import Counter
from typing import List

from ..config import storage
from ..logger import get_logger
from ..models.data import WordRecord

logger = get_logger(__name__)

DEFAULT_WORDS = [
    WordRecord(category='animals', word='dog', hint='A loyal animal that barks'),
    WordRecord(category='animals', word='cat', hint='A soft animal that meows'),
    WordRecord(category='animals', word='lion', hint='The king of the jungle'),
    WordRecord(category='animals', word='elephant', hint='A large animal with a trunk'),
    WordRecord(category='animals', word='bird', hint='A creature that can fly in the sky'),
    WordRecord(category='colors', word='red', hint='Color of blood and fire'),
    WordRecord(category='colors', word='blue', hint='Color of the sky and the sea'),
    WordRecord(category='colors', word='green', hint='Color of grass and nature'),
    WordRecord(category='colors', word='yellow', hint='Color of the sun and gold'),
    WordRecord(category='food', word='apple', hint='A round red or green fruit'),
    WordRecord(category='food', word='bread', hint='A basic food made from flour'),
    WordRecord(category='food', word='pizza', hint='A round Italian dish with sauce'),
    WordRecord(category='food', word='banana', hint='A yellow curved fruit'),
    WordRecord(category='body', word='hand', hint='A limb at the end of the arm'),
    WordRecord(category='body', word='eye', hint='An organ used for seeing'),
    WordRecord(category='body', word='heart', hint='An organ that pumps blood'),
    WordRecord(category='nature', word='tree', hint='A tall plant with leaves'),
    WordRecord(category='nature', word='flower', hint='A colorful part of a plant'),
    WordRecord(category='nature', word='mountain', hint='A very tall hill'),
]


def seed_catalog(catalog, words: List[WordRecord] = DEFAULT_WORDS) -> int:
    """Write ``words`` to the catalog's file if the file does not exist yet.

    Returns the number of words written, 0 when the file was already there.
    """
    store = catalog.store
    with store.transaction() as txn:
        if store.exists():
            return 0
        records = [word.check() for word in words]
        txn.save(records)
    counts = Counter(word.category for word in records)
    summary = ', '.join(f'{category}: {count}' for category, count in counts.most_common())
    logger.info(f'Seeded {store.path} with {len(records)} words ({summary})')
    return len(records)


def main():
    from ..storage import StorageManager

    manager = StorageManager.from_config(storage)
    written = seed_catalog(manager.catalog)
    if not written:
        logger.info(f'{manager.word_store.path} already exists, nothing to do')


if __name__ == '__main__':
    main()
