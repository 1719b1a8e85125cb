"""Error kinds raised by the word catalog, the score ledger and their stores.

Client errors describe bad input or a missing/duplicate target and are safe to
show to the caller. Storage errors mean the backing file could not be read or
written.
"""


class WordGameError(Exception):
    """Base class for every error raised by this package"""


class ClientError(WordGameError):
    """The request cannot be satisfied with the data supplied"""


class ValidationError(ClientError):
    """Caller-supplied data violates a record invariant"""


class DuplicateError(ClientError):
    """A record with the same key already exists"""


class NotFoundError(ClientError):
    """The record targeted by an update or delete does not exist"""


class EmptyCategoryError(ClientError):
    """A category query matched no words"""


class StorageError(WordGameError):
    """The backing file could not be used"""


class CorruptDataError(StorageError):
    """The backing file exists but its contents cannot be decoded"""


class StorageIOError(StorageError):
    """Reading or writing the backing file failed at the OS level"""
