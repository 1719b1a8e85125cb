"""Binary encoding of a whole record file.

Layout, integers big-endian::

    magic     4 bytes  b'WGRS'
    version   1 byte
    kind_len  1 byte
    kind      kind_len bytes, ASCII record-kind tag
    count     4 bytes
    count x (length 4 bytes, body: orjson object of the record fields)
    checksum  4 bytes  CRC-32 of everything before it
"""
import struct
import zlib
from typing import Generic, List, Sequence, Type, TypeVar

import orjson
from pydantic import ValidationError as ModelValidationError

from ..errors import CorruptDataError, ValidationError
from ..models.data import Record, ScoreRecord, WordRecord

MAGIC = b'WGRS'
FORMAT_VERSION = 1

_U8 = struct.Struct('>B')
_U32 = struct.Struct('>I')
_MIN_SIZE = len(MAGIC) + _U8.size * 2 + _U32.size * 2

R = TypeVar('R', bound=Record)


class _Reader:
    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def take(self, size: int) -> bytes:
        if size > self.remaining:
            raise CorruptDataError(f'Truncated data: wanted {size} bytes at offset {self._pos}, '
                                   f'{self.remaining} left')
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def u8(self) -> int:
        return _U8.unpack(self.take(_U8.size))[0]

    def u32(self) -> int:
        return _U32.unpack(self.take(_U32.size))[0]


class RecordCodec(Generic[R]):
    """Encodes an ordered sequence of one record type to bytes and back"""

    def __init__(self, kind: str, model: Type[R]):
        tag = kind.encode('ascii')
        if not 0 < len(tag) <= 0xFF:
            raise ValueError(f'Invalid record kind: {kind!r}')
        self.kind = kind
        self.model = model
        self._tag = tag

    def encode(self, records: Sequence[R]) -> bytes:
        buf = bytearray(MAGIC)
        buf += _U8.pack(FORMAT_VERSION)
        buf += _U8.pack(len(self._tag))
        buf += self._tag
        buf += _U32.pack(len(records))
        for record in records:
            body = orjson.dumps(record.model_dump(mode='json'), option=orjson.OPT_SORT_KEYS)
            buf += _U32.pack(len(body))
            buf += body
        buf += _U32.pack(zlib.crc32(buf))
        return bytes(buf)

    def decode(self, data: bytes) -> List[R]:
        if len(data) < _MIN_SIZE:
            raise CorruptDataError(f'Data too short for a {self.kind} file ({len(data)} bytes)')
        payload, trailer = data[:-_U32.size], data[-_U32.size:]

        reader = _Reader(payload)
        if reader.take(len(MAGIC)) != MAGIC:
            raise CorruptDataError('Not a record file: bad magic')
        version = reader.u8()
        if version != FORMAT_VERSION:
            raise CorruptDataError(f'Unsupported format version {version}')
        tag = reader.take(reader.u8())
        if tag != self._tag:
            raise CorruptDataError(f'Expected {self.kind!r} records, found {tag!r}')
        if _U32.unpack(trailer)[0] != zlib.crc32(payload):
            raise CorruptDataError('Checksum mismatch')

        count = reader.u32()
        records = []
        for index in range(count):
            body = reader.take(reader.u32())
            records.append(self._decode_record(index, body))
        if reader.remaining:
            raise CorruptDataError(f'{reader.remaining} unexpected trailing bytes')
        return records

    def _decode_record(self, index: int, body: bytes) -> R:
        try:
            record = self.model.model_validate(orjson.loads(body))
            record.check()
        except (orjson.JSONDecodeError, ModelValidationError, ValidationError) as e:
            raise CorruptDataError(f'Invalid {self.kind} record #{index}: {e}') from e
        return record


word_codec = RecordCodec('word', WordRecord)
score_codec = RecordCodec('score', ScoreRecord)
