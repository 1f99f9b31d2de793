"""
dictidx/idxio.py

Reader and writer for the dictionary index (.idx) record stream.

The file is a flat run of back-to-back records:

    <key bytes> 0x00 <offset: W bytes, big-endian> <size: W bytes, big-endian>

W is 4 or 8 for the whole file (see DictInfo.is64). Keys are arbitrary
non-zero bytes; offset/size locate the entry's payload in the companion
.dict file.
"""

from __future__ import annotations

import gzip
import os
import struct
from enum import Enum
from typing import Iterable, Iterator, Tuple

from dictidx.errors import TruncatedRecord
from dictidx.paths import GZ_SUFFIX

Record = Tuple[str, int, int]  # (key, offset, size)

_UINT = {
    4: struct.Struct(">I"),
    8: struct.Struct(">Q"),
}


def _uint_codec(width: int) -> struct.Struct:
    codec = _UINT.get(width)
    if codec is None:
        raise ValueError(f"Integer width must be 4 or 8 bytes, got {width!r}")
    return codec


def decode_key(raw: bytes) -> str:
    # surrogateescape keeps undecodable bytes intact instead of rejecting them
    return raw.decode("utf-8", "surrogateescape")


def encode_key(key) -> bytes:
    if isinstance(key, (bytes, bytearray)):
        raw = bytes(key)
    else:
        raw = key.encode("utf-8", "surrogateescape")
    if 0 in raw:
        raise ValueError(f"Key must not contain a zero byte: {key!r}")
    return raw


class State(Enum):
    READING_KEY = "key"
    READING_OFFSET = "offset"
    READING_SIZE = "size"


class ByteRecordDecoder:
    """
    Single-pass state machine over an index byte stream.

    State:
      - state: which field is being accumulated (key / offset / size)
      - _buf:  bytes collected so far for that field
      - _key, _offset: finished fields of the record in progress

    Bytes can arrive in chunks of any size via feed(); records that straddle
    chunk boundaries are stitched together through _buf. Each feed() generator
    must be exhausted before the next chunk is fed. close() checks that the
    stream stopped exactly at a record boundary.
    """

    __slots__ = ("width", "_uint", "state", "_buf", "_key", "_offset",
                 "records", "consumed")

    def __init__(self, width: int):
        self._uint = _uint_codec(width)
        self.width = width
        self.state = State.READING_KEY
        self._buf = bytearray()
        self._key = ""
        self._offset = 0
        self.records = 0    # complete records emitted
        self.consumed = 0   # bytes taken from input so far

    @property
    def at_boundary(self) -> bool:
        return self.state is State.READING_KEY and not self._buf

    def feed(self, chunk) -> Iterator[Record]:
        """Consume a chunk and yield every record completed inside it."""
        if not isinstance(chunk, (bytes, bytearray)):
            chunk = bytes(chunk)
        n = len(chunk)
        pos = 0
        while pos < n:
            if self.state is State.READING_KEY:
                end = chunk.find(0, pos)
                if end < 0:
                    # key continues into the next chunk
                    self._buf += chunk[pos:]
                    self.consumed += n - pos
                    pos = n
                    continue
                self._buf += chunk[pos:end]
                self._key = decode_key(bytes(self._buf))
                self._buf.clear()
                self.consumed += end + 1 - pos
                pos = end + 1
                self.state = State.READING_OFFSET
                continue

            # offset / size: exactly `width` bytes each
            take = min(self.width - len(self._buf), n - pos)
            self._buf += chunk[pos:pos + take]
            self.consumed += take
            pos += take
            if len(self._buf) < self.width:
                continue
            value = self._uint.unpack(self._buf)[0]
            self._buf.clear()

            if self.state is State.READING_OFFSET:
                self._offset = value
                self.state = State.READING_SIZE
            else:
                self.state = State.READING_KEY
                self.records += 1
                yield self._key, self._offset, value

    def close(self) -> None:
        if not self.at_boundary:
            raise TruncatedRecord(
                state=self.state.name,
                pending=len(self._buf),
                offset=self.consumed,
                records=self.records,
            )


def decode_records(data, width: int) -> Iterator[Record]:
    """
    Decode a complete in-memory index.

    Returns a lazy, one-shot iterator over (key, offset, size). Raises
    TruncatedRecord from the final next() if the data ends mid-record;
    the incomplete tail is never yielded.
    """
    decoder = ByteRecordDecoder(width)  # validates width eagerly

    def _run():
        yield from decoder.feed(data)
        decoder.close()

    return _run()


def encode_record(key, offset: int, size: int, width: int) -> bytes:
    """
    Encode one record. Numbers wider than `width` bytes keep only their
    low-order `width` bytes, the same value a W-byte reader would see.
    """
    codec = _uint_codec(width)
    if offset < 0 or size < 0:
        raise ValueError(f"Offset and size must be non-negative, got ({offset}, {size})")
    mask = (1 << (8 * width)) - 1
    return encode_key(key) + b"\x00" + codec.pack(offset & mask) + codec.pack(size & mask)


class IdxWriter:
    """
    Writes (key, offset, size) records to an .idx file.

    compress=None gzips the output iff the path ends with GZ_SUFFIX.

    Usage:
        with IdxWriter("data/words.idx", width=4) as w:
            w.add("cat", 16, 5)
    """

    def __init__(self, path, width: int = 4, compress: bool | None = None):
        _uint_codec(width)
        self.path = os.fspath(path)
        self.width = width
        if compress is None:
            compress = self.path.endswith(GZ_SUFFIX)
        self.compress = compress
        self.file = gzip.open(self.path, "wb") if compress else open(self.path, "wb")
        self.records = 0

    def add(self, key, offset: int, size: int) -> None:
        self.file.write(encode_record(key, offset, size, self.width))
        self.records += 1

    def add_many(self, records: Iterable[Record]) -> None:
        for key, offset, size in records:
            self.add(key, offset, size)

    def close(self) -> None:
        if self.file.closed:
            return
        self.file.close()
        print(f"IdxWriter: wrote {self.records} records to {self.path}")

    def __enter__(self): return self
    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
