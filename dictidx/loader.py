"""
dictidx/loader.py

Loads a dictionary index from disk into an IndexStore.

    path --(open, gunzip if *.gz)--> bytes --ByteRecordDecoder--> IndexStore

Either the fully built store is returned or an IdxError is raised; a
partially populated store never escapes.
"""

from __future__ import annotations

import gzip
import os
import zlib

from dictidx.errors import DecompressionFailure, SourceUnavailable
from dictidx.idxio import decode_records
from dictidx.info import DictInfo
from dictidx.paths import GZ_SUFFIX, IDX_PATH
from dictidx.store import IndexStore


def open_idx_stream(path):
    """Open an index for binary reading, transparently gunzipping *.gz files."""
    path = os.fspath(path)
    if path.endswith(GZ_SUFFIX):
        return gzip.open(path, "rb")
    return open(path, "rb")


def read_index_bytes(path) -> bytes:
    """Read the whole (decompressed) index into memory."""
    path = os.fspath(path)
    try:
        f = open_idx_stream(path)
    except OSError as e:
        raise SourceUnavailable(path, e.strerror or str(e)) from e
    with f:
        try:
            return f.read()
        # BadGzipFile is an OSError, so it has to be caught first
        except (gzip.BadGzipFile, zlib.error, EOFError) as e:
            raise DecompressionFailure(path, str(e) or type(e).__name__) from e
        except OSError as e:
            raise SourceUnavailable(path, e.strerror or str(e)) from e


def build_store(data, width: int) -> IndexStore:
    """Decode already-decompressed index bytes into a new store."""
    return IndexStore.from_records(decode_records(data, width))


def read_index(path=IDX_PATH, info: DictInfo | None = None) -> IndexStore:
    """
    Load the index at `path`.

    Args:
        path: .idx file, or .idx.gz for a gzip-compressed one
        info: dictionary metadata; info.is64 selects 8-byte offset/size
              fields. Defaults to 32-bit fields.

    Raises:
        SourceUnavailable, DecompressionFailure, TruncatedRecord
    """
    if info is None:
        info = DictInfo()
    data = read_index_bytes(path)
    store = build_store(data, info.int_width)
    print(f"[IndexStore] loaded {len(store)} headwords, "
          f"{store.sense_count()} senses from {os.fspath(path)}")
    return store
