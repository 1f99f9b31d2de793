# dictidx/errors.py
"""
Error types raised while loading a dictionary index.

    IdxError
      ├── SourceUnavailable    file cannot be opened / read
      ├── DecompressionFailure gzip stream is malformed
      └── TruncatedRecord      stream ends inside a key, offset or size field
"""


class IdxError(Exception):
    """Base class for every index loading failure."""


class SourceUnavailable(IdxError, OSError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: cannot read index ({reason})")
        self.path = path


class DecompressionFailure(IdxError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: corrupt gzip stream ({reason})")
        self.path = path


class TruncatedRecord(IdxError, EOFError):
    """
    Raised when input runs out anywhere except exactly at a record boundary.

    Attributes:
        state:   name of the decoder state the stream ended in
        pending: number of bytes buffered for the unfinished field
        offset:  absolute stream position where input ended
        records: number of complete records decoded before the tail
    """

    def __init__(self, state: str, pending: int, offset: int, records: int):
        super().__init__(
            f"Truncated record at byte {offset}: stream ended in {state} "
            f"with {pending} pending byte(s) after {records} complete record(s)"
        )
        self.state = state
        self.pending = pending
        self.offset = offset
        self.records = records
