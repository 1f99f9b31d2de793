# dictidx/info.py


class DictInfo:
    """
    The slice of dictionary metadata the index decoder cares about.

    is64 selects 8-byte offset/size fields for the whole .idx file;
    otherwise fields are 4 bytes wide.
    """

    def __init__(self, is64: bool = False):
        self.is64 = bool(is64)

    @property
    def int_width(self) -> int:
        return 8 if self.is64 else 4

    @classmethod
    def from_offset_bits(cls, bits: int):
        """Build from an `idxoffsetbits` value (32 or 64)."""
        if bits not in (32, 64):
            raise ValueError(f"idxoffsetbits must be 32 or 64, got {bits}")
        return cls(is64=(bits == 64))

    def __repr__(self):
        return f"DictInfo(is64={self.is64})"
