"""
dictidx/store.py

In-memory index: headword -> every place it is defined in the .dict file.

Each headword maps to a list of Sense objects, in the order the records
appear in the .idx file:
    {
        "bank": [Sense(offset=1024, size=88),    # river bank
                 Sense(offset=1112, size=140)],  # money bank
        ...
    }

Homographs keep one Sense per record; nothing is merged or deduplicated.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Sense:
    offset: int  # byte offset of the entry in the .dict file
    size: int    # payload length in bytes


class IndexStore:
    """
    Multimap from headword to its senses.

    Built by a single owner (see loader.read_index); once populated it can
    be read from several threads as long as nobody calls add() again.

    Typical usage:
        store = IndexStore()
        store.add("cat", 16, 5)
        store.add("cat", 32, 3)
        store.get("cat")   # [Sense(16, 5), Sense(32, 3)]
        store.get("dog")   # []
    """

    def __init__(self):
        self.map = {}

    def add(self, key: str, offset: int, size: int):
        senses = self.map.get(key)
        if senses is None:
            senses = self.map[key] = []
        senses.append(Sense(offset, size))

    def get(self, key: str) -> List[Sense]:
        return list(self.map.get(key, ()))

    @classmethod
    def from_records(cls, records: Iterable[Tuple[str, int, int]]):
        store = cls()
        for key, offset, size in records:
            store.add(key, offset, size)
        return store

    def keys(self):
        return self.map.keys()

    def items(self):
        return self.map.items()

    def sense_count(self) -> int:
        return sum(len(s) for s in self.map.values())

    def __len__(self):
        return len(self.map)

    def __contains__(self, key):
        return key in self.map

    def __repr__(self):
        return f"IndexStore({len(self.map)} headwords, {self.sense_count()} senses)"
