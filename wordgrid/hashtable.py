"""Open-addressing hash table with lazy deletion and prime-sized growth."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Optional, TextIO

from .probers import LinearProber, Prober

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)


class HashTableError(RuntimeError):
    """Raised when the table has no free slot or cannot grow any further."""


@dataclass
class _Slot:
    key: Any
    value: Any
    deleted: bool = False


class HashTable:
    """Map keys to values using open addressing and a pluggable probe sequence.

    Removal only marks an entry as deleted; such entries are still reported
    by lookups with the same key until the table is resized, which drops them.
    """

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Optional[Prober] = None,
        hash_func: Optional[Callable[[Hashable], int]] = None,
        key_equal: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hash = hash_func if hash_func is not None else hash
        self._equal = key_equal if key_equal is not None else operator.eq
        self._capacity_index = 0
        self._table: list[Optional[_Slot]] = [None] * CAPACITIES[0]
        self._count = 0
        self._total_probes = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return not self.empty()

    def __contains__(self, key: Hashable) -> bool:
        return self.find(key) is not None

    def __getitem__(self, key: Hashable) -> Any:
        return self.at(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        """Replace the value of an existing key; raise KeyError if it is absent."""
        slot = self._find_slot(key)
        if slot is None:
            raise KeyError(key)
        slot.value = value

    def empty(self) -> bool:
        """Return True when no live entries remain."""
        return self._count == 0

    def insert(self, key: Hashable, value: Any) -> None:
        """Add ``key`` with ``value``, or update the value if the key is present."""
        if (self._count + 1) / len(self._table) > self._resize_alpha:
            self._resize()
        idx = self._probe(key)
        if idx is None:
            raise HashTableError("HashTable full")
        slot = self._table[idx]
        if slot is None or slot.deleted:
            self._table[idx] = _Slot(key, value)
            self._count += 1
        else:
            slot.value = value

    def remove(self, key: Hashable) -> None:
        """Mark the entry for ``key`` as deleted; do nothing if it is absent."""
        idx = self._probe(key)
        if idx is None:
            return
        slot = self._table[idx]
        if slot is not None and not slot.deleted and self._equal(slot.key, key):
            slot.deleted = True
            self._count -= 1

    def find(self, key: Hashable) -> Optional[tuple[Any, Any]]:
        """Return the stored ``(key, value)`` pair, or None if there is none."""
        slot = self._find_slot(key)
        if slot is None:
            return None
        return slot.key, slot.value

    def at(self, key: Hashable) -> Any:
        """Return the value stored for ``key``; raise KeyError if there is none."""
        slot = self._find_slot(key)
        if slot is None:
            raise KeyError(key)
        return slot.value

    def report_all(self, out: TextIO = None) -> None:
        """Write one ``Bucket i: key value`` line per occupied slot."""
        out = sys.stdout if out is None else out
        for index, slot in enumerate(self._table):
            if slot is not None:
                out.write(f"Bucket {index}: {slot.key} {slot.value}\n")

    def total_probes(self) -> int:
        """Return the number of probe steps made since the last reset."""
        return self._total_probes

    def clear_total_probes(self) -> None:
        self._total_probes = 0

    def _find_slot(self, key: Hashable) -> Optional[_Slot]:
        idx = self._probe(key)
        if idx is None:
            return None
        return self._table[idx]

    def _probe(self, key: Hashable) -> Optional[int]:
        capacity = CAPACITIES[self._capacity_index]
        start = self._hash(key) % capacity
        self._prober.init(start, capacity, key)
        loc = self._prober.next()
        self._total_probes += 1
        while loc is not None:
            slot = self._table[loc]
            if slot is None or self._equal(slot.key, key):
                return loc
            loc = self._prober.next()
            self._total_probes += 1
        return None

    def _resize(self) -> None:
        if self._capacity_index + 1 >= len(CAPACITIES):
            raise HashTableError("No More capacities")
        self._capacity_index += 1
        old = self._table
        self._table = [None] * CAPACITIES[self._capacity_index]
        self._count = 0
        for slot in old:
            if slot is not None and not slot.deleted:
                self.insert(slot.key, slot.value)