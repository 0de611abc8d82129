"""Probe sequences for open-addressing hash tables."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Optional

from .strhash import StringHash

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class Prober:
    """Base probe sequence: holds the start slot, table size and probe count.

    ``next()`` returns the next slot index, or ``None`` once every slot of
    the table has been offered.
    """

    def __init__(self) -> None:
        self.start = 0
        self.m = 0
        self.num_probes = 0

    def init(self, start: int, m: int, key: Hashable) -> None:
        """Begin a new probe sequence at ``start`` in a table of size ``m``."""
        del key
        self.start = start
        self.m = m
        self.num_probes = 0

    def next(self) -> Optional[int]:
        raise NotImplementedError("a concrete prober must provide next()")

    def __iter__(self) -> Iterator[int]:
        while (loc := self.next()) is not None:
            yield loc


class LinearProber(Prober):
    """Probe consecutive slots: start, start + 1, start + 2, ... modulo m."""

    def next(self) -> Optional[int]:
        if self.num_probes == self.m:
            return None
        loc = (self.start + self.num_probes) % self.m
        self.num_probes += 1
        return loc


def _modulus_for(table_size: int) -> int:
    """Return the largest double-hash modulus below the table size (or the smallest one)."""
    modulus = DOUBLE_HASH_MOD_VALUES[0]
    for candidate in DOUBLE_HASH_MOD_VALUES:
        if candidate >= table_size:
            break
        modulus = candidate
    return modulus


class DoubleHashProber(Prober):
    """Probe with a key-dependent step: start + i * step modulo m.

    The step is ``modulus - h2(key) % modulus`` where the modulus is the
    largest value of :data:`DOUBLE_HASH_MOD_VALUES` smaller than the table size.
    """

    def __init__(self, h2: Optional[Callable[[Hashable], int]] = None) -> None:
        super().__init__()
        self.h2 = h2 if h2 is not None else StringHash()
        self.step = 0

    def init(self, start: int, m: int, key: Hashable) -> None:
        super().init(start, m, key)
        modulus = _modulus_for(m)
        self.step = modulus - self.h2(key) % modulus

    def next(self) -> Optional[int]:
        if self.num_probes == self.m:
            return None
        loc = (self.start + self.num_probes * self.step) % self.m
        self.num_probes += 1
        return loc