"""Small demonstration of the hash table with double-hash probing."""

from __future__ import annotations

import sys

from .hashtable import HashTable
from .probers import DoubleHashProber
from .strhash import StringHash


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration; command-line arguments are ignored."""
    del argv
    table = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if table.find("hi1") is not None:
        print("Found hi1")
        table["hi1"] += 1
        print(f"Incremented hi1's value to: {table['hi1']}")
    if table.find("doesnotexist") is None:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(table)}")
    table.remove("hi7")
    table.remove("hi9")
    print(f"HT size: {len(table)}")
    if table.find("hi9") is not None:
        print("Found hi9")
    else:
        print("Did not find hi9")
    table.insert("hi7", 17)
    print(f"size: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())