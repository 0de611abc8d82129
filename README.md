# wordgrid

A small toolkit around letter grids and hashing:

- `wordgrid.boggle`: generates a square board from Scrabble letter
  frequencies and finds dictionary words that run right, down or diagonally
  (down-right) from any cell;
- `wordgrid.strhash`: a case-insensitive polynomial string hash over `a-z`
  and `0-9`;
- `wordgrid.probers` and `wordgrid.hashtable`: an open-addressing hash table
  with linear or double-hash probing;
- `wordgrid.mt19937`: a 32-bit Mersenne Twister whose output matches the
  standard `mt19937` engine, so that a given seed always gives the same board.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Generate a board and search it against a dictionary file (words separated by
whitespace):

```
wordgrid-boggle <size> <seed> <dictionary file>
```

The board is printed first, followed by the number of words found and the
words in sorted order, separated by commas. From each cell and direction only
the longest word reading from that cell is reported. With fewer than three
arguments a usage line is printed and the command exits with status 1.

Hash a string with the fixed, reproducible multipliers:

```
wordgrid-strhash abc
```

prints `h(abc)=9953503400`.

Run a short demonstration of the hash table with double-hash probing:

```
wordgrid-ht-demo
```

## Library use

```python
from wordgrid.boggle import gen_board, format_board, parse_dict, boggle
from wordgrid.strhash import StringHash
from wordgrid.probers import DoubleHashProber
from wordgrid.hashtable import HashTable

board = gen_board(4, 42)
print(format_board(board))
words, prefixes = parse_dict("words.txt")
print(sorted(boggle(words, prefixes, board)))

h = StringHash(debug=True)
assert h("abc") == 9953503400
assert h("ABC") == h("abc")

table = HashTable(0.7, DoubleHashProber(StringHash(debug=True)))
table.insert("hi1", 1)
table["hi1"] += 1
print(table["hi1"], len(table))
table.remove("hi1")
```

Notes on behaviour:

- `parse_dict` raises `ValueError` when the file cannot be opened. It returns
  the set of words and the set of their proper prefixes; the prefix set always
  contains the empty string.
- `StringHash(debug=True)` uses fixed multipliers; `StringHash(debug=False)`
  (or calling `generate_r_values()`) draws fresh ones from a generator seeded
  by the clock. Only the last 30 characters of a key, in five groups of six,
  contribute to the hash.
- `HashTable.insert` adds a key or updates its value. Assigning with
  `table[key] = value` only updates an existing key and raises `KeyError`
  otherwise. `at` and `[]` raise `KeyError` for a missing key; `find` returns
  a `(key, value)` pair or `None`.
- `remove` only marks an entry as deleted: it no longer counts towards
  `len()`, but lookups by that key can still return it until the table next
  grows, which drops deleted entries.
- The table grows through a fixed sequence of prime capacities once the load
  factor would exceed the threshold given to it (0.4 by default), and raises
  `HashTableError` when it cannot grow further or finds no free slot.
- `report_all(out)` writes one `Bucket i: key value` line per occupied slot;
  `total_probes()` and `clear_total_probes()` track probing work.

## What it does not do

The board search follows only three straight directions (right, down and
down-right); it does not trace paths that turn, and it does not score words.