"""Word search on a square letter grid, reading right, down and diagonally."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import Optional, TextIO

from .mt19937 import MT19937

# Letter frequencies of the classic tile set, A through Z.
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
LETTER_POOL = "".join(
    chr(ord("A") + offset) * count for offset, count in enumerate(_FREQUENCIES)
)

_DIRECTIONS = ((0, 1), (1, 0), (1, 1))

Board = Sequence[Sequence[str]]


def gen_board(n: int, seed: int) -> list[list[str]]:
    """Return an n-by-n grid of letters drawn with frequency weighting from ``seed``."""
    generator = MT19937(seed)
    pool_size = len(LETTER_POOL)
    return [[LETTER_POOL[generator() % pool_size] for _ in range(n)] for _ in range(n)]


def format_board(board: Board) -> str:
    """Render the grid with each letter right-aligned in a two-character column."""
    return "".join("".join(f"{cell:>2}" for cell in row) + "\n" for row in board)


def print_board(board: Board, out: Optional[TextIO] = None) -> None:
    """Write the rendered grid to ``out`` (standard output by default)."""
    out = sys.stdout if out is None else out
    out.write(format_board(board))


def parse_dict(path: str) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words and return ``(words, proper_prefixes)``.

    The prefix set always holds the empty string.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            text = stream.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:length] for length in range(1, len(word)))
    return words, prefixes


def _longest_along(
    dictionary: set[str] | frozenset[str],
    prefixes: set[str] | frozenset[str],
    board: Board,
    row: int,
    col: int,
    d_row: int,
    d_col: int,
) -> Optional[str]:
    """Return the longest dictionary word read from (row, col) in one direction."""
    size = len(board)
    width = len(board[0]) if size else 0
    word = ""
    best: Optional[str] = None
    while row < size and col < width:
        word += board[row][col]
        in_dict = word in dictionary
        if not in_dict and word not in prefixes:
            break
        if in_dict:
            best = word
        row += d_row
        col += d_col
    return best


def boggle(dictionary: set[str], prefixes: set[str], board: Board) -> set[str]:
    """Find, from every cell and direction, the longest word reading right, down or diagonally."""
    found: set[str] = set()
    size = len(board)
    for row in range(size):
        for col in range(size):
            for d_row, d_col in _DIRECTIONS:
                word = _longest_along(dictionary, prefixes, board, row, col, d_row, d_col)
                if word is not None:
                    found.add(word)
    return found


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Generate a board, search it against a dictionary file and print the words found."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = _atoi(args[0])
    seed = _atoi(args[1])
    board = gen_board(size, seed)
    print_board(board)
    dictionary, prefixes = parse_dict(args[2])
    found = boggle(dictionary, prefixes, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())