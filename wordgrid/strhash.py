"""Polynomial string hash over base-36 digit groups with randomisable weights."""

from __future__ import annotations

import time

from .mt19937 import MT19937

_MASK64 = (1 << 64) - 1
_MASK32 = 0xFFFFFFFF
_GROUPS = 5
_GROUP_LEN = 6
_BASE = 36

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def _char_value(code: int) -> int:
    """Map a signed character code to its base-36 digit (wrapping to 64 bits)."""
    if ord("0") <= code <= ord("9"):
        return 26 + code - ord("0")
    if ord("A") <= code <= ord("Z"):
        code = code - ord("A") + ord("a")
    return (code - ord("a")) & _MASK64


def letter_digit_to_number(letter: str) -> int:
    """Convert 'a'-'z' (either case) to 0-25 and '0'-'9' to 26-35."""
    if len(letter) != 1:
        raise ValueError("expected a single character")
    return _char_value(ord(letter))


class StringHash:
    """Hash a string by weighting base-36 values of its trailing 6-character groups."""

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, key: str) -> int:
        codes = [b - 256 if b > 127 else b for b in key.encode("utf-8")]
        weights = [0] * _GROUPS
        end = len(codes)
        for group in range(_GROUPS - 1, -1, -1):
            if end <= 0:
                break
            chunk = codes[max(0, end - _GROUP_LEN):end]
            end -= len(chunk)
            value = 0
            place = 1
            for code in reversed(chunk):
                value = (value + _char_value(code) * place) & _MASK64
                place = (place * _BASE) & _MASK64
            weights[group] = value
        total = sum(r * w for r, w in zip(self.r_values, weights))
        return total & _MASK64

    def generate_r_values(self) -> None:
        """Replace the weights with values drawn from a clock-seeded generator."""
        generator = MT19937(time.time_ns() & _MASK32)
        self.r_values = [generator() for _ in range(_GROUPS)]