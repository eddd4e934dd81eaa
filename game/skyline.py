"""
Skyline Index

A reachable board is a partition: the eaten-prefix length of each row,
non-increasing from row 1 to row 5, each part in 0..8. Such a partition is a
monotone lattice path through an 8x5 grid, which maps one-to-one onto a
13-bit word with exactly five 1-bits:

    ceiling = 8
    for each part:  emit (ceiling - part) zeros, ceiling = part, emit a one
    finally:        emit `ceiling` zeros

That gives C(13, 5) = 1287 valid codes, all below 2^13, so the Position Table
can be a flat array indexed directly by the code.

Usage:
    idx = Skyline((8, 8, 8, 8, 7)).encode()   # 0b1111010000000
    Skyline.decode(idx).parts                 # (8, 8, 8, 8, 7)
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, List, Sequence, Tuple

from .constants import ROWS, COLS

TABLE_SIZE = 1 << 16
CODE_BITS = ROWS + COLS


def validate_parts(parts: Sequence[int]) -> Tuple[int, ...]:
    """Reject anything that is not a non-increasing 5-tuple of 0..8."""
    parts = tuple(parts)
    if len(parts) != ROWS:
        raise ValueError(f"Skyline needs {ROWS} parts, got {len(parts)}: {parts}")
    for p in parts:
        if not isinstance(p, int) or not (0 <= p <= COLS):
            raise ValueError(f"Skyline part out of range 0..{COLS}: {parts}")
    for upper, lower in zip(parts, parts[1:]):
        if lower > upper:
            raise ValueError(f"Skyline is not non-increasing: {parts}")
    return parts


def encode_skyline(parts: Sequence[int]) -> int:
    parts = validate_parts(parts)
    idx = 0
    ceiling = COLS
    for part in parts:
        if part < ceiling:
            idx <<= ceiling - part
            ceiling = part
        idx = (idx << 1) | 1
    return idx << ceiling


def is_valid_index(index: int) -> bool:
    """True for the 13-bit words with exactly five 1-bits."""
    return (0 <= index < TABLE_SIZE
            and index >> CODE_BITS == 0
            and bin(index).count('1') == ROWS)


def decode_index(index: int) -> Tuple[int, ...]:
    if not is_valid_index(index):
        raise ValueError(f"Not a valid skyline index: {index}")

    parts = [0] * ROWS
    # Trailing zeros are the final ceiling, i.e. the last part
    parts[-1] = (index & -index).bit_length() - 1
    index >>= parts[-1] + 1

    zeros_seen = 0
    cursor = ROWS - 1
    while index:
        if index & 1:
            cursor -= 1
            parts[cursor] = parts[cursor + 1] + zeros_seen
            zeros_seen = 0
        else:
            zeros_seen += 1
        index >>= 1
    return tuple(parts)


def all_indices() -> List[int]:
    """Every valid code in increasing order."""
    codes = []
    for ones in combinations(range(CODE_BITS), ROWS):
        code = 0
        for bit in ones:
            code |= 1 << bit
        codes.append(code)
    return sorted(codes)


@dataclass(frozen=True)
class Skyline:
    """Per-row eaten-prefix lengths (p1 >= p2 >= ... >= p5)."""
    parts: Tuple[int, ...]

    def encode(self) -> int:
        return encode_skyline(self.parts)

    @classmethod
    def decode(cls, index: int) -> 'Skyline':
        return cls(decode_index(index))

    def is_full(self) -> bool:
        return all(p == COLS for p in self.parts)

    def apply(self, row: int, col: int) -> 'Skyline':
        """Eat (row, col), 1-based: rows 1..row get at least `col` eaten."""
        parts = list(self.parts)
        for r in range(row):
            parts[r] = max(parts[r], col)
        return Skyline(tuple(parts))

    def moves(self) -> Iterator[Tuple[int, int, 'Skyline']]:
        """Yield (row, col, child) for every open cell, top row first."""
        for r in range(ROWS):
            for c in range(self.parts[r] + 1, COLS + 1):
                yield r + 1, c, self.apply(r + 1, c)


FULL = Skyline((COLS,) * ROWS)
GLASS_ONLY = Skyline((COLS,) * (ROWS - 1) + (COLS - 1,))
EMPTY = Skyline((0,) * ROWS)
