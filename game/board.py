from typing import List, NamedTuple, Optional, Sequence, Tuple

from .constants import ROWS, COLS, POISON_ROW, POISON_COL, FULL_ROW
from .skyline import Skyline


class Move(NamedTuple):
    row: int
    col: int


# Deliberately eat the poison cell (concede / cash out)
CASH_OUT = Move(0, 0)


def column_bit(col: int) -> int:
    """Bit for a 1-based column; column 1 is the most significant bit."""
    return 0x80 >> (col - 1)


class Board:
    """
    Chomping Glass board: 5 rows x 8 columns, poison at (5, 8).

    Each row is a byte whose set bits are eaten cells. Eating (r, c) eats
    columns 1..c of rows 1..r, so the eaten prefix never grows from row 1
    towards the poison row.

    Boards are immutable; apply() returns a new board.
    """
    __slots__ = ('rows',)

    def __init__(self, rows: Optional[Sequence[int]] = None):
        if rows is None:
            rows = (0,) * ROWS
        if len(rows) != ROWS:
            raise ValueError(f"Board needs {ROWS} rows, got {len(rows)}")
        object.__setattr__(self, 'rows', tuple(int(r) & FULL_ROW for r in rows))

    def __setattr__(self, name, value):
        raise AttributeError("Board is immutable")

    def __eq__(self, other):
        return isinstance(other, Board) and self.rows == other.rows

    def __hash__(self):
        return hash(self.rows)

    def __repr__(self):
        return "Board(" + ", ".join(f"0x{r:02X}" for r in self.rows) + ")"

    @classmethod
    def from_skyline(cls, skyline: Skyline) -> 'Board':
        """Inverse codec: rebuild the row bytes from eaten-prefix lengths."""
        return cls([(FULL_ROW << (COLS - p)) & FULL_ROW for p in skyline.parts])

    def to_skyline(self) -> Skyline:
        """Count the leading run of eaten columns in each row."""
        parts = []
        for mask in self.rows:
            run = 0
            while run < COLS and mask & column_bit(run + 1):
                run += 1
            parts.append(run)
        return Skyline(tuple(parts))

    def is_legal(self, row: int, col: int) -> bool:
        if not (1 <= row <= ROWS and 1 <= col <= COLS):
            return False
        return self.rows[row - 1] & column_bit(col) == 0

    def apply(self, row: int, col: int, validate: bool = True) -> 'Board':
        if (row, col) == CASH_OUT:
            row, col = POISON_ROW, POISON_COL
        if validate and not self.is_legal(row, col):
            raise ValueError(f"Illegal move ({row},{col})")

        prefix = (FULL_ROW << (COLS - col)) & FULL_ROW
        rows = list(self.rows)
        for r in range(row):
            rows[r] |= prefix
        return Board(rows)

    def get_legal_moves(self) -> List[Move]:
        return [Move(r, c)
                for r in range(1, ROWS + 1)
                for c in range(1, COLS + 1)
                if self.is_legal(r, c)]

    def any_legal_move(self) -> Optional[Move]:
        """
        First open cell scanning rows bottom-up and columns left to right.

        The poison cell is only returned when nothing else is left.
        """
        for r in range(ROWS, 0, -1):
            for c in range(1, COLS + 1):
                if (r, c) == (POISON_ROW, POISON_COL):
                    continue
                if self.is_legal(r, c):
                    return Move(r, c)
        if self.is_legal(POISON_ROW, POISON_COL):
            return Move(POISON_ROW, POISON_COL)
        return None

    def is_glass_only(self) -> bool:
        """Only the poison cell is left."""
        return (all(r == FULL_ROW for r in self.rows[:-1])
                and self.rows[-1] == FULL_ROW & ~column_bit(POISON_COL))

    def is_finished(self) -> bool:
        """The poison cell has been eaten."""
        return not self.is_legal(POISON_ROW, POISON_COL)

    def count_open(self) -> int:
        return sum(COLS - bin(r).count('1') for r in self.rows)

    def render(self) -> Tuple[str, ...]:
        return tuple(f"row{i + 1}: {r:08b}" for i, r in enumerate(self.rows))
