"""
Position Table for Chomping Glass

Flat numpy arrays indexed by the Skyline code. Every slot holds an outcome
from the point of view of the player to move, plus the winning reply when
there is one.
"""

from enum import IntEnum
from typing import NamedTuple, Optional

import numpy as np

from game.board import Move
from game.skyline import Skyline, TABLE_SIZE


class Outcome(IntEnum):
    UNEXPLORED = 0
    WINNING = 1
    LOSING = 2
    # Poison already eaten by the opponent: won, nothing left to play
    FINISHED = 3


class Entry(NamedTuple):
    outcome: Outcome
    move: Optional[Move] = None

    @property
    def is_winning(self) -> bool:
        return self.outcome in (Outcome.WINNING, Outcome.FINISHED)

    @property
    def is_losing(self) -> bool:
        return self.outcome == Outcome.LOSING


class PositionTable:
    """
    Win/loss classification for every Skyline code.

    Stores (outcome, reply_row, reply_col) per slot. Replies are 1-based;
    0 means no reply. Filled by TablebaseBuilder and frozen afterwards.
    """

    def __init__(self):
        self.outcomes = np.zeros(TABLE_SIZE, dtype=np.uint8)
        self.reply_rows = np.zeros(TABLE_SIZE, dtype=np.int8)
        self.reply_cols = np.zeros(TABLE_SIZE, dtype=np.int8)
        self.stats = {}
        self.frozen = False

    def outcome_at(self, idx: int) -> Outcome:
        return Outcome(int(self.outcomes[idx]))

    def mark_winning(self, idx: int, move: Move):
        self.outcomes[idx] = Outcome.WINNING
        self.reply_rows[idx] = move.row
        self.reply_cols[idx] = move.col

    def mark_losing(self, idx: int):
        self.outcomes[idx] = Outcome.LOSING

    def mark_finished(self, idx: int):
        self.outcomes[idx] = Outcome.FINISHED

    def freeze(self):
        """Make the arrays read-only; lookups are safe to share after this."""
        for arr in (self.outcomes, self.reply_rows, self.reply_cols):
            arr.flags.writeable = False
        self.frozen = True

    def entry_at(self, idx: int) -> Entry:
        outcome = self.outcome_at(idx)
        if outcome == Outcome.WINNING:
            return Entry(outcome, Move(int(self.reply_rows[idx]), int(self.reply_cols[idx])))
        return Entry(outcome)

    def lookup(self, skyline: Skyline) -> Entry:
        return self.entry_at(skyline.encode())

    def best_reply(self, skyline: Skyline) -> Optional[Move]:
        """Winning reply, or None when losing or the game is already over."""
        return self.lookup(skyline).move

    def count(self, outcome: Outcome) -> int:
        return int(np.count_nonzero(self.outcomes == outcome))

    def get_stats(self) -> dict:
        return {
            'winning': self.count(Outcome.WINNING),
            'losing': self.count(Outcome.LOSING),
            'finished': self.count(Outcome.FINISHED),
            'size_kb': (self.outcomes.nbytes + self.reply_rows.nbytes + self.reply_cols.nbytes) / 1024,
            **self.stats
        }
