"""
Chomping Glass Solver

Plays the table's winning reply when there is one, otherwise keeps the game
going with any legal cell.
"""

import threading
from typing import Optional

from game.board import Board, Move
from .tablebase import Entry, PositionTable

_TABLE: Optional[PositionTable] = None
_TABLE_LOCK = threading.Lock()


def get_position_table(show_progress: bool = False) -> PositionTable:
    """
    Process-wide table, built on first use.

    Concurrent first callers wait on the lock while one of them builds;
    once set, reads do not touch the lock.
    """
    global _TABLE
    table = _TABLE
    if table is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                from .builder import build_position_table
                _TABLE = build_position_table(show_progress=show_progress)
            table = _TABLE
    return table


def default_solver() -> 'ChompSolver':
    return ChompSolver(get_position_table())


class ChompSolver:
    """Move chooser over an injected PositionTable."""

    def __init__(self, table: PositionTable):
        self.table = table

    def classify(self, board: Board) -> Entry:
        """Outcome for the player to move, with the winning reply if any."""
        return self.table.lookup(board.to_skyline())

    def forced_win(self, board: Board) -> Optional[Move]:
        return self.table.best_reply(board.to_skyline())

    def any_legal_move(self, board: Board) -> Optional[Move]:
        return board.any_legal_move()

    def best_move(self, board: Board) -> Optional[Move]:
        """
        Move to play on `board`, or None when there is nothing to play.

        Returns:
            - None on the glass-only board (game over)
            - the forced win if the position is winning
            - otherwise the first legal cell from any_legal_move()
        """
        if board.is_glass_only():
            return None
        move = self.forced_win(board)
        if move is not None:
            return move
        return self.any_legal_move(board)
