"""
Random Agent - selects random legal moves.
Used as performance floor baseline.
"""
import random
from typing import Optional

from game import Board, Move, POISON_ROW, POISON_COL


class RandomAgent:
    """Agent that plays random legal moves, avoiding the poison while it can."""

    def __init__(self, seed: Optional[int] = None):
        self.name = "Random"
        self.rng = random.Random(seed)

    def select_action(self, board: Board) -> Optional[Move]:
        """Select a random legal move.

        Args:
            board: Current board state

        Returns:
            A random open cell, the poison cell if nothing else is open,
            or None when the game is over
        """
        legal_moves = [m for m in board.get_legal_moves() if m != (POISON_ROW, POISON_COL)]

        if not legal_moves:
            return board.any_legal_move()

        return self.rng.choice(legal_moves)
