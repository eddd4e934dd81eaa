"""
Memoized Minimax Agent.
Exhaustive search over raw boards, cached by row bytes.

Independent of the Skyline index, so it doubles as a cross-check for the
position table.
"""
from typing import Dict, Optional, Tuple

from game import Board, Move


class MinimaxAgent:
    """Agent using full-depth minimax with a board-keyed cache."""

    def __init__(self):
        self.name = "Minimax"
        self.cache: Dict[Tuple[int, ...], Tuple[bool, Optional[Move]]] = {}
        self.nodes_searched = 0

    def solve(self, board: Board) -> Tuple[bool, Optional[Move]]:
        """
        Returns:
            (player to move wins, first winning move or None)
        """
        key = board.rows
        if key in self.cache:
            return self.cache[key]
        self.nodes_searched += 1

        if board.is_finished():
            # Opponent ate the poison
            result = (True, None)
        else:
            result = (False, None)
            for move in board.get_legal_moves():
                child_wins, _ = self.solve(board.apply(move.row, move.col, validate=False))
                if not child_wins:
                    result = (True, move)
                    break

        self.cache[key] = result
        return result

    def select_action(self, board: Board) -> Optional[Move]:
        if board.is_finished():
            return None
        wins, move = self.solve(board)
        if wins:
            return move
        return board.any_legal_move()
