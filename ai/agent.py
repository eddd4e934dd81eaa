from typing import Optional

from game import Board, Move
from tablebase.solver import ChompSolver, default_solver


class ChompAgent:
    """Perfect player backed by the position table."""

    def __init__(self, solver: Optional[ChompSolver] = None):
        self.name = "Tablebase"
        self.solver = solver or default_solver()

    def select_action(self, board: Board) -> Optional[Move]:
        """Best move on `board`; the poison cell only when it is all that is left."""
        move = self.solver.best_move(board)
        if move is None and board.is_glass_only():
            return board.any_legal_move()
        return move
