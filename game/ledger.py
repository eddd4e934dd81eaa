"""
Board Source / Move Sink

The solver only needs two collaborators: something that reports the current
board (or that no game exists yet) and something that commits a chosen move.
LocalLedger is the in-memory implementation used for local play and tests.
"""

from typing import List, Optional, Protocol, Tuple

from .board import Board, Move, CASH_OUT, ROWS, COLS


class MoveRejectedError(RuntimeError):
    """The sink refused or failed to commit a move."""


class BoardSource(Protocol):
    def fetch_board(self) -> Optional[Board]:
        ...


class MoveSink(Protocol):
    def send_move(self, move: Move) -> None:
        ...


def parse_board(data: Optional[bytes]) -> Optional[Board]:
    """Board from raw account data: first 5 bytes are the rows, shorter means no game."""
    if data is None or len(data) < ROWS:
        return None
    return Board(list(data[:ROWS]))


def is_valid_move(move: Move) -> bool:
    return move == CASH_OUT or (1 <= move[0] <= ROWS and 1 <= move[1] <= COLS)


class LocalLedger:
    """
    In-memory game account.

    - No game until the first move arrives (that move opens a fresh board)
    - Whoever eats the poison cell loses; the board then stays finished
    - An optional opponent (select_action(board) -> Move) replies after
      each accepted move, so autoplay has someone to play against
    """

    def __init__(self, board: Optional[Board] = None, opponent=None):
        self.board = board
        self.opponent = opponent
        self.history: List[Tuple[str, Move]] = []
        self.loser: Optional[str] = None

    def fetch_board(self) -> Optional[Board]:
        return self.board

    def reset(self):
        self.board = None
        self.history = []
        self.loser = None

    def send_move(self, move: Move) -> None:
        move = Move(*move)
        if not is_valid_move(move):
            raise MoveRejectedError(f"Move out of range: {tuple(move)}")

        board = self.board if self.board is not None else Board()
        if board.is_finished():
            raise MoveRejectedError("Game is already over")
        if move != CASH_OUT and not board.is_legal(*move):
            raise MoveRejectedError(f"Cell already eaten: {tuple(move)}")

        self.board = self._play(board, 'player', move)

        if self.opponent is not None and not self.board.is_finished():
            reply = self.opponent.select_action(self.board)
            if reply is not None:
                self.board = self._play(self.board, 'opponent', Move(*reply))

    def _play(self, board: Board, who: str, move: Move) -> Board:
        board = board.apply(*move)
        self.history.append((who, move))
        if board.is_finished():
            self.loser = who
        return board
