from .board import Board, Move, CASH_OUT, ROWS, COLS, POISON_ROW, POISON_COL
from .ledger import BoardSource, MoveSink, MoveRejectedError, LocalLedger, parse_board

__all__ = [
    'Board', 'Move', 'CASH_OUT', 'ROWS', 'COLS', 'POISON_ROW', 'POISON_COL',
    'BoardSource', 'MoveSink', 'MoveRejectedError', 'LocalLedger', 'parse_board',
]
