"""Play logging: console output plus an append-only move log."""
import os
import datetime
from typing import Optional

from game.board import Board


def _timestamp() -> str:
    return datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')


class PlayLogger:
    """Prints to the console and, when log_path is set, appends to a file."""

    def __init__(self, log_path: Optional[str] = None, quiet: bool = False):
        self.log_path = log_path
        self.quiet = quiet
        if log_path and os.path.dirname(log_path):
            os.makedirs(os.path.dirname(log_path), exist_ok=True)

    def log(self, msg: str):
        if not self.quiet:
            print(msg)
        if self.log_path:
            with open(self.log_path, 'a') as f:
                f.write(f"[{_timestamp()}] {msg}\n")

    def log_board(self, tag: str, board: Optional[Board]):
        if board is None:
            self.log(f"{tag}: account missing/closed")
            return
        self.log(f"{tag}:")
        for line in board.render():
            self.log(f"  {line}")
