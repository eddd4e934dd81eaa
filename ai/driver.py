"""
Move driver: reads the board from a BoardSource, picks a move and commits it
to a MoveSink.

Two modes:
  - run_single_move: play (at most) one move and report the new board
  - run_autoplay:    keep playing until the game ends or a limit is hit
"""
import time
from dataclasses import dataclass
from typing import Callable, Optional

from config import DriverConfig
from game.board import Board, Move, CASH_OUT
from game.ledger import BoardSource, MoveSink
from tablebase.solver import ChompSolver
from ai.utils import PlayLogger

# Opening used if the solver has nothing to say about the empty board
DEFAULT_OPENING = Move(5, 1)

STOP_GLASS_ONLY = "glass_only"
STOP_NO_MOVE = "no_move"
STOP_CASH_OUT = "cash_out"
STOP_MAX_MOVES = "max_moves"
STOP_MISSING = "missing_game"
STOP_MOVED = "moved"
STOP_OPENED = "opened"


@dataclass
class DriverReport:
    moves_sent: int = 0
    stop_reason: str = ""
    final_board: Optional[Board] = None


def _opening_move(solver: ChompSolver) -> Move:
    return solver.best_move(Board()) or DEFAULT_OPENING


def _manual_move(config: DriverConfig) -> Optional[Move]:
    if config.row is not None and config.col is not None:
        return Move(config.row, config.col)
    return None


def _choose(solver: ChompSolver, board: Board, config: DriverConfig) -> Move:
    """Cash-out and manual moves win over the solver; (0,0) means stop."""
    if config.cash_out:
        return CASH_OUT
    return _manual_move(config) or solver.best_move(board) or CASH_OUT


def run_single_move(source: BoardSource, sink: MoveSink, solver: ChompSolver,
                    config: DriverConfig, logger: Optional[PlayLogger] = None) -> DriverReport:
    logger = logger or PlayLogger(config.log_path)
    report = DriverReport()
    board = source.fetch_board()

    if board is None:
        if not config.init_if_missing:
            logger.log("⚠ game account missing/closed - aborting")
            report.stop_reason = STOP_MISSING
            return report
        if config.cash_out:
            logger.log("No game to cash out of - nothing sent.")
            report.stop_reason = STOP_CASH_OUT
            return report
        logger.log("No game found - starting NEW game.")
        move = _manual_move(config) or _opening_move(solver)
        logger.log(f"opening: ({move.row},{move.col})")
        sink.send_move(move)
        report.moves_sent = 1
        report.stop_reason = STOP_OPENED
        report.final_board = source.fetch_board()
        logger.log_board("new board", report.final_board)
        return report

    logger.log_board("current", board)
    if board.is_glass_only():
        logger.log("Only glass remains - game ended.")
        report.stop_reason = STOP_GLASS_ONLY
        report.final_board = board
        return report

    move = _choose(solver, board, config)
    logger.log(f"chosen move: ({move.row},{move.col})")
    if move == CASH_OUT:
        logger.log("No safe move / cash-out.")
        report.stop_reason = STOP_CASH_OUT if config.cash_out else STOP_NO_MOVE
        report.final_board = board
        return report

    sink.send_move(move)
    report.moves_sent = 1
    report.stop_reason = STOP_MOVED
    report.final_board = source.fetch_board()
    if report.final_board is None:
        logger.log("⚠ account closed after our move")
    else:
        logger.log_board("updated", report.final_board)
    return report


def run_autoplay(source: BoardSource, sink: MoveSink, solver: ChompSolver,
                 config: DriverConfig, logger: Optional[PlayLogger] = None,
                 sleep: Callable[[float], None] = time.sleep) -> DriverReport:
    logger = logger or PlayLogger(config.log_path)
    logger.log(
        f"Autoplay ON (interval={config.interval_ms}ms, max_moves={config.max_moves}, "
        f"init_if_missing={config.init_if_missing})"
    )
    report = DriverReport()
    # the opening move does not count towards max_moves
    played = 0
    pause = config.interval_ms / 1000.0

    while True:
        board = source.fetch_board()

        if board is None:
            if not config.init_if_missing:
                logger.log("⚠ game missing - stopping autoplay")
                report.stop_reason = STOP_MISSING
                break
            logger.log("No game found - starting a NEW game by making the first move.")
            move = _opening_move(solver)
            logger.log(f"opening: ({move.row},{move.col})")
            sink.send_move(move)
            report.moves_sent += 1
            sleep(pause)
            continue

        logger.log_board("board", board)
        if board.is_glass_only():
            logger.log("Only glass remains - game over.")
            report.stop_reason = STOP_GLASS_ONLY
            break

        move = solver.best_move(board) or CASH_OUT
        logger.log(f"chosen: ({move.row},{move.col})")
        if move == CASH_OUT:
            logger.log("No safe move - stopping.")
            report.stop_reason = STOP_NO_MOVE
            break

        sink.send_move(move)
        report.moves_sent += 1
        played += 1
        if played >= config.max_moves:
            logger.log(f"⚠ Reached max_moves={config.max_moves} - stopping.")
            report.stop_reason = STOP_MAX_MOVES
            break
        sleep(pause)

    report.final_board = source.fetch_board()
    logger.log_board("final", report.final_board)
    return report
