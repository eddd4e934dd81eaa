"""
Tests for the move driver: single-move and autoplay stop conditions against
the in-memory ledger.
"""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from config import DriverConfig
from game import Board, Move, LocalLedger
from tablebase import ChompSolver, get_position_table
from ai import RandomAgent, run_single_move, run_autoplay
from ai.driver import (
    STOP_GLASS_ONLY, STOP_NO_MOVE, STOP_CASH_OUT, STOP_MAX_MOVES,
    STOP_MISSING, STOP_MOVED, STOP_OPENED,
)
from ai.utils import PlayLogger


GLASS_ONLY_ROWS = [0xFF, 0xFF, 0xFF, 0xFF, 0xFE]


@pytest.fixture(scope="module")
def solver():
    return ChompSolver(get_position_table())


@pytest.fixture
def quiet():
    return PlayLogger(quiet=True)


class TestSingleMove:
    def test_opens_missing_game(self, solver, quiet):
        ledger = LocalLedger()
        report = run_single_move(ledger, ledger, solver, DriverConfig(), quiet)
        assert report.stop_reason == STOP_OPENED
        assert report.moves_sent == 1
        assert ledger.history == [('player', solver.best_move(Board()))]

    def test_missing_game_without_init(self, solver, quiet):
        ledger = LocalLedger()
        report = run_single_move(ledger, ledger, solver, DriverConfig(init_if_missing=False), quiet)
        assert report.stop_reason == STOP_MISSING
        assert report.moves_sent == 0
        assert ledger.fetch_board() is None

    def test_glass_only_stops(self, solver, quiet):
        ledger = LocalLedger(Board(GLASS_ONLY_ROWS))
        report = run_single_move(ledger, ledger, solver, DriverConfig(), quiet)
        assert report.stop_reason == STOP_GLASS_ONLY
        assert ledger.history == []

    def test_plays_solver_move(self, solver, quiet):
        board = Board([0xFE] * 5)
        ledger = LocalLedger(board)
        report = run_single_move(ledger, ledger, solver, DriverConfig(), quiet)
        assert report.stop_reason == STOP_MOVED
        assert ledger.history[0][1].col == 8
        assert report.final_board == board.apply(*ledger.history[0][1])

    def test_manual_move(self, solver, quiet):
        ledger = LocalLedger(Board())
        config = DriverConfig(row=2, col=3)
        run_single_move(ledger, ledger, solver, config, quiet)
        assert ledger.history == [('player', Move(2, 3))]
        assert ledger.fetch_board().rows == (0xE0, 0xE0, 0, 0, 0)

    def test_manual_opening(self, solver, quiet):
        ledger = LocalLedger()
        report = run_single_move(ledger, ledger, solver, DriverConfig(row=3, col=2), quiet)
        assert report.stop_reason == STOP_OPENED
        assert ledger.history == [('player', Move(3, 2))]

    def test_cash_out_without_game(self, solver, quiet):
        ledger = LocalLedger()
        report = run_single_move(ledger, ledger, solver, DriverConfig(cash_out=True), quiet)
        assert report.stop_reason == STOP_CASH_OUT
        assert report.moves_sent == 0
        assert ledger.fetch_board() is None

    def test_cash_out_sends_nothing(self, solver, quiet):
        ledger = LocalLedger(Board())
        report = run_single_move(ledger, ledger, solver, DriverConfig(cash_out=True), quiet)
        assert report.stop_reason == STOP_CASH_OUT
        assert ledger.history == []

    def test_finished_game_has_no_move(self, solver, quiet):
        ledger = LocalLedger(Board([0xFF] * 5))
        report = run_single_move(ledger, ledger, solver, DriverConfig(), quiet)
        assert report.stop_reason == STOP_NO_MOVE
        assert report.moves_sent == 0

    def test_writes_log_file(self, solver, tmp_path):
        log_path = str(tmp_path / "logs" / "play.log")
        ledger = LocalLedger(Board())
        run_single_move(ledger, ledger, solver, DriverConfig(log_path=log_path),
                        PlayLogger(log_path, quiet=True))
        with open(log_path) as f:
            text = f.read()
        assert "chosen move:" in text
        assert "row1:" in text


class TestAutoplay:
    def test_beats_random_opponent(self, solver, quiet):
        ledger = LocalLedger(opponent=RandomAgent(seed=11))
        pauses = []
        report = run_autoplay(ledger, ledger, solver, DriverConfig(interval_ms=250), quiet,
                              sleep=pauses.append)
        assert report.stop_reason == STOP_NO_MOVE
        assert ledger.loser == 'opponent'
        assert report.final_board.is_finished()
        assert report.moves_sent == len([h for h in ledger.history if h[0] == 'player'])
        assert all(p == 0.25 for p in pauses)

    def test_max_moves(self, solver, quiet):
        ledger = LocalLedger(opponent=RandomAgent(seed=5))
        report = run_autoplay(ledger, ledger, solver, DriverConfig(max_moves=1), quiet,
                              sleep=lambda s: None)
        assert report.stop_reason == STOP_MAX_MOVES
        # opening plus one counted move
        assert report.moves_sent == 2
        assert [who for who, _ in ledger.history].count('player') == 2

    def test_max_moves_on_existing_game(self, solver, quiet):
        ledger = LocalLedger(Board(), opponent=RandomAgent(seed=5))
        report = run_autoplay(ledger, ledger, solver, DriverConfig(max_moves=1), quiet,
                              sleep=lambda s: None)
        assert report.stop_reason == STOP_MAX_MOVES
        assert report.moves_sent == 1

    def test_missing_game_without_init(self, solver, quiet):
        ledger = LocalLedger()
        report = run_autoplay(ledger, ledger, solver, DriverConfig(init_if_missing=False), quiet,
                              sleep=lambda s: None)
        assert report.stop_reason == STOP_MISSING
        assert report.final_board is None

    def test_stops_on_glass_only(self, solver, quiet):
        ledger = LocalLedger(Board(GLASS_ONLY_ROWS))
        report = run_autoplay(ledger, ledger, solver, DriverConfig(), quiet, sleep=lambda s: None)
        assert report.stop_reason == STOP_GLASS_ONLY
        assert report.moves_sent == 0
