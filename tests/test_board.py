"""
Tests for the Board codec: skyline decoding, legality, eating rule,
and the any_legal_move fallback.
"""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from game import Board, Move, CASH_OUT
from game.skyline import Skyline


GLASS_ONLY_ROWS = [0xFF, 0xFF, 0xFF, 0xFF, 0xFE]


class TestSkylineDecoding:
    def test_empty_board(self):
        assert Board().to_skyline().parts == (0, 0, 0, 0, 0)

    def test_full_board(self):
        assert Board([0xFF] * 5).to_skyline().parts == (8, 8, 8, 8, 8)

    def test_glass_only(self):
        assert Board(GLASS_ONLY_ROWS).to_skyline().parts == (8, 8, 8, 8, 7)

    def test_mixed_prefixes(self):
        board = Board([0xF8, 0xE0, 0xC0, 0x80, 0x00])
        assert board.to_skyline().parts == (5, 3, 2, 1, 0)

    def test_from_skyline_is_inverse(self):
        for rows in ([0xF8, 0xE0, 0xC0, 0x80, 0x00], GLASS_ONLY_ROWS, [0] * 5, [0xFF] * 5):
            board = Board(rows)
            assert Board.from_skyline(board.to_skyline()) == board

    def test_from_skyline_needs_skyline(self):
        with pytest.raises(AttributeError):
            Board.from_skyline((8, 8, 8, 8, 7))
        assert Board.from_skyline(Skyline((8, 8, 8, 8, 7))) == Board(GLASS_ONLY_ROWS)


class TestEatingRule:
    def test_apply_eats_rows_above(self):
        board = Board().apply(3, 4)
        assert board.rows == (0xF0, 0xF0, 0xF0, 0x00, 0x00)
        assert board.to_skyline().parts == (4, 4, 4, 0, 0)

    def test_apply_keeps_longer_prefixes(self):
        board = Board().apply(1, 6).apply(2, 2)
        assert board.rows == (0xFC, 0xC0, 0x00, 0x00, 0x00)

    def test_apply_returns_new_board(self):
        board = Board()
        board.apply(5, 1)
        assert board == Board()

    def test_board_is_immutable(self):
        with pytest.raises(AttributeError):
            Board().rows = (1, 2, 3, 4, 5)

    def test_apply_illegal_raises(self):
        board = Board().apply(2, 3)
        with pytest.raises(ValueError):
            board.apply(1, 2)

    def test_apply_out_of_range_raises(self):
        with pytest.raises(ValueError):
            Board().apply(6, 1)
        with pytest.raises(ValueError):
            Board().apply(1, 9)

    def test_cash_out_eats_everything(self):
        board = Board().apply(*CASH_OUT)
        assert board.is_finished()
        assert board.rows == (0xFF,) * 5

    def test_poison_move_finishes(self):
        board = Board(GLASS_ONLY_ROWS).apply(5, 8)
        assert board.is_finished()


class TestLegality:
    def test_is_legal(self):
        board = Board([0xC0, 0, 0, 0, 0])
        assert not board.is_legal(1, 1)
        assert not board.is_legal(1, 2)
        assert board.is_legal(1, 3)
        assert board.is_legal(2, 1)
        assert not board.is_legal(0, 0)

    def test_legal_moves_count(self):
        assert len(Board().get_legal_moves()) == 40
        assert Board(GLASS_ONLY_ROWS).get_legal_moves() == [Move(5, 8)]
        assert Board([0xFF] * 5).get_legal_moves() == []

    def test_glass_only_and_finished(self):
        assert Board(GLASS_ONLY_ROWS).is_glass_only()
        assert not Board(GLASS_ONLY_ROWS).is_finished()
        assert not Board().is_glass_only()
        assert Board([0xFF] * 5).is_finished()
        assert not Board([0xFF] * 5).is_glass_only()

    def test_count_open(self):
        assert Board().count_open() == 40
        assert Board(GLASS_ONLY_ROWS).count_open() == 1


class TestAnyLegalMove:
    def test_prefers_bottom_row_leftmost(self):
        assert Board().any_legal_move() == Move(5, 1)

    def test_moves_up_when_bottom_row_done(self):
        board = Board([0xFF, 0xFF, 0xFE, 0xFE, 0xFE])
        assert board.any_legal_move() == Move(4, 8)

    def test_skips_poison_while_other_cells_open(self):
        board = Board([0xFF, 0xFF, 0xFF, 0xFF, 0xFC])
        assert board.any_legal_move() == Move(5, 7)

    def test_poison_only_when_last_cell(self):
        assert Board(GLASS_ONLY_ROWS).any_legal_move() == Move(5, 8)

    def test_none_when_finished(self):
        assert Board([0xFF] * 5).any_legal_move() is None

    def test_never_poison_with_alternatives(self):
        board = Board()
        while board.count_open() > 1:
            move = board.any_legal_move()
            assert move != (5, 8)
            board = board.apply(*move)
        assert board.any_legal_move() == Move(5, 8)


def test_render():
    lines = Board([0xF0, 0, 0, 0, 0]).render()
    assert lines[0] == "row1: 11110000"
    assert len(lines) == 5
