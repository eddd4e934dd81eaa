"""
Position Table for Chomping Glass

Precomputed perfect play for every reachable 5x8 board.
Uses backward induction over the Skyline move graph.
"""

from game.skyline import Skyline, encode_skyline, decode_index, all_indices, TABLE_SIZE
from .tablebase import Outcome, Entry, PositionTable
from .builder import TablebaseBuilder, build_position_table
from .solver import ChompSolver, get_position_table, default_solver

__all__ = [
    'Skyline',
    'encode_skyline',
    'decode_index',
    'all_indices',
    'TABLE_SIZE',
    'Outcome',
    'Entry',
    'PositionTable',
    'TablebaseBuilder',
    'build_position_table',
    'ChompSolver',
    'get_position_table',
    'default_solver',
]
