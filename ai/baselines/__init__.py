"""
Baseline opponents for testing the tablebase agent.
"""
from .random_agent import RandomAgent
from .minimax_agent import MinimaxAgent

__all__ = ['RandomAgent', 'MinimaxAgent']
