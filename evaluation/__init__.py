"""Match evaluation between Chomping Glass agents."""
from .evaluator import MatchResult, play_game, play_agents, evaluate_vs_baseline

__all__ = ['MatchResult', 'play_game', 'play_agents', 'evaluate_vs_baseline']
