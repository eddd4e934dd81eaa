from .agent import ChompAgent
from .baselines import RandomAgent, MinimaxAgent
from .driver import DriverReport, run_single_move, run_autoplay

__all__ = [
    'ChompAgent', 'RandomAgent', 'MinimaxAgent',
    'DriverReport', 'run_single_move', 'run_autoplay',
]
