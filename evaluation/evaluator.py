"""
Evaluation engine for Chomping Glass.

Plays agents against each other on plain Boards. Whoever eats the poison
cell loses, so every game has a winner.
"""
import random
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm
from game import Board


# ─── Match result ────────────────────────────────────────────────

@dataclass
class MatchResult:
    wins_a: int = 0
    wins_b: int = 0
    games: int = 0
    # Wins for A in the games where A moved first
    first_move_wins_a: int = 0
    first_move_games_a: int = 0

    @property
    def win_rate_a(self):
        return self.wins_a / self.games if self.games else 0.0

    @property
    def win_rate_b(self):
        return self.wins_b / self.games if self.games else 0.0


# ─── Core match loop ─────────────────────────────────────────────

def play_game(first, second, board: Optional[Board] = None, max_plies: int = 64) -> int:
    """Play one game. Returns 0 if `first` wins, 1 if `second` wins."""
    board = board or Board()
    players = (first, second)
    turn = 0

    for _ in range(max_plies):
        if board.is_finished():
            # The previous mover ate the poison
            return turn
        move = players[turn].select_action(board)
        if move is None:
            raise RuntimeError(f"{players[turn].name} returned no move on {board!r}")
        board = board.apply(move.row, move.col)
        turn = 1 - turn

    raise RuntimeError(f"Game did not finish within {max_plies} plies")


def play_agents(agent_a, agent_b, num_games, random_opening_plies=0,
                seed: Optional[int] = None, show_progress: bool = False) -> MatchResult:
    """Sequential match between two agents with select_action(board) -> Move.

    The first player alternates every game. Optional random opening plies
    (never touching the poison) add variety.
    """
    rng = random.Random(seed)
    result = MatchResult()
    games = range(num_games)
    if show_progress:
        games = tqdm(games, desc=f"{agent_a.name} vs {agent_b.name}")

    for i in games:
        board = Board()
        for _ in range(random_opening_plies):
            legal = [m for m in board.get_legal_moves() if board.apply(*m).count_open() > 1]
            if not legal:
                break
            board = board.apply(*rng.choice(legal))

        a_first = (i % 2 == 0)
        if a_first:
            winner = play_game(agent_a, agent_b, board)
            a_won = winner == 0
            result.first_move_games_a += 1
            result.first_move_wins_a += int(a_won)
        else:
            winner = play_game(agent_b, agent_a, board)
            a_won = winner == 1

        result.games += 1
        if a_won:
            result.wins_a += 1
        else:
            result.wins_b += 1

    return result


def evaluate_vs_baseline(agent, baseline, num_games=100, seed=None, show_progress=False):
    """Agent vs baseline from the empty board. Returns dict with win_rate, etc."""
    r = play_agents(agent, baseline, num_games, seed=seed, show_progress=show_progress)
    return {
        'agent_wins': r.wins_a, 'baseline_wins': r.wins_b,
        'games': r.games, 'win_rate': r.win_rate_a,
        'first_move_wins': r.first_move_wins_a,
        'first_move_games': r.first_move_games_a,
    }
