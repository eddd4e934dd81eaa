"""
Chomping Glass move bot

Plays against an in-memory game account:
- single move (default): play one move, or a manual --r/--c, or --cash-out
- --board: start from five hex row bytes instead of an empty account
- --autoplay: keep playing until the game ends or --max-moves is reached
- --eval N: play N games of the tablebase agent against an opponent
"""
import argparse

from config import Config, DriverConfig, EvalConfig, TablebaseConfig
from game import LocalLedger, parse_board
from tablebase.solver import get_position_table, ChompSolver
from ai import ChompAgent, RandomAgent, MinimaxAgent, run_single_move, run_autoplay
from ai.utils import PlayLogger
from evaluation import evaluate_vs_baseline


def hex_byte(text: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex byte: {text}")
    if not 0 <= value <= 0xFF:
        raise argparse.ArgumentTypeError(f"row byte out of range: {text}")
    return value


def make_opponent(name: str, solver: ChompSolver, seed=None):
    if name == "random":
        return RandomAgent(seed=seed)
    if name == "minimax":
        return MinimaxAgent()
    if name == "solver":
        return ChompAgent(solver)
    raise ValueError(f"Unknown opponent: {name}")


def parse_args(argv=None) -> Config:
    parser = argparse.ArgumentParser(description='Chomping Glass move bot')
    parser.add_argument('--autoplay', action='store_true', help='Keep playing until the game ends')
    parser.add_argument('--interval-ms', type=int, default=1500, help='Pause between autoplay moves')
    parser.add_argument('--max-moves', type=int, default=200, help='Autoplay move limit')
    parser.add_argument('--no-init', action='store_true', help='Do not open a new game when none exists')
    parser.add_argument('--reset', action='store_true', help='Discard the current game first')
    parser.add_argument('--r', dest='row', type=int, default=None, help='Manual row (1..5)')
    parser.add_argument('--c', dest='col', type=int, default=None, help='Manual column (1..8)')
    parser.add_argument('--cash-out', action='store_true', help='Stop without playing')
    parser.add_argument('--log-file', type=str, default=None, help='Append moves to this file')
    parser.add_argument('--board', type=hex_byte, nargs=5, default=None, metavar='HEX',
                        help='Start from these five row bytes, e.g. --board FF F0 C0 00 00')
    parser.add_argument('--opponent', type=str, default='random', choices=['random', 'minimax', 'solver'])
    parser.add_argument('--eval', type=int, default=0, help='Play N evaluation games instead')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--progress', action='store_true', help='Show a progress bar while building the table')
    args = parser.parse_args(argv)

    config = Config()
    config.tablebase = TablebaseConfig(show_progress=args.progress)
    config.driver = DriverConfig(
        autoplay=args.autoplay,
        interval_ms=args.interval_ms,
        max_moves=args.max_moves,
        init_if_missing=not args.no_init,
        reset=args.reset,
        cash_out=args.cash_out,
        row=args.row,
        col=args.col,
        log_path=args.log_file,
        board=bytes(args.board) if args.board else None,
    )
    config.eval = EvalConfig(num_games=args.eval, opponent=args.opponent, seed=args.seed)
    return config


def main(argv=None):
    config = parse_args(argv)
    solver = ChompSolver(get_position_table(show_progress=config.tablebase.show_progress))
    opponent = make_opponent(config.eval.opponent, solver, seed=config.eval.seed)

    if config.eval.num_games > 0:
        stats = evaluate_vs_baseline(
            ChompAgent(solver), opponent,
            num_games=config.eval.num_games, seed=config.eval.seed, show_progress=True
        )
        print(f"\n{'=' * 60}")
        print(f"Tablebase vs {opponent.name}: {stats['agent_wins']}/{stats['games']} "
              f"({stats['win_rate'] * 100:.1f}%)")
        print(f"  Moving first: {stats['first_move_wins']}/{stats['first_move_games']}")
        print(f"{'=' * 60}")
        return stats

    logger = PlayLogger(config.driver.log_path)
    ledger = LocalLedger(board=parse_board(config.driver.board), opponent=opponent)
    if config.driver.reset:
        ledger.reset()
        logger.log("✓ game reset")

    logger.log(f"starting chomp bot; autoplay={config.driver.autoplay}, opponent={opponent.name}")
    if config.driver.autoplay:
        report = run_autoplay(ledger, ledger, solver, config.driver, logger)
    else:
        report = run_single_move(ledger, ledger, solver, config.driver, logger)

    logger.log(f"stopped: {report.stop_reason} after {report.moves_sent} move(s)")
    if ledger.loser is not None:
        logger.log(f"poison eaten by: {ledger.loser}")
    return report


if __name__ == '__main__':
    main()
