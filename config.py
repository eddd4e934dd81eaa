from dataclasses import dataclass
from typing import Optional

@dataclass
class TablebaseConfig:
    show_progress: bool = False       # tqdm bar while classifying

@dataclass
class DriverConfig:
    autoplay: bool = False
    interval_ms: int = 1500           # pause between autoplay moves
    max_moves: int = 200              # autoplay stops after this many sent moves
    init_if_missing: bool = True      # open a new game when none exists
    reset: bool = False               # drop the current game before playing
    cash_out: bool = False            # single move: stop without playing
    row: Optional[int] = None         # single move: manual row (1..5)
    col: Optional[int] = None         # single move: manual column (1..8)
    log_path: Optional[str] = None    # append-only move log, None = console only
    board: Optional[bytes] = None     # starting rows for the local game, None = no game yet

@dataclass
class EvalConfig:
    num_games: int = 100
    opponent: str = "random"          # random | minimax | solver
    seed: Optional[int] = None

@dataclass
class Config:
    tablebase: TablebaseConfig = None
    driver: DriverConfig = None
    eval: EvalConfig = None

    def __post_init__(self):
        if self.tablebase is None:
            self.tablebase = TablebaseConfig()
        if self.driver is None:
            self.driver = DriverConfig()
        if self.eval is None:
            self.eval = EvalConfig()
