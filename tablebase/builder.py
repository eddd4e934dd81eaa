"""Position Table Builder

Classifies every Skyline by backward induction over the move graph:
1. Seed the fully eaten board (FINISHED) and the glass-only board (LOSING)
2. Walk the graph from the empty board with an explicit stack
3. A state is WINNING if some move reaches a LOSING state, else LOSING
4. Sweep all valid codes so the closure is complete

Every move eats at least one cell, so the graph is acyclic and each state is
classified exactly once.
"""

import time
from collections import defaultdict
from typing import List, Optional

from tqdm import tqdm

from game.board import Move
from game.skyline import Skyline, EMPTY, FULL, GLASS_ONLY, all_indices
from .tablebase import Outcome, PositionTable


class TablebaseBuilder:
    """
    Build the Position Table.

    Strategy:
    1. Children are classified before their parent (post-order on a stack)
    2. Moves are tried top row first, then left to right; the first move
       into a LOSING child becomes the stored reply
    """

    def __init__(self, show_progress: bool = False):
        self.show_progress = show_progress
        self.table = PositionTable()
        self.stats = defaultdict(int)

    def build(self) -> PositionTable:
        start_time = time.time()
        table = self.table

        table.mark_finished(FULL.encode())
        table.mark_losing(GLASS_ONLY.encode())

        codes = all_indices()
        pbar = tqdm(total=len(codes) - 2, desc="Classifying") if self.show_progress else None

        self._classify_from(EMPTY.encode(), pbar)
        for idx in codes:
            if table.outcomes[idx] == Outcome.UNEXPLORED:
                self._classify_from(idx, pbar)

        if pbar is not None:
            pbar.close()

        self.stats['elapsed_s'] = round(time.time() - start_time, 3)
        table.stats = dict(self.stats)
        table.freeze()
        return table

    def _classify_from(self, root: int, pbar: Optional[tqdm] = None):
        """Iterative post-order classification of everything below `root`."""
        outcomes = self.table.outcomes
        stack: List[int] = [root]

        while stack:
            idx = stack[-1]
            if outcomes[idx] != Outcome.UNEXPLORED:
                stack.pop()
                continue

            children = [(r, c, child.encode()) for r, c, child in Skyline.decode(idx).moves()]
            pending = [child_idx for _, _, child_idx in children
                       if outcomes[child_idx] == Outcome.UNEXPLORED]
            if pending:
                self.stats['expansions'] += 1
                stack.extend(reversed(pending))
                continue

            stack.pop()
            self._resolve(idx, children)
            self.stats['states'] += 1
            if pbar is not None:
                pbar.update(1)

    def _resolve(self, idx: int, children):
        """All children are known; pick the first move into a LOSING state."""
        outcomes = self.table.outcomes
        for r, c, child_idx in children:
            if outcomes[child_idx] == Outcome.LOSING:
                self.table.mark_winning(idx, Move(r, c))
                self.stats['wins'] += 1
                return
        self.table.mark_losing(idx)
        self.stats['losses'] += 1


def build_position_table(show_progress: bool = False) -> PositionTable:
    return TablebaseBuilder(show_progress=show_progress).build()


def main():
    """Build the table from the command line and print its statistics."""
    import argparse

    from game.board import Board

    parser = argparse.ArgumentParser(description='Build the Chomping Glass position table')
    parser.add_argument('--no-progress', action='store_true', help='Hide the progress bar')
    args = parser.parse_args()

    print(f"\n{'=' * 60}")
    print("Chomping Glass Position Table Builder")
    print(f"{'=' * 60}\n")

    table = build_position_table(show_progress=not args.no_progress)
    stats = table.get_stats()

    print(f"✓ Built position table in {stats['elapsed_s']:.3f}s")
    print(f"  Winning: {stats['winning']}")
    print(f"  Losing: {stats['losing']}")
    print(f"  Finished: {stats['finished']}")
    print(f"  Size: {stats['size_kb']:.1f} KB")

    opening = table.lookup(Board().to_skyline())
    print(f"  Empty board: {opening.outcome.name} {tuple(opening.move) if opening.move else ''}")


if __name__ == '__main__':
    main()
