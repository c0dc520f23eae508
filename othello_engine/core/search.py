import logging
import time
from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple

from othello_engine.core.board import Board, Move, Side
from othello_engine.core.evaluator import Evaluator, PositionalEvaluator
from othello_engine.core.utils import print_info

logger = logging.getLogger(__name__)

# (score, scan index, move) for one root candidate
RootResult = Tuple[int, int, Move]


def _search_group(args) -> Tuple[Optional[RootResult], int]:
    """
    Worker used by the parallel root split.

    Each process scores its own group of root candidates on private board
    clones and returns its local best together with the nodes it visited.
    Module level so it stays picklable.
    """
    board, group, side, depth, evaluator = args
    engine = SearchEngine(evaluator, depth=depth)
    best = engine._best_of(board, group, side)
    return best, engine.nodes


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = 4,
                 threads: int = 1, verbose: bool = False):
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.evaluator = evaluator or PositionalEvaluator()
        self.max_depth = depth
        self.threads = max(1, threads)
        self.verbose = verbose
        self.nodes = 0

    def search_best_move(self, board: Board, side: Side,
                         moves: Optional[Sequence[Move]] = None) -> Tuple[Optional[Move], Optional[int]]:
        """
        Returns (best_move, score) for `side` on `board`, or (None, None)
        when `side` has to pass. `board` itself is never modified.

        Ties keep the earliest candidate in scan order.
        """
        if moves is None:
            moves = board.legal_moves(side)
        if not moves:
            return None, None

        self.nodes = 0
        start_time = time.time()
        candidates = list(enumerate(moves))

        if self.threads > 1 and len(candidates) > 1:
            best = self._best_parallel(board, candidates, side)
        else:
            best = self._best_of(board, candidates, side)

        score, _index, best_move = best
        if self.verbose:
            print_info(self.max_depth, score, self.nodes, time.time() - start_time, best_move)
        return best_move, score

    def _best_of(self, board: Board, candidates: Sequence[Tuple[int, Move]],
                 side: Side) -> Optional[RootResult]:
        best: Optional[RootResult] = None
        for index, move in candidates:
            score = self.minimax(board.clone(), move, side, self.max_depth - 1, side)
            if best is None or score > best[0]:
                best = (score, index, move)
        return best

    def _best_parallel(self, board: Board, candidates: List[Tuple[int, Move]],
                       side: Side) -> RootResult:
        n_groups = min(self.threads, len(candidates))
        groups = [candidates[i::n_groups] for i in range(n_groups)]
        tasks = [(board.clone(), group, side, self.max_depth, self.evaluator) for group in groups]

        try:
            with Pool(processes=n_groups) as pool:
                results = pool.map(_search_group, tasks)
        except OSError as e:
            logger.warning("Parallel root search failed (%s), falling back to sequential", e)
            return self._best_of(board, candidates, side)

        self.nodes += sum(nodes for _, nodes in results)
        local_bests = [best for best, _ in results if best is not None]
        # highest score wins, lowest scan index breaks ties
        return max(local_bests, key=lambda r: (r[0], -r[1]))

    def minimax(self, board: Board, move: Optional[Move], side: Side, depth: int,
                perspective: Side, maximizing: bool = False) -> int:
        """
        Play `move` for `side` on `board` (an owned copy, mutated in place)
        and return the minimax value of the result for `perspective`.

        `maximizing` tells whether this node picks the best of the replies
        for `perspective`; the root passes False because the replies belong
        to the opponent. A node whose side to reply has no move is scored
        statically instead of searching through the pass.
        """
        self.nodes += 1
        board.apply_move(move, side)

        if depth <= 0:
            return self.evaluator.evaluate(board, perspective)

        other = side.opponent
        replies = board.legal_moves(other)
        if not replies:
            return self.evaluator.evaluate(board, perspective)

        scores = (
            self.minimax(board.clone(), reply, other, depth - 1, perspective, not maximizing)
            for reply in replies
        )
        return max(scores) if maximizing else min(scores)
