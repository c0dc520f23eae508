import logging
from typing import Optional, Union

from othello_engine.config import CONFIG
from othello_engine.core.board import Board, Move, Side
from othello_engine.core.evaluator import Scoring, make_evaluator
from othello_engine.core.search import SearchEngine

logger = logging.getLogger(__name__)


class Agent:
    """
    Plays one side of a game turn by turn.

    The agent owns the authoritative board: it applies the opponent's
    reported move, searches its own candidates and applies the move it
    returns. `ms_left` is part of the calling contract but the search
    depth is fixed, so it is not consulted.
    """

    def __init__(self, side: Union[Side, int, str], depth: Optional[int] = None,
                 scoring: Union[Scoring, str, None] = None, threads: Optional[int] = None,
                 testing_minimax: bool = False):
        self.side = Side.parse(side)
        self.testing_minimax = testing_minimax
        if depth is None:
            depth = CONFIG.search.testing_depth if testing_minimax else CONFIG.search.depth
        self.board = Board()
        self.search = SearchEngine(
            make_evaluator(scoring or CONFIG.search.scoring),
            depth=depth,
            threads=threads or CONFIG.search.threads,
            verbose=CONFIG.search.verbose,
        )

    @property
    def opponent(self) -> Side:
        return self.side.opponent

    def choose_move(self, opponent_move: Optional[Move], ms_left: int = -1) -> Optional[Move]:
        """Return our move for this turn, or None to pass."""
        if not self.board.apply_move(opponent_move, self.opponent):
            logger.warning("Ignoring illegal opponent move %s for %s", opponent_move, self.opponent.name)

        available = self.board.legal_moves(self.side)
        if not available:
            logger.debug("%s has no legal move, passing", self.side.name)
            return None

        move, score = self.search.search_best_move(self.board, self.side, available)
        self.board.apply_move(move, self.side)
        logger.debug("%s plays %s (score %s, %d nodes)", self.side.name, move, score, self.search.nodes)
        return move


def new_agent(side: Union[Side, int, str], **kwargs) -> Agent:
    """Create an agent for `side`; raises ValueError for an unknown side."""
    return Agent(side, **kwargs)
