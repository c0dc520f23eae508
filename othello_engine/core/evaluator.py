"""
Static evaluation for Othello positions.

Two interchangeable strategies, both scored from a fixed ``perspective``
side (positive means good for that side):

    - MaterialEvaluator: raw stone-count differential.
    - PositionalEvaluator: sum of square weights, added for own stones and
      subtracted for opponent stones.

Pick one with ``make_evaluator(Scoring.POSITIONAL)`` and hand it to the
search engine.
"""

from enum import Enum
from typing import List, Optional, Sequence, Union

from othello_engine.config import CONFIG
from othello_engine.core.board import BOARD_SIZE, Board, Side


class Scoring(str, Enum):
    MATERIAL = "material"
    POSITIONAL = "positional"


class MaterialEvaluator:
    scoring = Scoring.MATERIAL

    def evaluate(self, board: Board, perspective: Side) -> int:
        return board.count(perspective) - board.count(perspective.opponent)


class PositionalEvaluator:
    scoring = Scoring.POSITIONAL

    def __init__(self, weights: Optional[Sequence[Sequence[int]]] = None) -> None:
        table = weights if weights is not None else CONFIG.eval.positional_weights
        if len(table) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in table):
            raise ValueError("Positional weight table must be 8x8")
        self.weights: List[List[int]] = [list(map(int, row)) for row in table]

    def evaluate(self, board: Board, perspective: Side) -> int:
        other = perspective.opponent
        total = 0
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                state = board.state_at(col, row)
                if state == perspective:
                    total += self.weights[row][col]
                elif state == other:
                    total -= self.weights[row][col]
        return total


Evaluator = Union[MaterialEvaluator, PositionalEvaluator]


def make_evaluator(scoring: Union[Scoring, str]) -> Evaluator:
    """Build the evaluator for a scoring mode ("material" or "positional")."""
    mode = Scoring(scoring)
    if mode is Scoring.MATERIAL:
        return MaterialEvaluator()
    return PositionalEvaluator()
