"""Core engine components: board, evaluators and search."""

from .board import Board, Capture, CellState, Move, Side
from .evaluator import MaterialEvaluator, PositionalEvaluator, Scoring, make_evaluator
from .search import SearchEngine
