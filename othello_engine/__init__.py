"""Fixed-depth minimax Othello engine."""

from .agent import Agent, new_agent
from .core import Board, CellState, Move, Side
