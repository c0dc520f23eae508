"""FastAPI REST interface for the engine."""

import threading
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from othello_engine.config import CONFIG
from othello_engine.core.board import Board, Move, Side
from othello_engine.core.evaluator import Scoring, make_evaluator
from othello_engine.core.search import SearchEngine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared board; searches run on copies.
board = Board()
_board_lock = threading.Lock()


class PositionRequest(BaseModel):
    rows: List[str]


class MoveRequest(BaseModel):
    col: int
    row: int
    side: str


class SearchRequest(BaseModel):
    side: str
    depth: Optional[int] = None
    scoring: Optional[Scoring] = None


def _parse_side(name: str) -> Side:
    try:
        return Side.parse(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _move_dict(move: Optional[Move]):
    return None if move is None else {"col": move.col, "row": move.row}


@app.get("/board")
def get_board():
    with _board_lock:
        return {
            "rows": board.rows(),
            "counts": {
                "empty": board.count_empty(),
                "light": board.count_light(),
                "dark": board.count_dark(),
            },
            "legal_moves": {
                "light": [_move_dict(m) for m in board.legal_moves(Side.LIGHT)],
                "dark": [_move_dict(m) for m in board.legal_moves(Side.DARK)],
            },
            "is_terminal": board.is_terminal(),
        }


@app.post("/position")
def set_position(req: PositionRequest):
    with _board_lock:
        try:
            board.reset(req.rows)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid position: {e}")
        return {"rows": board.rows()}


@app.post("/move")
def make_move(req: MoveRequest):
    side = _parse_side(req.side)
    try:
        move = Move(req.col, req.row)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    with _board_lock:
        if not board.apply_move(move, side):
            raise HTTPException(status_code=400, detail=f"Illegal move for {side.name.lower()}: {move}")
        return {"rows": board.rows(), "move": _move_dict(move)}


@app.post("/search")
def search_move(req: SearchRequest):
    side = _parse_side(req.side)
    depth = req.depth or CONFIG.search.depth
    try:
        engine = SearchEngine(make_evaluator(req.scoring or CONFIG.search.scoring), depth=depth)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    with _board_lock:
        search_board = board.clone()

    best, score = engine.search_best_move(search_board, side)
    return {
        "best_move": _move_dict(best),
        "score": score,
        "nodes": engine.nodes,
        "rows": search_board.rows(),
    }


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.reset()
        return {"rows": board.rows()}
