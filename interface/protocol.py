"""Line protocol driver: one ``x y msLeft`` report in, one ``x y`` move out."""

import argparse
import logging
import sys
from typing import Iterator, List, Optional, TextIO

from othello_engine.agent import Agent
from othello_engine.config import CONFIG
from othello_engine.core.board import Move
from othello_engine.core.evaluator import Scoring

logger = logging.getLogger(__name__)

PASS = "-1 -1"


class OthelloProtocol:
    def __init__(self, agent: Agent, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.agent = agent
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _send(self, line: str):
        self.stdout.write(line + "\n")
        self.stdout.flush()

    def _tokens(self) -> Iterator[str]:
        for line in self.stdin:
            yield from line.split()

    @staticmethod
    def parse_move(x: int, y: int) -> Optional[Move]:
        """Negative coordinates mean the opponent passed (or this is the first turn)."""
        if x < 0 or y < 0:
            return None
        return Move(x, y)

    @staticmethod
    def format_move(move: Optional[Move]) -> str:
        return PASS if move is None else f"{move.col} {move.row}"

    def run(self) -> int:
        """Serve turns until EOF. Returns the process exit status."""
        self._send("Init done")
        tokens = self._tokens()
        while True:
            report = [next(tokens, None) for _ in range(3)]
            if None in report:
                return 0
            try:
                x, y, ms_left = (int(t) for t in report)
                opponent_move = self.parse_move(x, y)
            except ValueError as e:
                logger.error("Bad turn report %r: %s", " ".join(report), e)
                return 1

            move = self.agent.choose_move(opponent_move, ms_left)
            self._send(self.format_move(move))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="othello-engine", description="Fixed-depth minimax Othello player")
    parser.add_argument("side", choices=["Black", "White"], help="side this player is on")
    parser.add_argument("--testing", action="store_true", help="use the shallow testing depth")
    parser.add_argument("--depth", type=int, default=None, help="override the search depth")
    parser.add_argument("--scoring", choices=[s.value for s in Scoring], default=None)
    parser.add_argument("--threads", type=int, default=None, help="worker processes for the root split")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=CONFIG.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    agent = Agent(args.side, depth=args.depth, scoring=args.scoring,
                  threads=args.threads, testing_minimax=args.testing)
    return OthelloProtocol(agent).run()


if __name__ == "__main__":
    sys.exit(main())
