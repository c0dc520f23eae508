import sys


def print_info(depth, score, nodes, elapsed, move):
    """Print a search summary line to stderr (stdout carries the protocol)."""
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    move_str = str(move) if move is not None else "pass"
    print(f"info depth {depth} score {score} nodes {nodes} nps {nps} "
          f"time {int(elapsed * 1000)} move {move_str}", file=sys.stderr, flush=True)
