# othello_engine/config.py
from dataclasses import dataclass, field
from typing import List, Optional
import logging
import os
import tomllib

logger = logging.getLogger(__name__)

# Classic Othello square weights: corners are prized, the cells touching
# them are a liability, edges are mildly good.
POSITIONAL_WEIGHTS = [
    [ 4, -3,  2,  2,  2,  2, -3,  4],
    [-3, -4, -1, -1, -1, -1, -4, -3],
    [ 2, -1,  1,  0,  0,  1, -1,  2],
    [ 2, -1,  0,  1,  1,  0, -1,  2],
    [ 2, -1,  0,  1,  1,  0, -1,  2],
    [ 2, -1,  1,  0,  0,  1, -1,  2],
    [-3, -4, -1, -1, -1, -1, -4, -3],
    [ 4, -3,  2,  2,  2,  2, -3,  4],
]

@dataclass
class SearchConfig:
    depth: int = 4
    testing_depth: int = 2  # shallow mode used when testing the minimax
    scoring: str = "positional"  # "positional" or "material"
    threads: int = 1  # worker processes for the root split
    verbose: bool = False  # print info lines to stderr

@dataclass
class EvalConfig:
    positional_weights: List[List[int]] = field(
        default_factory=lambda: [row[:] for row in POSITIONAL_WEIGHTS]
    )

@dataclass
class UIConfig:
    engine_name: str = "OthelloEngine"
    engine_author: str = "Othello Engine contributors"
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Unknown config key [%s].%s ignored", section, k)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

def depth_override(cfg: Config, value: Optional[str]) -> Config:
    """Apply an ``OTHELLO_SEARCH_DEPTH`` style override to ``cfg``."""
    if not value:
        return cfg
    try:
        cfg.search.depth = int(value)
    except ValueError:
        logger.warning("Ignoring non-integer search depth override %r", value)
    return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
depth_override(CONFIG, os.environ.get("OTHELLO_SEARCH_DEPTH"))
