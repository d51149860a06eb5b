from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional
import os

import yaml

from puzzle_core.packs import anchor_board_id, resolve_board
from puzzle_core.state import Board

DEFAULT_CONFIG = "configs/search.yaml"

# fixed pair the solver was first run on
DEFAULT_START = """
01 02 03 04
05 06 07 08
09 10 11 12
13 14 15 00
"""

DEFAULT_GOAL = """
01 03 10 04
05 02 00 07
09 11 06 08
13 14 15 12
"""


@dataclass
class SearchConfig:
    start: str = DEFAULT_START
    goal: str = DEFAULT_GOAL
    heuristic: str = "squared_euclid"
    check_parity: bool = True
    progress_every: int = 1000
    node_limit: Optional[int] = None

    def start_board(self) -> Board:
        return resolve_board(self.start)

    def goal_board(self) -> Board:
        return resolve_board(self.goal)

    def merged(self, overrides: Dict[str, Any]) -> "SearchConfig":
        """Copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in overrides.items() if k in known and v is not None})


def load_config(path: Optional[str] = DEFAULT_CONFIG) -> SearchConfig:
    """Reads the `search:` section of a YAML file; a missing default file gives the defaults."""
    if not path or (path == DEFAULT_CONFIG and not os.path.exists(path)):
        return SearchConfig()
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    section = cfg.get("search", {}) or {}
    unknown = set(section) - {f.name for f in fields(SearchConfig)}
    if unknown:
        raise ValueError(f"unknown config keys in {path}: {sorted(unknown)}")
    base_dir = os.path.dirname(os.path.abspath(path))
    for key in ("start", "goal"):
        if isinstance(section.get(key), str):
            section[key] = anchor_board_id(section[key], base_dir)
    return SearchConfig().merged(section)
