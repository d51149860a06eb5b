from __future__ import annotations
import argparse
from typing import List, Optional

from tqdm import tqdm

from puzzle_core.render import render_grid
from search.config import DEFAULT_CONFIG, load_config
from search.greedy import greedy_search
from heuristics.selector import HEURISTICS, get_heuristic


"""
Solve one start/goal pair.

Usage:
  python -m scripts.run_search --config configs/search.yaml
  python -m scripts.run_search --start puzzle_core/boards/examples.txt#0 --goal puzzle_core/boards/examples.txt#2
"""


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default=DEFAULT_CONFIG, help="YAML config with a 'search' section")
    p.add_argument("--start", type=str, default=None, help="board text or 'path/to/pack.txt#idx'")
    p.add_argument("--goal", type=str, default=None, help="board text or 'path/to/pack.txt#idx'")
    p.add_argument("--h", dest="heuristic", type=str, default=None, choices=sorted(HEURISTICS), help="heuristic")
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--progress_every", type=int, default=None)
    p.add_argument("--no_parity_check", action="store_true", help="search even if the pair is unsolvable")
    p.add_argument("--quiet", action="store_true", help="no progress bar")
    args = p.parse_args(argv)

    cfg = load_config(args.config).merged({
        "start": args.start,
        "goal": args.goal,
        "heuristic": args.heuristic,
        "node_limit": args.node_limit,
        "progress_every": args.progress_every,
        "check_parity": False if args.no_parity_check else None,
    })
    start = cfg.start_board()
    goal = cfg.goal_board()

    bar = tqdm(desc="Searching", unit="node", disable=args.quiet)

    def on_progress(nodes: int, best: Optional[int]) -> None:
        bar.update(nodes - bar.n)
        bar.set_postfix(best=best)

    try:
        res = greedy_search(
            start,
            goal,
            distance=get_heuristic(cfg.heuristic),
            check_parity=cfg.check_parity,
            node_limit=cfg.node_limit,
            progress_every=cfg.progress_every,
            on_progress=on_progress,
        )
        tqdm.write(f"Result: { {k: v for k, v in res.items() if k != 'path'} }")
    finally:
        bar.close()

    if res.get("success"):
        path = res["path"]  # type: ignore
        for i, st in enumerate(path):
            print(f"\n-- step {i} --\n{render_grid(st)}")
    print(f"\nCalculation time: {res['runtime']:.3f}s")
    return res

if __name__ == "__main__":
    main()
