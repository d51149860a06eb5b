from __future__ import annotations
import argparse, csv, os, time
from typing import Dict, List, Optional
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from puzzle_core.packs import load_board_by_id, resolve_board
from puzzle_core.state import SOLVED
from puzzle_core.render import render_grid
from search.greedy import greedy_search
from heuristics.selector import HEURISTICS, get_heuristic

FIELDS = ["board_id", "heuristic", "success", "nodes", "expanded", "runtime", "solution_len", "reason"]


def _run_one(args_tuple) -> Dict[str, object]:
    board_id, goal_text, heur_name, node_limit = args_tuple
    try:
        start = load_board_by_id(board_id)
        goal = resolve_board(goal_text)
        res = greedy_search(start, goal, distance=get_heuristic(heur_name), node_limit=node_limit)
        return {
            "board_id": board_id,
            "heuristic": heur_name,
            "success": bool(res.get("success", False)),
            "nodes": int(res.get("nodes", 0)),
            "expanded": int(res.get("expanded", 0)),
            "runtime": float(res.get("runtime", 0.0)),
            "solution_len": int(res.get("solution_len", -1)),
            "reason": res.get("reason", ""),
        }
    except (OSError, ValueError, IndexError) as e:
        return {"board_id": board_id, "heuristic": heur_name, "success": False, "nodes": 0,
                "expanded": 0, "runtime": 0.0, "solution_len": -1, "reason": f"error: {e}"}


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Batch greedy runs → CSV (parallel over boards)")
    p.add_argument("--list", required=True, help="file with one board id 'path/to/pack.txt#idx' per line")
    p.add_argument("--goal", default=render_grid(SOLVED), help="goal board text or id (default: solved)")
    p.add_argument("--h", default="squared_euclid", choices=sorted(HEURISTICS))
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--node_limit", type=int, default=200000)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args(argv)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        board_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]

    jobs = args.jobs or cpu_count()
    payload = [(bid, args.goal, args.h, args.node_limit) for bid in board_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Running search", unit="board")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Running search", unit="board"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    print(f"done: {len(rows)} boards → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")
    return rows


if __name__ == "__main__":
    main()
