from __future__ import annotations
import argparse, os
from typing import List, Optional

from puzzle_core.packs import write_pack, resolve_board
from puzzle_core.render import render_grid
from puzzle_core.scramble import scramble_many
from puzzle_core.state import SOLVED


"""
Generate a pack of scrambled boards plus a list of their ids for run_batch.

Usage:
  python -m scripts.make_pack --out puzzle_core/boards/scrambled_20.txt --count 50 --depth 20 --seed 42
"""

def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser()
    p.add_argument("--out", type=str, required=True, help="pack file to write")
    p.add_argument("--list", type=str, default=None, help="id list to write (default: <out>.list)")
    p.add_argument("--count", type=int, default=50)
    p.add_argument("--depth", type=int, default=20, help="random slides per board")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--from", dest="origin", type=str, default=render_grid(SOLVED), help="board to scramble from")
    args = p.parse_args(argv)

    boards = scramble_many(args.count, args.depth, args.seed, resolve_board(args.origin))
    write_pack(args.out, boards)

    list_path = args.list or os.path.splitext(args.out)[0] + ".list"
    with open(list_path, "w", encoding="utf-8") as f:
        for i in range(len(boards)):
            f.write(f"{args.out}#{i}\n")

    print("written:")
    print(" pack:", args.out, len(boards))
    print(" list:", list_path)

if __name__ == "__main__":
    main()
