from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import os

from .parser import parse_board_str
from .render import render_grid
from .state import Board, InvalidBoardError


@dataclass
class BoardRef:
    path: str
    index: int  # index of the board inside the pack file

    def __str__(self) -> str:
        return f"{self.path}#{self.index}"


def _split_on_blank_lines(text: str) -> List[str]:
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line.rstrip("\n"))
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def iterate_board_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[BoardRef, str]]:
    """Iterate over all .txt packs in the given subfolders and return (board reference, board string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            for i, block in enumerate(_split_on_blank_lines(content)):
                yield BoardRef(path=fpath, index=i), block


def parse_board_id(board_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/pack.txt#3" into (path, index)."""
    if "#" not in board_id:
        return board_id, 0
    path, idx = board_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        raise ValueError(f"Bad board index in id {board_id!r}") from None
    return path, k


def load_board_by_id(board_id: str) -> Board:
    """Loads board #idx of a pack file directly, without directory traversal."""
    path, wanted = parse_board_id(board_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = _split_on_blank_lines(content)
    if not blocks:
        raise ValueError(f"No boards found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return parse_board_str(blocks[wanted])


def _looks_like_id(ref: str) -> bool:
    return "\n" not in ref and "#" in ref


def anchor_board_id(text: str, base_dir: str) -> str:
    """Rewrites a relative "path#idx" id to point inside `base_dir` when the pack exists there."""
    ref = text.strip()
    if not _looks_like_id(ref):
        return text
    path, _ = ref.rsplit("#", 1)
    if os.path.isabs(path):
        return text
    candidate = os.path.join(base_dir, path)
    if os.path.isfile(candidate):
        return os.path.join(base_dir, ref)
    return text


def resolve_board(text: str) -> Board:
    """Board from either inline text or a "path#idx" id."""
    ref = text.strip()
    if "\n" not in ref and os.path.isfile(ref.rsplit("#", 1)[0]):
        return load_board_by_id(ref)
    if _looks_like_id(ref):
        path = ref.rsplit("#", 1)[0]
        raise InvalidBoardError(f"Board pack not found: {path!r} (expected 'path/to/pack.txt#idx' or board text)")
    return parse_board_str(text)


def write_pack(path: str, boards: List[Board]) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n\n".join(render_grid(b) for b in boards))
        f.write("\n")
