from __future__ import annotations

from heuristics.classic import Distance, h_zero, h_misplaced, h_squared_euclid

HEURISTICS = {
    "zero": h_zero,
    "misplaced": h_misplaced,
    "squared_euclid": h_squared_euclid,
}

DEFAULT_HEURISTIC = "squared_euclid"


def get_heuristic(name: str) -> Distance:
    name = name.lower()
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(f"unknown heuristic: {name}") from None
