from __future__ import annotations
from typing import Optional

from fourgrid.ai.minimax_agent import validate_depth
from fourgrid.config import DEFAULT_DEPTH, MAX_DEPTH, MIN_DEPTH
from fourgrid.types import Move


def parse_move(raw: str, size: int) -> Optional[Move]:
    """'row col' (or 'row,col'), both 1-based. Returns None on q/quit/exit."""
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None

    parts = s.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter a row and a column, e.g. '3 4', or q.")

    row, col = int(parts[0]) - 1, int(parts[1]) - 1
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Row and column must be between 1 and {size}.")
    return (row, col)


def parse_depth(raw: str) -> int:
    s = raw.strip()
    if not s:
        return DEFAULT_DEPTH
    if not s.isdigit():
        raise ValueError(f"Depth must be a number between {MIN_DEPTH} and {MAX_DEPTH}.")
    return validate_depth(int(s))
