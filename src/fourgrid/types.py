# src/fourgrid/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = Tuple[int, int]   # (row, col), both 0..size-1
Controller = Literal["human", "engine"]
