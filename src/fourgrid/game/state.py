from __future__ import annotations
from dataclasses import dataclass

from fourgrid.core.board import Board
from fourgrid.types import Player


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player
    last_status: str = "Player X starts."
