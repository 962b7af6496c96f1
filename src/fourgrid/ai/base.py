from __future__ import annotations
from typing import Optional, Protocol

from fourgrid.game.state import GameState
from fourgrid.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Optional[Move]:
        ...
