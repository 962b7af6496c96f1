from __future__ import annotations
from dataclasses import dataclass

from fourgrid.types import Controller, Player


@dataclass(frozen=True, slots=True)
class Seat:
    symbol: Player
    controller: Controller = "human"

    @property
    def is_engine(self) -> bool:
        return self.controller == "engine"
