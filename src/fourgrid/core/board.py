
# src/fourgrid/core/board.py

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from fourgrid.config import BOARD_SIZE
from fourgrid.core import rules
from fourgrid.types import Cell, Player, Move

_SYMBOLS = ("X", "O")

# Cell codes for the fingerprint (character codes of the printed symbols)
_CODES = {None: ord(" "), "X": ord("X"), "O": ord("O")}


def _to_int32(h: int) -> int:
    h &= 0xFFFFFFFF
    return h - (1 << 32) if h >= (1 << 31) else h


@dataclass(slots=True)
class Board:
    size: int = BOARD_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.size)] for _ in range(self.size)]

    def copy(self) -> "Board":
        return Board(self.size, [row[:] for row in self.grid])

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    # Queries

    def get(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row][col] is None

    def is_valid_move(self, row: int, col: int) -> bool:
        return self._in_bounds(row, col) and self.grid[row][col] is None

    def available_moves(self) -> List[Move]:
        """Every empty cell, row-major. Search tie-breaking depends on this order."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.grid[r][c] is None
        ]

    def is_full(self) -> bool:
        return rules.is_full(self)

    def check_win(self, symbol: Player) -> bool:
        return rules.check_win(self, symbol)

    def is_game_over(self) -> bool:
        return rules.is_game_over(self)

    def fingerprint(self) -> int:
        h = 0
        for row in self.grid:
            for cell in row:
                h = _to_int32(31 * h + _CODES[cell])
        return h

    # Mutation

    def place(self, row: int, col: int, symbol: Player) -> None:
        if not self._in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is off the board.")
        if symbol not in _SYMBOLS:
            raise ValueError(f"Unknown symbol {symbol!r}.")
        if self.grid[row][col] is not None:
            raise ValueError(f"Cell ({row}, {col}) is already taken.")
        self.grid[row][col] = symbol

    def remove(self, row: int, col: int) -> None:
        """
        Clear a cell.
        Only the search uses this, to take back a trial placement.
        """
        if not self._in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is off the board.")
        if self.grid[row][col] is None:
            raise ValueError(f"Cannot remove: cell ({row}, {col}) is empty.")
        self.grid[row][col] = None

    @contextmanager
    def trial(self, row: int, col: int, symbol: Player) -> Iterator[None]:
        """Place a piece for the duration of the block; it is always taken back."""
        self.place(row, col, symbol)
        try:
            yield
        finally:
            self.remove(row, col)
