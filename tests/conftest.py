from __future__ import annotations

import pytest

from fourgrid.core.board import Board


def board_from_rows(rows):
    """Rows of 'X', 'O' and '.' (empty), top row first."""
    b = Board(size=len(rows))
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch != ".":
                b.place(r, c, ch)
    return b


def draw_symbol(r: int, c: int) -> str:
    # Pairs of columns, flipped every row: no run longer than 2 in any direction.
    return "X" if ((c // 2) + r) % 2 == 0 else "O"


@pytest.fixture
def make_board():
    return board_from_rows


@pytest.fixture
def draw_board():
    b = Board()
    for r in range(b.size):
        for c in range(b.size):
            b.place(r, c, draw_symbol(r, c))
    return b


@pytest.fixture
def quiet_board():
    """Top four rows of the draw pattern; nobody can win in one move."""
    b = Board()
    for r in range(4):
        for c in range(b.size):
            b.place(r, c, draw_symbol(r, c))
    return b
