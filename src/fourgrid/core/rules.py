from __future__ import annotations
from typing import TYPE_CHECKING, Optional, List, Tuple

from fourgrid.config import CONNECT_N
from fourgrid.types import Player

if TYPE_CHECKING:
    from fourgrid.core.board import Board

Coord = Tuple[int, int]  # (row, col)

PLAYERS: Tuple[Player, Player] = ("X", "O")


def winning_line(board: "Board", symbol: Player) -> Optional[List[Coord]]:
    """
    First run of CONNECT_N consecutive `symbol` cells, or None.
    Scan order: horizontal, vertical, ascending diagonal, descending diagonal.
    """
    g = board.grid
    n = board.size
    k = CONNECT_N

    # Horizontal
    for r in range(n):
        for c in range(n - k + 1):
            if all(g[r][c + i] == symbol for i in range(k)):
                return [(r, c + i) for i in range(k)]

    # Vertical
    for c in range(n):
        for r in range(n - k + 1):
            if all(g[r + i][c] == symbol for i in range(k)):
                return [(r + i, c) for i in range(k)]

    # Ascending diagonal (row and col both grow)
    for r in range(n - k + 1):
        for c in range(n - k + 1):
            if all(g[r + i][c + i] == symbol for i in range(k)):
                return [(r + i, c + i) for i in range(k)]

    # Descending diagonal (row shrinks as col grows)
    for r in range(k - 1, n):
        for c in range(n - k + 1):
            if all(g[r - i][c + i] == symbol for i in range(k)):
                return [(r - i, c + i) for i in range(k)]

    return None


def check_win(board: "Board", symbol: Player) -> bool:
    return winning_line(board, symbol) is not None


def check_winner_with_line(board: "Board") -> Optional[Tuple[Player, List[Coord]]]:
    found = []
    for p in PLAYERS:
        line = winning_line(board, p)
        if line is not None:
            found.append((p, line))

    if len(found) > 1:
        raise ValueError("Both players have four in a row; position is unreachable.")
    return found[0] if found else None


def winner(board: "Board") -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_full(board: "Board") -> bool:
    return all(cell is not None for row in board.grid for cell in row)


def is_draw(board: "Board") -> bool:
    return is_full(board) and winner(board) is None


def is_game_over(board: "Board") -> bool:
    # No precedence between the two players is needed here.
    return check_win(board, "X") or check_win(board, "O") or is_full(board)
