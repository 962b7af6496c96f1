from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from fourgrid.config import CLEAR_SCREEN
from fourgrid.core.board import Board
from fourgrid.types import Cell
from fourgrid.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET

Coord = Tuple[int, int]


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == "X":
        return c("X", FG_RED)
    return c("O", FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("FOUR IN A ROW", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    nums = "     " + " ".join(str(i + 1) for i in range(board.size))
    print(c(nums, DIM))

    for r in range(board.size):
        parts = []
        for col in range(board.size):
            p = _piece(board.get(r, col))
            if (r, col) in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)

        print(c(f" {r + 1}", DIM) + " | " + " ".join(parts) + " |")

    print(c("     " + "—" * (2 * board.size - 1), DIM))
    print(c(f"   Enter 'row col' (1-{board.size}) to place. Enter q to quit.", DIM))
