from __future__ import annotations

from fourgrid.config import (
    BLOCK_WEIGHT,
    CENTER_BONUS,
    DIRECTIONS,
    ENGINE_SYMBOL,
    LINE_BONUS,
    LINE_REACH,
    WIN_SCORE,
)
from fourgrid.core.board import Board
from fourgrid.types import Move, Player


def _other(p: Player) -> Player:
    return "O" if p == "X" else "X"


def centrality(board: Board, row: int, col: int) -> int:
    center = board.size // 2
    return CENTER_BONUS - (abs(row - center) + abs(col - center))


def _walk(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> tuple[int, bool]:
    """
    Count `player` pieces stepping away from (row, col).
    Returns (count, open_end) where open_end means the walk stopped on an empty cell.
    """
    count = 0
    for i in range(1, LINE_REACH + 1):
        r = row + i * dr
        c = col + i * dc
        if r < 0 or r >= board.size or c < 0 or c >= board.size:
            break

        piece = board.grid[r][c]
        if piece == player:
            count += 1
        elif piece is None:
            return count, True
        else:
            break
    return count, False


def line_potential(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> int:
    """
    Pieces of `player` lined up through (row, col) along one direction.
    A line with no empty cell at either end is dead and scores 0.
    """
    fwd, fwd_open = _walk(board, row, col, dr, dc, player)
    back, back_open = _walk(board, row, col, -dr, -dc, player)
    if not (fwd_open or back_open):
        return 0
    return fwd + back


def line_score(board: Board, row: int, col: int, player: Player) -> int:
    score = 0
    for dr, dc in DIRECTIONS:
        # lengths above 3 are wins and have no bonus
        score += LINE_BONUS.get(line_potential(board, row, col, dr, dc, player), 0)
    return score


def _scan(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> int:
    """Count `player` pieces within reach, passing over empty cells; an opposing piece ends the scan."""
    count = 0
    for i in range(1, LINE_REACH + 1):
        r = row + i * dr
        c = col + i * dc
        if r < 0 or r >= board.size or c < 0 or c >= board.size:
            break

        piece = board.grid[r][c]
        if piece == player:
            count += 1
        elif piece is not None:
            break
    return count


def open_line_length(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> int:
    return _scan(board, row, col, dr, dc, player) + _scan(board, row, col, -dr, -dc, player)


def open_line_score(board: Board, row: int, col: int, player: Player) -> int:
    score = 0
    for dr, dc in DIRECTIONS:
        score += LINE_BONUS.get(open_line_length(board, row, col, dr, dc, player), 0)
    return score


def evaluate_empty_cell(board: Board, row: int, col: int, me: Player = ENGINE_SYMBOL) -> int:
    score = centrality(board, row, col)
    score += open_line_score(board, row, col, me)
    score -= open_line_score(board, row, col, _other(me)) * BLOCK_WEIGHT
    return score


def evaluate(board: Board, me: Player = ENGINE_SYMBOL) -> int:
    """
    Static evaluation from `me`'s point of view.

    A win is worth +/-WIN_SCORE. Otherwise every empty cell contributes its
    centrality plus the pieces `me` has within reach along each line through
    it, minus twice the same count for the opponent.
    """
    if board.check_win(me):
        return WIN_SCORE
    if board.check_win(_other(me)):
        return -WIN_SCORE

    score = 0
    for r in range(board.size):
        for c in range(board.size):
            if board.grid[r][c] is None:
                score += evaluate_empty_cell(board, r, c, me)
    return score


def strategic_bonus(board: Board, move: Move, me: Player = ENGINE_SYMBOL) -> int:
    """
    Positional bonus for a candidate move, read off the board *without* the move
    on it. Added on top of the search score at the root.
    """
    row, col = move
    if board.grid[row][col] is not None:
        raise ValueError(f"Candidate ({row}, {col}) must be scored before it is placed.")

    score = centrality(board, row, col)
    score += line_score(board, row, col, me)
    score -= line_score(board, row, col, _other(me)) * BLOCK_WEIGHT
    return score
