from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
from typing import Optional
import logging
import time

from fourgrid.config import DEFAULT_DEPTH, ENGINE_SYMBOL, MAX_DEPTH, MIN_DEPTH
from fourgrid.core.board import Board
from fourgrid.core.scoring import evaluate, strategic_bonus
from fourgrid.game.state import GameState
from fourgrid.types import Move, Player

logger = logging.getLogger(__name__)


def _other(p: Player) -> Player:
    return "O" if p == "X" else "X"


def validate_depth(depth: int) -> int:
    if depth < MIN_DEPTH or depth > MAX_DEPTH:
        raise ValueError(f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH}.")
    return depth


def find_winning_move(board: Board, player: Player) -> Optional[Move]:
    """First empty cell (row-major) that completes four in a row for `player`."""
    for row, col in board.available_moves():
        with board.trial(row, col, player):
            wins = board.check_win(player)
        if wins:
            return (row, col)
    return None


@dataclass(slots=True)
class MinimaxAgent:
    """
    Fixed-depth minimax with alpha-beta pruning.

    The board passed in is searched in place: every trial placement goes through
    Board.trial, so the grid is unchanged when a call returns. The chosen move is
    returned, never placed; committing it is up to the caller.
    """

    name: str = "Minimax AI"
    depth: int = DEFAULT_DEPTH
    me: Player = ENGINE_SYMBOL

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    @property
    def opponent(self) -> Player:
        return _other(self.me)

    def choose_move(self, state: GameState) -> Optional[Move]:
        return self.best_move(state.board)

    def best_move(self, board: Board) -> Optional[Move]:
        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        moves = board.available_moves()
        if not moves:
            self._record(None, None, "none", start)
            return None

        winning = find_winning_move(board, self.me)
        if winning is not None:
            self._record(winning, None, "win", start)
            return winning

        blocking = find_winning_move(board, self.opponent)
        if blocking is not None:
            self._record(blocking, None, "block", start)
            return blocking

        best: Optional[Move] = None
        best_score = -inf

        for row, col in moves:
            with board.trial(row, col, self.me):
                score = self.minimax(board, self.depth, -inf, inf, False)

            score += strategic_bonus(board, (row, col), self.me)

            # strict: ties keep the earliest move in row-major order
            if score > best_score:
                best_score = score
                best = (row, col)

        self._record(best, best_score, "search", start)
        return best

    def minimax(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool) -> int:
        self._nodes += 1

        if depth == 0 or board.is_game_over():
            return evaluate(board, self.me)

        if maximizing:
            best = -inf
            for row, col in board.available_moves():
                with board.trial(row, col, self.me):
                    value = self.minimax(board, depth - 1, alpha, beta, False)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    self._cutoffs += 1
                    break
            return best

        best = inf
        for row, col in board.available_moves():
            with board.trial(row, col, self.opponent):
                value = self.minimax(board, depth - 1, alpha, beta, True)
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                self._cutoffs += 1
                break
        return best

    def _record(self, move: Optional[Move], score: Optional[float], reason: str, start: float) -> None:
        elapsed = time.perf_counter() - start
        self.last_info = {
            "reason": reason,
            "depth": self.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": score,
            "move": None if move is None else (move[0] + 1, move[1] + 1),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "%s (%s) chose %s by %s | d=%d nodes=%d cut=%d eval=%s %dms",
            self.name, self.me, move, reason, self.depth,
            self._nodes, self._cutoffs, score, self.last_info["time_ms"],
        )
