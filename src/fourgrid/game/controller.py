from __future__ import annotations

from typing import Optional
import logging

from fourgrid.ai.minimax_agent import MinimaxAgent
from fourgrid.config import DEFAULT_DEPTH, ENGINE_SYMBOL, HUMAN_SYMBOL
from fourgrid.core.board import Board
from fourgrid.core.rules import check_winner_with_line, winner
from fourgrid.game.players import Seat
from fourgrid.game.state import GameState
from fourgrid.types import Move, Player
from fourgrid.ui.prompts import parse_move
from fourgrid.ui.render import render

logger = logging.getLogger(__name__)


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


class Game:
    """
    Alternates turns on one shared Board.

    X is always a human and moves first. O is a second human, or the engine
    when `vs_engine` is set; the engine's depth is fixed for the session.
    """

    def __init__(self, board: Optional[Board] = None, vs_engine: bool = False, depth: int = DEFAULT_DEPTH) -> None:
        self.state = GameState(board=board if board is not None else Board(), current=HUMAN_SYMBOL)
        self.vs_engine = vs_engine
        self.seats = {
            HUMAN_SYMBOL: Seat(HUMAN_SYMBOL, "human"),
            ENGINE_SYMBOL: Seat(ENGINE_SYMBOL, "engine" if vs_engine else "human"),
        }
        self.engine: Optional[MinimaxAgent] = MinimaxAgent(depth=depth) if vs_engine else None
        self.is_over = False

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current(self) -> Seat:
        return self.seats[self.state.current]

    def _after_move(self, symbol: Player) -> None:
        if self.board.check_win(symbol):
            self.is_over = True
            self.state.last_status = f"Player {symbol} wins!"
        elif self.board.is_full():
            self.is_over = True
            self.state.last_status = "Draw game."
        else:
            self.state.current = other(symbol)

    def handle_move(self, row: int, col: int) -> bool:
        """Place the current player's piece. Returns False if nothing was played."""
        if self.is_over:
            return False
        if not self.board.is_valid_move(row, col):
            return False

        symbol = self.state.current
        self.board.place(row, col, symbol)
        self.state.last_status = f"Player {symbol} played {row + 1} {col + 1}"
        self._after_move(symbol)
        return True

    def engine_turn(self) -> Optional[Move]:
        if self.is_over or self.engine is None:
            return None
        if not self.current.is_engine:
            return None

        move = self.engine.best_move(self.board)
        if move is None:
            # nothing left to play
            self.is_over = True
            return None

        row, col = move
        symbol = self.state.current
        self.board.place(row, col, symbol)

        info = self.engine.last_info
        self.state.last_status = (
            f"{self.engine.name} played {row + 1} {col + 1} | "
            f"{info.get('reason')} | "
            f"d={info.get('depth')} | "
            f"nodes={info.get('nodes')} | "
            f"cut={info.get('cutoffs')} | "
            f"{info.get('time_ms')}ms"
        )
        self._after_move(symbol)
        return move

    def winner(self) -> Optional[Player]:
        return winner(self.board)


def run_game(game: Game) -> None:
    """Terminal loop: render, read a move, let the engine answer."""
    while True:
        res = check_winner_with_line(game.board)
        highlight = res[1] if res else None
        render(game.board, game.state.last_status, highlight=highlight)

        if game.is_over:
            return

        try:
            raw = input(f"Player {game.state.current} move: ")
            move = parse_move(raw, game.board.size)
            if move is None:
                render(game.board, "Game quit.", highlight=highlight)
                return

            if not game.handle_move(*move):
                game.state.last_status = f"Cell {move[0] + 1} {move[1] + 1} is taken."
                continue

            if game.vs_engine and not game.is_over:
                game.engine_turn()

        except ValueError as e:
            game.state.last_status = str(e)
            logger.debug("Rejected input: %s", e)
