"""Move selection: shortcuts, alpha-beta search and board restoration."""

from math import inf

import pytest

from fourgrid.ai.minimax_agent import MinimaxAgent, find_winning_move, validate_depth
from fourgrid.core.board import Board
from fourgrid.core.scoring import evaluate, strategic_bonus
from fourgrid.game.state import GameState


def plain_minimax(board, depth, maximizing, me="O"):
    """Reference minimax without pruning."""
    if depth == 0 or board.is_game_over():
        return evaluate(board, me)
    opp = "X" if me == "O" else "O"
    values = []
    for row, col in board.available_moves():
        with board.trial(row, col, me if maximizing else opp):
            values.append(plain_minimax(board, depth - 1, not maximizing, me))
    return max(values) if maximizing else min(values)


class TestFindWinningMove:
    def test_none_on_empty_board(self):
        assert find_winning_move(Board(), "O") is None

    def test_first_in_row_major_order(self, make_board):
        b = make_board([
            "......",
            ".OOO..",
            "......",
            "......",
            "......",
            "......",
        ])
        assert find_winning_move(b, "O") == (1, 0)
        assert b.get(1, 0) is None


class TestShortcuts:
    @pytest.mark.parametrize("depth", [1, 3, 10])
    def test_takes_immediate_win(self, make_board, depth):
        b = make_board([
            "X.....",
            "......",
            "OOO...",
            "......",
            "X.....",
            "X.....",
        ])
        agent = MinimaxAgent(depth=depth)
        assert agent.best_move(b) == (2, 3)
        assert agent.last_info["reason"] == "win"

    def test_win_before_block(self, make_board):
        b = make_board([
            "XXX...",
            "......",
            "OOO...",
            "......",
            "......",
            "......",
        ])
        assert MinimaxAgent(depth=2).best_move(b) == (2, 3)

    @pytest.mark.parametrize("depth", [1, 10])
    def test_blocks_opponent_win(self, make_board, depth):
        b = make_board([
            "XXX...",
            "......",
            "......",
            "......",
            "......",
            "O.O...",
        ])
        agent = MinimaxAgent(depth=depth)
        assert agent.best_move(b) == (0, 3)
        assert agent.last_info["reason"] == "block"

    def test_blocks_diagonal(self, make_board):
        b = make_board([
            "X.....",
            ".X....",
            "..X...",
            "......",
            "O....O",
            "......",
        ])
        assert MinimaxAgent(depth=3).best_move(b) == (3, 3)

    def test_shortcut_leaves_board_untouched(self, make_board):
        b = make_board([
            "XXX...",
            "......",
            "......",
            "......",
            "......",
            "O.O...",
        ])
        before = b.snapshot()
        MinimaxAgent(depth=1).best_move(b)
        assert b.snapshot() == before


class TestNoMove:
    def test_full_board_returns_none(self, draw_board):
        agent = MinimaxAgent(depth=3)
        assert agent.best_move(draw_board) is None
        assert agent.last_info["reason"] == "none"

    def test_choose_move_on_full_board(self, draw_board):
        state = GameState(board=draw_board, current="O")
        assert MinimaxAgent().choose_move(state) is None


class TestSearch:
    def test_depth_zero_picks_best_static_candidate(self, quiet_board):
        agent = MinimaxAgent(depth=0)
        move = agent.best_move(quiet_board)
        assert agent.last_info["reason"] == "search"

        scores = []
        for row, col in quiet_board.available_moves():
            with quiet_board.trial(row, col, "O"):
                s = evaluate(quiet_board, "O")
            scores.append((s + strategic_bonus(quiet_board, (row, col), "O"), (row, col)))
        best = max(s for s, _ in scores)
        first_best = next(m for s, m in scores if s == best)
        assert move == first_best

    def test_board_restored_after_best_move(self, quiet_board):
        before = quiet_board.snapshot()
        fp = quiet_board.fingerprint()
        move = MinimaxAgent(depth=1).best_move(quiet_board)
        assert move is not None
        assert quiet_board.is_empty(*move)
        assert quiet_board.snapshot() == before
        assert quiet_board.fingerprint() == fp

    def test_board_restored_after_pruned_search(self, quiet_board):
        before = quiet_board.snapshot()
        fp = quiet_board.fingerprint()
        agent = MinimaxAgent(depth=2)
        move = agent.best_move(quiet_board)
        assert move is not None
        assert agent.last_info["reason"] == "search"
        assert agent.last_info["cutoffs"] > 0
        assert quiet_board.snapshot() == before
        assert quiet_board.fingerprint() == fp

    def test_deterministic(self, quiet_board):
        a = MinimaxAgent(depth=1).best_move(quiet_board)
        b = MinimaxAgent(depth=1).best_move(quiet_board)
        c = MinimaxAgent(depth=1).best_move(quiet_board.copy())
        assert a == b == c

    @pytest.mark.parametrize("maximizing", [True, False])
    def test_alpha_beta_matches_plain_minimax(self, quiet_board, maximizing):
        agent = MinimaxAgent(depth=2)
        expected = plain_minimax(quiet_board, 2, maximizing)
        before = quiet_board.snapshot()
        assert agent.minimax(quiet_board, 2, -inf, inf, maximizing) == expected
        assert quiet_board.snapshot() == before

    def test_minimax_evaluates_game_over_immediately(self, draw_board):
        agent = MinimaxAgent(depth=5)
        assert agent.minimax(draw_board, 5, -inf, inf, True) == evaluate(draw_board)
        assert agent._nodes == 1

    def test_stats_recorded(self, quiet_board):
        agent = MinimaxAgent(depth=1)
        move = agent.best_move(quiet_board)
        info = agent.last_info
        assert info["reason"] == "search"
        assert info["depth"] == 1
        assert info["nodes"] > 0
        assert info["move"] == (move[0] + 1, move[1] + 1)
        assert info["time_ms"] >= 1


class TestValidateDepth:
    @pytest.mark.parametrize("depth", [1, 3, 10])
    def test_accepts_range(self, depth):
        assert validate_depth(depth) == depth

    @pytest.mark.parametrize("depth", [0, 11, -1])
    def test_rejects_outside_range(self, depth):
        with pytest.raises(ValueError):
            validate_depth(depth)
