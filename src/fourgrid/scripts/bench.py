from __future__ import annotations

import argparse
import csv
import logging
import math
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from fourgrid.ai.base import Agent
from fourgrid.ai.minimax_agent import MinimaxAgent
from fourgrid.config import LOG_LEVEL
from fourgrid.core.board import Board
from fourgrid.core.rules import winner
from fourgrid.game.state import GameState

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "depth",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_nodes_per_move",
    "moves", "time_ms", "nodes", "cutoffs",
]


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    cutoffs: int = 0


def other(p: str) -> str:
    return "O" if p == "X" else "X"


def ppg(a: Agg) -> float:
    return (a.points / a.games) if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return (a.time_ms / a.moves) if a.moves else 0.0


def wilson_lcb(p: float, n: int, z: float = 1.96) -> float:
    if n <= 0:
        return 0.0
    p = max(0.0, min(1.0, p))
    z2 = z * z
    denom = 1.0 + (z2 / n)
    center = p + (z2 / (2.0 * n))
    rad = z * math.sqrt(max(0.0, (p * (1.0 - p) + (z2 / (4.0 * n))) / n))
    return max(0.0, (center - rad) / denom)


def play_headless(
    agent_x: Agent,
    agent_o: Agent,
    seed: int = 0,
    opening_moves: int = 2,
) -> Tuple[str, Dict[str, Dict[str, int]]]:
    """
    Engine vs engine on a fresh board. A few seeded random opening moves keep
    the games apart; the engines themselves are deterministic.
    Returns the outcome ("X", "O" or "D") and per-side search stats.
    """
    state = GameState(board=Board(), current="X", last_status="")
    stats = {
        "X": {"moves": 0, "time_ms": 0, "nodes": 0, "cutoffs": 0},
        "O": {"moves": 0, "time_ms": 0, "nodes": 0, "cutoffs": 0},
    }

    rng = random.Random(seed)
    for _ in range(opening_moves):
        moves = state.board.available_moves()
        if not moves:
            break
        row, col = rng.choice(moves)
        state.board.place(row, col, state.current)
        state.current = other(state.current)

    while not state.board.is_game_over():
        agent = agent_x if state.current == "X" else agent_o
        move = agent.choose_move(state)
        if move is None:
            break

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["cutoffs"] += int(info.get("cutoffs", 0))

        state.board.place(move[0], move[1], state.current)
        state.current = other(state.current)

    w = winner(state.board)
    return (w if w is not None else "D"), stats


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_x: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "X" and a_is_x) or (outcome == "O" and not a_is_x)
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def add_stats(agg: Agg, side_stats: Dict[str, int]) -> None:
    agg.moves += side_stats["moves"]
    agg.time_ms += side_stats["time_ms"]
    agg.nodes += side_stats["nodes"]
    agg.cutoffs += side_stats["cutoffs"]


def run_bench(depths: Sequence[int], games_per_pair: int = 2, seed: int = 0) -> Dict[int, Agg]:
    """
    Round-robin between search depths. Each pairing plays `games_per_pair`
    games, alternating who moves first.
    """
    agg: Dict[int, Agg] = {d: Agg() for d in depths}
    pairs = [(a, b) for i, a in enumerate(depths) for b in depths[i + 1:]]

    for n, (da, db) in enumerate(pairs):
        for g in range(games_per_pair):
            game_seed = seed + 1000 * n + g
            a_is_x = (g % 2 == 0)
            dx, do = (da, db) if a_is_x else (db, da)

            outcome, stats = play_headless(
                MinimaxAgent(name=f"Minimax d{dx}", depth=dx, me="X"),
                MinimaxAgent(name=f"Minimax d{do}", depth=do, me="O"),
                seed=game_seed,
            )
            add_result(agg[da], agg[db], outcome, a_is_x)
            add_stats(agg[dx], stats["X"])
            add_stats(agg[do], stats["O"])

            logger.info("d%d vs d%d game %d/%d -> %s", dx, do, g + 1, games_per_pair, outcome)

    return agg


def result_rows(agg: Dict[int, Agg]) -> List[list]:
    rows = []
    for depth, a in sorted(agg.items()):
        rows.append([
            f"Minimax d{depth}", depth,
            a.games, a.wins, a.draws, a.losses,
            a.points, round(ppg(a), 6),
            round(wilson_lcb(ppg(a), a.games), 6),
            round(avg_ms_per_move(a), 3),
            round((a.nodes / a.moves) if a.moves else 0.0, 3),
            a.moves, a.time_ms, a.nodes, a.cutoffs,
        ])
    return rows


def export_csv(rows: List[list], out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"bench_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        w.writerows(rows)

    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play engine depths against each other and export the results.")
    ap.add_argument("--depths", type=int, nargs="+", default=[1, 2, 3], help="Search depths to compare")
    ap.add_argument("--games", type=int, default=2, help="Games per pairing (colours alternate)")
    ap.add_argument("--seed", type=int, default=0, help="Seed for the random opening moves")
    ap.add_argument("--out-dir", type=str, default="data/results", help="Directory for bench_results_*.csv")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=min(LOG_LEVEL, logging.INFO), format="%(levelname)s %(name)s: %(message)s")

    depths = sorted(set(args.depths))
    if len(depths) < 2:
        print("Need at least two depths to compare.")
        return 2

    agg = run_bench(depths, games_per_pair=args.games, seed=args.seed)
    rows = result_rows(agg)

    print("\n=== Depth benchmark ===")
    for row in rows:
        print(
            f"{row[0]:<12} W-D-L={row[3]}-{row[4]}-{row[5]}  ppg={row[7]:.3f}  "
            f"avg_ms/move={row[9]:.1f}  nodes/move={row[10]:.0f}"
        )

    out_path = export_csv(rows, Path(args.out_dir))
    print(f"\nWrote CSV: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
