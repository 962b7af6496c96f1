from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_nodes_per_move",
    "wins",
    "points",
]

COST_METRICS = frozenset({"avg_ms_per_move", "avg_nodes_per_move"})

TABLE_COLS = (
    "name", "depth",
    "games", "wins", "draws", "losses",
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_nodes_per_move",
    "points",
    "moves", "time_ms", "nodes", "cutoffs",
)


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "ppg"
    top_n: int = 20
    min_games: int = 0
    max_avg_ms_per_move: float | None = None


def _require_cols(df: pd.DataFrame, *cols: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Bench results lack {missing}; have {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Depths with too few games or too slow a move are left out."""
    keep = pd.Series(True, index=df.index)

    if cfg.min_games > 0:
        _require_cols(df, "games")
        keep &= df["games"].fillna(0) >= cfg.min_games

    if cfg.max_avg_ms_per_move is not None:
        _require_cols(df, "avg_ms_per_move")
        keep &= df["avg_ms_per_move"].fillna(float("inf")) <= cfg.max_avg_ms_per_move

    return df[keep].copy()


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, "name", cfg.metric)

    ranked = filter_rows(df, cfg).sort_values(
        cfg.metric,
        ascending=cfg.metric in COST_METRICS,
        kind="stable",
    )
    shown = [c for c in TABLE_COLS if c in ranked.columns]

    out = ranked[shown].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T


def depth_tradeoff(df: pd.DataFrame) -> pd.DataFrame:
    """
    Strength and cost per search depth, sorted by depth.
    `ms_growth` is the ratio of avg_ms_per_move to the previous depth's.
    """
    _require_cols(df, "depth", "ppg", "avg_ms_per_move")

    out = df[["depth", "ppg", "avg_ms_per_move"]].dropna().sort_values("depth").reset_index(drop=True)
    prev = out["avg_ms_per_move"].shift(1)
    out["ms_growth"] = out["avg_ms_per_move"] / prev.where(prev > 0)
    return out
