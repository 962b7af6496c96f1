from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


BENCH_NUMERIC_COLS = (
    "depth",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_nodes_per_move",
    "moves", "time_ms", "nodes", "cutoffs",
)

_DEPTH_IN_NAME = re.compile(r"\bd(\d+)$")


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = BENCH_NUMERIC_COLS


def _to_numbers(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    present = [c for c in cols if c in df.columns]
    return df.assign(**{c: pd.to_numeric(df[c], errors="coerce") for c in present})


def _depth_from_name(names: pd.Series) -> pd.Series:
    """'Minimax d3' -> 3; engines without a depth suffix get NaN."""
    return pd.to_numeric(names.str.extract(_DEPTH_IN_NAME, expand=False), errors="coerce")


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """
    Read one bench_results_*.csv into a frame with one row per engine depth.
    Stat columns become numeric (unparseable cells turn into NaN) and rows
    without an engine name are discarded.
    """
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"Bench CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path).rename(columns=str.strip)
    if "name" not in df.columns:
        raise ValueError(f"Bench CSV has no 'name' column: {list(df.columns)}")

    df = _to_numbers(df, spec.expected_cols)
    df["name"] = df["name"].fillna("").astype(str).str.strip()
    df = df[df["name"] != ""].reset_index(drop=True)

    if "depth" not in df.columns:
        df["depth"] = _depth_from_name(df["name"])
    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "bench_results_*.csv") -> Path:
    """Newest bench export in `results_dir`; the %Y%m%d_%H%M%S stamp sorts by name."""
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    newest = max(results_dir.glob(pattern), key=lambda p: p.name, default=None)
    if newest is None:
        raise FileNotFoundError(f"No bench exports matching {pattern} in {results_dir}")
    return newest
