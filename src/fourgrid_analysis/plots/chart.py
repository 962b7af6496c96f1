from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    if x not in df.columns or y not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[y])):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.6)
    if "name" in df.columns:
        for _, row in df.iterrows():
            plt.annotate(str(row["name"]), (row[x], row[y]), fontsize=7)
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)

    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("engine")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")

    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)


def plot_depth_cost(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """ppg and ms/move against depth on twin axes; time on a log scale."""
    needed = ["depth", "ppg", "avg_ms_per_move"]
    if any(c not in df.columns for c in needed):
        return None

    d = df[needed].dropna().sort_values("depth")
    if d.empty:
        return None

    fig, ax = plt.subplots()
    ax.plot(d["depth"], d["ppg"], marker="o", color="tab:blue")
    ax.set_xlabel("search depth")
    ax.set_ylabel("ppg", color="tab:blue")

    ax2 = ax.twinx()
    ax2.plot(d["depth"], d["avg_ms_per_move"].clip(lower=1), marker="s", color="tab:red")
    ax2.set_yscale("log")
    ax2.set_ylabel("avg ms / move", color="tab:red")

    ax.set_title("Strength vs cost by depth")

    return _finish(fig, outdir, "depth_cost.png", show=show)
