"""Benchmark CSV loading, summaries and figures."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from fourgrid_analysis.cli.analyze_csv import main as analyze_main
from fourgrid_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from fourgrid_analysis.metrics.summarize import SummaryConfig, depth_tradeoff, numeric_summary, top_table
from fourgrid_analysis.plots import plot_depth_cost, plot_top_bar


@pytest.fixture
def results_csv(tmp_path):
    df = pd.DataFrame({
        "name": ["Minimax d1", "Minimax d2", "Minimax d3"],
        "depth": [1, 2, 3],
        "games": [4, 4, 4],
        "wins": [0, 2, 4],
        "draws": [1, 1, 0],
        "losses": [3, 1, 0],
        "points": [0.5, 2.5, 4.0],
        "ppg": [0.125, 0.625, 1.0],
        "avg_ms_per_move": [2.0, 20.0, 200.0],
        "nodes": [100, 1000, "n/a"],
    })
    path = tmp_path / "bench_results_20260101_000000.csv"
    df.to_csv(path, index=False)
    return path


class TestLoad:
    def test_coerces_numbers(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        assert len(df) == 3
        assert pd.api.types.is_numeric_dtype(df["nodes"])
        assert df["nodes"].isna().sum() == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))

    def test_missing_name_column(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("depth,ppg\n1,0.5\n")
        with pytest.raises(ValueError):
            load_results(LoadSpec(csv_path=path))

    def test_blank_names_dropped(self, tmp_path):
        path = tmp_path / "blanks.csv"
        path.write_text(" name ,depth,ppg\nMinimax d1,1,0.5\n,2,0.5\n  ,3,0.5\n")
        df = load_results(LoadSpec(csv_path=path))
        assert list(df["name"]) == ["Minimax d1"]

    def test_depth_read_from_name(self, tmp_path):
        path = tmp_path / "no_depth.csv"
        path.write_text("name,ppg\nMinimax d4,0.5\nhuman,0.5\n")
        df = load_results(LoadSpec(csv_path=path))
        assert df["depth"].iloc[0] == 4
        assert pd.isna(df["depth"].iloc[1])

    def test_latest_file(self, tmp_path, results_csv):
        newer = tmp_path / "bench_results_20260202_000000.csv"
        newer.write_text(results_csv.read_text())
        assert load_latest_from_dir(tmp_path) == newer

    def test_latest_in_empty_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_latest_from_dir(tmp_path)


class TestSummaries:
    def test_top_table_by_ppg(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        table = top_table(df, SummaryConfig(metric="ppg", top_n=2))
        assert list(table["name"]) == ["Minimax d3", "Minimax d2"]
        assert list(table["rk"]) == [1, 2]

    def test_top_table_cost_metric_ascending(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        table = top_table(df, SummaryConfig(metric="avg_ms_per_move"))
        assert table["name"].iloc[0] == "Minimax d1"

    def test_filter_by_speed(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        table = top_table(df, SummaryConfig(metric="ppg", max_avg_ms_per_move=50.0))
        assert "Minimax d3" not in set(table["name"])

    def test_unknown_metric(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        with pytest.raises(ValueError):
            top_table(df, SummaryConfig(metric="elo"))  # type: ignore[arg-type]

    def test_depth_tradeoff(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        out = depth_tradeoff(df)
        assert list(out["depth"]) == [1, 2, 3]
        assert pd.isna(out["ms_growth"].iloc[0])
        assert out["ms_growth"].iloc[1] == pytest.approx(10.0)
        assert out["ms_growth"].iloc[2] == pytest.approx(10.0)

    def test_numeric_summary(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        desc = numeric_summary(df)
        assert "ppg" in desc.index
        assert desc.loc["depth", "max"] == 3


class TestPlots:
    def test_depth_cost_figure(self, results_csv, tmp_path):
        df = load_results(LoadSpec(csv_path=results_csv))
        out = plot_depth_cost(df, tmp_path / "figs", show=False)
        assert out is not None and out.exists()

    def test_missing_column_skips(self, tmp_path):
        df = pd.DataFrame({"name": ["a"], "ppg": [0.5]})
        assert plot_depth_cost(df, tmp_path, show=False) is None
        assert plot_top_bar(df, tmp_path, metric="wins", top_n=5, show=False) is None


class TestCli:
    def test_tables_only(self, results_csv, capsys):
        assert analyze_main(["--csv", str(results_csv), "--no-plots"]) == 0
        out = capsys.readouterr().out
        assert "Top table" in out
        assert "Depth trade-off" in out

    def test_with_figures(self, results_csv, tmp_path):
        outdir = tmp_path / "figs"
        assert analyze_main(["--csv", str(results_csv), "--outdir", str(outdir)]) == 0
        assert (outdir / "depth_cost.png").exists()
