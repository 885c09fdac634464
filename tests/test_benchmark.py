import pandas as pd
import pytest

from gameoflife import analysis, benchmark
from gameoflife.config import ConfigError


def test_run_benchmark_rows():
    results = benchmark.run_benchmark(sizes=[16, 32], workers_list=[1, 2], generations=2, verbose=False)
    assert len(results) == 2 * 3  # numpy + two worker counts per size
    assert {r["strategy"] for r in results} == {"numpy", "parallel"}
    for r in results:
        assert r["time_ms"] > 0
        assert r["time_per_gen_ms"] == pytest.approx(r["time_ms"] / 2)


def test_run_benchmark_rejects_zero_generations():
    with pytest.raises(ConfigError):
        benchmark.run_benchmark(sizes=[8], generations=0, verbose=False)


def test_save_and_load(tmp_path):
    results = benchmark.run_benchmark(sizes=[16], workers_list=[2], generations=1, verbose=False)
    path = benchmark.save_results(results, tmp_path / "out" / "bench.csv")
    df = analysis.load_results(path)
    assert list(df.columns) == benchmark.FIELDS
    assert len(df) == 2


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        analysis.load_results(tmp_path / "nope.csv")


def sample_frame():
    return pd.DataFrame([
        {"strategy": "numpy", "grid_size": 64, "workers": 1, "time_ms": 100.0, "throughput_mcells_s": 4.0},
        {"strategy": "parallel", "grid_size": 64, "workers": 2, "time_ms": 50.0, "throughput_mcells_s": 8.0},
        {"strategy": "parallel", "grid_size": 64, "workers": 4, "time_ms": 40.0, "throughput_mcells_s": 10.0},
        {"strategy": "parallel", "grid_size": 128, "workers": 2, "time_ms": 10.0, "throughput_mcells_s": 9.0},
    ])


def test_calculate_metrics():
    metrics = analysis.calculate_metrics(sample_frame())
    # 128 has no numpy baseline
    assert metrics["grid_size"].tolist() == [64, 64]
    assert metrics["speedup"].tolist() == pytest.approx([2.0, 2.5])
    assert metrics["efficiency"].tolist() == pytest.approx([100.0, 62.5])


def test_dashboard_and_summary(capsys):
    df = sample_frame()
    metrics = analysis.calculate_metrics(df)
    fig = analysis.create_dashboard(df, metrics)
    assert len(fig.axes) >= 3
    analysis.print_summary(metrics)
    assert "best  4 workers" in capsys.readouterr().out
    analysis.plt.close(fig)


@pytest.mark.parametrize("sizes,workers", [([0], [1]), ([16, -4], [1]), ([16], [0])])
def test_run_benchmark_rejects_bad_sizes_and_workers(sizes, workers):
    with pytest.raises(ConfigError):
        benchmark.run_benchmark(sizes=sizes, workers_list=workers, generations=1, verbose=False)
