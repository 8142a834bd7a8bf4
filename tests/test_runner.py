import numpy as np
import pandas as pd

from lapbench.bench import runner
from lapbench.config import BenchmarkConfig
from lapbench.sorts import build_sorter


def test_time_sort_sorts_fresh_copy_each_run():
    seen = []

    class RecordingSort:
        def sort(self, xs):
            seen.append(list(xs))
            xs.sort()
            return xs

    xs = np.array([3, 1, 2])
    mean = runner.time_sort(RecordingSort(), xs, runs=3)
    assert seen == [[3, 1, 2]] * 3
    np.testing.assert_array_equal(xs, [3, 1, 2])
    assert mean >= 0


def test_time_sort_with_fake_clock(clock):
    class SlowSort:
        def sort(self, xs):
            clock.advance_ms(2)
            return sorted(xs)

    assert runner.time_sort(SlowSort(), np.arange(4), runs=5, clock=clock) == 2.0


def test_run_benchmark_rows():
    config = BenchmarkConfig(algorithm="insertion", size=16, runs=2, doublings=2)
    rows = runner.run_benchmark(config)
    assert len(rows) == 8
    assert {row["size"] for row in rows} == {16, 32}
    assert [row["fixture"] for row in rows[:4]] == config.fixtures
    assert all(row["mean_ms"] >= 0 and row["runs"] == 2 for row in rows)
    assert "compares" not in rows[0]


def test_run_benchmark_instrumented_counts_per_case():
    config = BenchmarkConfig(
        algorithm="insertion", size=4, runs=2, fixtures=["ordered", "reverse"], instrument=True
    )
    ordered, reverse = runner.run_benchmark(config)
    assert ordered["swaps"] == 0
    assert ordered["compares"] == 2 * 3
    assert reverse["swaps"] == 2 * 6


def test_save_and_format_results(tmp_path):
    rows = runner.run_benchmark(BenchmarkConfig(algorithm="builtin", size=8, runs=1))
    path = tmp_path / "results.csv"
    runner.save_results(rows, path)
    frame = pd.read_csv(path)
    assert list(frame.columns) == ["algorithm", "size", "fixture", "runs", "mean_ms"]
    assert len(frame) == 4
    text = runner.format_results(rows)
    assert len(text.splitlines()) == 4
    assert "builtin" in text and "ms" in text


def test_builtin_sorter_from_registry_matches_numpy_sort():
    xs = np.random.default_rng(0).integers(0, 100, size=50)
    assert build_sorter("builtin").sort(xs.tolist()) == np.sort(xs).tolist()
