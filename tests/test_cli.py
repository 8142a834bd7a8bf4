import json

import pandas as pd
import pytest

from lapbench.cli import run_benchmark


def test_main_prints_results(capsys):
    run_benchmark.main(["--algorithm", "selection", "--size", "8", "--runs", "2"])
    out = capsys.readouterr().out
    assert len(out.strip().splitlines()) == 4
    assert "selection" in out


def test_main_writes_run_directory(tmp_path):
    run_benchmark.main(
        [
            "--algorithm",
            "insertion",
            "--size",
            "8",
            "--runs",
            "1",
            "--fixtures",
            "random,reverse",
            "--instrument",
            "--save_dir",
            str(tmp_path),
        ]
    )
    (run_dir,) = list(tmp_path.iterdir())
    config = json.loads((run_dir / "config.json").read_text(encoding="utf-8"))
    assert config["fixtures"] == ["random", "reverse"]
    assert config["instrument"] is True
    frame = pd.read_csv(run_dir / "results.csv")
    assert list(frame["fixture"]) == ["random", "reverse"]
    assert "compares" in frame.columns
    assert (run_dir / "env.txt").exists()
    assert "Benchmark config" in (run_dir / "bench_log.txt").read_text(encoding="utf-8")


def test_bad_fixture_exits():
    with pytest.raises(SystemExit):
        run_benchmark.main(["--fixtures", "zigzag"])


def test_unknown_algorithm_rejected_by_argparse():
    with pytest.raises(SystemExit):
        run_benchmark.main(["--algorithm", "bogo"])


def test_repeated_fixture_kinds_give_one_row_each(capsys):
    run_benchmark.main(
        ["--algorithm", "builtin", "--size", "8", "--runs", "1", "--fixtures", "random,random"]
    )
    out = capsys.readouterr().out
    assert len(out.strip().splitlines()) == 1
