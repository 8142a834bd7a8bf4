#!/usr/bin/env python
"""Run the benchmark plan described in a YAML file.

Each plan entry has a ``name``, fixed ``params`` and an optional ``grid`` of
values to cross. Every grid point is turned into a BenchmarkConfig before
anything is timed, so a typo in the plan fails fast instead of halfway through
a long sweep. Runs happen in-process through the lapbench CLI entry point.
"""

from __future__ import annotations

import argparse
import dataclasses
import itertools
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence, Tuple

import yaml

from lapbench.cli import run_benchmark
from lapbench.config import BenchmarkConfig

CONFIG_FIELDS = {f.name for f in dataclasses.fields(BenchmarkConfig)}


def load_plan(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    plan = data.get("benchmarks") or []
    if not plan:
        raise ValueError(f"No benchmarks found in {path}")
    return plan


def grid_points(
    params: Dict[str, Any], grid: Dict[str, List[Any]] | None
) -> Iterator[Tuple[str, Dict[str, Any]]]:
    """Yield ``(tag, params)`` for every combination of grid values.

    Without a grid this yields the fixed params once with an empty tag.
    """

    axes = list((grid or {}).items())
    names = [name for name, _ in axes]
    for values in itertools.product(*(choices for _, choices in axes)):
        chosen = dict(zip(names, values))
        tag = ",".join(f"{k}={v}" for k, v in chosen.items())
        yield tag, {**params, **chosen}


def to_config(params: Dict[str, Any], save_dir: Path | None) -> BenchmarkConfig:
    unknown = sorted(set(params) - CONFIG_FIELDS)
    if unknown:
        raise ValueError(f"Unknown benchmark setting(s) {unknown}")
    settings = dict(params)
    if save_dir is not None:
        settings["save_dir"] = str(save_dir)
    return BenchmarkConfig(**settings)


def to_argv(config: BenchmarkConfig) -> List[str]:
    """CLI arguments that reproduce ``config``."""

    argv = [
        "--algorithm", config.algorithm,
        "--size", str(config.size),
        "--runs", str(config.runs),
        "--seed", str(config.seed),
        "--doublings", str(config.doublings),
        "--fixtures", ",".join(config.fixtures),
    ]
    if config.instrument:
        argv.append("--instrument")
    if config.save_dir is not None:
        argv.extend(["--save_dir", config.save_dir])
    return argv


def run_plan(
    config_path: Path, select: Sequence[str], save_dir: Path | None, dry_run: bool
) -> int:
    """Validate and run the selected plan entries. Returns the number of runs."""

    jobs: List[Tuple[str, BenchmarkConfig]] = []
    for entry in load_plan(config_path):
        name = entry.get("name", "unnamed")
        if select and name not in select:
            continue
        for tag, params in grid_points(entry.get("params") or {}, entry.get("grid")):
            label = f"{name}[{tag}]" if tag else name
            jobs.append((label, to_config(params, save_dir)))

    for label, config in jobs:
        argv = to_argv(config)
        print(f"[{label}] lapbench {' '.join(argv)}")
        if not dry_run:
            run_benchmark.main(argv)
    return len(jobs)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a YAML benchmark plan.")
    parser.add_argument(
        "--plan",
        type=Path,
        default=Path(__file__).with_name("benchmarks.yaml"),
        help="Path to the benchmark plan.",
    )
    parser.add_argument(
        "--only",
        nargs="*",
        default=[],
        help="Run only these plan entries.",
    )
    parser.add_argument("--save_dir", type=Path, default=Path("result"))
    parser.add_argument(
        "--dry-run", action="store_true", help="Validate and list runs only."
    )
    args = parser.parse_args()
    run_plan(args.plan, args.only, args.save_dir, args.dry_run)


if __name__ == "__main__":
    main()
