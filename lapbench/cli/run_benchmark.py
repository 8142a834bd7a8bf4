"""Main benchmark entrypoint."""

from __future__ import annotations

import argparse
import json
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from lapbench import get_version
from lapbench.bench.runner import format_results, run_benchmark, save_results
from lapbench.config import BenchmarkConfig
from lapbench.data import FIXTURE_KINDS
from lapbench.sorts import SORTERS
from lapbench.utils.logging import setup_console_logger, setup_file_logger
from lapbench.utils.seed import set_seed


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sorting benchmark runner")
    parser.add_argument("--algorithm", choices=sorted(SORTERS), default="insertion")
    parser.add_argument("--size", type=int, default=2000)
    parser.add_argument("--runs", type=int, default=20)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--doublings",
        type=int,
        default=1,
        help="Number of sizes to run, doubling from --size each time.",
    )
    parser.add_argument(
        "--fixtures",
        type=str,
        default=",".join(FIXTURE_KINDS),
        help=f"Comma separated fixture kinds (default: {','.join(FIXTURE_KINDS)}).",
    )
    parser.add_argument(
        "--instrument",
        action="store_true",
        help="Count compares and swaps (slows the timed sort).",
    )
    parser.add_argument(
        "--save_dir",
        type=str,
        default=None,
        help="Write config, results and logs to a timestamped run directory here.",
    )
    parser.add_argument(
        "--log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser.parse_args(argv)


def _parse_fixtures(raw: str) -> List[str]:
    kinds = [kind.strip() for kind in raw.split(",") if kind.strip()]
    return kinds or list(FIXTURE_KINDS)


def _build_config(args: argparse.Namespace) -> BenchmarkConfig:
    return BenchmarkConfig(
        algorithm=args.algorithm,
        size=args.size,
        runs=args.runs,
        seed=args.seed,
        doublings=args.doublings,
        fixtures=_parse_fixtures(args.fixtures),
        instrument=args.instrument,
        save_dir=args.save_dir,
    )


def _create_run_directory(config: BenchmarkConfig) -> Path:
    base = Path(config.save_dir).expanduser().resolve()
    base.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base / f"{config.algorithm}_n{config.size}_{timestamp}_seed{config.seed}"
    run_dir.mkdir(parents=True, exist_ok=False)
    return run_dir


def save_json(path: Path, payload: Dict[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def write_env(path: Path) -> None:
    lines = [
        f"python: {sys.version}",
        f"platform: {platform.platform()}",
        f"lapbench: {get_version()}",
        f"numpy: {np.__version__}",
        f"pandas: {pd.__version__}",
    ]
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))


def _run_cli(args: argparse.Namespace) -> List[Dict[str, Any]]:
    setup_console_logger(args.log_level)
    try:
        config = _build_config(args)
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc
    set_seed(config.seed)

    if config.save_dir is None:
        rows = run_benchmark(config)
        print(format_results(rows))
        return rows

    run_dir = _create_run_directory(config)
    save_json(run_dir / "config.json", config.to_dict())
    write_env(run_dir / "env.txt")
    logger = setup_file_logger(run_dir / "bench_log.txt")
    logger.info("Benchmark config: %s", config.to_dict())
    rows = run_benchmark(config, logger=logger)
    save_results(rows, run_dir / "results.csv")
    print(format_results(rows))
    print(f"[Saved] {run_dir}")
    return rows


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    _run_cli(args)


if __name__ == "__main__":
    main()
