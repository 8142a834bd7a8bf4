"""Sorting benchmark runner."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from lapbench.config import BenchmarkConfig
from lapbench.data import build_fixtures
from lapbench.sorts import SortHelper, Sorter, build_sorter
from lapbench.utils.timer import Timer

_LOGGER = logging.getLogger(__name__)


def time_sort(
    sorter: Sorter,
    xs: np.ndarray,
    runs: int,
    clock: Optional[Callable[[], int]] = None,
) -> float:
    """Mean milliseconds for ``sorter.sort`` over ``runs`` fresh copies of ``xs``."""

    timer = Timer() if clock is None else Timer(clock=clock)
    return timer.repeat(runs, xs.tolist, sorter.sort)


def run_benchmark(
    config: BenchmarkConfig, logger: Optional[logging.Logger] = None
) -> List[Dict[str, Any]]:
    """Time the configured algorithm on every fixture kind and size."""

    logger = logger or _LOGGER
    helper = SortHelper(instrument=config.instrument)
    sorter = build_sorter(config.algorithm, helper)
    rows: List[Dict[str, Any]] = []
    cases = [(size, kind) for size in config.sizes for kind in config.fixtures]
    fixtures_by_size = {
        size: build_fixtures(config.fixtures, size, config.seed)
        for size in config.sizes
    }
    for size, kind in tqdm(cases, desc=config.algorithm, leave=False):
        helper.reset()
        mean_ms = time_sort(sorter, fixtures_by_size[size][kind], config.runs)
        row: Dict[str, Any] = {
            "algorithm": config.algorithm,
            "size": size,
            "fixture": kind,
            "runs": config.runs,
            "mean_ms": mean_ms,
        }
        if config.instrument:
            row.update(helper.stats())
        logger.info(
            "%s n=%d fixture=%s mean=%.4f ms", config.algorithm, size, kind, mean_ms
        )
        rows.append(row)
    return rows


def save_results(rows: List[Dict[str, Any]], path: Path) -> None:
    pd.DataFrame(rows).to_csv(path, index=False)


def format_results(rows: List[Dict[str, Any]]) -> str:
    lines = [
        f"{row['algorithm']:>10} n={row['size']:<8d} {row['fixture']:<8} {row['mean_ms']:.4f} ms"
        for row in rows
    ]
    return "\n".join(lines)
