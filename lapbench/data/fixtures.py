"""Integer array fixtures for sorting benchmarks.

Every function returns a freshly allocated array so that runs never share
(and never re-sort) the same input.
"""

from __future__ import annotations

from typing import Dict, Iterable

import numpy as np

FIXTURE_KINDS = ("random", "ordered", "partial", "reverse")


def random_array(n: int, seed: int) -> np.ndarray:
    """n integers drawn uniformly from [0, n)."""

    rng = np.random.default_rng(seed)
    return rng.integers(0, n, size=n, dtype=np.int64)


def ordered_array(n: int) -> np.ndarray:
    return np.arange(n, dtype=np.int64)


def partially_ordered_array(n: int, seed: int) -> np.ndarray:
    """Random first half in [0, n//2), ascending second half n//2 .. n-1."""

    half = n // 2
    rng = np.random.default_rng(seed)
    head = rng.integers(0, max(half, 1), size=half, dtype=np.int64)
    tail = np.arange(half, n, dtype=np.int64)
    return np.concatenate([head, tail])


def reverse_ordered_array(n: int) -> np.ndarray:
    return np.arange(n, 0, -1, dtype=np.int64)


def build_fixture(kind: str, n: int, seed: int) -> np.ndarray:
    """Build one fixture array by kind name."""

    if kind == "random":
        return random_array(n, seed)
    if kind == "ordered":
        return ordered_array(n)
    if kind == "partial":
        return partially_ordered_array(n, seed)
    if kind == "reverse":
        return reverse_ordered_array(n)
    raise ValueError(f"Unknown fixture kind '{kind}'.")


def build_fixtures(kinds: Iterable[str], n: int, seed: int) -> Dict[str, np.ndarray]:
    return {kind: build_fixture(kind, n, seed) for kind in kinds}
