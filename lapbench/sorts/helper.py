"""Comparison/swap helper shared by the sorting algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class SortHelper:
    """Performs compares and swaps, counting them when instrumented."""

    instrument: bool = False
    compares: int = 0
    swaps: int = 0

    def less(self, a: Any, b: Any) -> bool:
        if self.instrument:
            self.compares += 1
        return a < b

    def swap(self, xs: List[Any], i: int, j: int) -> None:
        if self.instrument:
            self.swaps += 1
        xs[i], xs[j] = xs[j], xs[i]

    def reset(self) -> None:
        self.compares = 0
        self.swaps = 0

    def stats(self) -> Dict[str, int]:
        return {"compares": self.compares, "swaps": self.swaps}
