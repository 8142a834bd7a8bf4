"""Selection sort."""

from __future__ import annotations

from typing import Any, List, Sequence

from lapbench.sorts.helper import SortHelper


class SelectionSort:
    def __init__(self, helper: SortHelper) -> None:
        self.helper = helper

    def sort(self, xs: Sequence[Any]) -> List[Any]:
        out = list(xs)
        helper = self.helper
        n = len(out)
        for i in range(n - 1):
            smallest = i
            for j in range(i + 1, n):
                if helper.less(out[j], out[smallest]):
                    smallest = j
            if smallest != i:
                helper.swap(out, i, smallest)
        return out
