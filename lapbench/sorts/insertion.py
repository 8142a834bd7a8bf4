"""Insertion sort."""

from __future__ import annotations

from typing import Any, List, Sequence

from lapbench.sorts.helper import SortHelper


class InsertionSort:
    """Classic adjacent-swap insertion sort."""

    def __init__(self, helper: SortHelper) -> None:
        self.helper = helper

    def sort(self, xs: Sequence[Any]) -> List[Any]:
        out = list(xs)
        helper = self.helper
        for i in range(1, len(out)):
            j = i
            while j > 0 and helper.less(out[j], out[j - 1]):
                helper.swap(out, j, j - 1)
                j -= 1
        return out
