"""Sorting algorithm registry."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Protocol, Sequence

from .helper import SortHelper
from .insertion import InsertionSort
from .selection import SelectionSort


class Sorter(Protocol):
    helper: SortHelper

    def sort(self, xs: Sequence[Any]) -> List[Any]: ...


class BuiltinSort:
    """Python's built-in sort, as a reference baseline (not instrumented)."""

    def __init__(self, helper: SortHelper) -> None:
        self.helper = helper

    def sort(self, xs: Sequence[Any]) -> List[Any]:
        return sorted(xs)


SORTERS: Dict[str, Callable[[SortHelper], Sorter]] = {
    "insertion": InsertionSort,
    "selection": SelectionSort,
    "builtin": BuiltinSort,
}


def build_sorter(name: str, helper: SortHelper | None = None) -> Sorter:
    """Instantiate the requested sorting algorithm."""

    try:
        factory = SORTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm '{name}'; available: {sorted(SORTERS)}."
        ) from None
    return factory(helper if helper is not None else SortHelper())


__all__ = [
    "SORTERS",
    "BuiltinSort",
    "InsertionSort",
    "SelectionSort",
    "SortHelper",
    "Sorter",
    "build_sorter",
]
