"""Benchmark input fixtures."""

from .fixtures import (
    FIXTURE_KINDS,
    build_fixture,
    build_fixtures,
    ordered_array,
    partially_ordered_array,
    random_array,
    reverse_ordered_array,
)

__all__ = [
    "FIXTURE_KINDS",
    "build_fixture",
    "build_fixtures",
    "ordered_array",
    "partially_ordered_array",
    "random_array",
    "reverse_ordered_array",
]
