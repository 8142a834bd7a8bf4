"""Exceptions raised by lapbench."""

from __future__ import annotations


class InvalidStateError(RuntimeError):
    """A Timer operation was called in the wrong running/paused state."""
