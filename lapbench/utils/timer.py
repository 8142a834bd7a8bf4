"""Lap-counting stopwatch for benchmarking repeated work."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from lapbench.errors import InvalidStateError

logger = logging.getLogger(__name__)

# get_clock and to_millisecs must agree on the tick unit.
NS_PER_MS = 1_000_000


def get_clock() -> int:
    """Return monotonic clock ticks in nanoseconds."""

    return time.perf_counter_ns()


def to_millisecs(ticks: int) -> float:
    """Convert nanosecond ticks (as produced by get_clock) to milliseconds."""

    return ticks / NS_PER_MS


@dataclass
class Timer:
    """Stopwatch that accumulates ticks across pause/resume and counts laps.

    A new Timer is already running. Call ``lap()`` at each repetition boundary,
    then ``pause()`` (or ``stop()``) and read ``mean_lap_time()``. Time is only
    read from the clock at resume/pause boundaries: resume subtracts the current
    reading from ``ticks`` and pause adds it back, so ``ticks`` holds the net
    running time whenever the Timer is paused.
    """

    clock: Callable[[], int] = field(default=get_clock, repr=False)
    ticks: int = field(default=0, init=False)
    laps: int = field(default=0, init=False)
    running: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.resume()

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None and self.running:
            self.pause()

    def repeat(
        self,
        n: int,
        source: Callable[[], Any],
        function: Optional[Callable[[Any], Any]] = None,
        pre_function: Optional[Callable[[Any], Any]] = None,
        post_function: Optional[Callable[[Any], None]] = None,
    ) -> float:
        """Run a unit of work ``n`` times, one lap each, and return the mean lap time.

        ``source`` is a zero-argument callable with two roles:

        * ``repeat(n, work)``: ``source`` is the work itself. It is called once
          per repetition and its result ignored.
        * ``repeat(n, supplier, function, pre_function, post_function)``:
          ``source`` supplies the input and each repetition computes
          ``function(source())``. ``pre_function`` maps the supplied value
          before ``function`` sees it and ``post_function`` consumes the result.
          Each hook that is present records an extra lap. When both hooks are
          present the lap counter is divided by three after the mean is taken,
          so ``laps`` reports logical repetitions while the returned mean stays
          per lap.

        Hooks require ``function``; passing them without it raises TypeError
        before anything runs. Exceptions from any callable propagate and leave
        the Timer running.
        """

        if function is None:
            if pre_function is not None or post_function is not None:
                raise TypeError("pre_function/post_function require function")
            logger.debug("repeat: with %d runs", n)
            for _ in range(n):
                source()
                self.lap()
            self.pause()
            return self.mean_lap_time()

        logger.debug("repeat: with %d runs", n)
        for _ in range(n):
            t = source()
            if pre_function is not None:
                t = pre_function(t)
                self.lap()
            u = function(t)
            if post_function is not None:
                post_function(u)
                self.lap()
            self.lap()
        self.pause()
        result = self.mean_lap_time()
        if pre_function is not None and post_function is not None:
            self.laps //= 3
        return result

    def stop(self) -> float:
        """Pause, counting a final lap, and return the mean lap time in ms."""

        self.pause_and_lap()
        return self.mean_lap_time()

    def mean_lap_time(self) -> float:
        """Mean milliseconds per lap. Raises ZeroDivisionError if no laps were counted."""

        if self.running:
            raise InvalidStateError("still running")
        return to_millisecs(self.ticks) / self.laps

    def pause_and_lap(self) -> None:
        """Count a lap and pause."""

        self.lap()
        self.ticks += self.clock()
        self.running = False

    def resume(self) -> None:
        """Resume a paused timer."""

        if self.running:
            raise InvalidStateError("already running")
        self.ticks -= self.clock()
        self.running = True

    def lap(self) -> None:
        """Increment the lap counter without pausing."""

        if not self.running:
            raise InvalidStateError("not running")
        self.laps += 1

    def pause(self) -> None:
        """Pause without counting a lap."""

        self.pause_and_lap()
        self.laps -= 1

    def millisecs(self) -> float:
        """Total milliseconds accumulated while running."""

        if self.running:
            raise InvalidStateError("still running")
        return to_millisecs(self.ticks)
