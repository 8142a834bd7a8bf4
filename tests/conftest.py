import pytest


class FakeClock:
    """Deterministic nanosecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000) -> None:
        self.now = start
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += int(ms * 1_000_000)


@pytest.fixture
def clock():
    return FakeClock()
