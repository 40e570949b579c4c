import asyncio
from datetime import timedelta
from typing import Callable, Optional

import pytest

from tweenloop.engine.tick_source import Tick
from tweenloop.models.enums import LogLevel
from tweenloop.utils.logger import configure_logger
from tweenloop.utils.timing import to_nanos

MS = 1_000_000
SECOND = 1_000 * MS


class FakeClock:
    """Monotonic clock under test control (integer nanoseconds)"""

    def __init__(self, start_ns: int = 5 * SECOND):
        self.now_ns = start_ns

    def __call__(self) -> int:
        return self.now_ns

    def advance_ms(self, ms: float) -> None:
        self.now_ns += int(ms * MS)

    def set_ms(self, ms: float, origin: int = 0) -> None:
        self.now_ns = origin + int(ms * MS)


class ScriptedTickSource:
    """
    Tick source that moves a FakeClock instead of sleeping

    Tick i is delivered at start_at + i * period + jitter(i). Stops after
    max_ticks so infinite animations terminate in tests.
    """

    def __init__(
        self,
        clock: FakeClock,
        max_ticks: int = 1_000,
        jitter_ms: Optional[Callable[[int], float]] = None,
    ):
        self.clock = clock
        self.max_ticks = max_ticks
        self.jitter_ms = jitter_ms or (lambda i: 0)
        self.closed = False
        self.requested = None
        self.delivered = 0

    async def ticks(self, start_at_ns: int, period: timedelta):
        self.requested = (start_at_ns, period)
        period_ns = to_nanos(period)

        index = 0
        while not self.closed and index < self.max_ticks:
            scheduled = start_at_ns + index * period_ns
            self.clock.now_ns = scheduled + int(self.jitter_ms(index) * MS)
            self.delivered += 1
            yield Tick(index=index, scheduled_ns=scheduled, delivered_ns=self.clock())
            index += 1
            await asyncio.sleep(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def quiet_logger():
    configure_logger(min_level=LogLevel.WARN, use_colors=False)
    yield
    configure_logger(min_level=LogLevel.INFO, use_colors=True)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tick_source(clock):
    return ScriptedTickSource(clock, max_ticks=200)
