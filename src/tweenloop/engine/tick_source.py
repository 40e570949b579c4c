"""
Tick Source

Periodic timer abstraction the animation bridge subscribes to. The default
implementation runs on the current asyncio event loop.

Ticks are scheduled on an absolute grid (start_at + k * period) so a late
tick does not push every following tick back. Slots that are missed entirely
are skipped rather than delivered in a burst.
"""

import asyncio
from dataclasses import dataclass
from datetime import timedelta
from typing import AsyncIterator, Optional, Protocol

from tweenloop.models.enums import LogCategory
from tweenloop.models.errors import TickSourceError
from tweenloop.utils.logger import get_category_logger
from tweenloop.utils.timing import Clock, monotonic_clock, to_nanos

log = get_category_logger(LogCategory.TICK)


@dataclass(frozen=True)
class Tick:
    """One timer delivery"""
    index: int
    scheduled_ns: int
    delivered_ns: int

    @property
    def lateness_ns(self) -> int:
        return self.delivered_ns - self.scheduled_ns


class TickSource(Protocol):
    """
    Host periodic timer

    Implementations deliver ticks beginning at or after start_at_ns, roughly
    period apart, until close() is called. A failure while ticking is raised
    out of the iterator.
    """
    clock: Clock

    def ticks(self, start_at_ns: int, period: timedelta) -> AsyncIterator[Tick]:
        ...

    def close(self) -> None:
        ...


class AsyncioTickSource:
    """
    Tick source backed by the running asyncio loop

    Must be created from inside a running loop:

        async def main():
            source = AsyncioTickSource()
            async for tick in source.ticks(source.clock(), timedelta(milliseconds=16)):
                ...
    """

    def __init__(self, clock: Optional[Clock] = None):
        try:
            self.loop = asyncio.get_running_loop()
        except RuntimeError as ex:
            raise TickSourceError("no running event loop") from ex

        self.clock: Clock = clock or monotonic_clock
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    async def ticks(self, start_at_ns: int, period: timedelta) -> AsyncIterator[Tick]:
        period_ns = to_nanos(period)
        if period_ns <= 0:
            raise TickSourceError(f"period must be positive, got {period}")

        index = 0
        next_ns = start_at_ns

        while not self._closed:
            # asyncio may wake up to one clock resolution early
            wait_ns = next_ns - self.clock()
            while wait_ns > 0:
                await asyncio.sleep(wait_ns / 1_000_000_000)
                wait_ns = next_ns - self.clock()

            if self._closed:
                break

            yield Tick(index=index, scheduled_ns=next_ns, delivered_ns=self.clock())
            index += 1
            next_ns += period_ns

            # Skip slots that already passed while the consumer was busy
            behind_ns = self.clock() - next_ns
            if behind_ns >= period_ns:
                skipped = behind_ns // period_ns
                next_ns += skipped * period_ns
                log.debug("Skipped late tick slots", skipped=skipped, index=index)
