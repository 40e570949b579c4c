"""
Start/stop bridge

Connects an AnimationRunner to a tick source. Each tick either produces one
message for the consumer or, once the runner is done, ends the subscription.
Completion is signalled by the absence of further ticks, never by an extra
terminal message.
"""

import asyncio
import inspect
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Union

from tweenloop.animations.runner import AnimationRunner
from tweenloop.engine.tick_source import AsyncioTickSource, TickSource
from tweenloop.lifecycle.task_registry import TaskCategory, create_tracked_task
from tweenloop.models.enums import LogCategory
from tweenloop.models.errors import TickSourceError
from tweenloop.utils.logger import get_category_logger
from tweenloop.utils.timing import to_nanos

if TYPE_CHECKING:
    from tweenloop.models.animation import AnimationConfig

log = get_category_logger(LogCategory.ANIMATION)

Dispatch = Callable[[Any], Union[None, Awaitable[None]]]


class AnimationHandle:
    """
    Handle to a started animation

    The tick task owns the runner; the handle only observes it. Cancelling is
    the host-side way to stop an animation early (e.g. its widget went away).
    """

    def __init__(self, task: asyncio.Task, runner: AnimationRunner, tick_source: TickSource):
        self.task = task
        self.runner = runner
        self.tick_source = tick_source

    @property
    def done(self) -> bool:
        """True once the last pass completed"""
        return self.runner.done

    def cancel(self) -> None:
        self.tick_source.close()
        self.task.cancel()

    async def wait(self):
        """Wait until ticking stops; re-raises any failure from the tick task"""
        return await self.task

    def __repr__(self):
        return f"AnimationHandle({self.runner!r})"


def start_animation(
    config: "AnimationConfig",
    dispatch: Dispatch,
    tick_source: Optional[TickSource] = None,
) -> AnimationHandle:
    """
    Start ticking an animation

    Raises:
        TickSourceError: tick source or event loop unavailable
    """
    source = tick_source or AsyncioTickSource()
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as ex:
        source.close()
        raise TickSourceError("no running event loop") from ex

    runner = config.runner(clock=source.clock)
    start_at_ns = source.clock() + to_nanos(config.delay_time)

    task = create_tracked_task(
        _run_ticks(config, runner, dispatch, source, start_at_ns),
        category=TaskCategory.ANIMATION,
        description=f"tween {config.from_value!r} → {config.to_value!r}",
        loop=loop,
    )

    log.info(
        "Animation started",
        start=config.from_value,
        end=config.to_value,
        duration=config.duration_time,
        delay=config.delay_time,
        loop=config.loop,
    )
    return AnimationHandle(task, runner, source)


async def _run_ticks(
    config: "AnimationConfig",
    runner: AnimationRunner,
    dispatch: Dispatch,
    source: TickSource,
    start_at_ns: int,
):
    """Tick loop: update runner, map value, hand message to consumer"""
    is_async = inspect.iscoroutinefunction(dispatch)
    ticks = source.ticks(start_at_ns, config.frame_time)

    try:
        async for _tick in ticks:
            if runner.done:
                break

            value = runner.update()
            message = config.callback(value)

            if is_async:
                await dispatch(message)
            else:
                dispatch(message)

    except asyncio.CancelledError:
        log.debug("Animation cancelled", ticks=runner.ticks, current=runner.current)
        raise
    finally:
        source.close()
        aclose = getattr(ticks, "aclose", None)
        if aclose is not None:
            await aclose()

    log.info("Animation stopped", ticks=runner.ticks, passes=runner.passes_completed)
    return runner.current
