"""
Animation configuration

Immutable description of one animation, built with a fluent API. Every
setter returns a new AnimationConfig; the original is never modified.
"""

import copy
from datetime import timedelta
from typing import Callable, Generic, Optional, TypeVar, Union

from tweenloop.animations.bridge import AnimationHandle, Dispatch, start_animation
from tweenloop.animations.runner import AnimationRunner
from tweenloop.engine.tick_source import TickSource
from tweenloop.models.loop import Loop
from tweenloop.models.number import zero, one
from tweenloop.utils.timing import Clock, DurationLike, to_timedelta

P = TypeVar("P")
MSG = TypeVar("MSG")

DEFAULT_DURATION = timedelta(seconds=1)
DEFAULT_FRAME = timedelta(milliseconds=16)


class AnimationConfig(Generic[P, MSG]):
    """
    Configuration for a single tween

    Attributes:
        callback: Maps each interpolated value to the message sent to the consumer
        from_value: Start value (default: zero of value_type)
        to_value: End value (default: one of value_type)
        delay_time: Wait before the first tick
        duration_time: Length of one pass (must be > 0, not checked)
        frame_time: Tick cadence
        loop: Repeat policy

    Example:
        config = (
            AnimationConfig(lambda p: ("set", p))
            .from_(10)
            .to(20)
            .duration(timedelta(seconds=10))
            .recur(2)
        )
        handle = config.start(dispatch)

    Preconditions (not validated): duration_time > 0 and to_value reachable
    from from_value under ordering (to_value > from_value).
    """

    def __init__(self, callback: Callable[[P], MSG], value_type: type = int):
        self.callback = callback
        self.value_type = value_type
        self.from_value: P = zero(value_type)
        self.to_value: P = one(value_type)
        self.delay_time: timedelta = timedelta(0)
        self.duration_time: timedelta = DEFAULT_DURATION
        self.frame_time: timedelta = DEFAULT_FRAME
        self.loop: Loop = Loop.count(1)

    def _with(self, **changes) -> "AnimationConfig[P, MSG]":
        clone = copy.copy(self)
        clone.__dict__.update(changes)
        return clone

    # ------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------

    def from_(self, value: P) -> "AnimationConfig[P, MSG]":
        return self._with(from_value=value)

    def to(self, value: P) -> "AnimationConfig[P, MSG]":
        return self._with(to_value=value)

    def delay(self, delay: DurationLike) -> "AnimationConfig[P, MSG]":
        return self._with(delay_time=to_timedelta(delay))

    def duration(self, duration: DurationLike) -> "AnimationConfig[P, MSG]":
        return self._with(duration_time=to_timedelta(duration))

    def frame(self, frame: DurationLike) -> "AnimationConfig[P, MSG]":
        frame = to_timedelta(frame)
        if frame <= timedelta(0):
            raise ValueError(f"frame must be positive, got {frame}")
        return self._with(frame_time=frame)

    def recur(self, recur: Union[Loop, bool, int]) -> "AnimationConfig[P, MSG]":
        """Repeat policy: True = forever, False = once, n = n passes"""
        return self._with(loop=Loop.coerce(recur))

    # ------------------------------------------------------------
    # Running
    # ------------------------------------------------------------

    def runner(self, clock: Optional[Clock] = None) -> AnimationRunner[P]:
        """Snapshot this config into a fresh runner"""
        return AnimationRunner(self, clock=clock)

    def start(
        self,
        dispatch: Dispatch,
        tick_source: Optional[TickSource] = None,
    ) -> AnimationHandle:
        """
        Start ticking on the running asyncio loop

        Every tick maps the interpolated value through callback and hands the
        message to dispatch (sync or async). Ticking stops once the last pass
        completes; no extra message is sent for completion.

        Raises:
            TickSourceError: no running event loop / tick source unavailable
        """
        return start_animation(self, dispatch, tick_source)

    def __repr__(self):
        return (
            f"AnimationConfig({self.from_value!r} → {self.to_value!r}, "
            f"duration={self.duration_time}, delay={self.delay_time}, "
            f"frame={self.frame_time}, loop={self.loop!r})"
        )
