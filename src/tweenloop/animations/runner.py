"""
Animation Runner

Mutable per-run state and the tick-driven update algorithm.

One runner is created per start() call from an AnimationConfig snapshot and is
owned by that call's tick task. update() is called exactly once per tick,
after the configured delay has elapsed.
"""

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from tweenloop.models.enums import LogCategory, RunnerState
from tweenloop.models.errors import AnimationFinishedError, LoopUnderflowError
from tweenloop.models.number import lerp
from tweenloop.utils.logger import get_category_logger
from tweenloop.utils.timing import Clock, monotonic_clock, nanos_to_millis, to_millis, to_nanos

if TYPE_CHECKING:
    from tweenloop.models.animation import AnimationConfig

log = get_category_logger(LogCategory.ANIMATION)

P = TypeVar("P")


class AnimationRunner(Generic[P]):
    """
    Tick-driven interpolation state machine

    States: PENDING (no tick yet) -> RUNNING -> DONE (terminal).

    Pass boundaries are detected one tick late: the tick that first observes
    current >= end of the previous call performs the rollover. At rollover the
    reference instant moves forward by exactly one duration instead of being
    resampled from the clock, so tick jitter never accumulates across passes.

    Example:
        runner = config.runner()
        while not runner.done:
            value = runner.update()
    """

    def __init__(self, config: "AnimationConfig", clock: Optional[Clock] = None):
        self.config = config
        self.clock: Clock = clock or monotonic_clock

        self.started_delay = False
        self.current: P = config.from_value
        self.reference_instant: int = self.clock()
        # Unused for infinite policies
        self.remaining_loops: int = config.loop.passes or 0
        self.done = False

        self.passes_completed = 0
        self.ticks = 0

        self._duration_ns = to_nanos(config.duration_time)
        self._duration_ms = to_millis(config.duration_time)

    @property
    def state(self) -> RunnerState:
        if self.done:
            return RunnerState.DONE
        if not self.started_delay:
            return RunnerState.PENDING
        return RunnerState.RUNNING

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the reference instant"""
        return nanos_to_millis(self.clock() - self.reference_instant)

    def update(self) -> P:
        """
        Advance one tick and return the interpolated value

        Raises:
            AnimationFinishedError: runner already reported done
            LoopUnderflowError: rollover attempted past the last pass
            ZeroDivisionError: configured duration is zero
        """
        if self.done:
            raise AnimationFinishedError(self.ticks)

        cfg = self.config

        if not self.started_delay:
            # Anchor at the instant the delay actually elapsed
            self.reference_instant = self.clock()
            self.started_delay = True

        if self.current >= cfg.to_value:
            self._rollover()

        p = self.elapsed_ms() / self._duration_ms
        self.current = lerp(cfg.from_value, cfg.to_value, p)

        if self.current >= cfg.to_value:
            self.current = cfg.to_value
            self.passes_completed += 1
            if not cfg.loop.is_infinite and self.remaining_loops == 1:
                self.done = True
                log.debug(
                    "Animation finished",
                    passes=self.passes_completed,
                    ticks=self.ticks + 1
                )

        self.ticks += 1
        return self.current

    def _rollover(self):
        """Start the next pass"""
        if not self.config.loop.is_infinite:
            if self.remaining_loops - 1 < 1:
                raise LoopUnderflowError(self.remaining_loops)
            self.remaining_loops -= 1

        self.reference_instant += self._duration_ns

        log.debug(
            "Pass rollover",
            completed=self.passes_completed,
            remaining="∞" if self.config.loop.is_infinite else self.remaining_loops
        )

    def __repr__(self):
        return (
            f"AnimationRunner({self.state.name}, current={self.current!r}, "
            f"remaining={self.remaining_loops}, ticks={self.ticks})"
        )
