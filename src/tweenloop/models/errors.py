"""
Error types for the tween animation core

Misuse errors (AnimationFinishedError, LoopUnderflowError) are invariant
violations: they only happen when update() is driven outside the start/stop
bridge. They are raised, never retried.
"""

from typing import Optional


class TweenError(Exception):
    """Base class for tweenloop errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class AnimationFinishedError(TweenError):
    """update() called on a runner that already reported done"""
    def __init__(self, ticks: int):
        super().__init__(
            code="ANIMATION_FINISHED",
            message="Animation already finished",
            details={"ticks": ticks}
        )


class LoopUnderflowError(TweenError):
    """Pass rollover attempted after the last pass"""
    def __init__(self, remaining: int):
        super().__init__(
            code="LOOP_UNDERFLOW",
            message=f"Loop rollover past the last pass (remaining={remaining})",
            details={"remaining": remaining}
        )


class InvalidLoopCountError(TweenError):
    """Repeat count must be at least one"""
    def __init__(self, count):
        super().__init__(
            code="INVALID_LOOP_COUNT",
            message=f"Loop count must be >= 1, got {count!r}",
            details={"count": count}
        )


class UnsupportedNumberError(TweenError):
    """Value type has no scalar-fraction multiply"""
    def __init__(self, value_type: type):
        super().__init__(
            code="UNSUPPORTED_NUMBER",
            message=f"Type '{value_type.__name__}' cannot be interpolated",
            details={"type": value_type.__name__}
        )


class TickSourceError(TweenError):
    """Periodic tick source could not be created or failed while ticking"""
    def __init__(self, reason: str):
        super().__init__(
            code="TICK_SOURCE_FAILED",
            message=f"Tick source unavailable: {reason}",
            details={"reason": reason}
        )


class PresetNotFoundError(TweenError):
    """Preset name doesn't exist"""
    def __init__(self, name: str):
        super().__init__(
            code="PRESET_NOT_FOUND",
            message=f"Preset '{name}' not found",
            details={"preset": name}
        )


class PresetValidationError(TweenError):
    """Preset definition in YAML is malformed"""
    def __init__(self, name: str, errors: list):
        super().__init__(
            code="PRESET_INVALID",
            message=f"Preset '{name}' is invalid",
            details={"preset": name, "errors": errors}
        )
