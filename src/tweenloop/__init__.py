"""
tweenloop - value tweening over wall-clock time for asyncio event loops
"""

from .models.animation import AnimationConfig
from .models.loop import Loop
from .models.number import mulf, zero, one, lerp
from .animations.runner import AnimationRunner
from .animations.bridge import AnimationHandle
from .engine.tick_source import AsyncioTickSource, Tick, TickSource
from .models.errors import (
    TweenError,
    AnimationFinishedError,
    LoopUnderflowError,
    InvalidLoopCountError,
    UnsupportedNumberError,
    TickSourceError,
    PresetNotFoundError,
    PresetValidationError,
)

__version__ = "0.2.0"

__all__ = [
    'AnimationConfig',
    'AnimationRunner',
    'AnimationHandle',
    'Loop',
    'mulf',
    'zero',
    'one',
    'lerp',
    'AsyncioTickSource',
    'Tick',
    'TickSource',
    'TweenError',
    'AnimationFinishedError',
    'LoopUnderflowError',
    'InvalidLoopCountError',
    'UnsupportedNumberError',
    'TickSourceError',
    'PresetNotFoundError',
    'PresetValidationError',
]
