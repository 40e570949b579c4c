"""
Animation runtime: per-run state machine and the tick bridge
"""

from .runner import AnimationRunner
from .bridge import AnimationHandle, start_animation

__all__ = ["AnimationRunner", "AnimationHandle", "start_animation"]
