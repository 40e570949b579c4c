"""
Models package - configuration and value models for tweening
"""

from .enums import RunnerState, ValueType, LogLevel, LogCategory
from .loop import Loop

__all__ = [
    'RunnerState',
    'ValueType',
    'LogLevel',
    'LogCategory',
    'Loop',
]
