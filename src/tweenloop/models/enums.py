"""
Enums for the tween animation core
"""

from enum import Enum, auto


class RunnerState(Enum):
    """
    Lifecycle of a single AnimationRunner

    PENDING: created, no tick processed yet
    RUNNING: at least one update() done, passes remain
    DONE: last pass completed (terminal)
    """
    PENDING = auto()
    RUNNING = auto()
    DONE = auto()


class ValueType(Enum):
    """Numeric value types a preset may declare"""
    INT = "int"
    FLOAT = "float"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Preset loading, validation
    ANIMATION = auto()   # Animation start/stop, pass rollovers
    TICK = auto()        # Tick source scheduling
    TASK = auto()        # Tracked asyncio tasks
    GENERAL = auto()    # Default general category
