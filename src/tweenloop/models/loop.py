"""
Repeat policy for animations

A Loop is either infinite or a fixed number of full passes from the start
value to the end value.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from tweenloop.models.errors import InvalidLoopCountError


@dataclass(frozen=True)
class Loop:
    """
    Repeat policy

    Attributes:
        passes: Number of passes, or None for infinite

    Examples:
        Loop.count(3)      # exactly three passes
        Loop.INFINITE      # never exhausted
        Loop.coerce(True)  # -> Loop.INFINITE
        Loop.coerce(False) # -> Loop.count(1)
    """
    passes: Optional[int]

    INFINITE: ClassVar["Loop"]

    def __post_init__(self):
        if self.passes is None:
            return
        if isinstance(self.passes, bool) or not isinstance(self.passes, int) or self.passes < 1:
            raise InvalidLoopCountError(self.passes)

    @classmethod
    def infinite(cls) -> "Loop":
        return cls(None)

    @classmethod
    def count(cls, n: int) -> "Loop":
        return cls(n)

    @classmethod
    def coerce(cls, value: Union["Loop", bool, int]) -> "Loop":
        """Convert a recur() argument into a Loop"""
        if isinstance(value, Loop):
            return value
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls.infinite() if value else cls.count(1)
        if isinstance(value, int):
            return cls.count(value)
        raise TypeError(f"recur expects bool, int or Loop, got {type(value).__name__}")

    @property
    def is_infinite(self) -> bool:
        return self.passes is None

    def __repr__(self):
        if self.is_infinite:
            return "Loop(INFINITE)"
        return f"Loop({self.passes})"


Loop.INFINITE = Loop.infinite()
