"""
Numeric bound for interpolated values

Any value type can be animated if it supports zero/one identities, + and -,
ordering, and a scalar-fraction multiply (mulf) that returns the same type.
mulf is implemented per concrete type so truncation stays explicit:

    mulf(7, 0.5)      -> 3      (int: float multiply, truncate toward zero)
    mulf(7.0, 0.5)    -> 3.5
    mulf(-7, 0.5)     -> -3

Custom types plug in either by registering with mulf.register, or by
providing __mulf__(self, p) plus zero()/one() classmethods.
"""

from decimal import Decimal
from fractions import Fraction
from functools import singledispatch
from typing import Any, TypeVar

from tweenloop.models.errors import UnsupportedNumberError

P = TypeVar("P")


@singledispatch
def mulf(value: Any, p: float) -> Any:
    """Multiply value by a floating point fraction, keeping the value's type"""
    hook = getattr(type(value), "__mulf__", None)
    if hook is None:
        raise UnsupportedNumberError(type(value))
    return hook(value, p)


@mulf.register
def _(value: bool, p: float):
    raise UnsupportedNumberError(bool)


@mulf.register
def _(value: int, p: float) -> int:
    return int(float(value) * p)


@mulf.register
def _(value: float, p: float) -> float:
    return value * p


@mulf.register
def _(value: Fraction, p: float) -> Fraction:
    return value * Fraction(p)


@mulf.register
def _(value: Decimal, p: float) -> Decimal:
    return value * Decimal(repr(p))


_IDENTITIES = {
    int: (0, 1),
    float: (0.0, 1.0),
    Fraction: (Fraction(0), Fraction(1)),
    Decimal: (Decimal(0), Decimal(1)),
}


def _identities(kind: type):
    if kind in _IDENTITIES:
        return _IDENTITIES[kind]
    if hasattr(kind, "zero") and hasattr(kind, "one"):
        return kind.zero(), kind.one()
    raise UnsupportedNumberError(kind)


def zero(kind: type = int):
    """Additive identity of a value type"""
    return _identities(kind)[0]


def one(kind: type = int):
    """Multiplicative identity of a value type"""
    return _identities(kind)[1]


def lerp(start: P, end: P, p: float) -> P:
    """start + (end - start) * p, using the type's own mulf"""
    return start + mulf(end - start, p)
