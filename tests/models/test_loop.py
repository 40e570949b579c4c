import pytest

from tweenloop.models.errors import InvalidLoopCountError
from tweenloop.models.loop import Loop


def test_bool_conversion():
    assert Loop.coerce(True) == Loop.INFINITE
    assert Loop.coerce(True).is_infinite
    assert Loop.coerce(False) == Loop.count(1)


def test_count_conversion():
    loop = Loop.coerce(4)
    assert loop.passes == 4
    assert not loop.is_infinite


def test_loop_passes_through():
    loop = Loop.count(2)
    assert Loop.coerce(loop) is loop


@pytest.mark.parametrize("count", [0, -1])
def test_count_must_be_positive(count):
    with pytest.raises(InvalidLoopCountError):
        Loop.count(count)
    with pytest.raises(InvalidLoopCountError):
        Loop.coerce(count)


@pytest.mark.parametrize("value", ["3", 2.5, None])
def test_coerce_rejects_other_types(value):
    with pytest.raises(TypeError):
        Loop.coerce(value)


def test_loops_are_hashable_and_immutable():
    assert {Loop.count(3), Loop.count(3), Loop.INFINITE} == {Loop.count(3), Loop.infinite()}
    with pytest.raises(AttributeError):
        Loop.count(3).passes = 4


def test_repr():
    assert repr(Loop.INFINITE) == "Loop(INFINITE)"
    assert repr(Loop.count(2)) == "Loop(2)"
