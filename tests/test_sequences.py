from __future__ import annotations

import itertools

import pytest

from streamext import InvalidArgument, int_range


def test_int_range_without_arguments_is_unbounded() -> None:
    assert list(itertools.islice(int_range(), 5)) == [0, 1, 2, 3, 4]


def test_int_range_call_forms() -> None:
    assert list(int_range(4)) == [0, 1, 2, 3]
    assert list(int_range(2, 6)) == [2, 3, 4, 5]
    assert list(int_range(1, 10, 4)) == [1, 5, 9]
    assert list(int_range(5, 0, -2)) == [5, 3, 1]
    assert list(int_range(3, 3)) == []


def test_int_range_with_open_end_keeps_counting() -> None:
    assert list(itertools.islice(int_range(10, None, 5), 3)) == [10, 15, 20]


def test_int_range_calls_are_independent() -> None:
    first = int_range(3)
    second = int_range(3)
    assert next(first) == 0
    assert list(second) == [0, 1, 2]
    assert list(first) == [1, 2]


def test_int_range_rejects_zero_step() -> None:
    with pytest.raises(InvalidArgument):
        int_range(0, 10, 0)


def test_int_range_rejects_too_many_arguments() -> None:
    with pytest.raises(TypeError):
        int_range(0, 1, 1, 1)
