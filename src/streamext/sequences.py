"""Arithmetic integer sequence generators."""

from __future__ import annotations

import itertools
from typing import Iterator

from .partition import InvalidArgument


def int_range(*args: int | None) -> Iterator[int]:
    """Lazy integer sequence with the call forms of the builtin ``range``.

    ``int_range()`` counts up from zero without end, ``int_range(end)``,
    ``int_range(start, end)`` and ``int_range(start, end, step)`` stop before
    ``end``. Passing ``None`` as ``end`` keeps the sequence unbounded.

    >>> list(int_range(2, 10, 3))
    [2, 5, 8]
    """

    if len(args) > 3:
        raise TypeError(f"int_range expected at most 3 arguments, got {len(args)}")
    start: int = 0
    end: int | None = None
    step: int = 1
    if len(args) == 1:
        (end,) = args
    elif len(args) == 2:
        start, end = args  # type: ignore[assignment]
    elif len(args) == 3:
        start, end, step = args  # type: ignore[assignment]

    if step == 0:
        raise InvalidArgument("step must not be zero")
    if end is None:
        return itertools.count(start, step)
    return iter(range(start, end, step))
