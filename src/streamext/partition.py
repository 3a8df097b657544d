"""Lazy partitioning and sliding-window iteration over single-pass sources."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Iterator, List, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class InvalidArgument(ValueError):
    """Raised when a size or step is not a positive integer."""


def _positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer (got {type(value).__name__})")
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive (got {value})")
    return value


class PartitionEngine(Iterator[List[T]]):
    """Iterator of fixed-size groups pulled lazily from ``source``.

    Consecutive groups start ``step`` positions apart. With ``step < size``
    groups overlap, with ``step == size`` they tile the source and with
    ``step > size`` the elements in between are pulled and dropped.

    A trailing group shorter than ``size`` is dropped unless ``pad`` is given,
    in which case it is completed from the start of ``pad`` (and emitted short
    if ``pad`` runs out first).

    >>> list(PartitionEngine(range(5), 3, 1))
    [[0, 1, 2], [1, 2, 3], [2, 3, 4]]
    >>> list(PartitionEngine(range(10), 3, 4, pad=["x"]))
    [[0, 1, 2], [4, 5, 6], [8, 9, 'x']]
    """

    def __init__(
        self,
        source: Iterable[T],
        size: int,
        step: int | None = None,
        pad: Sequence[T] | None = None,
    ) -> None:
        self._size = _positive_int("size", size)
        self._step = self._size if step is None else _positive_int("step", step)
        self._pad = tuple(pad) if pad is not None else None
        self._source = iter(source)
        self._buffer: deque[T] = deque(maxlen=self._size)
        self._pending: object = _MISSING
        self._exhausted = False
        self._done = False
        self._skipped = 0
        self._emitted = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def step(self) -> int:
        return self._step

    @property
    def pad(self) -> tuple[T, ...] | None:
        return self._pad

    @property
    def skipped(self) -> int:
        """Number of source elements dropped between groups so far."""
        return self._skipped

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, step={self._step}, pad={self._pad!r})"

    def __iter__(self) -> "PartitionEngine[T]":
        return self

    def _pull(self) -> object:
        if self._pending is not _MISSING:
            item, self._pending = self._pending, _MISSING
            return item
        if self._exhausted:
            return _MISSING
        try:
            return next(self._source)
        except StopIteration:
            self._exhausted = True
            return _MISSING

    def has_next(self) -> bool:
        """Return True while the source still holds an unconsumed element.

        Answering pulls at most one element, which is held back for the next
        group.
        """
        if self._done:
            return False
        if self._pending is _MISSING:
            self._pending = self._pull()
        return self._pending is not _MISSING

    def _finish(self, outcome: str) -> None:
        self._done = True
        self._buffer.clear()
        logger.debug(
            "Partition finished: %d groups emitted, %d elements skipped, trailing group %s",
            self._emitted,
            self._skipped,
            outcome,
        )

    def __next__(self) -> List[T]:
        if not self.has_next():
            if not self._done:
                self._finish("absent")
            raise StopIteration

        buffer = self._buffer
        if buffer:
            if self._step <= self._size:
                for _ in range(self._step):
                    buffer.popleft()
            else:
                buffer.clear()

        while len(buffer) < self._size:
            item = self._pull()
            if item is _MISSING:
                break
            buffer.append(item)  # type: ignore[arg-type]

        if self._step > self._size:
            for _ in range(self._step - self._size):
                if self._pull() is _MISSING:
                    break
                self._skipped += 1

        if len(buffer) < self._size:
            if self._pad is None:
                self._finish("dropped")
                raise StopIteration
            group = list(buffer)
            group.extend(self._pad[: self._size - len(group)])
            self._emitted += 1
            self._finish("padded" if len(group) == self._size else "short")
            return group

        self._emitted += 1
        return list(buffer)


def partition(
    source: Iterable[T],
    size: int,
    step: int | None = None,
    pad: Sequence[T] | None = None,
) -> PartitionEngine[T]:
    """Split ``source`` into lazy groups of ``size`` elements starting ``step`` apart.

    ``step`` defaults to ``size`` (tiling). Without ``pad`` an incomplete
    trailing group is dropped.
    """
    return PartitionEngine(source, size, step, pad)


def sliding_window(source: Iterable[T], size: int) -> PartitionEngine[T]:
    """Lazy sliding window of ``size`` elements advancing one element at a time."""
    return PartitionEngine(source, size, step=1)
