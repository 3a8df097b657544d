"""Push-based window buffering for callers that receive elements in batches."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, List, Sequence, TypeVar

from .partition import _positive_int

T = TypeVar("T")


class WindowBuffer(Generic[T]):
    """Rolling buffer that emits fixed-size windows with overlap, tiling or gaps.

    Feeding a source through ``extend`` in any batching and calling ``flush``
    at the end yields the same groups as ``partition(source, window_size,
    step_size, pad)``.
    """

    def __init__(self, window_size: int, step_size: int | None = None, pad: Sequence[T] | None = None) -> None:
        self.window_size = _positive_int("window_size", window_size)
        self.step_size = self.window_size if step_size is None else _positive_int("step_size", step_size)
        self.pad = tuple(pad) if pad is not None else None
        self._buffer: deque[T] = deque()
        self._to_skip = 0
        self._fresh = 0
        self.skipped = 0

    def extend(self, samples: Iterable[T]) -> List[List[T]]:
        windows: list[list[T]] = []
        for sample in samples:
            if self._to_skip:
                self._to_skip -= 1
                self.skipped += 1
                continue
            self._buffer.append(sample)
            self._fresh += 1
            if len(self._buffer) == self.window_size:
                windows.append(list(self._buffer))
                self._advance()
        return windows

    def _advance(self) -> None:
        self._fresh = 0
        if self.step_size <= self.window_size:
            for _ in range(self.step_size):
                self._buffer.popleft()
        else:
            self._buffer.clear()
            self._to_skip = self.step_size - self.window_size

    def flush(self) -> List[List[T]]:
        """Resolve the trailing short window and empty the buffer.

        The window is padded when a pad was configured and dropped otherwise.
        Nothing is returned when no element arrived after the last window.
        """

        windows: list[list[T]] = []
        if self._fresh and self.pad is not None:
            window = list(self._buffer)
            window.extend(self.pad[: self.window_size - len(window)])
            windows.append(window)
        self._clear()
        return windows

    @property
    def pending(self) -> List[T]:
        return list(self._buffer)

    def _clear(self) -> None:
        self._buffer.clear()
        self._to_skip = 0
        self._fresh = 0

    def reset(self) -> None:
        """Drop buffered elements and start counting skipped elements afresh."""
        self._clear()
        self.skipped = 0

    def __len__(self) -> int:
        return len(self._buffer)
