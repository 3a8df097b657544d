"""Null-coalescing helpers for single values."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def let(obj: Optional[T], mapper: Callable[[T], R]) -> Optional[R]:
    """Return ``mapper(obj)``, or ``None`` without calling ``mapper`` when ``obj`` is ``None``."""
    if obj is None:
        return None
    return mapper(obj)


def with_(obj: Optional[T], mapper: Callable[[Optional[T]], R]) -> R:
    """Return ``mapper(obj)`` even when ``obj`` is ``None``."""
    return mapper(obj)


def or_(obj: Optional[T], other: T) -> T:
    return obj if obj is not None else other


def or_get(obj: Optional[T], supplier: Callable[[], T]) -> T:
    """Like :func:`or_`, but the fallback is only computed when needed."""
    return obj if obj is not None else supplier()


def also(obj: T, consumer: Callable[[T], object]) -> T:
    """Call ``consumer`` for its side effect and return ``obj`` unchanged."""
    consumer(obj)
    return obj
