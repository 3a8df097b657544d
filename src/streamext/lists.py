"""List helpers that always return new lists."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class DuplicateKeyError(ValueError):
    """Raised by :func:`to_map` when two elements map to the same key."""


def concat(items: Sequence[T], *others: Sequence[T]) -> List[T]:
    result = list(items)
    for other in others:
        result.extend(other)
    return result


def find(items: Sequence[T], index: int) -> Optional[T]:
    """Element at ``index``, or ``None`` when the index does not exist."""
    if 0 <= index < len(items):
        return items[index]
    return None


def pad(items: List[T], size: int, value: T) -> List[T]:
    """Pad ``items`` with ``value`` up to ``size``.

    Lists that are already ``size`` long or longer are returned as is.
    """
    if len(items) >= size:
        return items
    return list(items) + [value] * (size - len(items))


def append(items: Sequence[T], element: T) -> List[T]:
    return [*items, element]


def map_list(items: Sequence[T], mapper: Callable[[T], R]) -> List[R]:
    return [mapper(item) for item in items]


def filter_list(items: Sequence[T], predicate: Callable[[T], bool]) -> List[T]:
    return [item for item in items if predicate(item)]


def to_map(
    items: Sequence[T],
    key: Callable[[T], K],
    value: Callable[[T], V],
    merge: Callable[[V, V], V] | None = None,
) -> Dict[K, V]:
    """Build a dict from ``items``.

    Colliding keys are combined with ``merge(existing, new)``; without
    ``merge`` a collision raises :class:`DuplicateKeyError`.
    """

    result: dict[K, V] = {}
    for item in items:
        k = key(item)
        v = value(item)
        if k in result:
            if merge is None:
                raise DuplicateKeyError(f"Duplicate key {k!r} (attempted merging values {result[k]!r} and {v!r})")
            v = merge(result[k], v)
        result[k] = v
    return result
