"""Mapping helpers."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Mapping, NamedTuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Tuple(NamedTuple):
    """Pair of values for one key, ``None`` where a side lacks the key."""

    left: Any
    right: Any


def union(left: Mapping[K, V], right: Mapping[K, V]) -> Dict[K, Tuple]:
    """Map every key of either mapping to ``Tuple(left.get(k), right.get(k))``."""
    keys = list(left)
    keys.extend(k for k in right if k not in left)
    return {k: Tuple(left.get(k), right.get(k)) for k in keys}
