"""Summary statistics for numeric groups."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Sequence

import numpy as np


def summarize_group(group: Sequence[float]) -> Dict[str, float]:
    """Count, mean, population std, min, max and sum of a numeric group; zeros when empty."""
    arr = np.asarray(group, dtype=float)
    if not arr.size:
        return {"count": 0, "mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0, "sum": 0.0}
    return {
        "count": int(arr.size),
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
        "sum": float(np.sum(arr)),
    }


def summarize_groups(groups: Iterable[Sequence[float]]) -> Iterator[Dict[str, float]]:
    """Lazily summarize each group; unbounded inputs stay unbounded."""
    for group in groups:
        yield summarize_group(group)
