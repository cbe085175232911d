"""Boundary selection rules for the SOFT_LIMIT and HARD_LIMIT strategies."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence

from .base import ChunkingStrategy


def select_boundary(
    boundaries: Sequence[int],
    target: int,
    strategy: ChunkingStrategy,
    start: int = 0,
) -> int:
    """Pick the cut position for a chunk aiming at ``target``.

    ``boundaries`` must be sorted ascending. SOFT_LIMIT returns the first
    boundary at or after the target, or the last boundary when the text runs
    out of sentences. HARD_LIMIT returns the last boundary at or before the
    target, or the target itself when no such boundary lies past ``start``.
    An empty boundary list always yields the target.

    SOFT_LIMIT may return a value that is not past ``start``; callers must
    then cut at the target themselves.
    """
    if not boundaries:
        return target

    if strategy is ChunkingStrategy.SOFT_LIMIT:
        idx = bisect_left(boundaries, target)
        if idx < len(boundaries):
            return boundaries[idx]
        return boundaries[-1]

    idx = bisect_right(boundaries, target)
    if idx == 0:
        return target
    best = boundaries[idx - 1]
    if best <= start:
        return target
    return best


__all__ = ["select_boundary"]
