"""Pair selection over an overlap matrix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

import numpy as np

from sequencer.utils.config import TieBreak


class Candidate(NamedTuple):
    left: int
    right: int
    overlap: int


def select_pair(
    matrix: np.ndarray,
    lengths: Sequence[int],
    *,
    tie_break: TieBreak = "first",
    min_overlap: int = 1,
) -> Candidate | None:
    """Pick the ordered pair to merge next, or ``None`` when nothing qualifies.

    Pairs are ranked by overlap. Among equal overlaps, ``"first"`` keeps the
    pair met first when scanning ``i`` then ``j`` ascending, which is the
    row-major order ``argmax`` and ``argwhere`` already follow. ``"shortest"``
    keeps the pair whose merged fragment is shortest and falls back to the
    same scan order.
    """
    if matrix.size == 0:
        return None

    best = int(matrix.max())
    if best < max(min_overlap, 1):
        return None

    size = matrix.shape[1]
    if tie_break == "first":
        left, right = divmod(int(np.argmax(matrix)), size)
        return Candidate(left, right, best)

    tied = np.argwhere(matrix == best)
    merged_lengths = np.array([lengths[i] + lengths[j] - best for i, j in tied])
    left, right = (int(v) for v in tied[int(np.argmin(merged_lengths))])
    return Candidate(left, right, best)


__all__ = ["Candidate", "select_pair"]
