"""Greedy overlap assembler.

The assembler owns a pool of fragments and repeatedly merges the ordered pair
with the largest suffix/prefix overlap: scan every pair, pick a winner, replace
the two originals with their merge. The loop stops once a single fragment is
left (``DONE``) or a scan finds no pair with enough overlap (``STALLED``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from sequencer.core.fragment import Fragment
from sequencer.core.results import AssemblerState, AssemblyResults, MergeStep
from sequencer.engine.scan import OverlapScanner, scanner_from_config
from sequencer.engine.selection import select_pair
from sequencer.utils.config import AssemblerConfig

_LOGGER = logging.getLogger(__name__)


class MergeOutcome(Enum):
    """Result of a single merge attempt. Only ``MERGED`` is truthy."""

    MERGED = "merged"
    STALLED = "stalled"

    def __bool__(self) -> bool:
        return self is MergeOutcome.MERGED


class Assembler:
    """Merges a pool of fragments by greatest overlap.

    The pool is copied from ``fragments`` on construction, so later changes to
    the caller's list are not seen. ``fragments`` exposes the live pool; treat
    it as read-only.

    **Implementation note:** the merged fragment is appended at the end of the
    pool after both originals are removed by position. Pool order decides which
    pair wins a tie, so it is part of the observable behaviour.
    """

    def __init__(
        self,
        fragments: Iterable[Fragment],
        *,
        config: AssemblerConfig | None = None,
        scanner: OverlapScanner | None = None,
    ) -> None:
        self._fragments: list[Fragment] = list(fragments)
        self._config = config or AssemblerConfig()
        self._scanner = scanner or scanner_from_config(self._config)
        self._history: list[MergeStep] = []
        if len(self._fragments) == 1:
            self._state = AssemblerState.DONE
        elif self._fragments:
            self._state = AssemblerState.RUNNING
        else:
            self._state = AssemblerState.STALLED

    @property
    def fragments(self) -> list[Fragment]:
        return self._fragments

    @property
    def state(self) -> AssemblerState:
        return self._state

    @property
    def config(self) -> AssemblerConfig:
        return self._config

    @property
    def history(self) -> list[MergeStep]:
        return list(self._history)

    def try_merge_once(self) -> MergeOutcome:
        """Merge the best-overlapping pair if one qualifies.

        Returns ``MergeOutcome.MERGED`` after a merge, otherwise
        ``MergeOutcome.STALLED`` with the pool left untouched.
        """
        if self._merge_once() is None:
            return MergeOutcome.STALLED
        return MergeOutcome.MERGED

    def stream(self) -> Iterator[MergeStep]:
        """Yield each merge as it is performed until the pool stops changing.

        The scanner is prepared once for the whole run and closed afterwards.
        """
        limit = self._config.max_merges
        merges = 0
        self._scanner.prepare()
        try:
            while self._state is AssemblerState.RUNNING:
                if limit is not None and merges >= limit:
                    _LOGGER.info(
                        "Reached max_merges=%d with %d fragments left", limit, len(self._fragments)
                    )
                    break
                step = self._merge_once()
                if step is None:
                    break
                merges += 1
                yield step
        finally:
            self._scanner.close()

    def assemble_all(self) -> AssemblyResults:
        """Merge until one fragment remains or no pair overlaps."""
        steps = list(self.stream())

        _LOGGER.info(
            "Assembly %s after %d merges: %d fragment(s) left",
            self._state.value,
            len(steps),
            len(self._fragments),
        )
        summary: dict[str, object] = {
            "config": self._config.as_dict(),
            "merges": len(steps),
            "total_merges": len(self._history),
            "fragments_remaining": len(self._fragments),
            "total_length": sum(len(f) for f in self._fragments),
            "state": self._state.value,
        }
        return AssemblyResults(
            fragments=list(self._fragments),
            state=self._state,
            history=list(self._history),
            summary=summary,
        )

    def _merge_once(self) -> MergeStep | None:
        pool = self._fragments
        matrix = self._scanner.scan(pool)
        candidate = select_pair(
            matrix,
            [len(fragment) for fragment in pool],
            tie_break=self._config.tie_break,
            min_overlap=self._config.min_overlap,
        )
        if candidate is None:
            self._state = AssemblerState.DONE if len(pool) == 1 else AssemblerState.STALLED
            _LOGGER.debug("No qualifying pair among %d fragments", len(pool))
            return None

        left, right, overlap = candidate
        merged = pool[left].merged_with(pool[right])
        for index in sorted((left, right), reverse=True):
            del pool[index]
        pool.append(merged)

        step = MergeStep(
            step=len(self._history) + 1,
            left=left,
            right=right,
            overlap=overlap,
            merged=merged,
            pool_size=len(pool),
        )
        self._history.append(step)
        self._state = AssemblerState.DONE if len(pool) == 1 else AssemblerState.RUNNING
        _LOGGER.debug(
            "Merged fragments %d and %d (overlap=%d) into length %d; pool size %d",
            left,
            right,
            overlap,
            len(merged),
            len(pool),
        )
        return step


__all__ = ["Assembler", "MergeOutcome"]
