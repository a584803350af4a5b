"""Pairwise overlap scanners.

A scanner turns a snapshot of the pool into an ``n x n`` matrix whose cell
``[i, j]`` is ``fragments[i].overlap_with(fragments[j])``. The diagonal is
always zero. The sequential and pooled scanners produce identical matrices;
the pooled one computes row blocks in worker threads or processes and
reassembles them in submission order.
"""

from __future__ import annotations

import os
import time
from collections.abc import Sequence
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import ClassVar, Literal, Protocol

import numpy as np

from sequencer.core.fragment import Fragment
from sequencer.utils.config import AssemblerConfig


class OverlapScanner(Protocol):
    def prepare(self) -> None:
        """Acquire resources shared by consecutive scans."""

    def scan(self, fragments: Sequence[Fragment]) -> np.ndarray:
        ...

    def close(self) -> None:
        """Release whatever ``prepare`` acquired."""


def _overlap_rows(fragments: Sequence[Fragment], rows: list[int]) -> list[list[int]]:
    result: list[list[int]] = []
    for row in rows:
        left = fragments[row]
        result.append(
            [0 if col == row else left.overlap_with(right) for col, right in enumerate(fragments)]
        )
    return result


def _chunks(rows: list[int], size: int) -> list[list[int]]:
    return [rows[i : i + size] for i in range(0, len(rows), size)]


@dataclass(slots=True)
class SequentialScanner:
    """Scan every ordered pair in the calling thread."""

    def prepare(self) -> None:
        """No-op; nothing to start."""

    def scan(self, fragments: Sequence[Fragment]) -> np.ndarray:
        size = len(fragments)
        matrix = np.zeros((size, size), dtype=np.int64)
        if size:
            matrix[:, :] = _overlap_rows(fragments, list(range(size)))
        return matrix

    def close(self) -> None:
        """No-op; nothing to release."""


@dataclass(slots=True)
class PoolScanner:
    """Parallel scanner that preserves row order.

    Between ``prepare`` and ``close`` every scan reuses one worker pool;
    outside that window each scan starts and stops its own. A scan that fails
    or times out discards the shared pool so the next scan starts clean.

    Parameters
    ----------
    mode:
        "thread" (default) or "process".
    num_workers:
        Number of workers. If "auto", the CPU count is used.
    rows_per_task:
        How many matrix rows each submitted task computes.
    timeout_s:
        Deadline for the whole scan.
    """

    mode: Literal["thread", "process"] = "thread"
    num_workers: int | Literal["auto"] = "auto"
    rows_per_task: int = 8
    timeout_s: float | None = None
    _pool: Executor | None = field(default=None, init=False, repr=False, compare=False)

    _WORKERS_DEFAULT: ClassVar[int] = 4

    @property
    def active(self) -> bool:
        """True while a shared pool is running."""
        return self._pool is not None

    def _max_workers(self) -> int:
        if self.num_workers == "auto":
            return os.cpu_count() or self._WORKERS_DEFAULT
        return max(1, int(self.num_workers))

    def _new_pool(self) -> Executor:
        ExecutorCls = ThreadPoolExecutor if self.mode == "thread" else ProcessPoolExecutor
        return ExecutorCls(max_workers=self._max_workers())

    def prepare(self) -> None:
        """Start the shared worker pool."""
        if self._pool is None:
            self._pool = self._new_pool()

    def close(self) -> None:
        """Shut the shared worker pool down."""
        if self._pool is not None:
            self._pool.shutdown(wait=True, cancel_futures=True)
            self._pool = None

    def scan(self, fragments: Sequence[Fragment]) -> np.ndarray:
        size = len(fragments)
        matrix = np.zeros((size, size), dtype=np.int64)
        if size < 2:
            return matrix

        snapshot = tuple(fragments)
        blocks = _chunks(list(range(size)), max(1, self.rows_per_task))
        deadline = None if self.timeout_s is None else time.perf_counter() + self.timeout_s

        owned = self._pool is None
        pool = self._new_pool() if owned else self._pool
        futures: list[Future] = []
        shutdown_wait = True
        try:
            try:
                for block in blocks:
                    futures.append(pool.submit(_overlap_rows, snapshot, block))
            except BaseException:
                shutdown_wait = False
                for pending in futures:
                    pending.cancel()
                raise

            # Consume futures in submission order so rows land where they belong
            for idx, fut in enumerate(futures):
                remaining = None
                if deadline is not None:
                    remaining = max(0.0, deadline - time.perf_counter())
                try:
                    rows = fut.result(timeout=remaining)
                except TimeoutError:
                    shutdown_wait = False
                    for pending in futures[idx:]:
                        pending.cancel()
                    raise
                except Exception as exc:
                    shutdown_wait = False
                    for pending in futures[idx + 1 :]:
                        pending.cancel()
                    raise RuntimeError("Worker task failed") from exc

                block = blocks[idx]
                matrix[block[0] : block[-1] + 1, :] = rows
        finally:
            if owned:
                pool.shutdown(wait=shutdown_wait, cancel_futures=True)
            elif not shutdown_wait:
                pool.shutdown(wait=False, cancel_futures=True)
                self._pool = None

        return matrix


def scanner_from_config(config: AssemblerConfig) -> OverlapScanner:
    """Build the scanner named by ``config.scan_mode``."""
    if config.scan_mode == "sequential":
        return SequentialScanner()
    return PoolScanner(
        mode=config.scan_mode,
        num_workers=config.num_workers,
        timeout_s=config.timeout_s,
    )


__all__ = ["OverlapScanner", "PoolScanner", "SequentialScanner", "scanner_from_config"]
