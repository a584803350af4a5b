"""Result containers."""

from __future__ import annotations

import csv
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from sequencer.core.fragment import Fragment


class AssemblerState(str, Enum):
    """Lifecycle of an assembler's pool."""

    RUNNING = "running"
    STALLED = "stalled"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class MergeStep:
    """One successful merge.

    ``left`` and ``right`` are the pool positions of the merged pair before the
    merge; ``pool_size`` is the size of the pool afterwards.
    """

    step: int
    left: int
    right: int
    overlap: int
    merged: Fragment
    pool_size: int

    def to_dict(self) -> dict[str, object]:
        return {
            "step": self.step,
            "left": self.left,
            "right": self.right,
            "overlap": self.overlap,
            "merged": self.merged.tokens,
            "pool_size": self.pool_size,
        }


@dataclass(frozen=True, slots=True)
class AssemblyResults:
    """Final results emitted by an assembly run.

    ``fragments`` is a copy of the pool at the end of the run. A ``DONE`` run
    holds exactly one fragment; a ``STALLED`` run holds the unmerged remainder.
    """

    fragments: list[Fragment]
    state: AssemblerState
    history: list[MergeStep]
    summary: Mapping[str, object] = field(default_factory=dict)

    @property
    def contig(self) -> Fragment | None:
        """The assembled fragment when the run reached ``DONE``."""
        if self.state is AssemblerState.DONE:
            return self.fragments[0]
        return None

    def export_json(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "state": self.state.value,
            "fragments": [fragment.tokens for fragment in self.fragments],
            "history": [step.to_dict() for step in self.history],
            "summary": dict(self.summary),
        }
        target.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return target

    def export_csv(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(["index", "length", "fragment"])
            for idx, fragment in enumerate(self.fragments):
                writer.writerow([idx, len(fragment), fragment.tokens])
        return target
