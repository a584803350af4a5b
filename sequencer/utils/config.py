"""Configuration utilities."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal

import yaml

_LOGGER = logging.getLogger(__name__)

TieBreak = Literal["first", "shortest"]
ScanMode = Literal["sequential", "thread", "process"]

TIE_BREAKS: frozenset[str] = frozenset({"first", "shortest"})
SCAN_MODES: frozenset[str] = frozenset({"sequential", "thread", "process"})


def _check_type(name: str, value: Any, expected: type | tuple[type, ...]) -> None:
    # bool is an int subclass; a YAML `true` is never a valid count
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ValueError(f"{name} has invalid type {type(value).__name__}: {value!r}")


@dataclass(frozen=True, slots=True)
class AssemblerConfig:
    """Settings that control how an assembler picks and performs merges.

    Attributes
    ----------
    tie_break : str
        ``"first"`` keeps the earliest pair in scan order among equal overlaps;
        ``"shortest"`` prefers the pair with the shortest merged result and
        falls back to scan order.
    min_overlap : int
        Smallest overlap that qualifies a pair for merging (at least 1).
    scan_mode : str
        ``"sequential"``, ``"thread"`` or ``"process"`` for the pairwise scan.
    num_workers : int | str
        Worker count for pooled scans, or ``"auto"``.
    timeout_s : float | None
        Deadline for a single pooled scan.
    max_merges : int | None
        Cap on merges performed by one ``assemble_all`` call.
    """

    tie_break: TieBreak = "first"
    min_overlap: int = 1
    scan_mode: ScanMode = "sequential"
    num_workers: int | Literal["auto"] = "auto"
    timeout_s: float | None = None
    max_merges: int | None = None

    def __post_init__(self) -> None:
        _check_type("tie_break", self.tie_break, str)
        _check_type("scan_mode", self.scan_mode, str)
        _check_type("min_overlap", self.min_overlap, int)
        if self.max_merges is not None:
            _check_type("max_merges", self.max_merges, int)
        if self.timeout_s is not None:
            _check_type("timeout_s", self.timeout_s, (int, float))
        if self.num_workers != "auto":
            _check_type("num_workers", self.num_workers, int)

        if self.tie_break not in TIE_BREAKS:
            raise ValueError(
                f"Unknown tie_break: {self.tie_break}. Available: {', '.join(sorted(TIE_BREAKS))}"
            )
        if self.scan_mode not in SCAN_MODES:
            raise ValueError(
                f"Unknown scan_mode: {self.scan_mode}. Available: {', '.join(sorted(SCAN_MODES))}"
            )
        if self.min_overlap < 1:
            raise ValueError(f"min_overlap must be >= 1, got {self.min_overlap}")
        if self.max_merges is not None and self.max_merges < 0:
            raise ValueError(f"max_merges must be >= 0, got {self.max_merges}")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {self.timeout_s}")
        if self.num_workers != "auto" and self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1 or 'auto', got {self.num_workers}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AssemblerConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            _LOGGER.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a YAML or JSON mapping from ``path``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")
    return data
