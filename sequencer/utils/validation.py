"""Validation helpers for Sequencer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from sequencer.core.fragment import Fragment


def ensure_fragments(fragments: Iterable[Fragment | str]) -> list[Fragment]:
    """Normalize raw strings into `Fragment` objects with validation.

    Surrounding whitespace is stripped from strings; case is left alone, so
    lowercase input is rejected like any other invalid symbol.
    """
    result: list[Fragment] = []
    for entry in fragments:
        if isinstance(entry, Fragment):
            result.append(entry)
        else:
            result.append(Fragment(str(entry).strip()))
    return result


def parse_fragment_lines(lines: Iterable[str]) -> list[str]:
    """Collect fragment strings from plain or FASTA-formatted text.

    Plain lines are one fragment each. Lines following a ``>`` header are
    joined into a single record until the next header. Blank lines and ``#``
    comments are skipped.
    """
    records: list[str] = []
    chunks: list[str] | None = None
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith(">"):
            if chunks:
                records.append("".join(chunks))
            chunks = []
        elif chunks is None:
            records.append(line)
        else:
            chunks.append(line)
    if chunks:
        records.append("".join(chunks))
    return records


def load_fragments(path: str | Path) -> list[Fragment]:
    """Read and validate fragments from a text or FASTA file."""
    with Path(path).open(encoding="utf-8") as handle:
        return ensure_fragments(parse_fragment_lines(handle))
