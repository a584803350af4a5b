"""Sequencer public interface.

Build :class:`~sequencer.core.Fragment` values and hand them to
:class:`~sequencer.engine.Assembler` for greedy overlap assembly.
"""

from __future__ import annotations

from .core import AssemblerState, AssemblyResults, Fragment, InvalidAlphabetError
from .engine import Assembler, MergeOutcome
from .utils import AssemblerConfig

__all__ = [
    "Assembler",
    "AssemblerConfig",
    "AssemblerState",
    "AssemblyResults",
    "Fragment",
    "InvalidAlphabetError",
    "MergeOutcome",
]

__version__ = "0.1.0"
