"""Core primitives.

Low-level, stable types shared by the assembler, the CLI and callers.
"""

from .fragment import ALPHABET, Fragment, InvalidAlphabetError
from .results import AssemblerState, AssemblyResults, MergeStep

__all__ = [
    "ALPHABET",
    "AssemblerState",
    "AssemblyResults",
    "Fragment",
    "InvalidAlphabetError",
    "MergeStep",
]
