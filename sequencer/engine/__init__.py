"""Assembly engine (surfaces)."""

from .assembler import Assembler, MergeOutcome
from .scan import OverlapScanner, PoolScanner, SequentialScanner, scanner_from_config
from .selection import Candidate, select_pair

__all__ = [
    "Assembler",
    "MergeOutcome",
    "OverlapScanner",
    "SequentialScanner",
    "PoolScanner",
    "scanner_from_config",
    "Candidate",
    "select_pair",
]
