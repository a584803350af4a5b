"""Utility exports."""

from .config import AssemblerConfig, load_config
from .logging import get_logger, set_verbosity
from .validation import ensure_fragments, load_fragments, parse_fragment_lines

__all__ = [
    "AssemblerConfig",
    "load_config",
    "get_logger",
    "set_verbosity",
    "ensure_fragments",
    "load_fragments",
    "parse_fragment_lines",
]
