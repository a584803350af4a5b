"""Fragment data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

ALPHABET: Final = frozenset("GCAT")


class InvalidAlphabetError(ValueError):
    """Raised when a fragment is built from symbols outside {G, C, A, T}."""


@dataclass(frozen=True, slots=True)
class Fragment:
    """Immutable run of nucleotides read from a longer sequence.

    The symbols are stored exactly as given. Two fragments are equal when their
    symbol strings are identical.
    """

    tokens: str

    def __post_init__(self) -> None:
        if not self.tokens:
            msg = "Empty fragments are not allowed"
            raise InvalidAlphabetError(msg)
        invalid = set(self.tokens) - ALPHABET
        if invalid:
            msg = f"Fragment {self.tokens!r} contains invalid symbols: {sorted(invalid)}"
            raise InvalidAlphabetError(msg)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return self.tokens

    def overlap_with(self, other: Fragment) -> int:
        """Return how many trailing symbols of ``self`` lead ``other``.

        The longest match wins: ``CAA`` overlaps ``AAG`` by 2, not 1. The
        measure is directional, so ``a.overlap_with(b)`` and
        ``b.overlap_with(a)`` usually differ.
        """
        left, right = self.tokens, other.tokens
        for size in range(min(len(left), len(right)), 0, -1):
            if left[-size:] == right[:size]:
                return size
        return 0

    def merged_with(self, other: Fragment) -> Fragment:
        """Return ``self`` followed by whatever part of ``other`` it does not overlap.

        ``self`` is always the left fragment. With no overlap the result is a
        plain concatenation.
        """
        return Fragment(self.tokens + other.tokens[self.overlap_with(other) :])
