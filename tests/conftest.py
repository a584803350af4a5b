"""Shared test fixtures and configuration for Sequencer tests."""

import random

import pytest

from sequencer.core.fragment import Fragment


@pytest.fixture
def dna_alphabet():
    """DNA alphabet (GCAT)."""
    return "GCAT"


@pytest.fixture
def disjoint_pool():
    """Fragments with zero overlap for every ordered pair."""
    return [Fragment("GGG"), Fragment("TTT"), Fragment("CCC")]


@pytest.fixture
def two_cluster_pool():
    """Two clusters that overlap internally but never with each other."""
    return [Fragment("CAA"), Fragment("AAC"), Fragment("GTT"), Fragment("TTG")]


@pytest.fixture
def shotgun_pool(dna_alphabet):
    """Overlapping reads sampled from a fixed random genome."""
    rng = random.Random(7)
    genome = "".join(rng.choice(dna_alphabet) for _ in range(120))
    reads = []
    for start in range(0, len(genome) - 20, 9):
        reads.append(Fragment(genome[start : start + 20]))
    rng.shuffle(reads)
    return reads
