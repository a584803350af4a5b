"""Tests for Fragment."""

import dataclasses

import pytest

from sequencer.core.fragment import Fragment, InvalidAlphabetError

PAIRS = [
    ("CAA", "AAG"),
    ("AAG", "CAA"),
    ("GCATT", "GCATTGACAT"),
    ("GCATTGACAT", "GCATT"),
    ("GGG", "TTT"),
    ("ACGT", "ACGT"),
    ("T", "TTTT"),
    ("ATATAT", "ATAT"),
]


class TestFragmentConstruction:
    """Construction and value semantics."""

    def test_keeps_symbols_verbatim(self):
        fragment = Fragment("GCATTGACAT")
        assert fragment.tokens == "GCATTGACAT"
        assert str(fragment) == "GCATTGACAT"
        assert len(fragment) == 10

    def test_rejects_invalid_symbol(self):
        with pytest.raises(InvalidAlphabetError, match="invalid symbols: \\['X'\\]"):
            Fragment("GCATX")

    def test_invalid_alphabet_is_value_error(self):
        with pytest.raises(ValueError):
            Fragment("GCAU")

    def test_rejects_lowercase(self):
        with pytest.raises(InvalidAlphabetError):
            Fragment("gcat")

    def test_rejects_empty(self):
        with pytest.raises(InvalidAlphabetError, match="Empty"):
            Fragment("")

    def test_equality_is_by_sequence(self):
        assert Fragment("GCA") == Fragment("GCA")
        assert Fragment("GCA") != Fragment("GCAT")
        assert hash(Fragment("GCA")) == hash(Fragment("GCA"))

    def test_is_immutable(self):
        fragment = Fragment("GCA")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fragment.tokens = "TTT"  # type: ignore[misc]


class TestOverlap:
    """Suffix/prefix overlap measurement."""

    def test_overlap_is_directional(self):
        a, b = Fragment("CAA"), Fragment("AAG")
        assert a.overlap_with(b) == 2
        assert b.overlap_with(a) == 0

    def test_overlap_is_maximal(self):
        a, b = Fragment("GCATT"), Fragment("GCATTGACAT")
        assert a.overlap_with(b) == 5
        assert b.overlap_with(a) == 0

    def test_overlap_prefers_longest_match(self):
        assert Fragment("ATATAT").overlap_with(Fragment("ATAT")) == 4

    def test_overlap_with_itself_is_full_length(self):
        fragment = Fragment("GCATT")
        assert fragment.overlap_with(fragment) == 5

    @pytest.mark.parametrize(("left", "right"), PAIRS)
    def test_overlap_bounds(self, left, right):
        a, b = Fragment(left), Fragment(right)
        assert 0 <= a.overlap_with(b) <= min(len(a), len(b))


class TestMerge:
    """Merging two fragments."""

    def test_zero_overlap_concatenates(self):
        merged = Fragment("GGG").merged_with(Fragment("TTT"))
        assert str(merged) == "GGGTTT"

    def test_merge_drops_overlap(self):
        assert str(Fragment("CAA").merged_with(Fragment("AAG"))) == "CAAG"

    def test_merge_uses_self_as_left(self):
        assert str(Fragment("AAG").merged_with(Fragment("CAA"))) == "AAGCAA"

    def test_merge_of_contained_prefix(self):
        merged = Fragment("GCATT").merged_with(Fragment("GCATTGACAT"))
        assert merged == Fragment("GCATTGACAT")

    def test_merge_leaves_operands_untouched(self):
        a, b = Fragment("CAA"), Fragment("AAG")
        a.merged_with(b)
        assert a.tokens == "CAA"
        assert b.tokens == "AAG"

    @pytest.mark.parametrize(("left", "right"), PAIRS)
    def test_merge_matches_overlap(self, left, right):
        a, b = Fragment(left), Fragment(right)
        merged = a.merged_with(b)
        assert str(merged) == str(a) + str(b)[a.overlap_with(b) :]
        assert isinstance(merged, Fragment)
