"""
Tests for the free group word algebra.
Run with: python -m pytest tests/ -v
"""
import itertools

import pytest

from banachtarski.model.words import (
    SYMBOLS,
    is_inverse_pair,
    inverse,
    inverse_word,
    reduce_word,
    is_reduced,
    in_a,
    in_b,
    in_coset_aa,
    in_coset_bb,
)


def all_words(max_length: int):
    for n in range(max_length + 1):
        for letters in itertools.product(SYMBOLS, repeat=n):
            yield "".join(letters)


class TestInversePair:
    """Test symbol cancellation."""

    @pytest.mark.parametrize("prev,next_", [("a", "A"), ("A", "a"), ("b", "B"), ("B", "b")])
    def test_inverse_pairs(self, prev, next_):
        assert is_inverse_pair(prev, next_)

    @pytest.mark.parametrize("prev,next_", [("a", "a"), ("a", "b"), ("a", "B"), ("B", "a"), ("", "a"), ("b", "b")])
    def test_non_inverse_pairs(self, prev, next_):
        assert not is_inverse_pair(prev, next_)

    def test_inverse_symbol(self):
        assert [inverse(c) for c in SYMBOLS] == ["A", "a", "B", "b"]

    def test_inverse_unknown_symbol(self):
        with pytest.raises(ValueError):
            inverse("c")


class TestReduce:
    """Test free reduction."""

    def test_empty(self):
        assert reduce_word("") == ""

    def test_simple_cancellation(self):
        assert reduce_word("aA") == ""
        assert reduce_word("Bb") == ""

    def test_nested_cancellation(self):
        assert reduce_word("abBA") == ""
        assert reduce_word("abBAb") == "b"

    def test_cancellation_exposes_pair(self):
        assert reduce_word("aabBAb") == "ab"

    def test_already_reduced(self):
        assert reduce_word("abAB") == "abAB"

    def test_prepend_inverse(self):
        assert reduce_word("A" + "a") == ""
        assert reduce_word("A" + "ab") == "b"
        assert reduce_word("B" + "ab") == "Bab"
        assert reduce_word("B" + "ba") == "a"

    def test_idempotent_and_reduced(self):
        for w in all_words(5):
            r = reduce_word(w)
            assert reduce_word(r) == r
            assert is_reduced(r)
            assert len(r) <= len(w)

    def test_word_times_inverse_is_identity(self):
        for w in all_words(4):
            assert reduce_word(w + inverse_word(w)) == ""
            assert reduce_word(inverse_word(w) + w) == ""

    def test_foreign_characters_are_kept(self):
        assert reduce_word("axA") == "axA"


class TestPartition:
    """Test the partition F2 = A u B."""

    def test_identity(self):
        assert in_a("")
        assert not in_b("")

    def test_first_letter(self):
        assert in_a("a") and in_a("Ab")
        assert in_b("b") and in_b("Ba")
        assert not in_a("bA")
        assert not in_b("aB")

    def test_total_and_disjoint(self):
        for w in all_words(4):
            if not is_reduced(w):
                continue
            assert in_a(w) != in_b(w), w


class TestCosets:
    """Test the translated sets aA and bB."""

    @pytest.mark.parametrize("word", ["", "a", "aa", "aab", "A", "b", "B", "ba", "bb"])
    def test_in_aa(self, word):
        assert in_coset_aa(word)

    @pytest.mark.parametrize("word", ["ab", "aB", "abA", "aBB"])
    def test_not_in_aa(self, word):
        # a^-1 * word starts with b or B
        assert not in_coset_aa(word)

    @pytest.mark.parametrize("word", ["", "a", "ab", "A", "B", "bb", "bbA"])
    def test_in_bb(self, word):
        assert in_coset_bb(word)

    @pytest.mark.parametrize("word", ["b", "ba", "bA", "baB"])
    def test_not_in_bb(self, word):
        assert not in_coset_bb(word)

    def test_cosets_cover_f2(self):
        for w in all_words(5):
            if not is_reduced(w):
                continue
            assert in_coset_aa(w) or in_coset_bb(w), w

    def test_cosets_overlap(self):
        assert in_coset_aa("") and in_coset_bb("")
        assert in_coset_aa("aa") and in_coset_bb("aa")
