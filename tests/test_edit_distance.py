"""Tests for the edit-distance path and its tie-breaking."""
import itertools

import pytest

from reading_fluency.alignment import align_sequences
from reading_fluency.models import AlignmentOperation, OperationKind

M = OperationKind.MATCH
S = OperationKind.SUBSTITUTION
D = OperationKind.DELETION
I = OperationKind.INSERTION


def _path(ref, hyp):
    return [(op.kind, op.reference_token, op.hypothesis_token) for op in align_sequences(ref, hyp)]


class TestBoundaries:
    def test_both_empty(self):
        assert align_sequences([], []) == []

    def test_empty_hypothesis_is_all_deletions(self):
        assert _path(["a", "b"], []) == [(D, "a", None), (D, "b", None)]

    def test_empty_reference_is_all_insertions(self):
        assert _path([], ["a", "b"]) == [(I, None, "a"), (I, None, "b")]

    def test_single_substitution(self):
        assert _path(["a"], ["b"]) == [(S, "a", "b")]


class TestPaths:
    def test_substitution_in_the_middle(self):
        assert _path(["the", "cat", "sat"], ["the", "dog", "sat"]) == [
            (M, "the", "the"),
            (S, "cat", "dog"),
            (M, "sat", "sat"),
        ]

    def test_deletion(self):
        assert _path(["the", "cat", "sat", "down"], ["the", "cat", "down"]) == [
            (M, "the", "the"),
            (M, "cat", "cat"),
            (D, "sat", None),
            (M, "down", "down"),
        ]

    def test_insertion(self):
        assert _path(["the", "cat", "sat"], ["the", "big", "cat", "sat"]) == [
            (M, "the", "the"),
            (I, None, "big"),
            (M, "cat", "cat"),
            (M, "sat", "sat"),
        ]

    def test_path_covers_both_sequences(self):
        ref = ["one", "two", "three", "four", "five"]
        hyp = ["one", "too", "four", "five", "six"]
        ops = align_sequences(ref, hyp)
        assert [op.reference_token for op in ops if op.reference_token is not None] == ref
        assert [op.hypothesis_token for op in ops if op.hypothesis_token is not None] == hyp


class TestTieBreaking:
    def test_swapped_words_align_diagonally(self):
        # two substitutions cost the same as delete + match + insert
        assert _path(["a", "b"], ["b", "a"]) == [(S, "a", "b"), (S, "b", "a")]

    def test_diagonal_preferred_over_insertion(self):
        assert _path(["a"], ["b", "c"]) == [(I, None, "b"), (S, "a", "c")]

    def test_diagonal_preferred_over_deletion(self):
        assert _path(["a", "b"], ["c"]) == [(D, "a", None), (S, "b", "c")]

    def test_deletion_preferred_over_insertion(self):
        # at the last cell deletion and insertion both cost 2, the diagonal 3
        assert _path(["a", "b", "a"], ["b", "a", "b"]) == [
            (I, None, "b"),
            (M, "a", "a"),
            (M, "b", "b"),
            (D, "a", None),
        ]

    def test_repeated_reference_word_matches_later_copy(self):
        assert _path(["a", "a"], ["a"]) == [(D, "a", None), (M, "a", "a")]

    def test_repeated_spoken_word_matches_later_copy(self):
        assert _path(["a"], ["a", "a"]) == [(I, None, "a"), (M, "a", "a")]

    def test_deterministic(self):
        ref = "the cat sat on the mat and the dog sat too".split()
        hyp = "a cat sat the mat and dog dog sat on two".split()
        first = align_sequences(ref, hyp)
        for _ in range(5):
            assert align_sequences(ref, hyp) == first


class TestOperationInvariants:
    def test_match_requires_equal_tokens(self):
        with pytest.raises(ValueError):
            AlignmentOperation(M, "a", "b")

    def test_substitution_requires_different_tokens(self):
        with pytest.raises(ValueError):
            AlignmentOperation(S, "a", "a")

    def test_deletion_has_no_hypothesis_token(self):
        with pytest.raises(ValueError):
            AlignmentOperation(D, "a", "a")
        with pytest.raises(ValueError):
            AlignmentOperation(D, None, "a")

    def test_insertion_has_no_reference_token(self):
        with pytest.raises(ValueError):
            AlignmentOperation(I, "a", None)


def _reference_path(ref, hyp):
    """Plain recurrence; min() keeps the first of equal candidates."""
    n, m = len(ref), len(hyp)
    cost = [[0] * (m + 1) for _ in range(n + 1)]
    back = [[None] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        cost[i][0], back[i][0] = i, D
    for j in range(1, m + 1):
        cost[0][j], back[0][j] = j, I
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            same = ref[i - 1] == hyp[j - 1]
            candidates = [
                (cost[i - 1][j - 1] + (0 if same else 1), M if same else S),
                (cost[i - 1][j] + 1, D),
                (cost[i][j - 1] + 1, I),
            ]
            cost[i][j], back[i][j] = min(candidates, key=lambda c: c[0])
    path = []
    i, j = n, m
    while i or j:
        kind = back[i][j]
        if kind in (M, S):
            path.append((kind, ref[i - 1], hyp[j - 1]))
            i, j = i - 1, j - 1
        elif kind is D:
            path.append((kind, ref[i - 1], None))
            i -= 1
        else:
            path.append((kind, None, hyp[j - 1]))
            j -= 1
    return path[::-1]


_SHORT_SEQUENCES = [
    list(seq) for size in range(5) for seq in itertools.product("ab", repeat=size)
]


class TestAgainstRecurrence:
    @pytest.mark.parametrize("ref", _SHORT_SEQUENCES, ids=lambda seq: "".join(seq) or "empty")
    def test_every_short_pair(self, ref):
        for hyp in _SHORT_SEQUENCES:
            assert _path(ref, hyp) == _reference_path(ref, hyp), (ref, hyp)
