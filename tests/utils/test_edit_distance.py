"""edit_distance 모듈 단위 테스트."""

from unittest.mock import patch

from pronunciation_coach.utils.edit_distance import (
    levenshtein_distance,
    similarity_percentage,
    align_sequences,
)


class TestLevenshteinDistance:
    """levenshtein_distance 함수 테스트."""

    def test_single_substitution(self):
        assert levenshtein_distance("hablo", "hiblo") == 1
        assert levenshtein_distance("como", "coma") == 1

    def test_different_verbs_are_far_apart(self):
        assert levenshtein_distance("hablar", "comer") > 3

    def test_identical(self):
        assert levenshtein_distance("hablo", "hablo") == 0

    def test_empty_inputs(self):
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3

    def test_symmetric(self):
        assert levenshtein_distance("hablo", "como") == levenshtein_distance("como", "hablo")

    def test_token_sequences(self):
        assert levenshtein_distance(["rr", "a"], ["r", "a"]) == 1

    def test_delegates_to_levenshtein_library(self):
        with patch("pronunciation_coach.utils.edit_distance.Levenshtein.distance", return_value=7) as distance:
            assert levenshtein_distance("hablo", "como") == 7
        distance.assert_called_once_with("hablo", "como")


class TestSimilarityPercentage:
    """similarity_percentage 함수 테스트."""

    def test_both_empty(self):
        assert similarity_percentage("", "") == 100

    def test_one_error_in_five(self):
        assert similarity_percentage("hablo", "hiblo") == 80

    def test_completely_different(self):
        assert similarity_percentage("abc", "xyz") == 0


class TestAlignSequences:
    """align_sequences 함수 테스트."""

    def test_substitution(self):
        ops = align_sequences(list("abc"), list("axc"))
        assert ops == [("match", 0, 0), ("sub", 1, 1), ("match", 2, 2)]

    def test_deletion(self):
        ops = align_sequences(list("ab"), list("a"))
        assert ops == [("match", 0, 0), ("del", 1, None)]

    def test_insertion(self):
        ops = align_sequences(list("a"), list("ab"))
        assert ops == [("match", 0, 0), ("ins", None, 1)]

    def test_empty(self):
        assert align_sequences([], []) == []

    def test_alignment_cost_matches_distance(self):
        pairs = [("hablo", "hiblo"), ("carro", "caro"), ("comí", "comimos"), ("llamo", "yamo")]
        for ref, hyp in pairs:
            ops = align_sequences(list(ref), list(hyp))
            cost = sum(1 for op, _, _ in ops if op != "match")
            assert cost == levenshtein_distance(ref, hyp)
