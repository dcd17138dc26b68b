"""
Letter scoring: two passes, right-place matches claim their letter first.
"""

from collections import Counter

import pytest

from guess_word.models.game import HitAccuracy, WordGuess
from guess_word.services.game import score_guess

R = HitAccuracy.IN_RIGHT_PLACE
W = HitAccuracy.IN_WORD
N = HitAccuracy.NOT_IN_WORD


def accuracies(word_guess: WordGuess):
    return [gl.accuracy for gl in word_guess]


@pytest.mark.parametrize("guess,answer,expected", [
    ("heart", "haste", [R, W, W, N, W]),
    ("spell", "sleep", [R, W, R, W, N]),
    ("haste", "haste", [R, R, R, R, R]),
    ("about", "crane", [W, N, N, N, N]),
    ("level", "hotel", [N, N, N, R, R]),
    ("sleep", "spell", [R, W, R, N, W]),
    ("eerie", "there", [W, N, W, N, R]),
    ("lemon", "level", [R, R, N, N, N]),
])
def test_score_guess_examples(guess, answer, expected):
    assert accuracies(score_guess(guess, answer)) == expected


def test_score_preserves_guess_letters_in_order():
    word_guess = score_guess("heart", "haste")

    assert word_guess.word == "heart"
    assert [gl.letter for gl in word_guess] == list("heart")
    assert len(word_guess) == 5


def test_right_place_claims_letter_before_earlier_duplicate():
    # The first 'e' would be IN_WORD if scanned left to right in one pass,
    # but the answer's only 'e' is claimed by the exact match at the end.
    assert accuracies(score_guess("eerie", "crane")) == [N, N, W, N, R]


def test_letter_absent_from_answer_is_never_marked():
    word_guess = score_guess("zzzzz", "haste")
    assert accuracies(word_guess) == [N] * 5


def test_scoring_is_idempotent():
    assert score_guess("spell", "sleep") == score_guess("spell", "sleep")


@pytest.mark.parametrize("guess,answer", [
    ("sssss", "haste"),
    ("eerie", "there"),
    ("level", "lemon"),
    ("spell", "sleep"),
    ("lllll", "hello"),
])
def test_hits_never_exceed_answer_letter_count(guess, answer):
    word_guess = score_guess(guess, answer)
    hits = Counter(gl.letter for gl in word_guess if gl.accuracy is not N)
    answer_counts = Counter(answer)

    for letter, count in hits.items():
        assert count <= answer_counts[letter]


def test_exact_match_is_correct():
    assert score_guess("crane", "crane").is_correct
    assert not score_guess("trace", "crane").is_correct


def test_mismatched_lengths_are_rejected():
    with pytest.raises(ValueError):
        score_guess("cranes", "crane")


def test_to_pairs_serializes_accuracy_values():
    assert score_guess("spell", "sleep").to_pairs() == [
        ("s", "IN_RIGHT_PLACE"),
        ("p", "IN_WORD"),
        ("e", "IN_RIGHT_PLACE"),
        ("l", "IN_WORD"),
        ("l", "NOT_IN_WORD"),
    ]
