import numpy as np
import pytest

from wordule.letters import ALPHABET, LetterSet
from wordule.scoring import Scorer

WORDS = ["crane", "crate", "slate", "plate", "stair", "atone"]


@pytest.fixture
def scorer():
    return Scorer(WORDS)


def test_half_and_counts(scorer):
    assert scorer.max_score() == 3
    assert scorer.count.get("a") == 6
    assert scorer.count.get("r") == 3
    assert scorer.count.get("e") == 5


def test_letter_score_peaks_at_half(scorer):
    assert scorer.letter_score("r") == 1.0  # in exactly 3 of 6
    assert scorer.letter_score("a") == 0.0  # in every word
    assert scorer.letter_score("z") == 0.0  # in none
    assert scorer.letter_score("s") == pytest.approx(2 / 3)
    assert scorer.letter_score("e") == pytest.approx(1 / 3)


def test_letter_scores_in_unit_interval_and_peak_iff_half():
    words = ["abcde", "abfgh", "aijkl", "mnopq", "rstuv"]
    s = Scorer(words)
    for ch in ALPHABET:
        score = s.letter_score(ch)
        assert 0.0 <= score <= 1.0
        assert (score == 1.0) == (s.count.get(ch) == s.half)


def test_letter_scores_vector_matches_scalar(scorer):
    vec = scorer.letter_scores()
    assert vec.shape == (26,)
    np.testing.assert_allclose(vec, [scorer.letter_score(ch) for ch in ALPHABET])


def test_ranked_letters_descending(scorer):
    ranked = scorer.ranked_letters()
    assert len(ranked) == 26
    assert ranked[0] == ("r", 1.0)
    scores = [s for _, s in ranked]
    assert scores == sorted(scores, reverse=True)


def test_word_score_sums_unique_letters(scorer):
    expected = sum(scorer.letter_score(ch) for ch in "slate")
    assert scorer.word_score("slate", LetterSet(), True) == pytest.approx(expected)
    assert scorer.word_score("slate", LetterSet(), True) == pytest.approx(2.0)


def test_word_score_ignores_repeated_letters(scorer):
    present = LetterSet("s")
    for early in (True, False):
        assert scorer.word_score("sassy", present, early) == pytest.approx(
            scorer.word_score("say", present, early)
        )


def test_early_zeroes_and_late_doubles_present_letters(scorer):
    base = sum(scorer.letter_score(ch) for ch in "slte")
    a = scorer.letter_score("a")
    assert scorer.word_score("slate", LetterSet("a"), True) == pytest.approx(base)
    assert scorer.word_score("slate", LetterSet("a"), False) == pytest.approx(base + 2 * a)

    # a present letter with a non-zero score makes the regimes diverge
    assert scorer.word_score("slate", LetterSet("s"), True) == pytest.approx(4 / 3)
    assert scorer.word_score("slate", LetterSet("s"), False) == pytest.approx(8 / 3)


def test_empty_and_single_word_pools_score_zero():
    for words in ([], ["crane"]):
        s = Scorer(words)
        assert s.max_score() == 0
        assert all(s.letter_score(ch) == 0.0 for ch in ALPHABET)
        assert s.word_score("crane", LetterSet("c"), False) == 0.0
        assert not s.letter_scores().any()


def test_letter_in_every_word_of_odd_pool_scores_zero():
    # n = 3, half = 1: |3 - 1| exceeds half
    s = Scorer(["crane", "slate", "plate"])
    assert s.letter_score("a") == 0.0
    assert s.letter_score("e") == 0.0
    assert s.letter_scores().min() >= 0.0
    # only `p` (in 1 of 3) splits the pool
    assert s.word_score("plate", LetterSet(), True) == 1.0
    for ch in ALPHABET:
        assert 0.0 <= s.letter_score(ch) <= 1.0
