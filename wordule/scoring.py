"""
scoring.py

Cheap informativeness heuristic over the current candidate set.

A letter scores 1.0 when it occurs in exactly half of the candidates (the best
possible split) and 0.0 when it occurs in all of them or none. With an odd
candidate count a letter in every word would dip below zero; it is held at 0.0.
A word scores the sum over its unique letters, adjusted for the early/late game regime.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from wordule.letters import ALPHABET, LetterCount, LetterSet, unique_letters


class Scorer:
    def __init__(self, words: Sequence[str]) -> None:
        self.half: int = len(words) // 2
        self.count = LetterCount()
        for w in words:
            # each word counts at most once per letter
            for ch in unique_letters(w):
                self.count.increment(ch)

    def max_score(self) -> int:
        return self.half

    def letter_score(self, letter: str) -> float:
        if self.half == 0:
            return 0.0
        dist = abs(self.count.get(letter) - self.half)
        return max(0, self.half - dist) / self.half

    def letter_scores(self) -> np.ndarray:
        """All 26 letter scores in alphabet order."""
        if self.half == 0:
            return np.zeros(len(ALPHABET), dtype=np.float64)
        counts = self.count.as_array()
        return np.maximum(0, self.half - np.abs(counts - self.half)) / self.half

    def ranked_letters(self) -> List[Tuple[str, float]]:
        """(letter, score) pairs, best first; ties keep alphabet order."""
        scores = self.letter_scores()
        order = np.argsort(-scores, kind="stable")
        return [(ALPHABET[i], float(scores[i])) for i in order]

    def word_score(self, word: str, present: LetterSet, early: bool) -> float:
        """
        Sum the letter scores of the unique letters in `word`.

        Early game: letters already known to be present carry no new
        information and contribute nothing.
        Late game: known-present letters count double so that guesses which
        place them in untried positions rise to the top.
        """
        total = 0.0
        for ch in unique_letters(word):
            s = self.letter_score(ch)
            if ch in present:
                total += 0.0 if early else 2.0 * s
            else:
                total += s
        return total
