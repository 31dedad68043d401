"""
engine.py

One solving session: rank, take the picked guess, take its feedback, narrow.

API
---
rank() -> Ranking
    Rescore against the current candidates and return the early/late top-K lists.
accept_pick(word) -> str
    Validate and remember the guess the player actually typed into Wordle.
accept_feedback(response) -> list[tuple[int, str]]
    Apply the colours for the remembered guess and filter the candidates.
    Returns any per-position syntax errors that were skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from wordule.constraints import Constraints, filter_candidates
from wordule.feedback import apply_feedback, validate_pick, validate_response
from wordule.letters import LetterSet
from wordule.scoring import Scorer

log = logging.getLogger(__name__)


@dataclass
class Ranking:
    scorer: Scorer
    early: List[Tuple[str, float]]
    late: List[Tuple[str, float]]

    def pairs(self) -> List[Tuple[Tuple[str, float], Tuple[str, float]]]:
        """Early and late entries side by side; stops at the shorter list."""
        return list(zip(self.early, self.late))


def top_k(words: Sequence[str], scorer: Scorer, present: LetterSet, early: bool, k: int) -> List[Tuple[str, float]]:
    """Best `k` words by descending score; equal scores keep their input order."""
    scored = [(w, scorer.word_score(w, present, early)) for w in words]
    scored.sort(key=lambda r: -r[1])
    return scored[:k]


class Engine:
    def __init__(
        self,
        words: Sequence[str],
        *,
        word_len: int = 5,
        guesses: int = 10,
        require_present: bool = False,
    ) -> None:
        if word_len <= 0:
            raise ValueError("word_len must be positive")
        if guesses <= 0:
            raise ValueError("guesses must be positive")

        self.word_len = word_len
        self.guesses = guesses
        self.require_present = require_present

        self.dictionary: Tuple[str, ...] = tuple(words)
        self.candidates: List[str] = list(self.dictionary)
        self.constraints = Constraints(word_len)
        self.picked: Optional[str] = None

    @property
    def present(self) -> LetterSet:
        return self.constraints.present_everywhere

    def score_word(self, word: str) -> float:
        """Early-game score of `word` against the whole dictionary, nothing known yet."""
        return Scorer(self.dictionary).word_score(word, LetterSet(), True)

    def rank(self) -> Ranking:
        # rebuilt every round: `half` moves as the candidates shrink
        scorer = Scorer(self.candidates)
        early = top_k(self.dictionary, scorer, self.present, True, self.guesses)
        late = top_k(self.candidates, scorer, self.present, False, self.guesses)
        return Ranking(scorer, early, late)

    def accept_pick(self, word: str) -> str:
        self.picked = validate_pick(word, self.word_len)
        return self.picked

    def accept_feedback(self, response: str) -> List[Tuple[int, str]]:
        if self.picked is None:
            raise RuntimeError("no picked word to attach the response to")
        validate_response(response, self.word_len)

        errors = apply_feedback(self.constraints, self.picked, response)
        before = len(self.candidates)
        self.candidates = filter_candidates(
            self.candidates, self.constraints, require_present=self.require_present
        )
        log.debug("%s/%s: %d -> %d candidates", self.picked, response, before, len(self.candidates))
        self.picked = None
        return errors
