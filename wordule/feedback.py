"""
Feedback utilities.

The player relays Wordle's colours as a string with one mark per letter:
  `x` grey   (letter not here, or not in the word at all)
  `?` orange (letter is somewhere else in the word)
  `o` green  (letter is fixed at this position)
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from wordule.constraints import Constraints
from wordule.letters import is_word

log = logging.getLogger(__name__)

GREY = "x"
ORANGE = "?"
GREEN = "o"


def validate_pick(word: str, length: int) -> str:
    """
    Check a picked guess before it is paired with feedback.

    Raises ValueError on a wrong length, characters outside a..z, or a word
    made only of `o` and `x` (the response pattern typed into the wrong prompt).
    """
    if len(word) != length:
        raise ValueError("length doesn't match")
    if not is_word(word, length):
        raise ValueError("contains invalid chars")
    if all(ch in (GREEN, GREY) for ch in word):
        raise ValueError("only contains `o` and `x`, we want picked guess not pattern")
    return word


def validate_response(response: str, length: int) -> str:
    if len(response) != length:
        raise ValueError("response length doesn't match")
    return response


def apply_feedback(constraints: Constraints, picked: str, response: str) -> List[Tuple[int, str]]:
    """
    Fold one (picked word, response) pair into `constraints`.

    Greens and oranges are applied first, then greys, so that a grey always
    sees every green of the same response:
    - Green  = fix the letter at that slot, mark it present
    - Orange = forbid the letter at that slot, mark it present
    - Grey   = if a copy of the letter is fixed somewhere, forbid it at the other
               fixed slots only; if a copy is present but unplaced, forbid it
               at this slot only; otherwise forbid it everywhere

    Marks outside {x, ?, o} are reported and skipped; the rest of the response
    still applies. Returns the skipped (position, mark) pairs.
    """
    if len(picked) != constraints.word_length or len(response) != constraints.word_length:
        raise ValueError(f"picked word and response must both have length {constraints.word_length}")

    errors: List[Tuple[int, str]] = []
    greys: List[Tuple[int, str]] = []

    # Pass 1: greens, oranges and syntax errors
    for i, (mark, ch) in enumerate(zip(response, picked)):
        if mark == GREEN:
            constraints.fixed[i] = ch
            constraints.fixed_anywhere.insert(ch)
            constraints.present_everywhere.insert(ch)
        elif mark == ORANGE:
            constraints.forbidden_position[i].insert(ch)
            constraints.present_everywhere.insert(ch)
        elif mark == GREY:
            greys.append((i, ch))
        else:
            log.warning("invalid response syntax at %d: `%s`", i, mark)
            errors.append((i, mark))

    # Pass 2: greys
    for i, ch in greys:
        if ch in constraints.fixed_anywhere:
            # another copy is green: the extra copy is absent from every other fixed slot
            for j, fix in enumerate(constraints.fixed):
                if fix is not None and fix != ch:
                    constraints.forbidden_position[j].insert(ch)
        elif ch in constraints.present_everywhere:
            constraints.forbidden_position[i].insert(ch)
        else:
            constraints.forbidden_everywhere.insert(ch)

    log.debug("after %s/%s: %r", picked, response, constraints)
    return errors
