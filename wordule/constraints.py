"""
constraints.py

Keeps track of the knowledge gathered from feedback and filters candidate words.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from wordule.letters import LetterSet, unique_letters


class Constraints:
    def __init__(self, word_length: int = 5) -> None:
        if word_length <= 0:
            raise ValueError("word_length must be positive")
        self.word_length = word_length
        self.reset()

    def reset(self) -> None:
        # letters known exactly at a position (green)
        self.fixed: List[Optional[str]] = [None] * self.word_length
        # every letter that has ever been used as a position fix
        self.fixed_anywhere = LetterSet()
        # letters ruled out for a single slot (orange, or grey next to a green copy)
        self.forbidden_position: List[LetterSet] = [LetterSet() for _ in range(self.word_length)]
        # letters that appear nowhere in the answer
        self.forbidden_everywhere = LetterSet()
        # letters that appear somewhere in the answer
        self.present_everywhere = LetterSet()

    def copy(self) -> "Constraints":
        out = Constraints(self.word_length)
        out.fixed = list(self.fixed)
        out.fixed_anywhere = self.fixed_anywhere.copy()
        out.forbidden_position = [s.copy() for s in self.forbidden_position]
        out.forbidden_everywhere = self.forbidden_everywhere.copy()
        out.present_everywhere = self.present_everywhere.copy()
        return out

    def allows(self, word: str, require_present: bool = False) -> bool:
        """Check a single word against the positional and global constraints."""
        for i, ch in enumerate(word):
            if ch in self.forbidden_everywhere:
                return False
            fixed = self.fixed[i]
            if fixed is not None and fixed != ch:
                return False
            if ch in self.forbidden_position[i]:
                return False
        if require_present:
            letters = unique_letters(word)
            if (self.present_everywhere & letters) != self.present_everywhere:
                return False
        return True

    def __repr__(self) -> str:
        fixed = "".join(ch or "_" for ch in self.fixed)
        return (
            f"Constraints(fixed={fixed!r}, forbidden_everywhere={self.forbidden_everywhere!r}, "
            f"present_everywhere={self.present_everywhere!r})"
        )


def filter_candidates(
    words: Sequence[str],
    constraints: Constraints,
    *,
    require_present: bool = False,
) -> List[str]:
    """
    Keep only candidates consistent with `constraints`, in their original order.

    Known-present letters are not required unless `require_present` is set;
    by default such words survive and are left to the scorer to push down.
    """
    return [w for w in words if constraints.allows(w, require_present)]
