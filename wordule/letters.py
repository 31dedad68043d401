"""
letters.py

Small value types over the 26 lowercase letters:
- LetterSet: membership bitmap (bit i <=> chr(97 + i))
- LetterCount: per-letter counters backed by a numpy vector
- unique_letters: the per-word summary the scorer works from
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)


def _li(c: str) -> Optional[int]:
    """Map a lowercase letter to 0..25, or None for anything else."""
    if len(c) != 1 or not ("a" <= c <= "z"):
        return None
    return ord(c) - 97


def is_word(s: str, length: int) -> bool:
    """True iff `s` is exactly `length` letters from a..z."""
    return len(s) == length and all(_li(ch) is not None for ch in s)


class LetterSet:
    __slots__ = ("_bits",)

    def __init__(self, letters: Iterable[str] = ()) -> None:
        self._bits = 0
        for ch in letters:
            self.insert(ch)

    @classmethod
    def from_word(cls, word: str) -> "LetterSet":
        return cls(word)

    @classmethod
    def _from_bits(cls, bits: int) -> "LetterSet":
        out = cls()
        out._bits = bits
        return out

    def insert(self, letter: str) -> None:
        li = _li(letter)
        if li is not None:
            self._bits |= 1 << li

    def contains(self, letter: str) -> bool:
        li = _li(letter)
        return li is not None and bool(self._bits & (1 << li))

    @property
    def empty(self) -> bool:
        return self._bits == 0

    def copy(self) -> "LetterSet":
        return LetterSet._from_bits(self._bits)

    # ---------- Set protocol ----------

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and self.contains(letter)

    def __iter__(self) -> Iterator[str]:
        for li in range(ALPHABET_SIZE):
            if self._bits & (1 << li):
                yield ALPHABET[li]

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __bool__(self) -> bool:
        return not self.empty

    def __or__(self, other: "LetterSet") -> "LetterSet":
        return LetterSet._from_bits(self._bits | other._bits)

    def __and__(self, other: "LetterSet") -> "LetterSet":
        return LetterSet._from_bits(self._bits & other._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"LetterSet({''.join(self)!r})"


class LetterCount:
    """Counts per letter; letters outside a..z always read as 0."""

    __slots__ = ("_map",)

    def __init__(self) -> None:
        self._map = np.zeros(ALPHABET_SIZE, dtype=np.int64)

    def increment(self, letter: str) -> None:
        li = _li(letter)
        if li is not None:
            self._map[li] += 1

    def get(self, letter: str) -> int:
        li = _li(letter)
        if li is None:
            return 0
        return int(self._map[li])

    def as_array(self) -> np.ndarray:
        """Return a copy of the 26 counters in alphabet order."""
        return self._map.copy()


def unique_letters(word: str) -> LetterSet:
    return LetterSet.from_word(word)
