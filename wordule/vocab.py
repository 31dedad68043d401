from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from wordule.letters import is_word


class WordVocab:
    def __init__(self, words: List[str], word_len: int = 5) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")
        bad = [w for w in words if not is_word(w, word_len)]
        if bad:
            raise ValueError(f"not a {word_len}-letter a..z word: {bad[0]!r}")

        self.word_len = word_len
        self._words: List[str] = list(words)

    # ---------- Construction helpers ----------

    @staticmethod
    def _clean(raw: Iterable[str], word_len: int) -> List[str]:
        """Keep the first occurrence of every a..z word of the right length."""
        clean: List[str] = []
        seen = set()
        for w in raw:
            if not is_word(w, word_len) or w in seen:
                continue
            seen.add(w)
            clean.append(w)
        if not clean:
            raise ValueError(f"no valid {word_len}-letter words after filtering")
        return clean

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, word_len: int = 5) -> "WordVocab":
        """Build from newline-delimited text; lines failing the [a-z]+ filter are dropped."""
        return cls(cls._clean((line.rstrip("\r\n") for line in lines), word_len), word_len)

    @classmethod
    def from_text(cls, path: str, *, word_len: int = 5) -> "WordVocab":
        """
        Load a plain word list (one word per line, e.g. /usr/share/dict/words).

        Raises
        ------
        OSError, UnicodeDecodeError, ValueError
        """
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_lines(f, word_len=word_len)

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: int = 5,
    ) -> "WordVocab":
        """
        Load words from a CSV column and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=5
            Required word length.

        Raises
        ------
        OSError, KeyError, ValueError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls(cls._clean(df[column].tolist(), word_len), word_len)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)
