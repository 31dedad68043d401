"""
solver/solver_cli.py

Interactive Wordle helper (human-in-the-loop):
- Each round shows the top guesses in two columns: early game (explore unknown
  letters, drawn from the whole dictionary) and late game (exercise letters
  already known to be present, drawn from the remaining candidates).
- YOU type the word you actually guessed, then the colours Wordle showed:
    x  grey   (no match in word)
    ?  orange (match somewhere in the word)
    o  green  (exact match)
- Repeat. End the session with end-of-input (Ctrl-D).

Run:
  python -m solver.solver_cli --dict /usr/share/dict/words
  python -m solver.solver_cli --dict word_list.csv --column word
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO, Tuple

try:
    # line editing and per-session history for input()
    import readline  # noqa: F401
except ImportError:  # not shipped on Windows
    readline = None

from wordule.data_utils import DEFAULT_DICT, load_dictionary
from wordule.engine import Engine, Ranking
from wordule.scoring import Scorer

log = logging.getLogger(__name__)

Reader = Callable[[str], str]

BANNER = (
    "wordule: wordle solving thingy",
    "1. pick a word from the top words and write the picked word",
    "2. tell wordule what the answer was, for each letter in the guessed word write:",
    "  `x` for grey (no match in word)",
    "  `?` for orange (match somewhere in the word)",
    "  `o` for green (exact match)",
    "3. repeat",
)


def positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordule", description="Interactive Wordle solver (manual feedback)")
    ap.add_argument("--length", type=positive_int, default=5, help="Guessed word length")
    ap.add_argument("--dict", default=DEFAULT_DICT, help="Path to a dictionary file (.csv is read as a table)")
    ap.add_argument("--column", default="word", help="Word column when --dict is a CSV file")
    ap.add_argument("--guesses", type=positive_int, default=10, help="Entries per suggestion list")
    ap.add_argument("--score-word", metavar="WORD", help="Print the score for WORD and exit")
    ap.add_argument("--letter-scores", action="store_true", help="Show all letter scores each round")
    ap.add_argument(
        "--require-present",
        action="store_true",
        help="Also drop candidates missing a letter already known to be present",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def print_letter_scores(scorer: Scorer, out: TextIO) -> None:
    print("letter scores:", file=out)
    for ch, score in scorer.ranked_letters():
        print(f"  {ch}  {score:.3f}", file=out)


def print_ranking(ranking: Ranking, out: TextIO) -> None:
    print("guesses (early, late):", file=out)
    for (early, e_score), (late, l_score) in ranking.pairs():
        print(f"  {early}    {late}      {e_score:.3f}    {l_score:.3f}", file=out)


def read_pick(engine: Engine, read: Reader) -> str:
    while True:
        word = read("picked> ").strip()
        try:
            return engine.accept_pick(word)
        except ValueError as e:
            log.warning("%s", e)


def read_response(engine: Engine, read: Reader) -> List[Tuple[int, str]]:
    while True:
        res = read("response> ").strip()
        try:
            return engine.accept_feedback(res)
        except ValueError as e:
            log.warning("%s", e)


def run_session(
    engine: Engine,
    *,
    read: Reader = input,
    out: Optional[TextIO] = None,
    letter_scores: bool = False,
) -> None:
    """Loop rank -> pick -> response -> filter until the reader hits end-of-input."""
    out = out or sys.stdout
    try:
        while True:
            ranking = engine.rank()
            if letter_scores:
                print_letter_scores(ranking.scorer, out)
            print_ranking(ranking, out)

            read_pick(engine, read)
            read_response(engine, read)

            print(f"Remaining candidates: {len(engine.candidates)}", file=out)
            if not engine.candidates:
                print("No candidates remain. Check your feedback inputs.", file=out)
    except EOFError:
        print(file=out)


def main(argv: Optional[List[str]] = None, read: Reader = input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        vocab = load_dictionary(args.dict, word_len=args.length, column=args.column)
    except (OSError, KeyError, ValueError) as e:
        log.error("reading words file %s: %s", args.dict, e)
        return 1

    engine = Engine(
        vocab.words(),
        word_len=args.length,
        guesses=args.guesses,
        require_present=args.require_present,
    )

    if args.score_word is not None:
        # with nothing known there is no difference between early/late scores
        print(f"  {args.score_word}      {engine.score_word(args.score_word):.3f}")
        return 0

    for line in BANNER:
        log.info(line)
    try:
        run_session(engine, read=read, letter_scores=args.letter_scores)
    except KeyboardInterrupt:
        log.error("readline: interrupted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
