import logging

from wordule.vocab import WordVocab

log = logging.getLogger(__name__)

DEFAULT_DICT = "/usr/share/dict/words"


def load_dictionary(path: str = DEFAULT_DICT, *, word_len: int = 5, column: str = "word") -> WordVocab:
    """
    Load the candidate dictionary.
    Paths ending in .csv are read as a table and words taken from `column`;
    anything else is treated as a newline-delimited word list.
    """
    if path.lower().endswith(".csv"):
        vocab = WordVocab.from_csv(path, column, word_len=word_len)
    else:
        vocab = WordVocab.from_text(path, word_len=word_len)
    log.debug("loaded %d %d-letter words from %s", len(vocab), word_len, path)
    return vocab
