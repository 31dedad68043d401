import pytest

from wordule.data_utils import load_dictionary
from wordule.vocab import WordVocab


def test_from_lines_filters_and_dedupes():
    lines = ["crane\n", "Crane\n", "cranes\n", "it's\n", "slate\r\n", "crane\n", "\n", "café\n"]
    vocab = WordVocab.from_lines(lines)
    assert vocab.words() == ["crane", "slate"]
    assert len(vocab) == 2


def test_other_lengths():
    vocab = WordVocab.from_lines(["cat", "dog", "crane"], word_len=3)
    assert vocab.words() == ["cat", "dog"]


def test_no_usable_words():
    with pytest.raises(ValueError, match="no valid"):
        WordVocab.from_lines(["Crane", "ab"])


def test_constructor_validation():
    with pytest.raises(TypeError):
        WordVocab(("crane",))
    with pytest.raises(ValueError):
        WordVocab(["crane", "crane"])
    with pytest.raises(ValueError):
        WordVocab(["cranes"])


def test_load_text_file(tmp_path):
    p = tmp_path / "words"
    p.write_text("crane\nslate\nstairs\nnull\n", encoding="utf-8")
    assert load_dictionary(str(p)).words() == ["crane", "slate"]
    assert load_dictionary(str(p), word_len=4).words() == ["null"]


def test_load_csv_file(tmp_path):
    p = tmp_path / "word_list.csv"
    p.write_text("word,day\ncrane,1\nnan,\nslate,\nCRANE,3\n", encoding="utf-8")
    assert load_dictionary(str(p)).words() == ["crane", "slate"]
    assert load_dictionary(str(p), word_len=3).words() == ["nan"]
    with pytest.raises(KeyError):
        load_dictionary(str(p), column="answer")


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_dictionary(str(tmp_path / "nope"))
