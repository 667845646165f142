import pytest

from fig.dictionary import Dictionary, load_dictionary
from fig.errors import DictionaryUnavailable, IndexOutOfRange


def test_bundled_dictionary(dictionary):
    assert len(dictionary) == 1225
    assert dictionary.lookup(0) == "the"
    assert dictionary.lookup(995) == "hello"
    assert dictionary.index_of("world") == 193
    assert all(word == word.lower() for word in dictionary)
    assert len(set(dictionary)) == len(dictionary)


def test_load_is_cached():
    assert load_dictionary() is load_dictionary()


@pytest.mark.parametrize("index", [-1, 1225, 10**6])
def test_lookup_out_of_range(dictionary, index):
    with pytest.raises(IndexOutOfRange) as excinfo:
        dictionary.lookup(index)
    assert excinfo.value.index == index
    assert excinfo.value.size == 1225


def test_first_occurrence_wins():
    words = Dictionary(["a", "b", "a"])
    assert len(words) == 3
    assert words.index_of("a") == 0
    assert "b" in words
    assert words.index_of("c") is None


def test_from_text_skips_blank_lines():
    assert list(Dictionary.from_text("one\n\n  two \n")) == ["one", "two"]


def test_unreadable_word_list(tmp_path):
    with pytest.raises(DictionaryUnavailable) as excinfo:
        load_dictionary(tmp_path / "absent.txt")
    assert excinfo.value.stage == "startup"
