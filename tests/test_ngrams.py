import pytest

from ngram_langid.text.ngrams import count_ngrams, extract_ngrams


def test_unigrams_are_letters():
    assert extract_ngrams("ab c", 1) == ["a", "b", "c"]


def test_bigrams_include_word_boundaries():
    assert extract_ngrams("ab c", 2) == [" a", "ab", "b ", " c", "c "]


def test_grams_never_span_words():
    grams = extract_ngrams("the cat", 3)
    assert grams == [" th", "the", "he ", " ca", "cat", "at "]
    assert "e c" not in grams


def test_word_shorter_than_order():
    assert extract_ngrams("a", 5) == []
    assert extract_ngrams("a", 3) == [" a "]


def test_order_bounds():
    with pytest.raises(ValueError):
        extract_ngrams("text", 0)
    with pytest.raises(ValueError):
        extract_ngrams("text", 6)


def test_count_ngrams():
    counts = count_ngrams("aa aa", [1, 2])
    assert counts[1] == {"a": 4}
    assert counts[2] == {" a": 2, "aa": 2, "a ": 2}
