from ngram_langid.text.normalize import letter_count, normalize_text


def test_case_folding():
    assert normalize_text("Hello WORLD") == "hello world"
    assert normalize_text("Straße") == "strasse"


def test_collapse_whitespace():
    assert normalize_text("Hello   World\n\n  Test") == "hello world test"


def test_punctuation_and_digits_become_spaces():
    assert normalize_text("Hola, ¿cómo estás hoy?") == "hola cómo estás hoy"
    assert normalize_text("aujourd'hui 2024") == "aujourd hui"
    assert normalize_text("こんにちは、今日は") == "こんにちは 今日は"


def test_nfc_composes_vietnamese_diacritics():
    decomposed = "the\u0302\u0301"  # e + combining circumflex + combining acute
    assert normalize_text(decomposed) == "thế"


def test_thai_marks_preserved():
    """Thai vowel signs and tone marks are combining marks, not punctuation."""
    text = "สวัสดีครับ"
    assert normalize_text(text) == text


def test_empty_string():
    assert normalize_text("") == ""
    assert normalize_text("   ") == ""
    assert normalize_text("123 !!! ...") == ""


def test_letter_count():
    assert letter_count("hello world") == 10
    assert letter_count("") == 0
