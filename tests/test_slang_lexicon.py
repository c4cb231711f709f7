import pytest

from transcript_annotator.core import LexiconNotLoadedError, SlangLexicon


def test_detect_slang_maps_indices(slang_lexicon):
    words = ["this", "is", "lit", "fam"]

    assert slang_lexicon.detect_slang(words, "en_us") == {2: True, 3: True}


def test_slang_matching_is_case_insensitive_and_exact(slang_lexicon):
    assert slang_lexicon.is_slang("LIT", "en_us")
    assert not slang_lexicon.is_slang("little", "en_us")
    assert not slang_lexicon.is_slang("lit!", "en_us")


def test_find_slang_words_keeps_original_order(slang_lexicon):
    words = ["Fam", "we", "gonna", "be", "lit"]

    assert slang_lexicon.find_slang_words(words, "en_us") == ["Fam", "gonna", "lit"]


def test_no_slang_yields_empty_mapping(slang_lexicon):
    assert slang_lexicon.detect_slang(["hello", "world"], "en_us") == {}
    assert slang_lexicon.detect_slang([], "en_us") == {}


def test_languages_are_independent(slang_lexicon):
    assert slang_lexicon.is_slang("fixe", "pt_PT")
    assert not slang_lexicon.is_slang("fixe", "en_us")


def test_unloaded_language_raises(slang_lexicon):
    with pytest.raises(LexiconNotLoadedError) as excinfo:
        slang_lexicon.detect_slang(["lit"], "en_uk")

    assert excinfo.value.kind == "slang"


def test_terms_are_normalised():
    lexicon = SlangLexicon({"en_us": [" Dope ", "", "BAE"]})

    assert lexicon.terms("en_us") == frozenset({"dope", "bae"})
