import logging

import pytest

from transcript_annotator.app.data import BUILTIN_SLANG, LexiconAssetLoader
from transcript_annotator.app.data.lexicon_sources import (
    dictionary_filename,
    iter_dictionary_entries,
)
from transcript_annotator.core import UnsupportedLanguageError


def _write(path, text, encoding="utf-8"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding=encoding)


def test_iter_dictionary_entries_skips_comments_and_variants():
    lines = [
        ";;; comment",
        "",
        "READ  R IY1 D",
        "read(2)  R EH1 D",
        "orphan",
        "cat K AE1 T",
    ]

    assert list(iter_dictionary_entries(lines)) == [("read", "R IY1 D"), ("cat", "K AE1 T")]


def test_dictionary_filename_by_family():
    assert dictionary_filename("en_us") == "cmudict.dict"
    assert dictionary_filename("en_uk") == "cmudict.dict"
    assert dictionary_filename("pt_PT") == "ptdict.dict"


def test_loads_assets_from_directory(tmp_path):
    _write(tmp_path / "en_us" / "cmudict.dict", "cat K AE1 T\ncat L AE1 T\nhat HH AE1 T\n")
    _write(tmp_path / "pt_PT" / "ptdict.dict", "amor a m o r\nflor f l o r\n")
    _write(tmp_path / "en_us" / "slang.txt", "# extra terms\nSkrrt\n\n")

    service = LexiconAssetLoader(tmp_path).initialize_lexicons(["en_us", "pt_PT"])

    assert service.languages == ("en_us", "pt_PT")
    assert service.phonetic.get_pronunciation("cat", "en_us") == "K AE1 T"
    assert service.phonetic.rhymes("amor", "flor", "pt_PT")
    assert service.slang.is_slang("skrrt", "en_us")
    assert service.slang.is_slang("lit", "en_us")
    assert not service.slang.is_slang("# extra terms", "en_us")


def test_missing_portuguese_dictionary_loads_empty(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        service = LexiconAssetLoader(tmp_path).initialize_lexicons(["pt_PT"])

    assert service.phonetic.is_loaded("pt_PT")
    assert service.phonetic.size("pt_PT") == 0
    assert service.slang.terms("pt_PT") == BUILTIN_SLANG["pt_PT"]
    assert "No pronunciation dictionary available" in caplog.text


def test_unreadable_dictionary_loads_empty(tmp_path, caplog):
    path = tmp_path / "en_us" / "cmudict.dict"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\xff\xfe\xfa not utf-8")

    with caplog.at_level(logging.WARNING):
        loader = LexiconAssetLoader(tmp_path)
        table = loader.load_pronunciations("en_us")

    assert table == {}
    assert "could not be read" in caplog.text


def test_english_without_bundle_is_empty(tmp_path):
    loader = LexiconAssetLoader(tmp_path, use_bundled_cmu=False)

    assert loader.load_pronunciations("en_uk") == {}


def test_english_falls_back_to_bundled_cmu():
    table = LexiconAssetLoader().load_pronunciations("en_us")

    assert table["cat"] == "K AE1 T"
    assert "cat(2)" not in table


def test_unsupported_language_is_rejected(tmp_path):
    with pytest.raises(UnsupportedLanguageError):
        LexiconAssetLoader(tmp_path).initialize_lexicons(["de_DE"])
