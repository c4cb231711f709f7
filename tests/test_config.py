from pathlib import Path

import pytest

from transcript_annotator.app.config import (
    DEFAULT_LANGUAGE_ENV,
    DICTIONARY_DIR_ENV,
    LANGUAGES_ENV,
    PHRASE_THRESHOLD_ENV,
    VERSE_THRESHOLD_ENV,
    AnnotatorSettings,
)
from transcript_annotator.core import ConfigurationError, UnsupportedLanguageError


def test_defaults_from_empty_environment():
    settings = AnnotatorSettings.from_env({})

    assert settings.languages == ("en_us", "en_uk", "pt_PT")
    assert settings.default_language == "en_us"
    assert settings.dictionary_dir is None
    assert (settings.phrase_threshold, settings.verse_threshold) == (0.5, 1.0)


def test_values_from_environment(tmp_path):
    settings = AnnotatorSettings.from_env(
        {
            LANGUAGES_ENV: "pt_PT, en_uk, pt_PT",
            DICTIONARY_DIR_ENV: str(tmp_path),
            PHRASE_THRESHOLD_ENV: "0.3",
            VERSE_THRESHOLD_ENV: "0.9",
        }
    )

    assert settings.languages == ("pt_PT", "en_uk")
    assert settings.default_language == "pt_PT"
    assert settings.dictionary_dir == Path(tmp_path)
    assert (settings.phrase_threshold, settings.verse_threshold) == (0.3, 0.9)


def test_explicit_default_language():
    settings = AnnotatorSettings.from_env({LANGUAGES_ENV: "en_us,en_uk", DEFAULT_LANGUAGE_ENV: "en_uk"})

    assert settings.default_language == "en_uk"


def test_default_language_must_be_loaded():
    with pytest.raises(ConfigurationError):
        AnnotatorSettings.from_env({LANGUAGES_ENV: "en_us", DEFAULT_LANGUAGE_ENV: "pt_PT"})


def test_unknown_language_is_rejected():
    with pytest.raises(UnsupportedLanguageError):
        AnnotatorSettings.from_env({LANGUAGES_ENV: "en_us,xx_XX"})


def test_non_numeric_threshold_is_rejected():
    with pytest.raises(ConfigurationError) as excinfo:
        AnnotatorSettings.from_env({PHRASE_THRESHOLD_ENV: "soon"})

    assert PHRASE_THRESHOLD_ENV in str(excinfo.value)


def test_inverted_thresholds_are_rejected():
    with pytest.raises(ConfigurationError):
        AnnotatorSettings(phrase_threshold=2.0, verse_threshold=1.0)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv(LANGUAGES_ENV, "en_uk")

    assert AnnotatorSettings.from_env().languages == ("en_uk",)
