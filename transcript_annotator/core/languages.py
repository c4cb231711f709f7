"""Supported language codes and their phonetic families."""

from __future__ import annotations

from typing import Iterable, Tuple

from .errors import UnsupportedLanguageError

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en_us", "en_uk", "pt_PT")
DEFAULT_LANGUAGE = "en_us"


def is_english_family(language: str) -> bool:
    """Return ``True`` for languages whose lexicons use CMU ARPABET phonemes."""

    return language.startswith("en")


def validate_language(language: str) -> str:
    """Return ``language`` unchanged or raise :class:`UnsupportedLanguageError`."""

    if language not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(language, SUPPORTED_LANGUAGES)
    return language


def validate_languages(languages: Iterable[str]) -> Tuple[str, ...]:
    """Validate ``languages`` and drop duplicates while keeping their order."""

    ordered: list[str] = []
    for language in languages:
        validate_language(language)
        if language not in ordered:
            ordered.append(language)
    return tuple(ordered)


__all__ = [
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "is_english_family",
    "validate_language",
    "validate_languages",
]
