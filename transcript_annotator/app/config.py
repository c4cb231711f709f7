"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from transcript_annotator.core.languages import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    validate_language,
    validate_languages,
)
from transcript_annotator.core.timing import (
    DEFAULT_PHRASE_THRESHOLD,
    DEFAULT_VERSE_THRESHOLD,
    validate_thresholds,
)
from transcript_annotator.core.errors import ConfigurationError

ENV_PREFIX = "TRANSCRIPT_ANNOTATOR_"
LANGUAGES_ENV = f"{ENV_PREFIX}LANGUAGES"
DEFAULT_LANGUAGE_ENV = f"{ENV_PREFIX}DEFAULT_LANGUAGE"
DICTIONARY_DIR_ENV = f"{ENV_PREFIX}DICTIONARY_DIR"
PHRASE_THRESHOLD_ENV = f"{ENV_PREFIX}PHRASE_THRESHOLD"
VERSE_THRESHOLD_ENV = f"{ENV_PREFIX}VERSE_THRESHOLD"


def _parse_languages(value: Optional[str]) -> Tuple[str, ...]:
    if not value or not value.strip():
        return SUPPORTED_LANGUAGES
    parsed = tuple(part.strip() for part in value.split(",") if part.strip())
    return parsed or SUPPORTED_LANGUAGES


def _parse_float(name: str, value: Optional[str], default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class AnnotatorSettings:
    """Languages, asset location and pause thresholds for the annotator."""

    languages: Tuple[str, ...] = SUPPORTED_LANGUAGES
    default_language: str = DEFAULT_LANGUAGE
    dictionary_dir: Optional[Path] = None
    phrase_threshold: float = DEFAULT_PHRASE_THRESHOLD
    verse_threshold: float = DEFAULT_VERSE_THRESHOLD

    def __post_init__(self) -> None:
        object.__setattr__(self, "languages", validate_languages(self.languages))
        validate_language(self.default_language)
        if self.default_language not in self.languages:
            raise ConfigurationError(
                f"Default language {self.default_language!r} is not among the "
                f"loaded languages {list(self.languages)}"
            )
        validate_thresholds(self.phrase_threshold, self.verse_threshold)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AnnotatorSettings":
        env = os.environ if environ is None else environ
        languages = _parse_languages(env.get(LANGUAGES_ENV))
        default_language = (env.get(DEFAULT_LANGUAGE_ENV) or "").strip()
        if not default_language:
            default_language = DEFAULT_LANGUAGE if DEFAULT_LANGUAGE in languages else languages[0]
        dictionary_dir = (env.get(DICTIONARY_DIR_ENV) or "").strip()
        return cls(
            languages=languages,
            default_language=default_language,
            dictionary_dir=Path(dictionary_dir) if dictionary_dir else None,
            phrase_threshold=_parse_float(
                PHRASE_THRESHOLD_ENV, env.get(PHRASE_THRESHOLD_ENV), DEFAULT_PHRASE_THRESHOLD
            ),
            verse_threshold=_parse_float(
                VERSE_THRESHOLD_ENV, env.get(VERSE_THRESHOLD_ENV), DEFAULT_VERSE_THRESHOLD
            ),
        )


__all__ = [
    "AnnotatorSettings",
    "LANGUAGES_ENV",
    "DEFAULT_LANGUAGE_ENV",
    "DICTIONARY_DIR_ENV",
    "PHRASE_THRESHOLD_ENV",
    "VERSE_THRESHOLD_ENV",
]
