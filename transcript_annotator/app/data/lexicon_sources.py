"""Loading pronunciation dictionaries and slang lists into a lexicon service."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Iterator, Mapping, Optional, Set, Tuple

import pronouncing

from transcript_annotator.core.languages import (
    SUPPORTED_LANGUAGES,
    is_english_family,
    validate_languages,
)
from transcript_annotator.core.lexicons import LexiconService
from transcript_annotator.core.phonetic_lexicon import PhoneticLexicon, normalize_pronunciation
from transcript_annotator.core.slang_lexicon import SlangLexicon
from transcript_annotator.utils.observability import get_logger, start_span

from .slang_terms import BUILTIN_SLANG

_WORD_VARIANT_PATTERN = re.compile(r"\(\d+\)$")

ENGLISH_DICTIONARY_FILE = "cmudict.dict"
PORTUGUESE_DICTIONARY_FILE = "ptdict.dict"
SLANG_FILE = "slang.txt"


def dictionary_filename(language: str) -> str:
    return ENGLISH_DICTIONARY_FILE if is_english_family(language) else PORTUGUESE_DICTIONARY_FILE


def iter_dictionary_entries(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yield ``(word, pronunciation)`` pairs from CMU-style dictionary lines.

    Comment lines (``;;;``) and blank lines are skipped.  Alternate
    pronunciations such as ``read(2)`` are skipped as well, so every word
    keeps its primary pronunciation.
    """

    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith(";;;"):
            continue

        parts = entry.split(maxsplit=1)
        if len(parts) < 2:
            continue

        raw_word, phones = parts
        if _WORD_VARIANT_PATTERN.search(raw_word):
            continue

        pronunciation = normalize_pronunciation(phones)
        if pronunciation:
            yield raw_word.lower(), pronunciation


@lru_cache(maxsize=1)
def bundled_cmu_dictionary() -> Mapping[str, str]:
    """Primary pronunciations from the CMU dictionary shipped with ``pronouncing``."""

    pronouncing.init_cmu()
    table: Dict[str, str] = {}
    for word, phones in pronouncing.pronunciations:
        table.setdefault(word.lower(), normalize_pronunciation(phones))
    return table


class LexiconAssetLoader:
    """Read lexicon assets for each language and build a :class:`LexiconService`.

    Assets live under ``asset_dir/<language>/``: ``cmudict.dict`` for English
    variants, ``ptdict.dict`` for Portuguese and an optional ``slang.txt``
    (one term per line) that extends the built-in slang list.  English falls
    back to the CMU dictionary bundled with :mod:`pronouncing` when no file is
    present.
    """

    def __init__(
        self,
        asset_dir: Optional[Path | str] = None,
        *,
        use_bundled_cmu: bool = True,
    ) -> None:
        self.asset_dir: Optional[Path] = Path(asset_dir) if asset_dir else None
        self.use_bundled_cmu = use_bundled_cmu
        self._logger = get_logger(__name__).bind(component="lexicon_loader")

    def _asset_path(self, language: str, filename: str) -> Optional[Path]:
        if self.asset_dir is None:
            return None
        return self.asset_dir / language / filename

    def _read_lines(self, path: Path, language: str) -> Optional[list[str]]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                return handle.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.warning(
                "Lexicon asset could not be read",
                context={"language": language, "path": str(path), "error": str(exc)},
            )
            return None

    def load_pronunciations(self, language: str) -> Dict[str, str]:
        """Return the pronunciation table for ``language`` (possibly empty)."""

        path = self._asset_path(language, dictionary_filename(language))
        if path is not None and path.exists():
            lines = self._read_lines(path, language)
            if lines is None:
                return {}
            table: Dict[str, str] = {}
            for word, pronunciation in iter_dictionary_entries(lines):
                table.setdefault(word, pronunciation)
            return table

        if is_english_family(language) and self.use_bundled_cmu:
            return dict(bundled_cmu_dictionary())

        self._logger.warning(
            "No pronunciation dictionary available",
            context={"language": language, "path": str(path) if path else None},
        )
        return {}

    def load_slang(self, language: str) -> Set[str]:
        """Return the built-in slang terms for ``language`` plus any asset terms."""

        terms: Set[str] = set(BUILTIN_SLANG.get(language, ()))
        path = self._asset_path(language, SLANG_FILE)
        if path is not None and path.exists():
            lines = self._read_lines(path, language) or []
            for line in lines:
                term = line.strip().lower()
                if term and not term.startswith("#"):
                    terms.add(term)
        return terms

    def initialize_lexicons(
        self,
        languages: Iterable[str] = SUPPORTED_LANGUAGES,
    ) -> LexiconService:
        """Load every requested language and return the shared service."""

        selected = validate_languages(languages)
        pronunciations: Dict[str, Dict[str, str]] = {}
        slang: Dict[str, Set[str]] = {}

        with start_span("lexicons.initialize", {"languages": ",".join(selected)}):
            for language in selected:
                pronunciations[language] = self.load_pronunciations(language)
                slang[language] = self.load_slang(language)
                self._logger.info(
                    "Lexicons loaded",
                    context={
                        "language": language,
                        "pronunciations": len(pronunciations[language]),
                        "slang_terms": len(slang[language]),
                    },
                )

        return LexiconService(
            phonetic=PhoneticLexicon(pronunciations),
            slang=SlangLexicon(slang),
        )


__all__ = [
    "LexiconAssetLoader",
    "bundled_cmu_dictionary",
    "dictionary_filename",
    "iter_dictionary_entries",
]
