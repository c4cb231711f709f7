"""Per-language pronunciation lookups and last-syllable rhyme matching."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .errors import LexiconNotLoadedError
from .languages import is_english_family

VOWEL_PHONEMES: Set[str] = {
    "AA",
    "AE",
    "AH",
    "AO",
    "AW",
    "AY",
    "EH",
    "ER",
    "EY",
    "IH",
    "IY",
    "OW",
    "OY",
    "UH",
    "UW",
}

_STRESS_SUFFIX_PATTERN = re.compile(r"[012]$")


def _strip_stress(phoneme: str) -> str:
    return _STRESS_SUFFIX_PATTERN.sub("", phoneme)


def normalize_pronunciation(phones: Iterable[str] | str) -> str:
    """Collapse ``phones`` into a single-space separated pronunciation."""

    tokens = phones.split() if isinstance(phones, str) else phones
    return " ".join(token.strip() for token in tokens if token and token.strip())


class PhoneticLexicon:
    """Read-only word → pronunciation tables keyed by language code.

    A language present in the lexicon may still map no words (for instance
    when its asset could not be read).  Lookups for such a language return
    empty pronunciations, while lookups for a language that was never handed
    to the constructor raise :class:`LexiconNotLoadedError`.
    """

    def __init__(self, dictionaries: Optional[Mapping[str, Mapping[str, str]]] = None) -> None:
        tables: Dict[str, Mapping[str, str]] = {}
        for language, entries in (dictionaries or {}).items():
            table = {
                str(word).lower(): normalize_pronunciation(pronunciation)
                for word, pronunciation in entries.items()
                if word
            }
            tables[language] = MappingProxyType(table)
        self._tables: Mapping[str, Mapping[str, str]] = MappingProxyType(tables)

    # Introspection ---------------------------------------------------------
    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self._tables)

    def is_loaded(self, language: str) -> bool:
        return language in self._tables

    def size(self, language: str) -> int:
        return len(self._table(language))

    def _table(self, language: str) -> Mapping[str, str]:
        table = self._tables.get(language)
        if table is None:
            raise LexiconNotLoadedError(language, "phonetic")
        return table

    # Lookups ---------------------------------------------------------------
    def get_pronunciation(self, word: str, language: str) -> str:
        """Return the pronunciation of ``word`` or ``""`` when unknown."""

        table = self._table(language)
        return table.get((word or "").lower(), "")

    def get_last_syllable(self, pronunciation: str, language: str) -> str:
        """Return the phoneme group compared when deciding rhymes.

        English lexicons use ARPABET: the result runs from the last vowel
        phoneme (stress digit kept) to the end, or is the final phoneme when
        the pronunciation has no vowel.  Other languages take the final two
        phonemes.
        """

        parts = pronunciation.split()
        if not parts:
            return ""

        if is_english_family(language):
            for index in range(len(parts) - 1, -1, -1):
                if _strip_stress(parts[index]) in VOWEL_PHONEMES:
                    return " ".join(parts[index:])
            return parts[-1]

        return " ".join(parts[-2:])

    def rhyme_key(self, word: str, language: str) -> str:
        """Last syllable of ``word``'s pronunciation, ``""`` when unknown."""

        pronunciation = self.get_pronunciation(word, language)
        if not pronunciation:
            return ""
        return self.get_last_syllable(pronunciation, language)

    def rhymes(self, word1: str, word2: str, language: str) -> bool:
        """Return whether both words are known and share a last syllable."""

        first = self.rhyme_key(word1, language)
        if not first:
            return False
        return first == self.rhyme_key(word2, language)

    def find_rhymes(self, word: str, candidates: Iterable[str], language: str) -> List[str]:
        """Return the ``candidates`` that rhyme with ``word``, in input order."""

        target = self.rhyme_key(word, language)
        if not target:
            return []

        normalized = word.lower()
        matches: List[str] = []
        for candidate in candidates:
            if candidate.lower() == normalized:
                continue
            if self.rhyme_key(candidate, language) == target:
                matches.append(candidate)
        return matches


__all__ = ["PhoneticLexicon", "VOWEL_PHONEMES", "normalize_pronunciation"]
