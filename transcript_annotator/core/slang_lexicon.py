"""Per-language slang sets with exact, case-insensitive matching."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from .errors import LexiconNotLoadedError


class SlangLexicon:
    """Immutable slang term sets keyed by language code."""

    def __init__(self, slang_sets: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        sets: Dict[str, FrozenSet[str]] = {}
        for language, terms in (slang_sets or {}).items():
            sets[language] = frozenset(
                term.strip().lower() for term in terms if term and term.strip()
            )
        self._sets: Mapping[str, FrozenSet[str]] = MappingProxyType(sets)

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self._sets)

    def is_loaded(self, language: str) -> bool:
        return language in self._sets

    def terms(self, language: str) -> FrozenSet[str]:
        terms = self._sets.get(language)
        if terms is None:
            raise LexiconNotLoadedError(language, "slang")
        return terms

    def is_slang(self, word: str, language: str) -> bool:
        return (word or "").lower() in self.terms(language)

    def find_slang_words(self, words: Sequence[str], language: str) -> List[str]:
        """Return the slang entries of ``words`` in their original order."""

        terms = self.terms(language)
        return [word for word in words if (word or "").lower() in terms]

    def detect_slang(self, words: Sequence[str], language: str) -> Dict[int, bool]:
        """Map the index of every slang word in ``words`` to ``True``."""

        terms = self.terms(language)
        return {
            index: True
            for index, word in enumerate(words)
            if (word or "").lower() in terms
        }


__all__ = ["SlangLexicon"]
