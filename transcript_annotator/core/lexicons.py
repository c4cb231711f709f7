"""The lexicon service injected into the annotation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .errors import LexiconNotLoadedError
from .phonetic_lexicon import PhoneticLexicon
from .slang_lexicon import SlangLexicon


@dataclass(frozen=True)
class LexiconService:
    """Phonetic and slang lexicons loaded once and shared read-only."""

    phonetic: PhoneticLexicon = field(default_factory=PhoneticLexicon)
    slang: SlangLexicon = field(default_factory=SlangLexicon)

    @property
    def languages(self) -> Tuple[str, ...]:
        """Languages with both a phonetic and a slang lexicon."""

        return tuple(
            language
            for language in self.phonetic.languages
            if self.slang.is_loaded(language)
        )

    def require(self, language: str) -> str:
        """Return ``language`` if both lexicons hold it, else raise."""

        if not self.phonetic.is_loaded(language):
            raise LexiconNotLoadedError(language, "phonetic")
        if not self.slang.is_loaded(language):
            raise LexiconNotLoadedError(language, "slang")
        return language


__all__ = ["LexiconService"]
