"""Exception types raised by the annotation core.

Only configuration problems are raised.  Missing words, absent timing and
unreadable engine output degrade to empty or default values instead.
"""

from __future__ import annotations

from typing import Iterable


class ConfigurationError(Exception):
    """The caller asked for something the current setup cannot provide."""


class UnsupportedLanguageError(ConfigurationError):
    """A language code outside the supported set was requested."""

    def __init__(self, language: str, supported: Iterable[str]) -> None:
        self.language = language
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported language: {language!r}. "
            f"Supported languages are: {', '.join(self.supported)}"
        )


class LexiconNotLoadedError(ConfigurationError):
    """A lexicon lookup targeted a language that was never loaded."""

    def __init__(self, language: str, kind: str = "phonetic") -> None:
        self.language = language
        self.kind = kind
        super().__init__(
            f"{kind.capitalize()} lexicon for {language!r} not loaded; "
            "initialise the lexicons for this language first."
        )


__all__ = [
    "ConfigurationError",
    "UnsupportedLanguageError",
    "LexiconNotLoadedError",
]
