"""Data sources feeding the annotation pipeline."""

from .lexicon_sources import LexiconAssetLoader, bundled_cmu_dictionary
from .recognition import EngineDocument, RecognitionEngine
from .slang_terms import BUILTIN_SLANG

__all__ = [
    "LexiconAssetLoader",
    "bundled_cmu_dictionary",
    "EngineDocument",
    "RecognitionEngine",
    "BUILTIN_SLANG",
]
