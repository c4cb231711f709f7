"""Core annotation pipeline: lexicons, rhyme grouping, timing and assembly."""

from .assembler import AnnotationAssembler, locate_words
from .engine_output import RecognitionOutput, parse_engine_output
from .errors import ConfigurationError, LexiconNotLoadedError, UnsupportedLanguageError
from .languages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, is_english_family
from .lexicons import LexiconService
from .models import (
    AnnotatedTranscript,
    Annotation,
    RhymeGroup,
    RhymePayload,
    SegmentPayload,
    SegmentRecord,
    SlangPayload,
    TimingResult,
    WordRecord,
    WordTiming,
)
from .phonetic_lexicon import VOWEL_PHONEMES, PhoneticLexicon
from .rhyme_grouper import RhymeGrouper
from .slang_lexicon import SlangLexicon
from .timing import (
    EstimatedTimingSegmenter,
    PauseTimingSegmenter,
    TimingSegmenter,
    estimate_timing,
    segment,
    select_segmenter,
)

__all__ = [
    "AnnotationAssembler",
    "locate_words",
    "RecognitionOutput",
    "parse_engine_output",
    "ConfigurationError",
    "LexiconNotLoadedError",
    "UnsupportedLanguageError",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "is_english_family",
    "LexiconService",
    "AnnotatedTranscript",
    "Annotation",
    "RhymeGroup",
    "RhymePayload",
    "SegmentPayload",
    "SegmentRecord",
    "SlangPayload",
    "TimingResult",
    "WordRecord",
    "WordTiming",
    "VOWEL_PHONEMES",
    "PhoneticLexicon",
    "RhymeGrouper",
    "SlangLexicon",
    "EstimatedTimingSegmenter",
    "PauseTimingSegmenter",
    "TimingSegmenter",
    "estimate_timing",
    "segment",
    "select_segmenter",
]
