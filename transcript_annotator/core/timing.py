"""Phrase and verse segmentation of timed word streams."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence, Union

from .engine_output import RecognitionOutput
from .errors import ConfigurationError
from .models import KIND_PHRASE, KIND_VERSE, SegmentRecord, TimingResult, WordTiming

DEFAULT_PHRASE_THRESHOLD = 0.5
DEFAULT_VERSE_THRESHOLD = 1.0

PHRASE_PUNCTUATION = ".,;:"
VERSE_PUNCTUATION = "!?"

# Absorbs binary rounding of decimal timestamps, e.g. 0.7 - 0.2 < 0.5.
PAUSE_TOLERANCE = 1e-9

TimedWord = Union[WordTiming, Mapping[str, Any]]


def validate_thresholds(phrase_threshold: float, verse_threshold: float) -> None:
    if phrase_threshold < 0 or verse_threshold < 0:
        raise ConfigurationError("Pause thresholds must be non-negative")
    if phrase_threshold > verse_threshold:
        raise ConfigurationError(
            f"Phrase threshold {phrase_threshold} exceeds verse threshold {verse_threshold}"
        )


def _build_segment(
    words: List[str],
    start: float,
    end: float,
    kind: str,
    first_word_index: int,
) -> SegmentRecord:
    return SegmentRecord(
        text=" ".join(words),
        start=start,
        end=end,
        kind=kind,
        first_word_index=first_word_index,
        last_word_index=first_word_index + len(words) - 1,
        duration=end - start,
    )


def _coerce_word(entry: TimedWord, index: int) -> WordTiming:
    if isinstance(entry, WordTiming):
        return WordTiming(word=entry.word, start=entry.start, end=entry.end, index=index)
    return WordTiming(
        word=str(entry["word"]),
        start=float(entry["start"]),
        end=float(entry["end"]),
        index=index,
    )


class TimingSegmenter(ABC):
    """Strategy interface turning recognition output into timed segments."""

    mode = "abstract"

    def __init__(
        self,
        phrase_threshold: float = DEFAULT_PHRASE_THRESHOLD,
        verse_threshold: float = DEFAULT_VERSE_THRESHOLD,
    ) -> None:
        validate_thresholds(phrase_threshold, verse_threshold)
        self.phrase_threshold = float(phrase_threshold)
        self.verse_threshold = float(verse_threshold)

    @abstractmethod
    def analyze(self, output: RecognitionOutput) -> TimingResult:
        """Return word timing and segments for ``output``."""


class PauseTimingSegmenter(TimingSegmenter):
    """Split at silences between consecutive words.

    A gap of at least ``verse_threshold`` closes the open segment as a verse,
    a gap of at least ``phrase_threshold`` closes it as a phrase.  The final
    segment is always closed as a phrase.
    """

    mode = "pause"

    def analyze(self, output: RecognitionOutput) -> TimingResult:
        return self.segment(output.timings)

    def segment(self, words: Sequence[TimedWord]) -> TimingResult:
        processed = [_coerce_word(entry, index) for index, entry in enumerate(words)]
        if not processed:
            return TimingResult()

        segments: List[SegmentRecord] = []
        current_words: List[str] = [processed[0].word]
        current_start = processed[0].start
        current_first = 0
        previous_end = processed[0].end

        for entry in processed[1:]:
            pause = entry.start - previous_end
            if pause >= self.verse_threshold - PAUSE_TOLERANCE:
                kind: Optional[str] = KIND_VERSE
            elif pause >= self.phrase_threshold - PAUSE_TOLERANCE:
                kind = KIND_PHRASE
            else:
                kind = None

            if kind is None:
                current_words.append(entry.word)
            else:
                segments.append(
                    _build_segment(current_words, current_start, previous_end, kind, current_first)
                )
                current_words = [entry.word]
                current_start = entry.start
                current_first = entry.index
            previous_end = entry.end

        segments.append(
            _build_segment(current_words, current_start, previous_end, KIND_PHRASE, current_first)
        )
        return TimingResult(words=tuple(processed), segments=tuple(segments))


class EstimatedTimingSegmenter(TimingSegmenter):
    """Approximate timing for engines that only report text and duration.

    Word durations are spread over the total duration in proportion to word
    length, and boundaries come from punctuation: ``. , ; :`` end a phrase,
    ``! ?`` (or a full stop before a capitalised word) end a verse.  The
    pause thresholds are accepted for interface parity but unused.
    """

    mode = "estimated"

    def analyze(self, output: RecognitionOutput) -> TimingResult:
        if output.total_duration is None:
            return TimingResult()
        return self.estimate(output.text, output.total_duration)

    def estimate(self, text: str, total_duration: float) -> TimingResult:
        if total_duration < 0:
            raise ConfigurationError("Total duration must be non-negative")

        tokens = text.split()
        if not tokens:
            return TimingResult()

        average = total_duration / len(tokens)
        processed: List[WordTiming] = []
        clock = 0.0
        for index, token in enumerate(tokens):
            duration = average * (0.5 + len(token) / 5)
            processed.append(WordTiming(word=token, start=clock, end=clock + duration, index=index))
            clock += duration

        segments: List[SegmentRecord] = []
        current_words: List[str] = []
        current_start = 0.0
        current_first = 0
        last_index = len(processed) - 1

        for entry in processed:
            word = entry.word
            if not current_words:
                current_start = entry.start
                current_first = entry.index
            current_words.append(word)

            is_phrase_boundary = any(mark in word for mark in PHRASE_PUNCTUATION)
            is_verse_boundary = any(mark in word for mark in VERSE_PUNCTUATION) or (
                "." in word
                and entry.index < last_index
                and processed[entry.index + 1].word[:1].isupper()
            )

            if is_verse_boundary or is_phrase_boundary or entry.index == last_index:
                kind = KIND_VERSE if is_verse_boundary else KIND_PHRASE
                segments.append(
                    _build_segment(current_words, current_start, entry.end, kind, current_first)
                )
                current_words = []

        return TimingResult(words=tuple(processed), segments=tuple(segments))


def segment(
    words: Sequence[TimedWord],
    phrase_threshold: float = DEFAULT_PHRASE_THRESHOLD,
    verse_threshold: float = DEFAULT_VERSE_THRESHOLD,
) -> TimingResult:
    """Segment timed ``words`` by pauses."""

    return PauseTimingSegmenter(phrase_threshold, verse_threshold).segment(words)


def estimate_timing(text: str, total_duration: float) -> TimingResult:
    """Estimate timing and punctuation segments for untimed ``text``."""

    return EstimatedTimingSegmenter().estimate(text, total_duration)


def select_segmenter(
    output: RecognitionOutput,
    phrase_threshold: float = DEFAULT_PHRASE_THRESHOLD,
    verse_threshold: float = DEFAULT_VERSE_THRESHOLD,
) -> Optional[TimingSegmenter]:
    """Pick the strategy matching the timing data ``output`` carries."""

    if output.has_word_timing:
        return PauseTimingSegmenter(phrase_threshold, verse_threshold)
    if output.total_duration is not None and output.text:
        return EstimatedTimingSegmenter(phrase_threshold, verse_threshold)
    return None


__all__ = [
    "DEFAULT_PHRASE_THRESHOLD",
    "DEFAULT_VERSE_THRESHOLD",
    "TimingSegmenter",
    "PauseTimingSegmenter",
    "EstimatedTimingSegmenter",
    "segment",
    "estimate_timing",
    "select_segmenter",
    "validate_thresholds",
]
