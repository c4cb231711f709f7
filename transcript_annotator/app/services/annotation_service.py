"""Annotation service orchestrating parsing, lexical analysis, timing and assembly."""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

from transcript_annotator.core.assembler import AnnotationAssembler
from transcript_annotator.core.engine_output import RecognitionOutput, parse_engine_output
from transcript_annotator.core.languages import validate_language
from transcript_annotator.core.lexicons import LexiconService
from transcript_annotator.core.models import AnnotatedTranscript, RhymeGroup, TimingResult
from transcript_annotator.core.rhyme_grouper import RhymeGrouper
from transcript_annotator.core.timing import (
    DEFAULT_PHRASE_THRESHOLD,
    DEFAULT_VERSE_THRESHOLD,
    select_segmenter,
    validate_thresholds,
)

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

# Characters trimmed from a word before lexicon lookups; the word text kept in
# the transcript is never altered.
_LEXICAL_STRIP_CHARS = "\"'`.,;:!?()[]{}<>«»“”‘’…-–—"


def lexical_form(word: str) -> str:
    """Return ``word`` lowercased with surrounding punctuation removed."""

    return (word or "").strip(_LEXICAL_STRIP_CHARS).lower()


class AnnotationService:
    """Run the full post-recognition pipeline for one engine response.

    The service holds no per-call state: every :meth:`annotate` call creates
    its own rhyme grouper and timing strategy, and the language is always an
    explicit argument.
    """

    def __init__(
        self,
        lexicons: LexiconService,
        *,
        phrase_threshold: float = DEFAULT_PHRASE_THRESHOLD,
        verse_threshold: float = DEFAULT_VERSE_THRESHOLD,
        assembler: Optional[AnnotationAssembler] = None,
    ) -> None:
        validate_thresholds(phrase_threshold, verse_threshold)
        self.lexicons = lexicons
        self.phrase_threshold = float(phrase_threshold)
        self.verse_threshold = float(verse_threshold)
        self.assembler = assembler or AnnotationAssembler()

        self._logger = get_logger(__name__).bind(component="annotation_service")
        self._metric_requests = create_counter(
            "transcript_annotation_requests_total",
            "Total annotation requests received.",
        )
        self._metric_failures = create_counter(
            "transcript_annotation_failures_total",
            "Annotation requests that raised an exception.",
        )
        self._metric_malformed = create_counter(
            "transcript_annotation_malformed_inputs_total",
            "Engine responses discarded as malformed.",
        )
        self._metric_duration = create_histogram(
            "transcript_annotation_seconds",
            "Latency of annotation requests.",
        )
        self._metric_annotations = create_counter(
            "transcript_annotations_emitted_total",
            "Annotations emitted, by kind.",
            label_names=("kind",),
        )

        self._logger.info(
            "Annotation service initialised",
            context={
                "languages": list(lexicons.languages),
                "phrase_threshold": self.phrase_threshold,
                "verse_threshold": self.verse_threshold,
            },
        )

    # Pipeline stages ------------------------------------------------------
    def detect_rhymes(
        self,
        words: Sequence[str],
        language: str,
    ) -> Tuple[Dict[int, int], List[RhymeGroup]]:
        """Group rhyming words and assign every occurrence of a grouped word."""

        grouper = RhymeGrouper(self.lexicons.phonetic)
        lexical_words = [lexical_form(word) for word in words]
        grouper.detect_rhymes(lexical_words, language)
        return grouper.expand_assignments(lexical_words), grouper.groups

    def detect_slang(self, words: Sequence[str], language: str) -> Dict[int, bool]:
        return self.lexicons.slang.detect_slang(
            [lexical_form(word) for word in words], language
        )

    def analyze_timing(
        self,
        output: RecognitionOutput,
        *,
        phrase_threshold: Optional[float] = None,
        verse_threshold: Optional[float] = None,
    ) -> TimingResult:
        """Segment ``output`` with the strategy its timing data supports."""

        segmenter = select_segmenter(
            output,
            self.phrase_threshold if phrase_threshold is None else phrase_threshold,
            self.verse_threshold if verse_threshold is None else verse_threshold,
        )
        if segmenter is None:
            self._logger.debug(
                "No timing data available; skipping segmentation",
                context={"words": len(output.words)},
            )
            return TimingResult()
        return segmenter.analyze(output)

    # Public API ------------------------------------------------------------
    def annotate(
        self,
        raw_output: Any,
        language: str,
        *,
        total_duration: Optional[float] = None,
        detect_rhymes: bool = True,
        detect_slang: bool = True,
        analyze_timing: bool = True,
        phrase_threshold: Optional[float] = None,
        verse_threshold: Optional[float] = None,
    ) -> AnnotatedTranscript:
        """Parse ``raw_output`` and return the annotated transcript.

        ``total_duration`` enables estimated timing when the engine reports
        text without per-word timestamps.  Configuration problems (unknown or
        unloaded language, invalid thresholds) raise; malformed engine output
        yields an empty transcript.
        """

        self._metric_requests.inc()
        started = time.perf_counter()

        with start_span(
            "annotation.annotate",
            {"language": language, "total_duration": total_duration},
        ) as span:
            try:
                validate_language(language)
                self.lexicons.require(language)
                if phrase_threshold is not None or verse_threshold is not None:
                    validate_thresholds(
                        self.phrase_threshold if phrase_threshold is None else phrase_threshold,
                        self.verse_threshold if verse_threshold is None else verse_threshold,
                    )

                with start_span("annotation.parse"):
                    output = parse_engine_output(raw_output, total_duration=total_duration)
                if output.malformed:
                    self._metric_malformed.inc()
                    return AnnotatedTranscript.empty(language)

                result = self.annotate_output(
                    output,
                    language,
                    detect_rhymes=detect_rhymes,
                    detect_slang=detect_slang,
                    analyze_timing=analyze_timing,
                    phrase_threshold=phrase_threshold,
                    verse_threshold=verse_threshold,
                )
            except Exception as exc:
                self._metric_failures.inc()
                record_exception(span, exc)
                self._logger.error(
                    "Annotation failed",
                    context={"language": language, "error": str(exc)},
                )
                raise
            finally:
                self._metric_duration.observe(time.perf_counter() - started)

            add_span_attributes(
                span,
                {
                    "words": len(result.words),
                    "segments": len(result.segments),
                    "annotations": len(result.annotations),
                },
            )
            return result

    def annotate_output(
        self,
        output: RecognitionOutput,
        language: str,
        *,
        detect_rhymes: bool = True,
        detect_slang: bool = True,
        analyze_timing: bool = True,
        phrase_threshold: Optional[float] = None,
        verse_threshold: Optional[float] = None,
    ) -> AnnotatedTranscript:
        """Annotate an already parsed :class:`RecognitionOutput`."""

        if output.is_empty:
            return AnnotatedTranscript.empty(language)

        words = list(output.words)

        timing = TimingResult()
        if analyze_timing:
            with start_span("annotation.timing"):
                timing = self.analyze_timing(
                    output,
                    phrase_threshold=phrase_threshold,
                    verse_threshold=verse_threshold,
                )

        rhyme_assignments: Dict[int, int] = {}
        groups: List[RhymeGroup] = []
        if detect_rhymes:
            with start_span("annotation.rhymes"):
                rhyme_assignments, groups = self.detect_rhymes(words, language)

        slang_flags: Dict[int, bool] = {}
        if detect_slang:
            with start_span("annotation.slang"):
                slang_flags = self.detect_slang(words, language)

        with start_span("annotation.assemble"):
            transcript = self.assembler.assemble(
                output.text,
                words,
                timing,
                rhyme_assignments,
                slang_flags,
                language,
            )

        for annotation in transcript.annotations:
            self._metric_annotations.labels(kind=annotation.kind).inc()

        self._logger.info(
            "Transcript annotated",
            context={
                "language": language,
                "words": len(words),
                "segments": len(transcript.segments),
                "rhyme_groups": len(groups),
                "slang_words": len(slang_flags),
                "annotations": len(transcript.annotations),
            },
        )
        return transcript


__all__ = ["AnnotationService", "lexical_form"]
