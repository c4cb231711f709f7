"""Merge word timing, rhyme groups, slang flags and segments into one transcript."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from transcript_annotator.utils.observability import get_logger

from .models import (
    KIND_RHYME,
    KIND_SLANG,
    NOT_FOUND,
    AnnotatedTranscript,
    Annotation,
    RhymePayload,
    SegmentPayload,
    SegmentRecord,
    SlangPayload,
    TimingResult,
    WordRecord,
)


def locate_words(text: str, words: Sequence[str]) -> List[Tuple[int, int]]:
    """Return ``(start, end)`` character offsets for each word in ``text``.

    Each search starts where the previous match ended, so offsets never move
    backwards even when a word repeats.  A word that cannot be found gets
    ``(-1, -1)`` and leaves the search position unchanged.
    """

    spans: List[Tuple[int, int]] = []
    cursor = 0
    for word in words:
        start = text.find(word, cursor) if word else NOT_FOUND
        if start == NOT_FOUND:
            spans.append((NOT_FOUND, NOT_FOUND))
            continue
        end = start + len(word)
        spans.append((start, end))
        cursor = end
    return spans


class AnnotationAssembler:
    """Build an :class:`AnnotatedTranscript` from the pipeline's partial results."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__).bind(component="annotation_assembler")

    def assemble(
        self,
        text: str,
        words: Sequence[str],
        timing: Optional[TimingResult],
        rhyme_groups: Mapping[int, int],
        slang_flags: Mapping[int, bool],
        language: str,
    ) -> AnnotatedTranscript:
        timing = timing or TimingResult()
        spans = locate_words(text, words)

        records: List[WordRecord] = []
        for index, word in enumerate(words):
            start_offset, end_offset = spans[index]
            start, end = timing.timing_for(index)
            records.append(
                WordRecord(
                    text=word,
                    start=start,
                    end=end,
                    index=index,
                    start_offset=start_offset,
                    end_offset=end_offset,
                    rhyme_group_id=rhyme_groups.get(index),
                    is_slang=bool(slang_flags.get(index, False)),
                )
            )

        annotations: List[Annotation] = []
        for record in records:
            if record.rhyme_group_id is not None and record.located:
                annotations.append(
                    Annotation(
                        start=record.start_offset,
                        end=record.end_offset,
                        kind=KIND_RHYME,
                        payload=RhymePayload(group_id=record.rhyme_group_id),
                    )
                )

        for record in records:
            if record.is_slang and record.located:
                annotations.append(
                    Annotation(
                        start=record.start_offset,
                        end=record.end_offset,
                        kind=KIND_SLANG,
                        payload=SlangPayload(),
                    )
                )

        for segment in timing.segments:
            annotation = self._segment_annotation(segment, records)
            if annotation is not None:
                annotations.append(annotation)

        unresolved = sum(1 for record in records if not record.located)
        if unresolved:
            self._logger.warning(
                "Words could not be located in transcript text",
                context={"unresolved": unresolved, "words": len(records)},
            )

        return AnnotatedTranscript(
            text=text,
            language=language,
            words=tuple(records),
            segments=tuple(timing.segments),
            annotations=tuple(annotations),
        )

    @staticmethod
    def _segment_annotation(
        segment: SegmentRecord,
        records: Sequence[WordRecord],
    ) -> Optional[Annotation]:
        first, last = segment.first_word_index, segment.last_word_index
        if first < 0 or last >= len(records) or first > last:
            return None

        located = [record for record in records[first : last + 1] if record.located]
        if not located:
            return None

        return Annotation(
            start=located[0].start_offset,
            end=located[-1].end_offset,
            kind=segment.kind,
            payload=SegmentPayload(
                start=segment.start,
                end=segment.end,
                duration=segment.duration,
            ),
        )


__all__ = ["AnnotationAssembler", "locate_words"]
