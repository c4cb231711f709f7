"""Dataclasses describing timing results and annotated transcripts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

KIND_RHYME = "rhyme"
KIND_SLANG = "slang"
KIND_PHRASE = "phrase"
KIND_VERSE = "verse"

SEGMENT_KINDS: Tuple[str, ...] = (KIND_PHRASE, KIND_VERSE)
ANNOTATION_KINDS: Tuple[str, ...] = (KIND_RHYME, KIND_SLANG, KIND_PHRASE, KIND_VERSE)

NOT_FOUND = -1


@dataclass(frozen=True)
class WordTiming:
    """One word of a timing result, positioned by ``index``."""

    word: str
    start: float
    end: float
    index: int


@dataclass
class RhymeGroup:
    """Words sharing a last syllable; ``members[0]`` is the representative."""

    group_id: int
    members: List[str] = field(default_factory=list)

    @property
    def representative(self) -> str:
        return self.members[0] if self.members else ""


@dataclass(frozen=True)
class SegmentRecord:
    """A phrase or verse spanning ``first_word_index``..``last_word_index``."""

    text: str
    start: float
    end: float
    kind: str
    first_word_index: int
    last_word_index: int
    duration: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "type": self.kind,
            "firstWordIndex": self.first_word_index,
            "lastWordIndex": self.last_word_index,
            "duration": self.duration,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SegmentRecord":
        kind = str(data["type"])
        if kind not in SEGMENT_KINDS:
            raise ValueError(f"Unknown segment type: {kind!r}")
        return cls(
            text=str(data["text"]),
            start=float(data["start"]),
            end=float(data["end"]),
            kind=kind,
            first_word_index=int(data["firstWordIndex"]),
            last_word_index=int(data["lastWordIndex"]),
            duration=float(data["duration"]),
        )


@dataclass(frozen=True)
class TimingResult:
    """Per-word timing plus the segments derived from it."""

    words: Tuple[WordTiming, ...] = ()
    segments: Tuple[SegmentRecord, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.words and not self.segments

    def timing_for(self, index: int) -> Tuple[float, float]:
        """Return ``(start, end)`` for the word at ``index`` or ``(0.0, 0.0)``."""

        if 0 <= index < len(self.words):
            entry = self.words[index]
            return entry.start, entry.end
        return 0.0, 0.0


@dataclass(frozen=True)
class WordRecord:
    """A transcript word with timing, text offsets and lexical flags."""

    text: str
    start: float
    end: float
    index: int
    start_offset: int
    end_offset: int
    rhyme_group_id: Optional[int] = None
    is_slang: bool = False

    @property
    def located(self) -> bool:
        return self.start_offset != NOT_FOUND

    def as_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "index": self.index,
            "startIndex": self.start_offset,
            "endIndex": self.end_offset,
            "rhymeGroupId": self.rhyme_group_id,
            "isSlang": self.is_slang,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WordRecord":
        group_id = data.get("rhymeGroupId")
        return cls(
            text=str(data["text"]),
            start=float(data["start"]),
            end=float(data["end"]),
            index=int(data["index"]),
            start_offset=int(data["startIndex"]),
            end_offset=int(data["endIndex"]),
            rhyme_group_id=int(group_id) if group_id is not None else None,
            is_slang=bool(data.get("isSlang", False)),
        )


# Annotation payloads -------------------------------------------------------


@dataclass(frozen=True)
class RhymePayload:
    group_id: int

    def as_dict(self) -> Dict[str, Any]:
        return {"groupId": self.group_id}


@dataclass(frozen=True)
class SlangPayload:
    def as_dict(self) -> Dict[str, Any]:
        return {}


@dataclass(frozen=True)
class SegmentPayload:
    start: float
    end: float
    duration: float

    def as_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end, "duration": self.duration}


AnnotationPayload = Union[RhymePayload, SlangPayload, SegmentPayload]


def _payload_from_dict(kind: str, data: Mapping[str, Any]) -> AnnotationPayload:
    if kind == KIND_RHYME:
        return RhymePayload(group_id=int(data["groupId"]))
    if kind == KIND_SLANG:
        return SlangPayload()
    if kind in SEGMENT_KINDS:
        return SegmentPayload(
            start=float(data["start"]),
            end=float(data["end"]),
            duration=float(data["duration"]),
        )
    raise ValueError(f"Unknown annotation type: {kind!r}")


@dataclass(frozen=True)
class Annotation:
    """A character span of the transcript tagged with a kind and payload."""

    start: int
    end: int
    kind: str
    payload: AnnotationPayload

    def as_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "type": self.kind,
            "data": self.payload.as_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Annotation":
        kind = str(data["type"])
        return cls(
            start=int(data["start"]),
            end=int(data["end"]),
            kind=kind,
            payload=_payload_from_dict(kind, data.get("data") or {}),
        )


@dataclass(frozen=True)
class AnnotatedTranscript:
    """Aggregate of words, segments and annotations for one transcription."""

    text: str
    language: str
    words: Tuple[WordRecord, ...] = ()
    segments: Tuple[SegmentRecord, ...] = ()
    annotations: Tuple[Annotation, ...] = ()

    @classmethod
    def empty(cls, language: str) -> "AnnotatedTranscript":
        return cls(text="", language=language)

    def sorted_annotations(self) -> List[Annotation]:
        """Annotations ordered by start offset, then end offset."""

        return sorted(self.annotations, key=lambda item: (item.start, item.end))

    def annotations_of_kind(self, kind: str) -> List[Annotation]:
        return [annotation for annotation in self.annotations if annotation.kind == kind]

    def rhyme_groups(self) -> Dict[int, List[str]]:
        """Group id to member word texts, in transcript order."""

        grouped: Dict[int, List[str]] = {}
        for word in self.words:
            if word.rhyme_group_id is not None:
                grouped.setdefault(word.rhyme_group_id, []).append(word.text)
        return grouped

    def as_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "language": self.language,
            "words": [word.as_dict() for word in self.words],
            "segments": [segment.as_dict() for segment in self.segments],
            "annotations": [annotation.as_dict() for annotation in self.annotations],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnnotatedTranscript":
        return cls(
            text=str(data.get("text") or ""),
            language=str(data["language"]),
            words=tuple(WordRecord.from_dict(item) for item in data.get("words") or ()),
            segments=tuple(
                SegmentRecord.from_dict(item) for item in data.get("segments") or ()
            ),
            annotations=tuple(
                Annotation.from_dict(item) for item in data.get("annotations") or ()
            ),
        )

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.as_dict(), ensure_ascii=False, **kwargs)

    @classmethod
    def from_json(cls, payload: str) -> "AnnotatedTranscript":
        return cls.from_dict(json.loads(payload))


__all__ = [
    "KIND_RHYME",
    "KIND_SLANG",
    "KIND_PHRASE",
    "KIND_VERSE",
    "SEGMENT_KINDS",
    "ANNOTATION_KINDS",
    "NOT_FOUND",
    "WordTiming",
    "RhymeGroup",
    "SegmentRecord",
    "TimingResult",
    "WordRecord",
    "RhymePayload",
    "SlangPayload",
    "SegmentPayload",
    "AnnotationPayload",
    "Annotation",
    "AnnotatedTranscript",
]
