"""Normalisation of speech-engine output into words and optional timing.

Engines deliver one of three shapes:

* ``{"result": [{"word", "start", "end"}, ...], "text": ...}`` with per-word
  timing (``"words"`` is accepted as an alias of ``"result"``),
* ``{"text": ...}`` with no timing at all, paired with a total duration
  supplied by the caller,
* a plain string that is not a JSON object or array (so ``"42"`` or
  ``"null"`` count as words), treated like the text-only shape.

Anything else yields an empty, ``malformed`` output rather than an exception
so a single bad engine response never breaks assembly.
"""

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from transcript_annotator.utils.observability import get_logger

from .models import WordTiming

_logger = get_logger(__name__).bind(component="engine_output")


class MalformedEngineOutput(ValueError):
    """Raised internally when an engine document has the wrong structure."""


@dataclass(frozen=True)
class RecognitionOutput:
    """Transcript text, its word list and any per-word timing."""

    text: str = ""
    words: Tuple[str, ...] = ()
    timings: Tuple[WordTiming, ...] = ()
    total_duration: Optional[float] = None
    malformed: bool = False

    @property
    def has_word_timing(self) -> bool:
        return bool(self.timings)

    @property
    def is_empty(self) -> bool:
        return not self.words and not self.text


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _parse_entries(entries: Any) -> Tuple[List[str], List[WordTiming]]:
    if not isinstance(entries, list):
        raise MalformedEngineOutput("word entries must be a list")

    words: List[str] = []
    timings: List[WordTiming] = []
    timed_entries = 0

    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise MalformedEngineOutput(f"entry {index} is not an object")
        word = entry.get("word")
        if not isinstance(word, str):
            raise MalformedEngineOutput(f"entry {index} has no word")

        start = entry.get("start")
        end = entry.get("end")
        if start is None and end is None:
            words.append(word)
            continue
        if not (_is_number(start) and _is_number(end)):
            raise MalformedEngineOutput(f"entry {index} has invalid timing")

        timed_entries += 1
        words.append(word)
        timings.append(WordTiming(word=word, start=float(start), end=float(end), index=index))

    if timed_entries and timed_entries != len(words):
        raise MalformedEngineOutput("word entries mix timed and untimed words")

    return words, timings


def _from_mapping(data: Mapping[str, Any], total_duration: Optional[float]) -> RecognitionOutput:
    text = data.get("text", "")
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise MalformedEngineOutput("text must be a string")
    text = text.strip()

    entries = data.get("result")
    if entries is None:
        entries = data.get("words")

    if entries is not None:
        words, timings = _parse_entries(entries)
        if not text and words:
            text = " ".join(words)
        return RecognitionOutput(
            text=text,
            words=tuple(words),
            timings=tuple(timings),
            total_duration=total_duration,
        )

    return RecognitionOutput(
        text=text,
        words=tuple(text.split()),
        total_duration=total_duration,
    )


def parse_engine_output(
    raw: Any,
    *,
    total_duration: Optional[float] = None,
) -> RecognitionOutput:
    """Parse ``raw`` engine output into a :class:`RecognitionOutput`."""

    if raw is None:
        return RecognitionOutput(total_duration=total_duration)

    data: Any = raw
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        stripped = raw.strip()
        if not stripped:
            return RecognitionOutput(total_duration=total_duration)
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            return RecognitionOutput(
                text=stripped,
                words=tuple(stripped.split()),
                total_duration=total_duration,
            )
        if isinstance(data, str):
            text = data.strip()
            return RecognitionOutput(
                text=text,
                words=tuple(text.split()),
                total_duration=total_duration,
            )
        if not isinstance(data, (Mapping, list)):
            # Scalars such as "42" or "null" are transcript words, not documents.
            return RecognitionOutput(
                text=stripped,
                words=tuple(stripped.split()),
                total_duration=total_duration,
            )

    try:
        if not isinstance(data, Mapping):
            raise MalformedEngineOutput(f"unexpected document type {type(data).__name__}")
        return _from_mapping(data, total_duration)
    except MalformedEngineOutput as exc:
        _logger.warning("Discarding malformed engine output", context={"error": str(exc)})
        return RecognitionOutput(total_duration=total_duration, malformed=True)


__all__ = ["RecognitionOutput", "MalformedEngineOutput", "parse_engine_output"]
