"""Interface of the external speech-recognition collaborator."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Union, runtime_checkable

EngineDocument = Union[str, bytes, Mapping[str, Any], None]


@runtime_checkable
class RecognitionEngine(Protocol):
    """Anything that turns an audio handle into an engine output document.

    Implementations return either the timed schema
    (``{"result": [{"word", "start", "end"}], "text": ...}``), a text-only
    ``{"text": ...}`` document, or plain text.
    """

    def recognize(self, audio_handle: Any, language: str) -> EngineDocument:
        ...


__all__ = ["RecognitionEngine", "EngineDocument"]
