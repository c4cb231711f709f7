"""Application wiring and command line entry point for the transcript annotator."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional, Sequence

from transcript_annotator.core.errors import ConfigurationError
from transcript_annotator.core.languages import SUPPORTED_LANGUAGES
from transcript_annotator.core.lexicons import LexiconService
from transcript_annotator.core.models import AnnotatedTranscript
from transcript_annotator.utils.logging_config import configure_logging
from transcript_annotator.utils.observability import get_logger

from .config import AnnotatorSettings
from .data.lexicon_sources import LexiconAssetLoader
from .data.recognition import RecognitionEngine
from .services.annotation_service import AnnotationService


class TranscriptAnnotatorApp:
    """High-level facade bundling settings, lexicons and the annotation service."""

    def __init__(
        self,
        settings: Optional[AnnotatorSettings] = None,
        *,
        lexicons: Optional[LexiconService] = None,
        loader: Optional[LexiconAssetLoader] = None,
        engine: Optional[RecognitionEngine] = None,
        annotation_service: Optional[AnnotationService] = None,
    ) -> None:
        self.settings = settings or AnnotatorSettings.from_env()
        self._logger = get_logger(__name__).bind(component="app_facade")
        self._logger.info(
            "Initialising transcript annotator",
            context={
                "languages": list(self.settings.languages),
                "default_language": self.settings.default_language,
                "dictionary_dir": self.settings.dictionary_dir,
            },
        )

        if lexicons is None:
            loader = loader or LexiconAssetLoader(self.settings.dictionary_dir)
            lexicons = loader.initialize_lexicons(self.settings.languages)
        self.lexicons = lexicons
        self.engine = engine

        self.annotation_service = annotation_service or AnnotationService(
            self.lexicons,
            phrase_threshold=self.settings.phrase_threshold,
            verse_threshold=self.settings.verse_threshold,
        )

    def _language(self, language: Optional[str]) -> str:
        return language or self.settings.default_language

    # Public API ------------------------------------------------------------
    def supported_languages(self) -> List[str]:
        return list(SUPPORTED_LANGUAGES)

    def loaded_languages(self) -> List[str]:
        return list(self.lexicons.languages)

    def annotate(
        self,
        raw_output: Any,
        language: Optional[str] = None,
        **options: Any,
    ) -> AnnotatedTranscript:
        return self.annotation_service.annotate(raw_output, self._language(language), **options)

    def transcribe(
        self,
        audio_handle: Any,
        language: Optional[str] = None,
        **options: Any,
    ) -> AnnotatedTranscript:
        """Recognise ``audio_handle`` with the configured engine and annotate it."""

        if self.engine is None:
            raise ConfigurationError("No recognition engine configured")
        resolved = self._language(language)
        self.lexicons.require(resolved)
        raw_output = self.engine.recognize(audio_handle, resolved)
        return self.annotation_service.annotate(raw_output, resolved, **options)

    def rhymes(self, word1: str, word2: str, language: Optional[str] = None) -> bool:
        return self.lexicons.phonetic.rhymes(word1, word2, self._language(language))

    def is_slang(self, word: str, language: Optional[str] = None) -> bool:
        return self.lexicons.slang.is_slang(word, self._language(language))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Annotate speech-engine output with rhyme groups, slang and "
            "phrase/verse segments."
        )
    )
    parser.add_argument(
        "input",
        help="Engine output file (JSON with word timing, JSON text-only, or plain text). "
        "Use '-' to read standard input.",
    )
    parser.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        help="Language used for rhyme and slang lookups (defaults to the configured one).",
    )
    parser.add_argument(
        "--total-duration",
        type=float,
        help="Audio duration in seconds; enables estimated timing for text-only output.",
    )
    parser.add_argument("--phrase-threshold", type=float, help="Pause (s) that ends a phrase.")
    parser.add_argument("--verse-threshold", type=float, help="Pause (s) that ends a verse.")
    parser.add_argument(
        "--dictionary-dir",
        help="Directory holding <language>/cmudict.dict, ptdict.dict and slang.txt assets.",
    )
    parser.add_argument("--no-rhymes", action="store_true", help="Skip rhyme detection.")
    parser.add_argument("--no-slang", action="store_true", help="Skip slang detection.")
    parser.add_argument("--no-timing", action="store_true", help="Skip timing analysis.")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default 2).")
    parser.add_argument("--log-level", help="Logging level (e.g. DEBUG, INFO).")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, force=args.log_level is not None)

    try:
        settings = AnnotatorSettings.from_env()
        if args.dictionary_dir:
            settings = replace(settings, dictionary_dir=Path(args.dictionary_dir))
        raw_output = _read_input(args.input)
        app = TranscriptAnnotatorApp(settings)
        transcript = app.annotate(
            raw_output,
            args.language,
            total_duration=args.total_duration,
            detect_rhymes=not args.no_rhymes,
            detect_slang=not args.no_slang,
            analyze_timing=not args.no_timing,
            phrase_threshold=args.phrase_threshold,
            verse_threshold=args.verse_threshold,
        )
    except (ConfigurationError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(transcript.to_json(indent=args.indent))
    return 0


__all__ = ["TranscriptAnnotatorApp", "main"]
