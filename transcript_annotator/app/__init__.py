"""Application layer: configuration, data sources, services and the CLI."""

from .app import TranscriptAnnotatorApp, main
from .config import AnnotatorSettings

__all__ = ["TranscriptAnnotatorApp", "AnnotatorSettings", "main"]
