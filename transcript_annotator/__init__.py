"""Rhyme, slang and phrase/verse annotation for speech-engine transcripts."""

__version__ = "0.1.0"
