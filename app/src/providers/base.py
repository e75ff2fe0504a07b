"""
Narrow interfaces for the external providers a job talks to.

The pipeline only ever depends on these protocols, so tests (and any
future vendor swap) plug in a different implementation without touching
extraction, translation or summary code.
"""

from typing import Protocol

from src.processing.models import InputFile


class TranscriptionProvider(Protocol):
    def transcribe(self, file: InputFile, api_key: str) -> str:
        """Return the plain-text English transcript of an audio/video file."""
        ...


class GenerationProvider(Protocol):
    def generate(
        self,
        prompt: str,
        api_key: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        """Return the generated text for a single prompt."""
        ...
