"""
OpenAI Whisper speech-to-text.

Uploads the raw audio/video bytes and asks for a plain-text English
transcript. Retries are disabled; a failed call is reported as-is.
"""

import logging
from typing import Optional

import openai
from openai import OpenAI

from configs.config import get_config
from src.processing.errors import TranscriptionProviderError
from src.processing.models import InputFile

logger = logging.getLogger(__name__)

cfg = get_config()


class WhisperClient:
    """``audio.transcriptions.create`` with ``response_format="text"``."""

    def __init__(
        self,
        model_name: Optional[str] = None,
        language: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self.model_name = model_name or cfg.WHISPER_MODEL_NAME
        self.language = language or cfg.TRANSCRIPTION_LANGUAGE
        self.timeout_seconds = (
            cfg.PROVIDER_TIMEOUT_SECONDS if timeout_seconds is None
            else timeout_seconds
        )

    def transcribe(self, file: InputFile, api_key: str) -> str:
        client = OpenAI(
            api_key=api_key, timeout=self.timeout_seconds, max_retries=0
        )
        logger.info(
            "Calling Whisper API for %s (%d bytes)", file.name, file.size
        )
        try:
            transcript = client.audio.transcriptions.create(
                model=self.model_name,
                file=(file.name, file.data, file.content_type),
                language=self.language,
                response_format="text",
            )
        except openai.APIStatusError as exc:
            body = exc.response.text
            logger.error("Whisper API error %s: %s", exc.status_code, body)
            raise TranscriptionProviderError(exc.status_code, body) from exc
        except openai.APITimeoutError as exc:
            logger.error(
                "Whisper request timed out after %.0fs", self.timeout_seconds
            )
            raise TranscriptionProviderError(
                None, f"timed out after {self.timeout_seconds:.0f}s"
            ) from exc
        except openai.APIConnectionError as exc:
            logger.error("Whisper connection error: %s", exc)
            raise TranscriptionProviderError(None, str(exc)) from exc

        # "text" responses arrive as str; object responses carry .text
        text = transcript if isinstance(transcript, str) else getattr(
            transcript, "text", str(transcript)
        )
        logger.info("Whisper transcription length: %d", len(text))
        return text
