"""
Per-file text extraction.

PDFs are decoded locally on a best-effort basis: the bytes are read as
text and everything outside printable ASCII is dropped, which recovers
uncompressed text streams without a structural parse. Audio and video
go to the transcription provider.
"""

import logging
import re
from typing import Optional

from configs.config import get_config
from src.processing.errors import (
    EmptyDocumentError,
    MissingCredentialError,
    UnsupportedFileTypeError,
)
from src.processing.models import InputFile
from src.providers.base import TranscriptionProvider

logger = logging.getLogger(__name__)

cfg = get_config()

PDF_MEDIA_TYPE = "application/pdf"
TRANSCRIBABLE_PREFIXES = ("audio/", "video/")

_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\n]")
_WHITESPACE_RUN = re.compile(r"\s+")


def clean_pdf_text(data: bytes) -> str:
    """Decode PDF bytes and keep only printable text, whitespace-collapsed."""
    # latin-1 maps every byte to one code point, so nothing is lost
    text = data.decode("latin-1")
    text = _NON_PRINTABLE.sub(" ", text)
    return _WHITESPACE_RUN.sub(" ", text).strip()


class TextExtractor:
    """Dispatches an ``InputFile`` to the right extraction strategy."""

    def __init__(
        self,
        transcriber: TranscriptionProvider,
        min_pdf_chars: Optional[int] = None,
        max_pdf_chars: Optional[int] = None,
    ) -> None:
        self.transcriber = transcriber
        self.min_pdf_chars = (
            cfg.PDF_MIN_TEXT_LENGTH if min_pdf_chars is None else min_pdf_chars
        )
        self.max_pdf_chars = (
            cfg.PDF_MAX_TEXT_LENGTH if max_pdf_chars is None else max_pdf_chars
        )

    def extract(
        self, file: InputFile, transcription_api_key: Optional[str] = None
    ) -> str:
        media_type = (file.content_type or "").lower()
        logger.info("Extracting text from %s (%s)", file.name, media_type)

        if media_type == PDF_MEDIA_TYPE:
            return self._extract_pdf(file)

        if media_type.startswith(TRANSCRIBABLE_PREFIXES):
            return self._transcribe(file, transcription_api_key)

        raise UnsupportedFileTypeError(file.content_type or "unknown")

    def _extract_pdf(self, file: InputFile) -> str:
        text = clean_pdf_text(file.data)
        if len(text) < self.min_pdf_chars:
            raise EmptyDocumentError(
                "PDF appears to be empty or contains only images. "
                "Please provide a PDF with text content."
            )
        if len(text) > self.max_pdf_chars:
            logger.info(
                "PDF %s truncated from %d to %d characters",
                file.name, len(text), self.max_pdf_chars,
            )
        return text[: self.max_pdf_chars]

    def _transcribe(
        self, file: InputFile, transcription_api_key: Optional[str]
    ) -> str:
        if not transcription_api_key:
            raise MissingCredentialError(
                "OpenAI API key is required for audio/video transcription. "
                "Please provide it in settings."
            )
        return self.transcriber.transcribe(file, transcription_api_key)
