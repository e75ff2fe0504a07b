"""Tests for per-file text extraction."""

import pytest

from fakes import PDF_SENTENCE, FakeTranscriber, make_pdf
from src.processing.errors import (
    EmptyDocumentError,
    MissingCredentialError,
    TranscriptionProviderError,
    UnsupportedFileTypeError,
)
from src.processing.extractor import TextExtractor, clean_pdf_text
from src.processing.models import InputFile


def test_clean_pdf_text_strips_binary_and_collapses_whitespace():
    raw = b"Hello\x00\x01  world\n\n\ttab\xe2\x80\x99s  end  "
    assert clean_pdf_text(raw) == "Hello world tab s end"


def test_clean_pdf_text_keeps_printable_ascii():
    assert clean_pdf_text(b"(a+b) = {c}; ~x") == "(a+b) = {c}; ~x"


def test_pdf_text_is_extracted(pdf_file, transcriber):
    text = TextExtractor(transcriber).extract(pdf_file)

    assert PDF_SENTENCE in text
    assert "\x00" not in text
    assert "  " not in text
    assert transcriber.calls == []


def test_short_pdf_raises_empty_document(transcriber):
    image_only = InputFile("scan.pdf", "application/pdf", b"%PDF-1.4\n\xff\xd8\xff")

    with pytest.raises(EmptyDocumentError, match="only images"):
        TextExtractor(transcriber).extract(image_only)


def test_pdf_text_is_truncated(transcriber):
    long_pdf = InputFile("long.pdf", "application/pdf", make_pdf("word " * 20000))

    text = TextExtractor(transcriber).extract(long_pdf)

    assert len(text) == 50000


@pytest.mark.parametrize("content_type", ["audio/mpeg", "video/mp4", "audio/wav"])
def test_audio_and_video_require_transcription_key(content_type, transcriber):
    media = InputFile("clip", content_type, b"\x00\x01")

    with pytest.raises(MissingCredentialError, match="OpenAI API key is required"):
        TextExtractor(transcriber).extract(media, None)
    assert transcriber.calls == []


def test_audio_is_sent_to_transcriber():
    transcriber = FakeTranscriber({"talk.mp3": "Welcome to the lecture."})
    media = InputFile("talk.mp3", "audio/mpeg", b"ID3...")

    text = TextExtractor(transcriber).extract(media, "sk-test")

    assert text == "Welcome to the lecture."
    assert transcriber.calls == [("talk.mp3", "sk-test")]


def test_transcription_provider_error_propagates():
    error = TranscriptionProviderError(401, '{"error": "invalid key"}')
    media = InputFile("talk.mp4", "video/mp4", b"\x00")

    with pytest.raises(TranscriptionProviderError) as exc_info:
        TextExtractor(FakeTranscriber(error=error)).extract(media, "sk-bad")

    assert exc_info.value.status == 401
    assert "invalid key" in exc_info.value.body


def test_unsupported_type_names_the_type(transcriber):
    notes = InputFile("notes.txt", "text/plain", b"plain text notes")

    with pytest.raises(UnsupportedFileTypeError, match="text/plain") as exc_info:
        TextExtractor(transcriber).extract(notes, "sk-test")

    assert exc_info.value.content_type == "text/plain"


def test_zero_pdf_minimum_accepts_short_text(transcriber):
    short_pdf = InputFile("memo.pdf", "application/pdf", b"Hi")

    with pytest.raises(EmptyDocumentError):
        TextExtractor(transcriber).extract(short_pdf)
    assert TextExtractor(transcriber, min_pdf_chars=0).extract(short_pdf) == "Hi"
