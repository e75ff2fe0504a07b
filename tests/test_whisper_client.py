"""Tests for the Whisper transcription client."""

from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from src.processing.errors import TranscriptionProviderError
from src.processing.models import InputFile
from src.providers.whisper_client import WhisperClient

TRANSCRIPTIONS_URL = "https://api.openai.com/v1/audio/transcriptions"


@pytest.fixture
def mock_openai():
    with patch("src.providers.whisper_client.OpenAI") as client_class:
        instance = MagicMock()
        client_class.return_value = instance
        yield client_class, instance


@pytest.fixture
def audio():
    return InputFile("talk.mp3", "audio/mpeg", b"ID3\x00\x01")


def test_transcribe_requests_english_plain_text(mock_openai, audio):
    client_class, instance = mock_openai
    instance.audio.transcriptions.create.return_value = "Hello and welcome.\n"

    text = WhisperClient(timeout_seconds=90).transcribe(audio, "sk-test")

    assert text == "Hello and welcome.\n"
    assert client_class.call_args.kwargs == {
        "api_key": "sk-test", "timeout": 90, "max_retries": 0,
    }
    kwargs = instance.audio.transcriptions.create.call_args.kwargs
    assert kwargs["model"] == "whisper-1"
    assert kwargs["language"] == "en"
    assert kwargs["response_format"] == "text"
    assert kwargs["file"] == ("talk.mp3", b"ID3\x00\x01", "audio/mpeg")


def test_status_error_carries_status_and_body(mock_openai, audio):
    _, instance = mock_openai
    response = httpx.Response(
        401,
        request=httpx.Request("POST", TRANSCRIPTIONS_URL),
        text='{"error": {"message": "Incorrect API key provided"}}',
    )
    instance.audio.transcriptions.create.side_effect = openai.AuthenticationError(
        "Incorrect API key provided", response=response, body=None
    )

    with pytest.raises(TranscriptionProviderError) as exc_info:
        WhisperClient().transcribe(audio, "sk-bad")

    assert exc_info.value.status == 401
    assert "Incorrect API key provided" in exc_info.value.body
    assert str(exc_info.value).startswith("Transcription failed: 401")


def test_timeout_is_a_provider_error(mock_openai, audio):
    _, instance = mock_openai
    instance.audio.transcriptions.create.side_effect = openai.APITimeoutError(
        request=httpx.Request("POST", TRANSCRIPTIONS_URL)
    )

    with pytest.raises(TranscriptionProviderError) as exc_info:
        WhisperClient(timeout_seconds=60).transcribe(audio, "sk-test")

    assert exc_info.value.status is None
    assert "timed out after 60s" in str(exc_info.value)
