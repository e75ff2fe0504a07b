"""
Google Gemini text generation.

Wraps ``google-genai`` behind the ``GenerationProvider`` protocol. A new
client is built per call because the API key may differ per job.
"""

import logging
from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from configs.config import get_config
from src.processing.errors import MalformedProviderResponseError, ProviderError

logger = logging.getLogger(__name__)

cfg = get_config()


class GeminiClient:
    """Single-prompt ``generate_content`` calls against a Gemini model."""

    def __init__(
        self,
        model_name: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self.model_name = model_name or cfg.GEMINI_MODEL_NAME
        self.timeout_seconds = (
            cfg.PROVIDER_TIMEOUT_SECONDS if timeout_seconds is None
            else timeout_seconds
        )

    def _build_client(self, api_key: str) -> genai.Client:
        return genai.Client(
            api_key=api_key,
            # HttpOptions.timeout is expressed in milliseconds
            http_options=types.HttpOptions(
                timeout=int(self.timeout_seconds * 1000)
            ),
        )

    def generate(
        self,
        prompt: str,
        api_key: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        client = self._build_client(api_key)
        logger.debug(
            "Gemini request — model=%s, prompt_chars=%d, temperature=%.2f",
            self.model_name, len(prompt), temperature,
        )
        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    max_output_tokens=max_output_tokens,
                ),
            )
        except genai_errors.APIError as exc:
            logger.error("Gemini API error %s: %s", exc.code, exc.message)
            raise ProviderError(exc.code, exc.message or str(exc)) from exc
        except httpx.TimeoutException as exc:
            logger.error(
                "Gemini request timed out after %.0fs", self.timeout_seconds
            )
            raise ProviderError(
                None, f"timed out after {self.timeout_seconds:.0f}s"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Gemini transport error: %s", exc)
            raise ProviderError(None, str(exc)) from exc

        return extract_generated_text(response)


def extract_generated_text(response) -> str:
    """Read ``candidates[0].content.parts[0].text`` or raise."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise MalformedProviderResponseError(
            "Invalid response from Gemini API: no candidates"
        )
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content else None
    if not parts:
        raise MalformedProviderResponseError(
            "Invalid response from Gemini API: candidate has no content parts"
        )
    text = getattr(parts[0], "text", None)
    if not text:
        raise MalformedProviderResponseError(
            "Invalid response from Gemini API: first part has no text"
        )
    return text
