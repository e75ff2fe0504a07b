"""
Bengali translation and summary of the combined job text.

Both steps send one prompt to the generation provider and differ only in
the instruction, the sampling temperature and which error they raise.
"""

import logging
from typing import Optional, Type

from configs.config import get_config
from src.processing.errors import (
    ProviderError,
    SummaryProviderError,
    TranslationProviderError,
)
from src.providers.base import GenerationProvider

logger = logging.getLogger(__name__)

cfg = get_config()

TRANSLATION_PROMPT = (
    "Translate the following text into সহজ বাংলা (simple Bengali). "
    "Maintain the meaning and keep it natural and easy to understand. "
    "Do not add any explanations, just provide the translation:\n\n{text}"
)

SUMMARY_PROMPT = (
    "Provide a comprehensive summary and explanation in সহজ বাংলা "
    "(simple Bengali) of the following content. Include:\n"
    "1. মূল বিষয় এবং গুরুত্বপূর্ণ পয়েন্ট (Main topics and key points)\n"
    "2. গুরুত্বপূর্ণ বিবরণ এবং অর্থ (Important details and meanings)\n"
    "3. প্রসঙ্গ এবং তাৎপর্য (Context and significance)\n"
    "4. কোনো কার্যকর অন্তর্দৃষ্টি (Any actionable insights)\n\n"
    "Content to summarize:\n\n{text}"
)


class _PromptStep:
    """One fixed-instruction generation call over (truncated) input text."""

    template: str = "{text}"
    error_class: Type[ProviderError] = ProviderError
    label: str = "generation"

    def __init__(
        self,
        generator: GenerationProvider,
        temperature: float,
        max_input_chars: Optional[int] = None,
        max_output_tokens: Optional[int] = None,
    ) -> None:
        self.generator = generator
        self.temperature = temperature
        self.max_input_chars = (
            cfg.PROMPT_MAX_CHARS if max_input_chars is None else max_input_chars
        )
        self.max_output_tokens = (
            cfg.MAX_OUTPUT_TOKENS if max_output_tokens is None else max_output_tokens
        )

    def build_prompt(self, text: str) -> str:
        return self.template.format(text=text[: self.max_input_chars])

    def _run(self, text: str, api_key: str) -> str:
        prompt = self.build_prompt(text)
        logger.info(
            "Starting %s (%d input chars, %d sent)",
            self.label, len(text), min(len(text), self.max_input_chars),
        )
        try:
            result = self.generator.generate(
                prompt,
                api_key,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        except ProviderError as exc:
            raise self.error_class(exc.status, exc.body) from exc
        logger.info("%s completed (%d chars)", self.label.capitalize(), len(result))
        return result


class Translator(_PromptStep):
    template = TRANSLATION_PROMPT
    error_class = TranslationProviderError
    label = "translation"

    def __init__(self, generator: GenerationProvider, **kwargs) -> None:
        kwargs.setdefault("temperature", cfg.TRANSLATION_TEMPERATURE)
        super().__init__(generator, **kwargs)

    def translate(self, text: str, api_key: str) -> str:
        """Translate ``text`` into simple Bengali."""
        return self._run(text, api_key)


class Summarizer(_PromptStep):
    template = SUMMARY_PROMPT
    error_class = SummaryProviderError
    label = "summary"

    def __init__(self, generator: GenerationProvider, **kwargs) -> None:
        kwargs.setdefault("temperature", cfg.SUMMARY_TEMPERATURE)
        super().__init__(generator, **kwargs)

    def summarize(self, text: str, api_key: str) -> str:
        """Produce the four-section Bengali summary of ``text``."""
        return self._run(text, api_key)
