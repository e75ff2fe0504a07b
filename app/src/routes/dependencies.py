"""
FastAPI dependency providers for the job routes.

Tests swap any of these through ``app.dependency_overrides``.
"""

from fastapi import Depends

from src.database.job_repository import JobRepository
from src.processing.extractor import TextExtractor
from src.processing.pipeline import JobPipeline
from src.processing.translation import Summarizer, Translator
from src.providers.base import GenerationProvider, TranscriptionProvider
from src.providers.gemini_client import GeminiClient
from src.providers.whisper_client import WhisperClient


def get_job_repository() -> JobRepository:
    return JobRepository()


def get_transcription_provider() -> TranscriptionProvider:
    return WhisperClient()


def get_generation_provider() -> GenerationProvider:
    return GeminiClient()


def get_pipeline(
    repository: JobRepository = Depends(get_job_repository),
    transcriber: TranscriptionProvider = Depends(get_transcription_provider),
    generator: GenerationProvider = Depends(get_generation_provider),
) -> JobPipeline:
    return JobPipeline(
        repository=repository,
        extractor=TextExtractor(transcriber),
        translator=Translator(generator),
        summarizer=Summarizer(generator),
    )
