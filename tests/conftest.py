"""Shared fixtures for the processing and API tests."""

import pytest

from fakes import FakeCollection, FakeGenerator, FakeTranscriber, make_pdf
from src.database.job_repository import JobRepository
from src.processing.extractor import TextExtractor
from src.processing.models import InputFile
from src.processing.pipeline import JobPipeline
from src.processing.translation import Summarizer, Translator


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def repository(collection):
    return JobRepository(collection=collection)


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def pipeline(repository, transcriber, generator):
    return JobPipeline(
        repository=repository,
        extractor=TextExtractor(transcriber),
        translator=Translator(generator),
        summarizer=Summarizer(generator),
    )


@pytest.fixture
def pdf_file():
    return InputFile("report.pdf", "application/pdf", make_pdf())
