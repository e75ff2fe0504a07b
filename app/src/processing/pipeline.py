"""
Background job pipeline.

Extracts text from every uploaded file in order, combines it, translates
and summarizes the combined text in Bengali, and records the outcome on
the job document. A failing file degrades to an inline error section; a
failing translation or summary fails the whole job.
"""

import logging
from typing import List, Optional, Sequence

from pymongo.errors import PyMongoError

from configs.config import get_config
from src.database.job_repository import JobRepository
from src.processing.errors import NoExtractableContentError
from src.processing.extractor import TextExtractor
from src.processing.models import ExtractedText, InputFile
from src.processing.translation import Summarizer, Translator

logger = logging.getLogger(__name__)
cfg = get_config()

SECTION_SEPARATOR = "\n\n"


def combine_sections(sections: Sequence[ExtractedText]) -> str:
    """Join per-file sections, each under its ``--- name ---`` header."""
    return SECTION_SEPARATOR.join(section.as_section() for section in sections)


class JobPipeline:
    """Runs one job from extraction to its terminal database update."""

    def __init__(
        self,
        repository: JobRepository,
        extractor: TextExtractor,
        translator: Translator,
        summarizer: Summarizer,
        min_text_chars: Optional[int] = None,
    ) -> None:
        self.repository = repository
        self.extractor = extractor
        self.translator = translator
        self.summarizer = summarizer
        self.min_text_chars = (
            cfg.MIN_COMBINED_TEXT_LENGTH if min_text_chars is None else min_text_chars
        )

    def extract_all(
        self, files: Sequence[InputFile], openai_api_key: Optional[str]
    ) -> List[ExtractedText]:
        """Extract every file in submission order, never raising per file."""
        sections: List[ExtractedText] = []
        for file in files:
            logger.info("Processing file: %s (%s)", file.name, file.content_type)
            try:
                text = self.extractor.extract(file, openai_api_key)
                sections.append(ExtractedText(file.name, text))
                logger.info("Successfully processed %s", file.name)
            except Exception as exc:
                logger.error("Error processing %s: %s", file.name, exc)
                sections.append(
                    ExtractedText(
                        file.name, f"Error processing file: {exc}", ok=False
                    )
                )
        return sections

    def _check_content(self, sections: Sequence[ExtractedText]) -> None:
        extracted = sum(len(s.text.strip()) for s in sections if s.ok)
        if extracted >= self.min_text_chars:
            return
        failures = "; ".join(
            f"{s.file_name}: {s.text}" for s in sections if not s.ok
        )
        message = "No meaningful text could be extracted from the files"
        if failures:
            message = f"{message} ({failures})"
        raise NoExtractableContentError(message)

    def run(
        self,
        job_id: str,
        files: Sequence[InputFile],
        gemini_api_key: str,
        openai_api_key: Optional[str] = None,
    ) -> None:
        """
        End-to-end processing for a single job.

        1. Extract text from each file (errors become placeholders)
        2. Combine the sections and check something was extracted
        3. Translate, then summarize the combined text
        4. Persist the three results, or the error, in one update
        """
        logger.info(
            "Starting background processing for job %s (%d files)",
            job_id, len(files),
        )
        try:
            sections = self.extract_all(files, openai_api_key)
            combined_text = combine_sections(sections)
            logger.info(
                "Job %s combined text length: %d characters",
                job_id, len(combined_text),
            )
            self._check_content(sections)

            translation = self.translator.translate(combined_text, gemini_api_key)
            summary = self.summarizer.summarize(combined_text, gemini_api_key)

            self.repository.complete_job(
                job_id,
                transcription=combined_text,
                translation=translation,
                summary=summary,
            )
            logger.info("Job %s completed successfully", job_id)

        except Exception as exc:
            logger.error("Job %s failed: %s", job_id, exc, exc_info=True)
            self._record_failure(job_id, str(exc) or type(exc).__name__)

    def _record_failure(self, job_id: str, error: str) -> None:
        try:
            self.repository.fail_job(job_id, error)
        except PyMongoError as exc:
            logger.error(
                "Could not mark job %s as failed: %s", job_id, exc, exc_info=True
            )
