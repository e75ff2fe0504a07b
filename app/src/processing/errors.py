"""Exception hierarchy for job submission and processing."""

from typing import Optional


class ProcessingError(Exception):
    """Base exception for every failure the service reports to a user.

    Attributes:
        status_code: HTTP status code used when raised inside a request.
            Only submission-time errors reach a response; background
            failures are stored on the job as text.
        error_code: Machine-readable identifier for the failure kind.
    """

    status_code: int = 500
    error_code: str = "PROCESSING_ERROR"


class SubmissionError(ProcessingError):
    """A job could not be created from the submitted request."""

    error_code = "SUBMISSION_ERROR"


class MissingCredentialError(ProcessingError):
    """A required provider API key was not supplied or configured."""

    error_code = "MISSING_CREDENTIAL"


class UnsupportedFileTypeError(ProcessingError):
    """The declared media type has no extraction strategy."""

    error_code = "UNSUPPORTED_FILE_TYPE"

    def __init__(self, content_type: str) -> None:
        super().__init__(
            f"Unsupported file type: {content_type}. "
            "Supported types: PDF, audio, and video files."
        )
        self.content_type = content_type


class EmptyDocumentError(ProcessingError):
    """A PDF produced no usable text, e.g. it only contains images."""

    error_code = "EMPTY_DOCUMENT"


class ProviderError(ProcessingError):
    """An external provider returned a non-success response or timed out.

    ``status`` is the provider's HTTP status, or None when the request never
    completed (timeout, connection failure).
    """

    error_code = "PROVIDER_ERROR"
    provider = "provider"

    def __init__(self, status: Optional[int], body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(self._format())

    def _format(self) -> str:
        if self.status is None:
            return f"{self.provider} request failed: {self.body}"
        return f"{self.provider} failed: {self.status} - {self.body}"


class TranscriptionProviderError(ProviderError):
    error_code = "TRANSCRIPTION_PROVIDER_ERROR"
    provider = "Transcription"


class TranslationProviderError(ProviderError):
    error_code = "TRANSLATION_PROVIDER_ERROR"
    provider = "Translation"


class SummaryProviderError(ProviderError):
    error_code = "SUMMARY_PROVIDER_ERROR"
    provider = "Summary generation"


class MalformedProviderResponseError(ProcessingError):
    """The provider answered 2xx but without the expected generated text."""

    error_code = "MALFORMED_PROVIDER_RESPONSE"


class NoExtractableContentError(ProcessingError):
    """None of the files in a job produced meaningful text."""

    error_code = "NO_EXTRACTABLE_CONTENT"
