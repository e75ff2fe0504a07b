"""
Data models for the processing module.
"""

from dataclasses import dataclass
from enum import Enum


class JobStatus(str, Enum):
    """Possible states of a processing job."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class InputFile:
    """An uploaded file held in memory for the lifetime of one job run."""

    name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ExtractedText:
    """Text produced for one input file, or the reason it could not be."""

    file_name: str
    text: str
    ok: bool = True

    def as_section(self) -> str:
        return f"--- {self.file_name} ---\n{self.text}"
