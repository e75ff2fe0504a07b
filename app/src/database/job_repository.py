"""
Repository for processing jobs.

Each method is a thin wrapper around a MongoDB operation. Terminal
updates only match documents still in ``processing``, so a finished job
is never written again.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pymongo.collection import Collection

from configs.config import get_config
from src.database.connection import get_db
from src.processing.models import JobStatus

logger = logging.getLogger(__name__)

cfg = get_config()


def _now() -> datetime:
    return datetime.now(timezone.utc)


class JobRepository:
    """Create, read and finish job documents."""

    def __init__(self, collection: Optional[Collection] = None) -> None:
        self._collection = collection

    @property
    def collection(self) -> Collection:
        """The jobs collection, connecting on first use."""
        if self._collection is None:
            self._collection = get_db()[cfg.JOBS_COLLECTION]
        return self._collection

    # ── Create ───────────────────────────────────────────────────────────

    def create_job(self, job_id: str, file_names: List[str]) -> Dict:
        """Insert a new job document in the ``processing`` state."""
        now = _now()
        job_document = {
            "job_id": job_id,
            "file_names": list(file_names),
            "status": JobStatus.PROCESSING.value,
            "transcription": None,
            "translation": None,
            "summary": None,
            "error": None,
            "created_at": now,
            "updated_at": now,
        }
        self.collection.insert_one(job_document)
        job_document.pop("_id", None)
        logger.debug("Job %s created with %d files", job_id, len(file_names))
        return job_document

    # ── Read ─────────────────────────────────────────────────────────────

    def get_job(self, job_id: str) -> Optional[Dict]:
        """Retrieve a single job by its ID."""
        try:
            job = self.collection.find_one({"job_id": job_id}, {"_id": 0})
            if job:
                logger.debug("Job %s retrieved", job_id)
                return job
            logger.warning("Job %s not found", job_id)
            return None
        except Exception as exc:
            logger.error("Error getting job %s: %s", job_id, exc, exc_info=True)
            return None

    # ── Terminal updates ─────────────────────────────────────────────────

    def complete_job(
        self, job_id: str, transcription: str, translation: str, summary: str
    ) -> bool:
        """Store all three text artifacts and mark the job completed."""
        return self._finish(
            job_id,
            {
                "transcription": transcription,
                "translation": translation,
                "summary": summary,
                "status": JobStatus.COMPLETED.value,
            },
        )

    def fail_job(self, job_id: str, error: str) -> bool:
        """Mark a job as failed with a human-readable message."""
        return self._finish(
            job_id, {"error": error, "status": JobStatus.FAILED.value}
        )

    def _finish(self, job_id: str, fields: Dict) -> bool:
        fields["updated_at"] = _now()
        result = self.collection.update_one(
            {"job_id": job_id, "status": JobStatus.PROCESSING.value},
            {"$set": fields},
        )
        if result.modified_count > 0:
            logger.info("Job %s status updated to %s", job_id, fields["status"])
            return True
        logger.warning(
            "Job %s update to %s skipped — no processing job matched",
            job_id, fields["status"],
        )
        return False

    # ── Delete ───────────────────────────────────────────────────────────

    def delete_job(self, job_id: str) -> bool:
        """Remove a job document."""
        result = self.collection.delete_one({"job_id": job_id})
        if result.deleted_count > 0:
            logger.info("Job %s deleted", job_id)
            return True
        logger.warning("Job %s delete failed — no match", job_id)
        return False
