"""
Processing job API routes.

Endpoints:
    POST   /api/jobs            — upload files & create job
    GET    /api/jobs/{job_id}   — poll job status and results
    DELETE /api/jobs/{job_id}   — delete a job (admin only)
"""

import logging
from typing import List, Optional

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Depends,
    File,
    Form,
    HTTPException,
    Request,
    UploadFile,
)
from pymongo.errors import PyMongoError

from commons import generate_job_id, limiter, resolve_credential
from configs.config import get_config
from security import require_admin_key, safe_error_response, validate_job_id
from src.database.job_repository import JobRepository
from src.processing.errors import MissingCredentialError, SubmissionError
from src.processing.models import InputFile, JobStatus
from src.processing.pipeline import JobPipeline
from src.routes.dependencies import get_job_repository, get_pipeline

logger = logging.getLogger(__name__)

cfg = get_config()

router = APIRouter(prefix="/api", tags=["jobs"])

UPLOAD_CHUNK_SIZE = 1024 * 1024


async def read_upload(upload: UploadFile) -> InputFile:
    """Read an upload fully into memory, enforcing the size limit."""
    chunks = []
    total_bytes = 0
    while True:
        chunk = await upload.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        total_bytes += len(chunk)
        if total_bytes > cfg.MAX_UPLOAD_SIZE:
            raise HTTPException(
                status_code=413,
                detail=(
                    f"File '{upload.filename}' too large. Maximum allowed "
                    f"size is {cfg.MAX_UPLOAD_SIZE // (1024 ** 2)} MB."
                ),
            )
        chunks.append(chunk)
    await upload.close()
    return InputFile(
        name=upload.filename or "unnamed",
        content_type=upload.content_type or "application/octet-stream",
        data=b"".join(chunks),
    )


# ── Upload & Create ──────────────────────────────────────────────────────


@router.post("/jobs")
@limiter.limit(cfg.SUBMIT_RATE_LIMIT)
async def create_job_endpoint(
    request: Request,
    background_tasks: BackgroundTasks,
    files: Optional[List[UploadFile]] = File(default=None),
    gemini_api_key: Optional[str] = Form(default=None, alias="geminiApiKey"),
    openai_api_key: Optional[str] = Form(default=None, alias="openaiApiKey"),
    repository: JobRepository = Depends(get_job_repository),
    pipeline: JobPipeline = Depends(get_pipeline),
) -> dict:
    """Upload files and queue a transcription / translation / summary job."""
    file_count = len(files) if files else 0
    logger.info("Received request to process %d files", file_count)
    logger.info(
        "User provided Gemini key: %s, OpenAI key: %s",
        "yes" if gemini_api_key else "no",
        "yes" if openai_api_key else "no",
    )

    gemini_key = resolve_credential(gemini_api_key, cfg.GEMINI_API_KEY)
    openai_key = resolve_credential(openai_api_key, cfg.OPENAI_API_KEY)

    if not gemini_key:
        raise MissingCredentialError(
            "Gemini API key is required. "
            "Please provide your API key in settings."
        )
    if not files:
        raise SubmissionError("No files provided")

    input_files = [await read_upload(upload) for upload in files]

    job_id = generate_job_id()
    try:
        repository.create_job(job_id, [f.name for f in input_files])
    except PyMongoError as exc:
        logger.error("Error creating job %s: %s", job_id, exc, exc_info=True)
        raise SubmissionError("Failed to create processing job") from exc
    logger.info("Created job %s (%s)", job_id, JobStatus.PROCESSING.value)

    background_tasks.add_task(
        pipeline.run, job_id, input_files, gemini_key, openai_key
    )
    logger.info("Background task queued for job %s", job_id)

    return {"jobId": job_id}


# ── Status ───────────────────────────────────────────────────────────────


@router.get("/jobs/{job_id}")
@limiter.limit(cfg.POLL_RATE_LIMIT)
def get_status(
    request: Request,
    job_id: str,
    repository: JobRepository = Depends(get_job_repository),
) -> dict:
    """Return the job document, including results once terminal."""
    validate_job_id(job_id)
    logger.debug("Status check for job %s", job_id)
    job = repository.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


# ── Delete ───────────────────────────────────────────────────────────────


@router.delete("/jobs/{job_id}")
@limiter.limit(cfg.ADMIN_RATE_LIMIT)
def delete_job_endpoint(
    request: Request,
    job_id: str,
    _=Depends(require_admin_key),
    repository: JobRepository = Depends(get_job_repository),
) -> dict:
    """Delete a job by ID."""
    validate_job_id(job_id)
    logger.info("Deleting job %s", job_id)
    try:
        if repository.delete_job(job_id):
            return {
                "message": f"Job {job_id} deleted successfully",
                "job_id": job_id,
            }
    except PyMongoError as exc:
        safe_error_response(exc, context="delete_job")
    raise HTTPException(status_code=404, detail="Job not found")
