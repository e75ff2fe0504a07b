"""Tests for the job repository."""

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from src.database.job_repository import JobRepository
from src.processing.models import JobStatus


def test_create_job_starts_processing(repository, collection):
    job = repository.create_job("job_000000000001", ["a.pdf", "b.mp3"])

    assert job["status"] == JobStatus.PROCESSING.value
    assert job["file_names"] == ["a.pdf", "b.mp3"]
    assert job["created_at"] == job["updated_at"]
    assert "_id" not in job
    assert len(collection.documents) == 1


def test_get_job_hides_mongo_id(repository):
    repository.create_job("job_000000000001", ["a.pdf"])

    job = repository.get_job("job_000000000001")

    assert job["job_id"] == "job_000000000001"
    assert "_id" not in job


def test_get_unknown_job_returns_none(repository):
    assert repository.get_job("job_doesnotexist") is None


def test_complete_job_sets_results_together(repository):
    repository.create_job("job_000000000001", ["a.pdf"])

    assert repository.complete_job("job_000000000001", "text", "অনুবাদ", "সারাংশ")

    job = repository.get_job("job_000000000001")
    assert job["status"] == JobStatus.COMPLETED.value
    assert (job["transcription"], job["translation"], job["summary"]) == (
        "text", "অনুবাদ", "সারাংশ",
    )
    assert job["updated_at"] >= job["created_at"]


def test_terminal_job_is_never_updated_again(repository):
    repository.create_job("job_000000000001", ["a.pdf"])
    assert repository.fail_job("job_000000000001", "boom")

    assert not repository.complete_job("job_000000000001", "t", "tr", "s")
    assert not repository.fail_job("job_000000000001", "again")

    job = repository.get_job("job_000000000001")
    assert job["status"] == JobStatus.FAILED.value
    assert job["error"] == "boom"
    assert job["transcription"] is None


def test_delete_job(repository):
    repository.create_job("job_000000000001", ["a.pdf"])

    assert repository.delete_job("job_000000000001")
    assert not repository.delete_job("job_000000000001")
    assert repository.get_job("job_000000000001") is None


def test_repository_connects_on_first_use(monkeypatch):
    def unreachable():
        raise ServerSelectionTimeoutError("No servers found yet")

    monkeypatch.setattr("src.database.job_repository.get_db", unreachable)
    repository = JobRepository()

    with pytest.raises(ServerSelectionTimeoutError):
        repository.create_job("job_000000000001", ["a.pdf"])
