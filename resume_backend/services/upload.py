"""Résumé upload workflow.

Steps:
1. Validate the submission (file present, name present, at least one skill)
2. Normalize the skill list (JSON array or comma-separated)
3. Write the file to blob storage under ``<epoch-ms>-<filename>``
4. Build and persist the candidate record

The blob write and the record write are not transactional.  When the record
write fails the blob is left in place and its key is logged as
``orphaned_blob`` for manual cleanup.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePosixPath, PureWindowsPath
from uuid import uuid4

from resume_backend.core.constants import DEFAULT_CONTENT_TYPE, SKILL_CATALOG
from resume_backend.core.errors import DependencyError, ValidationError
from resume_backend.dependencies import ServiceContext
from resume_backend.models.candidate import CandidateRecord
from resume_backend.models.skills import normalize_skills, parse_raw_skills

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResumeSubmission:
    """One multipart upload, already read into memory."""
    name: str | None
    skills_raw: str | None
    filename: str | None
    content_type: str | None
    data: bytes


def build_blob_key(filename: str, now_ms: int | None = None) -> str:
    """Return ``<epoch-ms>-<basename>`` for *filename*.

    Any directory part sent by the browser is dropped.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    basename = PureWindowsPath(PurePosixPath(filename).name).name or "resume"
    return f"{now_ms}-{basename}"


def upload_resume(ctx: ServiceContext, submission: ResumeSubmission) -> CandidateRecord:
    """Store the résumé file and create its candidate record."""
    if not submission.filename:
        raise ValidationError("No file uploaded", operation="upload")

    name = (submission.name or "").strip()
    if not name:
        raise ValidationError("Candidate name is required", operation="upload")

    skills = normalize_skills(parse_raw_skills(submission.skills_raw))
    if not skills:
        raise ValidationError("At least one skill is required", operation="upload")

    unknown = [s for s in skills if s not in SKILL_CATALOG]
    if unknown:
        logger.info("upload_uncatalogued_skills skills=%s", unknown, extra={"skills": unknown})

    content_type = submission.content_type or DEFAULT_CONTENT_TYPE
    blob_key = build_blob_key(submission.filename)
    resume_url = ctx.blob_store.put(blob_key, submission.data, content_type)

    record = CandidateRecord(
        id=str(uuid4()),
        name=name,
        skills=skills,
        resume_url=resume_url,
        blob_key=blob_key,
        original_file_name=submission.filename,
        content_type=content_type,
        uploaded_at=datetime.now(timezone.utc),
    )

    try:
        ctx.candidate_store.create(record)
    except DependencyError:
        logger.error(
            "orphaned_blob blob_key=%s container=%s candidate_id=%s",
            blob_key,
            ctx.blob_store.container_name,
            record.id,
            extra={
                "blob_key": blob_key,
                "container": ctx.blob_store.container_name,
                "candidate_id": record.id,
            },
        )
        raise

    logger.info(
        "upload_stored candidate_id=%s blob_key=%s",
        record.id,
        blob_key,
        extra={
            "candidate_id": record.id,
            "blob_key": blob_key,
            "skills_count": len(skills),
            "size": len(submission.data),
        },
    )
    return record
