"""Candidate endpoints.

POST /api/upload              -- multipart upload (name, skills, resume)
GET  /api/candidates          -- list, optionally filtered by ``?skill=``
GET  /api/download/{id}       -- 302 redirect to the résumé blob

Handlers that only call the blocking Azure SDK are plain ``def`` so FastAPI
runs them in its threadpool.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from resume_backend.core.constants import UPLOAD_SUCCESS_MESSAGE
from resume_backend.dependencies import ServiceContext, get_context
from resume_backend.models.candidate import CandidateRecord, UploadResponse
from resume_backend.services.candidates import list_candidates, resolve_download
from resume_backend.services.upload import ResumeSubmission, upload_resume

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload", response_model=UploadResponse)
async def upload(
    name: str | None = Form(default=None),
    skills: str | None = Form(
        default=None,
        description='JSON array (["Java","SQL"]) or comma-separated ("Java,SQL")',
    ),
    resume: UploadFile | None = File(default=None),
    ctx: ServiceContext = Depends(get_context),
) -> UploadResponse:
    """Store an uploaded résumé and create its candidate record."""
    submission = ResumeSubmission(
        name=name,
        skills_raw=skills,
        filename=resume.filename if resume is not None else None,
        content_type=resume.content_type if resume is not None else None,
        data=await resume.read() if resume is not None else b"",
    )
    await run_in_threadpool(upload_resume, ctx, submission)
    return UploadResponse(message=UPLOAD_SUCCESS_MESSAGE)


@router.get("/candidates", response_model=list[CandidateRecord])
def candidates(
    skill: str | None = Query(
        default=None,
        description="Exact, case-sensitive skill to filter by (omit for all)",
    ),
    ctx: ServiceContext = Depends(get_context),
) -> list[CandidateRecord]:
    """Return candidate records, optionally filtered by one skill."""
    # Blank means "no filter"; any other value is matched as sent.
    return list_candidates(ctx, skill=skill if skill and skill.strip() else None)


@router.get("/download/{candidate_id}", response_class=RedirectResponse, status_code=302)
def download(
    candidate_id: str,
    ctx: ServiceContext = Depends(get_context),
) -> RedirectResponse:
    """Redirect to a short-lived signed URL (or the stored direct URL)."""
    url = resolve_download(ctx, candidate_id)
    return RedirectResponse(url=url, status_code=302)
