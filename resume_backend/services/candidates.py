"""Candidate query workflow: listing and download resolution."""

from __future__ import annotations

import logging

from resume_backend.core.errors import ConfigurationError, NotFoundError
from resume_backend.dependencies import ServiceContext
from resume_backend.models.candidate import CandidateRecord

logger = logging.getLogger(__name__)


def list_candidates(ctx: ServiceContext, skill: str | None = None) -> list[CandidateRecord]:
    """Return every candidate, or only those whose skills contain *skill*.

    Matching is exact and case-sensitive.  Order is whatever the store returns.
    """
    if skill:
        return ctx.candidate_store.query_by_skill(skill)
    return ctx.candidate_store.query_all()


def resolve_download(ctx: ServiceContext, candidate_id: str) -> str:
    """Return the URL the caller should be redirected to for *candidate_id*.

    Prefers a freshly signed read-only URL.  Falls back to the direct URL
    stored at upload time when signing is not possible.
    """
    record = ctx.candidate_store.get_by_id(candidate_id)
    if record is None:
        raise NotFoundError(
            f"Candidate {candidate_id} not found",
            operation="download",
            details={"candidate_id": candidate_id},
        )

    if record.blob_key and ctx.blob_store.can_sign:
        return ctx.blob_store.sign_read(record.blob_key, ctx.signed_url_ttl)

    if record.resume_url:
        logger.warning(
            "download_unsigned_fallback candidate_id=%s has_blob_key=%s",
            candidate_id,
            bool(record.blob_key),
            extra={"candidate_id": candidate_id, "has_blob_key": bool(record.blob_key)},
        )
        return record.resume_url

    raise ConfigurationError(
        "No signing credentials and no stored resume URL",
        operation="download",
        details={"candidate_id": candidate_id},
    )
