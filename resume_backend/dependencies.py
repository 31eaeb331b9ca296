"""Service context shared by the request handlers.

The Azure clients are built once in the application lifespan and stored on
``app.state.context``; handlers receive them through ``get_context``.  Tests
pass a context built from fakes to ``create_app``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from fastapi import Request

from resume_backend.core.config import Settings
from resume_backend.core.constants import SIGNED_URL_TTL
from resume_backend.core.errors import ConfigurationError
from resume_backend.db.cosmos import CandidateStore
from resume_backend.storage.blob import BlobStore


@dataclass(frozen=True)
class ServiceContext:
    blob_store: BlobStore
    candidate_store: CandidateStore
    signed_url_ttl: timedelta = SIGNED_URL_TTL


def build_context(settings: Settings) -> ServiceContext:
    """Construct the Azure adapters from validated settings."""
    settings.require_complete()
    blob_store = BlobStore.from_connection_string(
        settings.storage_connection_string,
        settings.CONTAINER_NAME,
        timeout_seconds=settings.STORAGE_TIMEOUT_SECONDS,
    )
    candidate_store = CandidateStore.from_settings(
        settings.COSMOS_URI,
        settings.COSMOS_KEY,
        settings.DATABASE_NAME,
        settings.CONTAINER_DB,
        timeout_seconds=settings.STORAGE_TIMEOUT_SECONDS,
    )
    return ServiceContext(
        blob_store=blob_store,
        candidate_store=candidate_store,
        signed_url_ttl=timedelta(minutes=settings.SIGNED_URL_TTL_MINUTES),
    )


def get_context(request: Request) -> ServiceContext:
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise ConfigurationError("Service context was not initialized", operation="get_context")
    return context
