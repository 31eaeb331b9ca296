"""Shared test fixtures.

Provides in-memory fakes for the blob and candidate stores, a
``ServiceContext`` wired to them, and a FastAPI ``TestClient`` built around
that context.
"""

import io
import logging
from collections.abc import Generator
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from resume_backend.core.constants import SIGNED_URL_TTL
from resume_backend.core.errors import ConfigurationError, DependencyError
from resume_backend.core.logging import setup_logging
from resume_backend.dependencies import ServiceContext
from resume_backend.main import create_app
from resume_backend.models.candidate import CandidateRecord

BLOB_BASE_URL = "https://teststorage.blob.core.windows.net/resumes"

# A syntactically valid connection string; building clients from it never
# touches the network.
FAKE_ACCOUNT_KEY = "dGVzdC1hY2NvdW50LWtleS1mb3ItdW5pdC10ZXN0cw=="
FAKE_CONNECTION_STRING = (
    "DefaultEndpointsProtocol=https;"
    "AccountName=teststorage;"
    f"AccountKey={FAKE_ACCOUNT_KEY};"
    "EndpointSuffix=core.windows.net"
)


class FakeBlobStore:
    """Dict-backed stand-in for ``BlobStore``."""

    container_name = "resumes"

    def __init__(self, can_sign: bool = True) -> None:
        self.blobs: dict[str, tuple[bytes, str]] = {}
        self.can_sign = can_sign
        self.fail_put = False
        self.signed: list[tuple[str, timedelta]] = []

    def put(self, key: str, data: bytes, content_type: str) -> str:
        if self.fail_put:
            raise DependencyError("blob down", operation="blob.put")
        self.blobs[key] = (data, content_type)
        return f"{BLOB_BASE_URL}/{key}"

    def sign_read(self, key: str, ttl: timedelta) -> str:
        if not self.can_sign:
            raise ConfigurationError("no key", operation="blob.sign_read")
        self.signed.append((key, ttl))
        return f"{BLOB_BASE_URL}/{key}?sp=r&sig=fake"


class FakeCandidateStore:
    """List-backed stand-in for ``CandidateStore``."""

    def __init__(self) -> None:
        self.records: list[CandidateRecord] = []
        self.fail_create = False
        self.fail_query = False

    def create(self, record: CandidateRecord) -> None:
        if self.fail_create:
            raise DependencyError("cosmos down", operation="cosmos.create")
        self.records.append(record)

    def query_all(self) -> list[CandidateRecord]:
        if self.fail_query:
            raise DependencyError("cosmos down", operation="cosmos.query_all")
        return list(self.records)

    def query_by_skill(self, skill: str) -> list[CandidateRecord]:
        if self.fail_query:
            raise DependencyError("cosmos down", operation="cosmos.query_by_skill")
        return [r for r in self.records if skill in r.skills]

    def get_by_id(self, candidate_id: str) -> CandidateRecord | None:
        return next((r for r in self.records if r.id == candidate_id), None)


def make_record(
    candidate_id: str = "c-1",
    name: str = "Ada Lovelace",
    skills: list[str] | None = None,
    blob_key: str | None = "1700000000000-ada.pdf",
    resume_url: str | None = None,
) -> CandidateRecord:
    """Build a ``CandidateRecord`` with sensible defaults."""
    return CandidateRecord(
        id=candidate_id,
        name=name,
        skills=skills if skills is not None else ["Python", "SQL"],
        resume_url=resume_url if resume_url is not None else f"{BLOB_BASE_URL}/{blob_key}",
        blob_key=blob_key,
        original_file_name="ada.pdf",
        content_type="application/pdf",
        uploaded_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture()
def blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture()
def candidate_store() -> FakeCandidateStore:
    return FakeCandidateStore()


@pytest.fixture()
def context(blob_store: FakeBlobStore, candidate_store: FakeCandidateStore) -> ServiceContext:
    return ServiceContext(
        blob_store=blob_store,  # type: ignore[arg-type]
        candidate_store=candidate_store,  # type: ignore[arg-type]
        signed_url_ttl=SIGNED_URL_TTL,
    )


@pytest.fixture()
def test_client(context: ServiceContext) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by the fake stores."""
    app = create_app(context=context)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture()
def rendered_logs() -> Generator[io.StringIO, None, None]:
    """Capture service log lines exactly as ``setup_logging`` formats them.

    The handler sits on the ``resume_backend`` logger so the app lifespan,
    which resets the root handlers, does not detach it.
    """
    setup_logging()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.getLogger().handlers[0].formatter)
    service_logger = logging.getLogger("resume_backend")
    service_logger.addHandler(handler)
    try:
        yield stream
    finally:
        service_logger.removeHandler(handler)
