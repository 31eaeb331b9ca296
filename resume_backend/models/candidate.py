"""Pydantic models for the ``candidates`` Cosmos DB container.

Records are stored and returned with camelCase keys (``resumeUrl``,
``blobKey``...).  ``blob_key``, ``original_file_name`` and ``content_type``
are optional because records written before those fields existed lack them.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CandidateRecord(BaseModel):
    """Full candidate record as persisted in the document store."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",  # Cosmos system properties: _rid, _etag, _ts...
    )

    id: str
    name: str
    skills: list[str] = Field(default_factory=list)
    resume_url: str | None = None
    blob_key: str | None = None
    original_file_name: str | None = None
    content_type: str | None = None
    uploaded_at: datetime

    def to_document(self) -> dict:
        """Return the JSON-compatible document written to Cosmos DB."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UploadResponse(BaseModel):
    """Body returned by ``POST /api/upload``."""
    message: str
