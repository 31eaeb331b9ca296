"""Error taxonomy for the upload and query workflows.

Every error raised by the service derives from ``ResumeBackendError``.  The
``status_code`` and ``public_message`` class attributes drive the single
exception handler registered in ``resume_backend.main``; ``message`` and
``details`` are only ever written to the log.
"""

from __future__ import annotations

from typing import Any


class ResumeBackendError(Exception):
    """Base class for all service errors."""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.details = details or {}
        super().__init__(message)


class ValidationError(ResumeBackendError):
    """Missing or malformed required input (e.g. no file attached)."""

    status_code = 400

    @property
    def public_message(self) -> str:  # type: ignore[override]
        # Validation messages describe the caller's own input, so they are safe to return.
        return self.message


class NotFoundError(ResumeBackendError):
    """Referenced candidate does not exist."""

    status_code = 404
    public_message = "Candidate not found"


class ConfigurationError(ResumeBackendError):
    """Required credential or setting is missing."""

    status_code = 500
    public_message = "Service is not configured to serve this request"


class DependencyError(ResumeBackendError):
    """A blob storage or document database call failed or timed out."""

    status_code = 500
    public_message = "Storage service failure"
