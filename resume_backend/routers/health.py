"""Liveness endpoints.

``GET /`` keeps the plain-text banner load balancers probe; ``GET /health``
returns the same information as JSON.
"""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from resume_backend.core.constants import LIVENESS_MESSAGE

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return LIVENESS_MESSAGE


@router.get("/health")
async def health_check(request: Request) -> dict[str, Any]:
    """Return liveness status and the running version."""
    return {"status": "ok", "version": request.app.version}
