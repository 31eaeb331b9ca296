"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events (configuration check
and Azure client construction), error translation and router registration.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from resume_backend.core.config import settings
from resume_backend.core.errors import ResumeBackendError
from resume_backend.core.logging import setup_logging
from resume_backend.dependencies import ServiceContext, build_context
from resume_backend.routers import candidates, health, skills

logger = logging.getLogger(__name__)


def _allowed_origins() -> list[str]:
    raw_origins = settings.ALLOWED_ORIGINS.strip()
    if raw_origins == "*":
        return ["*"]
    return [o.strip() for o in raw_origins.split(",") if o.strip()]


async def handle_service_error(request: Request, exc: ResumeBackendError) -> JSONResponse:
    """Log server-side failures in full; return only the public message."""
    if exc.status_code >= 500:
        logger.error(
            "request_failed operation=%s path=%s error_type=%s error_message=%s details=%s",
            exc.operation,
            request.url.path,
            type(exc).__name__,
            exc.message,
            exc.details,
            extra={
                "operation": exc.operation,
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "error_message": exc.message,
                "details": exc.details,
            },
            exc_info=exc,
        )
    else:
        logger.info(
            "request_rejected operation=%s path=%s status_code=%s error_message=%s",
            exc.operation,
            request.url.path,
            exc.status_code,
            exc.message,
            extra={
                "operation": exc.operation,
                "path": request.url.path,
                "status_code": exc.status_code,
                "error_message": exc.message,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.public_message})


def create_app(context: ServiceContext | None = None) -> FastAPI:
    """Build the application.

    When *context* is omitted the Azure adapters are built from ``settings``
    during startup, which fails if any required setting is missing.
    """

    @asynccontextmanager
    async def lifespan(application: FastAPI) -> AsyncIterator[None]:
        setup_logging()
        logger.info("Application starting up")
        application.state.context = context or build_context(settings)
        yield
        logger.info("Application shutting down")

    application = FastAPI(
        title="Resume Backend API",
        description="Upload résumés to blob storage and search candidates by skill",
        version="0.1.0",
        lifespan=lifespan,
    )

    # -----------------------------------------------------------------------
    # CORS Configuration
    # -----------------------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(ResumeBackendError, handle_service_error)

    # -----------------------------------------------------------------------
    # Router Registration
    # -----------------------------------------------------------------------
    application.include_router(health.router, tags=["Health"])
    application.include_router(candidates.router, prefix="/api", tags=["Candidates"])
    application.include_router(skills.router, prefix="/api", tags=["Skills"])

    return application


app = create_app()
