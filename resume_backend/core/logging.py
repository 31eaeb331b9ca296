"""Log output for the résumé service.

Every line is ``timestamp | level | logger | message``.  Only the message is
rendered, so callers put the fields an operator needs (blob keys, operation
names, candidate ids) into the message as ``key=value`` pairs; ``extra=``
carries the same values for handlers that read record attributes.
"""

import logging
import sys

from resume_backend.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure structured logging for the application.

    Sets the root logger level from ``settings.LOG_LEVEL`` (or *level*) and
    installs a ``StreamHandler`` writing to *stdout* with a structured text
    format.
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicate handlers on repeated calls
    root.handlers.clear()
    root.addHandler(handler)

    # The Azure SDK logs every request/response header at INFO
    logging.getLogger("azure").setLevel(logging.WARNING)
    logging.getLogger("azure.core.pipeline.policies.http_logging_policy").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
