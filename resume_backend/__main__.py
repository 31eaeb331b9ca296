"""Run the API with uvicorn after checking the configuration.

``python -m resume_backend`` exits with status 1, naming every missing
setting, before the server binds its port.
"""

import logging
import sys

import uvicorn

from resume_backend.core.config import settings
from resume_backend.core.errors import ConfigurationError
from resume_backend.core.logging import setup_logging

logger = logging.getLogger("resume_backend")


def main() -> int:
    setup_logging()
    try:
        settings.require_complete()
    except ConfigurationError as exc:
        logger.critical(exc.message)
        logger.critical(
            "Application will exit. Set the missing variables in the environment "
            "or provide a .env for local development."
        )
        return 1

    uvicorn.run(
        "resume_backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
