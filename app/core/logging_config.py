"""
Logging configuration.

Console output always, plus a rotating file when ``LOG_FILE`` is set.
"""

import logging
import logging.handlers
from pathlib import Path

from app.core.config import settings


def setup_logging() -> None:
    """Set up logging configuration for the API process."""
    if settings.LOG_FILE:
        log_dir = Path(settings.LOG_FILE).parent
        log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)

    formatter = logging.Formatter(settings.LOG_FORMAT)

    # Avoid stacking handlers when the app is re-imported (uvicorn reload)
    if not any(getattr(h, "_ciclo_handler", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler._ciclo_handler = True
        root_logger.addHandler(console_handler)

        if settings.LOG_FILE:
            file_handler = logging.handlers.RotatingFileHandler(
                settings.LOG_FILE,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            file_handler._ciclo_handler = True
            root_logger.addHandler(file_handler)

    # Third-party noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging configured (level=%s)", settings.LOG_LEVEL)
