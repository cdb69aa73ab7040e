"""Logging configuration

Call ``setup_logging()`` once at startup. Noisy third-party loggers get
their own levels so SQL echo can be silenced without hiding app logs.
"""
import logging
import sys
from typing import Optional
from app.infrastructure.config.settings import Settings, settings as default_settings

_CATEGORY_MAP = {
    "LOG_LEVEL_SQL": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ],
    "LOG_LEVEL_UVICORN": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
}


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging levels from application settings"""
    settings = settings or default_settings

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.LOG_LEVEL))

    # uvicorn installs its own handlers; scripts and tests may not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s - %(message)s")
        )
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s, sql=%s, uvicorn=%s",
        settings.LOG_LEVEL,
        settings.LOG_LEVEL_SQL,
        settings.LOG_LEVEL_UVICORN,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name to a logging constant, defaulting to INFO"""
    numeric = getattr(logging, str(raw).upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
