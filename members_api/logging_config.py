"""
logging_config.py — Logging setup for the Members API

Loguru is the only logging backend. Records from the stdlib logging
module (uvicorn, SQLAlchemy, alembic) are forwarded into Loguru so the
whole process writes one stream in one format.

Business Rules:
- Level and output mode come from Settings (LOG_LEVEL, APP_ENV or .env)
- Production writes JSON lines; the request_id bound by the request
  middleware ends up in each record's "extra"
- Development writes colorized single lines
- uvicorn.access is silenced below WARNING; the request middleware
  already logs one line per request

Called by: members_api/main.py (create_app)
Depends on: members_api/config.py
"""

import logging
import sys

from loguru import logger

from .config import Settings, settings

DEV_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "{message}"
)

QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "alembic.runtime.migration")


def setup_logging(config: Settings | None = None) -> None:
    """Point Loguru at stdout and route stdlib logging through it.

    Replaces any handlers added by an earlier call.
    """
    config = config or settings
    level = config.log_level.upper()

    logger.remove()
    if config.is_production:
        logger.add(sys.stdout, level=level, format="{message}", serialize=True)
    else:
        logger.add(sys.stdout, level=level, format=DEV_FORMAT, colorize=True)

    logging.basicConfig(handlers=[_LoguruBridge()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info("Logging configured level={} production={}", level, config.is_production)


class _LoguruBridge(logging.Handler):
    """Forward stdlib LogRecords to Loguru, keeping the original caller."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())
