"""Logging setup for go links.

Every module logs through a child of the ``golinks`` logger (for example
``golinks.storage.json_file`` or ``golinks.web``), so one call to
``setup_logging`` at startup routes the whole service to stdout and,
optionally, a log file.

Plain lines look like::

    2026-01-01 12:00:00 [INFO] golinks - Saved link: gh -> https://github.com

JSON lines (``LOG_JSON=true``) carry one object per record::

    {"timestamp": "2026-01-01T12:00:00.000Z", "level": "INFO", "logger": "golinks", "message": "..."}
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Messages can hold user input (shortcuts, URLs), so the line is built with
    ``json.dumps`` rather than string interpolation.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )

        entry = {
            "timestamp": timestamp,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


def _build_handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``golinks`` logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to INFO
        log_file: Also append to this file when given
        json_format: Emit one JSON object per line instead of plain text

    Returns:
        The ``golinks`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("golinks")
    logger.setLevel(numeric_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT)

    logger.addHandler(_build_handler(logging.StreamHandler(sys.stdout), numeric_level, formatter))
    if log_file:
        logger.addHandler(_build_handler(logging.FileHandler(log_file), numeric_level, formatter))

    return logger


def get_logger(name: str = "golinks") -> logging.Logger:
    """Return a logger; pass a ``golinks.*`` name to inherit the handlers."""
    return logging.getLogger(name)
