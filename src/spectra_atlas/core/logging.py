"""Loguru logging configuration for the CLI tools and the preview server.

Records go to stderr in a readable line format. Records bound with
``json_output=True`` are additionally emitted as JSON, and a ``log_dir``
turns on a rotating log file.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"
LOG_FILE_NAME = "spectra-atlas.log"


def _wants_json(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace all Loguru sinks with the project's sinks.

    Safe to call more than once; each call starts from a clean logger.

    Args:
        log_level: Minimum log level to emit (case-insensitive).
        log_dir: Optional directory for ``spectra-atlas.log``, rotated every
            24 hours and kept for 7 days.
    """
    level = log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)
    logger.add(sys.stderr, level=level, serialize=True, filter=_wants_json)

    if not log_dir:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / LOG_FILE_NAME,
        level=level,
        format=_LOG_FORMAT,
        rotation="24h",
        retention="7 days",
    )
